# fieldbuilder

`fieldbuilder` turns a class with annotated fields into one that comes with a
fluent builder. Decorate the class with `builder`, then call `builder()` on it
to get a `<Name>Builder` (a subclass of `Builder`) with one setter per field.
Setters return the builder, so calls chain, and `build()` produces the
finished object.

## Installing

```
pip install fieldbuilder
```

For running the test suite:

```
pip install "fieldbuilder[test]"
```

## Using it

```python
from fieldbuilder.builder import BuilderError, builder


@builder
class Command:
    executable: str
    args: list[str]
    env: list[str]
    current_dir: str | None


command = (
    Command.builder()
    .executable("cargo")
    .args(["build", "--release"])
    .env([])
    .build()
)

assert command.executable == "cargo"
assert command.current_dir is None
```

A decorated class that is not yet a dataclass is made into one; an existing
dataclass is used as it is. Only fields that take part in `__init__` get
setters. Decorating something that is not a class, or an enum, raises
`BuilderError`. Builders are obtained through `cls.builder()`; creating a
`Builder` directly raises `TypeError`.

### Required and optional fields

Every field must be set before `build()` is called, except those whose type
is an optional one (`Optional[T]` or `T | None`, also when annotations are
strings). A field that was never set makes `build()` raise `BuilderError`
with the message `missing field: <name>`. Optional fields that were never set
come out as `None`.

The helpers `option_argument(tp)` and `generic_argument(tp, container)` report
the inner type of an optional type or of a one-parameter container such as
`list[str]`, and return `None` when the type does not have that shape.

### Adding one item at a time

A list field can be declared with `each(name)`:

```python
from typing import Optional

from fieldbuilder.builder import builder, each


@builder
class Command:
    executable: str
    args: list[str] = each("arg")
    current_dir: Optional[str] = None


command = Command.builder().executable("cargo").arg("build").arg("--release").build()
assert command.args == ["build", "--release"]
```

The builder then gets a setter called `name` that appends a single item to
that list; such a field starts out empty and is never missing. If `name`
differs from the field's own name, the setter that replaces the whole list
is kept as well. `BuilderError` is raised when the class is decorated if the
field's builder options hold any key other than `each`, if the name is not a
valid identifier, if the field is not annotated as a list, or if a setter
name clashes with a method of `Builder` such as `build`.

### Ready-made example

`fieldbuilder.command.Command` is a decorated class with an `executable`,
one-at-a-time `args` (setter `arg`) and `env` (setter `env`), and an optional
`current_dir`.

## Demo command

The package ships a small demonstration that builds a `Command` with
one-at-a-time arguments, checks the result and exits with status 0 (it
raises an error if the result is not as expected; it prints nothing):

```
fieldbuilder-demo
```