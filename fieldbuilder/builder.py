"""Generate chainable builder classes for annotated classes."""

from __future__ import annotations

import dataclasses
import enum
import re
import types
import typing
from collections.abc import Mapping
from typing import Any, Callable, ClassVar

__all__ = [
    "Builder",
    "BuilderError",
    "builder",
    "each",
    "generic_argument",
    "option_argument",
]

_METADATA_KEY = "builder"
_ATTRIBUTE_HINT = 'expected `builder(each = "...")`'
_MISSING = object()

_OPTIONAL_TEXT = re.compile(r"(?:typing\.)?Optional\[(?P<inner>.+)\]")
_LIST_TEXT = re.compile(r"(?:typing\.)?(?:list|List)\[(?P<inner>[^,\[\]]+(?:\[.*\])?)\]")


class BuilderError(Exception):
    """Raised when a builder cannot be generated or cannot build its target."""


class _Kind(enum.Enum):
    REQUIRED = "required"
    OPTIONAL = "optional"
    REPEATED = "repeated"


@dataclasses.dataclass(frozen=True)
class _FieldSpec:
    name: str
    kind: _Kind
    item_setter: str | None = None


def each(name):
    """Declare a list field that also gets a setter adding one item at a time."""
    return dataclasses.field(
        default_factory=list,
        kw_only=True,
        metadata={_METADATA_KEY: {"each": name}},
    )


def generic_argument(tp, container):
    """Return the single type argument of ``tp`` if it is ``container[X]``."""
    origin = typing.get_origin(tp)
    if origin is None:
        return None
    expected = typing.get_origin(container) or container
    if origin is not expected:
        return None
    args = typing.get_args(tp)
    if len(args) != 1:
        return None
    (argument,) = args
    if argument is Ellipsis or isinstance(argument, (int, str, bytes, list)):
        return None
    return argument


def option_argument(tp):
    """Return ``X`` when ``tp`` is ``Optional[X]`` or ``X | None``."""
    origin = typing.get_origin(tp)
    if origin is not typing.Union and origin is not types.UnionType:
        return None
    args = typing.get_args(tp)
    present = [arg for arg in args if arg is not type(None)]
    if len(args) != 2 or len(present) != 1:
        return None
    return present[0]


def _is_optional_text(text: str) -> bool:
    text = text.strip()
    if _OPTIONAL_TEXT.fullmatch(text):
        return True
    parts = [part.strip() for part in text.split("|")]
    return len(parts) == 2 and parts.count("None") == 1


def _is_list_text(text: str) -> bool:
    return _LIST_TEXT.fullmatch(text.strip()) is not None


def _is_optional(annotation: Any) -> bool:
    if isinstance(annotation, str):
        return _is_optional_text(annotation)
    return option_argument(annotation) is not None


def _is_list(annotation: Any) -> bool:
    if isinstance(annotation, str):
        return _is_list_text(annotation)
    return generic_argument(annotation, list) is not None


class Builder:
    """Base of the generated builders; collects values and builds the target."""

    _target: ClassVar[type | None] = None
    _specs: ClassVar[tuple[_FieldSpec, ...]] = ()

    def __init__(self):
        if self._target is None:
            raise TypeError("builders are obtained from a @builder class")
        self._values: dict[str, Any] = {
            spec.name: [] if spec.kind is _Kind.REPEATED else _MISSING
            for spec in self._specs
        }

    def build(self):
        """Create the target from the collected values."""
        kwargs: dict[str, Any] = {}
        for spec in self._specs:
            value = self._values[spec.name]
            if spec.kind is _Kind.REPEATED:
                kwargs[spec.name] = list(value)
            elif spec.kind is _Kind.OPTIONAL:
                kwargs[spec.name] = None if value is _MISSING else value
            elif value is _MISSING:
                raise BuilderError(f"missing field: {spec.name}")
            else:
                kwargs[spec.name] = value
        return self._target(**kwargs)

    def __repr__(self):
        shown = ", ".join(
            f"{name}={value!r}"
            for name, value in self._values.items()
            if value is not _MISSING
        )
        return f"{type(self).__name__}({shown})"


def _each_name(field: dataclasses.Field) -> str | None:
    options = field.metadata.get(_METADATA_KEY)
    if options is None:
        return None
    if not isinstance(options, Mapping) or set(options) != {"each"}:
        raise BuilderError(f"field {field.name!r}: {_ATTRIBUTE_HINT}")
    name = options["each"]
    if not isinstance(name, str) or not name.isidentifier():
        raise BuilderError(f"field {field.name!r}: {_ATTRIBUTE_HINT}")
    return name


def _value_setter(name: str, convert: Callable[[Any], Any] | None = None):
    def setter(self, value):
        self._values[name] = convert(value) if convert else value
        return self

    setter.__name__ = name
    setter.__doc__ = f"Set ``{name}``."
    return setter


def _item_setter(field_name: str, method_name: str):
    def setter(self, item):
        self._values[field_name].append(item)
        return self

    setter.__name__ = method_name
    setter.__doc__ = f"Append one item to ``{field_name}``."
    return setter


def _field_spec(field: dataclasses.Field) -> _FieldSpec:
    annotation = field.type
    item_name = _each_name(field)
    if item_name is not None:
        if not _is_list(annotation):
            raise BuilderError(
                f"field {field.name!r}: each attribute must be specified with a list field"
            )
        return _FieldSpec(field.name, _Kind.REPEATED, item_name)
    if _is_optional(annotation):
        return _FieldSpec(field.name, _Kind.OPTIONAL)
    return _FieldSpec(field.name, _Kind.REQUIRED)


def builder(cls):
    """Class decorator adding ``cls.builder()`` that returns a ``<Name>Builder``."""
    if not isinstance(cls, type) or issubclass(cls, enum.Enum):
        raise BuilderError("builder must decorate a class with fields")
    if not dataclasses.is_dataclass(cls):
        cls = dataclasses.dataclass(cls)

    specs = tuple(
        _field_spec(field) for field in dataclasses.fields(cls) if field.init
    )

    namespace: dict[str, Any] = {"_target": cls, "_specs": specs}
    for spec in specs:
        if spec.kind is _Kind.REPEATED:
            namespace[spec.item_setter] = _item_setter(spec.name, spec.item_setter)
            if spec.item_setter != spec.name:
                namespace[spec.name] = _value_setter(spec.name, list)
        else:
            namespace[spec.name] = _value_setter(spec.name)

    reserved = set(vars(Builder)) | {"_values"}
    clashes = sorted(
        name
        for name in namespace
        if name in reserved and name not in ("_target", "_specs")
    )
    if clashes:
        raise BuilderError(f"setter names clash with builder methods: {', '.join(clashes)}")

    builder_cls = type(f"{cls.__name__}Builder", (Builder,), namespace)
    builder_cls.__module__ = cls.__module__
    builder_cls.__qualname__ = f"{cls.__qualname__}Builder"

    def make_builder():
        return builder_cls()

    make_builder.__name__ = "builder"
    make_builder.__doc__ = f"Return a new {builder_cls.__name__}."
    cls.builder = staticmethod(make_builder)
    return cls