"""A command description assembled through its generated builder."""

from __future__ import annotations

from typing import Optional

from fieldbuilder.builder import builder, each

__all__ = ["Command", "main"]


@builder
class Command:
    """An executable with its arguments, environment and working directory."""

    executable: str
    args: list[str] = each("arg")
    env: list[str] = each("env")
    current_dir: Optional[str] = None


def main(argv=None):
    """Build the sample command and check its contents; return an exit code."""
    command = (
        Command.builder()
        .executable("cargo")
        .arg("build")
        .arg("--release")
        .build()
    )
    if command.executable != "cargo" or command.args != ["build", "--release"]:
        raise RuntimeError(f"unexpected command: {command!r}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())