"""Fluent builder classes generated from annotated class fields, with a sample command class."""

__version__ = "0.1.0"
__all__ = ["builder", "command"]