"""Error types raised by property resolution."""
from __future__ import annotations

from typing import Optional


class ObjAdaptError(Exception):
    """Base class for objadapt errors."""


class InvalidUsageError(ObjAdaptError, TypeError):
    """Raised when a caller breaks the resolution contract (e.g. passes ``None``)."""


class NoSuchPropertyError(ObjAdaptError, AttributeError):
    """Raised when a property cannot be read off a model.

    Covers three cases: the property token was already absent, the name
    resolves to no accessor, or the accessor raised when invoked. Only the
    last one carries a ``cause``.
    """

    def __init__(self, owner: type, property_name: Optional[str], cause: Optional[BaseException] = None) -> None:
        self.type_name = qualified_name(owner)
        self.property_name = property_name
        self.cause = cause
        super().__init__(f"no such property: {self.type_name}.{property_name}")


def qualified_name(cls: type) -> str:
    module = getattr(cls, "__module__", None)
    name = getattr(cls, "__qualname__", None) or getattr(cls, "__name__", repr(cls))
    if not module or module == "builtins":
        return name
    return f"{module}.{name}"
