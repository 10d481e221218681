"""Accessor variants produced by member resolution."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Union

from .exceptions import qualified_name


@dataclass(frozen=True)
class MethodAccessor:
    """Zero-argument routine answering a property."""

    owner: type
    name: str
    member: Any = field(compare=False, repr=False)

    kind = "method"

    def read(self, model: Any) -> Any:
        # Dispatch through the instance so substituted owners still reach the override.
        return getattr(model, self.name)()

    def describe(self) -> str:
        return f"{self.kind} {qualified_name(self.owner)}.{self.name}"


@dataclass(frozen=True)
class FieldAccessor:
    """Public readable slot answering a property."""

    owner: type
    name: str
    member: Any = field(default=None, compare=False, repr=False)

    kind = "field"

    def read(self, model: Any) -> Any:
        return getattr(model, self.name)

    def describe(self) -> str:
        return f"{self.kind} {qualified_name(self.owner)}.{self.name}"


class NotFound:
    """Marker stored for names a type cannot answer."""

    _instance: "NotFound | None" = None
    kind = "not-found"

    def __new__(cls) -> "NotFound":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "NOT_FOUND"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> str:
        return "NOT_FOUND"

    def describe(self) -> str:
        return "not found"


NOT_FOUND = NotFound()

Accessor = Union[MethodAccessor, FieldAccessor, NotFound]


def is_found(accessor: Accessor) -> bool:
    return accessor is not NOT_FOUND
