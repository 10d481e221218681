"""Key/value pair shape yielded when iterating map-like models."""
from __future__ import annotations

import abc
from typing import Any, Iterator, Mapping


class MapEntry(abc.ABC):
    """Public pair interface exposed to templates as ``key`` and ``value``."""

    @abc.abstractmethod
    def getKey(self) -> Any:  # noqa: N802 - template naming convention
        raise NotImplementedError

    @abc.abstractmethod
    def getValue(self) -> Any:  # noqa: N802
        raise NotImplementedError


class _KeyValueHolder(MapEntry):
    __slots__ = ("_key", "_value")

    def __init__(self, key: Any, value: Any) -> None:
        self._key = key
        self._value = value

    def getKey(self) -> Any:  # noqa: N802
        return self._key

    def getValue(self) -> Any:  # noqa: N802
        return self._value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MapEntry):
            return NotImplemented
        return self._key == other.getKey() and self._value == other.getValue()

    def __hash__(self) -> int:
        return hash((self._key, self._value))

    def __repr__(self) -> str:
        return f"{self._key!r}={self._value!r}"


def entries(mapping: Mapping[Any, Any]) -> Iterator[MapEntry]:
    """Iterate ``mapping`` as pair objects, in the mapping's own order.

    Interpreters must iterate mappings through this helper: the plain tuples
    from ``dict.items()`` have no ``key``/``value`` accessors.
    """

    for key, value in mapping.items():
        yield _KeyValueHolder(key, value)


def is_private_entry_type(cls: type) -> bool:
    """Return True for pair types that must be looked up through ``MapEntry``.

    That is any implementation whose name is private, or which only claims
    the interface through ``MapEntry.register``.
    """

    if cls is MapEntry or not isinstance(cls, type):
        return False
    if not issubclass(cls, MapEntry):
        return False
    return cls.__name__.startswith("_") or MapEntry not in cls.__mro__
