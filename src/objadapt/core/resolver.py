"""Naming-convention member resolution for model types.

A property ``name`` requested on a type is answered, in order, by the first
of: a zero-argument ``get<Name>`` routine, ``is<Name>``, ``has<Name>``, or a
public field literally called ``name``. Pair types produced by
:func:`objadapt.core.entries.entries` are looked up through
:class:`~objadapt.core.entries.MapEntry`.
"""
from __future__ import annotations

import inspect
import logging
from typing import Any, Optional

from .accessors import NOT_FOUND, Accessor, FieldAccessor, MethodAccessor
from .entries import MapEntry, is_private_entry_type
from .exceptions import InvalidUsageError

logger = logging.getLogger(__name__)

METHOD_PREFIXES = ("get", "is", "has")

_MISSING = object()
_OPTIONAL_KINDS = (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD)


def resolve_member(cls: type, name: str) -> Accessor:
    """Return the accessor answering ``name`` on ``cls``, or ``NOT_FOUND``."""

    if cls is None:
        raise InvalidUsageError("cls must not be None")
    if name is None:
        raise InvalidUsageError("name must not be None")
    if not isinstance(name, str) or not name:
        raise InvalidUsageError(f"property name must be a non-empty string, got {name!r}")

    suffix = capitalize(name)
    accessor: Optional[Accessor] = None
    for prefix in METHOD_PREFIXES:
        accessor = try_get_method(cls, prefix + suffix)
        if accessor is not None:
            break
    if accessor is None:
        accessor = try_get_field(cls, name)
    if accessor is None:
        accessor = NOT_FOUND
    logger.debug("Resolved %s.%s -> %s", cls.__qualname__, name, accessor.describe())
    return accessor


def capitalize(name: str) -> str:
    return name[0].upper() + name[1:]


def try_get_method(cls: type, method_name: str) -> Optional[MethodAccessor]:
    if is_private_entry_type(cls):
        cls = MapEntry
    member = inspect.getattr_static(cls, method_name, _MISSING)
    if member is _MISSING or not _is_routine(member):
        return None
    if not _accepts_no_arguments(member):
        return None
    return MethodAccessor(owner=cls, name=method_name, member=member)


def try_get_field(cls: type, field_name: str) -> Optional[FieldAccessor]:
    if field_name.startswith("_"):
        return None
    member = inspect.getattr_static(cls, field_name, _MISSING)
    if member is not _MISSING:
        if _is_routine(member):
            return None
        return FieldAccessor(owner=cls, name=field_name, member=member)
    if _declares_annotation(cls, field_name):
        return FieldAccessor(owner=cls, name=field_name)
    return None


def _is_routine(member: Any) -> bool:
    if isinstance(member, (staticmethod, classmethod)):
        return inspect.isroutine(member.__func__)
    return inspect.isroutine(member)


def _accepts_no_arguments(member: Any) -> bool:
    if isinstance(member, staticmethod):
        target, bound = member.__func__, 0
    elif isinstance(member, classmethod):
        target, bound = member.__func__, 1
    else:
        target, bound = member, 1
    try:
        signature = inspect.signature(target)
    except (TypeError, ValueError):
        return False
    remaining = list(signature.parameters.values())[bound:]
    return all(param.default is not param.empty or param.kind in _OPTIONAL_KINDS for param in remaining)


def _declares_annotation(cls: type, field_name: str) -> bool:
    for klass in getattr(cls, "__mro__", (cls,)):
        try:
            annotations = inspect.get_annotations(klass)
        except (TypeError, NameError):
            continue
        if field_name in annotations:
            return True
    return False
