"""Core resolution types exposed at the package level."""
from .accessors import NOT_FOUND, Accessor, FieldAccessor, MethodAccessor, NotFound, is_found
from .cache import CacheStats, ResolutionCache, clear_cache, resolution_cache
from .entries import MapEntry, entries, is_private_entry_type
from .exceptions import InvalidUsageError, NoSuchPropertyError, ObjAdaptError
from .resolver import resolve_member

__all__ = [
    "NOT_FOUND",
    "Accessor",
    "CacheStats",
    "FieldAccessor",
    "InvalidUsageError",
    "MapEntry",
    "MethodAccessor",
    "NoSuchPropertyError",
    "NotFound",
    "ObjAdaptError",
    "ResolutionCache",
    "clear_cache",
    "entries",
    "is_found",
    "is_private_entry_type",
    "resolution_cache",
    "resolve_member",
]
