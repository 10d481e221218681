"""objadapt package initialization."""
from __future__ import annotations

from .adaptors import ModelAdaptor, ObjectModelAdaptor, get_property
from .core import (
    NOT_FOUND,
    InvalidUsageError,
    MapEntry,
    NoSuchPropertyError,
    ObjAdaptError,
    ResolutionCache,
    clear_cache,
    entries,
    resolution_cache,
    resolve_member,
)
from .version import __version__

__all__ = [
    "__version__",
    "NOT_FOUND",
    "InvalidUsageError",
    "MapEntry",
    "ModelAdaptor",
    "NoSuchPropertyError",
    "ObjAdaptError",
    "ObjectModelAdaptor",
    "ResolutionCache",
    "clear_cache",
    "entries",
    "get_property",
    "resolution_cache",
    "resolve_member",
]
