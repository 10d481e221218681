"""Reflective adaptor for arbitrary Python objects."""
from __future__ import annotations

import logging
from typing import Any, Optional

from objadapt.core import NOT_FOUND, Accessor, InvalidUsageError, NoSuchPropertyError, ResolutionCache, resolution_cache
from objadapt.core.exceptions import qualified_name

from .base import ModelAdaptor

logger = logging.getLogger(__name__)

_ABSENT = object()


class ObjectModelAdaptor(ModelAdaptor):
    """Answers properties through getters or public fields of the model's type.

    Resolution decisions are memoized in ``cache`` (the process-wide cache by
    default), so the type is only inspected once per property name. Names the
    type does not declare fall back to the model's own public instance
    attributes, which are read per instance and never cached.
    """

    def __init__(self, cache: Optional[ResolutionCache] = None) -> None:
        self._cache = cache if cache is not None else resolution_cache

    @property
    def cache(self) -> ResolutionCache:
        return self._cache

    def get_property(self, model: Any, prop: Any, property_name: Optional[str]) -> Any:
        if model is None:
            raise InvalidUsageError("model must not be None")
        cls = type(model)
        if prop is None:
            raise NoSuchPropertyError(cls, property_name)
        accessor = self.resolve(cls, property_name)
        if accessor is NOT_FOUND:
            value = instance_field(model, property_name)
            if value is _ABSENT:
                raise NoSuchPropertyError(cls, property_name)
            return value
        try:
            return accessor.read(model)
        except Exception as exc:
            logger.debug("Accessor %s raised %r", accessor.describe(), exc)
            raise NoSuchPropertyError(cls, property_name, cause=exc) from exc

    def resolve(self, cls: type, property_name: Optional[str]) -> Accessor:
        return self._cache.lookup_or_resolve(cls, property_name)

    def describe(self, model: Any, property_name: str) -> str:
        """Say how ``property_name`` would be read off ``model``."""

        accessor = self.resolve(type(model), property_name)
        if accessor is NOT_FOUND and instance_field(model, property_name) is not _ABSENT:
            return f"instance field {qualified_name(type(model))}.{property_name}"
        return accessor.describe()


def instance_field(model: Any, name: str) -> Any:
    """Return the public attribute ``name`` from the model's ``__dict__``, or ``_ABSENT``."""

    if name.startswith("_"):
        return _ABSENT
    attributes = getattr(model, "__dict__", None)
    if not isinstance(attributes, dict):
        return _ABSENT
    return attributes.get(name, _ABSENT)


default_adaptor = ObjectModelAdaptor()


def get_property(model: Any, prop: Any, property_name: Optional[str]) -> Any:
    """Read ``property_name`` off ``model`` with the default adaptor."""

    return default_adaptor.get_property(model, prop, property_name)
