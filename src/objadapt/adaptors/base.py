"""Model adaptor interface consumed by template interpreters."""
from __future__ import annotations

from typing import Any, Optional


class ModelAdaptor:
    """Reads named properties off model objects for a template interpreter."""

    def get_property(self, model: Any, prop: Any, property_name: Optional[str]) -> Any:  # pragma: no cover - interface
        raise NotImplementedError
