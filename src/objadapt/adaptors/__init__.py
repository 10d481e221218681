"""Model adaptor exports."""
from .base import ModelAdaptor
from .object_adaptor import ObjectModelAdaptor, default_adaptor, get_property

__all__ = [
    "ModelAdaptor",
    "ObjectModelAdaptor",
    "default_adaptor",
    "get_property",
]
