"""Resource accessor groups."""
from __future__ import annotations

from .base import HttpClientProto, Resource
from .categories import CategoryResource
from .hardware import HardwareResource
from .locations import LocationResource

__all__ = [
    "CategoryResource",
    "HardwareResource",
    "HttpClientProto",
    "LocationResource",
    "Resource",
]
