"""Generate Swagger 2.0 documents from OData service metadata."""

from __future__ import annotations

from .convert import convert
from .model import EntityProperty, EntitySet, EntityType, Options

__all__ = [
    "convert",
    "EntityProperty",
    "EntitySet",
    "EntityType",
    "Options",
]
