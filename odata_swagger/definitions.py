"""Build the ``definitions`` section: the Error envelope plus one schema per entity type."""

from __future__ import annotations

from typing import Any, Iterable

from .model import EntitySet, EntityType
from .primitives import map_type

ERROR_DEFINITION = "Error"


def error_schema() -> dict[str, Any]:
    """Return the shared error envelope schema."""
    return {
        "type": "object",
        "properties": {
            "error": {
                "type": "object",
                "properties": {
                    "code": {"type": "string"},
                    "message": {"type": "string"},
                },
            },
        },
    }


def entity_schema(entity_type: EntityType) -> dict[str, Any]:
    """Return an object schema with one property per declared entity property."""
    properties: dict[str, Any] = {}
    for prop in entity_type.properties:
        properties[prop.name] = map_type(prop.type)
    return {"type": "object", "properties": properties}


def build_definitions(entity_sets: Iterable[EntitySet]) -> dict[str, Any]:
    definitions: dict[str, Any] = {ERROR_DEFINITION: error_schema()}
    for entity_set in entity_sets:
        definitions[entity_set.qualified_type] = entity_schema(entity_set.entity_type)
    return definitions
