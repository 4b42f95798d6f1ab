"""Build the ``paths`` section: CRUD operations for every entity set.

For an entity set Products of type Product keyed on an Edm.Int32 ``id``:

  GET    /Products        -> getProducts
  POST   /Products        -> createProduct
  GET    /Products({id})  -> getProduct
  DELETE /Products({id})  -> deleteProduct
  PATCH  /Products({id})  -> updateProduct

Non-numeric key segments are quoted: /Codes('{code}').
The instance path is only emitted when the entity type has a key.
"""

from __future__ import annotations

from typing import Any, Iterable

from .definitions import ERROR_DEFINITION
from .model import EntityProperty, EntitySet
from .primitives import NUMERIC_KEY_TYPES


def _ref(entity_set: EntitySet) -> dict[str, str]:
    return {"$ref": f"#/definitions/{entity_set.qualified_type}"}


def default_response() -> dict[str, Any]:
    """Return the error response used for every non-success status.

    A new dict per call; operations never share one.
    """
    return {
        "description": "Unexpected error",
        "schema": {"$ref": f"#/definitions/{ERROR_DEFINITION}"},
    }


def _empty_response() -> dict[str, str]:
    return {"description": "Empty response."}


def _body_parameter(entity_set: EntitySet) -> dict[str, Any]:
    return {
        "name": entity_set.entity_type.name,
        "in": "body",
        "required": True,
        "schema": _ref(entity_set),
    }


def _key_parameters(entity_set: EntitySet) -> list[dict[str, Any]]:
    return [
        {"name": prop.name, "required": True, "in": "path"}
        for prop in entity_set.entity_type.key
    ]


def key_segment(prop: EntityProperty) -> str:
    """Render one key placeholder: bare for numeric types, quoted otherwise."""
    if prop.type in NUMERIC_KEY_TYPES:
        return f"{{{prop.name}}}"
    return f"'{{{prop.name}}}'"


def instance_path(entity_set: EntitySet) -> str:
    """Return e.g. "/Orders({id},'{code}')" following key order."""
    segments = [key_segment(prop) for prop in entity_set.entity_type.key]
    return f"/{entity_set.name}({','.join(segments)})"


# ---------------------------------------------------------------------------
# Collection operations
# ---------------------------------------------------------------------------

def _list_operation(entity_set: EntitySet) -> dict[str, Any]:
    return {
        "operationId": f"get{entity_set.name}",
        "responses": {
            "200": {
                "description": f"List of {entity_set.entity_type.name}",
                "schema": {"type": "array", "items": _ref(entity_set)},
            },
            "default": default_response(),
        },
    }


def _create_operation(entity_set: EntitySet) -> dict[str, Any]:
    return {
        "operationId": f"create{entity_set.entity_type.name}",
        "parameters": [_body_parameter(entity_set)],
        "responses": {
            "204": _empty_response(),
            "default": default_response(),
        },
    }


# ---------------------------------------------------------------------------
# Instance operations
# ---------------------------------------------------------------------------

def _get_operation(entity_set: EntitySet) -> dict[str, Any]:
    type_name = entity_set.entity_type.name
    return {
        "operationId": f"get{type_name}",
        "parameters": _key_parameters(entity_set),
        "responses": {
            "200": {
                "description": f"A {type_name}.",
                "schema": _ref(entity_set),
            },
            "default": default_response(),
        },
    }


def _delete_operation(entity_set: EntitySet) -> dict[str, Any]:
    return {
        "operationId": f"delete{entity_set.entity_type.name}",
        "parameters": _key_parameters(entity_set),
        "responses": {
            "204": _empty_response(),
            "default": default_response(),
        },
    }


def _update_operation(entity_set: EntitySet) -> dict[str, Any]:
    # Key parameters first, body last
    parameters = _key_parameters(entity_set)
    parameters.append(_body_parameter(entity_set))
    return {
        "operationId": f"update{entity_set.entity_type.name}",
        "parameters": parameters,
        "responses": {
            "204": _empty_response(),
            "default": default_response(),
        },
    }


def collection_path_item(entity_set: EntitySet) -> dict[str, Any]:
    return {
        "get": _list_operation(entity_set),
        "post": _create_operation(entity_set),
    }


def instance_path_item(entity_set: EntitySet) -> dict[str, Any]:
    return {
        "get": _get_operation(entity_set),
        "delete": _delete_operation(entity_set),
        "patch": _update_operation(entity_set),
    }


def build_paths(entity_sets: Iterable[EntitySet]) -> dict[str, Any]:
    """Build the path map, in entity-set order."""
    paths: dict[str, Any] = {}
    for entity_set in entity_sets:
        paths[f"/{entity_set.name}"] = collection_path_item(entity_set)
        if entity_set.entity_type.key:
            paths[instance_path(entity_set)] = instance_path_item(entity_set)
    return paths
