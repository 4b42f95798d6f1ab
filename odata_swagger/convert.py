"""Assemble the Swagger 2.0 document for a list of entity sets."""

from __future__ import annotations

from typing import Any, Sequence

from .definitions import build_definitions
from .model import EntitySet, Options
from .paths import build_paths

SWAGGER_VERSION = "2.0"
INFO = {"title": "OData Service", "version": "0.0.1"}
PRODUCES = ["application/json"]


def convert(entity_sets: Sequence[EntitySet], options: Options) -> dict[str, Any]:
    """Build the full document.

    ``options.host`` and ``options.base_path`` are copied as-is; a ``None``
    value leaves the key out. Calling twice with equal input yields equal
    documents.
    """
    document: dict[str, Any] = {"swagger": SWAGGER_VERSION}
    if options.host is not None:
        document["host"] = options.host
    document["produces"] = list(PRODUCES)
    if options.base_path is not None:
        document["basePath"] = options.base_path
    document["info"] = dict(INFO)
    document["paths"] = build_paths(entity_sets)
    document["definitions"] = build_definitions(entity_sets)
    return document
