"""Load and parse OData service metadata.

Reads a CSDL document ($metadata, EDMX wrapped) from disk or from a live
service and turns its entity containers into EntitySet records.

Works for OData v2, v3 and v4: element namespaces differ between versions,
so elements are matched on their local names only.
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from pathlib import Path

import httpx

from .errors import MetadataError
from .model import EntityProperty, EntitySet, EntityType

logger = logging.getLogger(__name__)

METADATA_SEGMENT = "$metadata"
DEFAULT_TIMEOUT = 30.0


def _is_url(source: str) -> bool:
    return source.startswith(("http://", "https://"))


def metadata_url(service_url: str) -> str:
    """Return the $metadata URL for a service root (or the URL itself).

    The query string is kept: https://svc/odata/?sap-client=100 ->
    https://svc/odata/$metadata?sap-client=100
    """
    url = httpx.URL(service_url)
    path = url.path.rstrip("/")
    if path.endswith(METADATA_SEGMENT):
        return str(url)
    return str(url.copy_with(path=f"{path}/{METADATA_SEGMENT}"))


def fetch_metadata(url: str, client: httpx.Client | None = None) -> bytes:
    """GET the metadata document from a running service.

    Returns the raw body so the XML declaration decides the encoding.
    """
    url = metadata_url(url)
    logger.debug("Fetching metadata from %s", url)
    headers = {"Accept": "application/xml"}
    if client is not None:
        resp = client.get(url, headers=headers)
    else:
        with httpx.Client(follow_redirects=True, timeout=DEFAULT_TIMEOUT) as owned:
            resp = owned.get(url, headers=headers)
    resp.raise_for_status()
    return resp.content


def load_metadata(source: str | Path, client: httpx.Client | None = None) -> bytes:
    """Return the raw metadata XML from a file path or a service URL."""
    if isinstance(source, str) and _is_url(source):
        return fetch_metadata(source, client)
    logger.debug("Reading metadata from %s", source)
    try:
        return Path(source).read_bytes()
    except OSError as e:
        raise MetadataError(f"Cannot read metadata from {source}: {e}") from e


def _local(tag: str) -> str:
    """Strip the '{namespace}' prefix from an element tag."""
    return tag.rsplit("}", 1)[-1]


def _children(element: ET.Element, name: str) -> list[ET.Element]:
    return [child for child in element if _local(child.tag) == name]


def _descendants(element: ET.Element, name: str) -> list[ET.Element]:
    return [node for node in element.iter() if _local(node.tag) == name]


def _parse_entity_type(element: ET.Element) -> EntityType:
    type_name = element.get("Name", "")
    properties = tuple(
        EntityProperty(name=prop.get("Name", ""), type=prop.get("Type", ""))
        for prop in _children(element, "Property")
    )
    by_name = {prop.name: prop for prop in properties}

    key: list[EntityProperty] = []
    for key_element in _children(element, "Key"):
        for ref in _children(key_element, "PropertyRef"):
            ref_name = ref.get("Name", "")
            if ref_name not in by_name:
                logger.warning(
                    "Key property %r is not declared on %s, skipping", ref_name, type_name,
                )
                continue
            key.append(by_name[ref_name])

    return EntityType(name=type_name, properties=properties, key=tuple(key))


def parse_metadata(xml_text: str | bytes) -> list[EntitySet]:
    """Parse a CSDL document into entity sets, in document order.

    Pass bytes to let the XML declaration pick the encoding.
    """
    try:
        root = ET.fromstring(xml_text)
    except (ET.ParseError, UnicodeDecodeError) as e:
        raise MetadataError(f"Invalid metadata document: {e}") from e

    # Qualified type name (namespace or alias) -> (namespace, EntityType)
    types: dict[str, tuple[str, EntityType]] = {}
    schemas = _descendants(root, "Schema")
    for schema in schemas:
        namespace = schema.get("Namespace", "")
        alias = schema.get("Alias")
        for element in _children(schema, "EntityType"):
            entity_type = _parse_entity_type(element)
            types[f"{namespace}.{entity_type.name}"] = (namespace, entity_type)
            if alias:
                types[f"{alias}.{entity_type.name}"] = (namespace, entity_type)

    entity_sets: list[EntitySet] = []
    for schema in schemas:
        for container in _children(schema, "EntityContainer"):
            for element in _children(container, "EntitySet"):
                set_name = element.get("Name", "")
                type_ref = element.get("EntityType", "")
                if type_ref not in types:
                    logger.warning(
                        "Entity set %s references unknown type %r, skipping", set_name, type_ref,
                    )
                    continue
                namespace, entity_type = types[type_ref]
                entity_sets.append(
                    EntitySet(name=set_name, namespace=namespace, entity_type=entity_type)
                )

    logger.debug("Parsed %d entity sets from %d schemas", len(entity_sets), len(schemas))
    return entity_sets
