"""Map OData primitive types to Swagger property descriptors.

  Edm.Int16 / Edm.Int32  -> integer, int32
  Edm.Int64              -> integer, int64
  Edm.Boolean            -> boolean
  Edm.Byte               -> string, byte
  Edm.Date               -> string, date
  Edm.DateTimeOffset     -> string, date-time
  Edm.Double             -> number, double
  Edm.Single             -> number, single
  anything else          -> string
"""

from __future__ import annotations

from typing import Any

# (type, format) per primitive; format None means the key is omitted
_PRIMITIVE_TYPES: dict[str, tuple[str, str | None]] = {
    "Edm.Int16": ("integer", "int32"),
    "Edm.Int32": ("integer", "int32"),
    "Edm.Int64": ("integer", "int64"),
    "Edm.Boolean": ("boolean", None),
    "Edm.Byte": ("string", "byte"),
    "Edm.Date": ("string", "date"),
    "Edm.DateTimeOffset": ("string", "date-time"),
    "Edm.Double": ("number", "double"),
    "Edm.Single": ("number", "single"),
}

_FALLBACK: tuple[str, str | None] = ("string", None)

# Key properties of these types are addressed without quotes: Products(1)
NUMERIC_KEY_TYPES = frozenset({"Edm.Int16", "Edm.Int32", "Edm.Int64", "Edm.Double"})


def map_type(type_id: str) -> dict[str, Any]:
    """Return a new property descriptor for an OData primitive type."""
    schema_type, schema_format = _PRIMITIVE_TYPES.get(type_id, _FALLBACK)
    descriptor: dict[str, Any] = {"type": schema_type}
    if schema_format is not None:
        descriptor["format"] = schema_format
    return descriptor
