"""Input records for the converter.

Built by the loader (or by hand in tests) and never mutated afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class EntityProperty:
    name: str
    type: str


@dataclass(frozen=True)
class EntityType:
    """A record shape. ``key`` holds properties drawn from ``properties``."""

    name: str
    properties: tuple[EntityProperty, ...] = ()
    key: tuple[EntityProperty, ...] = ()


@dataclass(frozen=True)
class EntitySet:
    name: str
    namespace: str
    entity_type: EntityType

    @property
    def qualified_type(self) -> str:
        """Definition name, e.g. 'NS.Product'."""
        return f"{self.namespace}.{self.entity_type.name}"


@dataclass(frozen=True)
class Options:
    """Values copied verbatim into the document envelope; None means absent."""

    host: str | None = None
    base_path: str | None = None
