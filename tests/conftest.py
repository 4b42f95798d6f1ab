"""Shared fixtures: small hand-built models and a sample $metadata document."""

from __future__ import annotations

import pytest

from odata_swagger.model import EntityProperty, EntitySet, EntityType


# ---------------------------------------------------------------------------
# Model fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def products() -> EntitySet:
    """Products (NS.Product) keyed on an Edm.Int32 id."""
    id_prop = EntityProperty("id", "Edm.Int32")
    product = EntityType(
        name="Product",
        properties=(id_prop, EntityProperty("name", "Edm.String")),
        key=(id_prop,),
    )
    return EntitySet(name="Products", namespace="NS", entity_type=product)


@pytest.fixture
def logs() -> EntitySet:
    """Keyless entity set."""
    entry = EntityType(
        name="LogEntry",
        properties=(EntityProperty("message", "Edm.String"),),
    )
    return EntitySet(name="Logs", namespace="NS", entity_type=entry)


@pytest.fixture
def codes() -> EntitySet:
    """Entity set keyed on an Edm.String code."""
    code = EntityProperty("code", "Edm.String")
    country = EntityType(
        name="Country",
        properties=(code, EntityProperty("label", "Edm.String")),
        key=(code,),
    )
    return EntitySet(name="Countries", namespace="Geo", entity_type=country)


@pytest.fixture
def order_lines() -> EntitySet:
    """Composite key: (orderId Edm.Int64, sku Edm.String)."""
    order_id = EntityProperty("orderId", "Edm.Int64")
    sku = EntityProperty("sku", "Edm.String")
    line = EntityType(
        name="OrderLine",
        properties=(sku, order_id, EntityProperty("quantity", "Edm.Int16")),
        key=(order_id, sku),
    )
    return EntitySet(name="OrderLines", namespace="Sales", entity_type=line)


# ---------------------------------------------------------------------------
# Metadata documents
# ---------------------------------------------------------------------------

SAMPLE_METADATA = """<?xml version="1.0" encoding="utf-8"?>
<edmx:Edmx Version="4.0" xmlns:edmx="http://docs.oasis-open.org/odata/ns/edmx">
  <edmx:DataServices>
    <Schema Namespace="Demo.Models" Alias="Models" xmlns="http://docs.oasis-open.org/odata/ns/edm">
      <EntityType Name="Product">
        <Key>
          <PropertyRef Name="ID"/>
        </Key>
        <Property Name="ID" Type="Edm.Int32" Nullable="false"/>
        <Property Name="Name" Type="Edm.String"/>
        <Property Name="Price" Type="Edm.Double"/>
        <Property Name="ReleaseDate" Type="Edm.DateTimeOffset"/>
      </EntityType>
      <EntityType Name="Category">
        <Key>
          <PropertyRef Name="Code"/>
        </Key>
        <Property Name="Code" Type="Edm.String" Nullable="false"/>
      </EntityType>
      <EntityType Name="Event">
        <Property Name="Message" Type="Edm.String"/>
      </EntityType>
    </Schema>
    <Schema Namespace="Demo" xmlns="http://docs.oasis-open.org/odata/ns/edm">
      <EntityContainer Name="Container">
        <EntitySet Name="Products" EntityType="Demo.Models.Product"/>
        <EntitySet Name="Categories" EntityType="Models.Category"/>
        <EntitySet Name="Events" EntityType="Demo.Models.Event"/>
      </EntityContainer>
    </Schema>
  </edmx:DataServices>
</edmx:Edmx>
"""


@pytest.fixture
def sample_metadata() -> str:
    return SAMPLE_METADATA


@pytest.fixture
def metadata_file(tmp_path, sample_metadata):
    path = tmp_path / "metadata.xml"
    path.write_text(sample_metadata, encoding="utf-8")
    return path
