"""Errors raised outside the conversion core."""

from __future__ import annotations


class MetadataError(ValueError):
    """The service metadata could not be read or parsed."""
