"""Metadata Extractor: descritor de metadados → Tag."""

from .parser import ManifestAttributes, parse_manifest  # noqa: F401
from .tag import create_tag, extract_id  # noqa: F401

__all__ = ["ManifestAttributes", "create_tag", "extract_id", "parse_manifest"]
