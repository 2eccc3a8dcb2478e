"""Modelo do artefato: Tag, Resource, FlowDocument e Artifact."""

from .types import Resource, ResourceType, Tag, resource_name_from_location  # noqa: F401
from .artifact import FLOW_NAMESPACES, Artifact, FlowDocument  # noqa: F401

__all__ = [
    "Artifact",
    "FLOW_NAMESPACES",
    "FlowDocument",
    "Resource",
    "ResourceType",
    "Tag",
    "resource_name_from_location",
]
