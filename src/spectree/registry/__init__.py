"""
spectree collaborators.

This package provides the schema registry (name lookup and form resolution)
and the collection-kind resolver consulted by the walker.
"""

from spectree.registry.collections import CollectionKind, resolve_collection_kind
from spectree.registry.specs import (
    Spec,
    SpecRegistry,
    default_registry,
    register_spec,
    spec,
)

__all__ = [
    "CollectionKind",
    "resolve_collection_kind",
    "Spec",
    "SpecRegistry",
    "default_registry",
    "register_spec",
    "spec",
]
