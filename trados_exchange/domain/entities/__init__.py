"""Domain entities.

Read-only snapshots of content store records, sites, node types and the
contexts they are read in.
"""

from .context import NodeContext, ReadScope
from .node_type import NodeTypeDefinition, PropertyRule
from .node_variant import (
    DimensionCombination,
    NodeVariantRecord,
    dimension_key,
    effective_language,
    normalized_sort_path,
    parent_path_of,
)
from .site import Site

__all__ = [
    "DimensionCombination",
    "NodeContext",
    "NodeTypeDefinition",
    "NodeVariantRecord",
    "PropertyRule",
    "ReadScope",
    "Site",
    "dimension_key",
    "effective_language",
    "normalized_sort_path",
    "parent_path_of",
]
