"""Content-only subtree walk.

Collects a node plus every descendant reachable without passing through a
document node. Document nodes are filtered out by the store query itself, so
neither they nor anything beneath them is visited.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ...constants import NodeTypeFilters

if TYPE_CHECKING:
    from ..entities.context import ReadScope
    from ..entities.node_variant import DimensionCombination, NodeVariantRecord
    from .protocols import NodeReader


def exclude_type_filter(node_type_name: str) -> str:
    return f"{NodeTypeFilters.NEGATION_PREFIX}{node_type_name}"


def collect_content_nodes(
    root: NodeVariantRecord,
    reader: NodeReader,
    *,
    document_node_type: str,
    workspace: str,
    dimensions: DimensionCombination,
    include_removed: bool,
    scope: ReadScope,
) -> list[NodeVariantRecord]:
    """Return ``root`` and its non-document descendants in pre-order.

    Uses an explicit stack; children are pushed in reverse so they pop in
    store order.
    """
    node_type_filter = exclude_type_filter(document_node_type)
    results: list[NodeVariantRecord] = []
    stack: list[NodeVariantRecord] = [root]
    while stack:
        node = stack.pop()
        results.append(node)
        children = reader.find_children(
            node.path,
            node_type_filter,
            workspace,
            dimensions,
            include_removed,
            False,
            scope=scope,
        )
        stack.extend(reversed(children))
    return results
