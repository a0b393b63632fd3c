from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import Sequence

    from ..entities.context import NodeContext, ReadScope
    from ..entities.node_variant import DimensionCombination, NodeVariantRecord


class NodeReader(Protocol):
    pass

    def get_node(self, path: str, context: NodeContext) -> NodeVariantRecord | None: ...

    def get_node_by_identifier(
        self, identifier: str, context: NodeContext
    ) -> NodeVariantRecord | None: ...

    def find_children(
        self,
        parent_path: str,
        node_type_filter: str | None,
        workspace: str,
        dimensions: DimensionCombination,
        include_removed: bool,
        recursive: bool,
        *,
        scope: ReadScope,
    ) -> Sequence[NodeVariantRecord]: ...


class CombinationSource(Protocol):
    pass

    def get_all_allowed_combinations(self) -> list[DimensionCombination]: ...
