from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Sequence

    from ...domain.entities.context import NodeContext, ReadScope
    from ...domain.entities.node_type import PropertyRule
    from ...domain.entities.node_variant import DimensionCombination, NodeVariantRecord
    from ...domain.entities.site import Site


@runtime_checkable
class NodeStoreReaderPort(Protocol):
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


@runtime_checkable
class DimensionCombinatorPort(Protocol):
    pass

    def get_all_allowed_combinations(self) -> list[DimensionCombination]: ...


@runtime_checkable
class SiteRepositoryPort(Protocol):
    pass

    def find_one_by_node_name(self, node_name: str) -> Site | None: ...


@runtime_checkable
class NodeTypeRegistryPort(Protocol):
    pass

    def get_property_rules(self, node_type_name: str) -> dict[str, PropertyRule]: ...

    def is_of_type(self, node_type_name: str, super_type_name: str) -> bool: ...
