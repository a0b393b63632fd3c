"""Content repository backed by a JSON snapshot.

Implements the read side of a multi-dimensional content store: records are
matched against a dimension combination, where each dimension lists its
values in fallback order, and the best match per identifier wins. Hidden,
removed and access-restricted records are filtered according to the read
context.
"""

from __future__ import annotations

from itertools import product
from pathlib import Path
from typing import TYPE_CHECKING

from typing_extensions import override

from ...application.ports.repositories import (
    DimensionCombinatorPort,
    NodeStoreReaderPort,
    SiteRepositoryPort,
)
from ...constants import Paths
from ...domain.entities.node_variant import NodeVariantRecord
from ...domain.entities.site import Site
from .node_type_registry import NodeTypeRegistry
from .snapshot_loader import load_snapshot, parse_snapshot

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from ...domain.entities.context import NodeContext, ReadScope
    from ...domain.entities.node_variant import DimensionCombination
    from .snapshot_models import ContentSnapshot

DimensionRank = tuple[int, ...]


class SnapshotContentRepository(
    NodeStoreReaderPort, DimensionCombinatorPort, SiteRepositoryPort
):
    pass

    def __init__(
        self, snapshot: ContentSnapshot, node_types: NodeTypeRegistry | None = None
    ) -> None:
        super().__init__()
        self.node_types = node_types or NodeTypeRegistry.from_snapshot(snapshot)
        self._sites = {
            site.node_name: Site(
                node_name=site.node_name,
                name=site.name,
                site_package_key=site.site_package_key,
            )
            for site in snapshot.sites
        }
        self._dimension_presets = {
            name: list(dimension.presets.values())
            for name, dimension in snapshot.dimensions.items()
        }
        self._records: dict[str, list[NodeVariantRecord]] = {}
        for node in snapshot.nodes:
            record = NodeVariantRecord(
                identifier=node.identifier,
                path=_normalize_path(node.path),
                node_type_name=node.node_type,
                dimension_values={
                    name: list(values) for name, values in node.dimensions.items()
                },
                properties=dict(node.properties),
                hidden=node.hidden,
                workspace=node.workspace,
                removed=node.removed,
                access_roles=tuple(node.access_roles),
            )
            self._records.setdefault(record.workspace, []).append(record)

    @classmethod
    def from_file(cls, path: str | Path) -> SnapshotContentRepository:
        return cls(load_snapshot(path))

    @classmethod
    def from_mapping(cls, data: object) -> SnapshotContentRepository:
        return cls(parse_snapshot(data))

    @override
    def find_one_by_node_name(self, node_name: str) -> Site | None:
        return self._sites.get(node_name)

    @override
    def get_all_allowed_combinations(self) -> list[DimensionCombination]:
        names = list(self._dimension_presets)
        if not names:
            return []
        return [
            {name: list(values) for name, values in zip(names, combination, strict=True)}
            for combination in product(*(self._dimension_presets[n] for n in names))
        ]

    @override
    def get_node(self, path: str, context: NodeContext) -> NodeVariantRecord | None:
        path = _normalize_path(path)
        return self._find_one(lambda record: record.path == path, context)

    @override
    def get_node_by_identifier(
        self, identifier: str, context: NodeContext
    ) -> NodeVariantRecord | None:
        return self._find_one(lambda record: record.identifier == identifier, context)

    @override
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
    ) -> list[NodeVariantRecord]:
        parent_path = _normalize_path(parent_path)
        prefix = parent_path.rstrip(Paths.SEPARATOR) + Paths.SEPARATOR

        def is_child(record: NodeVariantRecord) -> bool:
            if recursive:
                return record.path.startswith(prefix) and record.path != parent_path
            return record.parent_path == parent_path

        candidates = (
            record for record in self._records.get(workspace, []) if is_child(record)
        )
        return [
            record
            for record in self._reduce(candidates, dimensions)
            if (include_removed or not record.removed)
            and scope.may_read(record.access_roles)
            and self.node_types.matches_filter(record.node_type_name, node_type_filter)
        ]

    def _find_one(
        self,
        predicate: Callable[[NodeVariantRecord], bool],
        context: NodeContext,
    ) -> NodeVariantRecord | None:
        candidates = (
            record
            for record in self._records.get(context.workspace, [])
            if predicate(record)
        )
        for record in self._reduce(candidates, context.dimensions):
            if self._is_visible(record, context):
                return record
        return None

    def _is_visible(self, record: NodeVariantRecord, context: NodeContext) -> bool:
        if record.removed and not context.removed_content_shown:
            return False
        if record.hidden and not context.invisible_content_shown:
            return False
        if not context.inaccessible_content_shown and not context.scope.may_read(
            record.access_roles
        ):
            return False
        return True

    def _reduce(
        self,
        records: Iterable[NodeVariantRecord],
        dimensions: DimensionCombination,
    ) -> list[NodeVariantRecord]:
        """Keep the best matching variant per identifier, in storage order."""
        best: dict[str, tuple[DimensionRank, NodeVariantRecord]] = {}
        order: list[str] = []
        for record in records:
            rank = dimension_rank(record, dimensions)
            if rank is None:
                continue
            current = best.get(record.identifier)
            if current is None:
                order.append(record.identifier)
                best[record.identifier] = (rank, record)
            elif rank < current[0]:
                best[record.identifier] = (rank, record)
        return [best[identifier][1] for identifier in order]


def dimension_rank(
    record: NodeVariantRecord, dimensions: DimensionCombination
) -> DimensionRank | None:
    """Position of the record's values in each dimension's fallback list.

    Returns ``None`` when the record does not belong to the combination.
    Records without dimension values (structural nodes such as ``/sites``)
    belong to every combination.
    """
    rank: list[int] = []
    for name, allowed in dimensions.items():
        values = record.dimension_values.get(name)
        if not values:
            rank.append(0)
            continue
        try:
            rank.append(list(allowed).index(values[0]))
        except ValueError:
            return None
    return tuple(rank)


def _normalize_path(path: str) -> str:
    if path == Paths.ROOT:
        return path
    return Paths.SEPARATOR + path.strip(Paths.SEPARATOR)
