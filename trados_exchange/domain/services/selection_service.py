"""Selection of the node variants that make up an export.

The content store hands out one record per node and dimension combination.
This service gathers those records for every combination of the source
language, folds them into one entry per variant, drops everything that sits
below a hidden node and returns them in a stable, path-based order.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from ..entities.node_variant import (
    dimension_key,
    effective_language,
    normalized_sort_path,
)
from ..exceptions import NodeNotFoundError
from .tree_restriction import collect_content_nodes

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator, Sequence
    from datetime import datetime

    from ..entities.context import NodeContext
    from ..entities.node_variant import DimensionCombination, NodeVariantRecord
    from .protocols import CombinationSource, NodeReader


@dataclass(frozen=True, slots=True)
class SelectionRequest:
    starting_path: str
    source_language: str
    context: NodeContext
    target_language: str | None = None
    # Carried for the export header only; records are not filtered by it.
    modified_after: datetime | None = None
    exclude_child_documents: bool = False


def _empty_records() -> list[NodeVariantRecord]:
    return []


@dataclass(slots=True)
class SelectionResult:
    records: list[NodeVariantRecord] = field(default_factory=_empty_records)
    combinations: int = 0
    candidates: int = 0
    dropped: int = 0

    def __iter__(self) -> Iterator[NodeVariantRecord]:
        return iter(self.records)

    def __len__(self) -> int:
        return len(self.records)

    @property
    def identifiers(self) -> list[str]:
        seen: dict[str, None] = {}
        for record in self.records:
            seen.setdefault(record.identifier, None)
        return list(seen)


class SelectionService:
    pass

    def __init__(
        self,
        reader: NodeReader,
        combinator: CombinationSource,
        *,
        language_dimension: str,
        document_node_type: str,
    ) -> None:
        super().__init__()
        self._reader = reader
        self._combinator = combinator
        self.language_dimension = language_dimension
        self.document_node_type = document_node_type

    def source_combinations(self, source_language: str) -> list[DimensionCombination]:
        return [
            combination
            for combination in self._combinator.get_all_allowed_combinations()
            if effective_language(combination, self.language_dimension)
            == source_language
        ]

    def select(self, request: SelectionRequest) -> SelectionResult:
        candidates: list[NodeVariantRecord] = []
        source_contexts: list[NodeContext] = []
        combinations = self.source_combinations(request.source_language)
        for combination in combinations:
            context = request.context.with_dimensions(combination)
            start = self._reader.get_node(
                request.starting_path, context.showing_invisible_content()
            )
            if start is None:
                continue
            source_contexts.append(context)
            candidates.extend(self._collect_subtree(start, context, request))

        if not source_contexts:
            raise NodeNotFoundError(request.starting_path)

        unique = self.deduplicate(candidates, request.source_language)
        visible = [
            record for record in unique if self._is_visible(record, source_contexts)
        ]
        return SelectionResult(
            records=order_records(visible),
            combinations=len(combinations),
            candidates=len(candidates),
            dropped=len(unique) - len(visible),
        )

    def deduplicate(
        self, records: Iterable[NodeVariantRecord], source_language: str
    ) -> list[NodeVariantRecord]:
        """Fold candidates into one record per identifier and dimension values.

        When any variant of an identifier is in the source language, the
        other-language variants of that identifier are discarded.
        """
        by_variant: dict[object, NodeVariantRecord] = {}
        for record in records:
            by_variant.setdefault(record.variant_key(), record)

        in_source_language = {
            record.identifier
            for record in by_variant.values()
            if record.language(self.language_dimension) == source_language
        }
        return [
            record
            for record in by_variant.values()
            if record.identifier not in in_source_language
            or record.language(self.language_dimension) == source_language
        ]

    def resolve_in_language(
        self, record: NodeVariantRecord, context: NodeContext
    ) -> NodeVariantRecord | None:
        """Return the variant of ``record`` that ``context`` would show.

        A record already in the context's language only counts for the
        context when the context resolves to that very variant; a variant of
        another region, for example, is absent there and yields ``None``.
        """
        language = effective_language(context.dimensions, self.language_dimension)
        shown = self._reader.get_node_by_identifier(
            record.identifier, context.showing_invisible_content()
        )
        if record.language(self.language_dimension) != language:
            return shown
        if shown is None or shown.variant_key() != record.variant_key():
            return None
        return record

    def has_hidden_ancestor(
        self, record: NodeVariantRecord, context: NodeContext
    ) -> bool:
        """Check ``record`` and its ancestors for the hidden flag.

        The walk ends at the first ancestor that does not resolve in
        ``context`` or that carries no dimension values (structural roots
        such as ``/sites``).
        """
        lookup_context = context.showing_invisible_content()
        current: NodeVariantRecord | None = record
        while current is not None:
            if current.hidden:
                return True
            parent_path = current.parent_path
            if parent_path is None:
                break
            parent = self._reader.get_node(parent_path, lookup_context)
            if parent is None or not parent.has_dimensions:
                break
            current = parent
        return False

    def _is_visible(
        self, record: NodeVariantRecord, source_contexts: Sequence[NodeContext]
    ) -> bool:
        resolved_anywhere = False
        for context in source_contexts:
            resolved = self.resolve_in_language(record, context)
            if resolved is None:
                continue
            resolved_anywhere = True
            if not context.invisible_content_shown and self.has_hidden_ancestor(
                resolved, context
            ):
                return False
        return resolved_anywhere

    def _collect_subtree(
        self,
        start: NodeVariantRecord,
        context: NodeContext,
        request: SelectionRequest,
    ) -> list[NodeVariantRecord]:
        if request.exclude_child_documents:
            return collect_content_nodes(
                start,
                self._reader,
                document_node_type=self.document_node_type,
                workspace=context.workspace,
                dimensions=context.dimensions,
                include_removed=context.removed_content_shown,
                scope=context.scope,
            )
        descendants = self._reader.find_children(
            start.path,
            None,
            context.workspace,
            context.dimensions,
            context.removed_content_shown,
            True,
            scope=context.scope,
        )
        return [start, *descendants]


def order_records(records: Iterable[NodeVariantRecord]) -> list[NodeVariantRecord]:
    """Sort records by normalized path, keeping variants of a node together.

    Each identifier is placed at the smallest normalized path among its
    variants; within the group variants follow path, then dimension values.
    """
    records = list(records)
    group_paths: dict[str, str] = {}
    for record in records:
        sort_path = normalized_sort_path(record.path)
        current = group_paths.get(record.identifier)
        if current is None or sort_path < current:
            group_paths[record.identifier] = sort_path

    return sorted(
        records,
        key=lambda record: (
            group_paths[record.identifier],
            record.identifier,
            normalized_sort_path(record.path),
            dimension_key(record.dimension_values),
        ),
    )
