from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import TypeAlias

from ...constants import Defaults, Paths

DimensionCombination: TypeAlias = Mapping[str, Sequence[str]]


@dataclass(frozen=True, slots=True)
class NodeVariantRecord:
    """One node's data in one dimension combination.

    Several records may share an ``identifier``; each of them is a variant of
    the same logical node.
    """

    identifier: str
    path: str
    node_type_name: str
    dimension_values: Mapping[str, Sequence[str]] = field(default_factory=dict)
    properties: Mapping[str, object] = field(default_factory=dict)
    hidden: bool = False
    workspace: str = Defaults.WORKSPACE
    removed: bool = False
    access_roles: tuple[str, ...] = ()

    @property
    def name(self) -> str:
        if self.path == Paths.ROOT:
            return ""
        return self.path.rstrip(Paths.SEPARATOR).rsplit(Paths.SEPARATOR, 1)[-1]

    @property
    def parent_path(self) -> str | None:
        return parent_path_of(self.path)

    @property
    def has_dimensions(self) -> bool:
        return bool(self.dimension_values)

    def language(self, language_dimension: str) -> str | None:
        values = self.dimension_values.get(language_dimension)
        if not values:
            return None
        return values[0]

    def variant_key(self) -> tuple[str, tuple[tuple[str, tuple[str, ...]], ...]]:
        return (self.identifier, dimension_key(self.dimension_values))


def parent_path_of(path: str) -> str | None:
    if path == Paths.ROOT or not path:
        return None
    head = path.rstrip(Paths.SEPARATOR).rsplit(Paths.SEPARATOR, 1)[0]
    return head or Paths.ROOT


def dimension_key(
    dimensions: DimensionCombination,
) -> tuple[tuple[str, tuple[str, ...]], ...]:
    return tuple(sorted((name, tuple(values)) for name, values in dimensions.items()))


def effective_language(
    dimensions: DimensionCombination, language_dimension: str
) -> str | None:
    values = dimensions.get(language_dimension)
    if not values:
        return None
    return values[0]


def normalized_sort_path(path: str) -> str:
    return path.replace(Paths.SEPARATOR, Paths.SORT_SEPARATOR)
