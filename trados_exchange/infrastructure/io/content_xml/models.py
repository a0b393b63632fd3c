from __future__ import annotations

from dataclasses import dataclass, field


def _empty_dimensions() -> dict[str, list[str]]:
    return {}


def _empty_properties() -> dict[str, str]:
    return {}


def _empty_variants() -> list[ExportedVariant]:
    return []


def _empty_nodes() -> list[ExportedNode]:
    return []


@dataclass(slots=True)
class ExportedVariant:
    node_type: str
    dimensions: dict[str, list[str]] = field(default_factory=_empty_dimensions)
    properties: dict[str, str] = field(default_factory=_empty_properties)

    def language(self, language_dimension: str) -> str | None:
        values = self.dimensions.get(language_dimension)
        return values[0] if values else None


@dataclass(slots=True)
class ExportedNode:
    identifier: str
    node_name: str
    variants: list[ExportedVariant] = field(default_factory=_empty_variants)


@dataclass(slots=True)
class ExportDocument:
    name: str
    site_package_key: str
    workspace: str
    source_language: str
    format_version: str
    target_language: str | None = None
    modified_after: str | None = None
    nodes: list[ExportedNode] = field(default_factory=_empty_nodes)

    @property
    def variant_count(self) -> int:
        return sum(len(node.variants) for node in self.nodes)

    def find_node(self, identifier: str) -> ExportedNode | None:
        for node in self.nodes:
            if node.identifier == identifier:
                return node
        return None
