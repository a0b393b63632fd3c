"""Node type configuration lookups.

Answers two questions for the export: which properties of a node type may
be exported, and whether a node type inherits from another one (used for
document detection and node type filters). Property declarations are
inherited from super types; for both the declared type and the skip
option the most specific setting wins. Undeclared types default to "string".
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from typing_extensions import override

from ...application.ports.repositories import NodeTypeRegistryPort
from ...constants import ExportFormat, NodeTypeFilters
from ...domain.entities.node_type import NodeTypeDefinition, PropertyRule

if TYPE_CHECKING:
    from collections.abc import Mapping

    from .snapshot_models import ContentSnapshot, NodeTypeModel

DEFAULT_PROPERTY_TYPE = ExportFormat.STRING_PROPERTY_TYPE


class NodeTypeRegistry(NodeTypeRegistryPort):
    pass

    def __init__(self, definitions: Mapping[str, NodeTypeDefinition]) -> None:
        super().__init__()
        self._definitions = dict(definitions)
        self._lineage: dict[str, tuple[str, ...]] = {}

    @classmethod
    def from_snapshot(cls, snapshot: ContentSnapshot) -> NodeTypeRegistry:
        return cls(
            {
                name: _definition_from_model(name, model)
                for name, model in snapshot.node_types.items()
            }
        )

    def lineage(self, node_type_name: str) -> tuple[str, ...]:
        """Return ``node_type_name`` followed by all of its super types.

        Super types are listed breadth-first; each appears once even when
        reachable through several parents.
        """
        cached = self._lineage.get(node_type_name)
        if cached is not None:
            return cached
        ordered: list[str] = []
        queue = [node_type_name]
        while queue:
            name = queue.pop(0)
            if name in ordered:
                continue
            ordered.append(name)
            definition = self._definitions.get(name)
            if definition is not None:
                queue.extend(definition.super_types)
        lineage = tuple(ordered)
        self._lineage[node_type_name] = lineage
        return lineage

    @override
    def is_of_type(self, node_type_name: str, super_type_name: str) -> bool:
        return super_type_name in self.lineage(node_type_name)

    @override
    def get_property_rules(self, node_type_name: str) -> dict[str, PropertyRule]:
        declared: dict[str, str | None] = {}
        skip_options: dict[str, bool] = {}
        for name in reversed(self.lineage(node_type_name)):
            definition = self._definitions.get(name)
            if definition is None:
                continue
            for property_name, type_name in definition.property_types.items():
                declared[property_name] = type_name or declared.get(property_name)
            skip_options.update(definition.skip_options)
        return {
            property_name: PropertyRule(
                type_name=type_name or DEFAULT_PROPERTY_TYPE,
                skip=skip_options.get(property_name, False),
            )
            for property_name, type_name in declared.items()
        }

    def matches_filter(self, node_type_name: str, node_type_filter: str | None) -> bool:
        """Evaluate a node type filter such as ``"!Neos.Neos:Document"``.

        The filter is a comma separated list; entries prefixed with ``!``
        exclude, the others include. Without include entries every node type
        not excluded matches.
        """
        if not node_type_filter:
            return True
        includes: list[str] = []
        excludes: list[str] = []
        for entry in node_type_filter.split(NodeTypeFilters.SEPARATOR):
            entry = entry.strip()
            if not entry:
                continue
            if entry.startswith(NodeTypeFilters.NEGATION_PREFIX):
                excludes.append(entry[len(NodeTypeFilters.NEGATION_PREFIX) :].strip())
            else:
                includes.append(entry)
        if any(self.is_of_type(node_type_name, name) for name in excludes):
            return False
        if not includes:
            return True
        return any(self.is_of_type(node_type_name, name) for name in includes)


def _definition_from_model(name: str, model: NodeTypeModel) -> NodeTypeDefinition:
    return NodeTypeDefinition(
        name=name,
        super_types=tuple(model.super_types),
        property_types={
            property_name: declaration.type
            for property_name, declaration in model.properties.items()
        },
        skip_options={
            property_name: option.skip
            for property_name, option in model.options.export.properties.items()
            if option.skip is not None
        },
    )
