from __future__ import annotations

from dataclasses import dataclass, field

from ...constants import ExportFormat


@dataclass(frozen=True, slots=True)
class PropertyRule:
    """Export capability of one declared property."""

    type_name: str
    skip: bool = False

    @property
    def exportable(self) -> bool:
        return not self.skip and self.type_name == ExportFormat.STRING_PROPERTY_TYPE


@dataclass(frozen=True, slots=True)
class NodeTypeDefinition:
    """Configuration of one node type as declared, before inheritance.

    ``property_types`` maps each declared property to its type, or ``None``
    when the declaration leaves the type to a super type or the default.
    ``skip_options`` holds the export skip flags this type sets itself.
    """

    name: str
    super_types: tuple[str, ...] = ()
    property_types: dict[str, str | None] = field(default_factory=dict)
    skip_options: dict[str, bool] = field(default_factory=dict)
