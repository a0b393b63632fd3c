"""Streaming serializer for the content export format.

Records arrive sorted so that all variants of a node are adjacent. The
serializer keeps the identifier of the open ``<node>`` element and only
starts a new one when the identifier changes; every record becomes one
``<variant>`` inside it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from typing_extensions import override

from ....application.models import SerializationStats
from ....application.ports.services import ContentSerializerPort
from .constants import (
    CONTENT,
    DIMENSIONS,
    NODE,
    NODES,
    PROPERTIES,
    STRING_TYPE,
    VARIANT,
)
from .writer import XmlStreamWriter

if TYPE_CHECKING:
    from collections.abc import Iterable
    from typing import TextIO

    from ....application.models import ExportEnvelope
    from ....application.ports.repositories import NodeTypeRegistryPort
    from ....domain.entities.node_type import PropertyRule
    from ....domain.entities.node_variant import NodeVariantRecord


class ContentXmlSerializer(ContentSerializerPort):
    pass

    def __init__(self, node_types: NodeTypeRegistryPort, *, indent: int = 2) -> None:
        super().__init__()
        self._node_types = node_types
        self._indent = indent
        self._rules: dict[str, dict[str, PropertyRule]] = {}

    @override
    def serialize(
        self,
        envelope: ExportEnvelope,
        records: Iterable[NodeVariantRecord],
        sink: TextIO,
    ) -> SerializationStats:
        writer = XmlStreamWriter(sink, indent=self._indent)
        stats = SerializationStats()

        writer.start_document()
        writer.start_element(CONTENT)
        for name, value in envelope.attributes():
            writer.write_attribute(name, value)
        writer.start_element(NODES)
        writer.write_attribute("formatVersion", envelope.format_version)

        current_identifier: str | None = None
        for record in records:
            if record.identifier != current_identifier:
                if current_identifier is not None:
                    writer.end_element()  # node
                current_identifier = record.identifier
                writer.start_element(NODE)
                writer.write_attribute("identifier", record.identifier)
                writer.write_attribute("nodeName", record.name)
                stats.node_count += 1
            self._write_variant(writer, record, stats)
        if current_identifier is not None:
            writer.end_element()  # node

        writer.end_element()  # nodes
        writer.end_element()  # content
        writer.end_document()
        writer.flush()
        return stats

    def exportable_properties(self, node_type_name: str) -> dict[str, PropertyRule]:
        rules = self._rules.get(node_type_name)
        if rules is None:
            rules = {
                name: rule
                for name, rule in self._node_types.get_property_rules(
                    node_type_name
                ).items()
                if rule.exportable
            }
            self._rules[node_type_name] = rules
        return rules

    def _write_variant(
        self,
        writer: XmlStreamWriter,
        record: NodeVariantRecord,
        stats: SerializationStats,
    ) -> None:
        writer.start_element(VARIANT)
        writer.write_attribute("nodeType", record.node_type_name)

        writer.start_element(DIMENSIONS)
        for dimension, values in record.dimension_values.items():
            for value in values:
                writer.write_element(dimension, value)
        writer.end_element()

        writer.start_element(PROPERTIES)
        exportable = self.exportable_properties(record.node_type_name)
        for name, value in record.properties.items():
            if name not in exportable:
                continue
            writer.start_element(name)
            writer.write_attribute("type", STRING_TYPE)
            if value is not None and value != "":
                writer.cdata(str(value))
            writer.end_element()
            stats.property_count += 1
        writer.end_element()

        writer.end_element()
        stats.variant_count += 1
