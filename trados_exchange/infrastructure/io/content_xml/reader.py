"""Reader for content export documents.

Parses an export back into :class:`ExportDocument` so that an importer, or
the ``inspect`` command, can work with typed data. Documents written in a
different ``formatVersion`` are rejected.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING
from xml.etree import ElementTree as ET

from ..exceptions import ExportFormatError, FormatVersionMismatchError
from .constants import (
    CONTENT,
    DIMENSIONS,
    FORMAT_VERSION,
    NODE,
    NODES,
    PROPERTIES,
    STRING_TYPE,
    VARIANT,
)
from .models import ExportDocument, ExportedNode, ExportedVariant

if TYPE_CHECKING:
    from xml.etree.ElementTree import Element


def read_export(source: str | Path) -> ExportDocument:
    path = Path(source)
    try:
        root = ET.parse(path).getroot()
    except ET.ParseError as e:
        raise ExportFormatError(f"{path} is not well-formed XML: {e}") from e
    except OSError as e:
        raise ExportFormatError(f"Cannot read export file {path}: {e}") from e
    return parse_export_tree(root)


def read_export_string(document: str | bytes) -> ExportDocument:
    try:
        root = ET.fromstring(document)
    except ET.ParseError as e:
        raise ExportFormatError(f"Export is not well-formed XML: {e}") from e
    return parse_export_tree(root)


def parse_export_tree(root: Element) -> ExportDocument:
    if root.tag != CONTENT:
        raise ExportFormatError(f'Expected <{CONTENT}> root element, got <{root.tag}>')
    nodes_element = root.find(NODES)
    if nodes_element is None:
        raise ExportFormatError(f"Missing <{NODES}> element")
    format_version = nodes_element.get("formatVersion")
    if format_version != FORMAT_VERSION:
        raise FormatVersionMismatchError(format_version, FORMAT_VERSION)

    document = ExportDocument(
        name=_required(root, "name"),
        site_package_key=_required(root, "sitePackageKey"),
        workspace=_required(root, "workspace"),
        source_language=_required(root, "sourceLanguage"),
        format_version=format_version,
        target_language=root.get("targetLanguage"),
        modified_after=root.get("modifiedAfter"),
    )
    for node_element in nodes_element.findall(NODE):
        node = ExportedNode(
            identifier=_required(node_element, "identifier"),
            node_name=node_element.get("nodeName", ""),
        )
        for variant_element in node_element.findall(VARIANT):
            node.variants.append(_parse_variant(variant_element))
        document.nodes.append(node)
    return document


def _parse_variant(element: Element) -> ExportedVariant:
    variant = ExportedVariant(node_type=_required(element, "nodeType"))
    dimensions = element.find(DIMENSIONS)
    if dimensions is not None:
        for value in dimensions:
            variant.dimensions.setdefault(value.tag, []).append(value.text or "")
    properties = element.find(PROPERTIES)
    if properties is not None:
        for prop in properties:
            if prop.get("type") != STRING_TYPE:
                continue
            variant.properties[prop.tag] = prop.text or ""
    return variant


def _required(element: Element, attribute: str) -> str:
    value = element.get(attribute)
    if value is None:
        raise ExportFormatError(
            f'<{element.tag}> is missing the "{attribute}" attribute'
        )
    return value
