"""Content export XML: incremental writer, serializer and reader."""

from .models import ExportDocument, ExportedNode, ExportedVariant
from .reader import parse_export_tree, read_export, read_export_string
from .serializer import ContentXmlSerializer
from .writer import XmlStreamWriter, escape_cdata

__all__ = [
    "ContentXmlSerializer",
    "ExportDocument",
    "ExportedNode",
    "ExportedVariant",
    "XmlStreamWriter",
    "escape_cdata",
    "parse_export_tree",
    "read_export",
    "read_export_string",
]
