"""I/O adapters: content export XML and file output."""

from .content_xml import (
    ContentXmlSerializer,
    ExportDocument,
    read_export,
    read_export_string,
)
from .exceptions import (
    ExchangeInfrastructureError,
    ExportFormatError,
    ExportWriteError,
    FormatVersionMismatchError,
    SnapshotError,
)
from .output_file import AtomicFileOutput, atomic_text_output

__all__ = [
    "AtomicFileOutput",
    "ContentXmlSerializer",
    "ExchangeInfrastructureError",
    "ExportDocument",
    "ExportFormatError",
    "ExportWriteError",
    "FormatVersionMismatchError",
    "SnapshotError",
    "atomic_text_output",
    "read_export",
    "read_export_string",
]
