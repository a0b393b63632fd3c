"""Translation exchange for multi-dimensional content repositories.

This package exports a subtree of a content repository into an XML document
that groups every language variant of a node under one element, ready to
be handed to a translation service.

Features:
- Variant selection across all dimension combinations of a source language
- Hidden-ancestor filtering and optional restriction to content nodes
- Streaming XML serialization with CDATA-wrapped string properties
- Reading export documents back with format version checks
"""

from importlib.metadata import PackageNotFoundError, version

try:  # pragma: no cover
    __version__ = version("trados-exchange")
except PackageNotFoundError:  # pragma: no cover
    __version__ = "0.0.0"

# Core exports
from trados_exchange.application.export_use_case import (
    ExportDependencies,
    ExportService,
)
from trados_exchange.domain.entities.node_variant import NodeVariantRecord
from trados_exchange.domain.services.selection_service import SelectionService
from trados_exchange.infrastructure.io.content_xml import (
    ContentXmlSerializer,
    read_export,
)

__all__ = [
    "ContentXmlSerializer",
    "ExportDependencies",
    "ExportService",
    "NodeVariantRecord",
    "SelectionService",
    "__version__",
    "read_export",
]
