from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..constants import Defaults, ExportFormat

if TYPE_CHECKING:
    from datetime import datetime
    from pathlib import Path


@dataclass(frozen=True, slots=True)
class ExportRequest:
    starting_point: str
    source_language: str
    target_language: str | None = None
    modified_after: datetime | None = None
    ignore_hidden: bool = Defaults.IGNORE_HIDDEN
    exclude_child_documents: bool = Defaults.EXCLUDE_CHILD_DOCUMENTS
    workspace: str = Defaults.WORKSPACE

    @property
    def site_node_name(self) -> str:
        return self.starting_point.strip("/").split("/", 1)[0]

    @property
    def starting_path(self) -> str:
        return f"/sites/{self.starting_point.strip('/')}"


@dataclass(frozen=True, slots=True)
class ExportEnvelope:
    """Attributes of the ``<content>`` root element."""

    name: str
    site_package_key: str
    workspace: str
    source_language: str
    target_language: str | None = None
    modified_after: datetime | None = None
    format_version: str = ExportFormat.FORMAT_VERSION

    def attributes(self) -> list[tuple[str, str]]:
        attributes = [
            ("name", self.name),
            ("sitePackageKey", self.site_package_key),
            ("workspace", self.workspace),
            ("sourceLanguage", self.source_language),
        ]
        if self.target_language is not None:
            attributes.append(("targetLanguage", self.target_language))
        if self.modified_after is not None:
            attributes.append(("modifiedAfter", self.modified_after.isoformat()))
        return attributes


@dataclass(slots=True)
class SerializationStats:
    node_count: int = 0
    variant_count: int = 0
    property_count: int = 0


@dataclass(slots=True)
class ExportResponse:
    stats: SerializationStats
    destination: Path | None = None
    document: str | None = None
