from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Iterable
    from contextlib import AbstractContextManager
    from pathlib import Path
    from typing import TextIO

    from ...domain.entities.node_variant import NodeVariantRecord
    from ..models import ExportEnvelope, SerializationStats


@runtime_checkable
class LoggerPort(Protocol):
    pass

    def info(self, message: str) -> None: ...

    def success(self, message: str) -> None: ...

    def warning(self, message: str) -> None: ...

    def error(self, message: str) -> None: ...

    def debug(self, message: str) -> None: ...

    def verbose(self, message: str) -> None: ...

    def log_export_start(
        self,
        starting_point: str,
        source_language: str,
        target_language: str | None,
        workspace: str,
    ) -> None: ...

    def log_selection_complete(
        self, *, combinations: int, candidates: int, selected: int
    ) -> None: ...

    def log_records_dropped(self, count: int) -> None: ...

    def log_export_complete(
        self, stats: SerializationStats, destination: str | None = None
    ) -> None: ...

    def log_final_stats(self) -> None: ...


@runtime_checkable
class ContentSerializerPort(Protocol):
    pass

    def serialize(
        self,
        envelope: ExportEnvelope,
        records: Iterable[NodeVariantRecord],
        sink: TextIO,
    ) -> SerializationStats: ...


@runtime_checkable
class OutputFilePort(Protocol):
    pass

    def open_text(self, path: Path) -> AbstractContextManager[TextIO]: ...
