from __future__ import annotations

from typing import TYPE_CHECKING

from typing_extensions import override

from ...application.ports.services import LoggerPort

if TYPE_CHECKING:
    from ...application.models import SerializationStats


class NullLogger(LoggerPort):
    pass

    @override
    def info(self, message: str) -> None:
        return

    @override
    def success(self, message: str) -> None:
        return

    @override
    def warning(self, message: str) -> None:
        return

    @override
    def error(self, message: str) -> None:
        return

    @override
    def debug(self, message: str) -> None:
        return

    @override
    def verbose(self, message: str) -> None:
        return

    @override
    def log_export_start(
        self,
        starting_point: str,
        source_language: str,
        target_language: str | None,
        workspace: str,
    ) -> None:
        return None

    @override
    def log_selection_complete(
        self, *, combinations: int, candidates: int, selected: int
    ) -> None:
        return None

    @override
    def log_records_dropped(self, count: int) -> None:
        return None

    @override
    def log_export_complete(
        self, stats: SerializationStats, destination: str | None = None
    ) -> None:
        return None

    @override
    def log_final_stats(self) -> None:
        return None
