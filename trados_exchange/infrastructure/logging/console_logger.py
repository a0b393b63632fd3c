from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import IntEnum
from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from typing_extensions import override

from ...application.ports.services import LoggerPort

if TYPE_CHECKING:
    from ...application.models import SerializationStats


class LogLevel(IntEnum):
    NORMAL = 0
    VERBOSE = 1
    DEBUG = 2


@dataclass(slots=True)
class LogContext:
    site: str = ""
    starting_point: str = ""
    source_language: str = ""
    operation: str = ""
    start_time: datetime = field(default_factory=datetime.now)

    def elapsed_ms(self) -> float:
        return (datetime.now() - self.start_time).total_seconds() * 1000


def _empty_stats() -> dict[str, int]:
    return {
        "exports": 0,
        "combinations_scanned": 0,
        "candidates_found": 0,
        "records_dropped": 0,
        "nodes_exported": 0,
        "variants_exported": 0,
        "warnings": 0,
        "errors": 0,
    }


class ConsoleLogger(LoggerPort):
    pass

    def __init__(self, console: Console | None = None, verbosity: int = 0) -> None:
        super().__init__()
        self.console = console or Console(stderr=True)
        self.verbosity = verbosity
        self._context: LogContext | None = None
        self._stats: dict[str, int] = _empty_stats()

    def set_context(self, **kwargs: str) -> None:
        if self._context is None:
            self._context = LogContext()
        for key, value in kwargs.items():
            if hasattr(self._context, key):
                setattr(self._context, key, value)

    def clear_context(self) -> None:
        self._context = None

    @override
    def info(self, message: str, *, level: int = LogLevel.NORMAL) -> None:
        if self.verbosity >= level:
            prefix = self._get_prefix()
            self.console.print(f"{prefix}{escape(message)}")

    @override
    def verbose(self, message: str) -> None:
        if self.verbosity >= LogLevel.VERBOSE:
            prefix = self._get_prefix()
            self.console.print(f"[dim]{prefix}{escape(message)}[/dim]")

    @override
    def debug(self, message: str) -> None:
        if self.verbosity >= LogLevel.DEBUG:
            prefix = self._get_prefix()
            self.console.print(f"[dim cyan]{prefix}{escape(message)}[/dim cyan]")

    @override
    def success(self, message: str) -> None:
        self.console.print(f"[green]✓[/green] {escape(message)}")

    @override
    def warning(self, message: str) -> None:
        self._stats["warnings"] += 1
        self.console.print(f"[yellow]⚠[/yellow] {escape(message)}")

    @override
    def error(self, message: str) -> None:
        self._stats["errors"] += 1
        self.console.print(f"[red]✗[/red] {escape(message)}")

    @override
    def log_export_start(
        self,
        starting_point: str,
        source_language: str,
        target_language: str | None,
        workspace: str,
    ) -> None:
        self.set_context(
            starting_point=starting_point,
            source_language=source_language,
            operation="export",
        )
        self._stats["exports"] += 1
        self.verbose(f"Exporting /sites/{starting_point} from workspace {workspace}")
        self.verbose(f"Source language: {source_language}")
        if target_language is not None:
            self.verbose(f"Target language: {target_language}")

    @override
    def log_selection_complete(
        self, *, combinations: int, candidates: int, selected: int
    ) -> None:
        self._stats["combinations_scanned"] += combinations
        self._stats["candidates_found"] += candidates
        self.verbose(
            f"Selected {selected:,} node variants from {candidates:,} candidates "
            f"in {combinations} dimension combination(s)"
        )

    @override
    def log_records_dropped(self, count: int) -> None:
        if count > 0:
            self._stats["records_dropped"] += count
            self.debug(f"Dropped {count:,} variants below hidden or unresolvable nodes")

    @override
    def log_export_complete(
        self, stats: SerializationStats, destination: str | None = None
    ) -> None:
        self._stats["nodes_exported"] += stats.node_count
        self._stats["variants_exported"] += stats.variant_count
        message = (
            f"Wrote {stats.node_count:,} nodes ({stats.variant_count:,} variants, "
            f"{stats.property_count:,} properties)"
        )
        if destination:
            message += f" to {destination}"
        self.verbose(message)
        if self._context is not None and self.verbosity >= LogLevel.DEBUG:
            self.debug(f"Export took {self._context.elapsed_ms():.0f} ms")

    @override
    def log_final_stats(self) -> None:
        if self.verbosity >= LogLevel.VERBOSE:
            self.console.print()
            self.console.print("[dim]Export Statistics:[/dim]")
            self.console.print(
                f"[dim]  Dimension combinations: {self._stats['combinations_scanned']}[/dim]"
            )
            self.console.print(
                f"[dim]  Candidates: {self._stats['candidates_found']:,}[/dim]"
            )
            self.console.print(
                f"[dim]  Nodes exported: {self._stats['nodes_exported']:,}[/dim]"
            )
            self.console.print(
                f"[dim]  Variants exported: {self._stats['variants_exported']:,}[/dim]"
            )
            if self._stats["warnings"] > 0:
                self.console.print(
                    f"[dim yellow]  Warnings: {self._stats['warnings']}[/dim yellow]"
                )
            if self._stats["errors"] > 0:
                self.console.print(
                    f"[dim red]  Errors: {self._stats['errors']}[/dim red]"
                )

    def get_stats(self) -> dict[str, int]:
        return self._stats.copy()

    def reset_stats(self) -> None:
        self._stats = _empty_stats()

    def _get_prefix(self) -> str:
        if self._context is None or self.verbosity < LogLevel.DEBUG:
            return ""
        parts: list[str] = []
        if self._context.starting_point:
            parts.append(self._context.starting_point)
        if self._context.source_language:
            parts.append(self._context.source_language)
        return escape(f"[{':'.join(parts)}] ") if parts else ""
