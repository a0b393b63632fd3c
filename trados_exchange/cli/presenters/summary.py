from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from rich.table import Table

if TYPE_CHECKING:
    from pathlib import Path

    from rich.console import Console

    from ...application.models import SerializationStats


@dataclass(frozen=True, slots=True)
class ExportSummaryRequest:
    starting_point: str
    source_language: str
    target_language: str | None
    destination: Path
    stats: SerializationStats


class ExportSummaryPresenter:
    pass

    def __init__(self, console: Console) -> None:
        super().__init__()
        self.console = console

    def present(self, request: ExportSummaryRequest) -> None:
        self.console.print()
        self.console.print(self._build_summary_table(request))
        self.console.print()

    def _build_summary_table(self, request: ExportSummaryRequest) -> Table:
        table = Table(
            title="📦 Export Summary",
            show_header=True,
            header_style="bold cyan",
            border_style="bright_blue",
            title_style="bold magenta",
        )
        table.add_column("Item", style="cyan", no_wrap=True)
        table.add_column("Value", style="white", overflow="fold")
        table.add_row("Starting point", request.starting_point)
        languages = request.source_language
        if request.target_language:
            languages = f"{languages} → {request.target_language}"
        table.add_row("Languages", languages)
        table.add_row("File", str(request.destination))
        table.add_section()
        table.add_row("Nodes", f"[yellow]{request.stats.node_count:,}[/yellow]")
        table.add_row("Variants", f"[yellow]{request.stats.variant_count:,}[/yellow]")
        table.add_row(
            "Properties", f"[yellow]{request.stats.property_count:,}[/yellow]"
        )
        return table
