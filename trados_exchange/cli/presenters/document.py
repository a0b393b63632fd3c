from __future__ import annotations

from typing import TYPE_CHECKING

from rich.markup import escape
from rich.table import Table

if TYPE_CHECKING:
    from rich.console import Console

    from ...infrastructure.io.content_xml.models import ExportDocument


class DocumentPresenter:
    """Render the contents of an exchange file as a table of nodes."""

    def __init__(self, console: Console, *, language_dimension: str) -> None:
        super().__init__()
        self.console = console
        self.language_dimension = language_dimension

    def present(self, document: ExportDocument) -> None:
        self.console.print(self._header(document))
        self.console.print(self._build_node_table(document))
        self.console.print(
            f"[bold]{len(document.nodes):,}[/bold] nodes, "
            f"[bold]{document.variant_count:,}[/bold] variants"
        )

    def _header(self, document: ExportDocument) -> str:
        parts = [
            f"[bold magenta]{escape(document.name)}[/bold magenta]",
            f"package [cyan]{escape(document.site_package_key)}[/cyan]",
            f"workspace [cyan]{escape(document.workspace)}[/cyan]",
            f"source [cyan]{escape(document.source_language)}[/cyan]",
        ]
        if document.target_language:
            parts.append(f"target [cyan]{escape(document.target_language)}[/cyan]")
        if document.modified_after:
            parts.append(f"modified after {escape(document.modified_after)}")
        parts.append(f"format {escape(document.format_version)}")
        return " · ".join(parts)

    def _build_node_table(self, document: ExportDocument) -> Table:
        table = Table(show_header=True, header_style="bold cyan")
        table.add_column("Identifier", style="cyan", no_wrap=True)
        table.add_column("Name")
        table.add_column("Type", style="dim")
        table.add_column("Languages", style="green")
        table.add_column("Properties", justify="right", style="yellow")
        for node in document.nodes:
            languages = sorted(
                {
                    language
                    for variant in node.variants
                    if (language := variant.language(self.language_dimension))
                }
            )
            node_types = sorted({variant.node_type for variant in node.variants})
            properties = sum(len(variant.properties) for variant in node.variants)
            table.add_row(
                escape(node.identifier),
                escape(node.node_name),
                escape(", ".join(node_types)),
                ", ".join(languages),
                str(properties),
            )
        return table
