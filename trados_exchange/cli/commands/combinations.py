from __future__ import annotations

from dataclasses import replace
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ...config import ConfigLoader
from ...domain.entities.node_variant import effective_language
from ...domain.exceptions import ExchangeError
from ...infrastructure.container import DependencyContainer

console = Console()


@click.command()
@click.option(
    "--source-language",
    help="Only list combinations whose language falls back to this one first",
)
@click.option(
    "--snapshot",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Content snapshot JSON to read from (overrides the configuration)",
)
@click.option(
    "--config",
    "config_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to a trados_exchange.toml config file (default: ./trados_exchange.toml)",
)
def list_combinations_command(
    source_language: str | None, snapshot: Path | None, config_file: Path | None
) -> None:
    """List the allowed dimension combinations of the content store."""
    config = ConfigLoader.load(config_file=config_file)
    if snapshot is not None:
        config = replace(config, snapshot_path=snapshot)
    container = DependencyContainer(config=config, use_null_logger=True)
    try:
        repository = container.create_content_repository()
        combinations = repository.get_all_allowed_combinations()
    except ExchangeError as exc:
        console.print(f"[red]Error:[/red] {escape(str(exc))}")
        raise SystemExit(1) from exc

    if source_language is not None:
        combinations = [
            combination
            for combination in combinations
            if effective_language(combination, config.language_dimension)
            == source_language
        ]

    table = Table(title="Allowed Dimension Combinations")
    names = sorted({name for combination in combinations for name in combination})
    for name in names:
        style = "cyan" if name == config.language_dimension else None
        table.add_column(name, style=style)
    for combination in combinations:
        table.add_row(*(" → ".join(combination.get(name, [])) for name in names))
    console.print(table)
    console.print(f"[bold]{len(combinations)}[/bold] combinations")
