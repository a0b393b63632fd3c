from __future__ import annotations

from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape

from ...config import ConfigLoader
from ...domain.exceptions import ExchangeError
from ...infrastructure.io.content_xml import read_export
from ..presenters.document import DocumentPresenter

console = Console()


@click.command()
@click.argument(
    "export_file", type=click.Path(exists=True, dir_okay=False, path_type=Path)
)
@click.option(
    "--config",
    "config_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to a trados_exchange.toml config file (default: ./trados_exchange.toml)",
)
def inspect_command(export_file: Path, config_file: Path | None) -> None:
    """Show the nodes and variants contained in an exchange file."""
    config = ConfigLoader.load(config_file=config_file)
    try:
        document = read_export(export_file)
    except ExchangeError as exc:
        console.print(f"[red]Error:[/red] {escape(str(exc))}")
        raise SystemExit(1) from exc
    DocumentPresenter(
        console, language_dimension=config.language_dimension
    ).present(document)
