"""Export command - write a content subtree to the translation exchange format.

This module is a thin adapter between click and the application layer's
ExportService: it parses arguments, builds the request, runs the export and
reports the outcome.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime
from pathlib import Path
from typing import cast

import click
from rich.console import Console

from ...config import ConfigLoader
from ...domain.exceptions import ExchangeError
from ...infrastructure.container import DependencyContainer
from ..presenters.summary import ExportSummaryPresenter, ExportSummaryRequest

console = Console(stderr=True)

DATETIME_FORMATS = ["%Y-%m-%d", "%Y-%m-%dT%H:%M:%S", "%Y-%m-%d %H:%M:%S"]


@dataclass(frozen=True)
class ExportCommandOptions:
    source_language: str
    target_language: str | None
    filename: Path | None
    modified_after: datetime | None
    ignore_hidden: bool
    exclude_child_documents: bool
    snapshot: Path | None
    config_file: Path | None
    verbose: int

    @classmethod
    def from_kwargs(cls, options: dict[str, object]) -> ExportCommandOptions:
        return cls(
            source_language=cast("str", options["source_language"]),
            target_language=cast("str | None", options.get("target_language")),
            filename=cast("Path | None", options.get("filename")),
            modified_after=cast("datetime | None", options.get("modified_after")),
            ignore_hidden=cast("bool", options["ignore_hidden"]),
            exclude_child_documents=cast("bool", options["exclude_child_documents"]),
            snapshot=cast("Path | None", options.get("snapshot")),
            config_file=cast("Path | None", options.get("config_file")),
            verbose=cast("int", options["verbose"]),
        )


@click.command()
@click.argument("starting_point")
@click.option(
    "--source-language",
    required=True,
    help="The language to use as base for the export",
)
@click.option(
    "--target-language",
    help="The target language for the translation (written to the header)",
)
@click.option(
    "--filename",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Path of the XML file to create (default: print to stdout)",
)
@click.option(
    "--modified-after",
    type=click.DateTime(formats=DATETIME_FORMATS),
    help="Timestamp recorded in the export header; does not filter nodes",
)
@click.option(
    "--ignore-hidden/--include-hidden",
    "ignore_hidden",
    default=True,
    show_default=True,
    help="Skip nodes that are hidden or lie below a hidden node",
)
@click.option(
    "--exclude-child-documents",
    is_flag=True,
    help="Only export content nodes, do not descend into child documents",
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
@click.option(
    "-v", "--verbose", count=True, help="Increase verbosity level (e.g., -v, -vv)"
)
def export_command(starting_point: str, **options: object) -> None:
    """Export a site subtree into XML for translation.

    STARTING_POINT is the node to start from, relative to /sites, for
    example "acme/about". All language variants of each node in the source
    language are grouped under a single <node> element.

    Examples:

    \b
        # Print the export of a whole site
        trados-exchange export acme --source-language en

    \b
        # Export one page and its content into a file
        trados-exchange export acme/about --source-language en \\
            --target-language de --filename acme-about.xml \\
            --exclude-child-documents
    """
    command_options = ExportCommandOptions.from_kwargs(dict(options))

    config = ConfigLoader.load(config_file=command_options.config_file)
    if command_options.snapshot is not None:
        config = replace(config, snapshot_path=command_options.snapshot)

    container = DependencyContainer(
        config=config, verbose=command_options.verbose, console=console
    )
    logger = container.create_logger()
    try:
        service = container.create_export_service()
        request = service.build_request(
            starting_point,
            command_options.source_language,
            target_language=command_options.target_language,
            modified_after=command_options.modified_after,
            ignore_hidden=command_options.ignore_hidden,
            exclude_child_documents=command_options.exclude_child_documents,
        )
        response = service.export(request, command_options.filename)
    except ExchangeError as exc:
        logger.error(str(exc))
        raise SystemExit(1) from exc

    if command_options.filename is None:
        click.echo(response.document, nl=False)
    else:
        ExportSummaryPresenter(console).present(
            ExportSummaryRequest(
                starting_point=request.starting_path,
                source_language=request.source_language,
                target_language=request.target_language,
                destination=command_options.filename,
                stats=response.stats,
            )
        )
        logger.success(
            f'The tree starting at "{request.starting_path}" has been exported '
            f'to "{command_options.filename}".'
        )
    logger.log_final_stats()
