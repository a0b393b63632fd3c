from __future__ import annotations

from dataclasses import dataclass
from io import StringIO
from pathlib import Path
from typing import TYPE_CHECKING

from ..constants import Defaults
from ..domain.entities.context import NodeContext, ReadScope
from ..domain.exceptions import SiteNotFoundError
from ..domain.services.selection_service import (
    SelectionRequest,
    SelectionResult,
    SelectionService,
)
from .models import ExportEnvelope, ExportRequest, ExportResponse

if TYPE_CHECKING:
    from datetime import datetime

    from .ports.repositories import (
        DimensionCombinatorPort,
        NodeStoreReaderPort,
        SiteRepositoryPort,
    )
    from .ports.services import ContentSerializerPort, LoggerPort, OutputFilePort


@dataclass(slots=True)
class ExportDependencies:
    logger: LoggerPort
    node_store: NodeStoreReaderPort
    combinator: DimensionCombinatorPort
    sites: SiteRepositoryPort
    serializer: ContentSerializerPort
    output_files: OutputFilePort
    language_dimension: str = Defaults.LANGUAGE_DIMENSION
    document_node_type: str = Defaults.DOCUMENT_NODE_TYPE
    workspace: str = Defaults.WORKSPACE


class ExportService:
    """Exports a content subtree into the translation exchange format.

    Selection runs completely before any output is written, so lookup
    failures never leave a partial document behind.
    """

    def __init__(self, dependencies: ExportDependencies) -> None:
        super().__init__()
        self.logger = dependencies.logger
        self._sites = dependencies.sites
        self._serializer = dependencies.serializer
        self._output_files = dependencies.output_files
        self.workspace = dependencies.workspace
        self._selection = SelectionService(
            dependencies.node_store,
            dependencies.combinator,
            language_dimension=dependencies.language_dimension,
            document_node_type=dependencies.document_node_type,
        )

    def export_to_string(
        self,
        starting_point: str,
        source_language: str,
        target_language: str | None = None,
        modified_after: datetime | None = None,
        ignore_hidden: bool = True,
        exclude_child_documents: bool = False,
    ) -> str:
        request = self.build_request(
            starting_point,
            source_language,
            target_language=target_language,
            modified_after=modified_after,
            ignore_hidden=ignore_hidden,
            exclude_child_documents=exclude_child_documents,
        )
        response = self.export(request)
        return response.document or ""

    def export_to_file(
        self,
        path_and_filename: str | Path,
        starting_point: str,
        source_language: str,
        target_language: str | None = None,
        modified_after: datetime | None = None,
        ignore_hidden: bool = True,
        exclude_child_documents: bool = False,
    ) -> None:
        request = self.build_request(
            starting_point,
            source_language,
            target_language=target_language,
            modified_after=modified_after,
            ignore_hidden=ignore_hidden,
            exclude_child_documents=exclude_child_documents,
        )
        self.export(request, Path(path_and_filename))

    def build_request(
        self,
        starting_point: str,
        source_language: str,
        *,
        target_language: str | None = None,
        modified_after: datetime | None = None,
        ignore_hidden: bool = True,
        exclude_child_documents: bool = False,
    ) -> ExportRequest:
        return ExportRequest(
            starting_point=starting_point,
            source_language=source_language,
            target_language=target_language,
            modified_after=modified_after,
            ignore_hidden=ignore_hidden,
            exclude_child_documents=exclude_child_documents,
            workspace=self.workspace,
        )

    def export(
        self, request: ExportRequest, destination: Path | None = None
    ) -> ExportResponse:
        envelope, selection = self.prepare(request)
        if destination is None:
            buffer = StringIO()
            stats = self._serializer.serialize(envelope, selection, buffer)
            self.logger.log_export_complete(stats)
            return ExportResponse(stats=stats, document=buffer.getvalue())

        with self._output_files.open_text(destination) as handle:
            stats = self._serializer.serialize(envelope, selection, handle)
        self.logger.log_export_complete(stats, str(destination))
        return ExportResponse(stats=stats, destination=destination)

    def prepare(self, request: ExportRequest) -> tuple[ExportEnvelope, SelectionResult]:
        site = self._sites.find_one_by_node_name(request.site_node_name)
        if site is None:
            raise SiteNotFoundError(request.site_node_name)

        self.logger.log_export_start(
            request.starting_point,
            request.source_language,
            request.target_language,
            request.workspace,
        )
        if request.modified_after is not None:
            self.logger.warning(
                "modified-after is written to the export header but does not "
                "filter nodes; all nodes of the subtree are exported"
            )

        context = NodeContext(
            workspace=request.workspace,
            invisible_content_shown=not request.ignore_hidden,
            removed_content_shown=False,
            inaccessible_content_shown=not request.ignore_hidden,
            scope=ReadScope.elevated(),
        )
        selection = self._selection.select(
            SelectionRequest(
                starting_path=request.starting_path,
                source_language=request.source_language,
                context=context,
                target_language=request.target_language,
                modified_after=request.modified_after,
                exclude_child_documents=request.exclude_child_documents,
            )
        )
        self.logger.log_selection_complete(
            combinations=selection.combinations,
            candidates=selection.candidates,
            selected=len(selection),
        )
        self.logger.log_records_dropped(selection.dropped)

        envelope = ExportEnvelope(
            name=site.name,
            site_package_key=site.site_package_key,
            workspace=request.workspace,
            source_language=request.source_language,
            target_language=request.target_language,
            modified_after=request.modified_after,
        )
        return envelope, selection
