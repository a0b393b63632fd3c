from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console

from ..application.export_use_case import ExportDependencies, ExportService
from ..config import ExchangeConfig
from .io.content_xml.serializer import ContentXmlSerializer
from .io.output_file import AtomicFileOutput
from .logging.console_logger import ConsoleLogger
from .logging.null_logger import NullLogger
from .repositories.snapshot_repository import SnapshotContentRepository

if TYPE_CHECKING:
    from ..application.ports.services import (
        ContentSerializerPort,
        LoggerPort,
        OutputFilePort,
    )
    from .repositories.node_type_registry import NodeTypeRegistry


class DependencyContainer:
    pass

    def __init__(
        self,
        config: ExchangeConfig | None = None,
        verbose: int = 0,
        console: Console | None = None,
        use_null_logger: bool = False,
    ) -> None:
        super().__init__()
        self.config = config or ExchangeConfig()
        self.verbose = verbose
        self.console = console or Console(stderr=True)
        self.use_null_logger = use_null_logger
        self._logger_instance: LoggerPort | None = None
        self._content_repository_instance: SnapshotContentRepository | None = None
        self._serializer_instance: ContentSerializerPort | None = None
        self._output_files_instance: OutputFilePort | None = None
        self._export_service_instance: ExportService | None = None

    def create_logger(self) -> LoggerPort:
        if self._logger_instance is None:
            if self.use_null_logger:
                self._logger_instance = NullLogger()
            else:
                self._logger_instance = ConsoleLogger(
                    console=self.console, verbosity=self.verbose
                )
        return self._logger_instance

    def create_content_repository(self) -> SnapshotContentRepository:
        if self._content_repository_instance is None:
            self._content_repository_instance = SnapshotContentRepository.from_file(
                self.config.snapshot_path
            )
        return self._content_repository_instance

    def create_node_type_registry(self) -> NodeTypeRegistry:
        return self.create_content_repository().node_types

    def create_serializer(self) -> ContentSerializerPort:
        if self._serializer_instance is None:
            self._serializer_instance = ContentXmlSerializer(
                self.create_node_type_registry(), indent=self.config.indent
            )
        return self._serializer_instance

    def create_output_files(self) -> OutputFilePort:
        if self._output_files_instance is None:
            self._output_files_instance = AtomicFileOutput()
        return self._output_files_instance

    def create_export_service(self) -> ExportService:
        if self._export_service_instance is None:
            repository = self.create_content_repository()
            self._export_service_instance = ExportService(
                ExportDependencies(
                    logger=self.create_logger(),
                    node_store=repository,
                    combinator=repository,
                    sites=repository,
                    serializer=self.create_serializer(),
                    output_files=self.create_output_files(),
                    language_dimension=self.config.language_dimension,
                    document_node_type=self.config.document_node_type,
                    workspace=self.config.workspace,
                )
            )
        return self._export_service_instance

    def override_content_repository(self, repository: SnapshotContentRepository) -> None:
        self._content_repository_instance = repository
        self._serializer_instance = None
        self._export_service_instance = None

    def override_logger(self, logger: LoggerPort) -> None:
        self._logger_instance = logger
        self._export_service_instance = None


def create_default_container(verbose: int = 0) -> DependencyContainer:
    return DependencyContainer(config=ExchangeConfig.from_env(), verbose=verbose)
