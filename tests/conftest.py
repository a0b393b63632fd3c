import copy
import json
from pathlib import Path

import pytest

from trados_exchange.application.export_use_case import (
    ExportDependencies,
    ExportService,
)
from trados_exchange.infrastructure.io.content_xml import ContentXmlSerializer
from trados_exchange.infrastructure.io.output_file import AtomicFileOutput
from trados_exchange.infrastructure.logging import NullLogger
from trados_exchange.infrastructure.repositories import SnapshotContentRepository

FIXTURES_DIR = Path(__file__).parent / "fixtures"
ACME_SNAPSHOT = FIXTURES_DIR / "acme_snapshot.json"


@pytest.fixture(autouse=True)
def _isolated_config_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep TRADOS_* variables of the developer's shell out of the tests."""
    for name in (
        "TRADOS_SNAPSHOT",
        "TRADOS_LANGUAGE_DIMENSION",
        "TRADOS_WORKSPACE",
        "TRADOS_DOCUMENT_NODE_TYPE",
        "TRADOS_INDENT",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def snapshot_path() -> Path:
    """Path of the acme site snapshot (en and de, de falls back to en)."""
    return ACME_SNAPSHOT


@pytest.fixture
def snapshot_data() -> dict:
    """Fresh, mutable copy of the acme snapshot."""
    with ACME_SNAPSHOT.open(encoding="utf-8") as handle:
        return json.load(handle)


@pytest.fixture
def regional_snapshot_data(snapshot_data: dict) -> dict:
    """Acme site with a second ``region`` dimension.

    The home page exists twice in English (us and uk), so an English export
    holds two variants of the same node.
    """
    return {
        "sites": copy.deepcopy(snapshot_data["sites"]),
        "nodeTypes": copy.deepcopy(snapshot_data["nodeTypes"]),
        "dimensions": {
            "language": {"presets": {"en": ["en"], "de": ["de", "en"]}},
            "region": {"presets": {"us": ["us"], "uk": ["uk", "us"]}},
        },
        "nodes": [
            {"identifier": "sites", "path": "/sites", "nodeType": "unstructured"},
            {
                "identifier": "home",
                "path": "/sites/acme",
                "nodeType": "Acme.Site:Page",
                "dimensions": {"language": ["en"], "region": ["us"]},
                "properties": {"title": "Home"},
            },
            {
                "identifier": "home",
                "path": "/sites/acme",
                "nodeType": "Acme.Site:Page",
                "dimensions": {"language": ["en"], "region": ["uk"]},
                "properties": {"title": "Home (UK)"},
            },
            {
                "identifier": "home",
                "path": "/sites/acme",
                "nodeType": "Acme.Site:Page",
                "dimensions": {"language": ["de"], "region": ["us"]},
                "properties": {"title": "Startseite"},
            },
            {
                "identifier": "home-main",
                "path": "/sites/acme/main",
                "nodeType": "Neos.Neos:ContentCollection",
                "dimensions": {"language": ["en"], "region": ["us"]},
            },
        ],
    }


@pytest.fixture
def repository(snapshot_path: Path) -> SnapshotContentRepository:
    return SnapshotContentRepository.from_file(snapshot_path)


def build_export_service(
    repository: SnapshotContentRepository, logger=None, **overrides
) -> ExportService:
    """Wire an ExportService around ``repository`` without the container."""
    return ExportService(
        ExportDependencies(
            logger=logger or NullLogger(),
            node_store=repository,
            combinator=repository,
            sites=repository,
            serializer=ContentXmlSerializer(repository.node_types),
            output_files=AtomicFileOutput(),
            **overrides,
        )
    )


@pytest.fixture
def export_service(repository: SnapshotContentRepository) -> ExportService:
    return build_export_service(repository)


@pytest.fixture
def make_export_service():
    """Factory fixture for services over a custom repository or logger."""
    return build_export_service
