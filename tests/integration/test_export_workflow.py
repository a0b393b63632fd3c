"""End-to-end export workflow tests.

Builds a repository from a snapshot, exports through the container-wired
service, writes the file and reads it back.
"""

from xml.etree import ElementTree as ET

import pytest

from trados_exchange.config import ExchangeConfig
from trados_exchange.infrastructure import DependencyContainer
from trados_exchange.infrastructure.io.content_xml import read_export, read_export_string
from trados_exchange.infrastructure.repositories import SnapshotContentRepository


@pytest.fixture
def container(snapshot_path):
    return DependencyContainer(
        config=ExchangeConfig(snapshot_path=snapshot_path), use_null_logger=True
    )


@pytest.mark.integration
class TestRoundTrip:
    """What is written can be read back with the same content."""

    def test_english_site_round_trip(self, container, tmp_path):
        target = tmp_path / "acme-en.xml"

        container.create_export_service().export_to_file(target, "acme", "en", "de")
        document = read_export(target)

        assert document.name == "Acme Corp"
        assert document.source_language == "en"
        assert document.target_language == "de"

        welcome = document.find_node("text-welcome")
        assert welcome.node_name == "text-welcome"
        assert len(welcome.variants) == 1
        assert welcome.variants[0].node_type == "Acme.Site:Text"
        assert welcome.variants[0].dimensions == {"language": ["en"]}
        assert welcome.variants[0].properties == {"text": "Welcome <b>friends</b>"}

        team = document.find_node("text-team")
        assert team.variants[0].properties == {"text": "Our ]]> team"}

        about = document.find_node("about")
        assert about.variants[0].properties == {"title": "About"}

    def test_every_node_appears_once(self, container):
        document = read_export_string(
            container.create_export_service().export_to_string("acme", "en")
        )

        identifiers = [node.identifier for node in document.nodes]
        assert len(identifiers) == len(set(identifiers))

    def test_german_export_mixes_fallback_variants(self, container):
        document = read_export_string(
            container.create_export_service().export_to_string("acme", "de")
        )

        languages = {
            node.identifier: node.variants[0].language("language")
            for node in document.nodes
        }
        assert languages == {
            "home": "de",
            "home-main": "en",
            "text-de-only": "de",
            "text-welcome": "de",
        }
        assert document.find_node("home").variants[0].properties == {
            "title": "Startseite"
        }

    def test_regional_variants_grouped_under_one_node(self, regional_snapshot_data):
        container = DependencyContainer(use_null_logger=True)
        container.override_content_repository(
            SnapshotContentRepository.from_mapping(regional_snapshot_data)
        )

        document = read_export_string(
            container.create_export_service().export_to_string("acme", "en")
        )

        assert [node.identifier for node in document.nodes] == ["home", "home-main"]
        home = document.find_node("home")
        assert [variant.dimensions["region"] for variant in home.variants] == [
            ["uk"],
            ["us"],
        ]
        assert [variant.properties["title"] for variant in home.variants] == [
            "Home (UK)",
            "Home",
        ]
        assert document.variant_count == 3

    def test_hidden_regional_parent_keeps_other_region(self, regional_snapshot_data):
        text = {
            "identifier": "text",
            "path": "/sites/acme/main/text",
            "nodeType": "Acme.Site:Text",
            "properties": {"text": "Hello"},
        }
        regional_snapshot_data["nodes"] += [
            {
                "identifier": "home-main",
                "path": "/sites/acme/main",
                "nodeType": "Neos.Neos:ContentCollection",
                "dimensions": {"language": ["en"], "region": ["uk"]},
                "hidden": True,
            },
            {**text, "dimensions": {"language": ["en"], "region": ["us"]}},
            {**text, "dimensions": {"language": ["en"], "region": ["uk"]}},
        ]
        container = DependencyContainer(use_null_logger=True)
        container.override_content_repository(
            SnapshotContentRepository.from_mapping(regional_snapshot_data)
        )

        document = read_export_string(
            container.create_export_service().export_to_string("acme", "en")
        )

        assert [node.identifier for node in document.nodes] == [
            "home",
            "home-main",
            "text",
        ]
        text_variants = document.find_node("text").variants
        assert [variant.dimensions["region"] for variant in text_variants] == [["us"]]

    def test_subtype_can_export_property_skipped_by_super_type(self, snapshot_data):
        snapshot_data["nodeTypes"]["Acme.Site:Page"]["options"] = {
            "export": {"properties": {"uriPathSegment": {"skip": False}}}
        }
        container = DependencyContainer(use_null_logger=True)
        container.override_content_repository(
            SnapshotContentRepository.from_mapping(snapshot_data)
        )

        document = read_export_string(
            container.create_export_service().export_to_string("acme", "en")
        )

        home = document.find_node("home").variants[0]
        assert home.properties["uriPathSegment"] == "home"


@pytest.mark.integration
class TestBoundaries:
    def test_subtree_without_visible_nodes(self, container):
        document = container.create_export_service().export_to_string(
            "acme/secret", "en"
        )

        root = ET.fromstring(document)
        assert root.find("nodes").get("formatVersion") == "1.0"
        assert list(root.find("nodes")) == []
        assert '<nodes formatVersion="1.0"/>' in document

    def test_leaf_start_node(self, container):
        document = read_export_string(
            container.create_export_service().export_to_string(
                "acme/main/text-welcome", "en"
            )
        )

        assert [node.identifier for node in document.nodes] == ["text-welcome"]

    def test_repeated_exports_are_byte_identical(self, container, tmp_path):
        service = container.create_export_service()
        first = tmp_path / "first.xml"
        second = tmp_path / "second.xml"

        service.export_to_file(first, "acme", "en")
        service.export_to_file(second, "acme", "en")

        assert first.read_bytes() == second.read_bytes()

    def test_output_is_indented(self, container):
        document = container.create_export_service().export_to_string("acme", "en")

        assert "\n  <nodes" in document
        assert "\n    <node " in document
        assert document.endswith("</content>\n")

    def test_indent_from_config(self, snapshot_path):
        container = DependencyContainer(
            config=ExchangeConfig(snapshot_path=snapshot_path, indent=0),
            use_null_logger=True,
        )

        document = container.create_export_service().export_to_string("acme", "en")

        assert document.count("\n") == 2
