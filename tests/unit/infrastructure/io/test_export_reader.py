"""Tests for reading export documents back into typed models."""

import pytest

from trados_exchange.infrastructure.io.content_xml import (
    read_export,
    read_export_string,
)
from trados_exchange.infrastructure.io.exceptions import (
    ExportFormatError,
    FormatVersionMismatchError,
)

DOCUMENT = """<?xml version="1.0" encoding="UTF-8"?>
<content name="Acme Corp" sitePackageKey="Acme.Site" workspace="live" sourceLanguage="en" targetLanguage="de">
  <nodes formatVersion="1.0">
    <node identifier="home" nodeName="acme">
      <variant nodeType="Acme.Site:Page">
        <dimensions>
          <language>en</language>
        </dimensions>
        <properties>
          <title type="string"><![CDATA[Home ]]]]><![CDATA[> page]]></title>
          <layout type="reference">ignored</layout>
          <teaser type="string"/>
        </properties>
      </variant>
    </node>
  </nodes>
</content>
"""


class TestReadExportString:
    """Parsing a well-formed export."""

    def test_header(self):
        document = read_export_string(DOCUMENT)

        assert document.name == "Acme Corp"
        assert document.site_package_key == "Acme.Site"
        assert document.workspace == "live"
        assert document.source_language == "en"
        assert document.target_language == "de"
        assert document.modified_after is None
        assert document.format_version == "1.0"

    def test_nodes_and_variants(self):
        document = read_export_string(DOCUMENT)

        node = document.find_node("home")
        assert node is not None
        assert node.node_name == "acme"
        assert len(node.variants) == 1
        assert document.variant_count == 1

        variant = node.variants[0]
        assert variant.node_type == "Acme.Site:Page"
        assert variant.dimensions == {"language": ["en"]}
        assert variant.language("language") == "en"

    def test_only_string_properties_are_read(self):
        variant = read_export_string(DOCUMENT).nodes[0].variants[0]

        assert variant.properties == {"title": "Home ]]> page", "teaser": ""}

    def test_unknown_node_lookup(self):
        assert read_export_string(DOCUMENT).find_node("missing") is None


class TestReadExportErrors:
    """Malformed or incompatible documents raise ExportFormatError."""

    def test_version_mismatch(self):
        with pytest.raises(FormatVersionMismatchError) as excinfo:
            read_export_string(DOCUMENT.replace('formatVersion="1.0"', 'formatVersion="2.0"'))

        assert excinfo.value.found == "2.0"
        assert excinfo.value.expected == "1.0"

    def test_missing_version(self):
        with pytest.raises(FormatVersionMismatchError):
            read_export_string(DOCUMENT.replace(' formatVersion="1.0"', ""))

    def test_wrong_root_element(self):
        with pytest.raises(ExportFormatError, match="<content>"):
            read_export_string("<export/>")

    def test_missing_required_attribute(self):
        with pytest.raises(ExportFormatError, match="sitePackageKey"):
            read_export_string(DOCUMENT.replace('sitePackageKey="Acme.Site" ', ""))

    def test_not_well_formed(self):
        with pytest.raises(ExportFormatError):
            read_export_string("<content><nodes>")

    def test_missing_file(self, tmp_path):
        with pytest.raises(ExportFormatError):
            read_export(tmp_path / "missing.xml")


class TestReadExportFile:
    def test_reads_file(self, tmp_path):
        path = tmp_path / "export.xml"
        path.write_text(DOCUMENT, encoding="utf-8")

        document = read_export(path)

        assert [node.identifier for node in document.nodes] == ["home"]
