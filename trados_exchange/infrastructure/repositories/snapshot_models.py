"""Schema of the JSON content snapshot.

A snapshot is a dump of one content repository: its sites, the configured
content dimensions, the node type configuration and every node variant.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from ...constants import Defaults


class _SnapshotModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class SiteModel(_SnapshotModel):
    node_name: str = Field(alias="nodeName", min_length=1)
    name: str
    site_package_key: str = Field(alias="siteResourcesPackageKey")


class DimensionModel(_SnapshotModel):
    presets: dict[str, list[str]] = Field(min_length=1)


class PropertyModel(_SnapshotModel):
    type: str | None = None


class PropertyExportOptionModel(_SnapshotModel):
    skip: bool | None = None


class ExportOptionsModel(_SnapshotModel):
    properties: dict[str, PropertyExportOptionModel] = Field(default_factory=dict)


class NodeTypeOptionsModel(_SnapshotModel):
    export: ExportOptionsModel = Field(default_factory=ExportOptionsModel)


class NodeTypeModel(_SnapshotModel):
    super_types: list[str] = Field(default_factory=list, alias="superTypes")
    properties: dict[str, PropertyModel] = Field(default_factory=dict)
    options: NodeTypeOptionsModel = Field(default_factory=NodeTypeOptionsModel)


class NodeModel(_SnapshotModel):
    identifier: str = Field(min_length=1)
    path: str = Field(pattern=r"^/")
    node_type: str = Field(alias="nodeType")
    workspace: str = Defaults.WORKSPACE
    dimensions: dict[str, list[str]] = Field(default_factory=dict)
    properties: dict[str, Any] = Field(default_factory=dict)
    hidden: bool = False
    removed: bool = False
    access_roles: list[str] = Field(default_factory=list, alias="accessRoles")


class ContentSnapshot(_SnapshotModel):
    sites: list[SiteModel] = Field(default_factory=list)
    dimensions: dict[str, DimensionModel] = Field(default_factory=dict)
    node_types: dict[str, NodeTypeModel] = Field(
        default_factory=dict, alias="nodeTypes"
    )
    nodes: list[NodeModel] = Field(default_factory=list)
