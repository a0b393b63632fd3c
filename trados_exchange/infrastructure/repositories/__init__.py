"""Repository adapters: JSON content snapshot and node type registry."""

from .node_type_registry import NodeTypeRegistry
from .snapshot_loader import load_snapshot, parse_snapshot
from .snapshot_models import ContentSnapshot
from .snapshot_repository import SnapshotContentRepository, dimension_rank

__all__ = [
    "ContentSnapshot",
    "NodeTypeRegistry",
    "SnapshotContentRepository",
    "dimension_rank",
    "load_snapshot",
    "parse_snapshot",
]
