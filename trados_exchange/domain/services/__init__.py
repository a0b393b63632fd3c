"""Domain services: variant selection and subtree restriction."""

from .selection_service import (
    SelectionRequest,
    SelectionResult,
    SelectionService,
    order_records,
)
from .tree_restriction import collect_content_nodes, exclude_type_filter

__all__ = [
    "SelectionRequest",
    "SelectionResult",
    "SelectionService",
    "collect_content_nodes",
    "exclude_type_filter",
    "order_records",
]
