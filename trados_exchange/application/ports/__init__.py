"""Port interfaces for external dependencies.

This module defines abstract interfaces (protocols) that external
adapters must implement. This enables dependency injection and testing.
"""

from .repositories import (
    DimensionCombinatorPort,
    NodeStoreReaderPort,
    NodeTypeRegistryPort,
    SiteRepositoryPort,
)
from .services import ContentSerializerPort, LoggerPort, OutputFilePort

__all__ = [
    "ContentSerializerPort",
    "DimensionCombinatorPort",
    "LoggerPort",
    "NodeStoreReaderPort",
    "NodeTypeRegistryPort",
    "OutputFilePort",
    "SiteRepositoryPort",
]
