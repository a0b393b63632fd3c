"""Application layer: export use case, request models and ports."""

__all__ = []
