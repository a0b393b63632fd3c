"""Domain layer.

Entities, exceptions and the selection logic of the export. Nothing in here
talks to files, consoles or concrete stores.
"""

__all__ = []
