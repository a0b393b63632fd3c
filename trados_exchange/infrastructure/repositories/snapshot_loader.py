import json
from pathlib import Path

from pydantic import ValidationError

from ..io.exceptions import SnapshotError
from .snapshot_models import ContentSnapshot


def load_snapshot(path: str | Path) -> ContentSnapshot:
    file_path = Path(path)
    if not file_path.exists():
        raise SnapshotError(f"Content snapshot not found: {file_path}")
    try:
        with file_path.open("r", encoding="utf-8") as handle:
            data = json.load(handle)
    except json.JSONDecodeError as exc:
        raise SnapshotError(f"Invalid JSON in {file_path}: {exc}") from exc
    except OSError as exc:
        raise SnapshotError(f"Cannot read content snapshot {file_path}: {exc}") from exc
    return parse_snapshot(data, source=str(file_path))


def parse_snapshot(data: object, *, source: str = "snapshot") -> ContentSnapshot:
    try:
        return ContentSnapshot.model_validate(data)
    except ValidationError as exc:
        raise SnapshotError(f"Invalid content snapshot in {source}: {exc}") from exc
