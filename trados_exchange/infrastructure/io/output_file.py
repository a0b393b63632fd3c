from __future__ import annotations

from contextlib import contextmanager
import os
from pathlib import Path
import tempfile
from typing import TYPE_CHECKING

from typing_extensions import override

from ...application.ports.services import OutputFilePort
from .exceptions import ExportWriteError

if TYPE_CHECKING:
    from collections.abc import Iterator
    from contextlib import AbstractContextManager
    from typing import TextIO


@contextmanager
def atomic_text_output(path: str | Path, encoding: str = "utf-8") -> Iterator[TextIO]:
    """Write to a temporary sibling of ``path`` and move it into place.

    The target only appears once the block completes. On any exception the
    temporary file is removed and ``path`` is left untouched.
    """
    target = Path(path)
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        fd, temp_name = tempfile.mkstemp(
            prefix=f".{target.name}.", suffix=".tmp", dir=target.parent
        )
    except OSError as e:
        raise ExportWriteError(f"Cannot open {target} for writing: {e}") from e

    temp_path = Path(temp_name)
    try:
        with os.fdopen(fd, "w", encoding=encoding, newline="\n") as handle:
            yield handle
        os.replace(temp_path, target)
    except OSError as e:
        temp_path.unlink(missing_ok=True)
        raise ExportWriteError(f"Cannot write {target}: {e}") from e
    except BaseException:
        temp_path.unlink(missing_ok=True)
        raise


class AtomicFileOutput(OutputFilePort):
    pass

    def __init__(self, encoding: str = "utf-8") -> None:
        super().__init__()
        self.encoding = encoding

    @override
    def open_text(self, path: Path) -> AbstractContextManager[TextIO]:
        return atomic_text_output(path, encoding=self.encoding)
