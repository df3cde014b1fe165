"""Atomic file replacement shared by the checkpoint and document writers."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path


def atomic_write_text(path: Path, content: str) -> None:
    """
    Replace path with content in one step.

    Writes to a temp file in the target directory, fsyncs it, then renames it
    over the target. Parent directories are created as needed. On any failure
    the temp file is removed and the exception propagates; the previous file
    (if any) is left untouched.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    temp_path: Path | None = None
    try:
        with tempfile.NamedTemporaryFile(
            mode="w",
            encoding="utf-8",
            dir=path.parent,
            prefix=f".{path.name}.tmp.",
            delete=False,
        ) as temp_file:
            temp_path = Path(temp_file.name)
            temp_file.write(content)
            temp_file.flush()
            os.fsync(temp_file.fileno())

        os.replace(temp_path, path)
    except BaseException:
        if temp_path is not None and temp_path.exists():
            temp_path.unlink()
        raise
