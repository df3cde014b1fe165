"""Local filesystem adapter for source text and adapted documents."""

from __future__ import annotations

import logging
from pathlib import Path

from ...application.ports.text_store import TextStorePort
from ...domain.errors import PersistenceError, SourceNotFound
from .atomic_write import atomic_write_text

logger = logging.getLogger(__name__)


class LocalTextFileAdapter(TextStorePort):
    """Reads and writes UTF-8 plain-text files."""

    def read_text(self, path: Path) -> str:
        path = Path(path)
        if not path.is_file():
            raise SourceNotFound(str(path))
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise SourceNotFound(str(path), str(e)) from e

        logger.debug(f"Read {len(text)} characters from {path}")
        return text

    def write_text(self, path: Path, content: str) -> None:
        path = Path(path)
        try:
            atomic_write_text(path, content)
        except (OSError, UnicodeError) as e:
            logger.error(f"Failed to write {path}: {e}", exc_info=True)
            raise PersistenceError(str(path), str(e)) from e

        logger.debug(f"Wrote {len(content)} characters to {path}")
