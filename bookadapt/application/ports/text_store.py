"""Port interface for reading source text and writing adapted documents."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path


class TextStorePort(ABC):
    """Port for plain-text document I/O."""

    @abstractmethod
    def read_text(self, path: Path) -> str:
        """
        Read a whole text file into memory.

        Raises:
            SourceNotFound: If the path is missing, not a file, or unreadable
        """
        pass

    @abstractmethod
    def write_text(self, path: Path, content: str) -> None:
        """
        Write content to path, creating parent directories as needed.

        The file is replaced in one step; readers never observe a partial file.

        Raises:
            PersistenceError: If the write fails
        """
        pass
