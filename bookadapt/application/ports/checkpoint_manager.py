"""Port interface for managing checkpoint files."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ...domain.models.checkpoint import AdaptationCheckpoint


class CheckpointManagerPort(ABC):
    """Port for managing checkpoint files."""

    @abstractmethod
    def save_checkpoint(
        self,
        checkpoint: AdaptationCheckpoint,
        path: Path,
    ) -> None:
        """
        Save checkpoint to file atomically (write to temp file, then rename).

        Args:
            checkpoint: AdaptationCheckpoint domain entity
            path: File path where checkpoint should be saved

        Raises:
            PersistenceError: If save fails
        """
        pass

    @abstractmethod
    def load_checkpoint(
        self,
        path: Path,
    ) -> AdaptationCheckpoint:
        """
        Load checkpoint from file.

        Args:
            path: File path to checkpoint file

        Returns:
            AdaptationCheckpoint; an empty checkpoint if the file is missing or corrupt
        """
        pass

    @abstractmethod
    def checkpoint_exists(
        self,
        path: Path,
    ) -> bool:
        """
        Check if checkpoint file exists.

        Args:
            path: File path to check

        Returns:
            True if file exists, False otherwise
        """
        pass
