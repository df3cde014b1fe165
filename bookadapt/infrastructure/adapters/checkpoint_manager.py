"""Checkpoint manager adapter for atomic checkpoint file I/O."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from ...application.ports.checkpoint_manager import CheckpointManagerPort
from ...domain.errors import CorruptCheckpoint, PersistenceError
from ...domain.models.checkpoint import AdaptationCheckpoint
from .atomic_write import atomic_write_text

logger = logging.getLogger(__name__)


class JsonCheckpointManagerAdapter(CheckpointManagerPort):
    """Adapter storing checkpoints as JSON sidecar files with atomic writes."""

    def checkpoint_exists(self, path: Path) -> bool:
        return Path(path).exists()

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
        path = Path(path)
        content = json.dumps(checkpoint.to_dict(), indent=2, ensure_ascii=False)
        try:
            atomic_write_text(path, content)
        except (OSError, UnicodeError) as e:
            logger.error(f"Failed to save checkpoint to {path}: {e}", exc_info=True)
            raise PersistenceError(str(path), str(e)) from e

        logger.debug(
            f"Checkpoint saved: {path}",
            extra={
                "path": str(path),
                "completed": checkpoint.completed_count,
                "total": checkpoint.total_count,
            },
        )

    def load_checkpoint(self, path: Path) -> AdaptationCheckpoint:
        """
        Load checkpoint from file.

        A missing file means no prior progress. A corrupt file is logged and
        also treated as no prior progress; this method never raises.

        Args:
            path: File path to checkpoint file

        Returns:
            AdaptationCheckpoint (empty if missing or corrupt)
        """
        path = Path(path)

        if not path.exists():
            logger.debug(f"Checkpoint file not found: {path}")
            return AdaptationCheckpoint.empty()

        try:
            checkpoint = self._read(path)
        except CorruptCheckpoint as e:
            logger.warning(f"{e}. Starting fresh.", extra={"path": str(path)})
            return AdaptationCheckpoint.empty()

        logger.debug(
            f"Checkpoint loaded: {path}",
            extra={
                "path": str(path),
                "completed": checkpoint.completed_count,
                "total": checkpoint.total_count,
            },
        )
        return checkpoint

    def _read(self, path: Path) -> AdaptationCheckpoint:
        """
        Parse a checkpoint file.

        Raises:
            CorruptCheckpoint: If the file cannot be read, decoded or validated
        """
        try:
            with path.open("r", encoding="utf-8") as f:
                checkpoint_dict = json.load(f)
        except json.JSONDecodeError as e:
            raise CorruptCheckpoint(str(path), f"invalid JSON: {e}") from e
        except (OSError, UnicodeDecodeError) as e:
            raise CorruptCheckpoint(str(path), str(e)) from e
        except RecursionError as e:
            raise CorruptCheckpoint(str(path), "JSON nested too deeply") from e

        try:
            return AdaptationCheckpoint.from_dict(checkpoint_dict)
        except ValueError as e:
            raise CorruptCheckpoint(str(path), str(e)) from e
