"""Port interface for reporting progress during an adaptation run."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Protocol


class ProgressContext(Protocol):
    """Context for run-level progress."""

    def update(self, completed: int) -> None:
        """Update progress with number of completed chunks."""
        ...

    def finish(self) -> None:
        """Mark run as complete."""
        ...

    def fail(self, error: str) -> None:
        """
        Mark run as failed.

        Args:
            error: Error message
        """
        ...


class ProgressReporterPort(ABC):
    """Port for reporting progress while chunks are adapted."""

    @abstractmethod
    def start_run(
        self,
        total_chunks: int,
        completed: int = 0,
        description: str = "Adapting chunks",
    ) -> ProgressContext:
        """
        Start progress reporting for a run.

        Args:
            total_chunks: Total number of chunks in the document
            completed: Chunks already completed by a previous run
            description: Description for progress bar

        Returns:
            ProgressContext for updating progress
        """
        pass
