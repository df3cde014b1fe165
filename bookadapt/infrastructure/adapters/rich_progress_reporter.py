"""Rich-based progress reporter adapter for adaptation runs."""

from __future__ import annotations

import logging
import sys
import time

from rich.console import Console
from rich.progress import (
    BarColumn,
    MofNCompleteColumn,
    Progress,
    SpinnerColumn,
    TaskID,
    TextColumn,
    TimeElapsedColumn,
    TimeRemainingColumn,
)

from ...application.ports.progress_reporter import ProgressContext, ProgressReporterPort

logger = logging.getLogger(__name__)


class RichProgressContext:
    """Run-level progress bar using Rich."""

    def __init__(
        self,
        progress: Progress,
        task_id: TaskID,
        total_chunks: int,
    ) -> None:
        self.progress = progress
        self.task_id = task_id
        self.total_chunks = total_chunks

    def update(self, completed: int) -> None:
        self.progress.update(self.task_id, completed=completed)

    def finish(self) -> None:
        self.progress.update(self.task_id, completed=self.total_chunks)
        self.progress.stop()

    def fail(self, error: str) -> None:
        self.progress.update(
            self.task_id,
            description=f"[red]Failed[/red]: {error[:60]}",
        )
        self.progress.stop()


class LoggingProgressContext:
    """Fallback progress context for non-interactive mode using logging."""

    def __init__(
        self,
        total_chunks: int,
        completed: int,
        description: str,
    ) -> None:
        self.total_chunks = total_chunks
        self.description = description
        self.start_completed = completed
        self.start_time = time.time()
        logger.info(f"Starting: {description} ({completed}/{total_chunks} chunks already done)")

    def update(self, completed: int) -> None:
        elapsed = time.time() - self.start_time
        percentage = (completed / self.total_chunks * 100) if self.total_chunks > 0 else 0
        done_this_run = completed - self.start_completed

        # Estimate time remaining from chunks done in this run only
        if done_this_run > 0:
            estimated_remaining = elapsed / done_this_run * (self.total_chunks - completed)
            logger.info(
                f"Progress: {completed}/{self.total_chunks} chunks "
                f"({percentage:.1f}%) - Elapsed: {elapsed:.1f}s, "
                f"Estimated remaining: {estimated_remaining:.1f}s"
            )
        else:
            logger.info(
                f"Progress: {completed}/{self.total_chunks} chunks "
                f"({percentage:.1f}%) - Elapsed: {elapsed:.1f}s"
            )

    def finish(self) -> None:
        elapsed = time.time() - self.start_time
        logger.info(f"Completed: {self.description} - {self.total_chunks} chunks in {elapsed:.1f}s")

    def fail(self, error: str) -> None:
        logger.info(f"Stopped: {self.description} - {error}")


class RichProgressReporterAdapter(ProgressReporterPort):
    """
    Progress reporter rendering a Rich progress bar.

    Falls back to periodic log lines when stdout is not a terminal.
    """

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()
        self.is_interactive = self.console.is_terminal and sys.stdout.isatty()

    def start_run(
        self,
        total_chunks: int,
        completed: int = 0,
        description: str = "Adapting chunks",
    ) -> ProgressContext:
        if not self.is_interactive:
            return LoggingProgressContext(total_chunks, completed, description)

        progress = Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            BarColumn(),
            MofNCompleteColumn(),
            TimeElapsedColumn(),
            TimeRemainingColumn(),
            console=self.console,
        )
        progress.start()
        task_id = progress.add_task(description, total=total_chunks, completed=completed)
        return RichProgressContext(progress, task_id, total_chunks)
