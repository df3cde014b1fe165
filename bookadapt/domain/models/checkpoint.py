"""Domain model for resumable adaptation checkpoints."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any


@dataclass
class AdaptationCheckpoint:
    """
    Progress of an adaptation run, enabling resume after interruption.

    Attributes:
        completed_count: Number of chunks adapted so far
        total_count: Number of chunks in the source document
        adapted_chunks: Adapted text for each completed chunk, index-aligned
        last_updated: Last checkpoint update timestamp
        target_level: Proficiency tier the chunks were adapted for (optional)
        model: Backend model that produced the chunks (optional)
        source_fingerprint: SHA256 of the source text (optional)
    """

    completed_count: int = 0
    total_count: int = 0
    adapted_chunks: list[str] = field(default_factory=list)
    last_updated: datetime = field(default_factory=datetime.now)
    target_level: str | None = None
    model: str | None = None
    source_fingerprint: str | None = None

    @classmethod
    def empty(cls) -> AdaptationCheckpoint:
        """Checkpoint representing no prior progress."""
        return cls()

    @property
    def is_empty(self) -> bool:
        return self.completed_count == 0

    @property
    def is_complete(self) -> bool:
        return self.total_count > 0 and self.completed_count == self.total_count

    @property
    def remaining(self) -> int:
        return self.total_count - self.completed_count

    def record_chunk(self, adapted_text: str) -> None:
        """Append the adapted text of the next chunk."""
        if self.completed_count >= self.total_count:
            raise ValueError(
                f"Cannot record chunk {self.completed_count + 1}: "
                f"all {self.total_count} chunks already recorded"
            )
        self.adapted_chunks.append(adapted_text)
        self.completed_count += 1
        self.last_updated = datetime.now()

    def to_dict(self) -> dict[str, Any]:
        """Serialize to JSON-compatible dict."""
        result: dict[str, Any] = {
            "completed_count": self.completed_count,
            "total_count": self.total_count,
            "adapted_chunks": list(self.adapted_chunks),
            "last_updated": self.last_updated.isoformat(),
        }
        if self.target_level is not None:
            result["target_level"] = self.target_level
        if self.model is not None:
            result["model"] = self.model
        if self.source_fingerprint is not None:
            result["source_fingerprint"] = self.source_fingerprint
        return result

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> AdaptationCheckpoint:
        """
        Deserialize from dict.

        Raises:
            ValueError: If required keys are missing or have the wrong type
        """
        if not isinstance(data, dict):
            raise ValueError(f"checkpoint must be a JSON object, got {type(data).__name__}")
        try:
            completed_count = data["completed_count"]
            total_count = data["total_count"]
            adapted_chunks = data["adapted_chunks"]
        except KeyError as e:
            raise ValueError(f"checkpoint is missing key {e}") from e

        if not isinstance(completed_count, int) or not isinstance(total_count, int):
            raise ValueError("completed_count and total_count must be integers")
        if not isinstance(adapted_chunks, list) or not all(isinstance(c, str) for c in adapted_chunks):
            raise ValueError("adapted_chunks must be a list of strings")

        last_updated = (
            datetime.fromisoformat(data["last_updated"])
            if isinstance(data.get("last_updated"), str)
            else datetime.now()
        )
        return cls(
            completed_count=completed_count,
            total_count=total_count,
            adapted_chunks=list(adapted_chunks),
            last_updated=last_updated,
            target_level=data.get("target_level"),
            model=data.get("model"),
            source_fingerprint=data.get("source_fingerprint"),
        )

    def __post_init__(self) -> None:
        """Validate checkpoint consistency."""
        if self.completed_count < 0:
            raise ValueError("completed_count must be >= 0")
        if self.total_count < 0:
            raise ValueError("total_count must be >= 0")
        if len(self.adapted_chunks) != self.completed_count:
            raise ValueError(
                f"adapted_chunks has {len(self.adapted_chunks)} entries "
                f"but completed_count is {self.completed_count}"
            )
        if self.completed_count > self.total_count:
            raise ValueError(
                f"completed_count ({self.completed_count}) exceeds total_count ({self.total_count})"
            )
