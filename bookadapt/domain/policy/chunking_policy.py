from dataclasses import dataclass


@dataclass(frozen=True)
class ChunkingPolicy:
    """Policy for sentence-aligned chunking bounded by character count."""

    max_chars: int = 1000
    sentence_separator: str = ". "

    def __post_init__(self) -> None:
        """Validate chunking policy."""
        if self.max_chars < 1:
            raise ValueError(f"max_chars must be >= 1, got {self.max_chars}")
