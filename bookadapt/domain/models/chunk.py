from dataclasses import dataclass


@dataclass(frozen=True)
class Chunk:
    """
    Sentence-aligned span of source text sent to the backend as one unit.

    Fields:
        index: Position of the chunk within the document (0-based)
        text: Chunk text (sentence bodies joined by ". ")
    """

    index: int
    text: str

    def __post_init__(self) -> None:
        """Validate chunk data."""
        if self.index < 0:
            raise ValueError(f"index must be >= 0, got {self.index}")
        if not self.text.strip():
            raise ValueError("text must be non-empty")

    def __len__(self) -> int:
        return len(self.text)
