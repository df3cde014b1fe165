"""Domain models for book adaptation."""

from .adapted_document import AdaptedDocument
from .checkpoint import AdaptationCheckpoint
from .chunk import Chunk

__all__ = [
    "AdaptedDocument",
    "AdaptationCheckpoint",
    "Chunk",
]
