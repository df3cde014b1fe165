from typing import Protocol, runtime_checkable

from ...domain.policy.chunking_policy import ChunkingPolicy
from ...domain.models.chunk import Chunk


@runtime_checkable
class ChunkerPort(Protocol):
    """
    Protocol for splitting source text into ordered, bounded chunks.

    Implementation Requirements:
    - Must preserve source order (chunk.index is 0-based and contiguous)
    - Must never split a sentence; a single oversized sentence forms its own chunk
    - Must keep every other chunk within policy.max_chars
    - Must drop empty/whitespace-only sentences
    """

    def chunk(self, text: str, policy: ChunkingPolicy) -> list[Chunk]:
        """
        Chunk source text according to policy.

        Args:
            text: Full source text
            policy: ChunkingPolicy with max_chars and sentence separator

        Returns:
            List of Chunk objects (empty for empty input)
        """
        ...
