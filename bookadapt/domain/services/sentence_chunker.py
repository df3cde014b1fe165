"""Domain service splitting source text into sentence-aligned chunks."""

from __future__ import annotations

import re

from ..models.chunk import Chunk
from ..policy.chunking_policy import ChunkingPolicy

SENTENCE_BOUNDARY = re.compile(r"[.!?]+")


def split_sentences(text: str) -> list[str]:
    """
    Split text into sentence bodies.

    Terminal punctuation is consumed by the split and not preserved;
    whitespace-only sentences are dropped.
    """
    return [part.strip() for part in SENTENCE_BOUNDARY.split(text) if part.strip()]


class SentenceChunker:
    """
    Greedy sentence packer.

    Sentences are accumulated into the current chunk until appending the next
    one (with its separator) would exceed ``policy.max_chars``; then a new
    chunk is started. A sentence longer than the bound becomes its own
    oversized chunk and is never split. This service is pure and deterministic.
    """

    def chunk(self, text: str, policy: ChunkingPolicy) -> list[Chunk]:
        chunks: list[Chunk] = []
        current = ""

        for sentence in split_sentences(text):
            if not current:
                current = sentence
                continue

            candidate = f"{current}{policy.sentence_separator}{sentence}"
            if len(candidate) > policy.max_chars:
                chunks.append(Chunk(index=len(chunks), text=current))
                current = sentence
            else:
                current = candidate

        if current:
            chunks.append(Chunk(index=len(chunks), text=current))

        return chunks
