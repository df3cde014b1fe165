"""Domain service for source-text fingerprints."""

from __future__ import annotations

import hashlib

from ..policy.chunking_policy import ChunkingPolicy


class ContentFingerprintService:
    """
    Computes and compares fingerprints of source text.

    A fingerprint covers the text and the chunking bound, so a checkpoint
    recorded for a different source or a different bound never matches.
    This service is pure (no I/O) and deterministic.
    """

    @staticmethod
    def compute_fingerprint(text: str, policy: ChunkingPolicy) -> str:
        """
        Compute SHA256 fingerprint of source text plus chunking bound.

        Args:
            text: Full source text
            policy: Chunking policy used to split the text

        Returns:
            Hex digest string
        """
        hash_obj = hashlib.sha256()
        hash_obj.update(text.encode("utf-8"))
        hash_obj.update(str(policy.max_chars).encode("utf-8"))
        return hash_obj.hexdigest()

    @staticmethod
    def is_unchanged(stored: str | None, computed: str) -> bool:
        """
        Check whether the source is unchanged.

        Checkpoints written without a fingerprint are accepted as unchanged;
        their chunk count is still checked by the caller.
        """
        if stored is None:
            return True
        return stored == computed
