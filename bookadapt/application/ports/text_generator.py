"""Port interface for the external text-generation backend."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class GenerationResult:
    """
    Raw output of one generation call.

    Fields:
        text: Generated text exactly as returned by the backend (may be empty)
        model: Model that produced the text
        duration_seconds: Wall-clock time of the call
    """

    text: str
    model: str
    duration_seconds: float = 0.0


@dataclass(frozen=True)
class GenerationOptions:
    """Sampling options forwarded to the backend."""

    temperature: float = 0.7
    max_tokens: int = 2000


class TextGeneratorPort(ABC):
    """Port for a synchronous, fallible text-generation backend."""

    @abstractmethod
    def generate(
        self,
        prompt: str,
        *,
        model: str,
        timeout_seconds: float,
        options: GenerationOptions | None = None,
    ) -> GenerationResult:
        """
        Generate text for a prompt, blocking until the backend answers.

        Args:
            prompt: Full instruction text
            model: Backend model name
            timeout_seconds: Upper bound on the call duration
            options: Sampling options (backend defaults if None)

        Returns:
            GenerationResult with the raw generated text

        Raises:
            BackendUnavailable: If the backend cannot be reached or times out
            BackendError: If the backend answers with a non-success status
        """
        pass

    @abstractmethod
    def is_available(self) -> bool:
        """
        Check backend reachability.

        Returns:
            True if the backend health endpoint answered successfully; never raises
        """
        pass
