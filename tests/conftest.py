"""Shared fixtures: backend stand-ins and environment isolation."""

from __future__ import annotations

import re
from collections.abc import Iterator

import pytest

from bookadapt.application.ports.text_generator import (
    GenerationOptions,
    GenerationResult,
    TextGeneratorPort,
)

_ORIGINAL_TEXT = re.compile(r'Original text:\n"(.*)"\n\nAdapted text:', re.DOTALL)


def chunk_from_prompt(prompt: str) -> str:
    """Recover the chunk text embedded in an adaptation prompt."""
    match = _ORIGINAL_TEXT.search(prompt)
    assert match is not None, "prompt does not embed the original text"
    return match.group(1)


class UppercaseGenerator(TextGeneratorPort):
    """Deterministic backend stand-in: returns the chunk upper-cased."""

    def __init__(self, *, base_url: str = "http://stub", available: bool = True) -> None:
        self.base_url = base_url
        self.available = available
        self.prompts: list[str] = []

    def generate(
        self,
        prompt: str,
        *,
        model: str,
        timeout_seconds: float,
        options: GenerationOptions | None = None,
    ) -> GenerationResult:
        self.prompts.append(prompt)
        return GenerationResult(text=chunk_from_prompt(prompt).upper(), model=model)

    def is_available(self) -> bool:
        return self.available

    @property
    def calls(self) -> int:
        return len(self.prompts)


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    for key in ("OLLAMA_BASE_URL", "OLLAMA_MODEL", "OLLAMA_TIMEOUT_SECONDS", "BOOKADAPT_CONFIG"):
        monkeypatch.delenv(key, raising=False)
    yield


@pytest.fixture
def uppercase_generator() -> UppercaseGenerator:
    return UppercaseGenerator()
