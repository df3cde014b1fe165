from pathlib import Path

import pytest
from pydantic import ValidationError

from bookadapt.application.dto.adaptation import (
    DEFAULT_MODEL,
    AdaptationRequest,
    checkpoint_path_for,
)
from bookadapt.domain.policy.chunking_policy import ChunkingPolicy
from bookadapt.domain.services.content_fingerprint import ContentFingerprintService
from bookadapt.domain.types import ProficiencyLevel
from bookadapt.infrastructure.config.settings import Settings


def test_policy_default_values():
    policy = ChunkingPolicy()
    assert policy.max_chars == 1000
    assert policy.sentence_separator == ". "


def test_request_defaults():
    request = AdaptationRequest(source_path="book.txt", output_path="books/adapted_b1.txt")

    assert request.level is ProficiencyLevel.B1
    assert request.chunk_size == 1000
    assert request.model == DEFAULT_MODEL
    assert request.modernize is True
    assert request.pause_seconds == 0.5
    assert request.source_path == Path("book.txt")


def test_request_is_immutable():
    request = AdaptationRequest(source_path="book.txt", output_path="out.txt")

    with pytest.raises(ValidationError):
        request.level = ProficiencyLevel.A1


@pytest.mark.parametrize("chunk_size", [0, -5])
def test_request_rejects_non_positive_chunk_size(chunk_size):
    with pytest.raises(ValidationError):
        AdaptationRequest(source_path="book.txt", output_path="out.txt", chunk_size=chunk_size)


def test_checkpoint_sits_next_to_output():
    assert checkpoint_path_for(Path("books/adapted_b1.txt")) == Path("books/adapted_b1_progress.json")
    assert checkpoint_path_for(Path("out")) == Path("out_progress.json")
    request = AdaptationRequest(source_path="book.txt", output_path="/tmp/x/a2.md")
    assert request.checkpoint_path == Path("/tmp/x/a2_progress.json")


def test_fingerprint_depends_on_text_and_bound():
    small = ChunkingPolicy(max_chars=20)
    large = ChunkingPolicy(max_chars=1000)

    base = ContentFingerprintService.compute_fingerprint("The cat sat.", small)

    assert base == ContentFingerprintService.compute_fingerprint("The cat sat.", small)
    assert base != ContentFingerprintService.compute_fingerprint("The dog sat.", small)
    assert base != ContentFingerprintService.compute_fingerprint("The cat sat.", large)
    assert ContentFingerprintService.is_unchanged(None, base)
    assert not ContentFingerprintService.is_unchanged("other", base)


class TestSettings:
    """Settings loading from bookadapt.toml."""

    def test_missing_file_gives_defaults(self, tmp_path: Path):
        settings = Settings.from_toml(tmp_path / "absent.toml")

        assert settings.ollama.base_url == "http://127.0.0.1:11434"
        assert settings.ollama.model == DEFAULT_MODEL
        assert settings.chunking.max_chars == 1000
        assert settings.adaptation.level is ProficiencyLevel.B1
        assert settings.paths.output == "./books/adapted_b1.txt"

    def test_file_values_are_loaded(self, tmp_path: Path):
        config = tmp_path / "bookadapt.toml"
        config.write_text(
            '[ollama]\nmodel = "llama2"\ntimeout_seconds = 60\n'
            "[chunking]\nmax_chars = 500\n"
            '[adaptation]\nlevel = "a2"\nmodernize = false\npause_seconds = 0\n'
            '[paths]\ninput = "in.txt"\n'
        )

        settings = Settings.from_toml(config)

        assert settings.ollama.model == "llama2"
        assert settings.ollama.timeout_seconds == 60
        assert settings.chunking.max_chars == 500
        assert settings.adaptation.level is ProficiencyLevel.A2
        assert settings.adaptation.modernize is False
        assert settings.adaptation.pause_seconds == 0
        assert settings.paths.input == "in.txt"

    def test_environment_overrides_file(self, tmp_path: Path, monkeypatch):
        config = tmp_path / "bookadapt.toml"
        config.write_text('[ollama]\nmodel = "llama2"\nbase_url = "http://file:1"\n')
        monkeypatch.setenv("OLLAMA_MODEL", "mistral")
        monkeypatch.setenv("OLLAMA_BASE_URL", "http://env:2")
        monkeypatch.setenv("OLLAMA_TIMEOUT_SECONDS", "42")

        settings = Settings.from_toml(config)

        assert settings.ollama.model == "mistral"
        assert settings.ollama.base_url == "http://env:2"
        assert settings.ollama.timeout_seconds == 42.0

    def test_config_path_from_environment(self, tmp_path: Path, monkeypatch):
        config = tmp_path / "custom.toml"
        config.write_text("[chunking]\nmax_chars = 77\n")
        monkeypatch.setenv("BOOKADAPT_CONFIG", str(config))

        assert Settings.from_toml().chunking.max_chars == 77

    def test_invalid_level_in_file_is_rejected(self, tmp_path: Path):
        config = tmp_path / "bookadapt.toml"
        config.write_text('[adaptation]\nlevel = "Z9"\n')

        with pytest.raises(ValidationError):
            Settings.from_toml(config)
