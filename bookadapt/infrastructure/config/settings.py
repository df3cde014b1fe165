"""Pydantic settings for bookadapt.toml configuration."""

import tomllib
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator

from ...application.dto.adaptation import DEFAULT_MODEL
from ...domain.types import ProficiencyLevel
from .environment import get_env, get_env_float, load_environment_variables

DEFAULT_CONFIG_PATH = "bookadapt.toml"


class OllamaSettings(BaseModel):
    """Ollama connection and sampling settings."""

    base_url: str = "http://127.0.0.1:11434"
    model: str = DEFAULT_MODEL
    timeout_seconds: float = 300.0
    temperature: float = 0.7
    max_tokens: int = 2000

    def __init__(self, **data: Any) -> None:
        """Initialize with environment variable precedence."""
        load_environment_variables()

        # Environment variables take precedence over TOML values
        env_url = get_env("OLLAMA_BASE_URL")
        if env_url:
            data["base_url"] = env_url

        env_model = get_env("OLLAMA_MODEL")
        if env_model:
            data["model"] = env_model

        env_timeout = get_env_float("OLLAMA_TIMEOUT_SECONDS")
        if env_timeout is not None:
            data["timeout_seconds"] = env_timeout

        super().__init__(**data)


class ChunkingSettings(BaseModel):
    """Chunking configuration settings."""

    max_chars: int = Field(default=1000, ge=1)


class AdaptationSettings(BaseModel):
    """Defaults for the adaptation itself."""

    level: ProficiencyLevel = ProficiencyLevel.B1
    modernize: bool = True
    pause_seconds: float = Field(default=0.5, ge=0.0)

    @field_validator("level", mode="before")
    @classmethod
    def validate_level(cls, v: Any) -> Any:
        """Accept lowercase tier names."""
        if isinstance(v, str):
            return v.strip().upper()
        return v


class PathsSettings(BaseModel):
    """Path configuration settings."""

    input: str = "./src/pg551.txt"
    output: str = "./books/adapted_b1.txt"


class Settings(BaseModel):
    """Main settings loaded from bookadapt.toml."""

    ollama: OllamaSettings = Field(default_factory=OllamaSettings)
    chunking: ChunkingSettings = Field(default_factory=ChunkingSettings)
    adaptation: AdaptationSettings = Field(default_factory=AdaptationSettings)
    paths: PathsSettings = Field(default_factory=PathsSettings)

    @classmethod
    def from_toml(cls, toml_path: Path | str | None = None) -> "Settings":
        """
        Load settings from bookadapt.toml with environment variable precedence.

        Environment variables (system env > .env file) override TOML values.
        The path defaults to $BOOKADAPT_CONFIG, then bookadapt.toml.

        Args:
            toml_path: Path to configuration file

        Returns:
            Settings instance with loaded configuration (defaults if the file is missing)
        """
        load_environment_variables()

        if toml_path is None:
            toml_path = get_env("BOOKADAPT_CONFIG") or DEFAULT_CONFIG_PATH
        toml_path = Path(toml_path)

        if not toml_path.exists():
            return cls()

        with toml_path.open("rb") as f:
            data = tomllib.load(f)

        return cls(
            ollama=OllamaSettings(**data.get("ollama", {})),
            chunking=ChunkingSettings(**data.get("chunking", {})),
            adaptation=AdaptationSettings(**data.get("adaptation", {})),
            paths=PathsSettings(**data.get("paths", {})),
        )
