from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from ...domain.types import ProficiencyLevel

DEFAULT_MODEL = "gemma3n"


def checkpoint_path_for(output_path: Path) -> Path:
    """Sidecar checkpoint path: same directory, ``{stem}_progress.json``."""
    output_path = Path(output_path)
    return output_path.with_name(f"{output_path.stem}_progress.json")


class AdaptationRequest(BaseModel):
    """Request DTO for the adapt-book use case. Immutable for the whole run."""

    model_config = ConfigDict(frozen=True)

    source_path: Path
    output_path: Path
    level: ProficiencyLevel = ProficiencyLevel.B1
    chunk_size: int = Field(default=1000, ge=1)
    model: str = DEFAULT_MODEL
    modernize: bool = True
    pause_seconds: float = Field(default=0.5, ge=0.0)
    timeout_seconds: float = Field(default=300.0, gt=0.0)
    temperature: float = 0.7
    max_tokens: int = Field(default=2000, ge=1)

    @property
    def checkpoint_path(self) -> Path:
        return checkpoint_path_for(self.output_path)


class AdaptationResult(BaseModel):
    """Result DTO for the adapt-book use case."""

    total_chunks: int
    chunks_adapted: int
    resumed_from: int
    output_path: Path
    checkpoint_path: Path
    duration_seconds: float
    warnings: list[str] = []
