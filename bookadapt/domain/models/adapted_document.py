from dataclasses import dataclass, field

from ..types import ProficiencyLevel

CHUNK_SEPARATOR = "\n\n"


@dataclass(frozen=True)
class AdaptedDocument:
    """
    Final artifact of a run: a level banner followed by the adapted chunks.

    Fields:
        level: Proficiency tier the text was adapted for
        chunks: Adapted chunk texts in source order
    """

    level: ProficiencyLevel
    chunks: list[str] = field(default_factory=list)

    @property
    def header(self) -> str:
        level = self.level.value
        return (
            f"# Adapted Book for {level} English Learners\n\n"
            f"*This book has been adapted using AI to match {level} level vocabulary and grammar.*\n\n"
            f"---\n\n"
        )

    @property
    def body(self) -> str:
        return CHUNK_SEPARATOR.join(self.chunks)

    def render(self) -> str:
        return self.header + self.body
