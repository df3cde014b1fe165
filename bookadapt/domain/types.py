from enum import Enum


class ProficiencyLevel(str, Enum):
    """CEFR proficiency tiers, ordered from least to most advanced."""

    A1 = "A1"
    A2 = "A2"
    B1 = "B1"
    B2 = "B2"
    C1 = "C1"
    C2 = "C2"

    @property
    def rank(self) -> int:
        return list(ProficiencyLevel).index(self)

    @property
    def description(self) -> str:
        return LEVEL_DESCRIPTIONS[self]

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, ProficiencyLevel):
            return NotImplemented
        return self.rank < other.rank

    @classmethod
    def parse(cls, value: str | None, default: "ProficiencyLevel | None" = None) -> "ProficiencyLevel | None":
        """Return the tier named by value (case-insensitive), or default if it names none."""
        if value is None:
            return default
        try:
            return cls(value.strip().upper())
        except ValueError:
            return default


LEVEL_DESCRIPTIONS: dict[ProficiencyLevel, str] = {
    ProficiencyLevel.A1: "very basic vocabulary (500-1000 most common words), simple present tense, very short sentences",
    ProficiencyLevel.A2: "basic vocabulary (1000-2000 words), simple past and future tenses, short sentences",
    ProficiencyLevel.B1: "intermediate vocabulary (2000-3000 words), various tenses, compound sentences, some complex structures",
    ProficiencyLevel.B2: "good vocabulary range (3000-4000 words), complex sentences, various grammatical structures",
    ProficiencyLevel.C1: "wide vocabulary range (4000+ words), complex and sophisticated structures",
    ProficiencyLevel.C2: "very wide vocabulary, native-like complexity",
}
