"""Prompt construction for chunk adaptation."""

from __future__ import annotations

from ...domain.types import ProficiencyLevel

ADAPTED_TEXT_MARKER = "Adapted text"

MODERNIZATION_EXAMPLES: list[tuple[str, str]] = [
    ('"carriage"', '"car" or "vehicle"'),
    ('"parlour"', '"living room"'),
    ('"thee/thou"', '"you"'),
    ('"upon"', '"on"'),
    ('"whilst"', '"while"'),
    ('"shall"', '"will"'),
]

MODERN_VOCABULARY_TEMPLATE = """
- Use MODERN vocabulary and contemporary expressions instead of archaic or outdated words
- Replace old-fashioned terms with current, everyday language that people use today
- Use modern idioms and phrases that are commonly used in contemporary English
- Update cultural references to be more contemporary and relatable
- Use present-day terminology for technology, social concepts, and everyday items

Examples of modernization:
{examples}"""

ADAPTATION_PROMPT_TEMPLATE = """Please rewrite the following text to be suitable for English learners at {level} level.

Guidelines for {level} level:
- Use {level_description}{modern_instructions}
- Maintain the original meaning and story flow
- Make the text engaging but accessible
- Replace difficult words with simpler alternatives
- Simplify complex sentence structures when needed
- Add brief explanations for cultural references if necessary

IMPORTANT: Provide ONLY the adapted text. Do not include any explanations, notes, commentary, or meta-text. Do not use asterisks, parentheses for comments, or phrases like "Note:", "Explanation:", "This has been simplified", etc. Just return the clean adapted story text.

Original text:
"{text}"

{marker}:"""


def _modern_instructions() -> str:
    examples = "\n".join(f"- {old} → {new}" for old, new in MODERNIZATION_EXAMPLES)
    return MODERN_VOCABULARY_TEMPLATE.format(examples=examples)


def build_adaptation_prompt(text: str, level: ProficiencyLevel, modernize: bool) -> str:
    """
    Build the instruction sent to the backend for one chunk.

    The prompt ends with the ``Adapted text:`` marker so that a backend which
    echoes the instruction can be cut at that point by the response extractor.
    """
    return ADAPTATION_PROMPT_TEMPLATE.format(
        level=level.value,
        level_description=level.description,
        modern_instructions=_modern_instructions() if modernize else "",
        text=text,
        marker=ADAPTED_TEXT_MARKER,
    )
