"""Cleanup of raw backend responses into plain adapted text."""

from __future__ import annotations

import re

from .prompt_builder import ADAPTED_TEXT_MARKER

META_PREFIXES = ("*", "Note:", "Explanation:")
META_WORDS = ("simplified", "adapted", "modern")

_ASTERISK_SPAN = re.compile(r"\*.*?\*")
_NOTE_LINE = re.compile(r"Note:.*$", re.IGNORECASE | re.MULTILINE)
_EXPLANATION_LINE = re.compile(r"Explanation:.*$", re.IGNORECASE | re.MULTILINE)
_PARENTHETICAL = re.compile(r"\(.*?\)")
_BLANK_LINES = re.compile(r"\n\s*\n")


def is_meta_line(line: str) -> bool:
    """Return True for lines that look like commentary rather than story text."""
    if not line:
        return True
    if line.startswith(META_PREFIXES):
        return True
    if any(word in line for word in META_WORDS):
        return True
    return line.startswith("(") and line.endswith(")")


def _marked_section(lines: list[str]) -> list[str] | None:
    """Lines following the first marker line, or None when there is no marker."""
    for position, line in enumerate(lines):
        marker_at = line.find(ADAPTED_TEXT_MARKER)
        if marker_at == -1:
            continue
        remainder = line[marker_at + len(ADAPTED_TEXT_MARKER):].lstrip(":").strip()
        section = lines[position + 1:]
        return [remainder, *section] if remainder else section
    return None


def strip_meta_markup(raw: str) -> str:
    """Regex cleanup used when line filtering finds nothing usable."""
    text = raw.strip()
    text = _ASTERISK_SPAN.sub("", text)
    text = _NOTE_LINE.sub("", text)
    text = _EXPLANATION_LINE.sub("", text)
    text = _PARENTHETICAL.sub("", text)
    text = _BLANK_LINES.sub("\n", text)
    return text.strip()


def extract_adapted_text(raw: str) -> str:
    """
    Extract clean adapted text from a raw backend response.

    If the backend echoed the instruction, only the part after the
    ``Adapted text`` marker is kept; otherwise the whole response is used.
    Commentary lines are dropped and the survivors joined with single spaces.
    When there is no marker and nothing survives, falls back to
    ``strip_meta_markup``. Never raises.
    """
    lines = [line.strip() for line in raw.splitlines()]
    section = _marked_section(lines)
    found_marker = section is not None
    if section is None:
        section = lines

    kept = [line for line in section if not is_meta_line(line)]
    if kept:
        return " ".join(kept).strip()
    if found_marker:
        return ""
    return strip_meta_markup(raw)
