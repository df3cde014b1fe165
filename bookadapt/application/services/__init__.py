"""Application services for building prompts and cleaning backend output."""

from .chunk_adapter import adapt_chunk
from .prompt_builder import build_adaptation_prompt
from .response_extractor import extract_adapted_text

__all__ = ["adapt_chunk", "build_adaptation_prompt", "extract_adapted_text"]
