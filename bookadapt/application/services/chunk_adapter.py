from __future__ import annotations

import logging

from ...domain.models.chunk import Chunk
from ..dto.adaptation import AdaptationRequest
from ..ports.text_generator import GenerationOptions, TextGeneratorPort
from .prompt_builder import build_adaptation_prompt
from .response_extractor import extract_adapted_text

logger = logging.getLogger(__name__)


def adapt_chunk(
    chunk: Chunk,
    *,
    generator: TextGeneratorPort,
    request: AdaptationRequest,
) -> str:
    """
    Adapt one chunk: build the prompt, call the backend, clean the response.

    Raises:
        BackendUnavailable: If the backend cannot be reached
        BackendError: If the backend answers with an error status
    """
    prompt = build_adaptation_prompt(chunk.text, request.level, request.modernize)
    result = generator.generate(
        prompt,
        model=request.model,
        timeout_seconds=request.timeout_seconds,
        options=GenerationOptions(
            temperature=request.temperature,
            max_tokens=request.max_tokens,
        ),
    )
    adapted = extract_adapted_text(result.text)

    if not adapted:
        logger.warning(
            f"Backend returned no usable text for chunk {chunk.index + 1}",
            extra={"chunk_index": chunk.index, "model": result.model},
        )
    logger.debug(
        f"Chunk {chunk.index + 1} adapted in {result.duration_seconds:.1f}s "
        f"({len(chunk.text)} -> {len(adapted)} chars)",
        extra={"chunk_index": chunk.index, "model": result.model},
    )
    return adapted
