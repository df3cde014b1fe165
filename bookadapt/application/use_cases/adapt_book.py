from __future__ import annotations

import logging
import time
from typing import Callable

from ...infrastructure.logging import get_correlation_id
from ...domain.errors import BackendError, BackendUnavailable, PersistenceError
from ...domain.models.adapted_document import AdaptedDocument
from ...domain.models.checkpoint import AdaptationCheckpoint
from ...domain.policy.chunking_policy import ChunkingPolicy
from ...domain.services.content_fingerprint import ContentFingerprintService
from ..dto.adaptation import AdaptationRequest, AdaptationResult
from ..ports.checkpoint_manager import CheckpointManagerPort
from ..ports.chunker import ChunkerPort
from ..ports.progress_reporter import ProgressContext, ProgressReporterPort
from ..ports.text_generator import TextGeneratorPort
from ..ports.text_store import TextStorePort
from ..services.chunk_adapter import adapt_chunk

logger = logging.getLogger(__name__)


def _stale_reason(
    checkpoint: AdaptationCheckpoint,
    total_chunks: int,
    fingerprint: str,
    request: AdaptationRequest,
) -> str | None:
    """Why a stored checkpoint cannot be resumed against this run, or None."""
    if checkpoint.total_count != total_chunks:
        return (
            f"checkpoint was recorded for {checkpoint.total_count} chunks "
            f"but the source now splits into {total_chunks}"
        )
    if not ContentFingerprintService.is_unchanged(checkpoint.source_fingerprint, fingerprint):
        return "source text changed since the checkpoint was recorded"
    if checkpoint.target_level is not None and checkpoint.target_level != request.level.value:
        return (
            f"checkpoint was recorded for level {checkpoint.target_level}, "
            f"this run targets {request.level.value}"
        )
    if checkpoint.model is not None and checkpoint.model != request.model:
        return (
            f"checkpoint was recorded with model {checkpoint.model}, "
            f"this run uses {request.model}"
        )
    return None


def adapt_book(
    request: AdaptationRequest,
    *,
    chunker: ChunkerPort,
    generator: TextGeneratorPort,
    checkpoint_manager: CheckpointManagerPort,
    text_store: TextStorePort,
    progress_reporter: ProgressReporterPort | None = None,
    correlation_id: str | None = None,
    sleep: Callable[[float], None] = time.sleep,
) -> AdaptationResult:
    """
    Orchestrate a resumable adaptation run: read → chunk → resume → adapt each chunk → write.

    Chunks are adapted strictly in order, one at a time. The checkpoint is
    rewritten after every successful chunk, so an interrupted run resumes at
    the first chunk that did not complete. A checkpoint that already covers
    every chunk re-emits the document without contacting the backend.

    Args:
        request: AdaptationRequest describing the job
        chunker: ChunkerPort splitting the source into chunks
        generator: TextGeneratorPort for the generation backend
        checkpoint_manager: CheckpointManagerPort persisting progress
        text_store: TextStorePort reading the source and writing the document
        progress_reporter: Optional progress reporter for chunk-level updates
        correlation_id: Optional correlation ID (generated if not provided)
        sleep: Pause function between chunks (injectable for tests)

    Returns:
        AdaptationResult with chunk counts, resume point, paths and warnings

    Raises:
        SourceNotFound: If the source file cannot be read
        BackendUnavailable: If the backend cannot be reached (progress kept)
        BackendError: If the backend answers with an error (progress kept)
        PersistenceError: If the checkpoint or the document cannot be written
    """
    start_time = time.time()
    correlation_id = correlation_id or get_correlation_id()
    warnings: list[str] = []
    checkpoint_path = request.checkpoint_path

    logger.info(
        f"Starting adaptation of '{request.source_path}' for level {request.level.value}",
        extra={"correlation_id": correlation_id, "source_path": str(request.source_path)},
    )

    # Step 1: Read and chunk the source
    source_text = text_store.read_text(request.source_path)
    policy = ChunkingPolicy(max_chars=request.chunk_size)
    chunks = chunker.chunk(source_text, policy)
    total_chunks = len(chunks)
    fingerprint = ContentFingerprintService.compute_fingerprint(source_text, policy)

    logger.info(
        f"Book split into {total_chunks} chunks",
        extra={"correlation_id": correlation_id, "chunk_size": request.chunk_size},
    )

    # Step 2: Resume from checkpoint when it matches this source
    checkpoint = checkpoint_manager.load_checkpoint(checkpoint_path)
    if not checkpoint.is_empty:
        reason = _stale_reason(checkpoint, total_chunks, fingerprint, request)
        if reason is not None:
            warning_msg = f"Discarding stale checkpoint {checkpoint_path}: {reason}. Starting from chunk 1."
            warnings.append(warning_msg)
            logger.warning(warning_msg, extra={"correlation_id": correlation_id})
            checkpoint = AdaptationCheckpoint.empty()

    resumed_from = checkpoint.completed_count
    checkpoint = AdaptationCheckpoint(
        completed_count=checkpoint.completed_count,
        total_count=total_chunks,
        adapted_chunks=list(checkpoint.adapted_chunks),
        last_updated=checkpoint.last_updated,
        target_level=request.level.value,
        model=request.model,
        source_fingerprint=fingerprint,
    )

    if resumed_from > 0:
        logger.info(
            f"Resuming from chunk {resumed_from + 1} (found existing progress)",
            extra={"correlation_id": correlation_id, "completed": resumed_from, "total": total_chunks},
        )

    # Step 3: Probe the backend only when there is work left
    if checkpoint.remaining > 0 and not generator.is_available():
        warning_msg = "Could not connect to the generation backend; continuing anyway"
        warnings.append(warning_msg)
        logger.warning(warning_msg, extra={"correlation_id": correlation_id})

    # Step 4: Adapt remaining chunks in order
    progress: ProgressContext | None = None
    if progress_reporter and checkpoint.remaining > 0:
        progress = progress_reporter.start_run(total_chunks=total_chunks, completed=resumed_from)

    try:
        for chunk in chunks[resumed_from:]:
            logger.info(
                f"Processing chunk {chunk.index + 1}/{total_chunks}",
                extra={"correlation_id": correlation_id, "chunk_index": chunk.index},
            )
            try:
                adapted = adapt_chunk(chunk, generator=generator, request=request)
                checkpoint.record_chunk(adapted)
                checkpoint_manager.save_checkpoint(checkpoint, checkpoint_path)
            except (BackendUnavailable, BackendError, PersistenceError) as e:
                e.chunk_index = chunk.index
                logger.error(
                    f"Error processing chunk {chunk.index + 1}/{total_chunks}: {e}",
                    extra={
                        "correlation_id": correlation_id,
                        "chunk_index": chunk.index,
                        "completed": chunk.index,
                    },
                )
                raise

            if progress:
                progress.update(checkpoint.completed_count)

            if chunk.index < total_chunks - 1 and request.pause_seconds > 0:
                sleep(request.pause_seconds)
    except BaseException as e:
        # The live display must be stopped on interrupts too
        if progress:
            progress.fail(str(e) or type(e).__name__)
        raise

    if progress:
        progress.finish()

    # Step 5: Write the final document
    document = AdaptedDocument(level=request.level, chunks=list(checkpoint.adapted_chunks))
    text_store.write_text(request.output_path, document.render())

    duration = time.time() - start_time
    logger.info(
        f"Book adaptation completed: {request.output_path}",
        extra={
            "correlation_id": correlation_id,
            "total_chunks": total_chunks,
            "chunks_adapted": total_chunks - resumed_from,
            "duration_seconds": round(duration, 2),
        },
    )

    return AdaptationResult(
        total_chunks=total_chunks,
        chunks_adapted=total_chunks - resumed_from,
        resumed_from=resumed_from,
        output_path=request.output_path,
        checkpoint_path=checkpoint_path,
        duration_seconds=duration,
        warnings=warnings,
    )


