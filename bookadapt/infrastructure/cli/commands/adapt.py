import logging
from pathlib import Path

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from bookadapt.application.dto.adaptation import AdaptationRequest
from bookadapt.application.use_cases.adapt_book import adapt_book
from bookadapt.domain.errors import (
    BackendError,
    BackendUnavailable,
    PersistenceError,
    SourceNotFound,
)
from bookadapt.domain.services.sentence_chunker import SentenceChunker
from bookadapt.domain.types import ProficiencyLevel
from bookadapt.infrastructure.adapters.checkpoint_manager import JsonCheckpointManagerAdapter
from bookadapt.infrastructure.adapters.ollama_generator import OllamaGeneratorAdapter
from bookadapt.infrastructure.adapters.rich_progress_reporter import RichProgressReporterAdapter
from bookadapt.infrastructure.adapters.text_file_store import LocalTextFileAdapter
from bookadapt.infrastructure.config.settings import Settings
from bookadapt.infrastructure.logging import configure_logging, new_correlation_id

app = typer.Typer(help="Adapt a book for English learners")
console = Console()
logger = logging.getLogger(__name__)

LEVEL_CHOICES = ", ".join(level.value for level in ProficiencyLevel)


@app.command(context_settings={"ignore_unknown_options": True, "allow_extra_args": True})
def run(
    ctx: typer.Context,
    input_path: str | None = typer.Option(None, "--input", "-i", help="Input book file (plain text)"),
    output_path: str | None = typer.Option(None, "--output", "-o", help="Output adapted file"),
    level: str | None = typer.Option(None, "--level", "-l", help=f"Target level: {LEVEL_CHOICES}"),
    model: str | None = typer.Option(None, "--model", "-m", help="Ollama model to use"),
    chunk_size: int | None = typer.Option(None, "--chunk-size", "-c", min=1, help="Text chunk size in characters"),
    modern: bool | None = typer.Option(None, "--modern/--no-modern", help="Enable/disable modern vocabulary conversion"),
    config_path: str | None = typer.Option(None, "--config", help="Path to bookadapt.toml configuration file"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug and HTTP logs"),
) -> None:
    """
    Adapt a plain-text book to a CEFR level using a local Ollama model.

    Progress is saved after every chunk next to the output file
    (<output>_progress.json). Re-running the same command resumes from the
    first chunk that did not complete.

    Examples:
        bookadapt adapt run --input ./mybook.txt --level A2 --output ./adapted.txt
        bookadapt adapt run -i ./book.txt -l B1 -m llama2 --no-modern
    """
    configure_logging(logging.INFO, verbose=verbose)
    correlation_id = new_correlation_id()

    if ctx.args:
        logger.debug(f"Ignoring unrecognized arguments: {' '.join(ctx.args)}")

    try:
        settings = Settings.from_toml(config_path)
    except Exception as e:
        console.print(f"[red]Error loading configuration: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    target_level = ProficiencyLevel.parse(level, default=settings.adaptation.level)
    if level is not None and target_level.value != level.strip().upper():
        console.print(
            f"[yellow]Ignoring unknown level '{escape(level)}' (expected one of {LEVEL_CHOICES}); "
            f"using {target_level.value}[/yellow]"
        )

    source = Path(input_path or settings.paths.input)
    output = Path(output_path or settings.paths.output)

    if not source.is_file():
        console.print(f"[red]Input file not found: {source}[/red]")
        console.print("Please make sure your book file exists.")
        raise typer.Exit(1)

    try:
        request = AdaptationRequest(
            source_path=source,
            output_path=output,
            level=target_level,
            chunk_size=chunk_size or settings.chunking.max_chars,
            model=model or settings.ollama.model,
            modernize=settings.adaptation.modernize if modern is None else modern,
            pause_seconds=settings.adaptation.pause_seconds,
            timeout_seconds=settings.ollama.timeout_seconds,
            temperature=settings.ollama.temperature,
            max_tokens=settings.ollama.max_tokens,
        )
    except ValidationError as e:
        console.print(f"[red]Invalid configuration: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    console.print("[bold]Configuration:[/bold]")
    console.print(f"  Input file: {request.source_path}")
    console.print(f"  Output file: {request.output_path}")
    console.print(f"  Target level: {request.level.value}")
    console.print(f"  Model: {request.model}")
    console.print(f"  Chunk size: {request.chunk_size}")
    console.print(f"  Modern vocabulary: {'enabled' if request.modernize else 'disabled'}")
    console.print(f"  correlation_id={correlation_id}")

    checkpoint_manager = JsonCheckpointManagerAdapter()
    try:
        result = adapt_book(
            request,
            chunker=SentenceChunker(),
            generator=OllamaGeneratorAdapter(base_url=settings.ollama.base_url),
            checkpoint_manager=checkpoint_manager,
            text_store=LocalTextFileAdapter(),
            progress_reporter=RichProgressReporterAdapter(console=console),
            correlation_id=correlation_id,
        )
    except SourceNotFound as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(1)
    except (BackendUnavailable, BackendError, PersistenceError) as e:
        chunk_label = f"chunk {e.chunk_index + 1}" if e.chunk_index is not None else "the final document"
        console.print(f"[red]Error processing {chunk_label}: {escape(str(e))}[/red]")
        saved = checkpoint_manager.load_checkpoint(request.checkpoint_path)
        if saved.completed_count > 0:
            console.print(
                f"Progress saved ({saved.completed_count}/{saved.total_count} chunks) "
                f"to {request.checkpoint_path}. Re-run the same command to resume."
            )
        else:
            console.print("No chunks were completed; re-run the same command to start again.")
        raise typer.Exit(1)

    for warning in result.warnings:
        console.print(f"[yellow]Warning: {warning}[/yellow]")
    if result.resumed_from and result.chunks_adapted == 0:
        console.print("Nothing left to adapt; re-emitted the document from saved progress.")
    console.print(
        f"[green]Book adaptation completed![/green] "
        f"{result.total_chunks} chunks ({result.chunks_adapted} adapted this run) "
        f"in {result.duration_seconds:.1f}s. Output saved to: {result.output_path}"
    )
