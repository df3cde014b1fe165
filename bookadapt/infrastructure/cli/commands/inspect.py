"""Inspect saved adaptation progress."""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from bookadapt.application.dto.adaptation import checkpoint_path_for
from bookadapt.infrastructure.adapters.checkpoint_manager import JsonCheckpointManagerAdapter
from bookadapt.infrastructure.config.settings import Settings

app = typer.Typer(help="Inspect saved adaptation progress")
console = Console()


@app.command()
def run(
    output_path: str | None = typer.Option(None, "--output", "-o", help="Output file whose progress to inspect"),
    config_path: str | None = typer.Option(None, "--config", help="Path to bookadapt.toml configuration file"),
) -> None:
    """
    Show the checkpoint recorded for an output file.

    Examples:
        bookadapt inspect run --output ./books/adapted_b1.txt
    """
    if output_path is None:
        output_path = Settings.from_toml(config_path).paths.output

    checkpoint_path = checkpoint_path_for(Path(output_path))
    manager = JsonCheckpointManagerAdapter()
    if not manager.checkpoint_exists(checkpoint_path):
        console.print(f"[yellow]No progress recorded for {output_path} ({checkpoint_path} not found)[/yellow]")
        raise typer.Exit(1)

    checkpoint = manager.load_checkpoint(checkpoint_path)
    if checkpoint.is_empty:
        console.print(f"[yellow]{checkpoint_path} holds no completed chunks[/yellow]")
        raise typer.Exit(1)

    table = Table(title=f"Progress: {checkpoint_path}", show_header=False)
    table.add_column("Field", style="cyan", no_wrap=True)
    table.add_column("Value")
    table.add_row("Completed", f"{checkpoint.completed_count}/{checkpoint.total_count} chunks")
    table.add_row("Status", "complete" if checkpoint.is_complete else f"{checkpoint.remaining} remaining")
    table.add_row("Level", checkpoint.target_level or "unknown")
    table.add_row("Model", checkpoint.model or "unknown")
    table.add_row("Last updated", checkpoint.last_updated.isoformat(timespec="seconds"))
    console.print(table)
