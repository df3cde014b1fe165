"""Validate backend connectivity and configuration."""

from __future__ import annotations

import logging
from typing import Any

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from bookadapt.domain.errors import BackendError, BackendUnavailable
from bookadapt.infrastructure.adapters.ollama_generator import OllamaGeneratorAdapter
from bookadapt.infrastructure.config.settings import Settings

app = typer.Typer(help="Validate backend connectivity and configuration")
console = Console()
logger = logging.getLogger(__name__)


def _model_installed(model: str, installed: list[str]) -> bool:
    """Ollama lists models with a tag (``gemma3n:latest``); an untagged name matches any tag."""
    if model in installed:
        return True
    if ":" not in model:
        return any(name.split(":", 1)[0] == model for name in installed)
    return False


@app.command()
def run(
    model: str | None = typer.Option(None, "--model", "-m", help="Model to check (defaults to configured model)"),
    config_path: str | None = typer.Option(None, "--config", help="Path to bookadapt.toml configuration file"),
) -> None:
    """
    Validate backend connectivity and model availability.

    Checks:
    - Ollama server reachability
    - Configured model is installed

    Examples:
        bookadapt validate run
        bookadapt validate run --model llama2
    """
    try:
        settings = Settings.from_toml(config_path)
    except Exception as e:
        console.print(f"[red]Error loading configuration: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    model_name = model or settings.ollama.model
    generator = OllamaGeneratorAdapter(base_url=settings.ollama.base_url)

    results: list[dict[str, Any]] = []
    installed: list[str] | None = None
    try:
        installed = generator.list_models()
        results.append({
            "check": "Backend Connectivity",
            "status": "PASS",
            "message": f"Ollama reachable at {generator.base_url} ({len(installed)} models installed)",
        })
    except BackendUnavailable as e:
        results.append({
            "check": "Backend Connectivity",
            "status": "FAIL",
            "message": f"{e}",
        })
    except BackendError as e:
        results.append({
            "check": "Backend Connectivity",
            "status": "ERROR",
            "message": f"{e}",
        })

    if installed is None:
        results.append({"check": "Model Installed", "status": "SKIP", "message": "Backend unavailable"})
    elif _model_installed(model_name, installed):
        results.append({"check": "Model Installed", "status": "PASS", "message": f"'{model_name}' is installed"})
    else:
        results.append({
            "check": "Model Installed",
            "status": "WARN",
            "message": f"'{model_name}' not found; run: ollama pull {model_name}",
        })

    _display_results_table(results)

    if any(r["status"] in ("FAIL", "ERROR") for r in results):
        console.print("\n[red]✗ Some validation checks failed. See details above.[/red]")
        raise typer.Exit(1)
    console.print("\n[green]✓ Backend is ready.[/green]")


def _display_results_table(results: list[dict[str, Any]]) -> None:
    """Display validation results in a formatted table."""
    table = Table(title="Validation Results", show_header=True, header_style="bold magenta")
    table.add_column("Check", style="cyan", no_wrap=True)
    table.add_column("Status", justify="center")
    table.add_column("Message", style="white")

    for result in results:
        status_style = {
            "PASS": "[green]PASS[/green]",
            "FAIL": "[red]FAIL[/red]",
            "WARN": "[yellow]WARN[/yellow]",
            "ERROR": "[red]ERROR[/red]",
            "SKIP": "[dim]SKIP[/dim]",
        }.get(result["status"], result["status"])
        table.add_row(result["check"], status_style, escape(result["message"]))

    console.print(table)
