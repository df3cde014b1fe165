import typer

from .commands import (
    adapt as adapt_cmd,
    inspect as inspect_cmd,
    validate as validate_cmd,
)

app = typer.Typer(help="bookadapt CLI: adapt books for English learners with a local LLM")

app.add_typer(adapt_cmd.app, name="adapt")
app.add_typer(inspect_cmd.app, name="inspect")
app.add_typer(validate_cmd.app, name="validate")


if __name__ == "__main__":
    app()
