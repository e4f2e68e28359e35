"""
PivotKarir Command Line Interface

Compares a candidate profile against two recruiter profiles and shows
which recruiter to contact first.
"""

import asyncio
from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

app = typer.Typer(
    name="pivotkarir",
    help="Rank two recruiters by semantic match with your profile",
    add_completion=False,
)
console = Console()


@app.command()
def version():
    """Show application version."""
    from pivotkarir import __version__, __app_name__

    console.print(f"[bold blue]{__app_name__}[/bold blue] version [green]{__version__}[/green]")


@app.command()
def info():
    """Show configuration."""
    from pivotkarir.utils.config import get_settings

    settings = get_settings()

    table = Table(title="PivotKarir Configuration")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green")

    table.add_row("Environment", settings.environment)
    table.add_row("Debug Mode", str(settings.debug))
    table.add_row("Embedding Model", settings.ml.embedding_model)
    table.add_row("Pooling", settings.ml.pooling)
    table.add_row("Normalize", str(settings.ml.normalize))
    table.add_row("ML Device", settings.ml.device)
    table.add_row("High Match From", f"{settings.matching.high_threshold}%")
    table.add_row("Medium Match From", f"{settings.matching.medium_threshold}%")
    table.add_row("Log Level", settings.logging.level)

    console.print(table)


@app.command()
def warmup():
    """Download and load the embedding model."""
    from pivotkarir.ml.embeddings import EmbeddingModel
    from pivotkarir.utils.exceptions import PivotKarirError
    from pivotkarir.utils.logger import setup_logging

    setup_logging()
    model = EmbeddingModel()

    console.print("[yellow]Warming up embedding model...[/yellow]")
    console.print(f"  Device: [cyan]{model.device}[/cyan]")
    console.print(f"  Embedding Model: [cyan]{model.model_name}[/cyan]")

    try:
        model.initialize()
        model.embed("warmup")
    except PivotKarirError as e:
        console.print(f"[red]{e.message}[/red]")
        raise typer.Exit(1)

    console.print(f"  [green]✓[/green] Embedding dimension: {model.dimension}")
    console.print("\n[green]Model warmup completed![/green]")


@app.command()
def synthesize(
    profile: Path = typer.Argument(..., help="Profile JSON file"),
):
    """Print the text the embedding model sees for a profile."""
    from pivotkarir.ml.nlp import ProfileLoader, create_profile_text
    from pivotkarir.utils.exceptions import ParseError

    try:
        record = ProfileLoader().load_file(profile)
    except ParseError as e:
        console.print(f"[red]{e.message}[/red]")
        raise typer.Exit(1)

    text = create_profile_text(record)
    if not text:
        console.print("[yellow]Profile has no recognized fields.[/yellow]")
        raise typer.Exit(0)
    console.print(text, markup=False, highlight=False)


@app.command()
def compare(
    my_profile: Path = typer.Argument(..., help="Your profile JSON file"),
    recruiter1: Path = typer.Argument(..., help="First recruiter profile JSON file"),
    recruiter2: Path = typer.Argument(..., help="Second recruiter profile JSON file"),
    as_json: bool = typer.Option(False, "--json", help="Print the result as JSON"),
):
    """Rank two recruiters by how well they match your profile."""
    from pivotkarir.core.matching import ComparisonSession
    from pivotkarir.ui import render_failure, render_results
    from pivotkarir.utils.constants import ProfileSlot
    from pivotkarir.utils.exceptions import PivotKarirError
    from pivotkarir.utils.logger import setup_logging

    setup_logging()
    session = ComparisonSession(notifier=lambda message: render_failure(message, console))

    async def run():
        for slot, path in (
            (ProfileSlot.CANDIDATE, my_profile),
            (ProfileSlot.SUBJECT_A, recruiter1),
            (ProfileSlot.SUBJECT_B, recruiter2),
        ):
            await session.load_profile_file(slot, path)

        if as_json:
            return await session.compare()
        with console.status("Analyzing profiles with AI..."):
            return await session.compare()

    try:
        result = asyncio.run(run())
    except PivotKarirError:
        # Already reported through the session notifier
        raise typer.Exit(1)

    if as_json:
        console.print(result.model_dump_json(indent=2), markup=False, highlight=False, emoji=False, soft_wrap=True)
    else:
        render_results(result, console)


def main() -> None:
    """Console script entry point."""
    app()


if __name__ == "__main__":
    main()
