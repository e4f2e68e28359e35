"""
Rich rendering of comparison results.

One card per recruiter, best match first, followed by the recommendation.
"""

from typing import Final

from rich.console import Console, Group
from rich.markup import escape
from rich.panel import Panel
from rich.progress_bar import ProgressBar
from rich.text import Text

from pivotkarir.data.models import ComparisonResult, ScoredSubject

LEVEL_COLORS: Final[dict[str, str]] = {
    "high": "green",
    "medium": "yellow",
    "low": "red",
}


def _subject_card(subject: ScoredSubject) -> Panel:
    color = LEVEL_COLORS.get(subject.level, "white")

    lines: list = []
    if subject.title:
        lines.append(Text(subject.title, style="dim"))
    if subject.company:
        lines.append(Text(subject.company, style="dim"))

    lines.append(Text(f"{subject.score}%", style=f"bold {color}"))
    lines.append(
        ProgressBar(
            total=100,
            completed=max(0, subject.score),
            width=40,
            complete_style=color,
        )
    )
    lines.append(Text.from_markup(f"[bold]Match Level:[/bold] {str(subject.level).upper()}"))
    if subject.bio:
        lines.append(Text.from_markup(f"[bold]About:[/bold] {escape(subject.bio)}"))

    return Panel(
        Group(*lines),
        title=f"{subject.rank_marker} {escape(subject.display_name)}",
        title_align="left",
        border_style=color,
    )


def render_results(result: ComparisonResult, console: Console) -> None:
    """Print the ranked recruiter cards and the recommendation."""
    for subject in result.ranked:
        console.print(_subject_card(subject))

    console.print(
        Panel(
            Text.from_markup(f"💡 [bold]Recommendation:[/bold] {escape(result.recommendation)}"),
            border_style="blue",
        )
    )
    if result.model_used:
        console.print(f"[dim]Model: {escape(result.model_used)}[/dim]")


def render_failure(message: str, console: Console) -> None:
    """Print a comparison or loading error."""
    console.print(f"[red]{escape(message)}[/red]")
