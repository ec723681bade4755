"""Typer CLI application for playing the quote guessing game."""

import logging
from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from src.config.settings import Settings, get_settings
from src.core.errors import CorpusLoadError, QuoteNotFoundError
from src.game.scoring import ScoreTracker
from src.game.selector import DISTRACTOR_COUNT
from src.game.service import QuoteGame
from src.models.quote import (
    AnswerSubmission,
    CheckResult,
    GameMode,
    QuoteView,
    SessionScore,
)

app = typer.Typer(
    name="quote-guess",
    help="Guess who said it: a quote quiz game",
    add_completion=False,
)

console = Console()

QUIT_ANSWERS = {"q", "quit"}


def build_settings(quotes: Optional[Path], seed: Optional[int]) -> Settings:
    """Apply command line overrides on top of the environment settings."""
    settings = get_settings()
    overrides = {}
    if quotes is not None:
        overrides["quotes_path"] = quotes
    if seed is not None:
        overrides["random_seed"] = seed
    return settings.model_copy(update=overrides) if overrides else settings


def load_game(settings: Settings) -> QuoteGame:
    """Load the corpus, exiting with an error if it is unusable."""
    try:
        return QuoteGame.from_settings(settings)
    except CorpusLoadError as e:
        console.print(f"[red]Error:[/red] {escape(e.message)}", style="bold")
        raise typer.Exit(code=1)


@app.command()
def play(
    mode: Optional[GameMode] = typer.Option(
        None,
        "--mode",
        "-m",
        help="Game mode (defaults to DEFAULT_MODE)",
        case_sensitive=False,
    ),
    rounds: Optional[int] = typer.Option(
        None,
        "--rounds",
        "-r",
        help="Number of quotes to play",
        min=1,
        max=100,
    ),
    quotes: Optional[Path] = typer.Option(
        None,
        "--quotes",
        help="Path to a JSON quote corpus",
    ),
    seed: Optional[int] = typer.Option(
        None,
        "--seed",
        help="Random seed for a reproducible game",
    ),
) -> None:
    """
    Play an interactive round of quote guessing.

    Example:
        quote-guess play -m type-easy -r 5
    """
    settings = build_settings(quotes, seed)
    mode = mode or settings.default_mode
    rounds = rounds or settings.default_rounds
    game = load_game(settings)
    tracker = ScoreTracker()
    best_streak = 0

    for round_number in range(1, rounds + 1):
        view = game.select_quote(mode)
        display_quote(view, round_number, rounds)

        raw_answer = typer.prompt("Your answer (q to quit)")
        if raw_answer.strip().lower() in QUIT_ANSWERS:
            break

        submission = AnswerSubmission(
            quote_id=view.id,
            answer=resolve_choice(raw_answer, view.options),
            mode=mode,
        )
        result = game.check_answer(tracker, submission)
        display_result(result)
        best_streak = max(best_streak, result.user_score)

    display_summary(tracker.score, best_streak)


@app.command()
def quote(
    mode: Optional[GameMode] = typer.Option(
        None,
        "--mode",
        "-m",
        help="Game mode (defaults to DEFAULT_MODE)",
        case_sensitive=False,
    ),
    as_json: bool = typer.Option(
        False,
        "--json",
        help="Print the quote as JSON",
    ),
    quotes: Optional[Path] = typer.Option(None, "--quotes", help="Path to a JSON quote corpus"),
    seed: Optional[int] = typer.Option(None, "--seed", help="Random seed"),
) -> None:
    """Draw a single quote for a mode."""
    settings = build_settings(quotes, seed)
    game = load_game(settings)
    view = game.select_quote(mode or settings.default_mode)

    if as_json:
        typer.echo(view.model_dump_json(by_alias=True, exclude_none=True))
    else:
        display_quote(view)


@app.command()
def check(
    quote_id: int = typer.Argument(..., help="Id of the quote being answered"),
    answer: str = typer.Argument(..., help="Your guess at the author"),
    mode: Optional[GameMode] = typer.Option(
        None,
        "--mode",
        "-m",
        help="Mode the quote was played in (defaults to DEFAULT_MODE)",
        case_sensitive=False,
    ),
    quotes: Optional[Path] = typer.Option(None, "--quotes", help="Path to a JSON quote corpus"),
) -> None:
    """
    Check one answer against a quote's author.

    Example:
        quote-guess check 2 "Churchil" -m type-easy
    """
    settings = build_settings(quotes, None)
    game = load_game(settings)

    try:
        verdict = game.evaluate_answer(quote_id, answer, mode or settings.default_mode)
    except QuoteNotFoundError as e:
        console.print(f"[red]Error:[/red] {e.message} (id {e.quote_id})", style="bold")
        raise typer.Exit(code=1)

    style = "green" if verdict.correct else "red"
    console.print(f"[{style}]{escape(verdict.message)}[/{style}]")
    if verdict.source:
        console.print(f"  Source: {escape(verdict.source)}")


@app.command()
def stats(
    quotes: Optional[Path] = typer.Option(None, "--quotes", help="Path to a JSON quote corpus"),
) -> None:
    """Summarize the quote corpus."""
    game = load_game(build_settings(quotes, None))
    repository = game.repository

    table = Table(title="Quote Corpus", border_style="cyan")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", style="white")

    table.add_row("Total Quotes", str(len(repository)))
    for tier, count in repository.tier_counts().items():
        table.add_row(f"{tier.value.capitalize()} Quotes", str(count))
    author_count = len(repository.all_authors())
    table.add_row("Distinct Authors", str(author_count))

    console.print()
    console.print(table)

    if author_count < DISTRACTOR_COUNT + 1:
        console.print(
            f"\n[yellow]Warning:[/yellow] fewer than {DISTRACTOR_COUNT + 1} authors, "
            "multiple-choice questions will offer fewer options."
        )


@app.command()
def info() -> None:
    """Display information about the game modes."""
    info_text = """
[bold cyan]Quote Guess[/bold cyan]
Version: 0.1.0

[bold]Modes:[/bold]
  • mc-easy - Well-known quotes, pick the author from four names
  • mc-hard - Obscure quotes, pick the author from four names
  • type-easy - Well-known quotes, type the author (typos forgiven)
  • type-hard - Harder quotes, type the author exactly

[bold]Scoring:[/bold]
  • Each correct answer extends your streak
  • A wrong answer resets the streak to zero
    """
    console.print(Panel(info_text, title="Quote Guess Info", border_style="cyan"))


def resolve_choice(raw_answer: str, options: Optional[list[str]]) -> str:
    """Turn an option number into the option's author name."""
    choice = raw_answer.strip()
    if options and choice.isdigit() and 1 <= int(choice) <= len(options):
        return options[int(choice) - 1]
    return raw_answer


def display_quote(
    view: QuoteView, round_number: Optional[int] = None, rounds: Optional[int] = None
) -> None:
    """Display a quote and, for multiple-choice modes, its options."""
    title = f"Quote #{view.id}"
    if round_number is not None:
        title = f"Round {round_number}/{rounds} - {title}"

    console.print()
    console.print(
        Panel(
            f"[italic]\"{escape(view.text)}\"[/italic]",
            title=title,
            subtitle=escape(view.source) if view.source else None,
            border_style="cyan",
        )
    )

    if view.options:
        for i, option in enumerate(view.options, start=1):
            console.print(f"  [cyan]{i}.[/cyan] {escape(option)}")


def display_result(result: CheckResult) -> None:
    if result.correct:
        console.print(f"[green]✓[/green] {escape(result.message)}")
    else:
        console.print(f"[red]✗[/red] {escape(result.message)}")
    console.print(f"  Streak: {result.user_score}")


def display_summary(score: SessionScore, best_streak: int) -> None:
    """Display the final score table."""
    table = Table(title="Game Summary", border_style="green")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", style="white")

    table.add_row("Answered", str(score.total))
    table.add_row("Current Streak", str(score.current))
    table.add_row("Best Streak", str(best_streak))

    console.print()
    console.print(table)


@app.callback()
def callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
) -> None:
    """
    Quote Guess - Guess the author of famous quotes.
    """
    try:
        settings = get_settings()
    except ValidationError as e:
        console.print(f"[red]Error:[/red] Invalid settings: {escape(str(e))}", style="bold")
        raise typer.Exit(code=1)

    level = "DEBUG" if verbose else settings.log_level
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


if __name__ == "__main__":
    app()
