"""Typer entry-point wiring for the Camel Cards CLI."""

from __future__ import annotations

import logging
import sys
from enum import Enum
from pathlib import Path
from typing import List, NoReturn, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from .. import parsing
from ..cards import Mode
from ..errors import ParseError
from ..report import ReportConfig, evaluate_text
from .render import format_hand, ranking_table, totals_table

app = typer.Typer(add_completion=False, rich_markup_mode="rich")
console = Console()
err_console = Console(stderr=True)

logger = logging.getLogger(__name__)


class LogLevel(str, Enum):
    """Logging levels accepted by ``--log-level``."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


def _configure_logging(level: LogLevel) -> None:
    logging.basicConfig(
        level=getattr(logging, level.value),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def _read_input(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    source = Path(path)
    if not source.is_file():
        raise typer.BadParameter(f"{path} is not a readable file", param_hint="PATH")
    try:
        return source.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        _fail(f"{path} is not valid UTF-8 (byte {exc.start}: {exc.reason})")


def _fail(reason: str) -> NoReturn:
    err_console.print(f"[bold red]Failed to parse input[/bold red]: {escape(reason)}")
    raise typer.Exit(code=1)


@app.command()
def score(
    path: str = typer.Argument(..., help="Puzzle input file, or '-' for stdin."),
    modes: Optional[List[Mode]] = typer.Option(
        None,
        "--mode",
        "-m",
        case_sensitive=False,
        help="Mode(s) to evaluate; defaults to standard then wildcard.",
    ),
    ranking: bool = typer.Option(False, "--ranking", help="Show the ranked rounds for each mode."),
    log_level: LogLevel = typer.Option(
        LogLevel.WARNING, "--log-level", case_sensitive=False, help="Python logging level (e.g. INFO, DEBUG)."
    ),
) -> None:
    """Print the rank-weighted winnings of every hand in PATH."""

    _configure_logging(log_level)
    config = ReportConfig(modes=tuple(modes) if modes else ReportConfig().modes, include_ranking=ranking)
    text = _read_input(path)
    logger.debug("read %d character(s) from %s", len(text), path)
    try:
        reports = evaluate_text(text, config)
    except ParseError as exc:
        _fail(str(exc))

    console.print(totals_table(reports))
    if ranking:
        for report in reports:
            console.print(ranking_table(report))


@app.command()
def classify(
    hand: str = typer.Argument(..., help="Five card symbols, e.g. KTJJT."),
    mode: Mode = typer.Option(Mode.STANDARD, "--mode", "-m", case_sensitive=False, help="How to read J."),
) -> None:
    """Show the category of a single HAND."""

    try:
        parsed = parsing.parse_hand(hand, mode)
    except ParseError as exc:
        _fail(str(exc))
    console.print(f"{format_hand(parsed)}: [bold]{parsed.hand_type.describe()}[/bold]")


def main() -> None:
    """Entry-point for ``python -m camel``."""

    app()


if __name__ == "__main__":  # pragma: no cover - CLI invocation
    main()
