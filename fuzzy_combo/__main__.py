from __future__ import annotations

import logging
import sys
from pathlib import Path

import typer
from textual.logging import TextualHandler

from fuzzy_combo import __version__
from fuzzy_combo.models import CaseFolding, FilterSettings
from fuzzy_combo.rendering import render_match_rows
from fuzzy_combo.search import rank_candidates
from fuzzy_combo.tui import FuzzyComboTui

__all__ = [
    "FuzzyComboTui",
    "cli",
    "run",
]

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _version_callback(value: bool) -> None:
    if not value:
        return
    typer.echo(f"fuzzy-combo {__version__}")
    raise typer.Exit()


def _configure_logging(level_name: str, *, interactive: bool) -> None:
    level = logging.getLevelName(level_name.upper())
    if not isinstance(level, int):
        raise typer.BadParameter(
            f"unknown log level {level_name!r}", param_hint="--log-level"
        )
    # Plain stream output would draw over the running TUI.
    handler: logging.Handler = (
        TextualHandler() if interactive else logging.StreamHandler(sys.stderr)
    )
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logging.basicConfig(level=level, handlers=[handler], force=True)


def _read_candidates(path: Path) -> list[str]:
    if str(path) == "-":
        text = sys.stdin.read()
    else:
        text = path.read_text(encoding="utf-8")
    return [line for line in text.splitlines() if line.strip()]


cli = typer.Typer(
    add_completion=False,
    help="Fuzzy-filter a list of candidates and pick one in a Textual TUI.",
)


@cli.command()
def run(
    items: list[str] | None = typer.Argument(
        None,
        help="Candidates to choose from.",
        show_default=False,
    ),
    file: Path | None = typer.Option(
        None,
        "--file",
        "-f",
        allow_dash=True,
        help="Read candidates from a file, one per line. Use - for stdin.",
    ),
    query: str | None = typer.Option(
        None,
        "--query",
        "-q",
        help="Rank candidates against this query, print them and exit.",
    ),
    scores: bool = typer.Option(
        False,
        "--scores",
        help="Prefix each printed match with its score.",
    ),
    title: str = typer.Option(
        "Candidates",
        "--title",
        help="Title shown above the candidate list.",
    ),
    threshold: float = typer.Option(
        FilterSettings.threshold,
        "--threshold",
        min=0.0,
        max=1.0,
        envvar="FUZZY_COMBO_THRESHOLD",
        help="Minimum normalized score a candidate must exceed.",
    ),
    case_folding: CaseFolding = typer.Option(
        CaseFolding.ASCII,
        "--case-folding",
        envvar="FUZZY_COMBO_CASE_FOLDING",
        help="Lower-case A-Z only (ascii) or use full Unicode case folding.",
    ),
    log_level: str = typer.Option(
        "WARNING",
        "--log-level",
        envvar="FUZZY_COMBO_LOG_LEVEL",
        help="Logging level.",
    ),
    _version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
) -> None:
    _configure_logging(log_level, interactive=query is None)
    candidates = list(items or [])
    if file is not None:
        try:
            candidates.extend(_read_candidates(file))
        except (OSError, UnicodeDecodeError) as exc:
            typer.echo(f"Failed to read candidates: {exc!s}", err=True)
            raise typer.Exit(code=1) from exc

    if not candidates:
        typer.echo("No candidates given.", err=True)
        raise typer.Exit(code=1)

    settings = FilterSettings(threshold=threshold, case_folding=case_folding)
    logger.info("Loaded %d candidates", len(candidates))

    if query is not None:
        for row in render_match_rows(
            rank_candidates(query, candidates, settings), show_score=scores
        ):
            typer.echo(row)
        return

    selected = FuzzyComboTui(
        candidates=candidates,
        title=title,
        settings=settings,
    ).run()
    if selected is None:
        raise typer.Exit(code=1)
    typer.echo(selected)


if __name__ == "__main__":
    cli()
