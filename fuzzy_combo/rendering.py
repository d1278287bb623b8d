from __future__ import annotations

from collections.abc import Iterable

from rich.text import Text

from fuzzy_combo.models import ScoredMatch

MATCH_STYLE = "bold red"


def format_score(score_percent: float) -> str:
    return f"{round(score_percent * 100)}%"


def render_match_label(match: ScoredMatch) -> Text:
    """Candidate text with the characters consumed by the query highlighted."""
    label = Text(match.text)
    for position in match.positions:
        if position < len(match.text):
            label.stylize(MATCH_STYLE, position, position + 1)
    return label


def format_match_row(match: ScoredMatch, *, show_score: bool) -> str:
    if not show_score:
        return match.text
    return f"{format_score(match.score_percent):>5}  {match.text}"


def render_match_rows(
    matches: Iterable[ScoredMatch], *, show_score: bool = False
) -> list[str]:
    return [format_match_row(match, show_score=show_score) for match in matches]
