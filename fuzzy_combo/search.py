from __future__ import annotations

import logging
from collections.abc import Sequence

from fuzzy_combo.candidates import CandidateList
from fuzzy_combo.models import CaseFolding, FilterSettings, ScoredMatch

logger = logging.getLogger(__name__)

_ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)
DEFAULT_SETTINGS = FilterSettings()


def fold_case(text: str, mode: CaseFolding = CaseFolding.ASCII) -> str:
    """Lower-case ``text``; ASCII mode leaves every non A-Z character alone."""
    if mode is CaseFolding.UNICODE:
        return text.casefold()
    return text.translate(_ASCII_LOWER)


def match_candidate(
    query: str,
    candidate: str,
    settings: FilterSettings = DEFAULT_SETTINGS,
) -> ScoredMatch:
    """Score one candidate against ``query`` by greedy character consumption.

    Each query character consumes the first unconsumed candidate position
    holding the same character, so a candidate character never matches twice.
    Order of the candidate characters does not matter.
    """
    return _score_folded(fold_case(query, settings.case_folding), candidate, settings)


def _score_folded(
    folded_query: str, candidate: str, settings: FilterSettings
) -> ScoredMatch:
    folded_candidate = fold_case(candidate, settings.case_folding)

    max_score = settings.score_equal * min(len(folded_query), len(folded_candidate))
    if max_score == 0:
        return ScoredMatch(text=candidate, score=0, score_percent=1.0)

    consumed = [False] * len(folded_candidate)
    positions: list[int] = []
    score = 0
    for char in folded_query:
        for index, candidate_char in enumerate(folded_candidate):
            if not consumed[index] and candidate_char == char:
                consumed[index] = True
                positions.append(index)
                score += settings.score_equal
                break
        else:
            score += settings.score_not_same

    # Unicode folding may change the length (e.g. "ß" -> "ss").
    if len(folded_candidate) != len(candidate):
        positions = []
    return ScoredMatch(
        text=candidate,
        score=score,
        score_percent=score / max_score,
        positions=tuple(sorted(positions)),
    )


def rank_candidates(
    query: str,
    candidates: Sequence[str],
    settings: FilterSettings = DEFAULT_SETTINGS,
) -> list[ScoredMatch]:
    """Return accepted candidates ordered by descending ``score_percent``.

    Ties keep the order of ``candidates``.
    """
    folded_query = fold_case(query, settings.case_folding)
    accepted = [
        match
        for match in (
            _score_folded(folded_query, candidate, settings)
            for candidate in candidates
        )
        if match.score_percent > settings.threshold
    ]
    accepted.sort(key=lambda match: -match.score_percent)
    return accepted


class FuzzyFilter:
    """Filters a master list into ``target`` once per evaluation cycle."""

    def __init__(
        self,
        target: CandidateList,
        settings: FilterSettings | None = None,
    ) -> None:
        self.target = target
        self.settings = settings or DEFAULT_SETTINGS

    def evaluate(self, query: str, master_list: Sequence[str]) -> list[ScoredMatch]:
        matches = rank_candidates(query, master_list, self.settings)
        self.target.add_items(match.text for match in matches)
        logger.debug(
            "Filtered %d candidates with query %r: %d accepted",
            len(master_list),
            query,
            len(matches),
        )
        return matches
