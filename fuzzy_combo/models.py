from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class CaseFolding(str, Enum):
    ASCII = "ascii"
    UNICODE = "unicode"


@dataclass(frozen=True)
class FilterSettings:
    score_equal: int = 10
    score_not_same: int = -15
    threshold: float = 0.60
    case_folding: CaseFolding = CaseFolding.ASCII


@dataclass(frozen=True)
class ScoredMatch:
    text: str
    score: int
    score_percent: float
    positions: tuple[int, ...] = ()
