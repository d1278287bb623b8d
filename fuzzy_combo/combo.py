from __future__ import annotations

from collections.abc import Iterable

from fuzzy_combo.candidates import CandidateList
from fuzzy_combo.models import FilterSettings, ScoredMatch
from fuzzy_combo.search import FuzzyFilter


class FuzzyCombo:
    """Query text, the full option list and the filtered list shown to the user."""

    MAX_QUERY_LENGTH = 256

    def __init__(
        self,
        name: str,
        options: Iterable[str] = (),
        *,
        settings: FilterSettings | None = None,
        current_item: int = 0,
    ) -> None:
        self.name = name
        self.options = CandidateList(current_item)
        self.options.add_items(options)
        self.options.set_selection_index(current_item)
        self.filtered = CandidateList(current_item)
        self.matches: list[ScoredMatch] = []
        self._filter = FuzzyFilter(self.filtered, settings)
        self._query = ""

    @property
    def settings(self) -> FilterSettings:
        return self._filter.settings

    @property
    def query(self) -> str:
        return self._query

    def set_query(self, text: str) -> None:
        self._query = text[: self.MAX_QUERY_LENGTH]

    def set_options(self, items: Iterable[str]) -> None:
        self.options.add_items(items)

    def update(self) -> list[ScoredMatch]:
        self.matches = self._filter.evaluate(self._query, self.options.items)
        return self.matches

    def select(self, index: int) -> None:
        self.filtered.set_selection_index(index)

    def selected_item(self) -> str | None:
        return self.filtered.current_item()
