from __future__ import annotations

import logging
from collections.abc import Iterable

from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.events import Key, Paste
from textual.widgets import OptionList, Static

from fuzzy_combo.combo import FuzzyCombo
from fuzzy_combo.models import FilterSettings
from fuzzy_combo.rendering import render_match_label

logger = logging.getLogger(__name__)


class FuzzyComboTui(App[str | None]):
    CSS_PATH = "selection_list.tcss"
    ENABLE_COMMAND_PALETTE = False
    BINDINGS = [
        Binding("escape", "escape", "Clear/Quit", show=False),
        Binding("ctrl+c", "quit", show=False),
    ]

    def __init__(
        self,
        *,
        candidates: Iterable[str],
        title: str = "Candidates",
        settings: FilterSettings | None = None,
    ) -> None:
        super().__init__()
        self.theme = "rose-pine"
        self._title = title
        self._combo = FuzzyCombo(title, candidates, settings=settings)

    @property
    def combo(self) -> FuzzyCombo:
        return self._combo

    def compose(self) -> ComposeResult:
        with Vertical(id="combo"):
            yield Static(self._title, id="combo-title")
            yield OptionList(id="candidate-list")
            yield Static("", id="status")

    def on_mount(self) -> None:
        self.query_one("#candidate-list", OptionList).focus()
        self._refresh_candidates()

    def _refresh_candidates(self) -> None:
        self._combo.update()
        self._render_candidate_options()
        self._update_status()
        self._update_filter_indicator()

    def _render_candidate_options(self) -> None:
        candidate_list = self.query_one("#candidate-list", OptionList)
        candidate_list.clear_options()
        if not self._combo.matches:
            candidate_list.add_option("No matches")
            return
        candidate_list.add_options(
            [render_match_label(match) for match in self._combo.matches]
        )
        candidate_list.action_first()

    def _update_status(self) -> None:
        self.query_one("#status", Static).update(
            f"{len(self._combo.filtered):,} of {len(self._combo.options):,} "
            "candidates match."
        )

    def _filter_indicator_text(self) -> Text:
        indicator = Text("filter", style="dim")
        indicator.stylize("bold red", 0, 1)
        indicator.append(f" {self._combo.query}_", style="bold white")
        return indicator

    def _update_filter_indicator(self) -> None:
        combo_panel = self.query_one("#combo", Vertical)
        combo_panel.styles.border_title_align = "left"
        combo_panel.border_title = self._filter_indicator_text()

    def _set_query(self, query: str) -> None:
        self._combo.set_query(query)
        logger.debug("Query changed to %r", self._combo.query)
        self._refresh_candidates()

    def _append_query_text(self, text: str) -> None:
        self._set_query(self._combo.query + text)

    def _index_in_range(self, index: int) -> bool:
        return 0 <= index < len(self._combo.filtered)

    def action_escape(self) -> None:
        if self._combo.query:
            self._set_query("")
            return
        self.exit(None)

    def on_key(self, event: Key) -> None:
        if event.key == "backspace":
            if self._combo.query:
                self._set_query(self._combo.query[:-1])
            event.stop()
            return

        if event.key == "space":
            self._append_query_text(" ")
            event.stop()
            return

        if event.character and event.character.isprintable():
            self._append_query_text(event.character)
            event.stop()
            return

    def on_paste(self, event: Paste) -> None:
        sanitized = event.text.replace("\r", "").replace("\n", "")
        if not sanitized:
            return
        self._append_query_text(sanitized)
        event.stop()

    def on_option_list_option_highlighted(
        self, event: OptionList.OptionHighlighted
    ) -> None:
        if event.option_list.id != "candidate-list":
            return
        if not self._index_in_range(event.option_index):
            return
        self._combo.select(event.option_index)

    def on_option_list_option_selected(self, event: OptionList.OptionSelected) -> None:
        if event.option_list.id != "candidate-list":
            return
        if not self._index_in_range(event.option_index):
            return
        self._combo.select(event.option_index)
        self.exit(self._combo.selected_item())
