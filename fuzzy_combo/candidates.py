from __future__ import annotations

from collections.abc import Iterable, Iterator


class CandidateList:
    """Ordered list of owned candidate strings plus a selection index.

    Lookups never raise: an index outside ``0 <= index < len(self)`` yields
    ``None``. The selection index is not validated when set, so it may point
    past the end until the next lookup.
    """

    def __init__(self, selection_index: int = 0) -> None:
        self._items: list[str] = []
        self._selection_index = selection_index

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[str]:
        return iter(tuple(self._items))

    def __bool__(self) -> bool:
        return bool(self._items)

    def __repr__(self) -> str:
        return (
            f"CandidateList(items={self._items!r}, "
            f"selection_index={self._selection_index})"
        )

    @property
    def items(self) -> tuple[str, ...]:
        return tuple(self._items)

    def clear(self) -> None:
        self._items.clear()

    def add_item(self, text: str) -> None:
        self._items.append(str(text))

    def add_items(self, items: Iterable[str]) -> None:
        # Materialize first so passing this list's own items is safe.
        replacement = [str(item) for item in items]
        self.clear()
        for item in replacement:
            self.add_item(item)
        self._selection_index = 0

    def get_item_at(self, index: int) -> str | None:
        if index < 0 or index >= len(self._items):
            return None
        return self._items[index]

    def set_selection_index(self, index: int) -> None:
        self._selection_index = index

    def get_selection_index(self) -> int:
        return self._selection_index

    def current_item(self) -> str | None:
        return self.get_item_at(self._selection_index)
