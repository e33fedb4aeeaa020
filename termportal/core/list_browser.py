# termportal/core/list_browser.py

"""Bounded cursor over a fixed, externally supplied list of records."""

import logging
from typing import Any, Sequence, Tuple

from ..exceptions import ContentError

logger = logging.getLogger("termportal")


class ListBrowser:
    """
    Read-only cursor over an ordered list.

    The list is copied into a tuple at construction and never changed; the
    browser only tracks which entry is highlighted. The cursor always stays
    within [0, len(items) - 1].
    """

    def __init__(self, items: Sequence[Any]):
        """
        Initialize a list browser.

        Args:
            items: The records to browse, in display order

        Raises:
            ContentError: If items is empty
        """
        self._items: Tuple[Any, ...] = tuple(items)
        if not self._items:
            raise ContentError("ListBrowser needs at least one entry")
        self.cursor = 0

    @property
    def items(self) -> Tuple[Any, ...]:
        return self._items

    @property
    def selected(self) -> Any:
        """The record under the cursor."""
        return self._items[self.cursor]

    def __len__(self) -> int:
        return len(self._items)

    def move_up(self) -> None:
        if self.cursor > 0:
            self.cursor -= 1

    def move_down(self) -> None:
        if self.cursor < len(self._items) - 1:
            self.cursor += 1

    def __repr__(self) -> str:
        return f"ListBrowser(cursor={self.cursor}, items={len(self._items)})"
