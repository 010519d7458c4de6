"""Scrollable window over the filtered option list."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, TypeVar

T = TypeVar("T")


@dataclass
class Viewport:
    """Visible range ``[start, end)`` of the filtered list plus the focus.

    Whenever the filtered list is non-empty, ``start <= focus < end`` and
    ``end - start == min(max_height, size)``. For an empty list the window
    is ``[0, 0)`` and the focus is inactive.

    Attributes:
        max_height: Maximum number of visible rows.
        start: First visible index.
        end: One past the last visible index.
        focus: Focused index into the filtered list.
    """

    max_height: int
    start: int = 0
    end: int = 0
    focus: int = 0

    def height(self, size: int) -> int:
        """Number of rows visible for a list of the given size."""
        return min(self.max_height, size)

    def reset(self, size: int) -> None:
        """Focus the first item and show the top of the list."""
        self.focus = 0
        self.start = 0
        self.end = self.height(size)

    def place(self, index: int, size: int) -> None:
        """Focus index at startup, showing the item above it when possible."""
        height = self.height(size)
        self.focus = index
        if index > 0 and size > height:
            self.end = min(max(index - 1 + height, index + 1), size)
            self.start = self.end - height
        else:
            self.start = 0
            self.end = height

    def move_up(self, size: int) -> None:
        """Move focus up one row, wrapping to the bottom from the first item."""
        if size == 0:
            return
        height = self.height(size)
        if self.focus > 0:
            self.focus -= 1
            if self.focus < self.start:
                self.start -= 1
                self.end -= 1
                if self.start < 0:
                    self.start = 0
                    self.end = height
        else:
            self.focus = size - 1
            self.start = size - height
            self.end = size

    def move_down(self, size: int) -> None:
        """Move focus down one row, wrapping to the top from the last item."""
        if size == 0:
            return
        height = self.height(size)
        if self.focus < size - 1:
            self.focus += 1
            if self.focus >= self.end:
                self.start += 1
                self.end += 1
        else:
            self.focus = 0
            self.start = 0
            self.end = height

    def visible(self, items: Sequence[T]) -> Sequence[T]:
        """Slice of items inside the window."""
        return items[self.start : self.end]

    def is_focused(self, index: int) -> bool:
        return index == self.focus
