"""Chosen-option bookkeeping for multi-select prompts.

Choices are stored as positions in the original option list so they survive
filtering, but are looked up by display text because the focused row only
knows its text. Options sharing a display text are indistinguishable here:
lookups always resolve to the first one.
"""

from __future__ import annotations

from typing import Sequence


class SelectionSet:
    """Ordered set of chosen option indices, kept in insertion order."""

    def __init__(self, candidates: Sequence[str]):
        self._candidates = candidates
        self._indices: list[int] = []

    def __len__(self) -> int:
        return len(self._indices)

    def __iter__(self):
        return iter(self._indices)

    @property
    def indices(self) -> list[int]:
        return list(self._indices)

    def index_of(self, text: str) -> int:
        """Position of the first candidate with this display text, or -1."""
        for i, candidate in enumerate(self._candidates):
            if candidate == text:
                return i
        return -1

    def is_selected(self, text: str) -> bool:
        return any(self._candidates[i] == text for i in self._indices)

    def toggle(self, text: str) -> bool:
        """Flip the chosen state of text. Returns True if it is now chosen."""
        for position, i in enumerate(self._indices):
            if self._candidates[i] == text:
                del self._indices[position]
                return False

        index = self.index_of(text)
        if index < 0:
            return False
        self._indices.append(index)
        return True

    def select_all(self) -> None:
        self._indices = list(range(len(self._candidates)))

    def clear(self) -> None:
        self._indices = []

    def texts(self) -> list[str]:
        """Display texts of the chosen options, in insertion order."""
        return [self._candidates[i] for i in self._indices]
