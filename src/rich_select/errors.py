"""Error types raised by rich_select prompts."""

from __future__ import annotations


class SelectError(Exception):
    """Base error for all prompt failures."""


class ConfigurationError(SelectError, ValueError):
    """Raised before the interactive loop when the prompt cannot start.

    Covers an empty option list and key bindings that clash with filtering.
    """


class OutputError(SelectError):
    """Raised when the output area cannot be started."""


class KeySourceError(SelectError):
    """Raised when the key source fails while the prompt is running."""


class SelectionCancelled(SelectError):
    """Raised after the user interrupts a prompt (Ctrl+C)."""

    def __init__(self, prompt: str = ""):
        self.prompt = prompt
        super().__init__(f"Selection cancelled: {prompt}" if prompt else "Selection cancelled")
