"""Cancellation signal for interrupted prompts."""

from __future__ import annotations

from typing import Callable


class CancellationSignal:
    """Records an interrupt and runs the user's callback once on exit.

    Use as the outermost context manager of a prompt so the callback runs
    after the terminal has been restored:

        with CancellationSignal(on_interrupt) as signal:
            ...
            signal.cancel()
    """

    def __init__(self, on_interrupt: Callable[[], None] | None = None):
        self._on_interrupt = on_interrupt
        self._cancelled = False
        self._notified = False

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def cancel(self) -> None:
        self._cancelled = True

    def notify(self) -> None:
        """Invoke the callback if cancelled. Runs at most once."""
        if not self._cancelled or self._notified:
            return
        self._notified = True
        if self._on_interrupt is not None:
            self._on_interrupt()

    def __enter__(self) -> CancellationSignal:
        return self

    def __exit__(self, *args) -> bool:
        self.notify()
        return False
