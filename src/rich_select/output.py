"""In-place output area backed by ``rich.live.Live``."""

from __future__ import annotations

import logging
from typing import Protocol

from rich.console import Console
from rich.live import Live
from rich.text import Text

from .errors import OutputError

logger = logging.getLogger(__name__)


class OutputSink(Protocol):
    """Where prompts draw. Each update replaces the previous block."""

    def start(self, content: str) -> None: ...

    def update(self, content: str) -> None: ...

    def stop(self) -> None: ...


class LiveArea:
    """Output sink that repaints a markup block in place.

    The cursor is hidden while the area is running and always shown again
    on ``stop()``, which is safe to call whether or not ``start()`` finished.

    Args:
        console: Rich Console to draw on (creates new one if None).
    """

    def __init__(self, console: Console | None = None):
        self.console = console or Console()
        self._live: Live | None = None

    def _renderable(self, content: str) -> Text:
        return Text.from_markup(content)

    def start(self, content: str) -> None:
        try:
            self._live = Live(
                self._renderable(content),
                console=self.console,
                auto_refresh=False,
                transient=False,
            )
            self._live.start()
            self.console.show_cursor(False)
        except Exception as exc:
            self.stop()
            raise OutputError(f"Could not start output area: {exc}") from exc
        logger.debug("Output area started")

    def update(self, content: str) -> None:
        if self._live is None:
            return
        self._live.update(self._renderable(content), refresh=True)

    def stop(self) -> None:
        live, self._live = self._live, None
        try:
            if live is not None:
                live.stop()
        finally:
            self.console.show_cursor(True)
        logger.debug("Output area stopped")

    def __enter__(self) -> LiveArea:
        return self

    def __exit__(self, *args) -> bool:
        self.stop()
        return False
