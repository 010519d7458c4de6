"""Shared key dispatcher and event loop for select prompts.

``PromptEngine`` owns the filtered list, the viewport and the query. The
single- and multi-select prompts subclass it and fill in what the select
and confirm keys do, how the block is rendered, and what gets returned.
"""

from __future__ import annotations

import enum
import logging
from typing import Generic, Sequence, TypeVar

from rich.console import Console

from .errors import ConfigurationError, SelectionCancelled
from .filtering import Ranker, filter_candidates, fuzzy_rank
from .keys import KeyEvent, KeyKind, KeySource, ReadcharKeySource
from .output import LiveArea, OutputSink
from .signals import CancellationSignal
from .themes import Theme
from .viewport import Viewport

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Navigation keys used when typing does not filter.
VIM_UP = "k"
VIM_DOWN = "j"


class PromptState(enum.Enum):
    BROWSING = "browsing"
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"


class PromptEngine(Generic[T]):
    """State machine behind a select prompt.

    One key event is handled at a time: ``handle_key`` performs a single
    state transition, then ``show`` repaints the whole block before reading
    the next key.

    Args:
        options: Options to choose from; each is displayed as ``str(option)``.
        prompt: Default prompt markup.
        max_height: Resolved number of visible rows.
        filter_enabled: Whether typing narrows the list.
        select_key: Key that accepts or toggles the focused option.
        confirm_key: Key that finishes the prompt.
        theme: Resolved visual theme.
        on_interrupt: Callback invoked once after Ctrl+C.
        console: Rich Console for the default output area.
        key_source: Where keys come from (reads the terminal if None).
        output: Where the block is drawn (a LiveArea if None).
        ranker: Fuzzy ranking function.
    """

    def __init__(
        self,
        options: Sequence[T],
        *,
        prompt: str,
        max_height: int,
        filter_enabled: bool,
        select_key: KeyKind,
        confirm_key: KeyKind,
        theme: Theme,
        on_interrupt=None,
        console: Console | None = None,
        key_source: KeySource | None = None,
        output: OutputSink | None = None,
        ranker: Ranker = fuzzy_rank,
    ):
        self.options = list(options)
        self.candidates = [str(option) for option in self.options]
        self.prompt = prompt
        self.filter_enabled = filter_enabled
        self.select_key = select_key
        self.confirm_key = confirm_key
        self.theme = theme
        self.on_interrupt = on_interrupt
        self.key_source = key_source or ReadcharKeySource()
        self.output = output or LiveArea(console)
        self.ranker = ranker

        self.text = prompt
        self.query = ""
        self.filtered: list[str] = list(self.candidates)
        self.viewport = Viewport(max_height=max_height)
        self.viewport.reset(len(self.filtered))
        self.state = PromptState.BROWSING

    # -- hooks for subclasses -------------------------------------------

    def validate(self) -> None:
        """Raise ConfigurationError if the prompt cannot start."""
        if not self.options:
            raise ConfigurationError("No options provided")

    def on_start(self) -> None:
        """Prepare per-invocation state after the common reset."""

    def on_query_change(self) -> None:
        """The query changed and the filtered list was rebuilt."""

    def on_select(self) -> None:
        """Select key pressed with a non-empty filtered list."""

    def on_left(self) -> None:
        """Left arrow pressed."""

    def on_right(self) -> None:
        """Right arrow pressed."""

    def render(self) -> str:
        raise NotImplementedError

    def render_finished(self) -> str:
        raise NotImplementedError

    def result(self):
        raise NotImplementedError

    # -- state ----------------------------------------------------------

    @property
    def max_height(self) -> int:
        return self.viewport.max_height

    @property
    def focused_text(self) -> str | None:
        """Display text of the focused option, None when nothing matches."""
        if not self.filtered:
            return None
        return self.filtered[self.viewport.focus]

    def option_for(self, text: str) -> T:
        """First option whose display text is text."""
        return self.options[self.candidates.index(text)]

    def reset(self, text: str | None = None) -> None:
        """Start a fresh invocation: empty query, full list, top of window."""
        self.text = text or self.prompt
        self.state = PromptState.BROWSING
        self._set_query("")
        self.on_start()

    def _set_query(self, query: str) -> None:
        self.query = query
        self.filtered = filter_candidates(query, self.candidates, self.ranker)
        self.viewport.reset(len(self.filtered))
        self.on_query_change()
        logger.debug("Query %r matches %d of %d", query, len(self.filtered), len(self.candidates))

    def _append_query(self, char: str) -> None:
        self._set_query(self.query + char)

    def _delete_query_char(self) -> None:
        if not self.query:
            return
        self._set_query(self.query[:-1])

    # -- dispatch -------------------------------------------------------

    def handle_key(self, event: KeyEvent) -> None:
        """Apply one key event to the prompt state."""
        if self.state is not PromptState.BROWSING:
            return

        kind = event.kind
        if kind == self.confirm_key:
            if self.filtered:
                self.state = PromptState.CONFIRMED
                logger.debug("Confirmed with %r focused", self.focused_text)
        elif kind == self.select_key:
            if self.filtered:
                self.on_select()
        elif kind is KeyKind.INTERRUPT:
            self.state = PromptState.CANCELLED
            logger.debug("Interrupted")
        elif kind is KeyKind.CHAR:
            if self.filter_enabled:
                self._append_query(event.char)
            elif event.char == VIM_UP:
                self.viewport.move_up(len(self.filtered))
            elif event.char == VIM_DOWN:
                self.viewport.move_down(len(self.filtered))
        elif kind is KeyKind.SPACE:
            if self.filter_enabled:
                self._append_query(" ")
        elif kind is KeyKind.BACKSPACE:
            self._delete_query_char()
        elif kind is KeyKind.LEFT:
            self.on_left()
        elif kind is KeyKind.RIGHT:
            self.on_right()
        elif kind is KeyKind.UP:
            self.viewport.move_up(len(self.filtered))
        elif kind is KeyKind.DOWN:
            self.viewport.move_down(len(self.filtered))

    # -- loop -----------------------------------------------------------

    def show(self, text: str | None = None):
        """Run the prompt until the user confirms or interrupts.

        Args:
            text: Prompt markup for this invocation (the configured prompt if
                empty).

        Returns:
            The prompt's result (see subclasses).

        Raises:
            ConfigurationError: Before anything is drawn, if the prompt
                cannot start.
            OutputError: If the output area cannot be started.
            KeySourceError: If reading a key fails.
            SelectionCancelled: After Ctrl+C, once the callback has run.
        """
        self.validate()
        self.reset(text)

        with CancellationSignal(self.on_interrupt) as signal:
            try:
                self.output.start(self.render())
                while self.state is PromptState.BROWSING:
                    event = self.key_source.read()
                    self.handle_key(event)
                    if self.state is PromptState.CONFIRMED:
                        self.output.update(self.render_finished())
                    elif self.state is PromptState.BROWSING:
                        self.output.update(self.render())
            finally:
                self.output.stop()

            if self.state is PromptState.CANCELLED:
                signal.cancel()

        if self.state is PromptState.CANCELLED:
            raise SelectionCancelled(self.text)
        return self.result()
