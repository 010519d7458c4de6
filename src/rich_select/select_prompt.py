"""Single-select prompt.

Example:
    from rich_select import InteractiveSelect, SelectConfig

    config = SelectConfig(prompt="Pick an environment").with_default_option("staging")
    env = InteractiveSelect(["dev", "staging", "prod"], config).show()
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Sequence, TypeVar

from rich.console import Console

from . import render
from .config import SelectConfig, resolve_max_height, resolve_theme
from .engine import PromptEngine
from .filtering import Ranker, fuzzy_rank
from .keys import KeySource
from .output import OutputSink

logger = logging.getLogger(__name__)

T = TypeVar("T")


class InteractiveSelect(PromptEngine[T]):
    """Prompt that resolves to exactly one option.

    Keyboard controls:
        - Up/Down or Ctrl+P/Ctrl+N: Navigate (wraps around)
        - Typing: Narrow the list with fuzzy matching
        - Backspace: Remove the last search character
        - Enter: Select the focused option
        - Ctrl+C: Cancel

    When ``select_key`` and ``confirm_key`` differ, the select key marks the
    focused option as the pending answer and the confirm key returns it
    (or the focused option if nothing was marked). Changing the search
    clears the mark.
    """

    def __init__(
        self,
        options: Sequence[T],
        config: SelectConfig | None = None,
        *,
        console: Console | None = None,
        key_source: KeySource | None = None,
        output: OutputSink | None = None,
        ranker: Ranker = fuzzy_rank,
    ):
        self.config = config or SelectConfig()
        super().__init__(
            options,
            prompt=self.config.prompt,
            max_height=resolve_max_height(self.config.max_height),
            filter_enabled=self.config.filter,
            select_key=self.config.select_key,
            confirm_key=self.config.confirm_key,
            theme=resolve_theme(self.config.theme),
            on_interrupt=self.config.on_interrupt,
            console=console,
            key_source=key_source,
            output=output,
            ranker=ranker,
        )
        self.pending: str | None = None

    def validate(self) -> None:
        self.config.validate()
        super().validate()

    def on_start(self) -> None:
        self.pending = None
        if self.config.default_option is None:
            return
        default = str(self.config.default_option)
        if default not in self.candidates:
            return
        index = self.candidates.index(default)
        self.viewport.place(index, len(self.filtered))
        logger.debug("Default option %r placed at %d", default, index)

    def on_query_change(self) -> None:
        self.pending = None

    def on_select(self) -> None:
        self.pending = self.focused_text

    @property
    def answer(self) -> str | None:
        """Display text that confirming now would return."""
        if self.pending is not None:
            return self.pending
        return self.focused_text

    def help_parts(self) -> list[str]:
        return render.select_help_parts(self.select_key, self.confirm_key, self.filter_enabled)

    def render(self) -> str:
        return render.render_select_menu(
            self.text,
            self.query,
            self.filtered,
            self.viewport,
            self.theme,
            filter_enabled=self.filter_enabled,
            help_parts=self.help_parts(),
            pending=self.pending,
        )

    def render_finished(self) -> str:
        return render.render_select_finished(self.text, self.query, self.answer or "", self.theme)

    def result(self) -> T:
        return self.option_for(self.answer)


def select(
    options: Sequence[T],
    prompt: str | None = None,
    *,
    config: SelectConfig | None = None,
    console: Console | None = None,
    **overrides,
) -> T:
    """Show a single-select prompt and return the chosen option.

    Args:
        options: Options to choose from.
        prompt: Prompt markup (overrides the config's prompt).
        config: Base configuration.
        console: Rich Console to draw on.
        **overrides: SelectConfig fields to replace, e.g. ``max_height=10``.
    """
    config = config or SelectConfig()
    if overrides:
        config = replace(config, **overrides)
    return InteractiveSelect(options, config, console=console).show(prompt)
