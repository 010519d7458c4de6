"""Multi-select prompt.

Example:
    from rich_select import InteractiveMultiselect, MultiSelectConfig

    config = MultiSelectConfig(prompt="Pick features").with_show_selected()
    features = InteractiveMultiselect(["lint", "format", "test"], config).show()
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Sequence, TypeVar

from rich.console import Console

from . import render
from .config import MultiSelectConfig, resolve_max_height, resolve_theme
from .engine import PromptEngine
from .filtering import Ranker, fuzzy_rank
from .keys import KeySource
from .output import OutputSink
from .selection import SelectionSet

logger = logging.getLogger(__name__)

T = TypeVar("T")


class InteractiveMultiselect(PromptEngine[T]):
    """Prompt that resolves to any number of options.

    Choices survive filtering: an option chosen while the list is narrowed
    stays chosen when the search is cleared. The result lists options in
    the order they were chosen.

    Keyboard controls:
        - Up/Down or Ctrl+P/Ctrl+N: Navigate (wraps around)
        - Enter: Toggle the focused option
        - Tab: Confirm
        - Left: Clear the selection
        - Right: Select every option
        - Typing/Space: Narrow the list with fuzzy matching
        - Ctrl+C: Cancel
    """

    def __init__(
        self,
        options: Sequence[T],
        config: MultiSelectConfig | None = None,
        *,
        console: Console | None = None,
        key_source: KeySource | None = None,
        output: OutputSink | None = None,
        ranker: Ranker = fuzzy_rank,
    ):
        self.config = config or MultiSelectConfig()
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
        self.selection = SelectionSet(self.candidates)

    def validate(self) -> None:
        self.config.validate()
        super().validate()

    def on_start(self) -> None:
        self.selection = SelectionSet(self.candidates)

    def on_select(self) -> None:
        text = self.focused_text
        chosen = self.selection.toggle(text)
        logger.debug("%s %r", "Selected" if chosen else "Deselected", text)

    def on_left(self) -> None:
        if self.config.clear_all:
            self.selection.clear()

    def on_right(self) -> None:
        if self.config.select_all:
            self.selection.select_all()

    def help_parts(self) -> list[str]:
        return render.multiselect_help_parts(
            self.select_key,
            self.confirm_key,
            self.filter_enabled,
            select_all=self.config.select_all,
            clear_all=self.config.clear_all,
        )

    def render(self) -> str:
        return render.render_multiselect_menu(
            self.text,
            self.query,
            self.filtered,
            self.viewport,
            self.theme,
            is_selected=self.selection.is_selected,
            filter_enabled=self.filter_enabled,
            help_parts=self.help_parts(),
            selected_texts=self.selection.texts(),
            show_selected=self.config.show_selected,
        )

    def render_finished(self) -> str:
        return render.render_multiselect_finished(
            self.text, self.query, self.selection.texts(), self.theme
        )

    def result(self) -> list[T]:
        return [self.options[i] for i in self.selection]


def multiselect(
    options: Sequence[T],
    prompt: str | None = None,
    *,
    config: MultiSelectConfig | None = None,
    console: Console | None = None,
    **overrides,
) -> list[T]:
    """Show a multi-select prompt and return the chosen options.

    ``overrides`` replace MultiSelectConfig fields, e.g. ``show_selected=True``.
    """
    config = config or MultiSelectConfig()
    if overrides:
        config = replace(config, **overrides)
    return InteractiveMultiselect(options, config, console=console).show(prompt)
