"""Prompt configuration and process-wide defaults.

Configuration objects are frozen; every ``with_*`` method returns a derived
copy. Unset values are resolved once when a prompt is built, in this order:
explicit value, process-wide default, hardcoded constant.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Callable

from .errors import ConfigurationError
from .keys import KeyKind
from .themes import DEFAULT_THEME, Theme

DEFAULT_MAX_HEIGHT = 5
MAX_HEIGHT_ENV = "RICH_SELECT_MAX_HEIGHT"

InterruptCallback = Callable[[], None]


@dataclass(frozen=True)
class SelectDefaults:
    """Process-wide fallbacks used when a prompt leaves a value unset."""

    max_height: int = DEFAULT_MAX_HEIGHT
    theme: Theme = DEFAULT_THEME


_defaults = SelectDefaults()


def get_defaults() -> SelectDefaults:
    """Return the active process-wide defaults."""
    return _defaults


def set_defaults(defaults: SelectDefaults) -> SelectDefaults:
    """Replace the process-wide defaults and return the previous ones."""
    global _defaults
    previous = _defaults
    _defaults = defaults
    return previous


def reset_defaults() -> None:
    """Restore the built-in defaults."""
    set_defaults(SelectDefaults())


def _env_max_height() -> int | None:
    raw = os.environ.get(MAX_HEIGHT_ENV, "").strip()
    if not raw:
        return None
    try:
        value = int(raw)
    except ValueError:
        return None
    return value if value > 0 else None


def resolve_max_height(explicit: int | None) -> int:
    """Resolve the visible row limit.

    Values <= 0 count as unset. The environment override sits between the
    explicit value and the process default.
    """
    if explicit is not None and explicit > 0:
        return explicit
    env_value = _env_max_height()
    if env_value is not None:
        return env_value
    default = get_defaults().max_height
    if default > 0:
        return default
    return DEFAULT_MAX_HEIGHT


def resolve_theme(explicit: Theme | None) -> Theme:
    return explicit or get_defaults().theme or DEFAULT_THEME


def _check_space_bindings(filter_enabled: bool, select_key: KeyKind, confirm_key: KeyKind) -> None:
    if filter_enabled and KeyKind.SPACE in (select_key, confirm_key):
        raise ConfigurationError(
            "Space cannot be used as select or confirm key while filtering is enabled"
        )


@dataclass(frozen=True)
class SelectConfig:
    """Settings for a single-select prompt.

    Attributes:
        prompt: Text shown in the header line.
        default_option: Display text of the option focused at startup.
        max_height: Visible rows (None or <= 0 uses the defaults).
        filter: Whether typing narrows the list.
        select_key: Key that accepts the focused option.
        confirm_key: Key that finishes the prompt.
        on_interrupt: Callback invoked once when the user presses Ctrl+C.
        theme: Visual theme (None uses the defaults).
    """

    prompt: str = "Please select an option"
    default_option: str | None = None
    max_height: int | None = None
    filter: bool = True
    select_key: KeyKind = KeyKind.ENTER
    confirm_key: KeyKind = KeyKind.ENTER
    on_interrupt: InterruptCallback | None = None
    theme: Theme | None = None

    def with_prompt(self, prompt: str) -> SelectConfig:
        return replace(self, prompt=prompt)

    def with_default_option(self, option: object) -> SelectConfig:
        return replace(self, default_option=None if option is None else str(option))

    def with_max_height(self, max_height: int) -> SelectConfig:
        return replace(self, max_height=max_height)

    def with_filter(self, enabled: bool = True) -> SelectConfig:
        return replace(self, filter=enabled)

    def with_select_key(self, key: KeyKind) -> SelectConfig:
        return replace(self, select_key=key)

    def with_confirm_key(self, key: KeyKind) -> SelectConfig:
        return replace(self, confirm_key=key)

    def with_on_interrupt(self, callback: InterruptCallback | None) -> SelectConfig:
        return replace(self, on_interrupt=callback)

    def with_theme(self, theme: Theme) -> SelectConfig:
        return replace(self, theme=theme)

    def validate(self) -> None:
        """Raise ConfigurationError if the key bindings clash with filtering."""
        _check_space_bindings(self.filter, self.select_key, self.confirm_key)


@dataclass(frozen=True)
class MultiSelectConfig:
    """Settings for a multi-select prompt.

    Attributes:
        prompt: Text shown in the header line.
        max_height: Visible rows (None or <= 0 uses the defaults).
        filter: Whether typing narrows the list.
        select_key: Key that toggles the focused option.
        confirm_key: Key that finishes the prompt.
        select_all: Whether the right arrow chooses every option.
        clear_all: Whether the left arrow clears the selection.
        show_selected: Whether to print a "you have selected" summary line.
        on_interrupt: Callback invoked once when the user presses Ctrl+C.
        theme: Visual theme (None uses the defaults).
    """

    prompt: str = "Please select your options"
    max_height: int | None = None
    filter: bool = True
    select_key: KeyKind = KeyKind.ENTER
    confirm_key: KeyKind = KeyKind.TAB
    select_all: bool = True
    clear_all: bool = True
    show_selected: bool = False
    on_interrupt: InterruptCallback | None = None
    theme: Theme | None = None

    def with_prompt(self, prompt: str) -> MultiSelectConfig:
        return replace(self, prompt=prompt)

    def with_max_height(self, max_height: int) -> MultiSelectConfig:
        return replace(self, max_height=max_height)

    def with_filter(self, enabled: bool = True) -> MultiSelectConfig:
        return replace(self, filter=enabled)

    def with_select_key(self, key: KeyKind) -> MultiSelectConfig:
        return replace(self, select_key=key)

    def with_confirm_key(self, key: KeyKind) -> MultiSelectConfig:
        return replace(self, confirm_key=key)

    def with_select_all(self, enabled: bool = True) -> MultiSelectConfig:
        return replace(self, select_all=enabled)

    def with_clear_all(self, enabled: bool = True) -> MultiSelectConfig:
        return replace(self, clear_all=enabled)

    def with_show_selected(self, enabled: bool = True) -> MultiSelectConfig:
        return replace(self, show_selected=enabled)

    def with_on_interrupt(self, callback: InterruptCallback | None) -> MultiSelectConfig:
        return replace(self, on_interrupt=callback)

    def with_theme(self, theme: Theme) -> MultiSelectConfig:
        return replace(self, theme=theme)

    def validate(self) -> None:
        """Raise ConfigurationError if the key bindings clash.

        Space is reserved for the search while filtering, and toggling needs
        a key of its own since confirm takes precedence.
        """
        _check_space_bindings(self.filter, self.select_key, self.confirm_key)
        if self.select_key == self.confirm_key:
            raise ConfigurationError(
                f"Select and confirm keys must differ (both are {self.select_key.label})"
            )
