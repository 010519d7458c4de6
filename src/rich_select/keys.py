"""Keyboard input helpers for rich_select.

Raw keys read with ``readchar`` are decoded into ``KeyEvent`` values so the
prompt engines never compare escape sequences directly.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Protocol

import readchar

from .errors import KeySourceError


class KeyKind(enum.Enum):
    """Category of a decoded key press."""

    CHAR = "char"
    SPACE = "space"
    BACKSPACE = "backspace"
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    ENTER = "enter"
    TAB = "tab"
    ESCAPE = "escape"
    INTERRUPT = "interrupt"
    UNKNOWN = "unknown"

    @property
    def label(self) -> str:
        """Name shown for this key in help lines."""
        return self.value


@dataclass(frozen=True)
class KeyEvent:
    """A single decoded key press.

    Attributes:
        kind: Key category.
        char: The literal character for CHAR events, empty otherwise.
    """

    kind: KeyKind
    char: str = ""

    @classmethod
    def of(cls, kind: KeyKind) -> "KeyEvent":
        return cls(kind=kind)

    @classmethod
    def text(cls, char: str) -> "KeyEvent":
        return cls(kind=KeyKind.CHAR, char=char)


class KeySource(Protocol):
    """Anything that blocks until the next key and returns it decoded."""

    def read(self) -> KeyEvent: ...


def is_enter(key: str) -> bool:
    """Check if key is Enter/Return."""
    return key in (readchar.key.ENTER, "\r", "\n")


def is_escape(key: str) -> bool:
    """Check if key is Escape (handles terminal variations)."""
    return key in (readchar.key.ESC, "\x1b\x1b")


def is_interrupt(key: str) -> bool:
    """Check if key is Ctrl+C."""
    return key == readchar.key.CTRL_C


def is_up(key: str) -> bool:
    """Check if key is up arrow or Ctrl+P."""
    return key in (readchar.key.UP, readchar.key.CTRL_P)


def is_down(key: str) -> bool:
    """Check if key is down arrow or Ctrl+N."""
    return key in (readchar.key.DOWN, readchar.key.CTRL_N)


def is_backspace(key: str) -> bool:
    """Check if key is backspace (handles terminal variations)."""
    return key in (readchar.key.BACKSPACE, "\x7f", "\b")


def is_space(key: str) -> bool:
    """Check if key is space."""
    return key == " "


def decode_key(key: str) -> KeyEvent:
    """Decode a raw ``readchar`` key string into a KeyEvent."""
    if is_interrupt(key):
        return KeyEvent.of(KeyKind.INTERRUPT)
    if is_enter(key):
        return KeyEvent.of(KeyKind.ENTER)
    if key == readchar.key.TAB:
        return KeyEvent.of(KeyKind.TAB)
    if is_space(key):
        return KeyEvent.of(KeyKind.SPACE)
    if is_backspace(key):
        return KeyEvent.of(KeyKind.BACKSPACE)
    if is_up(key):
        return KeyEvent.of(KeyKind.UP)
    if is_down(key):
        return KeyEvent.of(KeyKind.DOWN)
    if key == readchar.key.LEFT:
        return KeyEvent.of(KeyKind.LEFT)
    if key == readchar.key.RIGHT:
        return KeyEvent.of(KeyKind.RIGHT)
    if is_escape(key):
        return KeyEvent.of(KeyKind.ESCAPE)
    if len(key) == 1 and key.isprintable():
        return KeyEvent.text(key)
    return KeyEvent.of(KeyKind.UNKNOWN)


class ReadcharKeySource:
    """Key source reading from the controlling terminal with ``readchar``."""

    def read(self) -> KeyEvent:
        try:
            key = readchar.readkey()
        except KeyboardInterrupt:
            return KeyEvent.of(KeyKind.INTERRUPT)
        except OSError as exc:
            raise KeySourceError(f"Failed to read key: {exc}") from exc
        return decode_key(key)
