"""Pytest fixtures for rich-select tests."""

import pytest

from rich_select import config
from rich_select.keys import KeyEvent, KeyKind

NAMED_KEYS = {
    "up": KeyKind.UP,
    "down": KeyKind.DOWN,
    "left": KeyKind.LEFT,
    "right": KeyKind.RIGHT,
    "enter": KeyKind.ENTER,
    "tab": KeyKind.TAB,
    "space": KeyKind.SPACE,
    "backspace": KeyKind.BACKSPACE,
    "ctrl+c": KeyKind.INTERRUPT,
    "esc": KeyKind.ESCAPE,
}

SCENARIO = ["alpha", "beta", "gamma", "delta", "epsilon"]


def to_event(token: str) -> KeyEvent:
    """Turn "down"/"enter"/... into named keys and single characters into CHAR events."""
    if token in NAMED_KEYS:
        return KeyEvent.of(NAMED_KEYS[token])
    return KeyEvent.text(token)


class ScriptedKeys:
    """Key source replaying a fixed list of events."""

    def __init__(self, events):
        self.events = list(events)
        self.reads = 0

    def read(self) -> KeyEvent:
        if not self.events:
            raise AssertionError("Prompt read past the end of the key script")
        self.reads += 1
        event = self.events.pop(0)
        if isinstance(event, Exception):
            raise event
        return event


class RecordingOutput:
    """Output sink keeping every frame drawn."""

    def __init__(self):
        self.frames: list[str] = []
        self.started = False
        self.stopped = False

    def start(self, content: str) -> None:
        self.started = True
        self.frames.append(content)

    def update(self, content: str) -> None:
        self.frames.append(content)

    def stop(self) -> None:
        self.stopped = True


@pytest.fixture(autouse=True)
def clean_defaults(monkeypatch):
    """Isolate tests from process-wide defaults and the environment."""
    monkeypatch.delenv(config.MAX_HEIGHT_ENV, raising=False)
    config.reset_defaults()
    yield
    config.reset_defaults()


@pytest.fixture
def script():
    """Factory building a ScriptedKeys source from key tokens.

    Tokens are key names ("down", "enter", "ctrl+c", ...), single
    characters, or exceptions to raise from ``read()``.
    """

    def _script(*tokens):
        events = [token if isinstance(token, Exception) else to_event(token) for token in tokens]
        return ScriptedKeys(events)

    return _script


@pytest.fixture
def output():
    return RecordingOutput()


@pytest.fixture
def scenario():
    return list(SCENARIO)
