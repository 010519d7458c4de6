"""Fuzzy-filtered select and multi-select prompts for the terminal.

Built on Rich.Live for flicker-free repaints and readchar for key input.

Example:
    from rich_select import InteractiveMultiselect, MultiSelectConfig, select

    env = select(["dev", "staging", "prod"], "Pick an environment")

    features = InteractiveMultiselect(
        ["lint", "format", "test"],
        MultiSelectConfig(prompt="Pick features to enable"),
    ).show()  # e.g. ["test", "lint"], in the order they were chosen
"""

__version__ = "0.1.0"

from .config import (
    DEFAULT_MAX_HEIGHT,
    MultiSelectConfig,
    SelectConfig,
    SelectDefaults,
    get_defaults,
    reset_defaults,
    set_defaults,
)
from .errors import (
    ConfigurationError,
    KeySourceError,
    OutputError,
    SelectError,
    SelectionCancelled,
)
from .filtering import RankedMatch, filter_candidates, fuzzy_rank
from .keys import KeyEvent, KeyKind, ReadcharKeySource, decode_key
from .multiselect_prompt import InteractiveMultiselect, multiselect
from .output import LiveArea
from .select_prompt import InteractiveSelect, select
from .themes import DEFAULT_THEME, Theme

__all__ = [
    # Prompts
    "InteractiveSelect",
    "InteractiveMultiselect",
    "select",
    "multiselect",
    # Configuration
    "SelectConfig",
    "MultiSelectConfig",
    "SelectDefaults",
    "DEFAULT_MAX_HEIGHT",
    "get_defaults",
    "set_defaults",
    "reset_defaults",
    # Theming
    "Theme",
    "DEFAULT_THEME",
    # Keys and output
    "KeyKind",
    "KeyEvent",
    "ReadcharKeySource",
    "decode_key",
    "LiveArea",
    # Filtering
    "RankedMatch",
    "filter_candidates",
    "fuzzy_rank",
    # Errors
    "SelectError",
    "ConfigurationError",
    "OutputError",
    "KeySourceError",
    "SelectionCancelled",
]
