"""Configurable themes for rich_select prompts.

The Theme dataclass holds the purely decorative parts of a prompt: Rich
styles and the marker characters drawn next to options.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Theme:
    """Visual theme for prompt rendering.

    All styles use Rich markup format (e.g., "green", "bold cyan", "dim").

    Attributes:
        prompt_style: Style for the prompt text in the header line.
        hint_style: Style for the "[type to search]" hint and help line.
        option_style: Style for unfocused options.
        focused_style: Style for the focused option.
        selector_style: Style for the focus marker.
        checked_style: Style for the checked marker.
        unchecked_style: Style for the unchecked marker.
        summary_style: Style for the "you have selected" summary line.

        selector: Marker shown next to the focused option.
        checked_icon: Marker for a chosen option (multi-select).
        unchecked_icon: Marker for an option that is not chosen.
    """

    # Styles
    prompt_style: str = "bold cyan"
    hint_style: str = "dim"
    option_style: str = "default"
    focused_style: str = "cyan"
    selector_style: str = "cyan"
    checked_style: str = "green"
    unchecked_style: str = "red"
    summary_style: str = "cyan"

    # Icons
    selector: str = ">"
    checked_icon: str = "✓"
    unchecked_icon: str = "✗"


# Default theme used when none is specified
DEFAULT_THEME = Theme()
