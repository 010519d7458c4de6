"""Markup rendering for prompts.

Every function here is a pure function of the state it is given and returns
a Rich markup string, so repeated renders of the same state are identical.
Option texts and the query are escaped; the prompt text is markup.
"""

from __future__ import annotations

from typing import Sequence

from rich.markup import escape

from .keys import KeyKind
from .themes import Theme
from .viewport import Viewport

HELP_SEPARATOR = " • "


def _styled(text: str, style: str) -> str:
    return f"[{style}]{text}[/{style}]"


def render_header(prompt: str, query: str, filter_enabled: bool, theme: Theme) -> str:
    """Prompt line: prompt text, search hint when filtering, then the query."""
    title = _styled(prompt, theme.prompt_style)
    if filter_enabled:
        hint = _styled(escape("[type to search]"), theme.hint_style)
        return f"{title} {hint}: {escape(query)}"
    return f"{title}:"


def render_help(parts: Sequence[str], theme: Theme) -> str:
    return _styled(HELP_SEPARATOR.join(parts), theme.hint_style)


def _navigation_hint(filter_enabled: bool) -> str:
    return "↑↓ navigate" if filter_enabled else "↑↓/jk navigate"


def select_help_parts(
    select_key: KeyKind, confirm_key: KeyKind, filter_enabled: bool
) -> list[str]:
    parts = [_navigation_hint(filter_enabled)]
    if select_key == confirm_key:
        parts.append(f"{confirm_key.label} select")
    else:
        parts.append(f"{select_key.label} select")
        parts.append(f"{confirm_key.label} confirm")
    if filter_enabled:
        parts.append("type to filter")
    return parts


def multiselect_help_parts(
    select_key: KeyKind,
    confirm_key: KeyKind,
    filter_enabled: bool,
    select_all: bool,
    clear_all: bool,
) -> list[str]:
    parts = [
        _navigation_hint(filter_enabled),
        f"{select_key.label} select",
        f"{confirm_key.label} confirm",
    ]
    if clear_all:
        parts.append("← clear selection")
    if select_all:
        parts.append("→ select all")
    if filter_enabled:
        parts.append("type to filter")
    return parts


def _focus_prefix(is_focused: bool, theme: Theme) -> str:
    if is_focused:
        return _styled(escape(theme.selector), theme.selector_style)
    return " " * len(theme.selector)


def _option_text(text: str, is_focused: bool, theme: Theme) -> str:
    style = theme.focused_style if is_focused else theme.option_style
    return _styled(escape(text), style)


def _checkmark(is_checked: bool, theme: Theme) -> str:
    if is_checked:
        return _styled(escape(f"[{theme.checked_icon}]"), theme.checked_style)
    return _styled(escape(f"[{theme.unchecked_icon}]"), theme.unchecked_style)


def render_select_menu(
    prompt: str,
    query: str,
    filtered: Sequence[str],
    viewport: Viewport,
    theme: Theme,
    *,
    filter_enabled: bool,
    help_parts: Sequence[str],
    pending: str | None = None,
) -> str:
    """Interactive block for a single-select prompt.

    Args:
        prompt: Prompt markup.
        query: Current search text.
        filtered: Filtered option texts.
        viewport: Window and focus into filtered.
        theme: Visual theme.
        filter_enabled: Whether the search hint is shown.
        help_parts: Key binding hints for the help line.
        pending: Option accepted with the select key but not yet confirmed.

    Returns:
        Rich markup string.
    """
    lines = [render_header(prompt, query, filter_enabled, theme)]
    for offset, text in enumerate(viewport.visible(filtered)):
        is_focused = viewport.is_focused(viewport.start + offset)
        line = f"{_focus_prefix(is_focused, theme)} {_option_text(text, is_focused, theme)}"
        if pending is not None and text == pending:
            line += f" {_styled(escape(theme.checked_icon), theme.checked_style)}"
        lines.append(line)
    lines.append(render_help(help_parts, theme))
    return "\n".join(lines)


def render_select_finished(prompt: str, query: str, result: str, theme: Theme) -> str:
    """Final block shown once a single-select prompt is confirmed."""
    title = _styled(prompt, theme.prompt_style)
    return "\n".join(
        [
            f"{title}: {escape(query)}",
            f"{_focus_prefix(True, theme)} {_option_text(result, True, theme)}",
        ]
    )


def render_multiselect_menu(
    prompt: str,
    query: str,
    filtered: Sequence[str],
    viewport: Viewport,
    theme: Theme,
    *,
    is_selected,
    filter_enabled: bool,
    help_parts: Sequence[str],
    selected_texts: Sequence[str] = (),
    show_selected: bool = False,
) -> str:
    """Interactive block for a multi-select prompt.

    ``is_selected`` maps a display text to its chosen state. The summary
    line is only added when ``show_selected`` is set and something is chosen.
    """
    lines = [render_header(prompt, query, filter_enabled, theme)]
    for offset, text in enumerate(viewport.visible(filtered)):
        is_focused = viewport.is_focused(viewport.start + offset)
        lines.append(
            f"{_focus_prefix(is_focused, theme)} "
            f"{_checkmark(is_selected(text), theme)} "
            f"{_option_text(text, is_focused, theme)}"
        )
    lines.append(render_help(help_parts, theme))

    if show_selected and selected_texts:
        chosen = ", ".join(escape(text) for text in selected_texts)
        lines.append(
            f"{_styled('you have selected:', theme.summary_style)} "
            f"{_styled(chosen, 'italic ' + theme.summary_style)}"
        )
    return "\n".join(lines)


def render_multiselect_finished(
    prompt: str, query: str, selected_texts: Sequence[str], theme: Theme
) -> str:
    """Final block listing every chosen option in selection order."""
    title = _styled(prompt, theme.prompt_style)
    lines = [f"{title}: {escape(query)}"]
    for text in selected_texts:
        lines.append(f"{_focus_prefix(True, theme)} {_option_text(text, False, theme)}")
    return "\n".join(lines)
