"""Tests for prompt rendering."""

from rich.text import Text

from rich_select import render
from rich_select.keys import KeyKind
from rich_select.themes import Theme
from rich_select.viewport import Viewport

THEME = Theme()


def plain(markup: str) -> list[str]:
    return Text.from_markup(markup).plain.splitlines()


def make_viewport(size: int, max_height: int = 3, downs: int = 0) -> Viewport:
    viewport = Viewport(max_height=max_height)
    viewport.reset(size)
    for _ in range(downs):
        viewport.move_down(size)
    return viewport


class TestHeader:
    def test_filter_hint_and_query(self):
        lines = plain(render.render_header("Pick", "ga", True, THEME))
        assert lines == ["Pick [type to search]: ga"]

    def test_without_filter(self):
        assert plain(render.render_header("Pick", "", False, THEME)) == ["Pick:"]

    def test_query_is_escaped(self):
        lines = plain(render.render_header("Pick", "[bold]", True, THEME))
        assert lines == ["Pick [type to search]: [bold]"]


class TestSelectMenu:
    def _render(self, filtered, viewport, **kwargs):
        return render.render_select_menu(
            "Pick",
            "",
            filtered,
            viewport,
            THEME,
            filter_enabled=kwargs.pop("filter_enabled", True),
            help_parts=["help"],
            **kwargs,
        )

    def test_only_window_rows_drawn(self, scenario):
        lines = plain(self._render(scenario, make_viewport(5, downs=3)))
        assert lines[1:-1] == ["  beta", "  gamma", "> delta"]

    def test_help_line_last(self, scenario):
        lines = plain(self._render(scenario, make_viewport(5)))
        assert lines[-1] == "help"

    def test_pending_option_marked(self, scenario):
        lines = plain(self._render(scenario, make_viewport(5), pending="beta"))
        assert lines[2] == "  beta ✓"

    def test_markup_in_option_is_literal(self):
        lines = plain(self._render(["[red]x[/red]"], make_viewport(1)))
        assert lines[1] == "> [red]x[/red]"

    def test_empty_match_list(self):
        lines = plain(self._render([], make_viewport(0)))
        assert lines == ["Pick [type to search]: ", "help"]

    def test_render_is_repeatable(self, scenario):
        viewport = make_viewport(5, downs=2)
        assert self._render(scenario, viewport) == self._render(scenario, viewport)


class TestMultiselectMenu:
    def _render(self, filtered, viewport, chosen=(), show_selected=False):
        return render.render_multiselect_menu(
            "Pick",
            "",
            filtered,
            viewport,
            THEME,
            is_selected=lambda text: text in chosen,
            filter_enabled=True,
            help_parts=["help"],
            selected_texts=list(chosen),
            show_selected=show_selected,
        )

    def test_rows_show_checkmarks(self, scenario):
        lines = plain(self._render(scenario, make_viewport(5), chosen=["alpha"]))
        assert lines[1:4] == ["> [✓] alpha", "  [✗] beta", "  [✗] gamma"]

    def test_summary_line_only_when_enabled(self, scenario):
        hidden = plain(self._render(scenario, make_viewport(5), chosen=["gamma", "alpha"]))
        shown = plain(
            self._render(scenario, make_viewport(5), chosen=["gamma", "alpha"], show_selected=True)
        )
        assert hidden[-1] == "help"
        assert shown[-1] == "you have selected: gamma, alpha"

    def test_summary_hidden_when_nothing_chosen(self, scenario):
        lines = plain(self._render(scenario, make_viewport(5), show_selected=True))
        assert lines[-1] == "help"

    def test_custom_markers(self, scenario):
        theme = Theme(selector="»", checked_icon="x", unchecked_icon=" ")
        markup = render.render_multiselect_menu(
            "Pick",
            "",
            scenario,
            make_viewport(5),
            theme,
            is_selected=lambda text: text == "alpha",
            filter_enabled=False,
            help_parts=[],
        )
        assert plain(markup)[1:3] == ["» [x] alpha", "  [ ] beta"]


class TestHelpParts:
    def test_single_select_shared_key(self):
        parts = render.select_help_parts(KeyKind.ENTER, KeyKind.ENTER, True)
        assert parts == ["↑↓ navigate", "enter select", "type to filter"]

    def test_single_select_distinct_keys_without_filter(self):
        parts = render.select_help_parts(KeyKind.ENTER, KeyKind.TAB, False)
        assert parts == ["↑↓/jk navigate", "enter select", "tab confirm"]

    def test_multiselect_all_features(self):
        parts = render.multiselect_help_parts(KeyKind.ENTER, KeyKind.TAB, True, True, True)
        assert parts == [
            "↑↓ navigate",
            "enter select",
            "tab confirm",
            "← clear selection",
            "→ select all",
            "type to filter",
        ]

    def test_multiselect_without_bulk_keys(self):
        parts = render.multiselect_help_parts(KeyKind.ENTER, KeyKind.TAB, False, False, False)
        assert parts == ["↑↓/jk navigate", "enter select", "tab confirm"]


def test_finished_blocks():
    assert plain(render.render_select_finished("Pick", "ga", "gamma", THEME)) == [
        "Pick: ga",
        "> gamma",
    ]
    assert plain(render.render_multiselect_finished("Pick", "", ["gamma", "alpha"], THEME)) == [
        "Pick: ",
        "> gamma",
        "> alpha",
    ]
