"""CLI interface for rich-select."""

from __future__ import annotations

import argparse
import logging
import sys

from rich.console import Console
from rich.markup import escape

from . import __version__
from .config import MultiSelectConfig, SelectConfig
from .errors import ConfigurationError, SelectError, SelectionCancelled
from .multiselect_prompt import InteractiveMultiselect
from .select_prompt import InteractiveSelect

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rich-select",
        description="Pick one or more options interactively and print the choice",
    )
    parser.add_argument("--version", action="version", version=f"rich-select {__version__}")
    parser.add_argument("options", nargs="+", help="Options to choose from")
    parser.add_argument("--multi", action="store_true", help="Allow choosing several options")
    parser.add_argument("--prompt", help="Prompt text")
    parser.add_argument("--max-height", type=int, help="Visible rows (default: 5)")
    parser.add_argument("--no-filter", action="store_true", help="Disable type-to-filter")
    parser.add_argument("--default", help="Option focused at startup (single select only)")
    parser.add_argument(
        "--show-selected", action="store_true", help="List chosen options below the menu (--multi)"
    )
    parser.add_argument("--no-select-all", action="store_true", help="Disable right arrow select all")
    parser.add_argument("--no-clear-all", action="store_true", help="Disable left arrow clear")
    parser.add_argument("--debug", action="store_true", help="Log state changes to stderr")
    return parser


def _single_config(args) -> SelectConfig:
    config = SelectConfig().with_filter(not args.no_filter)
    if args.prompt:
        config = config.with_prompt(escape(args.prompt))
    if args.max_height is not None:
        config = config.with_max_height(args.max_height)
    if args.default:
        config = config.with_default_option(args.default)
    return config


def _multi_config(args) -> MultiSelectConfig:
    config = (
        MultiSelectConfig()
        .with_filter(not args.no_filter)
        .with_show_selected(args.show_selected)
        .with_select_all(not args.no_select_all)
        .with_clear_all(not args.no_clear_all)
    )
    if args.prompt:
        config = config.with_prompt(escape(args.prompt))
    if args.max_height is not None:
        config = config.with_max_height(args.max_height)
    return config


def cmd_select(args) -> int:
    """Run the prompt described by args and print the result.

    The prompt draws on stderr so stdout carries only the answer.
    """
    console = Console(stderr=True)
    if args.multi:
        chosen = InteractiveMultiselect(args.options, _multi_config(args), console=console).show()
        for option in chosen:
            print(option)
    else:
        print(InteractiveSelect(args.options, _single_config(args), console=console).show())
    return 0


def main(argv: list[str] | None = None) -> None:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.debug:
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr)

    try:
        code = cmd_select(args)
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        code = 2
    except SelectionCancelled:
        print(file=sys.stderr)
        code = 130
    except SelectError as exc:
        logger.debug("Prompt failed", exc_info=True)
        print(f"Error: {exc}", file=sys.stderr)
        code = 1
    sys.exit(code)
