"""CLI interface for langpick."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from rich.console import Console
from rich.markup import escape

from . import __version__, config
from .app import run_picker
from .modes import PickerState
from .screen import Screen

logger = logging.getLogger(__name__)

_console = Console(highlight=False)
_err_console = Console(stderr=True, highlight=False)


def setup_logging(log_path: Path) -> None:
    """Send debug logs to a file; the terminal belongs to the picker screen."""
    log_path.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(log_path)
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
    root = logging.getLogger("langpick")
    root.addHandler(handler)
    root.setLevel(logging.DEBUG)


def build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="langpick",
        description="langpick: browse and prefix-search a list of languages",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"langpick {__version__}")
    parser.add_argument("--config", type=Path, help="Config file (default: ~/.config/langpick/config.yaml)")
    parser.add_argument("--debug", action="store_true", help="Write debug log to the config directory")
    parser.add_argument(
        "--print-selection",
        action="store_true",
        help="Print the highlighted item after quitting",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    cfg = config.load_config(args.config)
    try:
        config.validate_config(cfg)
    except config.ConfigError as e:
        _err_console.print(f"[red]Config error:[/red] {escape(str(e))}")
        sys.exit(1)

    if args.debug or cfg.get("debug"):
        setup_logging(config.get_log_path())

    state = PickerState.from_catalog(config.build_catalog(cfg), config.build_bindings(cfg))
    screen = Screen(console=_console, theme=config.build_theme(cfg))
    logger.debug("Starting with %d item(s)", len(state.catalog))

    try:
        run_picker(state, console=_console, screen=screen)
    except KeyboardInterrupt:
        print()
        sys.exit(130)
    except OSError as e:
        _err_console.print(f"[red]Terminal error:[/red] {escape(str(e))}")
        sys.exit(1)

    if args.print_selection and state.selection.selected is not None:
        print(state.selection.selected)
