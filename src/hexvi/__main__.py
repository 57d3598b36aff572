"""
Entry point for hexvi.
"""

import argparse
import curses
import logging
import os
import sys
from typing import List, Optional

from .config import DEFAULT_ROW_WIDTH, EditorConfig
from .core.buffer import ByteBuffer
from .core.errors import HexviError
from .core.grid import render_grid
from .core.persistence import open_buffer
from .core.session import EditorSession
from .core.viewport import Viewport
from .ui.input_handler import InputHandler
from .ui.window import WindowManager
from .utils.highlight import format_dump, highlight_dump

logger = logging.getLogger(__name__)


def positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {value}")
    return number


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""

    parser = argparse.ArgumentParser(
        prog="hexvi",
        description="hexvi - Modal Terminal Hex Editor"
    )
    parser.add_argument(
        "file",
        type=str,
        help="File to open"
    )
    parser.add_argument(
        "-w", "--width",
        type=positive_int,
        default=DEFAULT_ROW_WIDTH,
        help="Bytes per row (default: %(default)s)"
    )
    parser.add_argument(
        "--commit-on-move",
        action="store_true",
        help="Arrow keys in insert mode commit a half-typed byte and move"
    )
    parser.add_argument(
        "--no-confirm-quit",
        action="store_true",
        help="Quit immediately even with unsaved changes"
    )
    parser.add_argument(
        "--dump",
        action="store_true",
        help="Print a hexdump of the file and exit"
    )
    parser.add_argument(
        "--log-file",
        type=str,
        help="Write diagnostics to this file"
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level used with --log-file (default: %(default)s)"
    )
    return parser.parse_args(argv)


def setup_logging(args: argparse.Namespace) -> None:
    """Send log records to a file; the terminal belongs to curses."""

    if not args.log_file:
        return

    logging.basicConfig(
        filename=args.log_file,
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def dump(buf: ByteBuffer, config: EditorConfig, color: bool) -> str:
    """Render the whole buffer as hexdump text."""

    rows = buf.row_count(config.row_width)
    viewport = Viewport(max(rows, 1), config.row_width)
    grid = render_grid(buf, None, viewport, placeholder=config.placeholder)
    return highlight_dump(format_dump(grid), color)


def run(stdscr: 'curses.window', session: EditorSession) -> None:
    """Run the interactive editor until the session ends."""

    curses.use_default_colors()
    curses.curs_set(0)
    curses.mousemask(curses.ALL_MOUSE_EVENTS)
    stdscr.keypad(True)
    stdscr.timeout(100)

    window_manager = WindowManager(stdscr, session)
    input_handler = InputHandler(window_manager, session)

    while True:
        current_height, current_width = stdscr.getmaxyx()
        if (current_height, current_width) != (window_manager.height, window_manager.width):
            window_manager.resize()

        window_manager.refresh_all()

        try:
            ch = stdscr.getch()
            if ch != -1 and not input_handler.handle_input(ch):
                break
        except KeyboardInterrupt:
            break
        except curses.error:
            continue


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the application."""

    args = parse_args(argv)
    setup_logging(args)

    try:
        config = EditorConfig.from_args(args)
        buf = open_buffer(args.file)
    except (HexviError, ValueError) as e:
        print(f"Error loading {args.file}: {e}", file=sys.stderr)
        return 1

    if args.dump:
        sys.stdout.write(dump(buf, config, sys.stdout.isatty()))
        return 0

    # Keep Esc responsive in insert mode
    os.environ.setdefault("ESCDELAY", "25")

    session = EditorSession(buf, config)
    try:
        curses.wrapper(run, session)
    except Exception as e:
        logger.exception("Editor crashed")
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if buf.is_dirty():
        print(f"Quit without saving changes to {args.file}", file=sys.stderr)

    return 0


if __name__ == "__main__":
    sys.exit(main())
