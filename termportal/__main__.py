# termportal/__main__.py
"""Command-line entry point for termportal.

Run the portal in the current terminal:
    python -m termportal
    python -m termportal --content servers --tick-ms 90
"""
import argparse
import sys

from rich.console import Console
from rich.panel import Panel

from .exceptions import PortalError
from .portal_api import run_portal


def parse_args(argv=None):
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="termportal",
        description="Interactive terminal portal with a built-in snake game",
    )
    parser.add_argument(
        "--width",
        type=int,
        dest="board_width",
        help="Snake board width in cells (default: 60)"
        )
    parser.add_argument(
        "--height",
        type=int,
        dest="board_height",
        help="Snake board height in cells (default: 25)"
        )
    parser.add_argument(
        "--tick-ms",
        type=int,
        help="Milliseconds between snake moves (default: 120)"
        )
    parser.add_argument(
        "--content",
        choices=["projects", "servers"],
        help="Records shown in the list view (default: projects)"
        )
    parser.add_argument(
        "--log-file",
        help="Write logs to this file (nothing is logged to the terminal)"
        )
    parser.add_argument(
        "--debug",
        action="store_const",
        const="DEBUG",
        dest="log_level",
        help="Log at DEBUG level"
        )
    parser.add_argument(
        "--no-banner",
        action="store_const",
        const=False,
        dest="show_banner",
        help="Do not print the farewell panel on exit"
        )
    return parser.parse_args(argv)


def main(argv=None):
    """Parse command-line arguments and run a portal session."""
    args = parse_args(argv)
    try:
        run_portal(**vars(args))
    except PortalError as e:
        Console(stderr=True, highlight=False).print(
            Panel(str(e), title="termportal", border_style="red", expand=False)
        )
        return 1
    except KeyboardInterrupt:
        return 130
    return 0


if __name__ == "__main__":
    sys.exit(main())
