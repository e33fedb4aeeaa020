# termportal/portal_api.py

"""Complete public API for termportal: an interactive terminal portal with a built-in snake game.

This module serves as the single source of truth for all public API components.
"""

import logging
import random
from typing import Any, Optional

from rich.console import Console
from rich.panel import Panel

from .core.controller import MenuEntry, SessionSnapshot, View, ViewController
from .core.keys import Key, decode_key
from .core.list_browser import ListBrowser
from .core.scheduler import Tick, TickRequest, TickScheduler
from .core.session import PortalSession, build_controller, run_session
from .core.settings import PortalSettings, configure_logging, load_settings
from .games.snake import Direction, GameEngine

logger = logging.getLogger("termportal")

################################################################################
# Session API
################################################################################


def run_portal(
    settings: Optional[PortalSettings] = None,
    banner: bool = True,
    rng: Optional[random.Random] = None,
    **overrides: Any,
) -> None:
    """Run an interactive portal session in the current terminal.

    Shows the home menu and blocks until the player quits (q at the home
    menu, or Ctrl+C anywhere).

    Args:
        settings: Full settings object (default: built from TERMPORTAL_* env vars)
        banner: Print a farewell panel once the terminal is restored
        rng: Random source for taglines and food placement (default: fresh)
        **overrides: Individual settings, e.g. board_width=40, tick_ms=90

    Examples:
        Basic usage:
            run_portal()

        With custom configuration:
            run_portal(board_width=40, board_height=20)
            run_portal(content="servers", tick_ms=90)

    Raises:
        ConfigurationError: If a setting is invalid
        TerminalError: If the terminal cannot host the session
    """
    if settings is None:
        settings = PortalSettings.from_env(**overrides)
    elif overrides:
        settings = load_settings(**{**settings.model_dump(), **overrides})
    configure_logging(settings)

    run_session(settings, rng=rng)

    if banner and settings.show_banner:
        display_farewell()


def display_farewell() -> None:
    """Print the goodbye panel after the terminal has been restored."""
    console = Console(highlight=False)
    console.print(
        Panel(
            "Thanks for stopping by!\nGoodbye!",
            border_style="magenta",
            expand=False,
            padding=(0, 1),
        )
    )


################################################################################
# Public API Exports
################################################################################

__all__ = [
    # Session API
    "run_portal",
    "run_session",
    "build_controller",
    "PortalSession",
    "PortalSettings",
    # Core
    "ViewController",
    "View",
    "MenuEntry",
    "SessionSnapshot",
    "ListBrowser",
    "Key",
    "decode_key",
    "TickScheduler",
    "TickRequest",
    "Tick",
    # Games
    "GameEngine",
    "Direction",
]
