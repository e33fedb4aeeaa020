# termportal/core/session.py

"""
Curses host loop for termportal.

This is the only module that touches the real terminal. It turns key presses
and matured tick requests into events, feeds them one at a time to the view
controller, and redraws after each one. The loop sleeps inside getch() with a
timeout taken from the tick scheduler, so nothing spins while the portal is
idle.
"""

import curses
import logging
import os
import random
import signal
from typing import Optional

from ..content import ABOUT_TEXT, load_records, menu_for, pick_tagline
from ..exceptions import TerminalError
from .controller import ViewController
from .keys import Key, decode_key
from .renderer import render, setup_colors
from .scheduler import TickRequest, TickScheduler
from .settings import PortalSettings

logger = logging.getLogger("termportal")

MIN_COLS = 40
MIN_ROWS = 12


def build_controller(
    settings: PortalSettings,
    width: int = 80,
    height: int = 24,
    rng: Optional[random.Random] = None,
) -> ViewController:
    """Wire a ViewController with the content and board settings."""
    return ViewController(
        menu=menu_for(settings.content),
        records=load_records(settings.content),
        about_text=ABOUT_TEXT,
        tagline=pick_tagline(rng),
        board_width=settings.board_width,
        board_height=settings.board_height,
        tick_ms=settings.tick_ms,
        width=width,
        height=height,
        rng=rng,
    )


class PortalSession:
    """One interactive portal session on a curses screen."""

    def __init__(self, settings: PortalSettings, rng: Optional[random.Random] = None):
        self.settings = settings
        self.rng = rng
        self.scheduler = TickScheduler()
        self.controller: Optional[ViewController] = None
        self.stdscr = None
        self._interrupted = False

    def handle_exit(self, sig, _):
        """Handle SIGINT (Ctrl+C) by ending the session on the next loop pass."""
        self._interrupted = True

    def run(self) -> None:
        """Run the session until the player quits. Restores the terminal on exit."""
        os.environ.setdefault("ESCDELAY", "25")
        previous = signal.signal(signal.SIGINT, self.handle_exit)
        try:
            curses.wrapper(self._main)
        except curses.error as e:
            raise TerminalError(f"Could not drive the terminal: {e}") from e
        finally:
            signal.signal(signal.SIGINT, previous)
            self.scheduler.clear()
            self.stdscr = None

    def _main(self, stdscr) -> None:
        self.stdscr = stdscr
        self._setup_terminal(stdscr)

        my, mx = stdscr.getmaxyx()
        if mx < MIN_COLS or my < MIN_ROWS:
            raise TerminalError(f"Terminal must be at least {MIN_COLS}x{MIN_ROWS}", size=(mx, my))

        self.controller = build_controller(self.settings, width=mx, height=my, rng=self.rng)
        logger.info(f"Session started on a {mx}x{my} terminal")
        self._draw()

        while self.controller.running:
            if self._interrupted:
                self.controller.handle_input(Key.TERMINATE)
                break

            stdscr.timeout(self.scheduler.timeout_ms())
            code = stdscr.getch()

            for tick in self.scheduler.pop_due():
                self._schedule(self.controller.handle_tick(tick))
                self._draw()

            if code == -1:
                continue
            if code == curses.KEY_RESIZE:
                my, mx = stdscr.getmaxyx()
                self.controller.handle_resize(mx, my)
            else:
                self._schedule(self.controller.handle_input(decode_key(code)))
            self._draw()

    def _setup_terminal(self, stdscr) -> None:
        curses.curs_set(0)
        curses.noecho()
        curses.cbreak()
        stdscr.keypad(True)
        setup_colors()

    def _schedule(self, request: Optional[TickRequest]) -> None:
        if request is not None:
            self.scheduler.request(request)

    def _draw(self) -> None:
        render(self.stdscr, self.controller.snapshot())


def run_session(settings: PortalSettings, rng: Optional[random.Random] = None) -> PortalSession:
    """Run a portal session and return it once the player has left."""
    session = PortalSession(settings, rng=rng)
    session.run()
    return session
