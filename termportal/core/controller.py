# termportal/core/controller.py

"""
View controller for termportal.

The controller is the single place where input is interpreted. Every key and
every tick goes through it, global keys (quit, back) are checked first, and
whatever is left is routed to exactly one consumer: the home menu, the list
browser or the snake game. The renderer never sees the controller itself, only
the immutable SessionSnapshot it produces.
"""

import enum
import logging
import random
from dataclasses import dataclass
from typing import Any, Optional, Sequence, Tuple

from ..exceptions import ContentError
from ..games.snake import BOARD_HEIGHT, BOARD_WIDTH, TICK_MS, GameEngine, GameSnapshot
from .keys import Key, key_direction
from .list_browser import ListBrowser
from .scheduler import Tick, TickRequest

logger = logging.getLogger("termportal")


class View(enum.Enum):
    HOME = "home"
    ABOUT = "about"
    LIST_BROWSE = "list_browse"
    GAME = "game"


@dataclass(frozen=True)
class MenuEntry:
    """One line of the home menu and the view it opens."""
    label: str
    icon: str
    description: str
    target: View


@dataclass(frozen=True)
class SessionSnapshot:
    """Everything the renderer needs to draw one frame."""
    view: View
    menu: Tuple[MenuEntry, ...]
    menu_cursor: int
    records: Tuple[Any, ...]
    list_cursor: int
    game: Optional[GameSnapshot]
    about_text: str
    tagline: str
    width: int
    height: int


class ViewController:
    """
    Routes input and ticks for one portal session.

    Owns one ListBrowser for the whole session (its cursor is remembered
    between visits) and at most one GameEngine, which is thrown away when the
    player leaves the game and built fresh on every entry.
    """

    def __init__(
        self,
        menu: Sequence[MenuEntry],
        records: Sequence[Any],
        about_text: str = "",
        tagline: str = "",
        board_width: int = BOARD_WIDTH,
        board_height: int = BOARD_HEIGHT,
        tick_ms: int = TICK_MS,
        width: int = 80,
        height: int = 24,
        rng: Optional[random.Random] = None,
    ):
        """
        Initialize a session controller.

        Args:
            menu: Home menu entries, in display order
            records: Records shown by the list view
            about_text: Body of the about page
            tagline: Line shown under the home banner
            board_width: Snake board width in cells
            board_height: Snake board height in cells
            tick_ms: Delay between game ticks
            width: Initial terminal width (layout hint)
            height: Initial terminal height (layout hint)
            rng: Random source handed to every game engine

        Raises:
            ContentError: If the menu or the record list is empty
        """
        self.menu: Tuple[MenuEntry, ...] = tuple(menu)
        if not self.menu:
            raise ContentError("Home menu needs at least one entry")
        self.browser = ListBrowser(records)
        self.about_text = about_text
        self.tagline = tagline
        self.board_width = board_width
        self.board_height = board_height
        self.tick_ms = tick_ms
        self.width = width
        self.height = height
        self._rng = rng

        self.view = View.HOME
        self.menu_cursor = 0
        self.game: Optional[GameEngine] = None
        self._running = True

    @property
    def running(self) -> bool:
        """False once the session has been ended."""
        return self._running

    def handle_input(self, key: Optional[Key]) -> Optional[TickRequest]:
        """
        Process one key.

        Returns a TickRequest when the key armed a game tick (entering the
        game or restarting it), otherwise None.
        """
        if key is None or not self._running:
            return None

        if key is Key.TERMINATE:
            self._terminate()
            return None
        if key is Key.QUIT:
            if self.view is View.HOME:
                self._terminate()
            else:
                self._go_home()
            return None
        if key is Key.BACK:
            if self.view is not View.HOME:
                self._go_home()
            return None

        if self.view is View.HOME:
            return self._handle_menu(key)
        if self.view is View.LIST_BROWSE:
            self._handle_browser(key)
        elif self.view is View.GAME:
            return self._handle_game(key)
        return None

    def handle_tick(self, tick: Tick) -> Optional[TickRequest]:
        """Forward a tick to the running game; ticks outside the game are dropped."""
        if not self._running or self.view is not View.GAME or self.game is None:
            logger.debug(f"Tick {tick.token} dropped outside the game view")
            return None
        return self.game.handle_tick(tick)

    def handle_resize(self, width: int, height: int) -> None:
        """Record the new terminal size. Layout only, the game is untouched."""
        self.width = width
        self.height = height

    def snapshot(self) -> SessionSnapshot:
        return SessionSnapshot(
            view=self.view,
            menu=self.menu,
            menu_cursor=self.menu_cursor,
            records=self.browser.items,
            list_cursor=self.browser.cursor,
            game=self.game.snapshot() if self.game is not None else None,
            about_text=self.about_text,
            tagline=self.tagline,
            width=self.width,
            height=self.height,
        )

    def _handle_menu(self, key: Key) -> Optional[TickRequest]:
        if key is Key.UP:
            if self.menu_cursor > 0:
                self.menu_cursor -= 1
        elif key is Key.DOWN:
            if self.menu_cursor < len(self.menu) - 1:
                self.menu_cursor += 1
        elif key is Key.SELECT:
            return self._enter(self.menu[self.menu_cursor].target)
        return None

    def _handle_browser(self, key: Key) -> None:
        if key is Key.UP:
            self.browser.move_up()
        elif key is Key.DOWN:
            self.browser.move_down()

    def _handle_game(self, key: Key) -> Optional[TickRequest]:
        if self.game is None:
            return None
        if key is Key.SELECT:
            return self.game.restart()
        direction = key_direction(key)
        if direction is not None:
            self.game.handle_input(direction)
        return None

    def _enter(self, view: View) -> Optional[TickRequest]:
        logger.debug(f"View {self.view.value} -> {view.value}")
        self.view = view
        if view is not View.GAME:
            return None
        self.game = GameEngine(
            width=self.board_width,
            height=self.board_height,
            tick_ms=self.tick_ms,
            rng=self._rng,
        )
        return self.game.start()

    def _go_home(self) -> None:
        logger.debug(f"View {self.view.value} -> {View.HOME.value}")
        if self.view is View.GAME:
            self.game = None
        self.view = View.HOME

    def _terminate(self) -> None:
        logger.info(f"Session ended from the {self.view.value} view")
        self._running = False
        self.game = None
