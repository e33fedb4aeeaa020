# tests/test_controller.py

"""Tests for the view controller's routing and navigation."""

from collections import deque

import pytest

from termportal.content import MENU, PROJECTS
from termportal.core.controller import SessionSnapshot, View, ViewController
from termportal.core.keys import Key
from termportal.core.scheduler import Tick, TickRequest
from termportal.exceptions import ContentError
from termportal.games.snake import Direction, Lifecycle


def enter(controller, index):
    """Move the menu cursor to index and select it."""
    while controller.menu_cursor > index:
        controller.handle_input(Key.UP)
    while controller.menu_cursor < index:
        controller.handle_input(Key.DOWN)
    return controller.handle_input(Key.SELECT)


ABOUT, LIST, GAME = 0, 1, 2


class TestHomeMenu:
    """Test menu navigation at the home view."""

    def test_starts_at_home(self, controller):
        assert controller.view is View.HOME
        assert controller.menu_cursor == 0
        assert controller.running
        assert controller.game is None

    def test_cursor_is_clamped(self, controller):
        controller.handle_input(Key.UP)
        assert controller.menu_cursor == 0
        for _ in range(10):
            controller.handle_input(Key.DOWN)
        assert controller.menu_cursor == len(MENU) - 1

    def test_select_opens_target_view(self, controller):
        assert enter(controller, ABOUT) is None
        assert controller.view is View.ABOUT

    def test_left_right_do_nothing_at_home(self, controller):
        controller.handle_input(Key.RIGHT)
        controller.handle_input(Key.LEFT)
        assert controller.view is View.HOME
        assert controller.menu_cursor == 0

    def test_unknown_key_is_ignored(self, controller):
        assert controller.handle_input(None) is None
        assert controller.view is View.HOME

    def test_empty_menu_is_rejected(self):
        with pytest.raises(ContentError):
            ViewController(menu=[], records=PROJECTS)

    def test_empty_records_are_rejected(self):
        with pytest.raises(ContentError):
            ViewController(menu=MENU, records=[])


class TestGlobalKeys:
    """Test quit, back and terminate handling."""

    def test_terminate_from_any_view(self, controller):
        enter(controller, GAME)
        controller.handle_input(Key.TERMINATE)
        assert not controller.running
        assert controller.game is None

    def test_quit_at_home_ends_session(self, controller):
        controller.handle_input(Key.QUIT)
        assert not controller.running

    def test_quit_elsewhere_goes_home(self, controller):
        enter(controller, ABOUT)
        controller.handle_input(Key.QUIT)
        assert controller.view is View.HOME
        assert controller.running

    def test_back_at_home_is_a_no_op(self, controller):
        controller.handle_input(Key.BACK)
        assert controller.view is View.HOME
        assert controller.running

    def test_back_returns_home_and_keeps_menu_cursor(self, controller):
        enter(controller, LIST)
        controller.handle_input(Key.BACK)
        assert controller.view is View.HOME
        assert controller.menu_cursor == LIST

    def test_nothing_happens_after_terminate(self, controller):
        controller.handle_input(Key.TERMINATE)
        assert controller.handle_input(Key.SELECT) is None
        assert controller.view is View.HOME

    def test_about_ignores_navigation(self, controller):
        enter(controller, ABOUT)
        for key in (Key.UP, Key.DOWN, Key.SELECT, Key.LEFT):
            assert controller.handle_input(key) is None
        assert controller.view is View.ABOUT


class TestListBrowse:
    """Test forwarding to the list browser."""

    def test_keys_move_browser_cursor(self, controller):
        enter(controller, LIST)
        controller.handle_input(Key.DOWN)
        controller.handle_input(Key.DOWN)
        assert controller.browser.cursor == 2
        controller.handle_input(Key.UP)
        assert controller.browser.cursor == 1
        # The home menu cursor is untouched while browsing.
        assert controller.menu_cursor == LIST

    def test_browser_cursor_survives_leaving(self, controller):
        enter(controller, LIST)
        controller.handle_input(Key.DOWN)
        controller.handle_input(Key.BACK)
        enter(controller, LIST)
        assert controller.browser.cursor == 1

    def test_browser_cursor_is_clamped(self, controller):
        enter(controller, LIST)
        for _ in range(len(PROJECTS) + 3):
            controller.handle_input(Key.DOWN)
        assert controller.browser.cursor == len(PROJECTS) - 1


class TestGameView:
    """Test hosting the snake engine."""

    def test_entering_game_arms_first_tick(self, controller):
        request = enter(controller, GAME)
        assert isinstance(request, TickRequest)
        assert request.delay_ms == 120
        assert controller.view is View.GAME
        assert controller.game.lifecycle is Lifecycle.PLAYING

    def test_ticks_reach_the_engine(self, controller):
        request = enter(controller, GAME)
        controller.game.food = (0, 0)
        head = controller.game.head
        next_request = controller.handle_tick(Tick(request.token))
        assert next_request is not None
        assert controller.game.head == (head[0] + 1, head[1])

    def test_direction_keys_reach_the_engine(self, controller):
        enter(controller, GAME)
        controller.handle_input(Key.DOWN)
        assert controller.game.pending_direction is Direction.DOWN

    def test_menu_cursor_not_moved_by_game_keys(self, controller):
        enter(controller, GAME)
        controller.handle_input(Key.UP)
        assert controller.menu_cursor == GAME

    def test_leaving_game_discards_engine(self, controller):
        request = enter(controller, GAME)
        controller.handle_input(Key.BACK)
        assert controller.game is None
        assert controller.handle_tick(Tick(request.token)) is None

    def test_reentering_builds_fresh_engine(self, controller):
        enter(controller, GAME)
        first = controller.game
        first.high_score = 9
        controller.handle_input(Key.BACK)
        enter(controller, GAME)
        assert controller.game is not first
        assert controller.game.high_score == 0
        assert controller.game.score == 0

    def test_stale_tick_after_reentry_is_dropped(self, controller):
        old = enter(controller, GAME)
        controller.handle_input(Key.BACK)
        new = enter(controller, GAME)
        controller.game.food = (0, 0)
        head = controller.game.head
        assert controller.handle_tick(Tick(old.token)) is None
        assert controller.game.head == head
        assert controller.handle_tick(Tick(new.token)) is not None

    def test_ticks_outside_game_are_dropped(self, controller):
        assert controller.handle_tick(Tick("anything")) is None

    def test_select_restarts_after_game_over(self, controller):
        request = enter(controller, GAME)
        game = controller.game
        game.snake = deque([(0, 5), (1, 5), (2, 5)])
        game.direction = game.pending_direction = Direction.LEFT
        game.score = 6
        assert controller.handle_tick(Tick(request.token)) is None
        assert game.lifecycle is Lifecycle.GAME_OVER

        restart = controller.handle_input(Key.SELECT)
        assert isinstance(restart, TickRequest)
        assert controller.game is game
        assert game.lifecycle is Lifecycle.PLAYING
        assert game.score == 0
        assert game.high_score == 6

    def test_select_while_playing_does_nothing(self, controller):
        enter(controller, GAME)
        assert controller.handle_input(Key.SELECT) is None
        assert controller.game.lifecycle is Lifecycle.PLAYING

    def test_board_settings_reach_engine(self, rng):
        controller = ViewController(
            menu=MENU, records=PROJECTS, board_width=20, board_height=10, tick_ms=80, rng=rng
        )
        request = enter(controller, GAME)
        assert (controller.game.width, controller.game.height) == (20, 10)
        assert request.delay_ms == 80


class TestResizeAndSnapshot:
    """Test layout hints and the renderer snapshot."""

    def test_resize_only_updates_layout(self, controller):
        enter(controller, GAME)
        snake = list(controller.game.snake)
        controller.handle_resize(120, 40)
        assert (controller.width, controller.height) == (120, 40)
        assert list(controller.game.snake) == snake
        assert controller.view is View.GAME

    def test_snapshot_reflects_state(self, controller):
        enter(controller, LIST)
        controller.handle_input(Key.DOWN)
        snap = controller.snapshot()
        assert isinstance(snap, SessionSnapshot)
        assert snap.view is View.LIST_BROWSE
        assert snap.list_cursor == 1
        assert snap.records == PROJECTS
        assert snap.game is None
        assert snap.tagline == "ahoy"

    def test_snapshot_is_a_copy(self, controller):
        request = enter(controller, GAME)
        controller.game.food = (0, 0)
        snap = controller.snapshot()
        controller.handle_tick(Tick(request.token))
        assert snap.game.head == (29, 12)
        assert controller.game.head == (30, 12)
        assert snap.game.snake != tuple(controller.game.snake)
