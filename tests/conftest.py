# tests/conftest.py

"""Shared fixtures for the termportal test suite."""

import random

import pytest

from termportal.content import MENU, PROJECTS
from termportal.core.controller import ViewController
from termportal.core.scheduler import Tick
from termportal.games.snake import GameEngine


@pytest.fixture
def rng():
    """Seeded random source so food placement is repeatable."""
    return random.Random(1234)


@pytest.fixture
def engine(rng):
    """A fresh 60x25 engine with food moved out of the snake's path."""
    game = GameEngine(60, 25, rng=rng)
    game.food = (0, 0)
    return game


@pytest.fixture
def controller(rng):
    return ViewController(
        menu=MENU,
        records=PROJECTS,
        about_text="about",
        tagline="ahoy",
        rng=rng,
    )


@pytest.fixture
def advance():
    """Deliver the tick answering a request and return the next request."""
    def _advance(game, request):
        return game.handle_tick(Tick(request.token))
    return _advance
