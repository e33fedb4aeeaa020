# termportal/games/snake.py

"""
Snake game engine for termportal.

The engine is a pure simulation: it owns the board state and advances it one
step per tick, but it never draws, sleeps or reads the keyboard. The host
loop feeds it directions and ticks; every tick that leaves the game running
hands back exactly one TickRequest for the next step. When the game ends no
request is returned, and the tick chain stops by itself.
"""

import enum
import logging
import random
import uuid
from collections import deque
from dataclasses import dataclass
from typing import Deque, Iterable, List, Optional, Tuple

from ..core.scheduler import Tick, TickRequest

logger = logging.getLogger("termportal")

Cell = Tuple[int, int]

BOARD_WIDTH = 60
BOARD_HEIGHT = 25
TICK_MS = 120
INITIAL_LENGTH = 3

# Rejected food draws before falling back to an explicit free-cell pick.
MAX_FOOD_DRAWS = 64


class Direction(enum.Enum):
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def delta(self) -> Cell:
        return self.value

    @property
    def opposite(self) -> "Direction":
        dx, dy = self.value
        return Direction((-dx, -dy))


class Lifecycle(enum.Enum):
    PLAYING = "playing"
    GAME_OVER = "game_over"


class EndReason(enum.Enum):
    WALL = "wall"
    SELF = "self"
    BOARD_FULL = "board_full"


@dataclass(frozen=True)
class GameSnapshot:
    """Immutable copy of the engine state handed to the renderer."""
    width: int
    height: int
    snake: Tuple[Cell, ...]
    food: Optional[Cell]
    direction: Direction
    score: int
    high_score: int
    lifecycle: Lifecycle
    end_reason: Optional[EndReason]

    @property
    def head(self) -> Cell:
        return self.snake[0]

    @property
    def game_over(self) -> bool:
        return self.lifecycle is Lifecycle.GAME_OVER


def move_head(head: Cell, direction: Direction) -> Cell:
    """Translate a cell one step along direction."""
    dx, dy = direction.delta
    return (head[0] + dx, head[1] + dy)


def in_bounds(cell: Cell, width: int, height: int) -> bool:
    x, y = cell
    return 0 <= x < width and 0 <= y < height


def new_food(
    snake: Iterable[Cell],
    width: int,
    height: int,
    rng: random.Random,
    max_draws: int = MAX_FOOD_DRAWS,
) -> Optional[Cell]:
    """
    Pick a random free cell, or None when the snake covers the whole board.

    Draws uniformly over the board and rejects occupied cells. After
    max_draws rejections the remaining free cells are listed and one is
    chosen directly, which keeps the pick uniform and bounded on a crowded
    board.
    """
    occupied = set(snake)
    if len(occupied) >= width * height:
        return None
    for _ in range(max_draws):
        cell = (rng.randrange(width), rng.randrange(height))
        if cell not in occupied:
            return cell
    free: List[Cell] = [
        (x, y) for y in range(height) for x in range(width) if (x, y) not in occupied
    ]
    return rng.choice(free)


class GameEngine:
    """
    Tick-driven snake simulation on a fixed board.

    Attributes:
        snake: deque of (x, y) from head at index 0 to tail at the end
        direction: heading committed on the last tick
        pending_direction: heading requested for the next tick
        food: the single food cell, never on the snake
        score: food eaten since the last (re)start
        high_score: best score seen by this engine, survives restarts
        lifecycle: PLAYING or GAME_OVER
        end_reason: why the last game ended, None while playing
    """

    def __init__(
        self,
        width: int = BOARD_WIDTH,
        height: int = BOARD_HEIGHT,
        tick_ms: int = TICK_MS,
        rng: Optional[random.Random] = None,
    ):
        if width < INITIAL_LENGTH or height < 1:
            raise ValueError(
                f"Board must be at least {INITIAL_LENGTH}x1, got {width}x{height}"
            )
        if tick_ms <= 0:
            raise ValueError(f"tick_ms must be positive, got {tick_ms}")
        self.width = width
        self.height = height
        self.tick_ms = tick_ms
        self.rng = rng or random.Random()
        self.high_score = 0
        self.snake: Deque[Cell] = deque()
        self.direction = Direction.RIGHT
        self.pending_direction = Direction.RIGHT
        self.food: Optional[Cell] = None
        self.score = 0
        self.lifecycle = Lifecycle.PLAYING
        self.end_reason: Optional[EndReason] = None
        self._pending_token: Optional[str] = None
        self.initialize()

    @property
    def playing(self) -> bool:
        return self.lifecycle is Lifecycle.PLAYING

    @property
    def head(self) -> Cell:
        return self.snake[0]

    def initialize(self) -> None:
        """Reset the board to a fresh game. high_score is kept."""
        # Centered, but never so far left that the tail leaves the board.
        cx = max((self.width - 1) // 2, INITIAL_LENGTH - 1)
        cy = (self.height - 1) // 2
        self.snake = deque((cx - i, cy) for i in range(INITIAL_LENGTH))
        self.direction = Direction.RIGHT
        self.pending_direction = Direction.RIGHT
        self.score = 0
        self.lifecycle = Lifecycle.PLAYING
        self.end_reason = None
        self._pending_token = None
        self.food = new_food(self.snake, self.width, self.height, self.rng)
        if self.food is None:
            self._end(EndReason.BOARD_FULL)

    def start(self) -> Optional[TickRequest]:
        """Arm the first tick of a game."""
        if not self.playing:
            return None
        return self._request_tick()

    def restart(self) -> Optional[TickRequest]:
        """Start over after a game over. Ignored while a game is running."""
        if self.playing:
            return None
        logger.info(f"Snake restart (high score {self.high_score})")
        self.initialize()
        return self.start()

    def handle_input(self, direction: Direction) -> None:
        """Request a new heading for the next tick; reversals are dropped."""
        if not self.playing:
            return
        if direction is self.direction.opposite:
            return
        self.pending_direction = direction

    def handle_tick(self, tick: Tick) -> Optional[TickRequest]:
        """
        Advance the game by one step.

        Returns the request for the next tick, or None when the game is over
        or the tick is stale (it does not answer the outstanding request).
        """
        if not self.playing or tick.token != self._pending_token:
            logger.debug(f"Dropping stale tick {tick.token}")
            return None
        self._pending_token = None

        self.direction = self.pending_direction
        new_head = move_head(self.head, self.direction)

        if not in_bounds(new_head, self.width, self.height):
            self._end(EndReason.WALL)
            return None
        if new_head in self.snake:
            self._end(EndReason.SELF)
            return None

        self.snake.appendleft(new_head)
        if new_head == self.food:
            self.score += 1
            self.food = new_food(self.snake, self.width, self.height, self.rng)
            if self.food is None:
                self._end(EndReason.BOARD_FULL)
                return None
        else:
            self.snake.pop()

        return self._request_tick()

    def snapshot(self) -> GameSnapshot:
        return GameSnapshot(
            width=self.width,
            height=self.height,
            snake=tuple(self.snake),
            food=self.food,
            direction=self.direction,
            score=self.score,
            high_score=self.high_score,
            lifecycle=self.lifecycle,
            end_reason=self.end_reason,
        )

    def _request_tick(self) -> TickRequest:
        self._pending_token = uuid.uuid4().hex
        return TickRequest(delay_ms=self.tick_ms, token=self._pending_token)

    def _end(self, reason: EndReason) -> None:
        self.lifecycle = Lifecycle.GAME_OVER
        self.end_reason = reason
        self.high_score = max(self.high_score, self.score)
        self._pending_token = None
        logger.info(
            f"Snake game over ({reason.value}): score {self.score}, high score {self.high_score}"
        )

    def __repr__(self) -> str:
        return (
            f"<GameEngine {self.width}x{self.height} {self.lifecycle.value} "
            f"len={len(self.snake)} score={self.score} high={self.high_score}>"
        )
