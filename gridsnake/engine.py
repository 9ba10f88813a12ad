"""Game-step state machine for grid snake.

The engine owns the snake, its heading, the food and the score, and advances
them one discrete step at a time. It knows nothing about pixels, keys or
timers: a host calls :meth:`GameStepEngine.set_pending_direction` for each
direction request, :meth:`GameStepEngine.step` once per tick and
:meth:`GameStepEngine.restart` to begin a new round, then renders the
returned :class:`GameSnapshot`.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

import numpy as np

from .config import COLS, ROWS, TILE, TICK_INTERVAL_MS, SCORE_INCREMENT, INITIAL_LENGTH
from .food import Food
from .grid import Grid
from .snake import Direction, Snake, is_opposite

logger = logging.getLogger(__name__)

Cell = Tuple[int, int]


class GameState(Enum):
    RUNNING = "running"
    GAME_OVER = "game_over"


class EndReason(Enum):
    """Why a round ended."""

    WALL = "wall"
    SELF = "self"
    BOARD_FULL = "board_full"


@dataclass(frozen=True)
class GameSnapshot:
    """
    Read-only view of the game after a step.

    Attributes:
        snake: cells from head to tail
        food: food cell, None only once the snake fills the board
        score: points collected this round
        state: RUNNING or GAME_OVER
        direction: heading committed by the last step
        tick: number of moves made since the last restart
        ate_food: whether the step that produced this snapshot ate the food
        end_reason: set once state is GAME_OVER
    """

    snake: Tuple[Cell, ...]
    food: Optional[Cell]
    score: int
    state: GameState
    direction: Direction
    tick: int
    ate_food: bool = False
    end_reason: Optional[EndReason] = None

    @property
    def head(self) -> Cell:
        return self.snake[0]

    def board_text(self, cols: int, rows: int) -> str:
        """
        Returns the board as text, one line per row, top row first:
        . = empty
        F = food
        H = snake head
        o = snake body
        """
        board = [['.' for _ in range(cols)] for _ in range(rows)]

        if self.food is not None:
            fx, fy = self.food
            board[fy][fx] = 'F'

        for i, (x, y) in enumerate(self.snake):
            board[y][x] = 'H' if i == 0 else 'o'

        return "\n".join(''.join(row) for row in board)


class GameStepEngine:
    """Single-snake simulation advanced one grid step per tick."""

    def __init__(
        self,
        cols: int = COLS,
        rows: int = ROWS,
        tick_interval_ms: int = TICK_INTERVAL_MS,
        score_increment: int = SCORE_INCREMENT,
        tile: int = TILE,
        seed: Optional[int] = None,
    ):
        if cols // 2 < INITIAL_LENGTH - 1 or rows < 1:
            raise ValueError(
                f"Grid {cols}x{rows} is too small for a snake of length {INITIAL_LENGTH}."
            )
        if tick_interval_ms <= 0:
            raise ValueError(f"Tick interval must be positive, got {tick_interval_ms}.")
        if score_increment < 0:
            raise ValueError(f"Score increment must not be negative, got {score_increment}.")

        self.grid = Grid(cols, rows, tile)
        self.tick_interval_ms = tick_interval_ms
        self.score_increment = score_increment
        self.rng = np.random.default_rng(seed)

        self._snake = Snake(cols, rows)
        self._food = Food(self.grid, self.rng, score=score_increment)
        self.restart()

    # ------------------------------------------------------------------
    # Read-only accessors
    # ------------------------------------------------------------------
    @property
    def cols(self) -> int:
        return self.grid.cols

    @property
    def rows(self) -> int:
        return self.grid.rows

    @property
    def snake(self) -> Tuple[Cell, ...]:
        return tuple(self._snake)

    @property
    def food(self) -> Optional[Cell]:
        return self._food.position

    @property
    def score(self) -> int:
        return self._score

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def direction(self) -> Direction:
        return self._direction

    @property
    def pending_direction(self) -> Direction:
        return self._pending_direction

    @property
    def tick(self) -> int:
        return self._tick

    @property
    def end_reason(self) -> Optional[EndReason]:
        return self._end_reason

    @property
    def is_running(self) -> bool:
        return self._state is GameState.RUNNING

    def snapshot(self, ate_food: bool = False) -> GameSnapshot:
        return GameSnapshot(
            snake=self.snake,
            food=self.food,
            score=self._score,
            state=self._state,
            direction=self._direction,
            tick=self._tick,
            ate_food=ate_food,
            end_reason=self._end_reason,
        )

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def restart(self) -> GameSnapshot:
        """
        Start a new round: a 3-cell snake centered on the grid heading right,
        fresh food, zero score.
        """
        self._snake.reset()
        self._direction = Direction.RIGHT
        self._pending_direction = Direction.RIGHT
        self._score = 0
        self._tick = 0
        self._state = GameState.RUNNING
        self._end_reason = None
        self._food.respawn(self._snake)
        logger.info("New round on %dx%d grid, food at %s.", self.cols, self.rows, self.food)
        return self.snapshot()

    def load_state(self, snake, direction: Direction, food: Optional[Cell] = None, score: int = 0) -> GameSnapshot:
        """
        Put the engine into a scripted position and resume RUNNING.

        Args:
            snake: cells from head to tail
            direction: current heading (also becomes the pending direction)
            food: food cell; a random free cell is chosen when omitted
            score: starting score

        Raises:
            ValueError: if a cell is off the grid, the snake overlaps itself,
                or the food sits on the snake.
        """
        cells = [tuple(cell) for cell in snake]
        if not cells:
            raise ValueError("Snake needs at least one cell.")
        for cell in cells:
            if not self.grid.in_bounds(cell):
                raise ValueError(f"Snake cell {cell} is outside the {self.cols}x{self.rows} grid.")
        if len(set(cells)) != len(cells):
            raise ValueError(f"Snake overlaps itself: {cells}.")
        if food is not None:
            food = tuple(food)
            if not self.grid.in_bounds(food):
                raise ValueError(f"Food {food} is outside the {self.cols}x{self.rows} grid.")
            if food in cells:
                raise ValueError(f"Food {food} is on the snake.")
        if score < 0:
            raise ValueError(f"Score must not be negative, got {score}.")

        self._snake.place(cells)
        self._direction = direction
        self._pending_direction = direction
        self._score = score
        self._tick = 0
        self._state = GameState.RUNNING
        self._end_reason = None
        if food is None:
            self._food.respawn(self._snake)
        else:
            self._food.place(food)
        return self.snapshot()

    # ------------------------------------------------------------------
    # Input and simulation
    # ------------------------------------------------------------------
    def set_pending_direction(self, direction: Direction) -> None:
        """
        Queue a heading for the next step. Only the latest accepted request
        survives until then; a request that reverses the current heading is
        dropped.
        """
        if is_opposite(direction, self._direction):
            logger.debug("Ignoring %s: reverses current heading %s.", direction.name, self._direction.name)
            return
        self._pending_direction = direction

    def step(self) -> GameSnapshot:
        """
        Advance the game by one tick.

        1) Commit the pending direction.
        2) Compute the new head; leaving the grid ends the game.
        3) Running into the body ends the game. The tail cell is free to
           enter unless the snake grows on this step.
        4) On food: grow, score and respawn the food. Otherwise move.

        A collision leaves snake, food and score as they were. Stepping a
        finished game changes nothing.
        """
        if self._state is GameState.GAME_OVER:
            return self.snapshot()

        self._direction = self._pending_direction
        new_head = self._snake.next_head(self._direction)

        if not self.grid.in_bounds(new_head):
            self._end(EndReason.WALL)
            return self.snapshot()

        growing = self._food.check_collision(new_head)
        if self._snake.check_self_collision(new_head, growing):
            self._end(EndReason.SELF)
            return self.snapshot()

        self._snake.move_to(new_head, grow=growing)
        self._tick += 1

        if growing:
            self._score += self._food.score
            if self._food.respawn(self._snake) is None:
                self._end(EndReason.BOARD_FULL)

        return self.snapshot(ate_food=growing)

    def _end(self, reason: EndReason) -> None:
        self._state = GameState.GAME_OVER
        self._end_reason = reason
        logger.info(
            "Game over (%s) after %d moves with score %d.", reason.value, self._tick, self._score
        )
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Final board:\n%s", self.snapshot().board_text(self.cols, self.rows))
