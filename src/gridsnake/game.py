# game.py
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional, Tuple
import logging
import threading

from .config import INITIAL_LENGTH
from .food import BoardFullError, FoodSpawner
from .grid import Cell, GridGeometry, Heading
from .snake import Snake

logger = logging.getLogger(__name__)

INITIAL_HEADING = Heading.RIGHT


class Status(Enum):
    RUNNING = "running"
    OVER = "over"


class Outcome(Enum):
    WALL = "wall"
    SELF = "self"
    BOARD_FULL = "board_full"  # the only way to win


# ---------- Snapshot ----------
@dataclass(frozen=True)
class Snapshot:
    snake: Tuple[Cell, ...]        # head at index 0
    food: Optional[Cell]           # None once the board is full
    score: int
    status: Status
    heading: Heading
    outcome: Optional[Outcome]     # None while running
    tick: int

    @property
    def head(self) -> Cell:
        return self.snake[0]

    @property
    def is_over(self) -> bool:
        return self.status is Status.OVER


# ---------- State machine ----------
class GameMachine:
    """
    Owns the snake, the food, the score and the running/over status.

    `tick()` is the only thing that moves the game forward. Heading requests,
    restarts and snapshots may come from other threads; a single lock keeps
    every call atomic with respect to a tick.
    """

    def __init__(
        self,
        geometry: GridGeometry,
        initial_length: int = INITIAL_LENGTH,
        spawner: Optional[FoodSpawner] = None,
    ):
        self._configure(geometry, initial_length, spawner)
        self._reset()

    def _configure(self, geometry, initial_length, spawner) -> None:
        if not 1 <= initial_length <= geometry.cols:
            raise ValueError(
                f"initial length {initial_length} does not fit in {geometry.cols} columns"
            )
        self.geometry = geometry
        self.initial_length = initial_length
        self.spawner = spawner or FoodSpawner()
        self._lock = threading.Lock()

    @classmethod
    def from_layout(
        cls,
        geometry: GridGeometry,
        cells: Iterable[Cell],
        heading: Heading,
        food: Optional[Cell],
        score: int = 0,
        initial_length: Optional[int] = None,
        spawner: Optional[FoodSpawner] = None,
    ) -> "GameMachine":
        """Machine in an explicit position; `restart()` goes back to the usual start."""
        if initial_length is None:
            initial_length = min(INITIAL_LENGTH, geometry.cols)
        # skips _reset(): no food is drawn from the spawner until the first meal
        machine = cls.__new__(cls)
        machine._configure(geometry, initial_length, spawner)
        machine._snake = Snake(cells)
        machine._heading = heading
        machine._pending = heading
        machine._food = food
        machine._score = score
        machine._ticks = 0
        machine._status = Status.RUNNING
        machine._outcome = None
        return machine

    def _reset(self) -> None:
        head = (self.initial_length - 1, 0)
        self._snake = Snake.line(head, INITIAL_HEADING, self.initial_length)
        self._heading = INITIAL_HEADING    # last applied
        self._pending = INITIAL_HEADING    # applied on next tick
        self._score = 0
        self._ticks = 0
        self._status = Status.RUNNING
        self._outcome: Optional[Outcome] = None
        self._food: Optional[Cell] = None
        if not self._respawn_food():
            self._end(Outcome.BOARD_FULL)

    def _respawn_food(self) -> bool:
        """Place new food; False when the board has no free cell left."""
        try:
            self._food = self.spawner.spawn(self._snake, self.geometry)
        except BoardFullError:
            self._food = None
            return False
        return True

    def _end(self, outcome: Outcome) -> None:
        self._status = Status.OVER
        self._outcome = outcome
        logger.info(
            "game over (%s) after %d ticks, score %d, length %d",
            outcome.value, self._ticks, self._score, len(self._snake),
        )

    def _snapshot(self) -> Snapshot:
        return Snapshot(
            snake=self._snake.cells(),
            food=self._food,
            score=self._score,
            status=self._status,
            heading=self._heading,
            outcome=self._outcome,
            tick=self._ticks,
        )

    # ---------- Public API ----------
    @property
    def status(self) -> Status:
        return self._status

    def snapshot(self) -> Snapshot:
        with self._lock:
            return self._snapshot()

    def request_heading(self, heading: Heading) -> bool:
        """
        Queue `heading` for the next tick. Reversals of the heading applied on
        the last tick are ignored; among valid requests the latest wins.
        """
        with self._lock:
            if heading is self._heading.opposite:
                logger.debug("ignored reversal %s while heading %s", heading.name, self._heading.name)
                return False
            self._pending = heading
            return True

    def restart(self) -> Snapshot:
        with self._lock:
            self._reset()
            logger.info("restarted: length %d, food at %s", len(self._snake), self._food)
            return self._snapshot()

    def tick(self) -> Snapshot:
        """
        Advance one step.

        Food is checked before collisions: a point scored on the same tick the
        snake dies is kept.
        """
        with self._lock:
            if self._status is Status.OVER:
                return self._snapshot()

            # Commit direction once per tick
            self._heading = self._pending
            self._ticks += 1

            # Move / grow
            ate = self._food is not None and self._heading.step(self._snake.head()) == self._food
            if ate:
                self._snake.grow()
            head = self._snake.advance(self._heading)

            board_full = False
            if ate:
                self._score += 1
                board_full = not self._respawn_food()
                logger.debug("ate food at %s, score %d, next food %s", head, self._score, self._food)

            # Self collision, against the body as it stands after the move
            if self._snake.body_contains(head):
                self._end(Outcome.SELF)
            # Wall collision
            elif not self.geometry.in_bounds(head):
                self._end(Outcome.WALL)
            elif board_full:
                self._end(Outcome.BOARD_FULL)

            return self._snapshot()
