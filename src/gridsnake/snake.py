# snake.py
from __future__ import annotations
from collections import deque
from typing import Deque, Iterable, Iterator, Tuple

from .grid import Cell, Heading


class Snake:
    """
    Ordered body cells, head at index 0.

    The model only moves and grows; walls and self-collision are judged by
    the game machine, so duplicate cells are allowed here.
    """

    def __init__(self, cells: Iterable[Cell]):
        self._cells: Deque[Cell] = deque(cells)
        if not self._cells:
            raise ValueError("a snake needs at least one cell")
        self._grow_pending = False

    @classmethod
    def line(cls, head: Cell, heading: Heading, length: int) -> "Snake":
        """Straight snake of `length` cells, body trailing away from `heading`."""
        back = heading.opposite
        cells = [head]
        for _ in range(length - 1):
            cells.append(back.step(cells[-1]))
        return cls(cells)

    # ---------- Queries ----------
    def head(self) -> Cell:
        return self._cells[0]

    def cells(self) -> Tuple[Cell, ...]:
        return tuple(self._cells)

    @property
    def growing(self) -> bool:
        return self._grow_pending

    def body_contains(self, cell: Cell) -> bool:
        """True if `cell` is occupied by anything but the head."""
        it = iter(self._cells)
        next(it)
        return any(c == cell for c in it)

    def __len__(self) -> int:
        return len(self._cells)

    def __iter__(self) -> Iterator[Cell]:
        return iter(self._cells)

    def __contains__(self, cell: object) -> bool:
        return cell in self._cells

    def __repr__(self) -> str:
        return f"Snake({list(self._cells)!r}, growing={self._grow_pending})"

    # ---------- Mutation ----------
    def grow(self) -> None:
        """Keep the tail on the next advance."""
        self._grow_pending = True

    def advance(self, heading: Heading) -> Cell:
        """Move one cell towards `heading`; returns the new head."""
        new_head = heading.step(self._cells[0])
        self._cells.appendleft(new_head)
        if self._grow_pending:
            self._grow_pending = False
        else:
            self._cells.pop()
        return new_head
