# grid.py
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Tuple
import logging

logger = logging.getLogger(__name__)

Cell = Tuple[int, int]  # (col, row)


# ----- Directions (dx, dy); rows grow downwards -----
class Heading(Enum):
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    @property
    def opposite(self) -> "Heading":
        return Heading((-self.dx, -self.dy))

    def step(self, cell: Cell) -> Cell:
        """Cell one unit away from `cell` in this direction."""
        return (cell[0] + self.dx, cell[1] + self.dy)


@dataclass(frozen=True)
class GridGeometry:
    """
    Board dimensions derived from a pixel area and a cell size.

    Sizes that are not exact multiples of `unit` are floored to whole cells;
    the leftover pixels are simply not part of the board.
    """
    width: int
    height: int
    unit: int

    def __post_init__(self):
        if self.unit <= 0:
            raise ValueError(f"unit size must be positive, got {self.unit}")
        if self.width < self.unit or self.height < self.unit:
            raise ValueError(
                f"{self.width}x{self.height} px holds no {self.unit} px cell"
            )
        if self.width % self.unit or self.height % self.unit:
            logger.warning(
                "%dx%d px is not a multiple of %d px cells; board clamped to %dx%d cells",
                self.width, self.height, self.unit, self.cols, self.rows,
            )

    @property
    def cols(self) -> int:
        return self.width // self.unit

    @property
    def rows(self) -> int:
        return self.height // self.unit

    @property
    def cell_count(self) -> int:
        return self.cols * self.rows

    def in_bounds(self, cell: Cell) -> bool:
        col, row = cell
        return 0 <= col < self.cols and 0 <= row < self.rows

    def cells(self) -> Iterator[Cell]:
        """All board cells, row-major."""
        for row in range(self.rows):
            for col in range(self.cols):
                yield (col, row)

    def to_pixels(self, cell: Cell) -> Tuple[int, int]:
        """Top-left pixel of a cell."""
        return (cell[0] * self.unit, cell[1] * self.unit)

    def cell_rect(self, cell: Cell) -> Tuple[int, int, int, int]:
        x, y = self.to_pixels(cell)
        return (x, y, self.unit, self.unit)
