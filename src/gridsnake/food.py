# food.py
from __future__ import annotations
from typing import Iterable, Optional

import numpy as np  # type: ignore

from .grid import Cell, GridGeometry


class BoardFullError(RuntimeError):
    """Every cell of the board is taken; there is nowhere to put food."""


class FoodSpawner:
    """
    Uniform food placement over the free cells of a board.

    Free cells are found with a boolean occupancy mask, so a spawn costs one
    pass over the board no matter how crowded it is (no retry loop).
    """

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self.rng = np.random.default_rng(seed)

    def free_mask(self, excluded: Iterable[Cell], geometry: GridGeometry) -> np.ndarray:
        """[rows, cols] mask, True where food may go."""
        free = np.ones((geometry.rows, geometry.cols), dtype=bool)
        for cell in excluded:
            if geometry.in_bounds(cell):
                col, row = cell
                free[row, col] = False
        return free

    def spawn(self, excluded: Iterable[Cell], geometry: GridGeometry) -> Cell:
        candidates = np.flatnonzero(self.free_mask(excluded, geometry))
        if candidates.size == 0:
            raise BoardFullError(
                f"no free cell left on the {geometry.cols}x{geometry.rows} board"
            )
        idx = int(self.rng.choice(candidates))
        row, col = divmod(idx, geometry.cols)
        return (col, row)
