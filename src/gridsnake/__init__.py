"""Grid snake: game state machine plus a thin pygame front end."""

from gridsnake.grid import Cell, GridGeometry, Heading
from gridsnake.snake import Snake
from gridsnake.food import BoardFullError, FoodSpawner
from gridsnake.game import GameMachine, Outcome, Snapshot, Status

__all__ = [
    "Cell",
    "GridGeometry",
    "Heading",
    "Snake",
    "BoardFullError",
    "FoodSpawner",
    "GameMachine",
    "Outcome",
    "Snapshot",
    "Status",
]
