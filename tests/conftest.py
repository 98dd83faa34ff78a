import os

# pygame must never open a real window or audio device under test
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest

from gridsnake.food import FoodSpawner
from gridsnake.grid import GridGeometry


@pytest.fixture
def geometry():
    # 10x8 board
    return GridGeometry(width=100, height=80, unit=10)


@pytest.fixture
def spawner():
    return FoodSpawner(seed=1234)
