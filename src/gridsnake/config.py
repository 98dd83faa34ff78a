from dataclasses import dataclass
from typing import Optional

# ----- Window & grid -----
WIDTH, HEIGHT = 600, 600
UNIT_SIZE = 25

# ----- Colors -----
BG         = (0, 0, 0)
HEAD       = (0, 255, 0)
BODY       = (45, 180, 0)
FOOD       = (220, 30, 30)
TEXT       = (220, 220, 230)
TITLE      = (220, 30, 30)
BUTTON     = (64, 64, 64)
BUTTON_TXT = (255, 255, 255)

# ----- Game defaults -----
TICK_MS = 100
INITIAL_LENGTH = 6

# ----- Tunables (everything the CLI can override) -----
@dataclass
class Config:
    width: int = WIDTH
    height: int = HEIGHT
    unit: int = UNIT_SIZE
    tick_ms: int = TICK_MS
    initial_length: int = INITIAL_LENGTH
    seed: Optional[int] = None
    log_level: str = "WARNING"

    def __post_init__(self):
        if self.tick_ms <= 0:
            raise ValueError(f"tick period must be positive, got {self.tick_ms} ms")
        if self.initial_length < 1:
            raise ValueError(f"initial length must be at least 1, got {self.initial_length}")
