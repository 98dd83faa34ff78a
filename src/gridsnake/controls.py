# controls.py
from __future__ import annotations
from typing import Dict, Optional, Protocol

import pygame  # type: ignore

from .grid import Heading


class HeadingSink(Protocol):
    def request_heading(self, heading: Heading) -> bool: ...


KEY_BINDINGS: Dict[int, Heading] = {
    pygame.K_UP: Heading.UP,
    pygame.K_DOWN: Heading.DOWN,
    pygame.K_LEFT: Heading.LEFT,
    pygame.K_RIGHT: Heading.RIGHT,
    pygame.K_w: Heading.UP,
    pygame.K_s: Heading.DOWN,
    pygame.K_a: Heading.LEFT,
    pygame.K_d: Heading.RIGHT,
}


class InputMapper:
    """Turns directional input into heading requests; knows nothing else about the game."""

    def __init__(self, target: HeadingSink, bindings: Optional[Dict[int, Heading]] = None):
        self.target = target
        self.bindings = dict(KEY_BINDINGS if bindings is None else bindings)

    def on_direction(self, heading: Heading) -> bool:
        return self.target.request_heading(heading)

    def on_event(self, event: pygame.event.Event) -> bool:
        """Return True if the event was a direction key (accepted or not)."""
        if event.type != pygame.KEYDOWN:
            return False
        heading = self.bindings.get(event.key)
        if heading is None:
            return False
        self.on_direction(heading)
        return True
