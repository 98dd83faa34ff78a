# render.py
from __future__ import annotations
from typing import Tuple

import pygame  # type: ignore

from .config import BG, BODY, BUTTON, BUTTON_TXT, FOOD, HEAD, TEXT, TITLE
from .game import Outcome, Snapshot
from .grid import Cell, GridGeometry

RESTART_LABEL = "Retry"


class Renderer:
    """
    Draws a Snapshot onto a pygame surface.

    Holds no game data; whatever it shows comes from the snapshot it is given.
    """

    def __init__(self, surface: pygame.Surface, geometry: GridGeometry):
        pygame.font.init()
        self.surface = surface
        self.geometry = geometry
        self.score_font = pygame.font.SysFont(None, 40)
        self.title_font = pygame.font.SysFont(None, 75)
        self.button_font = pygame.font.SysFont(None, 36)

        w, h = surface.get_size()
        self.restart_button = pygame.Rect(0, 0, 160, 56)
        self.restart_button.center = (w // 2, h // 2 + 80)

    # ---------- Helpers ----------
    def draw_cell(self, cell: Cell, color: Tuple[int, int, int]) -> None:
        pygame.draw.rect(self.surface, color, pygame.Rect(self.geometry.cell_rect(cell)))

    def draw_food(self, cell: Cell) -> None:
        x, y = self.geometry.to_pixels(cell)
        half = self.geometry.unit // 2
        pygame.draw.circle(self.surface, FOOD, (x + half, y + half), half)

    def _blit_centered(self, font: pygame.font.Font, text: str, color, center_y: int) -> None:
        img = font.render(text, True, color)
        rect = img.get_rect(center=(self.surface.get_width() // 2, center_y))
        self.surface.blit(img, rect)

    # ---------- Screens ----------
    def draw(self, snap: Snapshot) -> None:
        if snap.is_over:
            self.draw_game_over(snap)
        else:
            self.draw_game(snap)

    def draw_game(self, snap: Snapshot) -> None:
        self.surface.fill(BG)
        if snap.food is not None:
            self.draw_food(snap.food)
        # body first so the head is never hidden
        for cell in snap.snake[1:]:
            self.draw_cell(cell, BODY)
        self.draw_cell(snap.head, HEAD)
        self._blit_centered(self.score_font, f"Score: {snap.score}", TITLE, self.score_font.get_height() // 2 + 4)

    def draw_game_over(self, snap: Snapshot) -> None:
        self.surface.fill(BG)
        mid = self.surface.get_height() // 2
        title = "Board Cleared!" if snap.outcome is Outcome.BOARD_FULL else "Game Over"

        self._blit_centered(self.score_font, f"Score: {snap.score}", TEXT, mid - 100)
        self._blit_centered(self.title_font, title, TITLE, mid - 20)

        pygame.draw.rect(self.surface, BUTTON, self.restart_button)
        label = self.button_font.render(RESTART_LABEL, True, BUTTON_TXT)
        self.surface.blit(label, label.get_rect(center=self.restart_button.center))
