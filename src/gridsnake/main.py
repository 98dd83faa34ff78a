# main.py
from __future__ import annotations
import argparse
import logging
from typing import List, Optional

import pygame  # type: ignore

from .config import Config, HEIGHT, INITIAL_LENGTH, TICK_MS, UNIT_SIZE, WIDTH
from .controls import InputMapper
from .food import FoodSpawner
from .game import GameMachine, Snapshot
from .grid import GridGeometry
from .render import Renderer

logger = logging.getLogger(__name__)

TICK_EVENT = pygame.USEREVENT + 1


class App:
    """
    Wires the game machine to pygame: a timer event drives ticks, key and
    mouse events become heading requests or restarts, and the renderer
    redraws whenever the state changed.
    """

    def __init__(self, cfg: Config, surface: pygame.Surface):
        self.cfg = cfg
        self.geometry = GridGeometry(cfg.width, cfg.height, cfg.unit)
        self.machine = GameMachine(
            self.geometry,
            initial_length=cfg.initial_length,
            spawner=FoodSpawner(cfg.seed),
        )
        self.controls = InputMapper(self.machine)
        self.renderer = Renderer(surface, self.geometry)
        self.dirty = True

    # ---------- Tick driver ----------
    def start_timer(self) -> None:
        pygame.time.set_timer(TICK_EVENT, self.cfg.tick_ms)

    def stop_timer(self) -> None:
        pygame.time.set_timer(TICK_EVENT, 0)

    def on_tick(self) -> Snapshot:
        was_over = self.machine.snapshot().is_over
        snap = self.machine.tick()
        self.dirty = True
        # timer events queued before the timer stopped still arrive
        if snap.is_over and not was_over:
            self.stop_timer()
            print(f"[GAME] {snap.outcome.value}: score={snap.score}, length={len(snap.snake)}, ticks={snap.tick}")
        return snap

    def restart(self) -> None:
        """Only honoured once the game is over."""
        if not self.machine.snapshot().is_over:
            return
        self.machine.restart()
        self.start_timer()
        self.dirty = True

    # ---------- Events ----------
    def handle_event(self, event: pygame.event.Event) -> bool:
        """Process one event. Return False to quit."""
        if event.type == pygame.QUIT:
            return False
        if event.type == TICK_EVENT:
            self.on_tick()
        elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
            return False
        elif event.type == pygame.KEYDOWN and event.key == pygame.K_r:
            self.restart()
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.renderer.restart_button.collidepoint(event.pos):
                self.restart()
        else:
            self.controls.on_event(event)
        return True

    def render(self) -> None:
        self.renderer.draw(self.machine.snapshot())
        self.dirty = False


def run(cfg: Config) -> None:
    pygame.init()
    screen = pygame.display.set_mode((cfg.width, cfg.height))
    pygame.display.set_caption("Snake Game")
    clock = pygame.time.Clock()

    app = App(cfg, screen)
    app.start_timer()
    logger.info(
        "started %dx%d board, tick %d ms, seed %s",
        app.geometry.cols, app.geometry.rows, cfg.tick_ms, cfg.seed,
    )

    running = True
    while running:
        for event in pygame.event.get():
            if not app.handle_event(event):
                running = False
                break

        if app.dirty:
            app.render()
            pygame.display.flip()
        clock.tick(60)  # poll rate only; movement is paced by TICK_EVENT

    app.stop_timer()
    pygame.quit()


# --------------------------
# CLI
# --------------------------
def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="gridsnake", description="Classic grid snake.")
    parser.add_argument("--width", type=int, default=WIDTH, help="window width in px")
    parser.add_argument("--height", type=int, default=HEIGHT, help="window height in px")
    parser.add_argument("--unit", type=int, default=UNIT_SIZE, help="cell size in px")
    parser.add_argument("--tick-ms", type=int, default=TICK_MS, help="ms between snake moves")
    parser.add_argument(
        "--initial-length",
        type=int,
        default=INITIAL_LENGTH,
        help="snake length at start and after each restart",
    )
    parser.add_argument("--seed", type=int, default=None, help="seed for food placement")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    return parser


def parse_config(argv: Optional[List[str]] = None) -> Config:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        cfg = Config(
            width=args.width,
            height=args.height,
            unit=args.unit,
            tick_ms=args.tick_ms,
            initial_length=args.initial_length,
            seed=args.seed,
            log_level=args.log_level,
        )
        geometry = GridGeometry(cfg.width, cfg.height, cfg.unit)
    except ValueError as exc:
        parser.error(str(exc))
    if cfg.initial_length > geometry.cols:
        parser.error(f"initial length {cfg.initial_length} does not fit in {geometry.cols} columns")
    return cfg


def main(argv: Optional[List[str]] = None) -> None:
    cfg = parse_config(argv)
    logging.basicConfig(
        level=cfg.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    run(cfg)


if __name__ == "__main__":
    main()
