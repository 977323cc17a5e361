"""Gaze Menu — dwell-select scene picker.

Exercises tick-gaze: the mouse pointer stands in for the gaze ray. Rest on a
tile to raise it and fill it; once full, its scene "loads".

Controls:
  Mouse      Gaze
  Click      Select the gazed tile immediately
  Backspace  Return to the menu
  Esc        Quit
"""
from __future__ import annotations

import argparse
import logging
import sys

import pygame

from tick_gaze import CURVES, EventBus, GazeEnd, GazeStart, HitResult

from game.setup import build_board
from ui.constants import BG_COLOR, FPS, SCREEN_H, SCREEN_W
from ui.status import draw_scene_screen, draw_status_bar
from ui.tiles import draw_tiles, tile_rect


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Gaze Menu — tick-gaze visual demo")
    p.add_argument("--dwell", type=float, default=2.0, help="Dwell time in seconds (default: 2.0)")
    p.add_argument("--fill-curve", choices=sorted(CURVES), default="smoothstep",
                   help="Fill indicator curve (default: smoothstep)")
    p.add_argument("-v", "--verbose", action="store_true", help="Log gaze transitions")
    return p.parse_args()


class MenuState:
    """Holds the board, the loaded scene, and the currently gazed tile."""

    def __init__(self, dwell: float, fill_curve: str) -> None:
        self.bus = EventBus()
        self.scene: str | None = None
        self.gazed: str | None = None
        self.dwell = dwell
        self.board, self.labels = build_board(self.bus, self._load_scene, dwell, fill_curve)

        self.bus.subscribe(GazeStart, self._on_gaze_start)
        self.bus.subscribe(GazeEnd, self._on_gaze_end)

    def _load_scene(self, destination: str) -> None:
        self.scene = destination

    def _on_gaze_start(self, event: GazeStart) -> None:
        self.gazed = event.target_id

    def _on_gaze_end(self, event: GazeEnd) -> None:
        if self.gazed == event.target_id:
            self.gazed = None

    def hit_test(self, pos: tuple[int, int]) -> HitResult | None:
        # Last tile drawn is on top, so test in reverse
        for tid in reversed(self.board.targets()):
            if tile_rect(self.board.pose(tid)).collidepoint(pos):
                return HitResult(tid)
        return None

    def back_to_menu(self) -> None:
        self.scene = None
        self.gazed = None
        self.board.reset(snap_to_rest=True)


def main() -> None:
    args = parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    pygame.init()
    screen = pygame.display.set_mode((SCREEN_W, SCREEN_H))
    pygame.display.set_caption("Gaze Menu — tick-gaze demo")
    clock = pygame.time.Clock()
    font = pygame.font.SysFont("monospace", 15)

    state = MenuState(args.dwell, args.fill_curve)
    running = True

    while running:
        dt = clock.tick(FPS) / 1000.0

        # --- Events ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False

            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_BACKSPACE and state.scene is not None:
                    state.back_to_menu()

            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                if state.scene is None:
                    hit = state.hit_test(event.pos)
                    if hit is not None:
                        state.board.manual_commit(hit.target_id)

        # --- Tick ---
        if state.scene is None:
            state.board.tick(state.hit_test(pygame.mouse.get_pos()), dt)

        # --- Render ---
        if state.scene is not None:
            draw_scene_screen(screen, font, state.scene)
        else:
            screen.fill(BG_COLOR)
            draw_tiles(screen, state.board, state.labels, font)
            progress = state.board.progress(state.gazed) if state.gazed else 0.0
            draw_status_bar(screen, font, state.gazed, progress, state.dwell)

        pygame.display.flip()

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
