"""Bottom status bar and the loaded-scene screen."""
from __future__ import annotations

import pygame

from ui.constants import (
    SCENE_BG,
    SCREEN_H,
    SCREEN_W,
    STATUS_BG,
    STATUS_H,
    TEXT_COLOR,
    TEXT_DIM,
)


def draw_status_bar(
    surface: pygame.Surface,
    font: pygame.font.Font,
    gazed: str | None,
    progress: float,
    dwell: float,
) -> None:
    y = SCREEN_H - STATUS_H
    pygame.draw.rect(surface, STATUS_BG, (0, y, SCREEN_W, STATUS_H))
    if gazed is None:
        msg = f"Look at a tile for {dwell:.1f}s to open it  |  Esc quit"
        color = TEXT_DIM
    else:
        msg = f"Gazing: {gazed}  {progress * 100:5.1f}%"
        color = TEXT_COLOR
    surface.blit(font.render(msg, True, color), (10, y + 10))


def draw_scene_screen(surface: pygame.Surface, font: pygame.font.Font, scene: str) -> None:
    surface.fill(SCENE_BG)
    title = font.render(f"Scene loaded: {scene}", True, TEXT_COLOR)
    hint = font.render("Backspace returns to the menu", True, TEXT_DIM)
    surface.blit(title, title.get_rect(center=(SCREEN_W // 2, SCREEN_H // 2 - 12)))
    surface.blit(hint, hint.get_rect(center=(SCREEN_W // 2, SCREEN_H // 2 + 14)))
