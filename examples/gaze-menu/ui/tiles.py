"""Scene tile rendering: hover pose and dwell fill."""
from __future__ import annotations

import pygame

from tick_gaze import GazeBoard, Phase, Pose

from ui.constants import (
    FILL_COLOR,
    ORIGIN_X,
    ORIGIN_Y,
    PX_PER_UNIT,
    TEXT_COLOR,
    TILE_BG,
    TILE_BORDER,
    TILE_BORDER_GAZED,
    TILE_H,
    TILE_W,
)


def tile_rect(pose: Pose) -> pygame.Rect:
    """Screen rectangle for a tile at ``pose``. World +y is screen up."""
    x, y, _ = pose.position
    sx, sy, _ = pose.scale
    w = TILE_W * sx * PX_PER_UNIT
    h = TILE_H * sy * PX_PER_UNIT
    cx = ORIGIN_X + x * PX_PER_UNIT
    cy = ORIGIN_Y - y * PX_PER_UNIT
    return pygame.Rect(round(cx - w / 2), round(cy - h / 2), round(w), round(h))


def draw_tiles(
    surface: pygame.Surface,
    board: GazeBoard,
    labels: dict[str, str],
    font: pygame.font.Font,
) -> None:
    for tid in board.targets():
        rect = tile_rect(board.pose(tid))
        gazed = board.phase(tid) is not Phase.IDLE
        pygame.draw.rect(surface, TILE_BG, rect, border_radius=6)

        # Dwell fill rises from the bottom edge
        progress = board.progress(tid)
        if progress > 0.0:
            fill_h = round(rect.height * progress)
            overlay = pygame.Surface((rect.width, fill_h), pygame.SRCALPHA)
            overlay.fill(FILL_COLOR)
            surface.blit(overlay, (rect.x, rect.bottom - fill_h))

        border = TILE_BORDER_GAZED if gazed else TILE_BORDER
        pygame.draw.rect(surface, border, rect, width=2, border_radius=6)

        text = font.render(labels.get(tid, str(tid)), True, TEXT_COLOR)
        surface.blit(text, text.get_rect(center=rect.center))
