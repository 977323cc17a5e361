"""Layout constants and color definitions."""

FPS = 60

# Layout dimensions
SCREEN_W = 900
SCREEN_H = 420
STATUS_H = 36
PX_PER_UNIT = 160  # world units -> pixels
ORIGIN_X = SCREEN_W // 2
ORIGIN_Y = (SCREEN_H - STATUS_H) // 2

# Tiles
TILE_W = 1.0  # world units at rest scale
TILE_H = 0.75

# Colors
BG_COLOR = (20, 20, 30)
TILE_BG = (45, 45, 65)
TILE_BORDER = (80, 80, 110)
TILE_BORDER_GAZED = (240, 220, 120)
FILL_COLOR = (255, 255, 255, 170)
STATUS_BG = (35, 35, 50)
TEXT_COLOR = (200, 200, 210)
TEXT_DIM = (120, 120, 140)
SCENE_BG = (12, 30, 28)
