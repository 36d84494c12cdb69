# config.py
from dataclasses import dataclass
from typing import Tuple

Vec3 = Tuple[float, float, float]

# ----- Window -----
WIDTH, HEIGHT = 800, 600
TITLE = "Snake"

# ----- Grid -----
@dataclass(frozen=True)
class Grid:
    size: int = 20
    cell_size: float = 1.0

GRID = Grid()

# ----- Colors -----
BG         = (199, 199, 199)
GRID_LINE  = (0, 0, 0)
BODY       = (0, 204, 0)
HEAD       = (0, 255, 0)
FRUIT      = (255, 0, 0)
TEXT       = (255, 255, 255)
GAME_OVER  = (255, 0, 0)

# ----- Directions (dx, dy, dz) -----
LEFT:  Vec3 = (0.0, 0.0, -1.0)
RIGHT: Vec3 = (0.0, 0.0, 1.0)
UP:    Vec3 = (1.0, 0.0, 0.0)
DOWN:  Vec3 = (-1.0, 0.0, 0.0)

# ----- Start position -----
START_HEAD: Vec3 = (0.0, 1.0, 0.0)
START_DIR: Vec3 = UP
PLANE_Y = 1.0  # the snake and fruit live on this layer

# ----- Camera -----
CAMERA_POS: Vec3 = (-10.0, 10.0, -5.0)
CAMERA_UP: Vec3 = (0.0, 1.0, 0.0)
CAMERA_FOVY_DEG = 45.0

# ----- Tunables -----
@dataclass
class Config:
    seed: int = 0
    start_interval: float = 0.7   # seconds between ticks at start
    interval_step: float = 0.1    # shaved off per fruit, no floor
    fps: int = 60

CFG = Config()
