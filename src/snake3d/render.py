# render.py
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

import numpy as np  # type: ignore
import pygame  # type: ignore

from .config import (
    GRID, Grid, Vec3,
    BG, GRID_LINE, BODY, HEAD, FRUIT, TEXT, GAME_OVER,
    CAMERA_POS, CAMERA_UP, CAMERA_FOVY_DEG,
)
from .game import GameState

Color = Tuple[int, int, int]
Face = Tuple[float, List[Tuple[float, float]], Color]  # (depth, screen points, color)

CUBE_SIZE = 1.0

# Unit cube corners around the origin
CUBE_CORNERS = 0.5 * np.array(
    [
        [-1, -1, -1], [1, -1, -1], [1, 1, -1], [-1, 1, -1],
        [-1, -1, 1], [1, -1, 1], [1, 1, 1], [-1, 1, 1],
    ],
    dtype=float,
)

# (corner indices, outward normal, brightness)
CUBE_FACES = [
    ((0, 1, 2, 3), (0.0, 0.0, -1.0), 0.65),
    ((4, 5, 6, 7), (0.0, 0.0, 1.0), 0.65),
    ((0, 3, 7, 4), (-1.0, 0.0, 0.0), 0.8),
    ((1, 2, 6, 5), (1.0, 0.0, 0.0), 0.8),
    ((0, 1, 5, 4), (0.0, -1.0, 0.0), 0.5),
    ((3, 2, 6, 7), (0.0, 1.0, 0.0), 1.0),
]

# ---------- Camera ----------
@dataclass
class Camera3D:
    """
    Perspective camera looking from `position` at `target`.

    View space: x to the right, y up, z is depth along the viewing direction
    (positive in front of the camera).
    """
    position: Vec3 = CAMERA_POS
    target: Vec3 = (0.0, 0.0, 0.0)
    up: Vec3 = CAMERA_UP
    fovy_deg: float = CAMERA_FOVY_DEG
    near: float = 0.01

    def basis(self) -> Tuple[np.ndarray, np.ndarray]:
        eye = np.asarray(self.position, dtype=float)
        forward = np.asarray(self.target, dtype=float) - eye
        forward /= np.linalg.norm(forward)
        right = np.cross(forward, np.asarray(self.up, dtype=float))
        right /= np.linalg.norm(right)
        true_up = np.cross(right, forward)
        return eye, np.stack([right, true_up, forward])

    def to_view(self, points) -> np.ndarray:
        eye, rot = self.basis()
        pts = np.asarray(points, dtype=float).reshape(-1, 3)
        return (pts - eye) @ rot.T

    def view_to_screen(self, view: np.ndarray, size: Tuple[int, int]) -> np.ndarray:
        # Only valid for points in front of the near plane.
        w, h = size
        focal = (h / 2) / np.tan(np.radians(self.fovy_deg) / 2)
        sx = w / 2 + view[:, 0] * focal / view[:, 2]
        sy = h / 2 - view[:, 1] * focal / view[:, 2]
        return np.stack([sx, sy], axis=1)

    def project(self, point: Vec3, size: Tuple[int, int]) -> Optional[Tuple[float, float]]:
        """Screen position of a world point, or None if it is behind the camera."""
        view = self.to_view([point])
        if view[0, 2] <= self.near:
            return None
        sx, sy = self.view_to_screen(view, size)[0]
        return float(sx), float(sy)

def follow(head: Vec3) -> Camera3D:
    return Camera3D(target=head)

# ---------- Primitives ----------
def clip_segment(a: np.ndarray, b: np.ndarray, near: float) -> Optional[Tuple[np.ndarray, np.ndarray]]:
    """Clip a view-space segment against the near plane. None if fully behind it."""
    za, zb = a[2], b[2]
    if za <= near and zb <= near:
        return None
    if za <= near:
        a = a + (b - a) * ((near - za) / (zb - za))
    elif zb <= near:
        b = b + (a - b) * ((near - zb) / (za - zb))
    return a, b

def draw_line_3d(surface: pygame.Surface, camera: Camera3D, start: Vec3, end: Vec3, color: Color) -> None:
    view = camera.to_view([start, end])
    clipped = clip_segment(view[0], view[1], camera.near)
    if clipped is None:
        return
    screen = camera.view_to_screen(np.stack(clipped), surface.get_size())
    pygame.draw.line(surface, color, screen[0], screen[1])

def shade(color: Color, factor: float) -> Color:
    return tuple(int(c * factor) for c in color)  # type: ignore[return-value]

def cube_faces(
    camera: Camera3D,
    size: Tuple[int, int],
    center: Vec3,
    color: Color,
    edge: float = CUBE_SIZE,
) -> List[Face]:
    """Visible faces of a cube, projected. Faces crossing the near plane are dropped."""
    corners = np.asarray(center, dtype=float) + CUBE_CORNERS * edge
    view = camera.to_view(corners)
    eye = np.asarray(camera.position, dtype=float)
    faces: List[Face] = []
    for idx, normal, brightness in CUBE_FACES:
        idx = list(idx)
        face_center = corners[idx].mean(axis=0)
        if np.dot(normal, eye - face_center) <= 0:
            continue  # facing away
        face_view = view[idx]
        if np.any(face_view[:, 2] <= camera.near):
            continue
        pts = [tuple(p) for p in camera.view_to_screen(face_view, size)]
        faces.append((float(face_view[:, 2].mean()), pts, shade(color, brightness)))
    return faces

def draw_faces(surface: pygame.Surface, faces: Sequence[Face]) -> None:
    # Painter's order: farthest first
    for _, pts, color in sorted(faces, key=lambda f: f[0], reverse=True):
        pygame.draw.polygon(surface, color, pts)
        pygame.draw.polygon(surface, shade(color, 0.6), pts, 1)

def draw_cube(surface: pygame.Surface, camera: Camera3D, center: Vec3, color: Color) -> None:
    draw_faces(surface, cube_faces(camera, surface.get_size(), center, color))

# ---------- Scene ----------
def draw_grid(surface: pygame.Surface, camera: Camera3D, grid: Grid = GRID, color: Color = GRID_LINE) -> None:
    extent = grid.size * grid.cell_size
    for i in range(1, grid.size):
        pos = i * grid.cell_size
        draw_line_3d(surface, camera, (pos, 0.0, 0.0), (pos, 0.0, extent), color)
        draw_line_3d(surface, camera, (0.0, 0.0, pos), (extent, 0.0, pos), color)

def draw_world(surface: pygame.Surface, state: GameState) -> Camera3D:
    """Grid, snake and fruit seen from the camera following the head. Returns the camera used."""
    size = surface.get_size()
    camera = follow(state.snake.head)
    surface.fill(BG)
    draw_grid(surface, camera)

    faces: List[Face] = []
    for segment in state.snake.body:
        faces += cube_faces(camera, size, segment, BODY)
    faces += cube_faces(camera, size, state.snake.head, HEAD)
    faces += cube_faces(camera, size, state.fruit, FRUIT)
    draw_faces(surface, faces)
    return camera

def draw_score(surface: pygame.Surface, font: pygame.font.Font, score: int) -> None:
    txt = font.render(f"Score: {score}", True, TEXT)
    surface.blit(txt, (30, 30))

def draw_game(surface: pygame.Surface, font: pygame.font.Font, state: GameState) -> None:
    draw_world(surface, state)
    draw_score(surface, font, state.score)

def draw_game_over(surface: pygame.Surface, font: pygame.font.Font, big_font: pygame.font.Font, score: int) -> None:
    w, h = surface.get_size()
    overlay = pygame.Surface((w, h), pygame.SRCALPHA)
    overlay.fill((0, 0, 0, 140))
    surface.blit(overlay, (0, 0))

    title = big_font.render("Game Over", True, GAME_OVER)
    sub   = font.render("Press R to restart", True, TEXT)
    sco   = font.render(f"Score: {score}", True, TEXT)

    surface.blit(title, title.get_rect(center=(w // 2, h // 2 - 20)))
    surface.blit(sub, sub.get_rect(center=(w // 2, h // 2 + 20)))
    surface.blit(sco, sco.get_rect(center=(w // 2, h // 2 + 48)))
