# game.py
from collections import deque
from dataclasses import dataclass, field
from typing import Deque, Iterable, Optional
import random

import pygame  # type: ignore

from .config import (
    GRID, Grid, Vec3,
    LEFT, RIGHT, UP, DOWN,
    START_HEAD, START_DIR, PLANE_Y,
    CFG,
)

KEY_DIRECTIONS = {
    pygame.K_a: LEFT,
    pygame.K_d: RIGHT,
    pygame.K_w: UP,
    pygame.K_s: DOWN,
}
RESTART_KEY = pygame.K_r

# ---------- Helpers ----------
def add(a: Vec3, b: Vec3) -> Vec3:
    return (a[0] + b[0], a[1] + b[1], a[2] + b[2])

def in_bounds(pos: Vec3, grid: Grid = GRID) -> bool:
    return all(0 <= c < grid.size for c in pos)

def spawn_fruit(rng: random.Random, grid: Grid = GRID) -> Vec3:
    # May land on the body; nothing excludes occupied cells.
    return (
        float(rng.randrange(grid.size)),
        PLANE_Y,
        float(rng.randrange(grid.size)),
    )

# ---------- State ----------
@dataclass
class Snake:
    direction: Vec3
    head: Vec3
    body: Deque[Vec3] = field(default_factory=deque)  # newest segment first

def new_snake() -> Snake:
    return Snake(direction=START_DIR, head=START_HEAD)

@dataclass
class GameState:
    snake: Snake
    fruit: Vec3
    score: int
    interval: float        # seconds between ticks
    last_update: float     # timestamp (s) of the last tick
    game_over: bool
    rng: random.Random = field(repr=False)

def new_game_state(now: float, rng: Optional[random.Random] = None) -> GameState:
    """Fresh game. Pass the previous state's rng to keep one fruit sequence across restarts."""
    if rng is None:
        rng = random.Random(CFG.seed)
    return GameState(
        snake=new_snake(),
        fruit=spawn_fruit(rng),
        score=0,
        interval=CFG.start_interval,
        last_update=now,
        game_over=False,
        rng=rng,
    )

# ---------- Input ----------
def handle_input(state: GameState, events: Iterable[pygame.event.Event]) -> None:
    """Set the direction from this frame's key presses; the last movement key wins.

    Reversing into the body is allowed here; the tick decides whether it kills.
    """
    if state.game_over:
        return
    for event in events:
        if event.type == pygame.KEYDOWN and event.key in KEY_DIRECTIONS:
            state.snake.direction = KEY_DIRECTIONS[event.key]

def restart_requested(events: Iterable[pygame.event.Event]) -> bool:
    return any(e.type == pygame.KEYDOWN and e.key == RESTART_KEY for e in events)

# ---------- Update ----------
def advance(state: GameState) -> None:
    """
    Advance the game by exactly one tick, ignoring the clock.
    - the old head becomes the newest body segment
    - eating keeps the tail (growth), respawns fruit, bumps score, shortens the interval
    - otherwise the oldest segment is dropped
    - leaving the grid or landing on the body ends the game
    """
    snake = state.snake
    snake.body.appendleft(snake.head)
    snake.head = add(snake.head, snake.direction)

    if snake.head == state.fruit:
        state.fruit = spawn_fruit(state.rng)
        state.score += 1
        state.interval -= CFG.interval_step
    else:
        snake.body.pop()

    if not in_bounds(snake.head) or snake.head in snake.body:
        state.game_over = True

def step_game(state: GameState, now: float) -> bool:
    """Tick once if more than `interval` seconds passed since the last tick. Returns True if it ticked."""
    if state.game_over or now - state.last_update <= state.interval:
        return False
    state.last_update = now
    advance(state)
    return True

def would_collide(state: GameState, direction: Vec3) -> bool:
    """True if one step in `direction` would end the game under the tick rule above."""
    snake = state.snake
    new_head = add(snake.head, direction)
    if not in_bounds(new_head):
        return True
    body = [snake.head, *snake.body]
    if new_head != state.fruit:
        body.pop()
    return new_head in body
