# src/snake3d/sim/policies/greedy.py
from typing import List

import numpy as np  # type: ignore

from snake3d.config import Vec3, LEFT, RIGHT, UP, DOWN
from snake3d.game import GameState, would_collide
from snake3d.sim.policies.random import policy_random


def best_moves_toward_fruit(head: Vec3, fruit: Vec3) -> List[Vec3]:
    """
    Preference ordering of moves on the x/z plane: moves that reduce Manhattan
    distance to the fruit first, then the rest. Does NOT check collisions.
    """
    hx, _, hz = head
    fx, _, fz = fruit
    prefs = []
    if fx < hx:
        prefs.append(DOWN)
    elif fx > hx:
        prefs.append(UP)
    if fz < hz:
        prefs.append(LEFT)
    elif fz > hz:
        prefs.append(RIGHT)
    for d in (UP, DOWN, LEFT, RIGHT):
        if d not in prefs:
            prefs.append(d)
    return prefs  # length 4


def policy_greedy(state: GameState, rng: np.random.Generator, epsilon: float = 0.0) -> Vec3:
    """
    Greedy on fruit distance with simple safety:
    - prefer moves that reduce Manhattan distance
    - skip any move that would end the game next tick
    - if every move is fatal, fall back to random
    `epsilon` is unused; it keeps the signature shared by every policy.
    """
    for d in best_moves_toward_fruit(state.snake.head, state.fruit):
        if not would_collide(state, d):
            return d
    return policy_random(state, rng)
