# src/snake3d/sim/policies/random.py
import numpy as np  # type: ignore

from snake3d.config import Vec3, LEFT, RIGHT, UP, DOWN
from snake3d.game import GameState

MOVES = (UP, DOWN, LEFT, RIGHT)


def policy_random(state: GameState, rng: np.random.Generator, epsilon: float = 0.0) -> Vec3:
    """
    Random policy: pick one of the four moves uniformly.
    Reversals are allowed, so this dies quickly once the body is longer than one.
    `epsilon` is unused; it keeps the signature shared by every policy.
    """
    return MOVES[int(rng.integers(len(MOVES)))]
