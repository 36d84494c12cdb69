# src/snake3d/sim/policies/eps_greedy.py
import numpy as np  # type: ignore

from snake3d.config import Vec3
from snake3d.game import GameState
from snake3d.sim.policies.random import policy_random
from snake3d.sim.policies.greedy import policy_greedy


def policy_eps_greedy(state: GameState, rng: np.random.Generator, epsilon: float = 0.1) -> Vec3:
    """
    Epsilon-greedy policy: with probability epsilon, pick random; else pick greedy.
    """
    if rng.random() < epsilon:
        return policy_random(state, rng)
    return policy_greedy(state, rng)
