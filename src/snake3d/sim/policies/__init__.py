# src/snake3d/sim/policies/__init__.py
"""Policies choosing the next direction from the game state."""

from snake3d.sim.policies.random import policy_random
from snake3d.sim.policies.greedy import policy_greedy
from snake3d.sim.policies.eps_greedy import policy_eps_greedy

__all__ = ["policy_random", "policy_greedy", "policy_eps_greedy"]
