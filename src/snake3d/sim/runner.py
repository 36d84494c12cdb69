# src/snake3d/sim/runner.py
from __future__ import annotations
import argparse
import csv
import os
import random
from typing import Callable, Tuple

import numpy as np  # type: ignore

from snake3d.config import CFG, Vec3
from snake3d.game import GameState, advance, new_game_state
from snake3d.sim.policies import policy_random, policy_greedy, policy_eps_greedy

Policy = Callable[[GameState, np.random.Generator, float], Vec3]

POLICIES = {
    "random": policy_random,
    "greedy": policy_greedy,
    "eps-greedy": policy_eps_greedy,
}


def get_policy(name: str) -> Policy:
    try:
        return POLICIES[name]
    except KeyError:
        raise ValueError(f"Unknown policy: {name}") from None


# --------------------------
# Episode loop
# --------------------------
def run_episode(policy: str, seed: int, epsilon: float = 0.1, max_steps: int = 10_000) -> Tuple[int, int]:
    """
    Play one game headlessly: every step the policy sets the direction and the
    game advances exactly one tick (no clock).

    Returns:
        steps: number of ticks taken
        score: fruit eaten before game over (or the step cap)
    """
    choose = get_policy(policy)
    rng = np.random.default_rng(seed)
    state = new_game_state(0.0, rng=random.Random(seed))
    steps = 0

    while not state.game_over and steps < max_steps:
        state.snake.direction = choose(state, rng, epsilon)
        advance(state)
        steps += 1

    return steps, state.score


# --------------------------
# Main
# --------------------------
def main(argv=None):
    parser = argparse.ArgumentParser(description="Run the snake headlessly with a scripted policy.")
    parser.add_argument("--episodes", type=int, default=50)
    parser.add_argument(
        "--policy",
        type=str,
        default="greedy",
        choices=sorted(POLICIES),
    )
    parser.add_argument(
        "--epsilon",
        type=float,
        default=0.1,
        help="epsilon for eps-greedy (ignored otherwise)",
    )
    parser.add_argument("--seed", type=int, default=CFG.seed, help="seed of the first episode")
    parser.add_argument(
        "--outdir",
        type=str,
        default="data/runs",
        help="CSV is saved here",
    )
    args = parser.parse_args(argv)

    os.makedirs(args.outdir, exist_ok=True)
    out_csv = os.path.join(args.outdir, f"sim_{args.policy}.csv")

    print(f"[SIM] Running {args.episodes} episode(s) with policy={args.policy} ε={args.epsilon}")
    print("ep,steps,score")

    rows = [("ep", "steps", "score")]
    for ep in range(1, args.episodes + 1):
        steps, score = run_episode(args.policy, args.seed + ep - 1, args.epsilon)
        print(f"{ep},{steps},{score}")
        rows.append((ep, steps, score))

    with open(out_csv, "w", newline="") as f:
        writer = csv.writer(f)
        writer.writerows(rows)

    print(f"\n[SIM] Saved results → {out_csv}")
    return out_csv


if __name__ == "__main__":
    main()
