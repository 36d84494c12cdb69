# main.py
import argparse
from typing import List

import pygame  # type: ignore

from .config import WIDTH, HEIGHT, TITLE, CFG
from .game import GameState, new_game_state, handle_input, restart_requested, step_game
from .render import draw_game, draw_game_over


def now_s() -> float:
    return pygame.time.get_ticks() / 1000.0


def update_frame(state: GameState, events: List[pygame.event.Event], now: float) -> GameState:
    """
    One frame of game logic. Returns the state to draw next, which is a fresh
    one when R restarts a finished game.
    - alive: apply movement keys, then tick if the interval has passed
    - game over: movement keys are ignored, R restarts with the same rng
    """
    if not state.game_over:
        handle_input(state, events)
        step_game(state, now)
        if state.game_over:
            print(f"[GAME] Game over. score={state.score}")
        return state

    if restart_requested(events):
        print("[GAME] Restarted.")
        return new_game_state(now, rng=state.rng)
    return state


def configure(argv=None) -> argparse.Namespace:
    """Parse command line flags and write them into CFG."""
    parser = argparse.ArgumentParser(description="3D snake on a 20x20 grid.")
    parser.add_argument("--seed", type=int, default=CFG.seed, help="seed for fruit placement")
    parser.add_argument("--fps", type=int, default=CFG.fps, help="frame rate cap")
    args = parser.parse_args(argv)
    CFG.seed = args.seed
    CFG.fps = args.fps
    return args


def main(argv=None):
    configure(argv)

    pygame.init()
    font = pygame.font.SysFont(None, 32)
    big_font = pygame.font.SysFont(None, 48)
    screen = pygame.display.set_mode((WIDTH, HEIGHT))
    pygame.display.set_caption(TITLE)
    clock = pygame.time.Clock()

    state = new_game_state(now_s())
    running = True

    while running:
        # 1) input
        events = pygame.event.get()
        if any(e.type == pygame.QUIT for e in events):
            running = False
            continue

        # 2) update (movement is time-gated inside step_game)
        state = update_frame(state, events, now_s())

        # 3) render
        draw_game(screen, font, state)
        if state.game_over:
            draw_game_over(screen, font, big_font, state.score)
        pygame.display.flip()
        clock.tick(CFG.fps)

    pygame.quit()


if __name__ == "__main__":
    main()
