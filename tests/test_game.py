import random
from collections import deque

import pygame
import pytest

from snake3d.config import CFG, GRID, LEFT, RIGHT, UP, DOWN, START_HEAD
from snake3d.game import (
    advance,
    handle_input,
    in_bounds,
    new_game_state,
    restart_requested,
    spawn_fruit,
    step_game,
    would_collide,
)


class FixedRng:
    """Stands in for random.Random when a test needs to know where fruit lands."""

    def __init__(self, *values):
        self.values = list(values)

    def randrange(self, n):
        return self.values.pop(0)


def make_state(head, direction, body=(), fruit=(10.0, 1.0, 19.0), rng=None):
    state = new_game_state(0.0, rng=random.Random(1))
    if rng is not None:
        state.rng = rng
    state.snake.head = head
    state.snake.direction = direction
    state.snake.body = deque(body)
    state.fruit = fruit
    return state


def keydown(key):
    return pygame.event.Event(pygame.KEYDOWN, key=key)


def test_new_game_defaults():
    state = new_game_state(3.0)
    assert state.snake.head == START_HEAD == (0.0, 1.0, 0.0)
    assert state.snake.direction == (1.0, 0.0, 0.0)
    assert len(state.snake.body) == 0
    assert state.score == 0
    assert state.interval == pytest.approx(0.7)
    assert state.last_update == 3.0
    assert not state.game_over
    assert state.fruit[1] == 1.0
    assert in_bounds(state.fruit)


def test_move_keeps_body_length():
    state = make_state((5.0, 1.0, 5.0), RIGHT, body=[(4.0, 1.0, 5.0), (3.0, 1.0, 5.0)])
    advance(state)
    assert state.snake.head == (5.0, 1.0, 6.0)
    assert list(state.snake.body) == [(5.0, 1.0, 5.0), (4.0, 1.0, 5.0)]
    assert state.score == 0
    assert not state.game_over


def test_eating_grows_body_and_speeds_up():
    state = make_state((5.0, 1.0, 5.0), UP, fruit=(6.0, 1.0, 5.0), rng=FixedRng(2, 3))
    advance(state)
    assert state.snake.head == (6.0, 1.0, 5.0)
    assert list(state.snake.body) == [(5.0, 1.0, 5.0)]
    assert state.score == 1
    assert state.fruit == (2.0, 1.0, 3.0)
    assert state.interval == pytest.approx(CFG.start_interval - 0.1)
    assert not state.game_over


def test_fruit_can_land_on_the_body():
    assert spawn_fruit(FixedRng(0, 0)) == START_HEAD

    state = make_state((5.0, 1.0, 5.0), UP, body=[(5.0, 1.0, 4.0)], fruit=(6.0, 1.0, 5.0), rng=FixedRng(5, 4))
    advance(state)
    assert state.score == 1
    assert state.fruit == (5.0, 1.0, 4.0)
    assert state.fruit in state.snake.body
    assert not state.game_over


def test_eating_fruit_on_the_body_ends_game():
    body = [(5.0, 1.0, 4.0), (6.0, 1.0, 4.0), (6.0, 1.0, 5.0)]
    state = make_state((5.0, 1.0, 5.0), UP, body=body, fruit=(6.0, 1.0, 5.0), rng=FixedRng(1, 1))
    advance(state)
    assert state.snake.head == (6.0, 1.0, 5.0)
    assert state.score == 1
    assert len(state.snake.body) == 4
    assert state.game_over is True


def test_interval_has_no_floor():
    state = make_state((0.0, 1.0, 0.0), RIGHT)
    for z in range(1, 10):
        state.fruit = (0.0, 1.0, float(z))
        advance(state)
    assert state.score == 9
    assert state.interval < 0
    assert not state.game_over


def test_leaving_grid_ends_game():
    state = make_state((19.0, 1.0, 0.0), UP)
    advance(state)
    assert state.snake.head == (20.0, 1.0, 0.0)
    assert state.game_over


@pytest.mark.parametrize(
    "direction,ticks_alive",
    [
        (UP, GRID.size - 1),
        (RIGHT, GRID.size - 1),
        (DOWN, 0),
        (LEFT, 0),
    ],
)
def test_straight_line_hits_wall_exactly_at_edge(direction, ticks_alive):
    state = make_state((0.0, 1.0, 0.0), direction, fruit=(5.0, 1.0, 5.0))
    for _ in range(ticks_alive):
        advance(state)
        assert not state.game_over
    advance(state)
    assert state.game_over
    assert not in_bounds(state.snake.head)


def test_in_bounds_checks_every_axis():
    assert in_bounds((0.0, 0.0, 0.0))
    assert in_bounds((19.0, 19.0, 19.0))
    assert not in_bounds((3.0, -1.0, 3.0))
    assert not in_bounds((3.0, 20.0, 3.0))
    assert not in_bounds((3.0, 1.0, 20.0))


def test_reversing_into_neck_ends_game():
    state = make_state((6.0, 1.0, 5.0), DOWN, body=[(5.0, 1.0, 5.0), (4.0, 1.0, 5.0)])
    advance(state)
    assert state.snake.head == (5.0, 1.0, 5.0)
    assert state.game_over


def test_reversing_with_single_segment_is_safe():
    state = make_state((6.0, 1.0, 5.0), DOWN, body=[(5.0, 1.0, 5.0)])
    advance(state)
    assert state.snake.head == (5.0, 1.0, 5.0)
    assert list(state.snake.body) == [(6.0, 1.0, 5.0)]
    assert not state.game_over


def test_moving_into_vacated_tail_is_safe():
    body = [(5.0, 1.0, 6.0), (4.0, 1.0, 6.0), (4.0, 1.0, 5.0)]
    state = make_state((5.0, 1.0, 5.0), DOWN, body=body)
    advance(state)
    assert state.snake.head == (4.0, 1.0, 5.0)
    assert not state.game_over
    assert state.snake.head not in state.snake.body


def test_step_game_is_time_gated():
    state = make_state((5.0, 1.0, 5.0), UP)
    assert not step_game(state, 0.7)  # needs strictly more than the interval
    assert state.snake.head == (5.0, 1.0, 5.0)
    assert step_game(state, 0.75)
    assert state.snake.head == (6.0, 1.0, 5.0)
    assert state.last_update == 0.75
    assert not step_game(state, 1.0)
    assert step_game(state, 1.5)


def test_step_game_does_nothing_after_game_over():
    state = make_state((19.0, 1.0, 0.0), UP)
    assert step_game(state, 1.0)
    assert state.game_over
    head = state.snake.head
    assert not step_game(state, 10.0)
    assert state.snake.head == head


def test_keys_map_to_directions():
    state = new_game_state(0.0)
    for key, direction in [(pygame.K_a, LEFT), (pygame.K_d, RIGHT), (pygame.K_w, UP), (pygame.K_s, DOWN)]:
        handle_input(state, [keydown(key)])
        assert state.snake.direction == direction


def test_last_key_in_frame_wins():
    state = new_game_state(0.0)
    handle_input(state, [keydown(pygame.K_a), keydown(pygame.K_x), keydown(pygame.K_s)])
    assert state.snake.direction == DOWN


def test_input_ignores_key_up_and_game_over():
    state = new_game_state(0.0)
    handle_input(state, [pygame.event.Event(pygame.KEYUP, key=pygame.K_a)])
    assert state.snake.direction == UP

    state.game_over = True
    handle_input(state, [keydown(pygame.K_a)])
    assert state.snake.direction == UP


def test_restart_requested():
    assert restart_requested([keydown(pygame.K_w), keydown(pygame.K_r)])
    assert not restart_requested([keydown(pygame.K_w)])
    assert not restart_requested([pygame.event.Event(pygame.KEYUP, key=pygame.K_r)])


def test_restart_resets_state():
    state = make_state((19.0, 1.0, 0.0), UP, body=[(18.0, 1.0, 0.0)])
    state.score = 4
    state.interval = 0.3
    advance(state)
    assert state.game_over

    fresh = new_game_state(5.0, rng=state.rng)
    assert fresh.score == 0
    assert fresh.interval == pytest.approx(0.7)
    assert len(fresh.snake.body) == 0
    assert fresh.snake.head == START_HEAD
    assert fresh.snake.direction == UP
    assert not fresh.game_over
    assert fresh.last_update == 5.0
    assert fresh.rng is state.rng


def test_would_collide_follows_tick_rule():
    body = [(5.0, 1.0, 6.0), (4.0, 1.0, 6.0), (4.0, 1.0, 5.0)]
    state = make_state((5.0, 1.0, 5.0), DOWN, body=body)
    assert not would_collide(state, DOWN)  # tail moves away
    assert would_collide(state, RIGHT)     # neck
    assert not would_collide(state, LEFT)

    # eating keeps the tail in place
    state.fruit = (4.0, 1.0, 5.0)
    assert would_collide(state, DOWN)

    edge = make_state((19.0, 1.0, 0.0), UP)
    assert would_collide(edge, UP)
    assert would_collide(edge, LEFT)
    assert not would_collide(edge, RIGHT)
