import logging

import numpy as np
import pytest

from console_tetris.config import GameConfig, InputPolicy
from console_tetris.controls import Intents
from console_tetris.game_state import GameState, PiecePhase
from console_tetris.tetromino import ShapeType, rotate_clockwise, rotate_counter_clockwise, shape_at


def _drop(state: GameState, first: Intents = Intents()):
    """Tick the active piece until it locks and return the final result."""

    result = state.tick(first)
    while not result.locked:
        result = state.tick()
    return result


def test_spawn_places_piece_on_board():
    state = GameState()
    assert state.spawn(ShapeType.I)
    assert state.phase is PiecePhase.FALLING
    assert (state.active.x, state.active.y) == (3, 0)
    assert state.board.render()[0] == (False,) * 3 + (True,) * 4 + (False,) * 3
    assert state.pieces == 1


def test_line_piece_falls_to_bottom_and_locks():
    state = GameState()
    assert state.spawn(0)
    piece = state.active

    falls = 0
    result = state.tick()
    while not result.locked:
        falls += 1
        assert result.phase is PiecePhase.FALLING
        assert piece.y == falls
        result = state.tick()

    assert falls == 19
    assert piece.y == 19
    assert state.active is None
    assert state.phase is PiecePhase.LOCKED
    assert state.board.grid[19].tolist() == [0, 0, 0, 1, 1, 1, 1, 0, 0, 0]
    assert int(state.board.grid.sum()) == 4


def test_locking_into_gap_clears_row_and_shifts_down():
    state = GameState()
    board = state.board
    board.grid[19, :] = 1
    board.grid[19, 6] = 0
    board.grid[18, 0] = 1

    assert state.spawn(ShapeType.I)
    # Rotating clockwise turns the line vertical in board column 6.
    result = _drop(state, Intents(rotate_cw=True))

    assert result.rows_cleared == 1
    assert state.lines == 1
    assert board.grid[19].tolist() == [1, 0, 0, 0, 0, 0, 1, 0, 0, 0]
    assert board.grid[18].tolist() == [0] * 6 + [1, 0, 0, 0]
    assert board.grid[17].tolist() == [0] * 6 + [1, 0, 0, 0]
    assert not board.grid[:17].any()


def test_spawn_on_full_top_row_ends_session():
    state = GameState()
    state.board.grid[0, :] = 1

    assert not state.spawn(ShapeType.O)
    assert state.over
    assert state.phase is PiecePhase.GAME_OVER
    assert state.active is None
    assert state.pieces == 0
    assert not state.spawn(ShapeType.I)
    with pytest.raises(RuntimeError):
        state.tick()


def test_piece_spawned_on_stack_locks_on_first_tick():
    state = GameState()
    state.board.grid[1, 4] = 1

    assert state.spawn(ShapeType.I)
    result = state.tick()
    assert result.locked
    assert state.board.grid[0].tolist() == [0, 0, 0, 1, 1, 1, 1, 0, 0, 0]


def test_input_is_applied_before_gravity():
    state = GameState()
    state.board.grid[1, 2] = 1

    assert state.spawn(ShapeType.I)
    piece = state.active
    result = state.tick(Intents(left=True))

    assert result.locked
    assert (piece.x, piece.y) == (2, 0)
    assert state.board.grid[0].tolist() == [0, 0, 1, 1, 1, 1, 0, 0, 0, 0]


def test_rotation_is_tried_before_shift():
    state = GameState()
    # Blocks the line once it is vertical in column 5, i.e. after a left shift.
    state.board.grid[1, 5] = 1

    assert state.spawn(ShapeType.I)
    piece = state.active
    state.tick(Intents(rotate_cw=True, left=True))

    assert np.array_equal(piece.shape, rotate_clockwise(shape_at(ShapeType.I)))
    assert (piece.x, piece.y) == (3, 1)


def test_blocked_rotation_does_not_wait_for_shift():
    state = GameState()
    # Blocks the vertical line in column 6 but not in column 5.
    state.board.grid[1, 6] = 1

    assert state.spawn(ShapeType.I)
    piece = state.active
    state.tick(Intents(rotate_cw=True, left=True))

    assert np.array_equal(piece.shape, shape_at(ShapeType.I))
    assert (piece.x, piece.y) == (2, 1)


def test_counter_clockwise_applies_when_clockwise_is_blocked():
    state = GameState()
    state.board.grid[2, 6] = 1

    assert state.spawn(ShapeType.I)
    piece = state.active
    state.tick(Intents(rotate_cw=True, rotate_ccw=True))

    assert np.array_equal(piece.shape, rotate_counter_clockwise(shape_at(ShapeType.I)))
    assert (piece.x, piece.y) == (3, 1)


def test_one_per_class_drops_counter_clockwise_even_when_clockwise_is_blocked():
    state = GameState(GameConfig(input_policy=InputPolicy.ONE_PER_CLASS))
    state.board.grid[2, 6] = 1

    assert state.spawn(ShapeType.I)
    piece = state.active
    state.tick(Intents(rotate_cw=True, rotate_ccw=True))

    assert np.array_equal(piece.shape, shape_at(ShapeType.I))


def test_right_shift_applies_after_blocked_left_shift():
    state = GameState()
    state.board.grid[0, 2] = 1

    assert state.spawn(ShapeType.I)
    piece = state.active
    state.tick(Intents(left=True, right=True))

    assert (piece.x, piece.y) == (4, 1)

def test_all_policy_applies_every_signal():
    state = GameState()
    assert state.spawn(ShapeType.T)
    piece = state.active
    state.tick(Intents(rotate_cw=True, rotate_ccw=True, left=True, right=True))

    assert np.array_equal(piece.shape, shape_at(ShapeType.T))
    assert (piece.x, piece.y) == (3, 1)


def test_one_per_class_policy_applies_first_signal_of_each_class():
    state = GameState(GameConfig(input_policy=InputPolicy.ONE_PER_CLASS))
    assert state.spawn(ShapeType.T)
    piece = state.active
    state.tick(Intents(rotate_cw=True, rotate_ccw=True, left=True, right=True))

    assert np.array_equal(piece.shape, rotate_clockwise(shape_at(ShapeType.T)))
    assert (piece.x, piece.y) == (2, 1)


def test_falling_piece_stays_stamped_between_ticks():
    state = GameState()
    assert state.spawn(ShapeType.O)
    for _ in range(3):
        state.tick(Intents(right=True))
    assert (state.active.x, state.active.y) == (6, 3)
    assert np.argwhere(state.board.grid).tolist() == [[3, 7], [3, 8], [4, 7], [4, 8]]
    assert int(state.board.grid.sum()) == 4
    assert state.board.grid[3, 7] == 1


def test_spawn_while_falling_is_an_error():
    state = GameState()
    assert state.spawn(ShapeType.I)
    with pytest.raises(RuntimeError):
        state.spawn(ShapeType.O)


def test_tick_before_spawn_is_an_error():
    with pytest.raises(RuntimeError):
        GameState().tick()


def test_random_shapes_are_seeded_and_cover_catalog():
    first = GameState(GameConfig(seed=11))
    second = GameState(GameConfig(seed=11))
    draws = [first._random_index() for _ in range(300)]
    assert draws == [second._random_index() for _ in range(300)]
    assert set(draws) == set(range(7))


def test_random_spawn_uses_catalog_shape():
    state = GameState(GameConfig(seed=5))
    assert state.spawn()
    assert np.array_equal(state.active.shape, shape_at(state.active.kind))


def test_logs_cleared_rows_and_game_over(caplog):
    state = GameState()
    state.board.grid[19, :] = 1
    state.board.grid[19, 3:7] = 0

    with caplog.at_level(logging.INFO, logger="console_tetris.game_state"):
        assert state.spawn(ShapeType.I)
        _drop(state)
        state.board.grid[0, :] = 1
        assert not state.spawn(ShapeType.I)

    message = "\n".join(caplog.messages)
    assert "Cleared 1 row(s)" in message
    assert "Game over" in message
