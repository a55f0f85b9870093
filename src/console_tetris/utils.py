"""Utility helpers for moving the active piece on the board."""

from __future__ import annotations

from .board import Board
from .tetromino import Tetromino, rotate_clockwise, rotate_counter_clockwise


def can_place(board: Board, tetromino: Tetromino, dx: int = 0, dy: int = 0) -> bool:
    """Return ``True`` if ``tetromino`` fits on ``board`` after moving by ``dx``/``dy``.

    The piece's own footprint must already be erased from the board, otherwise
    it collides with itself.  Used by the game loop to validate both movement
    and gravity before they are applied.
    """

    return board.is_placement_valid(tetromino.shape, tetromino.x + dx, tetromino.y + dy)


def try_shift(board: Board, tetromino: Tetromino, dx: int) -> bool:
    """Shift ``tetromino`` horizontally by ``dx`` columns if the target is free.

    Returns whether the piece moved.  A blocked shift leaves the piece as is.
    """

    if not can_place(board, tetromino, dx, 0):
        return False
    tetromino.move(dx, 0)
    return True


def try_rotate(board: Board, tetromino: Tetromino, clockwise: bool = True) -> bool:
    """Rotate ``tetromino`` in place at its current anchor if the result fits.

    There is no wall kick: the rotated mask is tried at the same ``(x, y)``
    only, and discarded when it collides or leaves the board.
    """

    rotate = rotate_clockwise if clockwise else rotate_counter_clockwise
    candidate = rotate(tetromino.shape)
    if not board.is_placement_valid(candidate, tetromino.x, tetromino.y):
        return False
    tetromino.shape = candidate
    return True


def shift_left(board: Board, tetromino: Tetromino) -> bool:
    return try_shift(board, tetromino, -1)


def shift_right(board: Board, tetromino: Tetromino) -> bool:
    return try_shift(board, tetromino, 1)
