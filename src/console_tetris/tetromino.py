"""Tetromino definitions and basic behaviour.

Every piece orientation is a 4x4 boolean mask.  The seven spawn masks form the
piece catalog; rotations are pure functions producing a new mask so callers can
test a candidate against the board before committing it.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import List, Tuple

import numpy as np
from numpy.typing import NDArray

Shape = NDArray[np.bool_]

# Side length of the bounding box shared by every shape and rotation.
SHAPE_SIZE = 4


class ShapeType(IntEnum):
    """The seven piece types, valued by their catalog index."""

    I = 0
    O = 1
    L = 2
    J = 3
    S = 4
    Z = 5
    T = 6


def _freeze(rows: List[List[int]]) -> Shape:
    shape = np.array(rows, dtype=bool)
    shape.setflags(write=False)
    return shape


# Spawn masks in catalog order.  Templates are read-only; active pieces copy
# them before rotating.
_CATALOG: Tuple[Shape, ...] = (
    _freeze([[1, 1, 1, 1], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]]),
    _freeze([[0, 1, 1, 0], [0, 1, 1, 0], [0, 0, 0, 0], [0, 0, 0, 0]]),
    _freeze([[1, 0, 0, 0], [1, 0, 0, 0], [1, 1, 0, 0], [0, 0, 0, 0]]),
    _freeze([[0, 1, 0, 0], [0, 1, 0, 0], [1, 1, 0, 0], [0, 0, 0, 0]]),
    _freeze([[0, 0, 1, 1], [0, 1, 1, 0], [0, 0, 0, 0], [0, 0, 0, 0]]),
    _freeze([[1, 1, 0, 0], [0, 1, 1, 0], [0, 0, 0, 0], [0, 0, 0, 0]]),
    _freeze([[1, 1, 1, 0], [0, 1, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]]),
)


def shape_count() -> int:
    """Return the number of distinct piece types."""

    return len(_CATALOG)


def shape_at(index: int) -> Shape:
    """Return the read-only spawn mask for catalog ``index``.

    Raises:
        IndexError: If ``index`` is outside ``[0, shape_count())``.  Negative
            indexes are rejected rather than wrapped.
    """

    if not 0 <= index < len(_CATALOG):
        raise IndexError(f"Shape index {index} out of range")
    return _CATALOG[index]


def _check_shape(shape: Shape) -> None:
    if shape.shape != (SHAPE_SIZE, SHAPE_SIZE):
        raise ValueError(f"Expected a {SHAPE_SIZE}x{SHAPE_SIZE} shape, got {shape.shape}")


def rotate_clockwise(shape: Shape) -> Shape:
    """Return ``shape`` rotated 90 degrees clockwise.

    Cell ``(i, j)`` moves to ``(j, 3 - i)``.  The input is left untouched.
    """

    _check_shape(shape)
    return np.rot90(shape, k=-1).copy()


def rotate_counter_clockwise(shape: Shape) -> Shape:
    """Return ``shape`` rotated 90 degrees counter-clockwise.

    Cell ``(i, j)`` moves to ``(3 - j, i)``.
    """

    _check_shape(shape)
    return np.rot90(shape, k=1).copy()


@dataclass
class Tetromino:
    """Active falling piece in the game.

    ``x`` and ``y`` anchor the top-left corner of the 4x4 bounding box on the
    board (column and row respectively).
    """

    kind: ShapeType
    shape: Shape
    x: int = 0
    y: int = 0

    @classmethod
    def spawn(cls, kind: ShapeType | int, x: int, y: int) -> "Tetromino":
        """Create a piece of ``kind`` with its own writable copy of the mask."""

        template = shape_at(int(kind))
        return cls(ShapeType(int(kind)), template.copy(), x, y)

    def move(self, dx: int, dy: int) -> None:
        """Move the anchor by the given offsets."""

        self.x += dx
        self.y += dy

