"""High level game state container and the per-piece state machine."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional
import logging
import random

from .board import Board
from .config import GameConfig
from .controls import NO_INTENTS, Intents
from .tetromino import Tetromino, shape_count
from .utils import can_place, shift_left, shift_right, try_rotate


LOGGER = logging.getLogger(__name__)


class PiecePhase(str, Enum):
    """Lifecycle of the current piece."""

    SPAWNING = "spawning"
    FALLING = "falling"
    LOCKED = "locked"
    GAME_OVER = "game_over"


@dataclass(frozen=True)
class TickResult:
    """Outcome of a single tick."""

    phase: PiecePhase
    rows_cleared: int = 0

    @property
    def locked(self) -> bool:
        return self.phase is PiecePhase.LOCKED


@dataclass
class GameState:
    """Mutable state for a Tetris game session.

    While a piece is falling its cells are stamped into ``board`` so that a
    board snapshot always shows it.  Each tick erases the footprint, applies
    input and gravity, and stamps it back.
    """

    config: GameConfig = field(default_factory=GameConfig)
    board: Optional[Board] = None
    active: Optional[Tetromino] = None
    phase: PiecePhase = PiecePhase.SPAWNING
    pieces: int = 0
    lines: int = 0
    rng: random.Random = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.board is None:
            self.board = Board(self.config.width, self.config.height)
        self.rng = random.Random(self.config.seed)

    @property
    def over(self) -> bool:
        return self.phase is PiecePhase.GAME_OVER

    def _random_index(self) -> int:
        """Return a catalog index chosen uniformly at random."""

        return self.rng.randrange(shape_count())

    def spawn(self, index: Optional[int] = None) -> bool:
        """Spawn a new active piece at the configured start position.

        ``index`` selects the catalog shape; a random one is used when omitted.
        Returns ``False`` and ends the session when the piece does not fit.

        Raises:
            RuntimeError: If a piece is still falling.
        """

        if self.over:
            return False
        if self.active is not None:
            raise RuntimeError("A piece is already falling")
        if index is None:
            index = self._random_index()
        piece = Tetromino.spawn(index, self.config.spawn_x, self.config.spawn_y)
        if not can_place(self.board, piece):
            self.active = None
            self.phase = PiecePhase.GAME_OVER
            LOGGER.info(
                "Game over: %s piece cannot spawn (%d pieces, %d rows cleared)",
                piece.kind.name,
                self.pieces,
                self.lines,
            )
            return False

        self.board.stamp(piece.shape, piece.x, piece.y)
        self.active = piece
        self.phase = PiecePhase.FALLING
        self.pieces += 1
        LOGGER.debug("Spawned %s piece at (%d, %d)", piece.kind.name, piece.x, piece.y)
        return True

    def _apply_intents(self, intents: Intents) -> None:
        piece = self.active
        if intents.rotate_cw:
            try_rotate(self.board, piece, clockwise=True)
        if intents.rotate_ccw:
            try_rotate(self.board, piece, clockwise=False)
        if intents.left:
            shift_left(self.board, piece)
        if intents.right:
            shift_right(self.board, piece)

    def tick(self, intents: Intents = NO_INTENTS) -> TickResult:
        """Advance the active piece by one tick.

        Order is fixed: erase the footprint, apply rotation then shift intents,
        then either fall one row or lock in place.  Locking compacts full rows
        and leaves the state waiting for the next :meth:`spawn`.

        Raises:
            RuntimeError: If there is no falling piece.
        """

        if self.active is None or self.phase is not PiecePhase.FALLING:
            raise RuntimeError(f"Cannot tick while {self.phase.value}")

        piece = self.active
        self.board.unstamp(piece.shape, piece.x, piece.y)
        self._apply_intents(intents.limited(self.config.input_policy))

        if can_place(self.board, piece, 0, 1):
            piece.move(0, 1)
            self.board.stamp(piece.shape, piece.x, piece.y)
            return TickResult(PiecePhase.FALLING)

        self.board.stamp(piece.shape, piece.x, piece.y)
        LOGGER.debug("Locked %s piece at (%d, %d)", piece.kind.name, piece.x, piece.y)
        self.active = None
        self.phase = PiecePhase.LOCKED

        cleared = self.board.compact_full_rows()
        if cleared:
            self.lines += cleared
            LOGGER.info("Cleared %d row(s), %d in total", cleared, self.lines)
        return TickResult(PiecePhase.LOCKED, cleared)
