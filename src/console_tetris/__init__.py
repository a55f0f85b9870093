"""Minimal console Tetris engine."""

from .board import Board
from .config import GameConfig, InputPolicy
from .controls import Intents, InputSource, NullInput, ScriptedInput
from .game_state import GameState, PiecePhase, TickResult
from .render import ConsoleRenderer, Renderer, format_frame
from .runner import GameRunner, run_session
from .tetromino import (
    ShapeType,
    Tetromino,
    rotate_clockwise,
    rotate_counter_clockwise,
    shape_at,
    shape_count,
)
from .utils import can_place, shift_left, shift_right, try_rotate, try_shift

__all__ = [
    "Board",
    "GameConfig",
    "InputPolicy",
    "Intents",
    "InputSource",
    "NullInput",
    "ScriptedInput",
    "GameState",
    "PiecePhase",
    "TickResult",
    "ConsoleRenderer",
    "Renderer",
    "format_frame",
    "GameRunner",
    "run_session",
    "ShapeType",
    "Tetromino",
    "rotate_clockwise",
    "rotate_counter_clockwise",
    "shape_at",
    "shape_count",
    "can_place",
    "shift_left",
    "shift_right",
    "try_rotate",
    "try_shift",
]
