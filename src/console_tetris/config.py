"""Game configuration."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .board import HEIGHT, WIDTH


# Spawn anchor of every new piece (column, row).
SPAWN_X = 3
SPAWN_Y = 0
# Milliseconds between ticks.
TICK_MS = 100


class InputPolicy(str, Enum):
    """How many asserted intents a single tick applies."""

    # Rotate clockwise, rotate counter-clockwise, shift left and shift right
    # are each attempted, in that order.
    ALL = "all"
    # At most one rotation (clockwise wins) and one shift (left wins).
    ONE_PER_CLASS = "one_per_class"


@dataclass(frozen=True)
class GameConfig:
    """Settings for one game session."""

    width: int = WIDTH
    height: int = HEIGHT
    spawn_x: int = SPAWN_X
    spawn_y: int = SPAWN_Y
    tick_ms: int = TICK_MS
    seed: Optional[int] = None
    input_policy: InputPolicy = InputPolicy.ALL

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Board dimensions must be positive, got {self.width}x{self.height}")
        if self.tick_ms < 0:
            raise ValueError(f"Tick delay must not be negative, got {self.tick_ms}")

    @property
    def tick_seconds(self) -> float:
        return self.tick_ms / 1000.0
