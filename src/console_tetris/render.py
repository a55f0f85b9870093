"""Text rendering of board snapshots."""

from __future__ import annotations

import sys
from typing import Protocol, TextIO

from .board import Snapshot


FILLED_MARK = "# "
EMPTY_MARK = ". "
GAME_OVER_TEXT = "Game Over :("


class Renderer(Protocol):
    """Receives a board snapshot for every frame."""

    def draw(self, snapshot: Snapshot) -> None:
        ...

    def game_over(self) -> None:
        ...


def format_frame(snapshot: Snapshot, filled: str = FILLED_MARK, empty: str = EMPTY_MARK) -> str:
    """Return ``snapshot`` as text, one board row per line."""

    return "\n".join("".join(filled if cell else empty for cell in row) for row in snapshot)


class ConsoleRenderer:
    """Write frames to a text stream separated by an empty line."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self.stream = stream if stream is not None else sys.stdout

    def draw(self, snapshot: Snapshot) -> None:
        self.stream.write(format_frame(snapshot) + "\n\n")
        self.stream.flush()

    def game_over(self) -> None:
        self.stream.write(GAME_OVER_TEXT + "\n")
        self.stream.flush()
