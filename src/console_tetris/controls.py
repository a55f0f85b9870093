"""Input intents and the sources that produce them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Protocol

from .config import InputPolicy


@dataclass(frozen=True)
class Intents:
    """Move and rotate signals asserted during one tick."""

    rotate_cw: bool = False
    rotate_ccw: bool = False
    left: bool = False
    right: bool = False

    def limited(self, policy: InputPolicy) -> "Intents":
        """Return the intents ``policy`` allows to be applied in one tick."""

        if policy is InputPolicy.ALL:
            return self
        return Intents(
            rotate_cw=self.rotate_cw,
            rotate_ccw=self.rotate_ccw and not self.rotate_cw,
            left=self.left,
            right=self.right and not self.left,
        )


NO_INTENTS = Intents()


class InputSource(Protocol):
    """Non-blocking source of per-tick intents."""

    def poll(self) -> Intents:
        """Return the signals currently asserted; never blocks."""
        ...

    def close(self) -> None:
        ...


class NullInput:
    """Input source that never asserts anything."""

    def poll(self) -> Intents:
        return NO_INTENTS

    def close(self) -> None:
        pass


class ScriptedInput:
    """Replay a prepared sequence of intents, one per poll.

    Once the script runs out every poll returns no intents.
    """

    def __init__(self, script: Iterable[Intents]) -> None:
        self._script: Iterator[Intents] = iter(script)
        self.polls = 0

    def poll(self) -> Intents:
        self.polls += 1
        return next(self._script, NO_INTENTS)

    def close(self) -> None:
        self._script = iter(())
