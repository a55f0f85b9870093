"""Session loop: spawn pieces and tick them at a fixed pace until game over."""

from __future__ import annotations

from typing import Callable, Optional
import logging
import time

from .config import GameConfig
from .controls import InputSource, NullInput
from .game_state import GameState
from .render import ConsoleRenderer, Renderer


LOGGER = logging.getLogger(__name__)


class GameRunner:
    """Drive one game session with start/stop controls.

    Each tick sleeps for ``config.tick_ms``, polls ``input_source`` once, ticks
    the game and hands the board snapshot to ``renderer``.
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        renderer: Optional[Renderer] = None,
        input_source: Optional[InputSource] = None,
        *,
        sleep: Callable[[float], None] = time.sleep,
        max_ticks: Optional[int] = None,
    ) -> None:
        self.config = config or GameConfig()
        self.renderer = renderer or ConsoleRenderer()
        self.input_source = input_source or NullInput()
        self.max_ticks = max_ticks
        self.ticks = 0
        self.interrupted = False
        self.state: Optional[GameState] = None
        self._sleep = sleep
        self._running = False

    @property
    def running(self) -> bool:
        return self._running

    def stop(self) -> None:
        """Ask the loop to finish after the current tick."""

        if not self._running:
            LOGGER.info("Stop ignored: game not running")
            return
        self._running = False

    def _out_of_ticks(self) -> bool:
        return self.max_ticks is not None and self.ticks >= self.max_ticks

    def _play_piece(self, state: GameState) -> None:
        while self._running:
            if self._out_of_ticks():
                LOGGER.info("Tick limit of %d reached", self.max_ticks)
                self._running = False
                return
            self._sleep(self.config.tick_seconds)
            result = state.tick(self.input_source.poll())
            self.ticks += 1
            self.renderer.draw(state.board.render())
            if result.locked:
                return

    def run(self) -> GameState:
        """Play until a piece cannot spawn or the loop is stopped."""

        state = GameState(self.config)
        self.state = state
        self.ticks = 0
        self._running = True
        self.interrupted = False
        LOGGER.info("Game started on a %dx%d board", self.config.width, self.config.height)
        try:
            while self._running and state.spawn():
                self._play_piece(state)
        except KeyboardInterrupt:
            self.interrupted = True
            LOGGER.warning("Interrupted after %d ticks", self.ticks)
        finally:
            self._running = False
            self.input_source.close()

        if state.over:
            self.renderer.game_over()
        LOGGER.info(
            "Game %s after %d ticks: %d pieces, %d rows cleared",
            "interrupted" if self.interrupted else "stopped",
            self.ticks,
            state.pieces,
            state.lines,
        )
        return state


def run_session(
    config: Optional[GameConfig] = None,
    renderer: Optional[Renderer] = None,
    input_source: Optional[InputSource] = None,
    **kwargs,
) -> GameState:
    """Run a full session and return the final game state."""

    return GameRunner(config, renderer, input_source, **kwargs).run()
