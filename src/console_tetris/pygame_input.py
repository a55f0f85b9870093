"""Keyboard input through pygame.

pygame only reports key state for a focused window, so a small control window
is opened while the game runs in the console.  Keys are sampled every poll
without edge detection: a held key repeats each tick.
"""

from __future__ import annotations

from typing import Callable, Optional

import pygame

from .controls import Intents


ROTATE_CW_KEY = pygame.K_d
ROTATE_CCW_KEY = pygame.K_a
LEFT_KEY = pygame.K_LEFT
RIGHT_KEY = pygame.K_RIGHT

WINDOW_SIZE = (320, 40)


class PygameKeyboard:
    """Input source sampling the current pygame key state."""

    def __init__(self, on_quit: Optional[Callable[[], None]] = None) -> None:
        pygame.init()
        self._screen = pygame.display.set_mode(WINDOW_SIZE)
        pygame.display.set_caption("Tetris - D/A rotate, arrows move")
        self._on_quit = on_quit

    def poll(self) -> Intents:
        # Pumping events keeps the window responsive and the key state current
        for event in pygame.event.get():
            if event.type == pygame.QUIT and self._on_quit is not None:
                self._on_quit()
        keys = pygame.key.get_pressed()
        return Intents(
            rotate_cw=bool(keys[ROTATE_CW_KEY]),
            rotate_ccw=bool(keys[ROTATE_CCW_KEY]),
            left=bool(keys[LEFT_KEY]),
            right=bool(keys[RIGHT_KEY]),
        )

    def close(self) -> None:
        pygame.quit()
