"""A window with a drawing surface, opened and closed as one resource."""

from __future__ import annotations

import logging
from typing import Iterator, Optional, Sequence, Tuple

import pygame

from spritesteps.texture import ColorLike

log = logging.getLogger(__name__)


class DisplayError(Exception):
    """Raised when the window cannot be opened or is used while closed."""


def centered_position(screen_size: Sequence[float],
                      texture_size: Sequence[float]) -> Tuple[float, ...]:
    """Top-left corner that centres something of ``texture_size`` on the screen."""
    if len(screen_size) != len(texture_size):
        raise ValueError("screen and texture sizes must have the same number of axes")
    return tuple((screen - item) / 2.0 for screen, item in zip(screen_size, texture_size))


class Display:
    """A titled window of a fixed size; use it as a context manager."""

    def __init__(self, title: str, width: int, height: int) -> None:
        self.title = title
        self.width = width
        self.height = height
        self._surface: Optional[pygame.Surface] = None

    @property
    def is_open(self) -> bool:
        """Whether the window is currently open."""
        return self._surface is not None

    @property
    def surface(self) -> pygame.Surface:
        """The surface drawn into the window."""
        if self._surface is None:
            raise DisplayError("display is not open")
        return self._surface

    @property
    def size(self) -> Tuple[int, int]:
        """Width and height of the window."""
        return (self.width, self.height)

    def open(self) -> pygame.Surface:
        """Start the video system and create the window."""
        if self._surface is not None:
            return self._surface
        if self.width <= 0 or self.height <= 0:
            raise DisplayError(f"invalid window size {self.width}x{self.height}")
        try:
            pygame.display.init()
        except pygame.error as exc:
            raise DisplayError(f"could not initialize video: {exc}") from exc
        log.info("Video initialized.")
        try:
            surface = pygame.display.set_mode((self.width, self.height))
        except pygame.error as exc:
            pygame.display.quit()
            raise DisplayError(f"could not create window: {exc}") from exc
        pygame.display.set_caption(self.title)
        self._surface = surface
        log.info("Window created.")
        return surface

    def close(self) -> None:
        """Destroy the window and shut the video system down."""
        if self._surface is None:
            return
        self._surface = None
        pygame.display.quit()
        pygame.quit()
        log.info("Display closed.")

    def __enter__(self) -> "Display":
        self.open()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def fill(self, color: ColorLike) -> None:
        """Fill the whole window with one colour."""
        self.surface.fill(pygame.Color(*tuple(color)))

    def present(self) -> None:
        """Show what has been drawn since the last call."""
        self.surface  # raises when closed
        pygame.display.flip()

    def events(self) -> Iterator[pygame.event.Event]:
        """Yield the events waiting in the queue."""
        self.surface
        yield from pygame.event.get()