"""Image textures that can be drawn onto pygame surfaces."""

from __future__ import annotations

import enum
import logging
import os
from typing import Optional, Sequence, Tuple, Union

import pygame

log = logging.getLogger(__name__)

ColorLike = Union[pygame.Color, Sequence[int]]
RectLike = Union[pygame.Rect, Sequence[float]]

WHITE: Tuple[int, int, int] = (0xFF, 0xFF, 0xFF)
CYAN: Tuple[int, int, int] = (0x00, 0xFF, 0xFF)


class TextureError(Exception):
    """Raised when a texture cannot be loaded or drawn."""


class FlipMode(enum.Flag):
    """Mirroring applied before a texture is rotated."""

    NONE = 0
    HORIZONTAL = 1
    VERTICAL = 2


def _as_rect(clip: RectLike) -> pygame.Rect:
    x, y, w, h = (round(value) for value in tuple(clip))
    return pygame.Rect(x, y, w, h)


class Texture:
    """An image loaded from disk, optionally with one colour made transparent."""

    def __init__(self) -> None:
        self._surface: Optional[pygame.Surface] = None

    @property
    def width(self) -> int:
        """Width of the loaded image in pixels, 0 when nothing is loaded."""
        return self._surface.get_width() if self._surface is not None else 0

    @property
    def height(self) -> int:
        """Height of the loaded image in pixels, 0 when nothing is loaded."""
        return self._surface.get_height() if self._surface is not None else 0

    @property
    def is_loaded(self) -> bool:
        """Whether an image is currently held."""
        return self._surface is not None

    def load(self, path: Union[str, os.PathLike], color_key: Optional[ColorLike] = None) -> None:
        """Load an image file, replacing any image held before.

        When ``color_key`` is given, pixels of exactly that RGB colour become
        transparent.
        """
        self.clear()
        filename = os.fspath(path)
        try:
            image = pygame.image.load(filename)
        except (pygame.error, OSError) as exc:
            raise TextureError(f"failed to load texture from {filename}: {exc}") from exc
        log.info("Texture loaded from %s.", filename)

        if color_key is not None:
            key = pygame.Color(*tuple(color_key)[:3])
            try:
                if image.get_flags() & pygame.SRCALPHA:
                    with pygame.PixelArray(image) as pixels:
                        pixels.replace(key, pygame.Color(0, 0, 0, 0))
                else:
                    image.set_colorkey(key)
            except pygame.error as exc:
                raise TextureError(f"failed to set color key for {filename}: {exc}") from exc

        self._surface = image
        log.info("Texture created with dimensions %dx%d.", self.width, self.height)

    def _require(self) -> pygame.Surface:
        if self._surface is None:
            raise TextureError("no texture loaded")
        return self._surface

    def _piece(self, clip: Optional[RectLike]) -> pygame.Surface:
        surface = self._require()
        if clip is None:
            return surface
        area = _as_rect(clip).clip(surface.get_rect())
        return surface.subsurface(area)

    def render(self, target: pygame.Surface, x: float, y: float,
               clip: Optional[RectLike] = None) -> pygame.Rect:
        """Draw the texture, or the ``clip`` part of it, at its own size."""
        surface = self._require()
        position = (round(x), round(y))
        if clip is None:
            return target.blit(surface, position)
        return target.blit(surface, position, area=_as_rect(clip))

    def render_stretched(self, target: pygame.Surface, x: float, y: float,
                         width: float, height: float,
                         clip: Optional[RectLike] = None) -> pygame.Rect:
        """Draw the texture, or the ``clip`` part of it, scaled to ``width`` x ``height``."""
        piece = self._piece(clip)
        size = (round(width), round(height))
        position = (round(x), round(y))
        if size[0] <= 0 or size[1] <= 0 or piece.get_width() == 0 or piece.get_height() == 0:
            return pygame.Rect(position, (0, 0))
        scaled = pygame.transform.scale(piece, size)
        return target.blit(scaled, position)

    def render_rotated(self, target: pygame.Surface, x: float, y: float,
                       degrees: float = 0.0, flip: FlipMode = FlipMode.NONE,
                       clip: Optional[RectLike] = None) -> pygame.Rect:
        """Draw the texture mirrored by ``flip`` and turned clockwise by ``degrees``.

        The image turns about the centre of the full texture placed at (x, y).
        """
        piece = self._piece(clip)
        canvas = pygame.Surface(piece.get_size(), pygame.SRCALPHA)
        canvas.blit(piece, (0, 0))
        if flip:
            canvas = pygame.transform.flip(
                canvas, bool(flip & FlipMode.HORIZONTAL), bool(flip & FlipMode.VERTICAL)
            )
        turned = pygame.transform.rotate(canvas, -degrees)
        center = (round(x + self.width / 2), round(y + self.height / 2))
        return target.blit(turned, turned.get_rect(center=center))

    def clear(self) -> None:
        """Drop the held image."""
        self._surface = None
        log.debug("Texture cleared.")