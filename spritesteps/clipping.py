"""Draw four corners of a sprite sheet, each once at its size and once stretched."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Tuple

import pygame

from spritesteps.basics import (
    DEFAULT_ASSET_DIR,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    _clear_white,
    _parser,
    _run_window,
)
from spritesteps.texture import WHITE, Texture

WINDOW_TITLE = "Sprite Steps 05: Clipping and Stretching Example"
DEFAULT_IMAGE = os.path.join(DEFAULT_ASSET_DIR, "05dots.png")
SPRITE_SIZE = 100.0


@dataclass(frozen=True)
class SpriteDraw:
    """One piece of the sheet and where to draw it.

    ``clip`` is the (x, y, w, h) area of the sheet. When ``width`` and
    ``height`` are set the piece is stretched to that size, otherwise it is
    drawn at the size of the clip.
    """

    clip: Tuple[float, float, float, float]
    x: float
    y: float
    width: Optional[float] = None
    height: Optional[float] = None

    @property
    def stretched(self) -> bool:
        """Whether the piece is drawn at a size of its own."""
        return self.width is not None and self.height is not None

    @property
    def size(self) -> Tuple[float, float]:
        """Size of the drawn piece on the screen."""
        if self.stretched:
            return (self.width, self.height)
        return (self.clip[2], self.clip[3])


def sprite_layout(screen_width: float, screen_height: float,
                  sprite_size: float = SPRITE_SIZE) -> List[SpriteDraw]:
    """The eight draws: each corner sprite plain in a screen corner, then stretched beside it."""
    stretch_w = sprite_size * 0.5
    stretch_h = sprite_size * 1.0
    draws: List[SpriteDraw] = []
    for bottom in (False, True):
        for right in (False, True):
            clip = (sprite_size if right else 0.0, sprite_size if bottom else 0.0,
                    sprite_size, sprite_size)
            plain_x = screen_width - sprite_size if right else 0.0
            plain_y = screen_height - sprite_size if bottom else 0.0
            draws.append(SpriteDraw(clip, plain_x, plain_y))

            stretch_x = screen_width - stretch_w if right else 0.0
            stretch_y = screen_height - 2 * stretch_h if bottom else stretch_h
            draws.append(SpriteDraw(clip, stretch_x, stretch_y, stretch_w, stretch_h))
    return draws


def draw_layout(target: pygame.Surface, texture: Texture,
                layout: Iterable[SpriteDraw]) -> None:
    """Fill ``target`` white and draw every piece of ``layout`` from ``texture``."""
    _clear_white(target)
    if not texture.is_loaded:
        return
    for draw in layout:
        if draw.stretched:
            texture.render_stretched(target, draw.x, draw.y, draw.width, draw.height, draw.clip)
        else:
            texture.render(target, draw.x, draw.y, draw.clip)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the window; return 0, 1 when the window fails, 2 when the image fails."""
    args = _parser("Clip and stretch pieces of a sprite sheet.", image=DEFAULT_IMAGE,
                   error_delay=True).parse_args(argv)
    texture = Texture()
    layout = sprite_layout(SCREEN_WIDTH, SCREEN_HEIGHT, SPRITE_SIZE)
    exit_code = _run_window(WINDOW_TITLE,
                            lambda surface: draw_layout(surface, texture, layout),
                            frames=args.frames, load=lambda: texture.load(args.image, WHITE),
                            stop_on_load_error=True, error_delay=args.error_delay)
    texture.clear()
    return exit_code