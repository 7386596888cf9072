"""Show an image centred on a white window until the window is closed."""

from __future__ import annotations

import os
from typing import Optional, Sequence

import pygame

from spritesteps.basics import DEFAULT_ASSET_DIR, _clear_white, _parser, _run_window
from spritesteps.display import centered_position
from spritesteps.texture import Texture

WINDOW_TITLE = "Sprite Steps 02: Textures and Extension Libraries Example"
DEFAULT_IMAGE = os.path.join(DEFAULT_ASSET_DIR, "02img.png")


def draw_frame(target: pygame.Surface, texture: Texture) -> None:
    """Fill ``target`` white and draw ``texture`` at its centre."""
    _clear_white(target)
    if texture.is_loaded:
        x, y = centered_position(target.get_size(), (texture.width, texture.height))
        texture.render(target, x, y)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the window; return 0, 1 when the window fails, 2 when the image fails."""
    args = _parser("Show an image centred in a window.", image=DEFAULT_IMAGE).parse_args(argv)
    texture = Texture()
    exit_code = _run_window(WINDOW_TITLE, lambda surface: draw_frame(surface, texture),
                            frames=args.frames, load=lambda: texture.load(args.image))
    texture.clear()
    return exit_code