"""Swap the image in the window according to the arrow key that was pressed."""

from __future__ import annotations

import logging
import os
from typing import Dict, Optional, Sequence, Union

import pygame

from spritesteps.basics import DEFAULT_ASSET_DIR, _parser, _run_window
from spritesteps.texture import Texture, TextureError
from spritesteps.textures import draw_frame

log = logging.getLogger(__name__)

WINDOW_TITLE = "Sprite Steps 03: Event Handling Example"
DEFAULT_IMAGE_NAME = "03img.png"

_KEY_IMAGES: Dict[int, str] = {
    pygame.K_UP: "03up.png",
    pygame.K_DOWN: "03down.png",
    pygame.K_LEFT: "03left.png",
    pygame.K_RIGHT: "03right.png",
}


def texture_for_key(key: int,
                    asset_dir: Union[str, os.PathLike] = DEFAULT_ASSET_DIR) -> Optional[str]:
    """Path of the image shown for an arrow key, or None for any other key."""
    name = _KEY_IMAGES.get(key)
    if name is None:
        return None
    return os.path.join(os.fspath(asset_dir), name)


def handle_key(texture: Texture, key: int,
               asset_dir: Union[str, os.PathLike] = DEFAULT_ASSET_DIR) -> bool:
    """Load the image for ``key`` into ``texture``.

    Returns False, leaving the texture untouched, when the key is not an
    arrow key. Raises TextureError when the image cannot be loaded.
    """
    path = texture_for_key(key, asset_dir)
    if path is None:
        log.error("Unsupported key pressed: %d", key)
        return False
    log.info("Arrow key pressed: %d", key)
    texture.load(path)
    return True


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the window; return 0, 1 when the window fails, 2 when an image fails."""
    args = _parser("Change the shown image with the arrow keys.",
                   asset_dir=True).parse_args(argv)
    texture = Texture()

    def load() -> None:
        try:
            texture.load(os.path.join(args.asset_dir, DEFAULT_IMAGE_NAME))
        except TextureError as exc:
            log.error("Could not load the default image: %s", exc)

    def on_event(event: pygame.event.Event) -> bool:
        return event.type == pygame.KEYDOWN and handle_key(texture, event.key, args.asset_dir)

    exit_code = _run_window(WINDOW_TITLE, lambda surface: draw_frame(surface, texture),
                            frames=args.frames, load=load, on_event=on_event,
                            draw_each_frame=False, draw_initial=True)
    texture.clear()
    return exit_code