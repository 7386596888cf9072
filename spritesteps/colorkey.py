"""Draw a sprite over a background, making its cyan pixels transparent after a key press."""

from __future__ import annotations

import logging
import os
from typing import Optional, Sequence, Tuple, Union

import pygame

from spritesteps.basics import DEFAULT_ASSET_DIR, _clear_white, _parser, _run_window
from spritesteps.display import centered_position
from spritesteps.texture import CYAN, Texture, TextureError

log = logging.getLogger(__name__)

WINDOW_TITLE = "Sprite Steps 04: Color Keying Example"

BACKGROUND_PLAIN = "04background0.png"
BACKGROUND_KEYED = "04background1.png"
SPRITE_IMAGE = "04sprite.png"


def media_paths(remove_background: bool,
                asset_dir: Union[str, os.PathLike] = DEFAULT_ASSET_DIR) -> Tuple[str, str]:
    """Paths of the background and the sprite image for the given mode."""
    base = os.fspath(asset_dir)
    background = BACKGROUND_KEYED if remove_background else BACKGROUND_PLAIN
    return os.path.join(base, background), os.path.join(base, SPRITE_IMAGE)


def load_media(background: Texture, sprite: Texture, remove_background: bool,
               asset_dir: Union[str, os.PathLike] = DEFAULT_ASSET_DIR) -> None:
    """Load both images; cyan becomes transparent when ``remove_background`` is set.

    Both loads are attempted; a TextureError naming every failure is raised
    afterwards if any of them failed.
    """
    color_key = CYAN if remove_background else None
    failures = []
    for texture, path in zip((background, sprite), media_paths(remove_background, asset_dir)):
        try:
            texture.load(path, color_key)
        except TextureError as exc:
            log.error("%s", exc)
            failures.append(str(exc))
    if failures:
        raise TextureError("; ".join(failures))


def draw_frame(target: pygame.Surface, background: Texture, sprite: Texture) -> None:
    """Fill white, draw the background at the origin and the sprite centred."""
    _clear_white(target)
    if background.is_loaded:
        background.render(target, 0, 0)
    if sprite.is_loaded:
        x, y = centered_position(target.get_size(), (sprite.width, sprite.height))
        sprite.render(target, x, y)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the window; return 0, 1 when the window fails, 2 when an image fails."""
    args = _parser("Remove a sprite's background on a key press.",
                   asset_dir=True).parse_args(argv)
    background = Texture()
    sprite = Texture()
    remove_background = False

    def on_event(event: pygame.event.Event) -> bool:
        nonlocal remove_background
        if event.type == pygame.KEYDOWN:
            remove_background = True
        load_media(background, sprite, remove_background, args.asset_dir)
        return True

    exit_code = _run_window(WINDOW_TITLE,
                            lambda surface: draw_frame(surface, background, sprite),
                            frames=args.frames, on_event=on_event, draw_each_frame=False)
    background.clear()
    sprite.clear()
    return exit_code