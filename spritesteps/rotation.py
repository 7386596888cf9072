"""Turn and mirror an arrow image with the arrow keys."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional, Sequence

import pygame

from spritesteps.basics import DEFAULT_ASSET_DIR, _clear_white, _parser, _run_window
from spritesteps.display import centered_position
from spritesteps.texture import WHITE, FlipMode, Texture

WINDOW_TITLE = "Sprite Steps 06: Rotation and Flipping Example"
DEFAULT_IMAGE = os.path.join(DEFAULT_ASSET_DIR, "06arrow.png")
ROTATION_STEP = 30.0


@dataclass
class RotationState:
    """Current angle in degrees, clockwise, and mirroring of the image."""

    degrees: float = 0.0
    flip: FlipMode = FlipMode.NONE

    def handle_key(self, key: int) -> None:
        """Left and right turn by 30 degrees, up and down mirror, any other key resets."""
        if key == pygame.K_LEFT:
            self.degrees -= ROTATION_STEP
        elif key == pygame.K_RIGHT:
            self.degrees += ROTATION_STEP
        elif key == pygame.K_UP:
            self.flip = FlipMode.VERTICAL
        elif key == pygame.K_DOWN:
            self.flip = FlipMode.HORIZONTAL
        else:
            self.degrees = 0.0
            self.flip = FlipMode.NONE


def draw_frame(target: pygame.Surface, texture: Texture, state: RotationState) -> None:
    """Fill ``target`` white and draw ``texture`` centred, turned and mirrored by ``state``."""
    _clear_white(target)
    if texture.is_loaded:
        x, y = centered_position(target.get_size(), (texture.width, texture.height))
        texture.render_rotated(target, x, y, state.degrees, state.flip)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the window; return 0, 1 when the window fails, 2 when the image fails."""
    args = _parser("Rotate and flip an image with the arrow keys.", image=DEFAULT_IMAGE,
                   error_delay=True).parse_args(argv)
    texture = Texture()
    state = RotationState()

    def on_event(event: pygame.event.Event) -> bool:
        if event.type == pygame.KEYDOWN:
            state.handle_key(event.key)
        return False

    exit_code = _run_window(WINDOW_TITLE,
                            lambda surface: draw_frame(surface, texture, state),
                            frames=args.frames, load=lambda: texture.load(args.image, WHITE),
                            on_event=on_event, stop_on_load_error=True,
                            error_delay=args.error_delay)
    texture.clear()
    return exit_code