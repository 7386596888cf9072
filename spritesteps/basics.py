"""Show a bitmap scaled over a white window until the window is closed."""

from __future__ import annotations

import argparse
import itertools
import logging
import os
from typing import Callable, Optional, Sequence, Union

import pygame

from spritesteps.display import Display, DisplayError
from spritesteps.texture import WHITE, TextureError

log = logging.getLogger(__name__)

SCREEN_WIDTH = 640
SCREEN_HEIGHT = 480
WINDOW_TITLE = "Sprite Steps 01: Basics Example"
DEFAULT_ASSET_DIR = os.path.join("..", "assets")
DEFAULT_IMAGE = os.path.join(DEFAULT_ASSET_DIR, "01hello-world.bmp")
ERROR_DELAY = 3.0


def load_image(path: Union[str, os.PathLike]) -> pygame.Surface:
    """Load a bitmap file into a surface."""
    filename = os.fspath(path)
    try:
        image = pygame.image.load(filename)
    except (pygame.error, OSError) as exc:
        raise TextureError(f"could not load image {filename}: {exc}") from exc
    log.info("Image loaded from %s.", filename)
    return image


def _scaled(image: pygame.Surface, size) -> pygame.Surface:
    try:
        return pygame.transform.smoothscale(image, size)
    except ValueError:
        # Smooth scaling needs 24 or 32 bit pixels.
        return pygame.transform.scale(image, size)


def _clear_white(target: pygame.Surface) -> None:
    target.fill(pygame.Color(*WHITE))


def draw_frame(target: pygame.Surface, image: Optional[pygame.Surface]) -> None:
    """Fill ``target`` white and stretch ``image`` over all of it."""
    _clear_white(target)
    if image is not None:
        target.blit(_scaled(image, target.get_size()), (0, 0))


def _parser(description: str, *, image: Optional[str] = None,
            asset_dir: bool = False, error_delay: bool = False) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=description)
    if image is not None:
        parser.add_argument("--image", default=image, help="image to show")
    if asset_dir:
        parser.add_argument("--asset-dir", default=DEFAULT_ASSET_DIR,
                            help="directory holding the images")
    parser.add_argument("--frames", type=int, default=None,
                        help="stop after this many frames")
    if error_delay:
        parser.add_argument("--error-delay", type=float, default=ERROR_DELAY,
                            help="seconds to wait after an error before exiting")
    return parser


def _pause(seconds: float) -> None:
    if seconds > 0:
        pygame.time.wait(int(seconds * 1000))


def _run_window(title: str, draw: Callable[[pygame.Surface], None], *,
                frames: Optional[int] = None,
                load: Optional[Callable[[], None]] = None,
                on_event: Optional[Callable[[pygame.event.Event], bool]] = None,
                draw_each_frame: bool = True,
                draw_initial: bool = False,
                stop_on_load_error: bool = False,
                error_delay: float = 0.0) -> int:
    """Open a window and run its event loop until it is closed.

    Returns 0, 1 when the window cannot be opened, 2 when media fails to load.
    ``on_event`` returns whether the window must be redrawn.
    """
    display = Display(title, SCREEN_WIDTH, SCREEN_HEIGHT)
    try:
        display.open()
    except DisplayError as exc:
        log.error("Initialization failed: %s", exc)
        _pause(error_delay)
        return 1

    exit_code = 0
    with display:
        def redraw() -> None:
            draw(display.surface)
            display.present()

        if load is not None:
            try:
                load()
            except TextureError as exc:
                log.error("Media availability check failed: %s", exc)
                exit_code = 2
                if stop_on_load_error:
                    _pause(error_delay)
                    return exit_code
        if draw_initial:
            redraw()

        for frame in itertools.count(1):
            running = True
            for event in display.events():
                if event.type == pygame.QUIT:
                    running = False
                    continue
                if on_event is None:
                    continue
                try:
                    changed = on_event(event)
                except TextureError as exc:
                    log.error("Media availability check failed: %s", exc)
                    exit_code = 2
                    changed = True
                if changed:
                    redraw()
            if draw_each_frame:
                redraw()
            if not running or (frames is not None and frame >= frames):
                break
    return exit_code


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the window; return 0, 1 when the window fails, 2 when the image fails."""
    args = _parser("Show a bitmap in a window.", image=DEFAULT_IMAGE).parse_args(argv)
    image: Optional[pygame.Surface] = None

    def load() -> None:
        nonlocal image
        image = load_image(args.image)

    return _run_window(WINDOW_TITLE, lambda surface: draw_frame(surface, image),
                       frames=args.frames, load=load)