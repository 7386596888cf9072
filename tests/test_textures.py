import os

os.environ.update({"SDL_VIDEODRIVER": "dummy", "SDL_AUDIODRIVER": "dummy"})

import pygame

from spritesteps.display import centered_position
from spritesteps.texture import Texture
from spritesteps.textures import draw_frame, main


def _write_bmp(path, size, color):
    surface = pygame.Surface(size)
    surface.fill(color)
    pygame.image.save(surface, str(path))
    return path


def _pixel(surface, pos):
    return tuple(surface.get_at(pos))[:3]


def test_draw_frame_centres_texture(tmp_path):
    texture = Texture()
    texture.load(_write_bmp(tmp_path / "img.bmp", (4, 2), (0, 0, 255)))
    target = pygame.Surface((10, 10))
    draw_frame(target, texture)
    x, y = (int(v) for v in centered_position(target.get_size(), (texture.width, texture.height)))
    assert _pixel(target, (x, y)) == (0, 0, 255)
    assert _pixel(target, (x + 3, y + 1)) == (0, 0, 255)
    assert _pixel(target, (0, 0)) == (255, 255, 255)


def test_draw_frame_empty_texture_is_white():
    target = pygame.Surface((5, 5))
    draw_frame(target, Texture())
    colours = {_pixel(target, (x, y)) for x in range(5) for y in range(5)}
    assert colours == {(255, 255, 255)}


def test_main_succeeds_with_image(tmp_path):
    path = _write_bmp(tmp_path / "img.bmp", (8, 8), (10, 10, 10))
    assert main(["--image", str(path), "--frames", "2"]) == 0


def test_main_reports_missing_media(tmp_path):
    assert main(["--image", str(tmp_path / "absent.png"), "--frames", "1"]) == 2