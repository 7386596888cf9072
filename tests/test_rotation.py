import pygame
import pytest

from spritesteps.rotation import RotationState, draw_frame, main
from spritesteps.texture import FlipMode, Texture

RED = (255, 0, 0)
BLUE = (0, 0, 255)
WHITE = (255, 255, 255)


@pytest.fixture
def arrow_path(tmp_path):
    image = pygame.Surface((100, 50))
    image.fill(RED, pygame.Rect(0, 0, 50, 50))
    image.fill(BLUE, pygame.Rect(50, 0, 50, 50))
    path = tmp_path / "arrow.bmp"
    pygame.image.save(image, str(path))
    return path


@pytest.fixture
def arrow(arrow_path):
    texture = Texture()
    texture.load(arrow_path)
    return texture


def _pixel(surface, x, y):
    return tuple(surface.get_at((x, y)))[:3]


def test_initial_state():
    state = RotationState()
    assert state.degrees == 0.0
    assert state.flip is FlipMode.NONE


def test_left_turns_back_thirty_degrees():
    state = RotationState()
    state.handle_key(pygame.K_LEFT)
    assert state.degrees == -30.0


def test_left_then_right_returns_to_start():
    state = RotationState()
    state.handle_key(pygame.K_RIGHT)
    state.handle_key(pygame.K_LEFT)
    assert state.degrees == 0.0


def test_up_and_down_set_flip():
    state = RotationState()
    state.handle_key(pygame.K_UP)
    assert state.flip is FlipMode.VERTICAL
    state.handle_key(pygame.K_DOWN)
    assert state.flip is FlipMode.HORIZONTAL


def test_other_key_resets():
    state = RotationState(degrees=90.0, flip=FlipMode.VERTICAL)
    state.handle_key(pygame.K_a)
    assert state == RotationState()


def test_draw_frame_centres_unrotated(arrow):
    target = pygame.Surface((640, 480))
    draw_frame(target, arrow, RotationState())
    assert _pixel(target, 280, 240) == RED
    assert _pixel(target, 360, 240) == BLUE
    assert _pixel(target, 0, 0) == WHITE


def test_draw_frame_horizontal_flip_swaps_halves(arrow):
    target = pygame.Surface((640, 480))
    draw_frame(target, arrow, RotationState(flip=FlipMode.HORIZONTAL))
    assert _pixel(target, 280, 240) == BLUE
    assert _pixel(target, 360, 240) == RED


def test_draw_frame_vertical_flip_keeps_halves(arrow):
    target = pygame.Surface((640, 480))
    draw_frame(target, arrow, RotationState(flip=FlipMode.VERTICAL))
    assert _pixel(target, 280, 240) == RED
    assert _pixel(target, 360, 240) == BLUE


def test_draw_frame_half_turn_swaps_halves(arrow):
    target = pygame.Surface((640, 480))
    draw_frame(target, arrow, RotationState(degrees=180.0))
    assert _pixel(target, 280, 240) == BLUE
    assert _pixel(target, 360, 240) == RED


def test_draw_frame_without_texture_only_clears():
    target = pygame.Surface((64, 48))
    target.fill(RED)
    draw_frame(target, Texture(), RotationState())
    assert _pixel(target, 10, 10) == WHITE


def test_main_reports_missing_image(tmp_path, monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    missing = tmp_path / "missing.png"
    assert main(["--image", str(missing), "--error-delay", "0"]) == 2


def test_main_runs_frames(arrow_path, monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    assert main(["--image", str(arrow_path), "--frames", "2", "--error-delay", "0"]) == 0