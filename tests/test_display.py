import os

os.environ.update({"SDL_VIDEODRIVER": "dummy", "SDL_AUDIODRIVER": "dummy"})

import pygame
import pytest

from spritesteps.display import Display, DisplayError, centered_position


def test_centered_position_invariant():
    screen = (640, 480)
    item = (100, 60)
    x, y = centered_position(screen, item)
    assert 2 * x + item[0] == screen[0]
    assert 2 * y + item[1] == screen[1]


def test_centered_position_same_size_is_origin():
    assert centered_position((50, 40), (50, 40)) == (0.0, 0.0)


def test_centered_position_mismatched_axes():
    with pytest.raises(ValueError):
        centered_position((1, 2), (1,))


def test_open_gives_surface_of_requested_size():
    with Display("window", 32, 24) as display:
        assert display.surface.get_size() == (32, 24)
        assert pygame.display.get_caption()[0] == "window"
        assert display.is_open


@pytest.mark.parametrize("action", [lambda d: d.surface, lambda d: d.present()])
def test_closed_display_raises(action):
    display = Display("window", 16, 16)
    with display:
        pass
    assert not display.is_open
    with pytest.raises(DisplayError):
        action(display)


def test_invalid_size_raises():
    with pytest.raises(DisplayError):
        Display("window", 0, 10).open()


def test_fill_colours_surface():
    with Display("window", 8, 8) as display:
        display.fill((10, 20, 30))
        assert tuple(display.surface.get_at((3, 3)))[:3] == (10, 20, 30)


def test_events_yield_posted_quit():
    with Display("window", 8, 8) as display:
        pygame.event.post(pygame.event.Event(pygame.QUIT))
        assert pygame.QUIT in [event.type for event in display.events()]