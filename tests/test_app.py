import pygame
import pytest

from blockfall.app import FALL_INTERVAL, EventTimer, key_from_pygame
from blockfall.game import Key


def test_timer_waits_for_interval():
    timer = EventTimer(FALL_INTERVAL)
    assert timer.triggered(FALL_INTERVAL / 2) is False
    assert timer.triggered(FALL_INTERVAL) is True
    assert timer.triggered(FALL_INTERVAL * 1.5) is False
    assert timer.triggered(FALL_INTERVAL * 2.25) is True


def test_timer_restarts_from_firing_time():
    timer = EventTimer(1.0)
    assert timer.triggered(5.0) is True
    assert timer.last_update == 5.0
    assert timer.triggered(5.5) is False
    assert timer.last_update == 5.0


@pytest.mark.parametrize(
    "code, key",
    [
        (pygame.K_LEFT, Key.LEFT),
        (pygame.K_RIGHT, Key.RIGHT),
        (pygame.K_DOWN, Key.DOWN),
        (pygame.K_UP, Key.UP),
        (pygame.K_a, Key.OTHER),
        (pygame.K_SPACE, Key.OTHER),
    ],
)
def test_key_from_pygame(code, key):
    assert key_from_pygame(code) is key


def test_no_key_maps_to_none():
    assert key_from_pygame(0) is None