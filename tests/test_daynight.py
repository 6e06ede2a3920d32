import math

import pytest

from voxbox.sandbox import config
from voxbox.sandbox.daynight import DayNightClock, lerp_color


def test_lerp_color_endpoints():
    assert lerp_color((0, 0, 0), (100, 200, 50), 0.0) == (0, 0, 0)
    assert lerp_color((0, 0, 0), (100, 200, 50), 1.0) == (100, 200, 50)
    assert lerp_color((0, 0, 0), (100, 200, 50), 2.0) == (100, 200, 50)


def test_noon_is_full_brightness():
    clock = DayNightClock(time=math.pi / 2)
    light = clock.lighting()
    assert light.ambient == pytest.approx(1.0)
    assert light.sun == pytest.approx(1.0)
    assert light.background == config.DAY_COLOR


def test_midnight_is_dark():
    clock = DayNightClock(time=-math.pi / 2)
    light = clock.lighting()
    assert light.ambient == pytest.approx(config.AMBIENT_BASE)
    assert light.sun == pytest.approx(config.SUN_BASE)
    assert light.background == config.NIGHT_COLOR


def test_tick_accumulates_scaled_time():
    clock = DayNightClock(rate=0.5)
    clock.tick(1.0)
    clock.tick(3.0)
    assert clock.time == pytest.approx(2.0)


def test_negative_dt_is_ignored():
    clock = DayNightClock()
    clock.tick(-1.0)
    assert clock.time == 0.0


def test_brightness_stays_in_unit_range():
    clock = DayNightClock(rate=1.0)
    for _ in range(100):
        clock.tick(0.37)
        assert 0.0 <= clock.brightness() <= 1.0
