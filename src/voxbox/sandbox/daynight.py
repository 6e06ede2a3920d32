from __future__ import annotations

import math
from collections import namedtuple

from . import config

Lighting = namedtuple("Lighting", ["ambient", "sun", "background"])
# ambient, sun: light intensities
# background: (r, g, b) sky colour


def lerp_color(a, b, t: float) -> tuple[int, int, int]:
    t = max(0.0, min(1.0, t))
    return tuple(int(round(a[i] + (b[i] - a[i]) * t)) for i in range(3))


class DayNightClock:
    def __init__(self, rate: float = config.DAY_RATE, time: float = 0.0):
        self.rate = rate
        self.time = time

    def brightness(self) -> float:
        return (math.sin(self.time) + 1) / 2

    def lighting(self) -> Lighting:
        t = self.brightness()
        return Lighting(
            config.AMBIENT_BASE + config.AMBIENT_RANGE * t,
            config.SUN_BASE + config.SUN_RANGE * t,
            lerp_color(config.NIGHT_COLOR, config.DAY_COLOR, t),
        )

    def tick(self, dt: float) -> Lighting:
        self.time += max(0.0, dt) * self.rate
        return self.lighting()
