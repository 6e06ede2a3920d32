from __future__ import annotations

import math
import random

from voxbox.linalg import Vec3

from . import config


class Animal:
    def __init__(self, pos: Vec3, color, rng: random.Random, speed: float = config.ANIMAL_SPEED):
        self.pos = pos
        self.color = color
        self.rng = rng
        self.speed = speed
        self.heading = Vec3(1.0, 0.0, 0.0)
        self.random_heading()

    @classmethod
    def spawn(cls, x: int, z: int, world, rng: random.Random, color=(255, 255, 170)) -> "Animal":
        ground = world.surface_height(x, z, config.ANIMAL_SPAWN_CEILING)
        y = config.ANIMAL_DEFAULT_Y if ground is None else ground + 1
        return cls(Vec3(x + 0.5, y + config.ANIMAL_SIZE[1], z + 0.5), color, rng)

    def random_heading(self) -> None:
        a = self.rng.random() * math.tau
        self.heading = Vec3(math.cos(a), 0.0, math.sin(a))

    def tick(self, dt: float) -> None:
        self.pos = self.pos + self.heading * (self.speed * dt)
        if self.rng.random() < config.ANIMAL_TURN_CHANCE:
            self.random_heading()


def spawn_animals(world, rng: random.Random, count: int = config.ANIMAL_COUNT, lo: int = 2, span: int = 24):
    animals = []
    for _ in range(count):
        x = rng.randrange(span) + lo
        z = rng.randrange(span) + lo
        color = config.hex_to_rgb(config.ANIMAL_BASE_COLOR + rng.randrange(config.ANIMAL_TINT_SPAN))
        animals.append(Animal.spawn(x, z, world, rng, color))
    return animals


def update_animals(animals, dt: float) -> None:
    for animal in animals:
        animal.tick(dt)
