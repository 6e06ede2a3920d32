import math
import random

import pytest

from voxbox.linalg import Vec3
from voxbox.sandbox import config
from voxbox.sandbox.animals import Animal, spawn_animals, update_animals
from voxbox.sandbox.instances import CubeInstances
from voxbox.sandbox.world import VoxelWorld


def column_world():
    world = VoxelWorld(CubeInstances())
    for y in range(4):
        world.add_block((3, y, 5), "dirt")
    return world


def test_spawn_stands_on_surface():
    animal = Animal.spawn(3, 5, column_world(), random.Random(0))
    assert animal.pos.x == 3.5
    assert animal.pos.z == 5.5
    assert animal.pos.y == pytest.approx(4 + config.ANIMAL_SIZE[1])


def test_spawn_on_empty_column_uses_default_height():
    animal = Animal.spawn(0, 0, column_world(), random.Random(0))
    assert animal.pos.y == pytest.approx(config.ANIMAL_DEFAULT_Y + config.ANIMAL_SIZE[1])


def test_heading_is_horizontal_unit():
    animal = Animal(Vec3(0.0, 1.0, 0.0), (255, 255, 255), random.Random(3))
    for _ in range(20):
        animal.random_heading()
        assert animal.heading.y == 0.0
        assert animal.heading.mag() == pytest.approx(1.0)


def test_tick_moves_at_fixed_speed():
    animal = Animal(Vec3(0.0, 1.0, 0.0), (255, 255, 255), random.Random(3), speed=2.0)
    start = animal.pos.clone()
    animal.tick(0.5)
    moved = animal.pos - start
    assert moved.y == 0.0
    assert math.hypot(moved.x, moved.z) == pytest.approx(1.0)


def test_spawn_animals_in_area():
    world = VoxelWorld(CubeInstances())
    animals = spawn_animals(world, random.Random(9), count=12)
    assert len(animals) == 12
    for a in animals:
        assert 2 <= a.pos.x < 26
        assert 2 <= a.pos.z < 26
    update_animals(animals, 0.1)


def test_animal_tints_stay_warm():
    animals = spawn_animals(VoxelWorld(CubeInstances()), random.Random(4), count=200)
    for a in animals:
        r, g, b = a.color
        assert r == 0xFF
        assert g >= 0xE0


def test_hex_to_rgb_wraps_instead_of_saturating():
    assert config.hex_to_rgb(0xFFE0BD) == (0xFF, 0xE0, 0xBD)
    assert config.hex_to_rgb(0x1000000 + 0x123456) == (0x12, 0x34, 0x56)
    assert config.hex_to_rgb(config.ANIMAL_BASE_COLOR + config.ANIMAL_TINT_SPAN - 1) == (255, 255, 255)
