from __future__ import annotations

import logging
import random

from voxbox.linalg import Vec3

from . import config
from .animals import spawn_animals
from .camera import Camera
from .daynight import DayNightClock
from .instances import CubeInstances, InstanceLimitError
from .terrain import generate, populate, wave_height
from .world import VoxelWorld

logger = logging.getLogger(__name__)


class State:
    """Everything one sandbox session owns, passed explicitly to each system."""

    def __init__(self, world: VoxelWorld, camera: Camera, animals, clock: DayNightClock):
        self.world = world
        self.camera = camera
        self.animals = animals
        self.clock = clock
        self.lighting = clock.lighting()
        self.selected_type = config.DEFAULT_BLOCK


def new_state(
    size: int = config.WORLD_SIZE,
    seed: int | None = None,
    tree_chance: float = config.TREE_CHANCE,
    height_fn=wave_height,
    animal_count: int = config.ANIMAL_COUNT,
    capacity: int | None = config.MAX_INSTANCES,
) -> State:
    rng = random.Random(seed)
    world = VoxelWorld(CubeInstances(capacity))
    try:
        added = populate(world, generate(size, rng, tree_chance, height_fn))
    except InstanceLimitError as e:
        logger.warning("terrain truncated at %d blocks: %s", len(world), e)
        added = len(world)
    logger.info("generated %dx%d terrain: %d blocks (seed=%s)", size, size, added, seed)

    camera = Camera(Vec3.of(config.CAMERA_START))
    camera.look_at(Vec3.of(config.CAMERA_TARGET))
    animals = spawn_animals(world, rng, animal_count)
    return State(world, camera, animals, DayNightClock())
