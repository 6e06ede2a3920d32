from __future__ import annotations

import logging
import math
import random

import noise

from . import config
from .coords import Coordinate

logger = logging.getLogger(__name__)


def wave_height(x: int, z: int) -> int:
    return int(math.floor(3 + abs(math.sin(x * 0.2) * 2 + math.cos(z * 0.2))))


def perlin_height(x: int, z: int) -> int:
    n = noise.pnoise2(
        x * config.NOISE_SCALE,
        z * config.NOISE_SCALE,
        octaves=config.NOISE_OCTAVES,
        persistence=config.NOISE_PERSISTENCE,
        lacunarity=config.NOISE_LACUNARITY,
        repeatx=config.NOISE_REPEAT,
        repeaty=config.NOISE_REPEAT,
        base=0,
    )
    return max(1, int(config.NOISE_HEIGHT_BASE + n * config.NOISE_HEIGHT_AMP))


HEIGHT_FUNCTIONS = {
    "waves": wave_height,
    "perlin": perlin_height,
}


def column_type(y: int, h: int) -> str:
    if y == h - 1:
        return "grass"
    if y < h - 3:
        return "stone"
    return "dirt"


def tree_at(x: int, z: int, ground_h: int, trunk_height: int) -> list[tuple[Coordinate, str]]:
    out = [((x, ground_h + t, z), "wood") for t in range(trunk_height)]
    top = ground_h + trunk_height
    reach = config.CANOPY_REACH
    for lx in range(-2, 3):
        for lz in range(-2, 3):
            # Diamond cut from the 5x5 square: only the corners drop out.
            if abs(lx) + abs(lz) < reach:
                out.append(((x + lx, top, z + lz), "leaves"))
    return out


def generate(
    size: int,
    rng: random.Random,
    tree_chance: float = config.TREE_CHANCE,
    height_fn=wave_height,
) -> list[tuple[Coordinate, str]]:
    """Lay out a size x size patch of rolling terrain with scattered trees.

    Heights depend only on position; `rng` is read only when deciding and
    sizing trees, column by column, so a seeded rng reproduces the output.
    """
    insertions: list[tuple[Coordinate, str]] = []
    trees = 0
    for x in range(size):
        for z in range(size):
            h = height_fn(x, z)
            for y in range(h):
                insertions.append(((x, y, z), column_type(y, h)))
            if rng.random() < tree_chance:
                trunk_height = config.TRUNK_MIN + int(rng.random() * 2)
                insertions.extend(tree_at(x, z, h, trunk_height))
                trees += 1
    logger.debug("terrain %dx%d: %d insertions, %d trees", size, size, len(insertions), trees)
    return insertions


def populate(world, insertions) -> int:
    added = 0
    for coord, block_type in insertions:
        if world.add_block(coord, block_type):
            added += 1
    return added
