from __future__ import annotations

import logging

logger = logging.getLogger(__name__)

WIDTH = 960
HEIGHT = 640
FPS_LIMIT = 60
# Horizontal field of view in degrees.
FOV = 75.0
NEAR_CLIP = 0.1
FAR_CLIP = 1000.0

CAMERA_START = (10.0, 12.0, 20.0)
CAMERA_TARGET = (8.0, 4.0, 8.0)
SPEED = 8.0
FAST_MOVE_MULT = 3.0
TURN_SPEED = 1.8

# pygame mouse button ids.
BUTTON_PRIMARY = 1
BUTTON_SECONDARY = 3

WORLD_SIZE = 32
TREE_CHANCE = 0.03
TRUNK_MIN = 3
CANOPY_REACH = 4

NOISE_SCALE = 0.08
NOISE_OCTAVES = 3
NOISE_PERSISTENCE = 0.5
NOISE_LACUNARITY = 2.0
NOISE_REPEAT = 64
NOISE_HEIGHT_BASE = 4.0
NOISE_HEIGHT_AMP = 6.0

# Instance pool ceiling for the renderers; None means unbounded.
MAX_INSTANCES: int | None = 20000

DEFAULT_BLOCK = "dirt"
BLOCK_COLORS = {
    "dirt": (139, 90, 43),
    "grass": (46, 139, 87),
    "stone": (128, 128, 128),
    "wood": (139, 69, 19),
    "leaves": (34, 110, 50),
}
HOTBAR = ("dirt", "grass", "stone", "wood", "leaves")

ANIMAL_COUNT = 12
ANIMAL_SPEED = 1.2
ANIMAL_TURN_CHANCE = 0.01
ANIMAL_SPAWN_CEILING = 20
ANIMAL_DEFAULT_Y = 10
ANIMAL_SIZE = (0.8, 0.6, 1.2)
ANIMAL_BASE_COLOR = 0xFFE0BD
# Random tint added to the base; keeps the sum within 0xFFFFFF.
ANIMAL_TINT_SPAN = 0xFFFFFF - ANIMAL_BASE_COLOR + 1

DAY_RATE = 0.02
AMBIENT_BASE = 0.3
AMBIENT_RANGE = 0.7
SUN_BASE = 0.2
SUN_RANGE = 0.8
SUN_POSITION = (100.0, 100.0, 0.0)
NIGHT_COLOR = (10, 10, 42)
DAY_COLOR = (135, 206, 235)


def material_color(block_type: str) -> tuple[int, int, int]:
    color = BLOCK_COLORS.get(block_type)
    if color is None:
        logger.debug("unknown block type %r, using %s material", block_type, DEFAULT_BLOCK)
        return BLOCK_COLORS[DEFAULT_BLOCK]
    return color


def hex_to_rgb(value: int) -> tuple[int, int, int]:
    value = int(value) & 0xFFFFFF
    return ((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF)
