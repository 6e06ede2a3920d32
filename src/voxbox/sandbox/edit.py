from __future__ import annotations

import logging
from collections import namedtuple

from . import config
from .coords import add_coords
from .pick import Hit, resolve

logger = logging.getLogger(__name__)

PointerEvent = namedtuple("PointerEvent", ["screen_x", "screen_y", "button"])
# screen_x, screen_y: pixels in a viewport of the size passed alongside
# button: pygame mouse button id


def on_pointer_event(
    event: PointerEvent,
    camera,
    world,
    selected_type: str,
    viewport: tuple[int, int],
) -> Hit | None:
    """Break the block under the pointer, or place one against the face hit."""
    if event.button not in (config.BUTTON_PRIMARY, config.BUTTON_SECONDARY):
        return None
    width, height = viewport
    ray = camera.screen_ray(event.screen_x, event.screen_y, width, height)
    hit = resolve(ray, world.visible_instances())
    if hit is None:
        return None

    if event.button == config.BUTTON_PRIMARY:
        world.remove_block(hit.coord)
        logger.debug("removed block at %s", hit.coord)
    else:
        place = add_coords(hit.coord, hit.normal)
        if world.add_block(place, selected_type):
            logger.debug("placed %s at %s", selected_type, place)
    return hit
