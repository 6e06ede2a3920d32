from __future__ import annotations

import pygame

from .primitives import SoftPrimitives
from .render_common import animal_quads, block_quads, project_quads

_prims: SoftPrimitives | None = None


def draw_frame(render_surf: pygame.Surface, world, animals, camera, lighting) -> None:
    global _prims
    if _prims is None or _prims.surface is not render_surf:
        _prims = SoftPrimitives(render_surf)
    w, h = render_surf.get_size()

    quads = block_quads(world, camera.pos, lighting) + animal_quads(animals, lighting)
    _prims.clear(lighting.background)
    for _, points, color in project_quads(quads, camera, w, h):
        _prims.polygon(points, color)
