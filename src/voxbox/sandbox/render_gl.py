from __future__ import annotations

from .gl_draw import apply_camera, end_scene, setup_perspective
from .primitives import GLPrimitives
from .render_common import animal_quads, block_quads

_prims: GLPrimitives | None = None


def draw_frame(width: int, height: int, world, animals, camera, lighting) -> None:
    # Real 3D quads with a depth buffer, so no sorting is needed here.
    global _prims
    if _prims is None:
        _prims = GLPrimitives()
    setup_perspective(camera, width, height)
    _prims.clear(lighting.background)
    apply_camera(camera)

    _prims.begin_quads()
    for corners, color in block_quads(world, camera.pos, lighting):
        _prims.quad(corners, color)
    for corners, color in animal_quads(animals, lighting):
        _prims.quad(corners, color)
    _prims.end_quads()
    end_scene()
