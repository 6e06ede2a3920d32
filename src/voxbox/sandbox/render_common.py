from __future__ import annotations

import math

import numpy as np

from voxbox.linalg import Vec3

from . import config
from .coords import FACE_NORMALS, add_coords

# Corner offsets of each unit-cube face, keyed by outward normal.
_FACE_CORNERS = {
    (1, 0, 0): ((1, 0, 0), (1, 1, 0), (1, 1, 1), (1, 0, 1)),
    (-1, 0, 0): ((0, 0, 1), (0, 1, 1), (0, 1, 0), (0, 0, 0)),
    (0, 1, 0): ((0, 1, 0), (0, 1, 1), (1, 1, 1), (1, 1, 0)),
    (0, -1, 0): ((0, 0, 0), (1, 0, 0), (1, 0, 1), (0, 0, 1)),
    (0, 0, 1): ((1, 0, 1), (1, 1, 1), (0, 1, 1), (0, 0, 1)),
    (0, 0, -1): ((0, 0, 0), (0, 1, 0), (1, 1, 0), (1, 0, 0)),
}

_SUN_DIR = Vec3.of(config.SUN_POSITION).norm()


def instance_cell(inst) -> tuple[int, int, int]:
    c = inst.center
    return (math.floor(c.x), math.floor(c.y), math.floor(c.z))


def exposed_faces(world):
    """(instance, cell, normal) for every live cube face whose neighbour cell is empty."""
    out = []
    for _, inst in world.instances.live():
        cell = instance_cell(inst)
        for normal in FACE_NORMALS:
            if add_coords(cell, normal) not in world:
                out.append((inst, cell, normal))
    return out


def face_brightness(normal, lighting) -> float:
    lambert = max(0.0, _SUN_DIR.dot(Vec3.of(normal)))
    return min(1.0, 0.6 * lighting.ambient + 0.5 * lighting.sun * lambert)


def shade(color, brightness: float) -> tuple[int, int, int]:
    return tuple(max(0, min(255, int(c * brightness))) for c in color)


def block_quads(world, eye: Vec3, lighting):
    """World-space quads for the visible side of the live cube instances.

    Faces pointing away from the eye are skipped as well as buried ones.
    """
    quads = []
    for inst, (x, y, z), normal in exposed_faces(world):
        # Back-face test against the face plane.
        plane = (x + max(0, normal[0]), y + max(0, normal[1]), z + max(0, normal[2]))
        to_eye = (eye.x - plane[0], eye.y - plane[1], eye.z - plane[2])
        if to_eye[0] * normal[0] + to_eye[1] * normal[1] + to_eye[2] * normal[2] <= 0:
            continue
        color = shade(inst.color, face_brightness(normal, lighting))
        corners = [(x + ox, y + oy, z + oz) for ox, oy, oz in _FACE_CORNERS[normal]]
        quads.append((corners, color))
    return quads


def animal_quads(animals, lighting):
    sx, sy, sz = (s * 0.5 for s in config.ANIMAL_SIZE)
    quads = []
    for animal in animals:
        p = animal.pos
        lo = (p.x - sx, p.y - sy, p.z - sz)
        span = (2 * sx, 2 * sy, 2 * sz)
        for normal, corners in _FACE_CORNERS.items():
            color = shade(animal.color, face_brightness(normal, lighting))
            pts = [
                (lo[0] + ox * span[0], lo[1] + oy * span[1], lo[2] + oz * span[2])
                for ox, oy, oz in corners
            ]
            quads.append((pts, color))
    return quads


def project_quads(quads, camera, width: int, height: int, max_dist: float = config.FAR_CLIP):
    """Screen-space draw list sorted far to near for painter-style drawing.

    Items are (depth, [(sx, sy) * 4], color). Quads with any corner behind the
    near plane are dropped.
    """
    if not quads:
        return []
    pts = np.array([q[0] for q in quads], dtype=np.float64)
    eye = np.array(camera.pos.to_tuple(), dtype=np.float64)
    rot = camera.view_rotation().to_array()
    cam = (pts - eye) @ rot.T

    z = cam[:, :, 2]
    keep = np.all(z > config.NEAR_CLIP, axis=1)
    depth = z.mean(axis=1)
    keep &= depth < max_dist
    if not np.any(keep):
        return []

    f = camera.focal_length_px(width)
    sx = cam[:, :, 0] * f / np.where(keep[:, None], z, 1.0) + width / 2
    sy = -cam[:, :, 1] * f / np.where(keep[:, None], z, 1.0) + height / 2

    order = np.flatnonzero(keep)
    order = order[np.argsort(-depth[order], kind="stable")]
    return [
        (float(depth[i]), list(zip(sx[i].tolist(), sy[i].tolist())), quads[i][1])
        for i in order
    ]
