from __future__ import annotations

from collections import namedtuple

import numpy as np

Ray = namedtuple("Ray", ["origin", "direction"])
# origin: Vec3
# direction: Vec3, unit length

Hit = namedtuple("Hit", ["coord", "normal", "distance"])
# coord: (x, y, z) cell that was hit
# normal: (dx, dy, dz) integer unit vector of the entry face
# distance: ray parameter of the entry point

_EPS = 1e-12


def resolve(ray: Ray, instances) -> Hit | None:
    """Nearest unit cube the ray enters, tested against every instance at once.

    `instances` is a sequence of (handle, coord) pairs. A cube only counts when
    it is entered at a strictly positive distance, so a ray starting inside a
    block passes through it. Equal distances resolve to the earliest instance.
    """
    coords = np.array([c for _, c in instances], dtype=np.int64).reshape(-1, 3)
    n = coords.shape[0]
    if n == 0:
        return None

    origin = np.array(ray.origin.to_tuple(), dtype=np.float64)
    direction = np.array(ray.direction.to_tuple(), dtype=np.float64)
    lo = coords.astype(np.float64)
    hi = lo + 1.0

    parallel = np.abs(direction) < _EPS
    safe_dir = np.where(parallel, 1.0, direction)
    t1 = (lo - origin) / safe_dir
    t2 = (hi - origin) / safe_dir
    t_enter = np.where(parallel, -np.inf, np.minimum(t1, t2))
    t_exit = np.where(parallel, np.inf, np.maximum(t1, t2))
    # A slab the ray runs parallel to must already contain the origin.
    outside = parallel & ((origin < lo) | (origin > hi))

    entry_axis = np.argmax(t_enter, axis=1)
    t_near = t_enter[np.arange(n), entry_axis]
    t_far = np.min(t_exit, axis=1)
    valid = ~np.any(outside, axis=1) & (t_near <= t_far) & (t_near > 0.0)
    if not np.any(valid):
        return None

    candidates = np.flatnonzero(valid)
    best = int(candidates[np.argmin(t_near[candidates])])
    axis = int(entry_axis[best])
    normal = [0, 0, 0]
    normal[axis] = -1 if direction[axis] > 0 else 1
    coord = tuple(int(c) for c in coords[best])
    return Hit(coord, tuple(normal), float(t_near[best]))
