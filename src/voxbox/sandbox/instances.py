from __future__ import annotations

import itertools
from collections import namedtuple

from . import config

CubeInstance = namedtuple("CubeInstance", ["center", "block_type", "color"])
# center: Vec3, middle of the unit cube
# color: (r, g, b), resolved material colour


class InstanceLimitError(RuntimeError):
    """The renderer could not hand out another cube instance."""


class CubeInstances:
    """Renderer-side registry of drawable unit cubes.

    The world asks for one handle per block and gives it back on removal; the
    renderers only ever read `live()`.
    """

    def __init__(self, capacity: int | None = None):
        self.capacity = capacity
        self._next_handle = itertools.count(1)
        self._live: dict[int, CubeInstance] = {}

    def acquire(self, center, block_type: str) -> int:
        if self.capacity is not None and len(self._live) >= self.capacity:
            raise InstanceLimitError(f"instance pool full ({self.capacity} cubes)")
        handle = next(self._next_handle)
        self._live[handle] = CubeInstance(center, block_type, config.material_color(block_type))
        return handle

    def release(self, handle: int) -> None:
        del self._live[handle]

    def update(self, handle: int, **fields) -> CubeInstance:
        """Replace the transform or material of a live instance."""
        inst = self._live[handle]._replace(**fields)
        self._live[handle] = inst
        return inst

    def get(self, handle: int) -> CubeInstance | None:
        return self._live.get(handle)

    def live(self):
        return self._live.items()

    def __len__(self) -> int:
        return len(self._live)
