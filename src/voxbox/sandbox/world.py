from __future__ import annotations

from collections import namedtuple

from voxbox.linalg import Vec3

from . import config
from .coords import Coordinate, block_key


Block = namedtuple("Block", ["coord", "block_type", "handle"])
# coord: (x, y, z) integer cell
# block_type: material id, e.g. "dirt"
# handle: opaque renderer instance handle


class VoxelWorld:
    """Sparse block grid keyed by packed cell coordinates.

    At most one block lives in a cell. Adding to an occupied cell and removing
    from an empty one are both no-ops. Every block owns exactly one renderer
    instance, acquired before the block is stored and released before it is
    dropped.
    """

    def __init__(self, instances):
        self.instances = instances
        self._blocks: dict[int, Block] = {}

    def add_block(self, coord: Coordinate, block_type: str = config.DEFAULT_BLOCK) -> bool:
        key = block_key(coord)
        if key in self._blocks:
            return False
        x, y, z = coord
        center = Vec3(x + 0.5, y + 0.5, z + 0.5)
        # May raise InstanceLimitError; nothing is stored in that case.
        handle = self.instances.acquire(center, block_type)
        self._blocks[key] = Block((int(x), int(y), int(z)), block_type, handle)
        return True

    def remove_block(self, coord: Coordinate) -> bool:
        key = block_key(coord)
        block = self._blocks.get(key)
        if block is None:
            return False
        self.instances.release(block.handle)
        del self._blocks[key]
        return True

    def get(self, coord: Coordinate) -> Block | None:
        return self._blocks.get(block_key(coord))

    def __contains__(self, coord) -> bool:
        return block_key(coord) in self._blocks

    def __len__(self) -> int:
        return len(self._blocks)

    def visible_instances(self) -> list[tuple[object, Coordinate]]:
        return [(b.handle, b.coord) for b in self._blocks.values()]

    def surface_height(self, x: int, z: int, ceiling: int) -> int | None:
        for y in range(ceiling, -1, -1):
            if block_key((x, y, z)) in self._blocks:
                return y
        return None
