from __future__ import annotations

Coordinate = tuple[int, int, int]

# Bits per axis in a packed block key; axes are biased so negatives pack too.
KEY_BITS = 21
_KEY_BIAS = 1 << (KEY_BITS - 1)
_KEY_MASK = (1 << KEY_BITS) - 1

FACE_NORMALS: tuple[Coordinate, ...] = (
    (1, 0, 0),
    (-1, 0, 0),
    (0, 1, 0),
    (0, -1, 0),
    (0, 0, 1),
    (0, 0, -1),
)


def block_key(coord: Coordinate) -> int:
    """Pack a cell coordinate into one int, x | z << 21 | y << 42."""
    x, y, z = coord
    bx = int(x) + _KEY_BIAS
    by = int(y) + _KEY_BIAS
    bz = int(z) + _KEY_BIAS
    if not (0 <= bx <= _KEY_MASK and 0 <= by <= _KEY_MASK and 0 <= bz <= _KEY_MASK):
        raise ValueError(f"coordinate out of key range: {coord}")
    return bx | (bz << KEY_BITS) | (by << (2 * KEY_BITS))


def add_coords(a: Coordinate, b: Coordinate) -> Coordinate:
    return (a[0] + b[0], a[1] + b[1], a[2] + b[2])

