import pytest

from voxbox.linalg import Vec3
from voxbox.sandbox.pick import Ray, resolve


def instances(*coords):
    return [(i, c) for i, c in enumerate(coords)]


def test_straight_down_hits_top_face():
    ray = Ray(Vec3(0.5, 5.0, 0.5), Vec3(0.0, -1.0, 0.0))
    hit = resolve(ray, instances((0, 0, 0)))
    assert hit.coord == (0, 0, 0)
    assert hit.normal == (0, 1, 0)
    assert hit.distance == pytest.approx(4.0)


def test_nearest_block_wins():
    ray = Ray(Vec3(0.5, 5.0, 0.5), Vec3(0.0, -1.0, 0.0))
    hit = resolve(ray, instances((0, 0, 0), (0, 1, 0), (0, 3, 0)))
    assert hit.coord == (0, 3, 0)
    assert hit.distance == pytest.approx(1.0)


def test_side_face_normal():
    ray = Ray(Vec3(-3.0, 0.5, 0.5), Vec3(1.0, 0.0, 0.0))
    hit = resolve(ray, instances((0, 0, 0), (2, 0, 0)))
    assert hit.coord == (0, 0, 0)
    assert hit.normal == (-1, 0, 0)
    assert hit.distance == pytest.approx(3.0)


def test_negative_z_face():
    ray = Ray(Vec3(0.5, 0.5, 10.0), Vec3(0.0, 0.0, -1.0))
    hit = resolve(ray, instances((0, 0, -4)))
    assert hit.normal == (0, 0, 1)
    assert hit.distance == pytest.approx(13.0)


def test_miss_returns_none():
    ray = Ray(Vec3(0.5, 5.0, 0.5), Vec3(0.0, 1.0, 0.0))
    assert resolve(ray, instances((0, 0, 0))) is None


def test_parallel_ray_outside_slab_misses():
    ray = Ray(Vec3(5.0, 5.0, 0.5), Vec3(0.0, -1.0, 0.0))
    assert resolve(ray, instances((0, 0, 0))) is None


def test_empty_world():
    ray = Ray(Vec3(0.0, 0.0, 0.0), Vec3(0.0, 0.0, 1.0))
    assert resolve(ray, []) is None


def test_origin_inside_block_skips_it():
    ray = Ray(Vec3(0.5, 0.5, 0.5), Vec3(0.0, -1.0, 0.0))
    hit = resolve(ray, instances((0, 0, 0), (0, -2, 0)))
    assert hit.coord == (0, -2, 0)
    assert hit.normal == (0, 1, 0)
    assert hit.distance == pytest.approx(1.5)


def test_oblique_ray_enters_through_top():
    d = Vec3(1.0, -2.0, 0.0).norm()
    ray = Ray(Vec3(0.2, 3.0, 0.5), d)
    hit = resolve(ray, instances((1, 0, 0)))
    # Reaches y=1 at x=1.2, which is inside the block's x span.
    assert hit.coord == (1, 0, 0)
    assert hit.normal == (0, 1, 0)
    assert hit.distance == pytest.approx(Vec3(1.0, -2.0, 0.0).mag())


def test_normals_are_exact_integer_axes_for_oblique_rays():
    coords = [(x, y, z) for x in range(-2, 3) for y in range(-2, 1) for z in range(-2, 3)]
    ray = Ray(Vec3(0.3, 4.7, 0.9), Vec3(0.31, -1.0, -0.17).norm())
    hit = resolve(ray, instances(*coords))
    assert hit is not None
    assert all(type(c) is int for c in hit.normal)
    assert sorted(abs(c) for c in hit.normal) == [0, 0, 1]
