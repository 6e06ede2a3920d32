from __future__ import annotations

import math

import numpy as np
from OpenGL.GL import (
    GL_DEPTH_TEST,
    GL_MODELVIEW,
    GL_PROJECTION,
    glDisable,
    glEnable,
    glLoadIdentity,
    glLoadMatrixf,
    glMatrixMode,
    glViewport,
)
from OpenGL.GLU import gluPerspective

from . import config


def vertical_fov_deg(fov_deg: float, width: int, height: int) -> float:
    # Camera FOV is horizontal; GLU wants the vertical angle.
    half_h = math.atan(math.tan(math.radians(fov_deg) * 0.5) * height / max(1, width))
    return math.degrees(half_h * 2.0)


def setup_perspective(camera, width: int, height: int) -> None:
    glViewport(0, 0, width, height)
    glMatrixMode(GL_PROJECTION)
    glLoadIdentity()
    gluPerspective(
        vertical_fov_deg(camera.fov, width, height),
        width / max(1, height),
        config.NEAR_CLIP,
        config.FAR_CLIP,
    )
    glMatrixMode(GL_MODELVIEW)
    glEnable(GL_DEPTH_TEST)


def view_matrix(camera) -> np.ndarray:
    """Row-major 4x4 world->eye transform in GL conventions (looking down -Z)."""
    flip = np.diag([1.0, 1.0, -1.0])
    rot = flip @ camera.view_rotation().to_array()
    eye = np.array(camera.pos.to_tuple(), dtype=np.float64)
    m = np.identity(4)
    m[:3, :3] = rot
    m[:3, 3] = -(rot @ eye)
    return m


def apply_camera(camera) -> None:
    glMatrixMode(GL_MODELVIEW)
    # GL reads matrices column-major.
    glLoadMatrixf(np.ascontiguousarray(view_matrix(camera).T, dtype=np.float32))


def end_scene() -> None:
    glMatrixMode(GL_MODELVIEW)
    glLoadIdentity()
    glDisable(GL_DEPTH_TEST)
