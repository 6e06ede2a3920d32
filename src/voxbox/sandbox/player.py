from __future__ import annotations

import math

import pygame

from . import config


def _axis(keys, plus, minus) -> float:
    return float(bool(keys[plus])) - float(bool(keys[minus]))


def _move_vector(keys, yaw: float) -> tuple[float, float, float]:
    forward_input = _axis(keys, pygame.K_w, pygame.K_s)
    right_input = _axis(keys, pygame.K_d, pygame.K_a)
    vertical_input = float(bool(keys[pygame.K_SPACE]))
    if keys[pygame.K_LSHIFT] or keys[pygame.K_RSHIFT]:
        vertical_input -= 1.0

    fx, fz = math.sin(yaw), math.cos(yaw)
    # Right of (fx, fz) on the ground plane is (fz, -fx).
    move = (
        forward_input * fx + right_input * fz,
        vertical_input,
        forward_input * fz - right_input * fx,
    )
    mag = math.sqrt(move[0] ** 2 + move[1] ** 2 + move[2] ** 2)
    if mag > 0:
        move = (move[0] / mag, move[1] / mag, move[2] / mag)
    return move


def update(camera, dt: float) -> None:
    """Fly-camera controls; the mouse stays free for picking blocks."""
    keys = pygame.key.get_pressed()
    turn = config.TURN_SPEED * dt
    camera.yaw += _axis(keys, pygame.K_RIGHT, pygame.K_LEFT) * turn
    camera.pitch += _axis(keys, pygame.K_UP, pygame.K_DOWN) * turn
    camera.pitch = max(
        -math.pi / 2 + 0.01,
        min(math.pi / 2 - 0.01, camera.pitch),
    )

    speed = config.SPEED
    if keys[pygame.K_LCTRL] or keys[pygame.K_RCTRL]:
        speed *= config.FAST_MOVE_MULT
    mx, my, mz = _move_vector(keys, camera.yaw)
    camera.pos.x += mx * speed * dt
    camera.pos.y += my * speed * dt
    camera.pos.z += mz * speed * dt
