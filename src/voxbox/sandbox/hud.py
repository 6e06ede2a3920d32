from __future__ import annotations

import math

import pygame


def clock_label(time: float) -> str:
    # Phase 0 is sunrise-ish: brightness crosses 0.5 on the way up.
    hours = (6.0 + (time % math.tau) / math.tau * 24.0) % 24.0
    return f"{int(hours):02d}:{int((hours % 1) * 60):02d}"


def status_line(selected: str, fps: float, time: float, blocks: int) -> str:
    return f"block: {selected}  |  {clock_label(time)}  |  {blocks} blocks  |  {fps:.0f} fps"


def draw_status(prims, selected: str, fps: float, time: float, blocks: int) -> None:
    msg = status_line(selected, fps, time, blocks)
    prims.text(9, 9, msg, (0, 0, 0))
    prims.text(8, 8, msg, (255, 255, 255))


def set_caption(selected: str, fps: float, time: float, blocks: int) -> None:
    pygame.display.set_caption(f"voxbox - {status_line(selected, fps, time, blocks)}")
