from __future__ import annotations

import argparse
import logging
import sys

import pygame

from . import config
from .animals import update_animals
from .edit import PointerEvent, on_pointer_event
from .hud import draw_status, set_caption
from .instances import InstanceLimitError
from .player import update as update_player
from .primitives import SoftPrimitives
from .state import new_state
from .terrain import HEIGHT_FUNCTIONS

logger = logging.getLogger("voxbox")

_HOTBAR_KEYS = {
    pygame.K_1: 0,
    pygame.K_2: 1,
    pygame.K_3: 2,
    pygame.K_4: 3,
    pygame.K_5: 4,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="voxbox", add_help=True)
    parser.add_argument(
        "--renderer",
        choices=("soft", "gl"),
        default="soft",
        help="Rendering backend (soft=pygame surface, gl=OpenGL).",
    )
    parser.add_argument(
        "--render-scale",
        type=int,
        choices=(1, 2, 4),
        default=2,
        help="Soft renderer scene scale divisor relative to window (1=full, 2=half, 4=quarter).",
    )
    parser.add_argument("--size", type=int, default=config.WORLD_SIZE, help="Terrain edge length in blocks.")
    parser.add_argument("--seed", type=int, default=None, help="Seed for trees and animals.")
    parser.add_argument("--tree-chance", type=float, default=config.TREE_CHANCE, help="Per-column tree probability.")
    parser.add_argument("--terrain", choices=sorted(HEIGHT_FUNCTIONS), default="waves", help="Height field.")
    parser.add_argument("--animals", type=int, default=config.ANIMAL_COUNT, help="Number of wandering animals.")
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
        help="Logging verbosity.",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    state = new_state(
        size=args.size,
        seed=args.seed,
        tree_chance=args.tree_chance,
        height_fn=HEIGHT_FUNCTIONS[args.terrain],
        animal_count=args.animals,
    )

    pygame.init()
    if args.renderer == "gl":
        pygame.display.set_mode((config.WIDTH, config.HEIGHT), pygame.OPENGL | pygame.DOUBLEBUF)
        from .render_gl import draw_frame

        screen = None
        render_surf = None
        hud_prims = None
    else:
        screen = pygame.display.set_mode((config.WIDTH, config.HEIGHT))
        render_w = max(1, config.WIDTH // args.render_scale)
        render_h = max(1, config.HEIGHT // args.render_scale)
        render_surf = pygame.Surface((render_w, render_h))
        hud_prims = SoftPrimitives(screen)
        from .render_soft import draw_frame

    logger.info("left click breaks, right click places, 1-5 pick a block, WASD/arrows move")
    clock = pygame.time.Clock()

    while True:
        dt = clock.get_time() / 1000.0
        state.lighting = state.clock.tick(dt)
        update_animals(state.animals, dt)
        update_player(state.camera, dt)

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                pygame.quit()
                sys.exit()
            elif event.type == pygame.KEYDOWN and event.key in (pygame.K_ESCAPE, pygame.K_q):
                pygame.quit()
                sys.exit()
            elif event.type == pygame.KEYDOWN and event.key in _HOTBAR_KEYS:
                state.selected_type = config.HOTBAR[_HOTBAR_KEYS[event.key]]
            elif event.type == pygame.MOUSEBUTTONDOWN:
                pointer = PointerEvent(event.pos[0], event.pos[1], event.button)
                try:
                    on_pointer_event(
                        pointer,
                        state.camera,
                        state.world,
                        state.selected_type,
                        (config.WIDTH, config.HEIGHT),
                    )
                except InstanceLimitError as e:
                    logger.warning("block not placed: %s", e)

        fps = clock.get_fps()
        blocks = len(state.world)
        if args.renderer == "gl":
            draw_frame(config.WIDTH, config.HEIGHT, state.world, state.animals, state.camera, state.lighting)
        else:
            draw_frame(render_surf, state.world, state.animals, state.camera, state.lighting)
            scaled = pygame.transform.scale(render_surf, (config.WIDTH, config.HEIGHT))
            screen.blit(scaled, (0, 0))
            draw_status(hud_prims, state.selected_type, fps, state.clock.time, blocks)
        set_caption(state.selected_type, fps, state.clock.time, blocks)
        pygame.display.flip()

        clock.tick(config.FPS_LIMIT)


if __name__ == "__main__":
    main()
