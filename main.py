"""
Live slime simulation: food drifts, slimes forage, jump, breed and evolve.

Keys:
  R reset, F spawn food, S spawn slime, +/- sim speed,
  TAB settings panel (UP/DOWN select, LEFT/RIGHT adjust), ESC quit.
"""

from __future__ import annotations
import argparse
import logging

import pygame

import config
from render.panel import SettingsPanel
from render.renderer import draw_world
from world.world import World

logger = logging.getLogger(__name__)


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Food and slime artificial-life simulation")
    parser.add_argument("--food", type=int, default=config.START_FOOD, help="initial food count")
    parser.add_argument("--slimes", type=int, default=config.START_SLIMES, help="initial slime count")
    parser.add_argument("--food-limit", type=int, default=config.FOOD_LIMIT, help="food population cap")
    parser.add_argument("--seed", type=int, default=None, help="random seed for a reproducible run")
    parser.add_argument("--sim-speed", type=int, default=config.SIM_SPEED, help="ticks per rendered frame")
    parser.add_argument("--headless", action="store_true", help="run without a window")
    parser.add_argument("--ticks", type=int, default=6000, help="ticks to run in headless mode")
    parser.add_argument("--stats-interval", type=int, default=600, help="headless stats period in ticks")
    parser.add_argument("--log-level", default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser.parse_args(argv)


def build_world(args: argparse.Namespace) -> World:
    world = World.create(
        config.SCREEN_W,
        config.SCREEN_H,
        initial_food=args.food,
        initial_slimes=args.slimes,
        food_limit=args.food_limit,
        seed=args.seed,
    )
    world.settings.sim_speed = args.sim_speed
    world.settings.validate()
    return world


def run_headless(world: World, ticks: int, stats_interval: int) -> dict:
    for _ in range(ticks):
        world.step()
        if stats_interval > 0 and world.tick % stats_interval == 0:
            s = world.stats()
            logger.info(
                "tick %d: slimes=%d food=%d births=%d deaths=%d evolutions=%d avg_energy=%.2f",
                s["tick"], s["slimes"], s["food"], s["births"], s["deaths"], s["evolutions"], s["avg_energy"],
            )
        if not world.slimes.population:
            logger.info("population extinct at tick %d", world.tick)
            break
    return world.stats()


def run_window(world: World) -> None:
    pygame.init()
    try:
        screen = pygame.display.set_mode((config.SCREEN_W, config.SCREEN_H), pygame.RESIZABLE)
        pygame.display.set_caption("slime_sim (Evolution simulation)")
        clock = pygame.time.Clock()
        panel = SettingsPanel(world.settings)

        running = True
        while running:
            clock.tick(config.FRAME_RATE)

            for e in pygame.event.get():
                if e.type == pygame.QUIT:
                    running = False
                elif e.type == pygame.VIDEORESIZE:
                    world.resize(e.w, e.h)
                elif e.type == pygame.KEYDOWN:
                    running = handle_key(e.key, world, panel)

            world.advance()

            mx, my = pygame.mouse.get_pos()
            hovered = world.inspect(mx, my) if pygame.mouse.get_focused() else None
            draw_world(screen, world.snapshot(), hovered=hovered, panel=panel)
            pygame.display.flip()
    finally:
        pygame.quit()


def handle_key(key: int, world: World, panel: SettingsPanel) -> bool:
    if key == pygame.K_ESCAPE:
        return False
    if key == pygame.K_r:
        world.reset()
    elif key == pygame.K_f:
        world.spawn_food()
    elif key == pygame.K_s:
        world.spawn_slime()
    elif key in (pygame.K_PLUS, pygame.K_EQUALS, pygame.K_KP_PLUS):
        world.settings.sim_speed = min(config.MAX_SIM_SPEED, world.settings.sim_speed + 1)
    elif key in (pygame.K_MINUS, pygame.K_KP_MINUS):
        world.settings.sim_speed = max(1, world.settings.sim_speed - 1)
    elif key == pygame.K_TAB:
        panel.toggle()
    elif panel.visible and key == pygame.K_UP:
        panel.select(-1)
    elif panel.visible and key == pygame.K_DOWN:
        panel.select(1)
    elif panel.visible and key == pygame.K_LEFT:
        panel.adjust(-1)
    elif panel.visible and key == pygame.K_RIGHT:
        panel.adjust(1)
    return True


def main(argv=None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(levelname)s:%(name)s:%(message)s",
    )
    world = build_world(args)
    if args.headless:
        run_headless(world, args.ticks, args.stats_interval)
    else:
        run_window(world)


if __name__ == "__main__":
    main()
