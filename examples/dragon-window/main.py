"""Dragon Window — pygame host for the dragon-curve compositor.

Draws four dragon curves growing out of the canvas center, one batch of
pixels per frame.

Controls:
  Space   Pause / Resume
  R       Restart (clears the canvas)
  Esc     Quit
"""
from __future__ import annotations

import argparse
import logging
import sys

import pygame

from dragon_curve import (
    PIXEL_FORMATS,
    SceneConfig,
    build_scene,
    default_instances,
    draw_test_card,
    staggered_instances,
)
from dragon_curve.pixels import packer_for

logger = logging.getLogger("dragon_window")

BG_PIXEL = b"\x00\x00\x00\xff"


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Dragon Window — dragon-curve pygame demo")
    p.add_argument("--width", type=int, default=1200, help="Canvas width (default: 1200)")
    p.add_argument("--height", type=int, default=800, help="Canvas height (default: 800)")
    p.add_argument("--segment-length", type=int, default=1,
                   help="Pixels per segment between turns (default: 1)")
    p.add_argument("--batch-size", type=int, default=1000,
                   help="Sub-steps per curve per frame (default: 1000)")
    p.add_argument("--fps", type=int, default=60, help="Frames per second (default: 60)")
    p.add_argument("--pixel-format", choices=sorted(PIXEL_FORMATS), default="RGBA",
                   help="Framebuffer channel order (default: RGBA)")
    p.add_argument("--stagger", type=int, default=0,
                   help="Sub-steps between successive curve starts (default: 0)")
    p.add_argument("--duration", type=int, default=0,
                   help="Pixels before each curve restarts mirrored, 0 = never")
    p.add_argument("--test-card", action="store_true",
                   help="Show the static calibration gradient instead of curves")
    p.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return p.parse_args()


def main() -> None:
    args = parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = SceneConfig(
        width=args.width,
        height=args.height,
        segment_length=args.segment_length,
        batch_size=args.batch_size,
        fps=args.fps,
        pixel_format=args.pixel_format,
    )
    if args.stagger or args.duration:
        instances = staggered_instances(config, args.stagger, args.duration)
    else:
        instances = default_instances(config)
    scene = build_scene(config, instances)
    framebuffer = scene.framebuffer
    framebuffer.clear(BG_PIXEL)
    if args.test_card:
        draw_test_card(framebuffer, packer_for(config.pixel_format))

    pygame.init()
    screen = pygame.display.set_mode((config.width, config.height))
    pygame.display.set_caption("dragon curve - ESC to exit")
    clock = pygame.time.Clock()

    def present(compositor, ctx) -> None:
        surface = pygame.image.frombuffer(
            framebuffer.data, (config.width, config.height), config.pixel_format
        )
        screen.blit(surface, (0, 0))
        pygame.display.flip()

    scene.engine.on_present(present)
    if args.test_card:
        scene.engine.pause()

    running = True
    while running:
        clock.tick(config.fps)

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_SPACE:
                    paused = scene.engine.toggle_pause()
                    logger.info("paused" if paused else "resumed")
                elif event.key == pygame.K_r:
                    framebuffer.clear(BG_PIXEL)
                    scene.engine.restart()
                    logger.info("restarted")

        try:
            scene.engine.on_frame()
        except pygame.error as err:
            logger.error("present failed: %s", err)
            running = False

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
