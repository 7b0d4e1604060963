"""
Flappy Bird
Pygame front end for the flappy simulation engine.

Controls:
  Space   Flap / start / restart
  Click   Flap on the play surface; press the overlay button to start
  R       Restart from the menu or game-over screen
  Esc     Quit
"""
from __future__ import annotations

import argparse
import sys

import pygame

from flappy import (
    FrameDriver,
    Game,
    GameConfig,
    Impulse,
    Restart,
    SignalBus,
    Snapshot,
    make_input_queue,
)
from flappy.log import get_logger, setup_logging
from ui.constants import FPS, SCREEN_H, SCREEN_W
from ui.overlay import Overlay
from ui.renderer import draw_header, draw_world

TITLE = "Flappy Bird"

logger = get_logger("demo")


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Flappy Bird - flappy engine demo")
    p.add_argument("--seed", type=int, default=None, help="Pipe layout seed (default: random)")
    p.add_argument("--fps", type=int, default=FPS, help=f"Frames per second (default: {FPS})")
    p.add_argument("--log-level", default="info", help="debug, info, warning (default: info)")
    args = p.parse_args()
    args.fps = max(10, min(240, args.fps))
    return args


def main() -> None:
    args = parse_args()
    setup_logging(args.log_level)

    pygame.init()
    screen = pygame.display.set_mode((SCREEN_W, SCREEN_H))
    pygame.display.set_caption(TITLE)
    pg_clock = pygame.time.Clock()
    score_font = pygame.font.SysFont("arial", 24, bold=True)
    header_font = pygame.font.SysFont("arial", 14)

    # --- Engine setup ---
    config = GameConfig()
    bus = SignalBus()
    game = Game(config=config, seed=args.seed, bus=bus)
    inputs = make_input_queue()
    driver = FrameDriver(game, fps=args.fps, inputs=inputs)
    overlay = Overlay()

    def on_game_over(signal: str, data: dict) -> None:
        if data["new_record"]:
            logger.info("new high score: %d", data["high_score"])

    bus.subscribe("game_over", on_game_over)

    def render(snap: Snapshot) -> None:
        draw_world(screen, snap, config, score_font)
        draw_header(screen, snap, header_font)
        overlay.draw(screen, snap)
        pygame.display.flip()

    driver.on_frame(render)
    logger.info("seed %d", game.seed)

    running = True
    while running:
        pg_clock.tick(driver.clock.fps)

        # --- Events ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_SPACE:
                    inputs.enqueue(Impulse())
                elif event.key == pygame.K_r:
                    inputs.enqueue(Restart())
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                if overlay.button_hit(game.state, event.pos):
                    inputs.enqueue(Restart())
                else:
                    inputs.enqueue(Impulse())

        # --- Update + draw ---
        driver.frame()

    driver.cancel()
    logger.info("quit with high score %d", game.high_score)
    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
