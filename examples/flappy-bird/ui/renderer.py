"""Play surface drawing: sky, pipes, bird, ground, score."""
from __future__ import annotations

import pygame

from flappy import GameConfig, Snapshot
from flappy.types import Bird, Pipe
from ui.constants import (
    BEAK_LEN,
    BIRD,
    BIRD_BEAK,
    BIRD_EYE,
    CAP_H,
    CAP_OVERHANG,
    EYE_R,
    GROUND,
    GROUND_H,
    HEADER_BG,
    HEADER_H,
    HEADER_TEXT,
    PIPE,
    PIPE_CAP,
    SCORE_COLOR,
    SKY,
)


def draw_pipe(surface: pygame.Surface, pipe: Pipe, config: GameConfig) -> None:
    x = int(pipe.x)
    top = int(pipe.top_height)
    bottom = int(pipe.bottom_y)
    w = int(config.pipe_width)
    h = int(config.canvas_height)

    pygame.draw.rect(surface, PIPE, (x, 0, w, top))
    pygame.draw.rect(surface, PIPE, (x, bottom, w, h - bottom))

    cap_w = w + 2 * CAP_OVERHANG
    pygame.draw.rect(surface, PIPE_CAP, (x - CAP_OVERHANG, top - CAP_H, cap_w, CAP_H))
    pygame.draw.rect(surface, PIPE_CAP, (x - CAP_OVERHANG, bottom, cap_w, CAP_H))


def draw_bird(surface: pygame.Surface, bird: Bird, config: GameConfig) -> None:
    size = config.bird_size
    half = size / 2
    cx, cy = bird.x + half, bird.y + half

    pygame.draw.circle(surface, BIRD, (int(cx), int(cy)), int(half))
    pygame.draw.circle(surface, BIRD_EYE, (int(cx + 5), int(cy - 3)), EYE_R)
    tip = bird.x + size + BEAK_LEN
    pygame.draw.polygon(
        surface,
        BIRD_BEAK,
        [(bird.x + size, cy), (tip, cy - 2), (tip, cy + 2)],
    )


def draw_world(
    surface: pygame.Surface,
    snap: Snapshot,
    config: GameConfig,
    font: pygame.font.Font,
) -> None:
    """Draw one frame of the play surface from a snapshot."""
    surface.fill(SKY)

    for pipe in snap.pipes:
        draw_pipe(surface, pipe, config)

    draw_bird(surface, snap.bird, config)

    w, h = int(config.canvas_width), int(config.canvas_height)
    pygame.draw.rect(surface, GROUND, (0, h - GROUND_H, w, GROUND_H))

    text = font.render(str(snap.score), True, SCORE_COLOR)
    surface.blit(text, text.get_rect(center=(w // 2, 50)))


def draw_header(surface: pygame.Surface, snap: Snapshot, font: pygame.font.Font) -> None:
    """Score and high score strip along the top edge."""
    w = surface.get_width()
    pygame.draw.rect(surface, HEADER_BG, (0, 0, w, HEADER_H))
    left = font.render(f"Score: {snap.score}", True, HEADER_TEXT)
    right = font.render(f"High Score: {snap.high_score}", True, HEADER_TEXT)
    pad = (HEADER_H - left.get_height()) // 2
    surface.blit(left, (8, pad))
    surface.blit(right, (w - right.get_width() - 8, pad))
