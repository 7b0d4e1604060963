"""Pure per-tick physics, spawning and collision functions."""
from __future__ import annotations

import dataclasses
import random
from typing import Sequence

from flappy.config import GameConfig
from flappy.types import Bird, Pipe


def integrate_bird(bird: Bird, gravity: float) -> Bird:
    """Apply one tick of gravity.

    Gravity enters both the velocity and, separately, the position delta
    (``y += velocity + gravity`` with the pre-tick velocity). Kept as the
    reference game computes it.
    """
    return dataclasses.replace(
        bird,
        y=bird.y + bird.velocity + gravity,
        velocity=bird.velocity + gravity,
    )


def advance_pipes(pipes: Sequence[Pipe], speed: float) -> list[Pipe]:
    return [dataclasses.replace(p, x=p.x - speed) for p in pipes]


def cull_pipes(pipes: Sequence[Pipe], pipe_width: float) -> list[Pipe]:
    """Drop pipes that have fully left the screen."""
    return [p for p in pipes if p.x > -pipe_width]


def needs_pipe(pipes: Sequence[Pipe], config: GameConfig) -> bool:
    if not pipes:
        return True
    return pipes[-1].x < config.canvas_width - config.pipe_spacing


def generate_pipe(config: GameConfig, rng: random.Random) -> Pipe:
    """New pipe at the right edge with a uniformly placed gap."""
    top = rng.random() * config.spawn_range + config.pipe_margin
    return Pipe.spawn(config.canvas_width, top, config.pipe_gap)


def collect_passed(
    pipes: Sequence[Pipe], bird_x: float, pipe_width: float
) -> tuple[list[Pipe], int]:
    """Mark pipes whose right edge is behind the bird. Returns (pipes, newly passed)."""
    gained = 0
    result: list[Pipe] = []
    for p in pipes:
        if not p.passed and p.x + pipe_width < bird_x:
            p = dataclasses.replace(p, passed=True)
            gained += 1
        result.append(p)
    return result, gained


def hits_bounds(bird: Bird, config: GameConfig) -> bool:
    return bird.y <= 0 or bird.y >= config.ground_y


def hits_pipe(bird: Bird, pipe: Pipe, config: GameConfig) -> bool:
    size = config.bird_size
    if bird.x + size <= pipe.x or bird.x >= pipe.x + config.pipe_width:
        return False
    return bird.y < pipe.top_height or bird.y + size > pipe.bottom_y


def collides(bird: Bird, pipes: Sequence[Pipe], config: GameConfig) -> bool:
    if hits_bounds(bird, config):
        return True
    return any(hits_pipe(bird, p, config) for p in pipes)
