"""World - per-session state and the pure step function."""

from __future__ import annotations

import random
from dataclasses import dataclass

from flappy import physics
from flappy.config import GameConfig
from flappy.types import Bird, Pipe


@dataclass(frozen=True, slots=True)
class World:
    bird: Bird
    pipes: tuple[Pipe, ...] = ()
    score: int = 0

    @classmethod
    def initial(cls, config: GameConfig) -> World:
        return cls(bird=Bird(x=config.bird_start_x, y=config.bird_start_y))


@dataclass(frozen=True, slots=True)
class StepResult:
    world: World
    scored: int
    collided: bool


def step(world: World, config: GameConfig, rng: random.Random) -> StepResult:
    """Advance ``world`` by one tick. The input world is left untouched.

    Order matters: bird, pipe movement, culling, spawning, scoring, then
    collision against the bird's new position and the updated pipes.
    """
    bird = physics.integrate_bird(world.bird, config.gravity)

    pipes = physics.advance_pipes(world.pipes, config.pipe_speed)
    pipes = physics.cull_pipes(pipes, config.pipe_width)
    if physics.needs_pipe(pipes, config):
        pipes.append(physics.generate_pipe(config, rng))

    pipes, gained = physics.collect_passed(pipes, bird.x, config.pipe_width)
    collided = physics.collides(bird, pipes, config)

    return StepResult(
        world=World(bird=bird, pipes=tuple(pipes), score=world.score + gained),
        scored=gained,
        collided=collided,
    )
