"""Game - owns all mutable game state; per-frame tick and input handling."""

from __future__ import annotations

import dataclasses
import os
import random

from flappy import states
from flappy.config import GameConfig
from flappy.log import get_logger
from flappy.signals import FLAP, GAME_OVER, SCORE, START, SignalBus
from flappy.types import Bird, GameState, Pipe, Snapshot
from flappy.world import World, step

logger = get_logger("engine")


class Game:
    def __init__(
        self,
        config: GameConfig | None = None,
        seed: int | None = None,
        bus: SignalBus | None = None,
    ) -> None:
        self._config = config if config is not None else GameConfig()
        self._bus = bus
        self._world = World.initial(self._config)
        self._state = GameState.MENU
        self._high_score = 0
        self._frame = 0

        if seed is None:
            seed = int.from_bytes(os.urandom(8))
        self._seed = seed
        self._rng = random.Random(seed)

    @property
    def config(self) -> GameConfig:
        return self._config

    @property
    def bus(self) -> SignalBus | None:
        return self._bus

    @property
    def seed(self) -> int:
        return self._seed

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def bird(self) -> Bird:
        return self._world.bird

    @property
    def pipes(self) -> tuple[Pipe, ...]:
        return self._world.pipes

    @property
    def score(self) -> int:
        return self._world.score

    @property
    def high_score(self) -> int:
        return self._high_score

    @property
    def frame(self) -> int:
        """Ticks since the last reset."""
        return self._frame

    def _emit(self, signal_name: str, **data: object) -> None:
        if self._bus is not None:
            self._bus.publish(signal_name, **data)

    def reset(self) -> None:
        self._state = states.next_state(self._state, states.START)
        self._world = World.initial(self._config)
        self._frame = 0
        logger.info("session started (seed=%d, high score %d)", self._seed, self._high_score)
        self._emit(START, high_score=self._high_score)

    def apply_impulse(self) -> None:
        """Flap while playing; start or restart otherwise."""
        if self._state is not GameState.PLAYING:
            self.reset()
            return
        bird = dataclasses.replace(self._world.bird, velocity=self._config.jump_force)
        self._world = dataclasses.replace(self._world, bird=bird)
        logger.debug("flap at y=%.1f", bird.y)
        self._emit(FLAP, y=bird.y, velocity=bird.velocity)

    def tick(self) -> None:
        if not states.is_simulating(self._state):
            return

        result = step(self._world, self._config, self._rng)
        self._world = result.world
        self._frame += 1

        if result.scored:
            logger.debug("score %d", self._world.score)
            self._emit(SCORE, score=self._world.score)

        if result.collided:
            self._game_over()

    def _game_over(self) -> None:
        self._state = states.next_state(self._state, states.CRASH)
        score = self._world.score
        new_record = score > self._high_score
        self._high_score = max(self._high_score, score)
        logger.info(
            "game over after %d ticks: score %d, high score %d",
            self._frame,
            score,
            self._high_score,
        )
        self._emit(
            GAME_OVER,
            score=score,
            high_score=self._high_score,
            new_record=new_record,
        )

    def snapshot(self) -> Snapshot:
        return Snapshot(
            bird=self._world.bird,
            pipes=self._world.pipes,
            score=self._world.score,
            high_score=self._high_score,
            state=self._state,
            frame=self._frame,
        )
