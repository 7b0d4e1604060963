"""FrameDriver - per-frame loop, tick scheduling, and pacing."""

from __future__ import annotations

import time
from typing import Callable

from flappy.clock import FrameClock
from flappy.engine import Game
from flappy.input import InputQueue
from flappy.log import get_logger
from flappy.types import GameState, Snapshot

logger = get_logger("driver")

FrameHook = Callable[[Snapshot], None]


class FrameDriver:
    """Calls ``Game.tick()`` once per display frame while the game is playing.

    Every frame drains queued input first, so input and ticks never
    interleave. Ticking is scheduled when the game enters PLAYING and
    cancelled as soon as it leaves it; frame hooks (renderers) run on
    every frame regardless.
    """

    def __init__(
        self,
        game: Game,
        fps: int = 60,
        inputs: InputQueue | None = None,
    ) -> None:
        self._game = game
        self._clock = FrameClock(fps)
        self._inputs = inputs
        self._active = False
        self._frame_hooks: list[FrameHook] = []
        self._stop_hooks: list[FrameHook] = []
        self._stop_requested = False

    @property
    def game(self) -> Game:
        return self._game

    @property
    def clock(self) -> FrameClock:
        return self._clock

    @property
    def inputs(self) -> InputQueue | None:
        return self._inputs

    @property
    def active(self) -> bool:
        return self._active

    def on_frame(self, hook: FrameHook) -> None:
        self._frame_hooks.append(hook)

    def on_stop(self, hook: FrameHook) -> None:
        self._stop_hooks.append(hook)

    def request_stop(self) -> None:
        self._stop_requested = True

    def cancel(self) -> None:
        """Stop ticking. Safe to call when already stopped."""
        if not self._active:
            return
        self._active = False
        logger.debug("tick loop cancelled at frame %d", self._clock.frame_number)

    def frame(self) -> Snapshot:
        self._clock.advance()
        if self._inputs is not None:
            self._inputs.drain(self._game)

        if self._game.state is GameState.PLAYING and not self._active:
            self._active = True
            logger.debug("tick loop scheduled at frame %d", self._clock.frame_number)

        if self._active:
            self._game.tick()
            if self._game.state is not GameState.PLAYING:
                self.cancel()

        bus = self._game.bus
        if bus is not None:
            bus.flush()

        snap = self._game.snapshot()
        for hook in self._frame_hooks:
            hook(snap)
        return snap

    def run(self, n: int) -> None:
        self._stop_requested = False
        try:
            for _ in range(n):
                self.frame()
                if self._stop_requested:
                    break
        finally:
            self._teardown()

    def run_forever(self) -> None:
        self._stop_requested = False
        logger.debug("frame loop started at %d fps", self._clock.fps)
        interval = self._clock.interval
        try:
            while not self._stop_requested:
                start = time.monotonic()
                self.frame()
                if self._stop_requested:
                    break
                sleep_time = interval - (time.monotonic() - start)
                if sleep_time > 0:
                    time.sleep(sleep_time)
        finally:
            self._teardown()

    def _teardown(self) -> None:
        self.cancel()
        snap = self._game.snapshot()
        for hook in self._stop_hooks:
            hook(snap)
        logger.debug("frame loop stopped after %d frames", self._clock.frame_number)
