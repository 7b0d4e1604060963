"""Shared value types and errors for the flappy simulation."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from enum import Enum
from typing import Any


class GameState(Enum):
    """Whether physics and spawning run."""

    MENU = "menu"
    PLAYING = "playing"
    GAME_OVER = "game_over"


@dataclass(frozen=True, slots=True)
class Bird:
    x: float
    y: float
    velocity: float = 0.0


@dataclass(frozen=True, slots=True)
class Pipe:
    """A gated obstacle. The gap spans ``[top_height, bottom_y)``."""

    x: float
    top_height: float
    bottom_y: float
    passed: bool = False

    @classmethod
    def spawn(cls, x: float, top_height: float, gap: float) -> Pipe:
        return cls(x=x, top_height=top_height, bottom_y=top_height + gap)


@dataclass(frozen=True, slots=True)
class Snapshot:
    """Read-only view of the game handed to renderers once per frame."""

    bird: Bird
    pipes: tuple[Pipe, ...]
    score: int
    high_score: int
    state: GameState
    frame: int

    def as_dict(self) -> dict[str, Any]:
        return {
            "bird": dataclasses.asdict(self.bird),
            "pipes": [dataclasses.asdict(p) for p in self.pipes],
            "score": self.score,
            "high_score": self.high_score,
            "state": self.state.value,
            "frame": self.frame,
        }


class ConfigError(ValueError):
    """Raised when a GameConfig describes an unplayable board."""


class InvalidTransitionError(Exception):
    """Raised when a state machine event is not allowed from the current state."""

    def __init__(self, state: GameState, event: str) -> None:
        self.state = state
        self.event = event
        super().__init__(f"No transition for {event!r} from {state.value!r}")
