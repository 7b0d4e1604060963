"""flappy - a frame-driven Flappy Bird simulation engine."""

from flappy.clock import FrameClock
from flappy.config import GameConfig
from flappy.driver import FrameDriver
from flappy.engine import Game
from flappy.input import Impulse, InputQueue, Restart, make_input_queue
from flappy.physics import collides
from flappy.signals import SignalBus
from flappy.types import (
    Bird,
    ConfigError,
    GameState,
    InvalidTransitionError,
    Pipe,
    Snapshot,
)
from flappy.world import StepResult, World, step

__all__ = [
    "Game",
    "GameConfig",
    "GameState",
    "FrameDriver",
    "FrameClock",
    "InputQueue",
    "Impulse",
    "Restart",
    "make_input_queue",
    "SignalBus",
    "World",
    "StepResult",
    "step",
    "collides",
    "Bird",
    "Pipe",
    "Snapshot",
    "ConfigError",
    "InvalidTransitionError",
]
