"""Board geometry and physics constants."""
from __future__ import annotations

from dataclasses import dataclass

from flappy.types import ConfigError

CANVAS_WIDTH = 400
CANVAS_HEIGHT = 600
BIRD_SIZE = 20
BIRD_START_X = 100
BIRD_START_Y = 300
PIPE_WIDTH = 60
PIPE_GAP = 150
PIPE_SPEED = 2
PIPE_SPACING = 200
PIPE_MARGIN = 50
GRAVITY = 0.5
JUMP_FORCE = -8


@dataclass(frozen=True)
class GameConfig:
    """Immutable board and physics settings.

    Attributes:
        canvas_width: Play surface width; new pipes spawn at this x.
        canvas_height: Play surface height; the ground sits at
            ``canvas_height - bird_size``.
        bird_size: Side of the bird's square hitbox.
        bird_start_x: Fixed horizontal position of the bird.
        bird_start_y: Vertical position the bird resets to.
        pipe_width: Horizontal extent of every pipe.
        pipe_gap: Height of the opening between top and bottom segments.
        pipe_speed: Pixels each pipe moves left per tick.
        pipe_spacing: A new pipe spawns once the rightmost one is further
            than this from the right edge.
        pipe_margin: Minimum height of the top and bottom segments.
        gravity: Added to the bird's velocity every tick.
        jump_force: Velocity set by an impulse (negative is upward).
    """

    canvas_width: float = CANVAS_WIDTH
    canvas_height: float = CANVAS_HEIGHT
    bird_size: float = BIRD_SIZE
    bird_start_x: float = BIRD_START_X
    bird_start_y: float = BIRD_START_Y
    pipe_width: float = PIPE_WIDTH
    pipe_gap: float = PIPE_GAP
    pipe_speed: float = PIPE_SPEED
    pipe_spacing: float = PIPE_SPACING
    pipe_margin: float = PIPE_MARGIN
    gravity: float = GRAVITY
    jump_force: float = JUMP_FORCE

    def __post_init__(self) -> None:
        for name in (
            "canvas_width",
            "canvas_height",
            "bird_size",
            "pipe_width",
            "pipe_gap",
            "pipe_speed",
        ):
            if getattr(self, name) <= 0:
                raise ConfigError(f"{name} must be positive, got {getattr(self, name)}")
        if self.pipe_margin < 0:
            raise ConfigError(f"pipe_margin must be >= 0, got {self.pipe_margin}")
        if self.pipe_spacing < 0:
            raise ConfigError(f"pipe_spacing must be >= 0, got {self.pipe_spacing}")
        if self.gravity < 0:
            raise ConfigError(f"gravity must be >= 0, got {self.gravity}")
        if self.jump_force >= 0:
            raise ConfigError(
                f"jump_force must be negative (upward), got {self.jump_force}"
            )
        if self.spawn_range < 0:
            raise ConfigError(
                f"pipe_gap {self.pipe_gap} plus margins {2 * self.pipe_margin} "
                f"exceeds canvas_height {self.canvas_height}"
            )
        if not 0 <= self.bird_start_x <= self.canvas_width - self.bird_size:
            raise ConfigError(f"bird_start_x {self.bird_start_x} is off the canvas")
        if not 0 < self.bird_start_y < self.canvas_height - self.bird_size:
            raise ConfigError(f"bird_start_y {self.bird_start_y} is off the canvas")

    @property
    def spawn_range(self) -> float:
        """Span over which a pipe's top edge is drawn uniformly."""
        return self.canvas_height - self.pipe_gap - 2 * self.pipe_margin

    @property
    def ground_y(self) -> float:
        return self.canvas_height - self.bird_size
