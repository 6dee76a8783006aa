"""
Configuration shared by both games.

Plain module constants for colours and pacing, plus one frozen dataclass per
game holding the tunable rules. Settings validate themselves on creation.
"""

from __future__ import annotations
from dataclasses import dataclass

# -----------------------------------------------------------------------------
# Display
# -----------------------------------------------------------------------------
FPS = 60
FONT_NAMES = "consolas,menlo,monospace,arial"

# Colors
BLACK = (0, 0, 0)
WHITE = (240, 244, 248)
GREY = (180, 188, 196)
NEON_GREEN = (80, 250, 123)
RED = (235, 80, 80)
SKY = (236, 244, 250)
PLATFORM_GREEN = (60, 180, 90)
PLAYER_ORANGE = (255, 150, 60)
OVERLAY = (0, 0, 0, 170)


# -----------------------------------------------------------------------------
# Snake
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class SnakeSettings:
    width: int = 400
    height: int = 400
    grid_size: int = 20
    start_speed: int = 150  # ms between steps
    min_speed: int = 50
    speed_step: int = 10
    food_points: int = 10
    speedup_every: int = 50  # points

    def __post_init__(self) -> None:
        if self.grid_size <= 0:
            raise ValueError("grid_size must be positive")
        if self.width <= 0 or self.height <= 0:
            raise ValueError("width and height must be positive")
        if self.width % self.grid_size or self.height % self.grid_size:
            raise ValueError(
                f"{self.width}x{self.height} is not a multiple of grid_size {self.grid_size}"
            )
        if self.width < 3 * self.grid_size:
            raise ValueError("board too narrow for the starting snake")
        if not 0 < self.min_speed <= self.start_speed:
            raise ValueError("min_speed must be in (0, start_speed]")

    @property
    def cols(self) -> int:
        return self.width // self.grid_size

    @property
    def rows(self) -> int:
        return self.height // self.grid_size


# -----------------------------------------------------------------------------
# Doodle Jump
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class JumpSettings:
    width: int = 400
    height: int = 600
    player_size: int = 40
    move_speed: float = 5.0
    gravity: float = 0.4
    jump_impulse: float = -10.0
    platform_width: int = 60
    platform_height: int = 12
    min_gap: int = 40       # vertical margin between spawned platforms
    gap_jitter: int = 40    # extra random spacing on top of min_gap
    spawn_ceiling: int = 100  # spawn until this far above the top edge
    seed_offset: int = 50   # seeded platform sits this far above the bottom

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("width and height must be positive")
        if self.platform_width > self.width:
            raise ValueError("platform_width exceeds the playfield")
        if self.jump_impulse >= 0:
            raise ValueError("jump_impulse must be negative (upwards)")
        if self.gravity <= 0:
            raise ValueError("gravity must be positive")
        if self.min_gap <= 0 or self.gap_jitter < 0:
            raise ValueError("platform spacing must be positive")
