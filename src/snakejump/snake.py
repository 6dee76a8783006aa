"""
Snake rules: state, direction changes, food placement and the simulation step.

Everything here is pure Python and works in pixel coordinates aligned to
``SnakeSettings.grid_size``. Nothing touches pygame.
"""

from __future__ import annotations
import logging
import random
from dataclasses import dataclass
from typing import List, NamedTuple, Optional, Sequence

from .settings import SnakeSettings

logger = logging.getLogger(__name__)

# Segments 1..3 sit right behind the head and can never be hit by it.
# Tied to the starting length of 3.
SELF_COLLISION_START = 4
FOOD_RETRIES = 1000


class Point(NamedTuple):
    x: int
    y: int


# Unit directions; scaled by grid_size to get a velocity.
LEFT = (-1, 0)
RIGHT = (1, 0)
UP = (0, -1)
DOWN = (0, 1)

KEY_DIRECTIONS = {
    "left": LEFT, "arrowleft": LEFT, "a": LEFT,
    "right": RIGHT, "arrowright": RIGHT, "d": RIGHT,
    "up": UP, "arrowup": UP, "w": UP,
    "down": DOWN, "arrowdown": DOWN, "s": DOWN,
}


@dataclass
class SnakeState:
    segments: List[Point]
    velocity: Point
    speed: int  # ms between steps
    food: Optional[Point] = None
    score: int = 0
    direction_locked: bool = False
    over: bool = False

    @property
    def head(self) -> Point:
        return self.segments[0]


@dataclass
class StepResult:
    grew: bool = False
    speed_changed: bool = False
    terminal: bool = False


def new_game(settings: SnakeSettings, rng: random.Random) -> SnakeState:
    g = settings.grid_size
    state = SnakeState(
        segments=[Point(2 * g, 0), Point(g, 0), Point(0, 0)],
        velocity=Point(g, 0),
        speed=settings.start_speed,
    )
    state.food = generate_food(state.segments, settings, rng)
    logger.debug("new snake game, food at %s", state.food)
    return state


def generate_food(segments: Sequence[Point], settings: SnakeSettings,
                  rng: random.Random) -> Optional[Point]:
    """Pick a random grid cell not covered by the snake.

    Random draws are retried a bounded number of times; after that the board
    is scanned for the first free cell. ``None`` means the board is full.
    """
    g = settings.grid_size
    occupied = set(segments)
    for _ in range(FOOD_RETRIES):
        p = Point(rng.randrange(settings.cols) * g, rng.randrange(settings.rows) * g)
        if p not in occupied:
            return p
    for row in range(settings.rows):
        for col in range(settings.cols):
            p = Point(col * g, row * g)
            if p not in occupied:
                return p
    return None


def change_direction(state: SnakeState, key: str) -> bool:
    """Apply a key press to the snake's velocity.

    At most one change is accepted per step, and reversing onto the current
    axis is refused. Returns True when the velocity changed.
    """
    if state.direction_locked:
        return False
    direction = KEY_DIRECTIONS.get(key.lower())
    if direction is None:
        return False

    g = abs(state.velocity.x) or abs(state.velocity.y)
    # Same axis as the current travel: either a no-op or a reversal
    if (direction[0] != 0) == (state.velocity.x != 0):
        return False

    state.velocity = Point(direction[0] * g, direction[1] * g)
    state.direction_locked = True
    return True


def collides(state: SnakeState, settings: SnakeSettings) -> bool:
    head = state.head
    if head.x < 0 or head.x >= settings.width or head.y < 0 or head.y >= settings.height:
        return True
    return any(head == seg for seg in state.segments[SELF_COLLISION_START:])


def step(state: SnakeState, settings: SnakeSettings, rng: random.Random) -> StepResult:
    result = StepResult()
    if state.over:
        result.terminal = True
        return result

    if collides(state, settings):
        state.over = True
        result.terminal = True
        logger.info("snake crashed at %s with score %d", tuple(state.head), state.score)
        return result

    head = Point(state.head.x + state.velocity.x, state.head.y + state.velocity.y)
    state.segments.insert(0, head)

    if head == state.food:
        result.grew = True
        state.score += settings.food_points
        if state.score % settings.speedup_every == 0 and state.speed > settings.min_speed:
            state.speed = max(settings.min_speed, state.speed - settings.speed_step)
            result.speed_changed = True
            logger.info("speed up: %dms per step", state.speed)
        state.food = generate_food(state.segments, settings, rng)
    else:
        state.segments.pop()

    state.direction_locked = False
    return result
