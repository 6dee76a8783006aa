"""
Doodle-Jump-style platformer rules.

The world scrolls instead of the camera: once the player rises above the
middle of the screen, every platform (and the player) is pushed down by the
player's upward speed and the pushed distance is added to the score offset.
"""

from __future__ import annotations
import logging
import math
import random
from dataclasses import dataclass, field
from typing import List, Set

from .settings import JumpSettings

logger = logging.getLogger(__name__)

KEY_ALIASES = {
    "left": "left", "arrowleft": "left", "a": "left",
    "right": "right", "arrowright": "right", "d": "right",
}


# -----------------------------------------------------------------------------
# Entities
# -----------------------------------------------------------------------------
@dataclass
class Platform:
    x: float
    y: float
    width: float
    height: float

    @property
    def bottom(self) -> float:
        return self.y + self.height


@dataclass
class Body:
    x: float
    y: float
    width: float
    height: float
    dx: float = 0.0
    dy: float = 0.0

    @property
    def bottom(self) -> float:
        return self.y + self.height

    def overlaps_x(self, p: Platform) -> bool:
        return self.x + self.width > p.x and self.x < p.x + p.width


@dataclass
class JumpState:
    player: Body
    platforms: List[Platform] = field(default_factory=list)
    scroll_offset: float = 0.0
    keys: Set[str] = field(default_factory=set)
    over: bool = False

    @property
    def score(self) -> int:
        return math.floor(self.scroll_offset / 10)


@dataclass
class JumpResult:
    scrolled: float = 0.0
    bounced: bool = False
    terminal: bool = False


# -----------------------------------------------------------------------------
# Input
# -----------------------------------------------------------------------------
def press(state: JumpState, key: str) -> None:
    name = KEY_ALIASES.get(key.lower())
    if name:
        state.keys.add(name)


def release(state: JumpState, key: str) -> None:
    name = KEY_ALIASES.get(key.lower())
    if name:
        state.keys.discard(name)


# -----------------------------------------------------------------------------
# World
# -----------------------------------------------------------------------------
def new_game(settings: JumpSettings, rng: random.Random) -> JumpState:
    size = settings.player_size
    player = Body(x=(settings.width - size) / 2, y=settings.height - 150, width=size, height=size)
    state = JumpState(player=player)
    spawn_platforms(state, settings, rng)
    logger.debug("new jump game with %d platforms", len(state.platforms))
    return state


def spawn_platforms(state: JumpState, settings: JumpSettings, rng: random.Random) -> None:
    """Drop platforms that left the screen and fill the space above the top."""
    state.platforms = [p for p in state.platforms if p.y < settings.height]

    if not state.platforms:
        state.platforms.append(Platform(
            x=(settings.width - settings.platform_width) / 2,
            y=settings.height - settings.seed_offset,
            width=settings.platform_width,
            height=settings.platform_height,
        ))

    frontier = min(p.y for p in state.platforms)
    while frontier > -settings.spawn_ceiling:
        frontier -= settings.min_gap + rng.uniform(0, settings.gap_jitter)
        state.platforms.append(Platform(
            x=rng.uniform(0, settings.width - settings.platform_width),
            y=frontier,
            width=settings.platform_width,
            height=settings.platform_height,
        ))


def wrap(player: Body, width: float) -> None:
    if player.x > width:
        player.x = -player.width
    elif player.x + player.width < 0:
        player.x = width


def step(state: JumpState, settings: JumpSettings, rng: random.Random) -> JumpResult:
    result = JumpResult()
    if state.over:
        result.terminal = True
        return result
    player = state.player

    # Horizontal: right wins when both are held
    if "right" in state.keys:
        player.dx = settings.move_speed
    elif "left" in state.keys:
        player.dx = -settings.move_speed
    else:
        player.dx = 0.0
    player.x += player.dx
    wrap(player, settings.width)

    # Vertical: semi-implicit Euler
    player.dy += settings.gravity
    prev_bottom = player.bottom
    player.y += player.dy

    if player.y < settings.height / 2 and player.dy < 0:
        scroll = -player.dy
        state.scroll_offset += scroll
        for p in state.platforms:
            p.y += scroll
        player.y += scroll
        prev_bottom += scroll
        result.scrolled = scroll

    # Swept over this frame's fall so a fast drop cannot skip a platform
    falling = player.dy > 0
    for p in state.platforms:
        if falling and player.overlaps_x(p) and prev_bottom <= p.bottom and player.bottom >= p.y:
            player.dy = settings.jump_impulse
            result.bounced = True

    spawn_platforms(state, settings, rng)

    if player.y > settings.height:
        state.over = True
        result.terminal = True
        logger.info("player fell with score %d", state.score)
    return result
