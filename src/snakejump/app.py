"""
pygame windows for the two games.

Both share one shell: a small state machine (READY -> RUNNING -> GAME_OVER)
and the usual handle_events / update / render loop. Each game plugs in its
own rules, loop driver and drawing.
"""

from __future__ import annotations
import logging
import random
from typing import Iterable, List, Optional, Tuple

import pygame

from . import jumper, render, snake
from .hud import StatusBoard, StatusListener
from .loop import FrameLoop, IntervalScheduler
from .settings import FPS, JumpSettings, SnakeSettings

logger = logging.getLogger(__name__)

READY = "READY"
RUNNING = "RUNNING"
GAME_OVER = "GAME_OVER"

START_KEYS = ("return", "enter", "space", "r")


class ArcadeApp:
    title = "Arcade"

    def __init__(
        self,
        size: Tuple[int, int],
        seed: Optional[int] = None,
        listeners: Iterable[StatusListener] = (),
        screen: Optional[pygame.Surface] = None,
    ) -> None:
        pygame.init()
        if screen is None:
            screen = pygame.display.set_mode(size)
            pygame.display.set_caption(self.title)
        self.screen = screen
        self.clock = pygame.time.Clock()
        self.rng = random.Random(seed)

        self.board = StatusBoard()
        self.listeners: List[StatusListener] = [self.board, *listeners]

        self.state = READY
        self.running = True

    # ---------------------------- notifications -------------------------------
    def notify_score(self, score: int) -> None:
        for listener in self.listeners:
            listener.score_changed(score)

    def notify_speed(self, speed_ms: int) -> None:
        for listener in self.listeners:
            listener.speed_changed(speed_ms)

    def notify_over(self, score: int) -> None:
        for listener in self.listeners:
            listener.game_over(score)

    # ---------------------------- state transitions ---------------------------
    def start_game(self) -> None:
        self.board.clear()
        self.reset()
        self.state = RUNNING
        logger.info("%s started", self.title)

    def to_over(self) -> None:
        self.state = GAME_OVER
        self.stop_loop()
        self.notify_over(self.score)
        logger.info("%s over, final score %d", self.title, self.score)

    def quit(self) -> None:
        self.running = False

    # ---------------------------- per-game hooks ------------------------------
    @property
    def score(self) -> int:
        raise NotImplementedError

    def reset(self) -> None:
        raise NotImplementedError

    def stop_loop(self) -> None:
        raise NotImplementedError

    def on_key_down(self, key: str) -> None:
        pass

    def on_key_up(self, key: str) -> None:
        pass

    def update(self, dt: float) -> None:
        raise NotImplementedError

    def draw_world(self) -> None:
        raise NotImplementedError

    # ---------------------------- main loop pieces ----------------------------
    def handle_event(self, e: pygame.event.Event) -> None:
        if e.type == pygame.QUIT:
            self.quit()
        elif e.type == pygame.KEYDOWN:
            key = pygame.key.name(e.key).lower()
            if key == "escape":
                self.quit()
            elif self.state in (READY, GAME_OVER) and key in START_KEYS:
                self.start_game()
            else:
                self.on_key_down(key)
        elif e.type == pygame.KEYUP:
            self.on_key_up(pygame.key.name(e.key).lower())

    def handle_events(self) -> None:
        for e in pygame.event.get():
            self.handle_event(e)

    def render(self) -> None:
        self.draw_world()
        if self.state == READY:
            render.draw_ready(self.screen, self.title)
        elif self.state == GAME_OVER:
            render.draw_game_over(self.screen, self.board)

    def tick(self) -> float:
        return self.clock.tick(FPS) / 1000.0

    def run(self) -> None:
        while self.running:
            dt = self.tick()
            self.handle_events()
            self.update(dt)
            self.render()
            pygame.display.flip()
        pygame.quit()


# -----------------------------------------------------------------------------
# Snake
# -----------------------------------------------------------------------------
class SnakeApp(ArcadeApp):
    title = "SNAKE"

    def __init__(self, settings: Optional[SnakeSettings] = None, **kwargs) -> None:
        self.settings = settings or SnakeSettings()
        super().__init__((self.settings.width, self.settings.height), **kwargs)
        self.game = snake.new_game(self.settings, self.rng)
        # Re-reads the current speed on every re-arm
        self.scheduler = IntervalScheduler(lambda: self.game.speed)

    @property
    def score(self) -> int:
        return self.game.score

    def reset(self) -> None:
        self.game = snake.new_game(self.settings, self.rng)
        self.scheduler.start()
        self.notify_score(self.game.score)
        self.notify_speed(self.game.speed)

    def stop_loop(self) -> None:
        self.scheduler.stop()

    def on_key_down(self, key: str) -> None:
        if self.state == RUNNING:
            snake.change_direction(self.game, key)

    def update(self, dt: float) -> None:
        if self.state != RUNNING:
            return
        self.scheduler.feed(dt * 1000.0)
        while self.scheduler.pop():
            result = snake.step(self.game, self.settings, self.rng)
            if result.terminal:
                self.to_over()
                return
            if result.grew:
                self.notify_score(self.game.score)
            if result.speed_changed:
                self.notify_speed(self.game.speed)

    def draw_world(self) -> None:
        render.draw_snake_game(self.screen, self.game, self.settings)
        render.draw_snake_hud(self.screen, self.board)


# -----------------------------------------------------------------------------
# Doodle Jump
# -----------------------------------------------------------------------------
class JumpApp(ArcadeApp):
    title = "DOODLE JUMP"

    def __init__(self, settings: Optional[JumpSettings] = None, **kwargs) -> None:
        self.settings = settings or JumpSettings()
        super().__init__((self.settings.width, self.settings.height), **kwargs)
        self.game = jumper.new_game(self.settings, self.rng)
        self.frames = FrameLoop(FPS)

    @property
    def score(self) -> int:
        return self.game.score

    def reset(self) -> None:
        # Keys still held across a restart keep steering the new player
        held = self.game.keys
        self.game = jumper.new_game(self.settings, self.rng)
        self.game.keys = held
        self.frames.start()
        self.notify_score(self.game.score)

    def stop_loop(self) -> None:
        self.frames.stop()

    def on_key_down(self, key: str) -> None:
        jumper.press(self.game, key)

    def on_key_up(self, key: str) -> None:
        jumper.release(self.game, key)

    def tick(self) -> float:
        return self.frames.tick(self.clock)

    def update(self, dt: float) -> None:
        # One step per frame; dt is not used by the physics
        if self.state != RUNNING or not self.frames.running:
            return
        before = self.game.score
        result = jumper.step(self.game, self.settings, self.rng)
        if self.game.score != before:
            self.notify_score(self.game.score)
        if result.terminal:
            self.to_over()

    def draw_world(self) -> None:
        render.draw_jump_game(self.screen, self.game)
        render.draw_jump_hud(self.screen, self.board)
