"""Loop drivers: a fixed-interval scheduler for Snake, a per-frame loop for Doodle Jump."""

from __future__ import annotations
from typing import Callable

import pygame


class IntervalScheduler:
    """Turns elapsed wall time into due ticks, handed out one at a time.

    The interval (ms) is read through ``interval`` each time the scheduler
    re-arms, so a speed change takes effect on the next tick without
    registering anything again.
    """

    def __init__(self, interval: Callable[[], float]) -> None:
        self.interval = interval
        self.accum = 0.0
        self.running = False

    def start(self) -> None:
        self.accum = 0.0
        self.running = True

    def stop(self) -> None:
        self.running = False

    def reset(self) -> None:
        self.accum = 0.0

    def feed(self, elapsed_ms: float) -> None:
        if self.running:
            self.accum += elapsed_ms

    def pop(self) -> bool:
        """Consume one due tick, if any."""
        if not self.running:
            return False
        wait = self.interval()
        if self.accum < wait:
            return False
        self.accum -= wait
        return True

    def advance(self, elapsed_ms: float) -> int:
        """Feed ``elapsed_ms`` and consume every tick now due; returns the count."""
        self.feed(elapsed_ms)
        due = 0
        while self.pop():
            due += 1
        return due


class FrameLoop:
    """One step per display frame until stopped."""

    def __init__(self, fps: int) -> None:
        self.fps = fps
        self.running = False

    def start(self) -> None:
        self.running = True

    def stop(self) -> None:
        self.running = False

    def tick(self, clock: pygame.time.Clock) -> float:
        return clock.tick(self.fps) / 1000.0
