import os
import random

# Headless pygame for the whole test session
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame  # noqa: E402
import pytest  # noqa: E402

from snakejump.settings import JumpSettings, SnakeSettings  # noqa: E402


@pytest.fixture(scope="session", autouse=True)
def pygame_session():
    pygame.init()
    yield
    pygame.quit()


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def snake_settings():
    return SnakeSettings()


@pytest.fixture
def jump_settings():
    return JumpSettings()


class RecordingListener:
    def __init__(self):
        self.scores = []
        self.speeds = []
        self.finals = []

    def score_changed(self, score):
        self.scores.append(score)

    def speed_changed(self, speed_ms):
        self.speeds.append(speed_ms)

    def game_over(self, score):
        self.finals.append(score)


@pytest.fixture
def listener():
    return RecordingListener()
