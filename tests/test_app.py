"""Tests for the pygame application shells, driven with synthetic events."""

import pygame
import pytest

from snakejump.app import GAME_OVER, READY, RUNNING, JumpApp, SnakeApp
from snakejump.settings import JumpSettings
from snakejump.snake import Point


def key_down(key):
    return pygame.event.Event(pygame.KEYDOWN, key=key)


def key_up(key):
    return pygame.event.Event(pygame.KEYUP, key=key)


@pytest.fixture
def snake_app(listener):
    return SnakeApp(seed=3, listeners=[listener], screen=pygame.Surface((400, 400)))


@pytest.fixture
def jump_app(listener):
    return JumpApp(seed=3, listeners=[listener], screen=pygame.Surface((400, 600)))


class TestSnakeApp:
    def test_starts_ready(self, snake_app):
        assert snake_app.state == READY
        snake_app.update(1.0)
        assert snake_app.game.head == Point(40, 0)

    def test_start_key(self, snake_app, listener):
        """ENTER starts the game and announces the starting score and speed."""
        snake_app.handle_event(key_down(pygame.K_RETURN))
        assert snake_app.state == RUNNING
        assert listener.scores == [0]
        assert listener.speeds == [150]
        assert snake_app.board.speed_text == "SPEED: 150ms"

    def test_step_on_interval(self, snake_app):
        snake_app.start_game()
        snake_app.game.food = Point(300, 300)
        snake_app.update(0.1)
        assert snake_app.game.head == Point(40, 0)
        snake_app.update(0.05)
        assert snake_app.game.head == Point(60, 0)

    def test_direction_key(self, snake_app):
        snake_app.start_game()
        snake_app.game.food = Point(300, 300)
        snake_app.handle_event(key_down(pygame.K_DOWN))
        snake_app.handle_event(key_down(pygame.K_LEFT))
        snake_app.update(0.2)
        assert snake_app.game.head == Point(40, 20)

    def test_eating_notifies(self, snake_app, listener):
        snake_app.start_game()
        snake_app.game.food = Point(60, 0)
        snake_app.update(0.2)
        assert listener.scores == [0, 10]
        assert snake_app.board.score_text == "SCORE: 10"

    def test_crash_and_restart(self, snake_app, listener):
        """A crash stops the loop and shows the final score; ENTER starts over."""
        snake_app.start_game()
        snake_app.game.score = 30
        snake_app.game.segments[0] = Point(-20, 0)
        snake_app.update(0.2)

        assert snake_app.state == GAME_OVER
        assert not snake_app.scheduler.running
        assert listener.finals == [30]
        assert snake_app.board.message == "Final Score: 30"
        snake_app.render()

        snake_app.handle_event(key_down(pygame.K_r))
        assert snake_app.state == RUNNING
        assert snake_app.game.score == 0
        assert len(snake_app.game.segments) == 3
        assert snake_app.scheduler.running

    def test_escape_quits(self, snake_app):
        snake_app.handle_event(key_down(pygame.K_ESCAPE))
        assert not snake_app.running

    def test_window_close_quits(self, snake_app):
        snake_app.handle_event(pygame.event.Event(pygame.QUIT))
        assert not snake_app.running


class TestJumpApp:
    def test_held_keys(self, jump_app):
        jump_app.start_game()
        jump_app.handle_event(key_down(pygame.K_RIGHT))
        assert jump_app.game.keys == {"right"}
        jump_app.update(1 / 60)
        assert jump_app.game.player.dx == JumpSettings().move_speed
        jump_app.handle_event(key_up(pygame.K_RIGHT))
        assert jump_app.game.keys == set()

    def test_no_steps_before_start(self, jump_app):
        y = jump_app.game.player.y
        jump_app.update(1 / 60)
        assert jump_app.game.player.y == y

    def test_fall_ends_game(self, jump_app, listener):
        jump_app.start_game()
        jump_app.game.player.y = 700
        jump_app.update(1 / 60)
        assert jump_app.state == GAME_OVER
        assert not jump_app.frames.running
        assert listener.finals == [0]

        y = jump_app.game.player.y
        jump_app.update(1 / 60)
        assert jump_app.game.player.y == y

    def test_held_key_survives_restart(self, jump_app):
        """A movement key held through game over keeps working after ENTER."""
        jump_app.start_game()
        jump_app.handle_event(key_down(pygame.K_RIGHT))
        jump_app.game.player.y = 700
        jump_app.update(1 / 60)
        assert jump_app.state == GAME_OVER

        jump_app.handle_event(key_down(pygame.K_RETURN))
        assert jump_app.state == RUNNING
        assert jump_app.game.keys == {"right"}
        jump_app.update(1 / 60)
        assert jump_app.game.player.dx == JumpSettings().move_speed

    def test_score_notified_on_scroll(self, jump_app, listener):
        jump_app.start_game()
        jump_app.game.player.y = 250
        jump_app.game.player.dy = -20
        jump_app.update(1 / 60)
        assert jump_app.game.score == 1
        assert listener.scores[-1] == 1

    def test_render_states(self, jump_app):
        jump_app.render()
        jump_app.start_game()
        jump_app.render()
