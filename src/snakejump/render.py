"""
Drawing for both games. Every function reads state and paints a surface;
none of them mutate game state.
"""

from __future__ import annotations
from typing import Tuple

import pygame

from .hud import StatusBoard
from .jumper import JumpState
from .settings import (BLACK, FONT_NAMES, GREY, NEON_GREEN, OVERLAY, PLATFORM_GREEN,
                       PLAYER_ORANGE, RED, SKY, WHITE, SnakeSettings)
from .snake import SnakeState


def draw_text(
    surf: pygame.Surface,
    text: str,
    size: int,
    color: Tuple[int, int, int],
    center: Tuple[int, int] | None = None,
    topleft: Tuple[int, int] | None = None,
    bold: bool = False,
) -> None:
    font = pygame.font.SysFont(FONT_NAMES, size, bold=bold)
    s = font.render(text, True, color)
    rect = s.get_rect()
    if center:
        rect.center = center
    elif topleft:
        rect.topleft = topleft
    surf.blit(s, rect)


def draw_square(surf: pygame.Surface, x: int, y: int, size: int, color: Tuple[int, int, int]) -> None:
    rect = pygame.Rect(x, y, size, size)
    pygame.draw.rect(surf, color, rect)
    # thin border keeps the grid readable
    pygame.draw.rect(surf, BLACK, rect, 1)


# -----------------------------------------------------------------------------
# Snake
# -----------------------------------------------------------------------------
def draw_snake_game(surf: pygame.Surface, state: SnakeState, settings: SnakeSettings) -> None:
    surf.fill(BLACK)
    # Food first so the head covers it on the frame it gets eaten
    if state.food is not None:
        draw_square(surf, state.food.x, state.food.y, settings.grid_size, WHITE)
    for seg in state.segments:
        draw_square(surf, seg.x, seg.y, settings.grid_size, NEON_GREEN)


def draw_snake_hud(surf: pygame.Surface, board: StatusBoard) -> None:
    draw_text(surf, board.score_text, 18, WHITE, topleft=(8, 6))
    draw_text(surf, board.speed_text, 18, GREY, topleft=(8, 28))


# -----------------------------------------------------------------------------
# Doodle Jump
# -----------------------------------------------------------------------------
def draw_jump_game(surf: pygame.Surface, state: JumpState) -> None:
    surf.fill(SKY)
    for p in state.platforms:
        pygame.draw.rect(surf, PLATFORM_GREEN, (round(p.x), round(p.y), p.width, p.height),
                         border_radius=4)
    pl = state.player
    pygame.draw.rect(surf, PLAYER_ORANGE, (round(pl.x), round(pl.y), pl.width, pl.height),
                     border_radius=6)


def draw_jump_hud(surf: pygame.Surface, board: StatusBoard) -> None:
    draw_text(surf, board.score_text, 18, BLACK, topleft=(8, 6))


# -----------------------------------------------------------------------------
# Overlays
# -----------------------------------------------------------------------------
def draw_overlay(surf: pygame.Surface, title: str, message: str, prompt: str,
                 title_color: Tuple[int, int, int] = WHITE) -> None:
    w, h = surf.get_size()
    shade = pygame.Surface((w, h), pygame.SRCALPHA)
    shade.fill(OVERLAY)
    surf.blit(shade, (0, 0))
    draw_text(surf, title, 44, title_color, center=(w // 2, h // 2 - 50), bold=True)
    draw_text(surf, message, 22, WHITE, center=(w // 2, h // 2))
    draw_text(surf, prompt, 18, GREY, center=(w // 2, h // 2 + 36))


def draw_game_over(surf: pygame.Surface, board: StatusBoard) -> None:
    draw_overlay(surf, "GAME OVER", board.message,
                 "Press ENTER to play again", title_color=RED)


def draw_ready(surf: pygame.Surface, title: str) -> None:
    draw_overlay(surf, title, "Arrows / WASD to move", "Press ENTER to start")
