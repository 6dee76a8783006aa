"""Status display: the games push score / speed / game-over updates here."""

from __future__ import annotations
from typing import Optional, Protocol


class StatusListener(Protocol):
    def score_changed(self, score: int) -> None: ...

    def speed_changed(self, speed_ms: int) -> None: ...

    def game_over(self, score: int) -> None: ...


class StatusBoard:
    """Keeps the text lines the HUD and the game-over overlay show."""

    def __init__(self) -> None:
        self.score = 0
        self.speed: Optional[int] = None
        self.final_score: Optional[int] = None

    def score_changed(self, score: int) -> None:
        self.score = score

    def speed_changed(self, speed_ms: int) -> None:
        self.speed = speed_ms

    def game_over(self, score: int) -> None:
        self.final_score = score

    def clear(self) -> None:
        self.score = 0
        self.final_score = None

    @property
    def score_text(self) -> str:
        return f"SCORE: {self.score}"

    @property
    def speed_text(self) -> str:
        return f"SPEED: {self.speed}ms" if self.speed is not None else ""

    @property
    def message(self) -> str:
        return f"Final Score: {self.final_score}" if self.final_score is not None else ""
