# state/game_state.py
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from game.feedback import Feedback


class GameStatus(Enum):
    IN_PROGRESS = "in_progress"
    WON = "won"
    LOST = "lost"

    @property
    def is_terminal(self) -> bool:
        return self is not GameStatus.IN_PROGRESS


@dataclass(frozen=True)
class HistoryEntry:
    """One accepted guess: attempt number (1-based), guess and its feedback."""

    attempt: int
    guess: tuple[str, ...]
    feedback: Feedback

    def guess_string(self) -> str:
        return "".join(self.guess)


@dataclass(frozen=True)
class GameState:
    """Read-only snapshot of a game. The secret is None while in progress."""

    attempts_used: int
    attempts_max: int
    history: tuple[HistoryEntry, ...]
    status: GameStatus
    secret: str | None = None

    @property
    def is_over(self) -> bool:
        return self.status.is_terminal

    @property
    def is_won(self) -> bool:
        return self.status is GameStatus.WON

    @property
    def remaining_attempts(self) -> int:
        return max(0, self.attempts_max - self.attempts_used)

    @property
    def last_feedback(self) -> Feedback | None:
        return self.history[-1].feedback if self.history else None
