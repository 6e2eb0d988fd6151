from __future__ import annotations

import logging
import random

from .errors import GameOverError, GuessError
from .feedback import Feedback
from .guess import Guess
from .ruleset import DEFAULT_RULES
from .secret_code import Code
from state.game_state import GameState, GameStatus, HistoryEntry

logger = logging.getLogger(__name__)


class Board:
    """Round engine: owns the secret code, the attempt counter and the guess history."""

    def __init__(self, rules=None, rng: random.Random | None = None):
        """Initialize the board with a given ruleset and start a game."""
        self.rules = rules or DEFAULT_RULES
        self.code_length = self.rules["code_length"]
        self.max_attempts = self.rules.get("max_attempts", 10)
        self.rng = rng
        self.initialize_game()

    def initialize_game(self):
        """Set up a new game: generate a secret code and reset state."""
        self.secret_code = Code.random(rules=self.rules, rng=self.rng)
        self.history: list[HistoryEntry] = []
        self.current_attempt = 0
        self.status = GameStatus.IN_PROGRESS

    def reset(self):
        """Discard the current game and start a new one with a fresh secret."""
        self.initialize_game()

    @property
    def is_over(self):
        return self.status.is_terminal

    @property
    def is_won(self):
        return self.status is GameStatus.WON

    def submit_guess(self, raw) -> tuple[Feedback, GameState]:
        """
        Validate raw input, score it and advance the game.

        Args:
            raw (str | list[str]): The player's guess, e.g. 'rgyb'.

        Returns:
            tuple[Feedback, GameState]: The feedback and a snapshot taken
            after the update.

        Raises:
            GuessError: Invalid length or color. The game is not modified.
            GameOverError: The game already ended.
        """

        if self.is_over:
            raise GameOverError(
                f"Game is already {self.status.value}; start a new game."
            )

        try:
            guess = Guess.parse(raw, rules=self.rules)
        except GuessError as e:
            logger.debug("Rejected guess %r: %s", raw, e)
            raise

        feedback = self.secret_code.compare_with(guess)

        self.current_attempt += 1
        self.history.append(
            HistoryEntry(
                attempt=self.current_attempt,
                guess=tuple(guess.sequence),
                feedback=feedback,
            )
        )
        logger.debug(
            "Attempt %d: %s -> %d exact, %d color",
            self.current_attempt,
            guess.as_string(),
            feedback.exact,
            feedback.color,
        )

        self.check_game_over(feedback)
        return feedback, self.get_current_state()

    def check_game_over(self, feedback: Feedback):
        """Check if the game is finished (win or all attempts used)."""
        if feedback.is_solved(self.code_length):
            self.status = GameStatus.WON
            logger.info("Game won in %d attempts", self.current_attempt)
        elif self.current_attempt >= self.max_attempts:
            self.status = GameStatus.LOST
            logger.info("Game lost after %d attempts", self.current_attempt)

    def get_feedback_history(self):
        """Return the full history as (guess string, (exact, color)) pairs."""
        return [
            (entry.guess_string(), entry.feedback.as_tuple())
            for entry in self.history
        ]

    def reveal_code(self, force=False):
        """Return the secret code once the game has ended (or when forced)."""
        if self.is_over or force:
            return self.secret_code.as_string()
        return None

    def remaining_attempts(self):
        """Return how many guesses are left."""
        return max(0, self.max_attempts - self.current_attempt)

    def get_current_state(self):
        """Return a GameState snapshot for rendering."""
        return GameState(
            attempts_used=self.current_attempt,
            attempts_max=self.max_attempts,
            history=tuple(self.history),
            status=self.status,
            secret=self.reveal_code(),
        )
