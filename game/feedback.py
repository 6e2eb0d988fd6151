from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Sequence


@dataclass(frozen=True)
class Feedback:
    """
    Result of scoring a guess against the secret code.
    Attributes:
        exact (int): Correct color in the correct position.
        color (int): Correct color in the wrong position.
    """

    exact: int
    color: int

    def as_tuple(self) -> tuple[int, int]:
        return (self.exact, self.color)

    def is_solved(self, code_length: int) -> bool:
        return self.exact == code_length


def compute_feedback(secret: Sequence[str], guess: Sequence[str]) -> Feedback:
    """
    Compare a secret with a guess of the same length.

    Args:
        secret (Sequence[str]): The hidden code.
        guess (Sequence[str]): The validated guess.

    Returns:
        Feedback: exact and color match counts.

    Notes:
        Exact matches are counted first and removed from both sides. The
        color count is the multiset intersection of what remains, so one
        secret peg is never matched by two guess pegs.
    """

    if len(secret) != len(guess):
        raise ValueError(
            f"Cannot compare codes of length {len(secret)} and {len(guess)}."
        )

    exact = 0
    secret_remaining = Counter()
    guess_remaining = Counter()

    # First pass: exact positions
    for s, g in zip(secret, guess):
        if s == g:
            exact += 1
        else:
            secret_remaining[s] += 1
            guess_remaining[g] += 1

    # Second pass: colors left over on both sides
    color = sum((secret_remaining & guess_remaining).values())

    return Feedback(exact=exact, color=color)
