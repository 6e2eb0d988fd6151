from __future__ import annotations

import logging
import random
from typing import Sequence

from .feedback import Feedback, compute_feedback
from .ruleset import DEFAULT_RULES

logger = logging.getLogger(__name__)


def generate(
    length: int, alphabet: Sequence[str], rng: random.Random | None = None
) -> list[str]:
    """
    Draw a random code, each position independently and uniformly.

    Args:
        length (int): Number of pegs, at least 1.
        alphabet (Sequence[str]): The color symbols to draw from.
        rng (random.Random | None): Random source. Defaults to the
        module-level generator.

    Returns:
        list[str]: The generated code. Colors may repeat.
    """

    if not isinstance(length, int) or length < 1:
        raise ValueError(f"Code length must be at least 1, but got {length}.")
    colors = list(dict.fromkeys(alphabet))
    if not colors:
        raise ValueError("Color alphabet must not be empty.")

    source = rng if rng is not None else random
    return source.choices(colors, k=length)


class Code:
    """
        Represents the secret code for the game.
    Attributes:
        sequence (list[str]): The sequence of colors representing the code.
        rules (dict): The ruleset the code belongs to."""

    def __init__(self, sequence=None, rules=None):
        """
        Initialize a Code instance.

        Args:
            sequence (list or str or None): The color symbols of the code.
            rules (dict or None): Reference to the ruleset (defines length
            and colors).
        """

        self.rules = rules or DEFAULT_RULES
        if isinstance(sequence, str):
            self.sequence = [c.upper() for c in sequence.replace(" ", "")]
        elif sequence is None:
            self.sequence = []
        else:
            self.sequence = [c.upper() for c in sequence]

    @classmethod
    def random(cls, rules=None, rng: random.Random | None = None) -> "Code":
        """Generate a random code according to the rules."""
        rules = rules or DEFAULT_RULES
        sequence = generate(rules["code_length"], rules["colors"], rng=rng)
        logger.debug("Generated secret code of length %d", len(sequence))
        return cls(sequence, rules=rules)

    def compare_with(self, other) -> Feedback:
        """
        Compute feedback for a guess (a Guess, Code or plain sequence).

        Returns:
            Feedback: exact and color matches against this code.
        """

        sequence = getattr(other, "sequence", other)
        return compute_feedback(self.sequence, sequence)

    def as_string(self):
        """
        Return a string representation of the code (e.g. 'RGBY').
        Returns:
            str: The code as a string.
        """
        return "".join(self.sequence) if self.sequence else "EMPTY"

    def __str__(self):
        return self.as_string()
