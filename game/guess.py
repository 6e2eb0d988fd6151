from .errors import InvalidColor, InvalidLength
from .ruleset import DEFAULT_RULES


class Guess:
    """
        Represents a single player guess.
    Attributes:
        sequence (list[str]): The guessed sequence of colors.
        rules (dict): The ruleset for validation."""

    def __init__(self, sequence: list[str] | str | None, rules=None):
        """
        Initialize a Guess instance. Input is normalized but not validated;
        use Guess.parse for raw player input.
        Args:
            sequence (list[str] | str | None): The guessed sequence.
            rules (dict, optional): The ruleset for validation. Defaults to DEFAULT_RULES.
        """

        # --- Input normalization ---
        if isinstance(sequence, str):
            self.sequence = [c.upper() for c in "".join(sequence.split())]
        elif sequence is None:
            self.sequence = []
        else:
            self.sequence = [c.upper() for c in sequence]

        self.rules = rules or DEFAULT_RULES

    @classmethod
    def parse(cls, raw, rules=None) -> "Guess":
        """
        Build a validated Guess from raw input (e.g. 'rgyb').
        Raises:
            InvalidLength: If the number of symbols differs from code_length.
            InvalidColor: On the first symbol outside the color set.
        """
        guess = cls(raw, rules=rules)
        guess.validate()
        return guess

    def validate(self, strict: bool = True):
        """
        Check if the guess follows the rules (length, valid colors).

        Args:
            strict (bool): If True, raise a GuessError on invalid guess.
        Returns:
            bool: True if valid, False otherwise.
        """

        def fail(error) -> bool:
            if strict:
                raise error
            return False

        # Length check
        length = self.rules["code_length"]
        if len(self.sequence) != length:
            return fail(InvalidLength(length, len(self.sequence)))

        # Color check
        colors = self.rules["colors"]
        for position, color in enumerate(self.sequence):
            if color not in colors:
                return fail(InvalidColor(color, position, colors))

        return True

    @property
    def is_valid(self):
        return self.validate(strict=False)

    def as_string(self):
        """
        Return a string representation of the guess (e.g. 'RGBY').
        Returns:
            str: The guess as a string."""
        return "".join(self.sequence) if self.sequence else "EMPTY"

    def __str__(self):
        return self.as_string()
