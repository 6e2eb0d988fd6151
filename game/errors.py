class GuessError(ValueError):
    """Base class for rejected guesses. Never consumes an attempt."""


class InvalidLength(GuessError):
    """
    Raised when a guess does not have exactly code_length symbols.
    Attributes:
        expected (int): The code length required by the rules.
        actual (int): The number of symbols received.
    """

    def __init__(self, expected: int, actual: int):
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Code length must be {expected}, but got {actual}."
        )


class InvalidColor(GuessError):
    """
    Raised when a guess contains a symbol outside the color set.
    Attributes:
        symbol (str): The offending symbol.
        position (int): Zero-based index of the symbol in the guess.
        allowed (list[str]): The colors of the ruleset.
    """

    def __init__(self, symbol: str, position: int, allowed: list[str]):
        self.symbol = symbol
        self.position = position
        self.allowed = list(allowed)
        super().__init__(
            f"Invalid color '{symbol}'. Allowed: {', '.join(self.allowed)}."
        )


class GameOverError(RuntimeError):
    """Raised when a guess is submitted after the game has ended."""
