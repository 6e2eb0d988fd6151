import pytest

from game.errors import GuessError, InvalidColor, InvalidLength
from game.guess import Guess


def test_parse_is_case_insensitive():
    assert Guess.parse("rgyb").sequence == ["R", "G", "Y", "B"]


def test_parse_strips_whitespace():
    assert Guess.parse("  R G y b \n").as_string() == "RGYB"


@pytest.mark.parametrize("raw", ["RGB", "RGBYY", ""])
def test_invalid_length(raw):
    with pytest.raises(InvalidLength) as exc:
        Guess.parse(raw)
    assert exc.value.expected == 4
    assert exc.value.actual == len(raw)
    assert "Code length must be 4" in str(exc.value)


def test_invalid_color_names_symbol_and_position():
    with pytest.raises(InvalidColor) as exc:
        Guess.parse("RGBX")
    assert exc.value.symbol == "X"
    assert exc.value.position == 3
    assert "Invalid color 'X'" in str(exc.value)


def test_length_checked_before_color():
    with pytest.raises(InvalidLength):
        Guess.parse("XX")


def test_errors_are_value_errors():
    assert issubclass(InvalidLength, GuessError)
    assert issubclass(InvalidColor, ValueError)


def test_non_strict_validation():
    assert Guess("RGBY").is_valid
    assert not Guess("RGBQ").is_valid
    assert Guess("RGBQ").validate(strict=False) is False
