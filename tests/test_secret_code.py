import random
from collections import Counter

import pytest

from game.feedback import Feedback
from game.guess import Guess
from game.ruleset import DEFAULT_RULES
from game.secret_code import Code, generate


def test_generate_length_and_alphabet():
    code = generate(4, DEFAULT_RULES["colors"])
    assert len(code) == 4
    assert all(c in DEFAULT_RULES["colors"] for c in code)


def test_generate_is_reproducible_with_seed():
    a = generate(4, "RGBYMC", rng=random.Random(42))
    b = generate(4, "RGBYMC", rng=random.Random(42))
    assert a == b


def test_generate_allows_repeats():
    # only one color available, so every position repeats it
    assert generate(5, ["R"]) == ["R"] * 5


def test_generate_roughly_uniform_per_position():
    rng = random.Random(1234)
    colors = DEFAULT_RULES["colors"]
    counts = [Counter() for _ in range(4)]
    for _ in range(6000):
        for i, c in enumerate(generate(4, colors, rng=rng)):
            counts[i][c] += 1
    for position in counts:
        assert set(position) == set(colors)
        for n in position.values():
            assert 800 < n < 1200


@pytest.mark.parametrize("length", [0, -1])
def test_generate_rejects_bad_length(length):
    with pytest.raises(ValueError):
        generate(length, "RGB")


def test_generate_rejects_empty_alphabet():
    with pytest.raises(ValueError):
        generate(4, [])


def test_code_normalizes_input():
    assert Code("r g b y").sequence == ["R", "G", "B", "Y"]
    assert Code(["r", "g"]).sequence == ["R", "G"]
    assert Code().as_string() == "EMPTY"


def test_code_random_uses_rules():
    rules = dict(DEFAULT_RULES, code_length=6)
    code = Code.random(rules=rules, rng=random.Random(3))
    assert len(code.sequence) == 6


def test_compare_with_guess_and_list():
    code = Code("RGBY")
    assert code.compare_with(Guess("YBGR")) == Feedback(0, 4)
    assert code.compare_with(list("RGBM")) == Feedback(3, 0)
