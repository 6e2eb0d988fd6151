# Text rendering for the terminal: colored pegs, feedback lines, hints.
from __future__ import annotations

from colorama import Fore, Style

from game.ruleset import DEFAULT_RULES

PEG = "●"


def colored_peg(color, rules=None, use_color=True):
    """Return one peg for a color symbol, colored when enabled."""
    rules = rules or DEFAULT_RULES
    if not use_color:
        return color
    fore = rules["display"]["fore_map"].get(color)
    if fore is None:
        return PEG
    return f"{getattr(Fore, fore)}{PEG}{Style.RESET_ALL}"


def format_code(sequence, rules=None, use_color=True):
    return " ".join(colored_peg(c, rules, use_color) for c in sequence)


def format_feedback(feedback):
    plural = "" if feedback.color == 1 else "s"
    return f"{feedback.exact} exact, {feedback.color} color{plural}"


def format_attempt(entry, rules=None, use_color=True):
    """Render a history entry as two lines: the guess and its feedback."""
    return (
        f"  Guess {entry.attempt}: {format_code(entry.guess, rules, use_color)}\n"
        f"  → {format_feedback(entry.feedback)}"
    )


def hint_message(feedback):
    """Flavor text keyed off the feedback of the last guess."""
    if feedback.exact == 0 and feedback.color == 0:
        return "  💭 Hmm, try completely different colors!"
    if feedback.exact == 0:
        return "  💡 You have the right colors, just wrong positions!"
    if feedback.exact == 1:
        return "  🎯 Getting warmer! One's in the right spot!"
    if feedback.exact == 2:
        return "  🔥 Nice! Two are perfectly placed!"
    if feedback.exact == 3:
        return "  ⚡ So close! Just one more to go!"
    return "  🎲 Keep analyzing the patterns..."


def running_out(state):
    return not state.is_over and state.attempts_used >= state.attempts_max - 2


def win_rating(attempts):
    if attempts == 1:
        return "🏆 INCREDIBLE! A hole-in-one!"
    if attempts <= 3:
        return "⭐ AMAZING! You're a master codebreaker!"
    if attempts <= 6:
        return "✨ EXCELLENT! Great logical thinking!"
    return "👍 Well done!"


def welcome_banner(rules=None, use_color=True):
    rules = rules or DEFAULT_RULES
    names = rules["display"]["color_names"]
    legend = "  ".join(
        f"{colored_peg(c, rules, use_color)} = {c} ({names.get(c, c)})"
        for c in rules["colors"]
    )
    example = "".join(rules["colors"][: rules["code_length"]])
    lines = [
        "",
        "╔════════════════════════════════════════════╗",
        "║               CIPHERMIND                   ║",
        "║    The Ultimate Code-Breaking Challenge    ║",
        "╚════════════════════════════════════════════╝",
        "",
        "How to Play:",
        f"  • I've created a secret {rules['code_length']}-color code",
        "  • Available colors:",
        f"    {legend}",
        f"  • You have {rules.get('max_attempts', 10)} guesses to crack it!",
        "  • After each guess, I'll tell you:",
        "    - How many are EXACT (right color, right position)",
        "    - How many are COLOR matches (right color, wrong position)",
        "",
        f"Example: enter your guess as {rules['code_length']} letters, like: {example}",
    ]
    return "\n".join(lines)
