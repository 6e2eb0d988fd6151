# Command-line interface (text-based play)

from game.board import Board
from game.errors import GuessError
from game.ruleset import DEFAULT_RULES
from ui import render


def read_line(prompt):
    """Read one line from stdin; None on end of input."""
    try:
        return input(prompt).strip()
    except EOFError:
        return None


def play_again():
    answer = read_line("\n🔄 Play again? (y/n): ")
    return answer is not None and answer.lower() in ("y", "yes")


def play_game(board, use_color=True):
    """
    Run one game on the given board.
    Returns:
        bool: False if the player quit (or input ended), True otherwise.
    """
    rules = board.rules

    while not board.is_over:
        user_input = read_line("\n🎯 Enter your guess (or 'quit' to exit): ")

        if user_input is None or user_input.lower() == "quit":
            secret = board.reveal_code(force=True)
            print("\n👋 Thanks for playing!")
            print(
                f"  The code was: {render.format_code(secret, rules, use_color)}"
                f" ({secret})"
            )
            return False

        try:
            feedback, state = board.submit_guess(user_input)
        except GuessError as e:
            print(f"  ❌ {e}")
            continue

        print(render.format_attempt(state.history[-1], rules, use_color))
        if not state.is_over:
            print(render.hint_message(feedback))
            if render.running_out(state):
                print("  ⏰ Running out of guesses!")

    state = board.get_current_state()
    secret = render.format_code(state.secret, rules, use_color)
    print("\n═══════════════════════════════════════════")
    if state.is_won:
        noun = "guess" if state.attempts_used == 1 else "guesses"
        print("🎉 CONGRATULATIONS! 🎉")
        print(f"You cracked the code in {state.attempts_used} {noun}!")
        print(render.win_rating(state.attempts_used))
    else:
        print("💥 GAME OVER!")
        print(f"You've used all {state.attempts_max} attempts.")
        print(f"  The code was: {secret} ({state.secret})")
        print("\n🧠 Better luck next time! Each game is a new puzzle.")
    print("═══════════════════════════════════════════")
    return True


def gameloop(rules=None, rng=None, use_color=True):
    rules = rules or DEFAULT_RULES
    board = Board(rules=rules, rng=rng)

    while True:
        print(render.welcome_banner(rules, use_color))
        if not play_game(board, use_color):
            return
        if not play_again():
            print("\n👋 Thanks for playing CipherMind!")
            print("Remember: Logic conquers all codes! 🧩\n")
            return
        board.reset()
