# Configuration: colors, code length, attempts, display.
DEFAULT_RULES = {
    "code_length": 4,  # Number of pegs in the code
    "max_attempts": 10,  # Number of guesses per game
    "colors": [
        "R",
        "G",
        "B",
        "Y",
        "M",
        "C",
    ],  # Default color set (Red, Green, Blue, Yellow, Magenta, Cyan)
    "display": {
        "color_names": {
            "R": "Red",
            "G": "Green",
            "B": "Blue",
            "Y": "Yellow",
            "M": "Magenta",
            "C": "Cyan",
        },
        "fore_map": {  # colorama Fore names, only used by the terminal ui
            "R": "RED",
            "G": "GREEN",
            "B": "BLUE",
            "Y": "YELLOW",
            "M": "MAGENTA",
            "C": "CYAN",
        },
    },
}
