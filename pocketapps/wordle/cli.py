"""Command that plays a game of Wordle in the terminal."""

import argparse
import sys

from .api import DEFAULT_URL, WordFetchError, get_random_word
from .display import (
    print_guess_with_colors,
    print_keyboard,
    show_lose_message,
    show_welcome_message,
    show_win_message,
)
from .game import scan_word
from .logic import check_guess, is_win, update_keyboard_state

MAX_TRIES = 6


def play(secret_word: str, stream=None, out=None):
    """Play one round; return the number of tries on a win, or None on a loss."""
    out = sys.stdout if out is None else out
    keyboard: dict = {}
    for tries in range(1, MAX_TRIES + 1):
        guess = scan_word(stream, out)
        feedback = check_guess(secret_word, guess)
        print_guess_with_colors(feedback, out)
        update_keyboard_state(keyboard, feedback)
        print_keyboard(keyboard, out)
        if is_win(feedback):
            show_win_message(secret_word, tries, out)
            return tries
        out.write(f"Tries left: {MAX_TRIES - tries}\n\n")
    show_lose_message(secret_word, out)
    return None


def main(argv=None) -> None:
    parser = argparse.ArgumentParser(description="Guess the 5-letter word.")
    parser.add_argument("--url", default=DEFAULT_URL, help="word service to query")
    args = parser.parse_args(argv)

    show_welcome_message()
    try:
        secret_word = get_random_word(args.url)
    except WordFetchError as err:
        print("Error fetching word:", err)
        return
    try:
        play(secret_word)
    except EOFError:
        print()


if __name__ == "__main__":
    main()