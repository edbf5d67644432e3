"""Terminal output for the Wordle game."""

import sys
from string import ascii_lowercase

from .logic import LetterStatus

GREEN_COLOR = "\033[1;42m"
YELLOW_COLOR = "\033[1;43m"
GRAY_COLOR = "\033[1;47m"
RESET_COLOR = "\033[0m"

_RULE = "=" * 26

_COLORS = {
    LetterStatus.GREEN: GREEN_COLOR,
    LetterStatus.YELLOW: YELLOW_COLOR,
    LetterStatus.GRAY: GRAY_COLOR,
}


def color_for_status(status) -> str:
    """Return the ANSI background colour for *status*, or the reset code."""
    return _COLORS.get(status, RESET_COLOR)


def _paint(letter: str, status) -> str:
    return f"{color_for_status(status)}{letter}{RESET_COLOR} "


def format_guess(feedback) -> str:
    """Render a scored guess as coloured letters, each followed by a space."""
    return "".join(_paint(item.letter, item.status) for item in feedback)


def format_keyboard(keyboard: dict) -> str:
    """Render the alphabet in two rows, colouring letters already tried."""
    parts = ["\nKeyboard:\n"]
    for ch in ascii_lowercase:
        parts.append(_paint(ch, keyboard[ch]) if ch in keyboard else f"{ch} ")
        if ch in ("m", "z"):
            parts.append("\n")
    parts.append("\n")
    return "".join(parts)


def _stream(out):
    return sys.stdout if out is None else out


def print_guess_with_colors(feedback, out=None) -> None:
    _stream(out).write(format_guess(feedback) + "\n")


def print_keyboard(keyboard: dict, out=None) -> None:
    _stream(out).write(format_keyboard(keyboard))


def show_welcome_message(out=None) -> None:
    _stream(out).write(
        f"{_RULE}\n    Welcome to Wordle!    \n{_RULE}\nGuess the 5-letter word.\n\n"
    )


def show_win_message(secret_word: str, tries: int, out=None) -> None:
    _stream(out).write(
        f"\n{_RULE}\n🎉 You won in {tries} tries!\nThe word was: {secret_word}\n{_RULE}\n"
    )


def show_lose_message(secret_word: str, out=None) -> None:
    _stream(out).write(
        f"\n{_RULE}\n💀 Game Over!\nThe word was: {secret_word}\n{_RULE}\n"
    )