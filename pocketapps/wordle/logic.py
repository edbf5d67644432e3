"""Scoring of Wordle guesses and tracking of the on-screen keyboard."""

from collections import Counter
from dataclasses import dataclass
from enum import Enum

WORD_LENGTH = 5


class LetterStatus(str, Enum):
    """How a guessed letter relates to the secret word."""

    GREEN = "green"
    YELLOW = "yellow"
    GRAY = "gray"


@dataclass(frozen=True)
class LetterFeedback:
    letter: str
    status: LetterStatus


_STATUS_RANK = {
    LetterStatus.GRAY: 1,
    LetterStatus.YELLOW: 2,
    LetterStatus.GREEN: 3,
}


def check_guess(secret_word: str, guess: str) -> list[LetterFeedback]:
    """Score the first WORD_LENGTH letters of *guess* against *secret_word*.

    Exact matches are green. Remaining letters are yellow while unmatched
    copies of them are left in the secret word, and gray otherwise.
    """
    if len(secret_word) < WORD_LENGTH or len(guess) < WORD_LENGTH:
        raise ValueError(f"words must have at least {WORD_LENGTH} letters")
    secret = secret_word[:WORD_LENGTH]
    attempt = guess[:WORD_LENGTH]

    exact = [g == s for g, s in zip(attempt, secret)]
    remaining = Counter(s for s, hit in zip(secret, exact) if not hit)

    feedback = []
    for letter, hit in zip(attempt, exact):
        if hit:
            status = LetterStatus.GREEN
        elif remaining[letter] > 0:
            status = LetterStatus.YELLOW
            remaining[letter] -= 1
        else:
            status = LetterStatus.GRAY
        feedback.append(LetterFeedback(letter, status))
    return feedback


def is_win(feedback) -> bool:
    """Return True when every letter of the feedback is green."""
    return all(item.status == LetterStatus.GREEN for item in feedback)


def is_better_status(current, new) -> bool:
    """Return True if *new* ranks above *current* (gray < yellow < green)."""
    return _STATUS_RANK.get(new, 0) > _STATUS_RANK.get(current, 0)


def update_keyboard_state(keyboard: dict, feedback) -> dict:
    """Record the best status seen for each letter; updates and returns *keyboard*."""
    for item in feedback:
        if item.letter not in keyboard or is_better_status(keyboard[item.letter], item.status):
            keyboard[item.letter] = item.status
    return keyboard