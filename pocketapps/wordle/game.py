"""Reading guesses from the player."""

import sys

from .logic import WORD_LENGTH


def scan_word(stream=None, out=None) -> str:
    """Prompt until a word of WORD_LENGTH letters is entered; return it lower-cased.

    Raises EOFError when the input runs out.
    """
    stream = sys.stdin if stream is None else stream
    out = sys.stdout if out is None else out
    while True:
        out.write(f"Enter {WORD_LENGTH} letter word: ")
        out.flush()
        line = stream.readline()
        if not line:
            raise EOFError("no more input")
        word = line.removesuffix("\n").lower()
        if len(word) != WORD_LENGTH:
            out.write("Invalid word length\n")
            continue
        return word