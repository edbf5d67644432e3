"""A taxi ride HTTP API and a terminal Wordle game."""

__version__ = "0.1.0"