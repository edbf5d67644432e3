"""Fetching a random five-letter word from a web service."""

import json
import urllib.error
import urllib.request

DEFAULT_URL = "https://random-word-api.herokuapp.com/word?length=5"


class WordFetchError(Exception):
    """Raised when no word could be obtained from the service."""


def parse_word_response(body) -> str:
    """Return the first word of a JSON array of strings."""
    try:
        result = json.loads(body)
    except (json.JSONDecodeError, UnicodeDecodeError) as err:
        raise WordFetchError(f"invalid response: {err}") from err
    if not isinstance(result, list) or not result:
        raise WordFetchError("response holds no words")
    word = result[0]
    if not isinstance(word, str):
        raise WordFetchError("response holds no words")
    return word


def get_random_word(url: str = DEFAULT_URL, timeout: float = 10.0) -> str:
    """Request a word from *url* and return it."""
    try:
        with urllib.request.urlopen(url, timeout=timeout) as response:
            body = response.read()
    except urllib.error.HTTPError as err:
        try:
            body = err.read()
        finally:
            err.close()
    except (urllib.error.URLError, OSError) as err:
        raise WordFetchError(f"request failed: {err}") from err
    return parse_word_response(body)