"""
Game Configuration Constants Module

Game rules and the static fallback word list. The list is used whenever the
word generator is unavailable and as the dictionary guesses are checked
against.
"""

import json
import os
from typing import List, Final

WORD_LENGTH: Final[int] = 5
"""Number of letters in every guess and secret word."""

MAX_ROWS: Final[int] = 6
"""
Maximum number of guess attempts allowed per round.
Type: Final[int] - Immutable to prevent accidental modification
"""

# Fixed logical keys for the durable store
STORAGE_KEY_GAME: Final[str] = 'dueto-game'
STORAGE_KEY_RANKING: Final[str] = 'dueto-ranking'

ALPHABET: Final[str] = 'abcdefghijklmnopqrstuvwxyz'


def is_well_formed_word(word) -> bool:
    """True for a 5-letter string made only of a..z."""
    return (
        isinstance(word, str)
        and len(word) == WORD_LENGTH
        and all(char in ALPHABET for char in word)
    )


def _load_word_list() -> List[str]:
    """
    Load the static word list from words.json.

    Returns:
        List[str]: List of lowercase 5-letter words

    Raises:
        FileNotFoundError: If words.json file is not found
        ValueError: If JSON is malformed or the list fails validation
    """
    config_dir = os.path.dirname(os.path.abspath(__file__))
    json_file_path = os.path.join(config_dir, 'words.json')

    try:
        with open(json_file_path, 'r', encoding='utf-8') as f:
            word_list = json.load(f)
    except FileNotFoundError:
        raise FileNotFoundError(f"Word list file not found: {json_file_path}")
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in words.json: {e}")

    if not isinstance(word_list, list):
        raise ValueError("JSON file must contain an array of words")

    lowercase_words = [str(word).strip().lower() for word in word_list]
    validate_word_list_integrity(lowercase_words)
    return lowercase_words


def validate_word_list_integrity(words: List[str]) -> bool:
    """
    Validates a word list before it is used as a word source.

    Checks that every entry is a 5-letter a..z word, that there are no
    duplicates and that at least two words exist, so a pair of distinct
    secrets can always be drawn.

    Raises:
        ValueError: If any validation check fails with detailed error message
    """
    if len(words) < 2:
        raise ValueError("Word list must contain at least two words")

    for index, word in enumerate(words):
        if not is_well_formed_word(word):
            raise ValueError(f"Word at index {index} '{word}' is not a 5-letter lowercase word")

    if len(words) != len(set(words)):
        duplicates = sorted({word for word in words if words.count(word) > 1})
        raise ValueError(f"Duplicate words found in word list: {duplicates}")

    return True


# Curated word database loaded from JSON file
WORD_LIST: Final[List[str]] = _load_word_list()
