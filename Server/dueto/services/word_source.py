"""
Word Sources

Supply the pair of secret words for a round and the dictionary guesses are
checked against. The static source is always available; the Gemini source
asks the generative API for a fresh pair and falls back to the static list
whenever anything goes wrong.
"""

import random
import re
from typing import Iterable, List, Optional, Set, Tuple

import requests

from ..config.game_settings import WORD_LIST, is_well_formed_word, validate_word_list_integrity
from ..utils.game_logger import game_logger

GEMINI_API_URL = 'https://generativelanguage.googleapis.com/v1beta/models/{model}:generateContent'

GEMINI_PROMPT = (
    "Generate two different common Portuguese words with exactly 5 letters each "
    "for a Wordle-style game. Use only letters without accents and make the words "
    "unrelated to each other. Return only the two words separated by a comma, "
    "in lowercase, with no explanation or extra text. For example: \"teste,mundo\""
)


class WordSource:
    """Interface for anything that can start a round and validate guesses."""

    def is_known_word(self, word: str) -> bool:
        raise NotImplementedError

    def get_word_pair(self) -> Tuple[str, str]:
        raise NotImplementedError


class StaticWordSource(WordSource):
    """
    Fixed word pool. Random picks are O(1) via index sampling; membership is a
    set lookup.
    """

    def __init__(self, words: Optional[Iterable[str]] = None, rng: Optional[random.Random] = None):
        pool = [word.strip().lower() for word in (words if words is not None else WORD_LIST)]
        pool = list(dict.fromkeys(pool))
        validate_word_list_integrity(pool)

        self._words: List[str] = pool
        self._known: Set[str] = set(pool)
        self._rng = rng or random.Random()

    def __len__(self) -> int:
        return len(self._words)

    @property
    def words(self) -> List[str]:
        return self._words.copy()

    def is_known_word(self, word: str) -> bool:
        return word in self._known

    def add_word(self, word: str) -> bool:
        """Adds a well-formed word to the pool. Returns False if it was already there."""
        if not is_well_formed_word(word) or word in self._known:
            return False
        self._words.append(word)
        self._known.add(word)
        return True

    def get_word_pair(self) -> Tuple[str, str]:
        # sample() draws distinct indices and the pool has no duplicates
        word1, word2 = self._rng.sample(self._words, 2)
        return word1, word2


class GeminiWordSource(WordSource):
    """Word pair generator backed by the Gemini REST API."""

    def __init__(self,
                 api_key: str,
                 fallback: Optional[StaticWordSource] = None,
                 model: str = 'gemini-1.5-pro',
                 timeout: float = 10,
                 session=None):
        """
        Args:
            api_key: Gemini API key
            fallback: Static source used on any failure, and as the dictionary
            model: Gemini model name
            timeout: Request timeout in seconds
            session: requests.Session (or compatible) used for the call
        """
        if not api_key:
            raise ValueError("Gemini API key is required")

        self.api_key = api_key
        self.fallback = fallback if fallback is not None else StaticWordSource()
        self.model = model
        self.timeout = timeout
        self.session = session or requests.Session()

    def is_known_word(self, word: str) -> bool:
        return self.fallback.is_known_word(word)

    def get_word_pair(self) -> Tuple[str, str]:
        try:
            words = self._generate_words()
        except (requests.RequestException, ValueError, KeyError, IndexError, TypeError, AttributeError) as e:
            game_logger.logger.warning(f"Word generation failed, using static word list: {e}")
            return self.fallback.get_word_pair()

        for word in words:
            self.fallback.add_word(word)

        game_logger.logger.info(f"Generated word pair from {self.model}")
        return words[0], words[1]

    def _generate_words(self) -> Tuple[str, str]:
        """
        Calls the API and parses its answer.

        Raises:
            requests.RequestException: On HTTP or network failure
            ValueError: If the answer is not two distinct 5-letter words
            KeyError, IndexError, TypeError: If the response body is malformed
        """
        response = self.session.post(
            GEMINI_API_URL.format(model=self.model),
            headers={
                'Content-Type': 'application/json',
                'x-goog-api-key': self.api_key
            },
            json={
                'contents': [{'parts': [{'text': GEMINI_PROMPT}]}],
                'generationConfig': {
                    'temperature': 0.4,
                    'maxOutputTokens': 20
                }
            },
            timeout=self.timeout
        )
        response.raise_for_status()

        data = response.json()
        text = data['candidates'][0]['content']['parts'][0]['text']
        return parse_word_pair(text)


def parse_word_pair(text: str) -> Tuple[str, str]:
    """
    Extracts "word1,word2" from generated text.

    Raises:
        ValueError: If the text does not hold two distinct 5-letter words
    """
    cleaned = re.sub(r'[^a-z,]', '', text.strip().lower())
    words = cleaned.split(',')

    if len(words) != 2 or not all(is_well_formed_word(word) for word in words):
        raise ValueError(f"Generated words don't meet requirements: {words}")
    if words[0] == words[1]:
        raise ValueError(f"Generated words are identical: {words}")

    return words[0], words[1]


def build_word_source(config_class) -> WordSource:
    """Gemini when GEMINI_API_KEY is configured, the static list otherwise."""
    static_source = StaticWordSource()
    api_key = getattr(config_class, 'GEMINI_API_KEY', None)
    if not api_key:
        return static_source

    return GeminiWordSource(
        api_key,
        fallback=static_source,
        model=getattr(config_class, 'GEMINI_MODEL', 'gemini-1.5-pro'),
        timeout=getattr(config_class, 'WORD_SOURCE_TIMEOUT_SECONDS', 10)
    )
