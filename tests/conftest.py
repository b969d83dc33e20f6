"""
Shared fixtures: deterministic word sources, an in-memory store and a
Flask app wired to fresh services.
"""

import os
import tempfile

# Keep test logs out of the working tree; must run before dueto is imported
os.environ.setdefault('LOG_DIR', tempfile.mkdtemp(prefix='dueto-logs-'))

import pytest

from dueto import create_app
from dueto.config import TestingConfig
from dueto.services.game_service import GameService, initialize_game_service
from dueto.services.ranking_service import initialize_ranking_service
from dueto.services.storage import MemoryStateStore
from dueto.services.word_source import WordSource

SECRET_1 = 'sabor'
SECRET_2 = 'mente'

DICTIONARY = [
    'sabor', 'mente', 'abobo', 'noite', 'papel', 'carro', 'lugar',
    'texto', 'risco', 'troca', 'claro', 'doido'
]


class FixedWordSource(WordSource):
    """Hands out the given pairs in order, repeating the last one."""

    def __init__(self, pairs=None, words=None):
        self.pairs = list(pairs or [(SECRET_1, SECRET_2)])
        self.words = set(words if words is not None else DICTIONARY)
        self.calls = 0

    def is_known_word(self, word):
        return word in self.words

    def get_word_pair(self):
        pair = self.pairs[min(self.calls, len(self.pairs) - 1)]
        self.calls += 1
        return pair


def type_word(service, word):
    for letter in word:
        service.append_letter(letter)


def play(service, word):
    type_word(service, word)
    return service.submit_guess()


@pytest.fixture
def store():
    return MemoryStateStore()


@pytest.fixture
def word_source():
    return FixedWordSource()


@pytest.fixture
def game_service(word_source, store):
    service = GameService(word_source, store)
    service.new_round()
    return service


@pytest.fixture
def app(word_source, store):
    initialize_game_service(word_source, store)
    initialize_ranking_service(store)
    app, socketio = create_app(TestingConfig)
    yield app


@pytest.fixture
def client(app):
    return app.test_client()
