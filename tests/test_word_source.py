"""
Testing the static and generated word sources.
"""

import random

import pytest
import requests

from dueto.services.word_source import (
    GEMINI_API_URL, GeminiWordSource, StaticWordSource, build_word_source, parse_word_pair
)


class FakeResponse:
    def __init__(self, payload=None, status_code=200):
        self.payload = payload
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error")

    def json(self):
        return self.payload


class FakeSession:
    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.calls = []

    def post(self, url, **kwargs):
        self.calls.append((url, kwargs))
        if self.error is not None:
            raise self.error
        return self.response


def gemini_payload(text):
    return {'candidates': [{'content': {'parts': [{'text': text}]}}]}


@pytest.fixture
def fallback():
    return StaticWordSource(['claro', 'fases', 'gesto'], rng=random.Random(7))


def test_static_pairs_are_always_distinct():
    source = StaticWordSource(['claro', 'fases'], rng=random.Random(1))
    for _ in range(50):
        word1, word2 = source.get_word_pair()
        assert word1 != word2
        assert {word1, word2} == {'claro', 'fases'}


def test_static_default_list_is_loaded():
    source = StaticWordSource()
    assert len(source) > 2
    assert source.is_known_word('sabor')
    assert not source.is_known_word('zzzzz')


def test_static_source_needs_two_words():
    with pytest.raises(ValueError):
        StaticWordSource(['claro'])


def test_static_source_rejects_malformed_words():
    with pytest.raises(ValueError):
        StaticWordSource(['claro', 'fase'])


def test_static_source_normalizes_and_dedupes():
    source = StaticWordSource(['Claro', 'claro ', 'fases'])
    assert source.words == ['claro', 'fases']


def test_add_word(fallback):
    assert fallback.add_word('mundo') is True
    assert fallback.add_word('mundo') is False
    assert fallback.add_word('abc') is False
    assert fallback.is_known_word('mundo')


def test_parse_word_pair_cleans_text():
    assert parse_word_pair(' Teste, Mundo.\n') == ('teste', 'mundo')


@pytest.mark.parametrize('text', ['teste', 'teste,mundo,praia', 'teste,mund', 'teste,teste', ''])
def test_parse_word_pair_rejects_bad_output(text):
    with pytest.raises(ValueError):
        parse_word_pair(text)


def test_gemini_pair_is_used_and_added_to_dictionary(fallback):
    session = FakeSession(FakeResponse(gemini_payload('teste,mundo')))
    source = GeminiWordSource('key', fallback=fallback, model='test-model', session=session)

    assert source.get_word_pair() == ('teste', 'mundo')
    assert source.is_known_word('teste')
    assert source.is_known_word('mundo')

    url, kwargs = session.calls[0]
    assert url == GEMINI_API_URL.format(model='test-model')
    assert kwargs['headers']['x-goog-api-key'] == 'key'
    assert kwargs['timeout'] == 10


@pytest.mark.parametrize('session', [
    FakeSession(error=requests.Timeout('slow')),
    FakeSession(error=requests.ConnectionError('offline')),
    FakeSession(FakeResponse(status_code=500)),
    FakeSession(FakeResponse({'candidates': []})),
    FakeSession(FakeResponse({'unexpected': True})),
    FakeSession(FakeResponse(gemini_payload('teste,teste'))),
    FakeSession(FakeResponse(gemini_payload('uma palavra'))),
])
def test_gemini_failures_fall_back_to_static(fallback, session):
    source = GeminiWordSource('key', fallback=fallback, session=session)

    word1, word2 = source.get_word_pair()

    assert word1 != word2
    assert word1 in fallback.words and word2 in fallback.words


def test_gemini_requires_api_key():
    with pytest.raises(ValueError):
        GeminiWordSource('')


def test_build_word_source_picks_by_config():
    class NoKey:
        GEMINI_API_KEY = None

    class WithKey:
        GEMINI_API_KEY = 'key'
        GEMINI_MODEL = 'gemini-test'
        WORD_SOURCE_TIMEOUT_SECONDS = 3

    assert type(build_word_source(NoKey)) is StaticWordSource

    source = build_word_source(WithKey)
    assert isinstance(source, GeminiWordSource)
    assert source.model == 'gemini-test'
    assert source.timeout == 3
