"""
Testing leaderboard ordering and score submission.
"""

import pytest

from dueto.config.game_settings import STORAGE_KEY_RANKING
from dueto.models.errors import ScoreSubmissionError
from dueto.models.game import RoundState, ScoreEntry
from dueto.services.ranking_service import RankingService, merge_sort
from dueto.services.storage import MemoryStateStore


def entry(name, acertos, attempts):
    return ScoreEntry(name=name, attempts=attempts, acertos=acertos)


def finished_round(solved1=True, solved2=False, rows=6):
    return RoundState(
        secret_word1='sabor',
        secret_word2='mente',
        attempts=['noite'] * rows,
        current_row=rows,
        word_solved1=solved1,
        word_solved2=solved2,
        game_over=True,
    )


def test_sorts_by_acertos_then_attempts():
    entries = [entry('ana', 1, 4), entry('bia', 2, 6), entry('caio', 2, 3)]

    result = merge_sort(entries)

    assert [(e.acertos, e.attempts) for e in result] == [(2, 3), (2, 6), (1, 4)]


def test_equal_entries_keep_input_order():
    entries = [
        entry('first', 2, 4),
        entry('x', 0, 6),
        entry('second', 2, 4),
        entry('y', 1, 5),
        entry('third', 2, 4),
    ]

    result = merge_sort(entries)

    assert [e.name for e in result] == ['first', 'second', 'third', 'y', 'x']


def test_empty_and_single_inputs():
    assert merge_sort([]) == []
    only = [entry('ana', 1, 4)]
    assert merge_sort(only) == only


def test_already_sorted_input_is_unchanged():
    entries = [entry('a', 2, 2), entry('b', 2, 5), entry('c', 1, 3), entry('d', 0, 6)]
    assert merge_sort(entries) == entries


def test_input_is_not_mutated():
    entries = [entry('ana', 0, 6), entry('bia', 2, 2)]
    snapshot = list(entries)

    result = merge_sort(entries)

    assert entries == snapshot
    assert result is not entries


def test_submit_score_persists_sorted_ranking():
    store = MemoryStateStore()
    service = RankingService(store)

    service.submit_score('ana', finished_round(solved1=True, solved2=False, rows=6))
    ranking = service.submit_score('  bia ', finished_round(solved1=True, solved2=True, rows=4))

    assert [(e.name, e.acertos, e.attempts) for e in ranking] == [('bia', 2, 4), ('ana', 1, 6)]
    assert store.load(STORAGE_KEY_RANKING) == [
        {'name': 'bia', 'attempts': 4, 'acertos': 2},
        {'name': 'ana', 'attempts': 6, 'acertos': 1},
    ]
    assert service.get_ranking() == ranking


def test_submit_score_requires_name():
    service = RankingService(MemoryStateStore())
    with pytest.raises(ScoreSubmissionError):
        service.submit_score('   ', finished_round())


def test_submit_score_requires_finished_round():
    service = RankingService(MemoryStateStore())
    running = RoundState(secret_word1='sabor', secret_word2='mente')

    with pytest.raises(ScoreSubmissionError):
        service.submit_score('ana', running)
    assert service.get_ranking() == []


def test_get_ranking_sorts_stored_entries():
    store = MemoryStateStore()
    store.save(STORAGE_KEY_RANKING, [
        {'name': 'ana', 'attempts': 4, 'acertos': 1},
        {'name': 'bia', 'attempts': 6, 'acertos': 2},
    ])

    ranking = RankingService(store).get_ranking()

    assert [e.name for e in ranking] == ['bia', 'ana']


def test_clear_ranking():
    store = MemoryStateStore()
    service = RankingService(store)
    service.submit_score('ana', finished_round())

    service.clear_ranking()

    assert service.get_ranking() == []
    assert store.load(STORAGE_KEY_RANKING) is None
