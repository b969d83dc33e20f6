"""
Testing board tiles and keyboard hints across the two secret words.
"""

from dueto.models.game import LetterState
from dueto.services.evaluation import (
    best_state, build_board, render_row, update_keyboard_states, upgrade_letter_state
)

C = LetterState.CORRECT
P = LetterState.PRESENT
A = LetterState.ABSENT

_RANK = {'absent': 0, 'present': 1, 'correct': 2}


def row_states(board, row):
    return [tile['state'] for tile in board[row]]


def test_full_match_row_is_all_correct():
    assert render_row('sabor', 'sabor') == [C] * 5


def test_boards_are_rendered_independently():
    attempts = ['sabor']
    board1 = build_board(attempts, '', 1, 'sabor')
    board2 = build_board(attempts, '', 1, 'mente')

    assert row_states(board1, 0) == ['correct'] * 5
    # solving word 1 must not colour word 2's board
    assert row_states(board2, 0) == ['absent'] * 5


def test_solved_word_keeps_live_feedback():
    attempts = ['sabor', 'robas']
    board = build_board(attempts, '', 2, 'sabor')

    assert row_states(board, 0) == ['correct'] * 5
    assert row_states(board, 1) == ['present', 'present', 'correct', 'present', 'present']


def test_current_row_shows_pending_then_empty():
    board = build_board(['sabor'], 'me', 1, 'mente')

    assert board[1][0] == {'letter': 'm', 'state': 'tbd'}
    assert board[1][1] == {'letter': 'e', 'state': 'tbd'}
    assert board[1][2] == {'letter': '', 'state': 'empty'}
    for row in range(2, 6):
        assert row_states(board, row) == ['empty'] * 5


def test_board_has_six_rows_of_five_tiles():
    board = build_board([], '', 0, 'sabor')

    assert len(board) == 6
    assert all(len(row) == 5 for row in board)


def test_best_state_precedence():
    assert best_state(A, P) == P
    assert best_state(P, C) == C
    assert best_state(C, A) == C
    assert best_state(A, A) == A


def test_upgrade_never_downgrades():
    assert upgrade_letter_state(None, A) == A
    assert upgrade_letter_state(A, P) == P
    assert upgrade_letter_state(P, C) == C
    assert upgrade_letter_state(C, A) == C
    assert upgrade_letter_state(C, P) == C
    assert upgrade_letter_state(P, A) == P


def test_keyboard_takes_best_of_both_words():
    keyboard = {}
    update_keyboard_states(keyboard, 'abcde', [A, A, A, A, A], [C, P, A, A, A])

    assert keyboard == {
        'a': 'correct',
        'b': 'present',
        'c': 'absent',
        'd': 'absent',
        'e': 'absent',
    }


def test_keyboard_only_holds_guessed_letters():
    keyboard = {}
    update_keyboard_states(keyboard, 'sabor', render_row('sabor', 'mente'), render_row('sabor', 'noite'))

    assert set(keyboard) == set('sabor')


def test_keyboard_never_regresses_over_many_guesses():
    secrets = ('sabor', 'mente')
    guesses = ['robas', 'noite', 'sabor', 'abobo', 'texto', 'mente']
    keyboard = {}
    previous = {}

    for guess in guesses:
        update_keyboard_states(
            keyboard, guess,
            render_row(guess, secrets[0]),
            render_row(guess, secrets[1])
        )
        for letter, state in previous.items():
            assert _RANK[keyboard[letter]] >= _RANK[state]
            if state == 'correct':
                assert keyboard[letter] == 'correct'
        previous = dict(keyboard)

    assert keyboard['s'] == 'correct'
    assert keyboard['m'] == 'correct'


def test_repeated_letter_in_one_guess_keeps_best():
    keyboard = {}
    # 'o' is present at column 2 and absent at column 4 in the same guess
    update_keyboard_states(keyboard, 'abobo', render_row('abobo', 'sabor'), render_row('abobo', 'mente'))

    assert keyboard['o'] == 'present'
    assert keyboard['b'] == 'present'
