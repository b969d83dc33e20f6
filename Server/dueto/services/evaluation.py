"""
Guess Evaluation

Letter scoring, per-word guess evaluation and the two-word aggregation that
produces board tiles and keyboard hints.
"""

from typing import Dict, List, Optional
from ..models.game import LetterState
from ..config.game_settings import WORD_LENGTH, MAX_ROWS

# Keyboard precedence: a letter may only move up this ladder
_STATE_RANK = {
    LetterState.ABSENT: 0,
    LetterState.PRESENT: 1,
    LetterState.CORRECT: 2,
}


def classify_letter(guess: str, secret: str, position: int) -> LetterState:
    """
    Classifies the guessed letter at `position` against `secret`.

    Duplicate letters are handled by multiplicity: exact matches of a letter
    claim their copies first, then the remaining copies go to misplaced
    occurrences scanning left to right. Any occurrence beyond the count of
    the letter in the secret is ABSENT.
    """
    letter = guess[position]
    if letter == secret[position]:
        return LetterState.CORRECT

    total = secret.count(letter)
    if total == 0:
        return LetterState.ABSENT

    exact_matches = sum(
        1 for i in range(WORD_LENGTH)
        if guess[i] == letter and secret[i] == letter
    )
    misplaced_before = sum(
        1 for i in range(position)
        if guess[i] == letter and secret[i] != letter
    )

    if exact_matches + misplaced_before < total:
        return LetterState.PRESENT
    return LetterState.ABSENT


def evaluate_guess(guess: str, secret: str) -> List[LetterState]:
    """Returns the 5 letter states of `guess` against one secret word."""
    return [classify_letter(guess, secret, i) for i in range(WORD_LENGTH)]


def is_word_match(guess: str, secret: str) -> bool:
    return guess == secret


def render_row(guess: str, secret: str) -> List[LetterState]:
    """
    Tile states of one submitted row on one word's board.

    A full match paints the whole row CORRECT. Each board only ever looks at
    its own secret word.
    """
    if is_word_match(guess, secret):
        return [LetterState.CORRECT] * WORD_LENGTH
    return evaluate_guess(guess, secret)


def build_board(attempts: List[str],
                current_guess: str,
                current_row: int,
                secret: str,
                max_rows: int = MAX_ROWS) -> List[List[Dict[str, str]]]:
    """
    Builds every tile of one word's board.

    Submitted rows carry their evaluation, the row being typed shows PENDING
    tiles for typed letters, everything else is EMPTY.
    """
    board = []
    for row in range(max_rows):
        if row < current_row and row < len(attempts):
            guess = attempts[row]
            states = render_row(guess, secret)
            tiles = [
                {"letter": guess[col], "state": states[col].value}
                for col in range(WORD_LENGTH)
            ]
        elif row == current_row:
            tiles = [
                {"letter": current_guess[col], "state": LetterState.PENDING.value}
                if col < len(current_guess)
                else {"letter": "", "state": LetterState.EMPTY.value}
                for col in range(WORD_LENGTH)
            ]
        else:
            tiles = [
                {"letter": "", "state": LetterState.EMPTY.value}
                for _ in range(WORD_LENGTH)
            ]
        board.append(tiles)
    return board


def best_state(first: LetterState, second: LetterState) -> LetterState:
    """Picks the stronger evidence: CORRECT > PRESENT > ABSENT."""
    return first if _STATE_RANK[first] >= _STATE_RANK[second] else second


def upgrade_letter_state(current: Optional[LetterState], new_status: LetterState) -> LetterState:
    """Returns the state a keyboard key moves to; never a downgrade."""
    if current is None or _STATE_RANK[new_status] > _STATE_RANK[current]:
        return new_status
    return current


def update_keyboard_states(keyboard_states: Dict[str, str],
                           guess: str,
                           states1: List[LetterState],
                           states2: List[LetterState]) -> None:
    """
    Folds one submitted guess into the keyboard map, column by column.
    """
    for col, letter in enumerate(guess):
        combined = best_state(states1[col], states2[col])
        stored = keyboard_states.get(letter)
        current = LetterState(stored) if stored is not None else None
        keyboard_states[letter] = upgrade_letter_state(current, combined).value
