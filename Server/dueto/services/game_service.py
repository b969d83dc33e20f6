"""
Game Service

Contains the round state machine for the two-word game.
"""

from typing import Any, Dict, Optional, Tuple
from ..models.game import GameStatus, LetterState, RoundState
from ..models.errors import (
    InvalidLengthError, InvalidSecretPairError, NotInDictionaryError, RoundOverError
)
from ..config.game_settings import (
    ALPHABET, MAX_ROWS, STORAGE_KEY_GAME, WORD_LENGTH, is_well_formed_word
)
from ..utils.game_logger import game_logger
from .evaluation import build_board, evaluate_guess, is_word_match, update_keyboard_states
from .storage import StateStore
from .word_source import StaticWordSource, WordSource

# Draws from the configured source before giving up on it
SECRET_PAIR_ATTEMPTS = 3

SCORED_STATES = {LetterState.CORRECT.value, LetterState.PRESENT.value, LetterState.ABSENT.value}


class GameService:
    """
    Owns the single active round.

    This class handles:
    - Secret pair selection with fallback to the static word list
    - Letter buffer editing and guess submission
    - Solved flags, keyboard hints and round termination
    - Persisting the round after every change
    """

    def __init__(self,
                 word_source: WordSource,
                 store: StateStore,
                 fallback_source: Optional[StaticWordSource] = None,
                 max_rows: int = MAX_ROWS):
        self.word_source = word_source
        self.store = store
        if fallback_source is None:
            fallback_source = getattr(word_source, 'fallback', None)
        if fallback_source is None:
            fallback_source = word_source if isinstance(word_source, StaticWordSource) else StaticWordSource()
        self.fallback_source = fallback_source
        self.max_rows = max_rows
        self.round: Optional[RoundState] = None

    # Round lifecycle

    def new_round(self) -> Dict[str, Any]:
        """
        Discards the current round and starts a fresh one.

        Returns:
            The client view of the new round
        """
        secret_word1, secret_word2 = self._choose_secret_pair()
        self.round = RoundState(secret_word1=secret_word1, secret_word2=secret_word2)
        self._save()
        game_logger.logger.info("New round started")
        return self.get_view()

    restart = new_round

    def restore_or_start(self) -> Dict[str, Any]:
        """Resumes the persisted round, or starts a new one if there is none."""
        data = self.store.load(STORAGE_KEY_GAME)
        if data is not None:
            try:
                restored = RoundState.from_dict(data)
                self._check_restored(restored)
            except (KeyError, TypeError, ValueError, InvalidSecretPairError) as e:
                game_logger.logger.warning(f"Discarding unreadable saved round: {e}")
            else:
                self.round = restored
                game_logger.logger.info(f"Restored round at row {restored.current_row}")
                return self.get_view()
        return self.new_round()

    def _choose_secret_pair(self) -> Tuple[str, str]:
        for attempt in range(1, SECRET_PAIR_ATTEMPTS + 1):
            try:
                return self._draw_secret_pair(self.word_source)
            except Exception as e:
                game_logger.logger.warning(f"Secret pair attempt {attempt} failed: {e}")

        game_logger.logger.warning("Word source exhausted, drawing from the static word list")
        return self._draw_secret_pair(self.fallback_source)

    def _draw_secret_pair(self, source: WordSource) -> Tuple[str, str]:
        word1, word2 = source.get_word_pair()
        self._validate_secret_pair(word1, word2)
        return word1, word2

    @staticmethod
    def _validate_secret_pair(word1: str, word2: str) -> None:
        if not (is_well_formed_word(word1) and is_well_formed_word(word2)):
            raise InvalidSecretPairError(f"Malformed secret words: {word1!r}, {word2!r}")
        if word1 == word2:
            raise InvalidSecretPairError(f"Secret words are identical: {word1!r}")

    def _check_restored(self, state: RoundState) -> None:
        self._validate_secret_pair(state.secret_word1, state.secret_word2)
        if state.current_row != len(state.attempts) or state.current_row > self.max_rows:
            raise ValueError("Row index does not match attempt history")
        for attempt in state.attempts:
            if not is_well_formed_word(attempt):
                raise ValueError(f"Malformed attempt: {attempt!r}")

        guess = state.current_guess
        if (not isinstance(guess, str) or len(guess) > WORD_LENGTH
                or any(char not in ALPHABET for char in guess)):
            raise ValueError(f"Malformed guess buffer: {guess!r}")

        for letter, value in state.keyboard_states.items():
            if not (isinstance(letter, str) and len(letter) == 1 and letter in ALPHABET):
                raise ValueError(f"Malformed keyboard key: {letter!r}")
            if value not in SCORED_STATES:
                raise ValueError(f"Keyboard state {value!r} is not a scoring result")

        if state.word_solved1 != (state.secret_word1 in state.attempts):
            raise ValueError("First solved flag does not match attempt history")
        if state.word_solved2 != (state.secret_word2 in state.attempts):
            raise ValueError("Second solved flag does not match attempt history")

        finished = (state.word_solved1 and state.word_solved2) or state.current_row >= self.max_rows
        if state.game_over != finished:
            raise ValueError("Game over flag does not match attempt history")

    def _require_round(self) -> RoundState:
        if self.round is None:
            self.restore_or_start()
        return self.round

    def _save(self) -> None:
        self.store.save(STORAGE_KEY_GAME, self.round.to_dict())

    # Player input

    def append_letter(self, letter: str) -> Dict[str, Any]:
        """Adds one letter to the guess buffer. Ignored when the round is over or the row is full."""
        state = self._require_round()
        letter = (letter or '').lower()

        if (state.status == GameStatus.ACTIVE
                and len(state.current_guess) < WORD_LENGTH
                and len(letter) == 1 and letter in ALPHABET):
            state.current_guess += letter
            self._save()

        return self.get_view()

    def delete_letter(self) -> Dict[str, Any]:
        """Removes the last buffered letter, if any."""
        state = self._require_round()

        if state.status == GameStatus.ACTIVE and state.current_guess:
            state.current_guess = state.current_guess[:-1]
            self._save()

        return self.get_view()

    def submit_guess(self) -> Dict[str, Any]:
        """
        Submits the buffered guess.

        Returns:
            The updated client view

        Raises:
            RoundOverError: If the round already ended
            InvalidLengthError: If the buffer is not exactly 5 letters
            NotInDictionaryError: If the word source does not know the guess
        """
        state = self._require_round()

        if state.status != GameStatus.ACTIVE:
            raise RoundOverError()

        guess = state.current_guess
        if len(guess) != WORD_LENGTH:
            raise InvalidLengthError(len(guess), WORD_LENGTH)
        if not self.word_source.is_known_word(guess):
            raise NotInDictionaryError(guess)

        states1 = evaluate_guess(guess, state.secret_word1)
        states2 = evaluate_guess(guess, state.secret_word2)

        state.attempts = state.attempts + [guess]
        state.current_row += 1
        state.current_guess = ''

        if is_word_match(guess, state.secret_word1):
            state.word_solved1 = True
        if is_word_match(guess, state.secret_word2):
            state.word_solved2 = True

        update_keyboard_states(state.keyboard_states, guess, states1, states2)

        if state.word_solved1 and state.word_solved2:
            state.game_over = True
            state.message = f"Congratulations! You found both words in {state.current_row} attempts!"
        elif state.current_row >= self.max_rows:
            state.game_over = True
            state.message = (
                f'Game over! The words were "{state.secret_word1}" and "{state.secret_word2}".'
            )

        self._save()

        if state.game_over:
            game_logger.logger.info(
                f"Round ended {state.status.value} after {state.current_row} attempts "
                f"with {state.acertos} word(s) solved"
            )

        return self.get_view()

    # Views

    def get_round_state(self) -> RoundState:
        """Returns a detached copy of the raw round state, secrets included."""
        return RoundState.from_dict(self._require_round().to_dict())

    def get_view(self) -> Dict[str, Any]:
        """
        Returns the round as the client sees it. Secret words are only
        revealed once the round is over.
        """
        state = self._require_round()

        boards = [
            build_board(state.attempts, state.current_guess, state.current_row, secret, self.max_rows)
            for secret in (state.secret_word1, state.secret_word2)
        ]

        return {
            'status': state.status.value,
            'current_guess': state.current_guess,
            'current_row': state.current_row,
            'max_rows': self.max_rows,
            'attempts': state.attempts.copy(),
            'word_solved1': state.word_solved1,
            'word_solved2': state.word_solved2,
            'acertos': state.acertos,
            'game_over': state.game_over,
            'message': state.message,
            'keyboard_states': state.keyboard_states.copy(),
            'boards': boards,
            'secret_words': [state.secret_word1, state.secret_word2] if state.game_over else None
        }


# Global service instance
_game_service = None


def get_game_service() -> Optional[GameService]:
    """Get the global game service instance."""
    return _game_service


def initialize_game_service(word_source: WordSource, store: StateStore) -> GameService:
    """Initialize the global game service instance and resume the saved round."""
    global _game_service
    _game_service = GameService(word_source, store)
    _game_service.restore_or_start()
    return _game_service
