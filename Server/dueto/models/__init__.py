"""
Data Models Package

Contains all data models and schemas used throughout the application.
"""

from .game import GameStatus, LetterState, RoundState, ScoreEntry
from .errors import (
    GuessError, InvalidLengthError, NotInDictionaryError, RoundOverError,
    InvalidSecretPairError, ScoreSubmissionError
)

__all__ = [
    'GameStatus', 'LetterState', 'RoundState', 'ScoreEntry',
    'GuessError', 'InvalidLengthError', 'NotInDictionaryError', 'RoundOverError',
    'InvalidSecretPairError', 'ScoreSubmissionError'
]
