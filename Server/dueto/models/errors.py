"""
Game Errors

Player-facing errors are recoverable: the round is left untouched and the
message is shown to the player. InvalidSecretPairError never leaves the
game service.
"""


class GuessError(Exception):
    """A submitted guess was rejected."""


class InvalidLengthError(GuessError):
    def __init__(self, length: int, expected: int = 5):
        super().__init__(f"Guess must be exactly {expected} letters (got {length})")
        self.length = length


class NotInDictionaryError(GuessError):
    def __init__(self, guess: str):
        super().__init__(f"'{guess}' is not in the word list")
        self.guess = guess


class RoundOverError(GuessError):
    def __init__(self):
        super().__init__("Round is already over")


class InvalidSecretPairError(Exception):
    """A word source produced identical or malformed secret words."""


class ScoreSubmissionError(Exception):
    """A score could not be recorded for the current round."""
