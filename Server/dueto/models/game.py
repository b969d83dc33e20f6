"""
Game Data Models

Contains all game-related data structures and enums.
"""

from dataclasses import dataclass, field, asdict
from enum import Enum
from typing import Any, Dict, List


class LetterState(Enum):
    """Tile and keyboard state. Only CORRECT, PRESENT and ABSENT come from scoring."""
    CORRECT = "correct"
    PRESENT = "present"
    ABSENT = "absent"
    EMPTY = "empty"
    PENDING = "tbd"  # typed but not submitted yet


class GameStatus(Enum):
    """Lifecycle of a round."""
    ACTIVE = "active"
    WON = "won"
    LOST = "lost"


@dataclass
class RoundState:
    """Server-side state of the single active round."""
    secret_word1: str
    secret_word2: str
    attempts: List[str] = field(default_factory=list)
    current_guess: str = ""
    current_row: int = 0
    word_solved1: bool = False
    word_solved2: bool = False
    game_over: bool = False
    message: str = ""
    keyboard_states: Dict[str, str] = field(default_factory=dict)  # letter -> LetterState value

    @property
    def status(self) -> GameStatus:
        if not self.game_over:
            return GameStatus.ACTIVE
        if self.word_solved1 and self.word_solved2:
            return GameStatus.WON
        return GameStatus.LOST

    @property
    def acertos(self) -> int:
        """Number of secret words solved so far (0, 1 or 2)."""
        return int(self.word_solved1) + int(self.word_solved2)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RoundState":
        """
        Rebuilds a round from its plain-dict form.

        Raises:
            KeyError: If a secret word is missing
            ValueError: If a keyboard state is not a known LetterState value
        """
        keyboard_states = dict(data.get("keyboard_states") or {})
        for value in keyboard_states.values():
            LetterState(value)

        return cls(
            secret_word1=data["secret_word1"],
            secret_word2=data["secret_word2"],
            attempts=list(data.get("attempts") or []),
            current_guess=data.get("current_guess", ""),
            current_row=int(data.get("current_row", 0)),
            word_solved1=bool(data.get("word_solved1", False)),
            word_solved2=bool(data.get("word_solved2", False)),
            game_over=bool(data.get("game_over", False)),
            message=data.get("message", ""),
            keyboard_states=keyboard_states,
        )


@dataclass(frozen=True)
class ScoreEntry:
    """One finished round on the leaderboard."""
    name: str
    attempts: int
    acertos: int

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ScoreEntry":
        return cls(
            name=str(data["name"]),
            attempts=int(data["attempts"]),
            acertos=int(data["acertos"]),
        )
