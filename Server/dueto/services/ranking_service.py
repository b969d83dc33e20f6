"""
Ranking Service

Leaderboard ordering and score submission.
"""

from typing import List, Optional
from ..models.game import RoundState, ScoreEntry
from ..models.errors import ScoreSubmissionError
from ..config.game_settings import STORAGE_KEY_RANKING
from ..utils.game_logger import game_logger
from .storage import StateStore


def _precedes(first: ScoreEntry, second: ScoreEntry) -> bool:
    """More solved words first; fewer attempts break the tie."""
    if first.acertos != second.acertos:
        return first.acertos > second.acertos
    return first.attempts <= second.attempts


def merge_sort(entries: List[ScoreEntry]) -> List[ScoreEntry]:
    """
    Stable merge sort of leaderboard entries. Returns a new list; the input
    is left untouched.
    """
    if len(entries) <= 1:
        return list(entries)

    mid = len(entries) // 2
    left = merge_sort(entries[:mid])
    right = merge_sort(entries[mid:])
    return _merge(left, right)


def _merge(left: List[ScoreEntry], right: List[ScoreEntry]) -> List[ScoreEntry]:
    result: List[ScoreEntry] = []
    left_index = right_index = 0

    while left_index < len(left) and right_index < len(right):
        # ties go to the left half so equal entries keep their order
        if _precedes(left[left_index], right[right_index]):
            result.append(left[left_index])
            left_index += 1
        else:
            result.append(right[right_index])
            right_index += 1

    result.extend(left[left_index:])
    result.extend(right[right_index:])
    return result


class RankingService:
    """Persisted leaderboard of finished rounds."""

    def __init__(self, store: StateStore):
        self.store = store

    def get_ranking(self) -> List[ScoreEntry]:
        data = self.store.load(STORAGE_KEY_RANKING) or []
        return merge_sort([ScoreEntry.from_dict(item) for item in data])

    def submit_score(self, name: str, round_state: RoundState) -> List[ScoreEntry]:
        """
        Records the result of a finished round.

        Args:
            name: Player name, must not be blank
            round_state: The terminal round being scored

        Returns:
            The new, sorted leaderboard

        Raises:
            ScoreSubmissionError: If the name is blank or the round is still running
        """
        name = (name or '').strip()
        if not name:
            raise ScoreSubmissionError("Player name is required")
        if not round_state.game_over:
            raise ScoreSubmissionError("Round is not finished yet")

        entry = ScoreEntry(name=name, attempts=round_state.current_row, acertos=round_state.acertos)
        ranking = merge_sort(self.get_ranking() + [entry])
        self.store.save(STORAGE_KEY_RANKING, [item.to_dict() for item in ranking])

        game_logger.logger.info(
            f"Score saved for '{name}': {entry.acertos} word(s) in {entry.attempts} attempts"
        )
        return ranking

    def clear_ranking(self) -> None:
        self.store.delete(STORAGE_KEY_RANKING)
        game_logger.logger.info("Ranking cleared")


# Global service instance
_ranking_service = None


def get_ranking_service() -> Optional[RankingService]:
    """Get the global ranking service instance."""
    return _ranking_service


def initialize_ranking_service(store: StateStore) -> RankingService:
    """Initialize the global ranking service instance."""
    global _ranking_service
    _ranking_service = RankingService(store)
    return _ranking_service
