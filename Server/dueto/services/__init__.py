"""
Services Package

Contains all business logic and service classes.
"""

from .game_service import GameService, get_game_service, initialize_game_service
from .ranking_service import RankingService, get_ranking_service, initialize_ranking_service, merge_sort
from .storage import StateStore, MemoryStateStore, MongoStateStore, build_state_store
from .word_source import WordSource, StaticWordSource, GeminiWordSource, build_word_source

__all__ = [
    'GameService', 'get_game_service', 'initialize_game_service',
    'RankingService', 'get_ranking_service', 'initialize_ranking_service', 'merge_sort',
    'StateStore', 'MemoryStateStore', 'MongoStateStore', 'build_state_store',
    'WordSource', 'StaticWordSource', 'GeminiWordSource', 'build_word_source'
]
