"""Game domain services: score formula and the two stores.

HTTP routes and socket handlers import from here, keeping transport
concerns separated from the leaderboard and dictionary logic.
"""
from .leaderboard import LeaderboardStore
from .scoring import calculate_score
from .words import WordStore

__all__ = ['LeaderboardStore', 'WordStore', 'calculate_score']
