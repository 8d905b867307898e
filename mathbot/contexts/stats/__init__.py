"""
Stats Context

Responsibilities:
- Normalizes player names into API identifiers
- Fetches and decodes player summary statistics
- Formats statistics for chat

Owns: OverFast API access
Never: Retries or caches lookups
"""

from mathbot.contexts.stats.client import (
    PlayerStats,
    fetch_player_stats,
    format_player_stats,
    normalize_player,
)
from mathbot.contexts.stats.exceptions import StatsLookupError

__all__ = [
    "PlayerStats",
    "StatsLookupError",
    "fetch_player_stats",
    "format_player_stats",
    "normalize_player",
]
