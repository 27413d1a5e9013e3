"""
TheSportsDB integration: raw client and best-effort match lookup.
"""

from .client import SportsDBClient
from .match_fetcher import MatchDataFetcher, select_match

__all__ = [
    "SportsDBClient",
    "MatchDataFetcher",
    "select_match",
]
