"""
Team lookup and request target resolution.
"""

from .team_database import TEAM_DATABASE, TeamRegistry, default_registry
from .target_resolver import DateResolver, TargetResolver

__all__ = [
    "TEAM_DATABASE",
    "TeamRegistry",
    "default_registry",
    "DateResolver",
    "TargetResolver",
]
