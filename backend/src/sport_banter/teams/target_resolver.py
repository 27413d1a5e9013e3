"""
Resolve the focus team and target date of a request from its free text.
"""

import re
from datetime import date, timedelta
from typing import Callable, Optional

from ..models import ResolvedTarget
from .team_database import TeamRegistry

_YESTERDAY = re.compile(r"yesterday", re.IGNORECASE)
_TODAY = re.compile(r"today", re.IGNORECASE)


class DateResolver:
    """Parses "yesterday" / "today" cues into a calendar date."""

    def __init__(self, today: Callable[[], date] = date.today):
        self._today = today

    def resolve(self, message: str) -> Optional[date]:
        if _YESTERDAY.search(message):
            return self._today() - timedelta(days=1)
        if _TODAY.search(message):
            return self._today()
        return None


class TargetResolver:
    """Combines team detection and date parsing. Local only, never fails."""

    def __init__(self, registry: TeamRegistry, date_resolver: Optional[DateResolver] = None):
        self.registry = registry
        self.date_resolver = date_resolver or DateResolver()

    def resolve(self, message: str, explicit_team: Optional[str] = None) -> ResolvedTarget:
        """
        Derive the request target.

        Args:
            message: Raw user message
            explicit_team: Team given by the caller, used verbatim when set

        Returns:
            ResolvedTarget with focus team and target date (either may be None)
        """
        focus_team = explicit_team or self.registry.detect(message)
        return ResolvedTarget(
            focus_team=focus_team,
            target_date=self.date_resolver.resolve(message),
        )
