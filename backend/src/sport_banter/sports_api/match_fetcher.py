"""
Best-effort lookup of the match a request is about.

Missing match context only degrades the reply, so every failure here is
logged and turned into "no summary".
"""

import logging
from datetime import date
from typing import Any, List, Optional

from pydantic import ValidationError

from ..errors import ErrorKind
from ..models import MatchSummary
from ..teams import TeamRegistry
from .client import SportsDBClient

logger = logging.getLogger(__name__)


def select_match(matches: List[Any], target_date: Optional[str]) -> Optional[Any]:
    """
    Pick the relevant match record.

    With a target date, the first record dated exactly that day (or None).
    Without one, the first record, which the service returns as most recent.
    """
    if target_date:
        for match in matches:
            if isinstance(match, dict) and match.get("dateEvent") == target_date:
                return match
        return None
    return matches[0] if matches else None


class MatchDataFetcher:
    """Fetches and summarizes a team's relevant recent match."""

    def __init__(self, client: SportsDBClient, registry: TeamRegistry):
        self.client = client
        self.registry = registry

    async def fetch(self, focus_team: Optional[str], target_date: Optional[date] = None) -> Optional[MatchSummary]:
        """
        Get a match summary for the focus team.

        Args:
            focus_team: Team display name; no I/O happens when None
            target_date: Only accept a match played on this day

        Returns:
            MatchSummary, or None when there is no team, no match or any failure
        """
        if not focus_team:
            return None

        team_id = self.registry.team_id(focus_team)
        if team_id is None:
            logger.warning(f"[MATCH_DATA] No external id for team '{focus_team}', skipping lookup")
            return None

        target_iso = target_date.isoformat() if target_date else None

        try:
            data = await self.client.get_last_events(team_id)
            matches = data.get("results") or []
            if not isinstance(matches, list):
                raise ValueError("'results' is not a list")

            match = select_match(matches, target_iso)
            if match is None:
                logger.info(f"[MATCH_DATA] No match for {focus_team} (target date: {target_iso or 'latest'})")
                return None

            summary = MatchSummary.model_validate(match)
            logger.info(f"[MATCH_DATA] {summary.format_for_prompt()}")
            return summary

        except (ValidationError, ValueError, TypeError, AttributeError) as e:
            logger.warning(f"[MATCH_DATA] {ErrorKind.DATA_UNAVAILABLE.value}: malformed data for {focus_team}: {e}")
        except Exception as e:
            logger.warning(f"[MATCH_DATA] {ErrorKind.DATA_UNAVAILABLE.value}: failed to fetch sports data for {focus_team}: {e}")
        return None
