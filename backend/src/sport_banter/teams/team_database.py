"""
Static team database mapping display names to TheSportsDB team ids.
Definition order is the tie-break order when a message names several teams.
"""

from typing import Dict, Iterator, Mapping, Optional, Tuple

# Static team database: display name -> TheSportsDB team id
TEAM_DATABASE: Dict[str, str] = {
    # Premier League
    "Liverpool": "133602",
    "Manchester United": "133612",
    "Arsenal": "133604",
    "Chelsea": "133610",
    # La Liga
    "Barcelona": "133739",
    "Real Madrid": "133738",
    # Ligue 1
    "PSG": "133722",
    # Serie A
    "Juventus": "133676",
}


class TeamRegistry:
    """
    Ordered, read-only table of team display name -> external team id.

    Detection is a case-insensitive substring match of each registered name
    against the message; the first registered name that matches wins.
    """

    def __init__(self, teams: Mapping[str, str]):
        self._teams: Tuple[Tuple[str, str], ...] = tuple(teams.items())

    def __iter__(self) -> Iterator[str]:
        return (name for name, _ in self._teams)

    def __len__(self) -> int:
        return len(self._teams)

    def detect(self, message: str) -> Optional[str]:
        """
        Find the first registered team mentioned in a message.

        Args:
            message: Raw user message

        Returns:
            Registered display name, or None if no team is mentioned
        """
        message_lower = message.lower()
        for name, _ in self._teams:
            if name.lower() in message_lower:
                return name
        return None

    def team_id(self, team_name: str) -> Optional[str]:
        """
        Get the external id for a team name.

        Exact name first, then a case-insensitive match, so that an explicit
        team like "liverpool" still resolves.
        """
        for name, team_id in self._teams:
            if name == team_name:
                return team_id

        name_lower = team_name.strip().lower()
        for name, team_id in self._teams:
            if name.lower() == name_lower:
                return team_id
        return None


_default_registry: Optional[TeamRegistry] = None


def default_registry() -> TeamRegistry:
    """Get or create the process-wide registry built from TEAM_DATABASE."""
    global _default_registry
    if _default_registry is None:
        _default_registry = TeamRegistry(TEAM_DATABASE)
    return _default_registry
