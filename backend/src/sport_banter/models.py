"""
Pydantic models for the banter pipeline.
"""

from datetime import date
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator


class RequestContext(BaseModel):
    """
    One incoming banter request. Frozen once constructed.

    Attributes:
        sport: Sport the user is talking about
        league: TheSportsDB league id
        team: Explicit focus team, bypasses detection when set
        mood: Explicit mood keyword (banter, roast, hype, factual, trivia)
        user_message: Raw user message, must not be blank
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    sport: str = "football"
    league: str = "4328"
    team: Optional[str] = None
    mood: Optional[str] = None
    user_message: str = Field(..., alias="userMessage", min_length=1)

    @field_validator("user_message")
    @classmethod
    def validate_user_message(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("userMessage must not be blank")
        return v


class ResolvedTarget(BaseModel):
    """Focus team and target date derived from a request."""
    model_config = ConfigDict(frozen=True)

    focus_team: Optional[str] = None
    target_date: Optional[date] = None

    @property
    def target_date_iso(self) -> Optional[str]:
        return self.target_date.isoformat() if self.target_date else None


class MatchSummary(BaseModel):
    """Condensed result of one match, validated from a TheSportsDB event record."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    event_name: str = Field(..., alias="strEvent", min_length=1)
    home_score: Optional[int] = Field(None, alias="intHomeScore")
    away_score: Optional[int] = Field(None, alias="intAwayScore")
    event_date: str = Field(..., alias="dateEvent", pattern=r"^\d{4}-\d{2}-\d{2}$")

    def format_for_prompt(self) -> str:
        home = "?" if self.home_score is None else self.home_score
        away = "?" if self.away_score is None else self.away_score
        return f"{self.event_name}: {home} - {away} ({self.event_date})"


class BanterToolInput(BaseModel):
    """Input schema of the sport banter tool."""
    sport: Optional[str] = None
    league: Optional[str] = None
    team: Optional[str] = None
    mood: Optional[str] = None
    userMessage: str = Field(..., description="The user's message about sports or a team.")


class BanterToolOutput(BaseModel):
    """Output schema of the sport banter tool."""
    message: str
