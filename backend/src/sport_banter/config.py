"""
Runtime settings for the banter pipeline.
"""

import os
from typing import Optional
from pydantic import BaseModel, Field

from . import GEMINI_API_KEY, SPORTSDB_API_KEY


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


class BanterSettings(BaseModel):
    """Tunables for the pipeline. Values come from the environment when built via from_env()."""
    gemini_api_key: Optional[str] = None
    gemini_model: str = "gemini-2.5-flash"
    sportsdb_api_key: str = "1"
    sportsdb_base_url: str = "https://www.thesportsdb.com/api/v1/json"
    request_timeout: float = Field(10.0, gt=0)
    rate_limit_requests: int = Field(10, ge=1)
    rate_limit_window: float = Field(60.0, gt=0)  # seconds
    max_retries: int = Field(3, ge=1)
    classify_intent: bool = False
    default_sport: str = "football"
    default_league: str = "4328"  # English Premier League on TheSportsDB

    @classmethod
    def from_env(cls) -> "BanterSettings":
        """
        Build settings from environment variables.

        Raises:
            pydantic.ValidationError: If a numeric variable is malformed
        """
        values = {
            "gemini_api_key": GEMINI_API_KEY,
            "sportsdb_api_key": SPORTSDB_API_KEY,
            "classify_intent": _env_bool("SPORT_BANTER_CLASSIFY_INTENT", False),
        }
        env_map = {
            "gemini_model": "GEMINI_MODEL",
            "sportsdb_base_url": "SPORTSDB_BASE_URL",
            "request_timeout": "SPORT_BANTER_REQUEST_TIMEOUT",
            "rate_limit_requests": "SPORT_BANTER_RATE_LIMIT_RPM",
            "rate_limit_window": "SPORT_BANTER_RATE_LIMIT_WINDOW",
            "max_retries": "SPORT_BANTER_MAX_RETRIES",
        }
        for field_name, env_name in env_map.items():
            value = os.getenv(env_name)
            if value:
                values[field_name] = value
        return cls(**values)
