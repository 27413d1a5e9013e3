"""
Sport banter tool boundary.

Validates the raw tool payload, runs the pipeline and always hands back a
`{"message": ...}` dict. Nothing raised inside the pipeline escapes here.
"""

import logging
from typing import Any, Dict, Mapping, Optional

from pydantic import ValidationError

from .config import BanterSettings
from .errors import InputInvalid
from .models import BanterToolInput, BanterToolOutput, RequestContext
from .orchestrator import BanterOrchestrator
from .prompts import GENERIC_FALLBACK_MESSAGE, INVALID_INPUT_MESSAGE
from .utils.rate_limiter import RateLimiter

logger = logging.getLogger(__name__)


def build_request_context(tool_input: BanterToolInput, settings: BanterSettings) -> RequestContext:
    """
    Apply defaults to tool input.

    Raises:
        InputInvalid: If userMessage is blank
    """
    try:
        return RequestContext(
            sport=tool_input.sport or settings.default_sport,
            league=tool_input.league or settings.default_league,
            team=tool_input.team or None,
            mood=tool_input.mood or None,
            userMessage=tool_input.userMessage,
        )
    except ValidationError as e:
        raise InputInvalid(f"{e.error_count()} invalid field(s)") from e


async def run_sport_banter_tool(
    payload: Mapping[str, Any],
    orchestrator: Optional[BanterOrchestrator] = None,
    settings: Optional[BanterSettings] = None,
) -> Dict[str, str]:
    """
    Execute the sport banter tool.

    Args:
        payload: Raw tool input (sport, league, team, mood, userMessage)
        orchestrator: Pipeline to run (defaults to the process-wide one)
        settings: Settings for defaults (defaults to environment settings)

    Returns:
        dict with a single "message" key
    """
    try:
        settings = settings or get_settings()
    except ValidationError:
        logger.exception("[TOOL] Invalid settings in environment")
        return BanterToolOutput(message=GENERIC_FALLBACK_MESSAGE).model_dump()

    try:
        tool_input = BanterToolInput.model_validate(payload)
        ctx = build_request_context(tool_input, settings)
    except (ValidationError, InputInvalid) as e:
        logger.warning(f"[TOOL] Rejected invalid input: {e}")
        return BanterToolOutput(message=INVALID_INPUT_MESSAGE).model_dump()

    try:
        orchestrator = orchestrator or get_orchestrator()
        output = await orchestrator.run(ctx)
    except Exception:
        logger.exception("[TOOL] Unexpected pipeline error")
        output = BanterToolOutput(message=GENERIC_FALLBACK_MESSAGE)

    return output.model_dump()


# Global instances
_settings: Optional[BanterSettings] = None
_rate_limiter: Optional[RateLimiter] = None
_orchestrator: Optional[BanterOrchestrator] = None


def get_settings() -> BanterSettings:
    """Get or create the global settings instance."""
    global _settings
    if _settings is None:
        _settings = BanterSettings.from_env()
    return _settings


def get_rate_limiter() -> RateLimiter:
    """Get or create the process-wide rate limiter shared by all generation calls."""
    global _rate_limiter
    if _rate_limiter is None:
        settings = get_settings()
        _rate_limiter = RateLimiter(
            limit=settings.rate_limit_requests,
            window_seconds=settings.rate_limit_window,
        )
    return _rate_limiter


def get_orchestrator() -> BanterOrchestrator:
    """
    Get or create the global orchestrator.

    Raises:
        ValueError: If the Gemini client cannot be built (e.g. no API key);
            nothing is cached, so the next call tries again
    """
    global _orchestrator
    if _orchestrator is None:
        _orchestrator = BanterOrchestrator.from_settings(get_settings(), rate_limiter=get_rate_limiter())
    return _orchestrator
