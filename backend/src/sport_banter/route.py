"""
FastAPI routes for the sport banter tool.
"""

from typing import Optional

from fastapi import APIRouter, Depends

from .models import BanterToolInput, BanterToolOutput
from .orchestrator import BanterOrchestrator
from .tool import get_rate_limiter, run_sport_banter_tool
from .utils.rate_limiter import RateLimiter

router = APIRouter(prefix="/api", tags=["banter"])


def orchestrator_override() -> Optional[BanterOrchestrator]:
    """
    Pipeline to use instead of the process-wide one.

    Returns None in production so the tool builds the shared orchestrator
    itself, inside its never-raise boundary. Tests override this dependency.
    """
    return None


@router.post("/banter", response_model=BanterToolOutput)
async def banter(
    request: BanterToolInput,
    orchestrator: Optional[BanterOrchestrator] = Depends(orchestrator_override),
):
    """
    Generate a banter reply for a sports message.

    Always answers 200 with a message; setup and generation failures become fallback text.
    """
    return await run_sport_banter_tool(request.model_dump(), orchestrator=orchestrator)


@router.get("/banter/rate-limit")
async def rate_limit_stats(limiter: RateLimiter = Depends(get_rate_limiter)):
    """Report shared rate limiter statistics."""
    return {
        "limit": limiter.limit,
        "window_seconds": limiter.window_seconds,
        **limiter.stats.to_dict(),
    }
