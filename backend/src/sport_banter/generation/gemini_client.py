"""
Gemini text generation client.

Every call goes through the shared RateLimiter. Failed attempts are returned
as typed results and retried by tenacity with exponential backoff
(2s -> 4s -> ...). Once attempts run out, the kind of the final failure
decides between QuotaExceeded and GenerationFailure.
"""

import asyncio
import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Optional

from google import genai
from tenacity import AsyncRetrying, RetryCallState, retry_if_result, stop_after_attempt

from ..errors import ErrorKind, GenerationFailure, QuotaExceeded, is_quota_error
from ..utils.rate_limiter import RateLimiter

logger = logging.getLogger(__name__)


def backoff_delay(attempt: int) -> float:
    """Seconds to wait after failed attempt number `attempt` (1-indexed)."""
    return float(2 ** attempt)


def _wait_backoff(retry_state: RetryCallState) -> float:
    return backoff_delay(retry_state.attempt_number)


@dataclass(frozen=True)
class GenerationAttempt:
    """Outcome of one generation call: text on success, an error kind otherwise."""
    attempt_number: int
    text: Optional[str] = None
    last_error: Optional[ErrorKind] = None
    error: Optional[BaseException] = None

    @property
    def ok(self) -> bool:
        return self.last_error is None


class GenerationClient:
    """Calls Gemini with rate limiting and exponential-backoff retries."""

    def __init__(
        self,
        rate_limiter: RateLimiter,
        api_key: Optional[str] = None,
        model: str = "gemini-2.5-flash",
        max_retries: int = 3,
        client: Any = None,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        """
        Initialize the generation client.

        Args:
            rate_limiter: Process-wide limiter acquired before every attempt
            api_key: Gemini API key (ignored when `client` is given)
            model: Gemini model name
            max_retries: Total number of attempts per prompt
            client: Pre-built google-genai client (tests pass a fake)
            sleep: Coroutine used for backoff waits
        """
        if max_retries < 1:
            raise ValueError("max_retries must be at least 1")

        self.rate_limiter = rate_limiter
        self.model = model
        self.max_retries = max_retries
        self.client = client if client is not None else genai.Client(api_key=api_key)
        self._sleep = sleep

    async def _call_gemini(self, prompt: str) -> str:
        response = await self.client.aio.models.generate_content(
            model=self.model,
            contents=prompt,
        )
        text = (response.text or "").strip()
        if not text:
            raise ValueError("Gemini returned an empty response")
        return text

    async def generate_once(self, prompt: str, attempt_number: int = 1) -> GenerationAttempt:
        """
        Make a single rate-limited attempt. Never raises.

        Returns:
            GenerationAttempt with the trimmed text, or the classified error
        """
        await self.rate_limiter.acquire()

        try:
            text = await self._call_gemini(prompt)
            return GenerationAttempt(attempt_number=attempt_number, text=text)
        except Exception as e:
            kind = ErrorKind.QUOTA_EXCEEDED if is_quota_error(e) else ErrorKind.GENERATION_FAILURE
            return GenerationAttempt(attempt_number=attempt_number, last_error=kind, error=e)

    def _log_retry(self, retry_state: RetryCallState) -> None:
        attempt: GenerationAttempt = retry_state.outcome.result()
        wait = retry_state.next_action.sleep if retry_state.next_action else 0.0
        logger.warning(f"[GENERATION] {attempt.last_error.value} on attempt "
                       f"{attempt.attempt_number}/{self.max_retries}: {attempt.error}. "
                       f"Retrying in {wait:.0f}s")

    async def generate(self, prompt: str) -> str:
        """
        Generate text for a prompt.

        Args:
            prompt: Complete prompt string

        Returns:
            str: Trimmed generated text

        Raises:
            QuotaExceeded: If the final attempt failed on quota/rate limits
            GenerationFailure: If the final attempt failed for any other reason
        """
        attempt_counter = 0

        async def attempt() -> GenerationAttempt:
            nonlocal attempt_counter
            attempt_counter += 1
            return await self.generate_once(prompt, attempt_counter)

        retrying = AsyncRetrying(
            retry=retry_if_result(lambda result: not result.ok),
            stop=stop_after_attempt(self.max_retries),
            wait=_wait_backoff,
            sleep=self._sleep,
            before_sleep=self._log_retry,
            retry_error_callback=lambda retry_state: retry_state.outcome.result(),
        )

        logger.info("[GENERATION] Calling Gemini API...")
        result: GenerationAttempt = await retrying(attempt)

        if result.ok:
            logger.info(f"[GENERATION] Received response: {len(result.text)} characters "
                        f"(attempt {result.attempt_number})")
            return result.text

        logger.error(f"[GENERATION] Giving up after {result.attempt_number} attempts: {result.error}")
        if result.last_error == ErrorKind.QUOTA_EXCEEDED:
            raise QuotaExceeded(f"Gemini quota exhausted after {result.attempt_number} attempts") from result.error
        raise GenerationFailure(f"Gemini generation failed after {result.attempt_number} attempts") from result.error
