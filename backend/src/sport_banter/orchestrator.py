"""
Commentary generation pipeline.

Flow:
1. Resolve focus team and target date (local)
2. Fetch match summary (best-effort I/O)
3. Resolve tone, optionally inferring a mood
4. Build prompt and generate (rate-limited, retried)
5. Return the text, or a fixed fallback message on failure
"""

import logging
from enum import Enum
from typing import List, Optional, Tuple

from .config import BanterSettings
from .errors import BanterError, ErrorKind
from .generation import GenerationClient, IntentClassifier
from .models import BanterToolOutput, RequestContext
from .prompt_builder import PromptBuilder
from .prompts import GENERIC_FALLBACK_MESSAGE, QUOTA_FALLBACK_MESSAGE
from .sports_api import MatchDataFetcher, SportsDBClient
from .teams import TargetResolver, TeamRegistry, default_registry
from .tone import ToneResolver
from .utils.rate_limiter import RateLimiter

logger = logging.getLogger(__name__)


class PipelineState(str, Enum):
    RESOLVING = "resolving"
    FETCHING = "fetching"
    GENERATING = "generating"
    DONE = "done"
    FALLBACK = "fallback"


class BanterOrchestrator:
    """
    Sequences one request/response cycle. Always returns a message.

    The rate limiter is owned by the generation client and passed in, so one
    limiter instance can be shared by every orchestrator in the process.
    """

    def __init__(
        self,
        target_resolver: TargetResolver,
        match_fetcher: MatchDataFetcher,
        generation_client: GenerationClient,
        tone_resolver: Optional[ToneResolver] = None,
        prompt_builder: Optional[PromptBuilder] = None,
        intent_classifier: Optional[IntentClassifier] = None,
    ):
        self.target_resolver = target_resolver
        self.match_fetcher = match_fetcher
        self.generation_client = generation_client
        self.tone_resolver = tone_resolver or ToneResolver()
        self.prompt_builder = prompt_builder or PromptBuilder()
        self.intent_classifier = intent_classifier

    @classmethod
    def from_settings(
        cls,
        settings: BanterSettings,
        rate_limiter: Optional[RateLimiter] = None,
        registry: Optional[TeamRegistry] = None,
    ) -> "BanterOrchestrator":
        """Wire the pipeline with real clients from settings."""
        registry = registry or default_registry()
        rate_limiter = rate_limiter or RateLimiter(
            limit=settings.rate_limit_requests,
            window_seconds=settings.rate_limit_window,
        )
        sports_client = SportsDBClient(
            api_key=settings.sportsdb_api_key,
            base_url=settings.sportsdb_base_url,
            timeout=settings.request_timeout,
        )
        generation_client = GenerationClient(
            rate_limiter=rate_limiter,
            api_key=settings.gemini_api_key,
            model=settings.gemini_model,
            max_retries=settings.max_retries,
        )
        intent_classifier = IntentClassifier(generation_client) if settings.classify_intent else None

        return cls(
            target_resolver=TargetResolver(registry),
            match_fetcher=MatchDataFetcher(sports_client, registry),
            generation_client=generation_client,
            intent_classifier=intent_classifier,
        )

    async def run(self, ctx: RequestContext) -> BanterToolOutput:
        """
        Produce a banter reply for a request.

        Args:
            ctx: Validated request context

        Returns:
            BanterToolOutput with generated text or a fallback message
        """
        output, _ = await self.run_with_trace(ctx)
        return output

    async def run_with_trace(self, ctx: RequestContext) -> Tuple[BanterToolOutput, List[PipelineState]]:
        """Like run(), also returning the states the request went through."""
        states: List[PipelineState] = []

        def enter(state: PipelineState) -> None:
            states.append(state)
            logger.debug(f"[ORCHESTRATOR] -> {state.value}")

        enter(PipelineState.RESOLVING)
        target = self.target_resolver.resolve(ctx.user_message, ctx.team)
        logger.info(f"[ORCHESTRATOR] Focus team: {target.focus_team or '-'}, "
                    f"target date: {target.target_date_iso or '-'}")

        enter(PipelineState.FETCHING)
        match_summary = await self.match_fetcher.fetch(target.focus_team, target.target_date)

        enter(PipelineState.GENERATING)
        inferred_mood = None
        if not ctx.mood and self.intent_classifier is not None:
            inferred_mood = await self.intent_classifier.classify(ctx.user_message)
        style = self.tone_resolver.resolve(ctx.mood, inferred_mood)
        prompt = self.prompt_builder.build(ctx, target, match_summary, style)

        try:
            text = await self.generation_client.generate(prompt)
        except BanterError as e:
            enter(PipelineState.FALLBACK)
            logger.error(f"[ORCHESTRATOR] Falling back ({e.kind.value}): {e}")
            return BanterToolOutput(message=fallback_message(e.kind)), states

        enter(PipelineState.DONE)
        return BanterToolOutput(message=text), states


def fallback_message(kind: ErrorKind) -> str:
    if kind == ErrorKind.QUOTA_EXCEEDED:
        return QUOTA_FALLBACK_MESSAGE
    return GENERIC_FALLBACK_MESSAGE
