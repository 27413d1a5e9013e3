"""
Optional one-word intent classification used to infer a mood.
"""

import logging
from typing import Optional

from ..prompts import INTENT_CLASSIFIER_PROMPT, INTENT_LABELS
from .gemini_client import GenerationClient

logger = logging.getLogger(__name__)


class IntentClassifier:
    """
    Asks Gemini to label a message with one intent.

    One rate-limited attempt, no retries; any failure just means no
    inferred mood.
    """

    def __init__(self, generation_client: GenerationClient):
        self.generation_client = generation_client

    async def classify(self, message: str) -> Optional[str]:
        prompt = INTENT_CLASSIFIER_PROMPT.format(labels=", ".join(INTENT_LABELS), message=message)
        attempt = await self.generation_client.generate_once(prompt)

        if not attempt.ok:
            logger.warning(f"[INTENT] Classification failed ({attempt.last_error.value}): {attempt.error}")
            return None

        words = attempt.text.strip().lower().split()
        label = words[0].strip(".,!\"'[]") if words else ""
        if label not in INTENT_LABELS or label == "unknown":
            logger.info(f"[INTENT] No usable intent in '{attempt.text}'")
            return None

        logger.info(f"[INTENT] Classified as '{label}'")
        return label
