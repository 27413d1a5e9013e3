"""
Gemini-backed text generation with rate limiting and retries.
"""

from .gemini_client import GenerationAttempt, GenerationClient, backoff_delay
from .intent_classifier import IntentClassifier

__all__ = ['GenerationAttempt', 'GenerationClient', 'backoff_delay', 'IntentClassifier']
