"""
Error taxonomy for the banter pipeline.
"""

import re
from enum import Enum

from google.api_core.exceptions import ResourceExhausted


class ErrorKind(str, Enum):
    DATA_UNAVAILABLE = "data_unavailable"
    QUOTA_EXCEEDED = "quota_exceeded"
    GENERATION_FAILURE = "generation_failure"
    INPUT_INVALID = "input_invalid"


class BanterError(Exception):
    """Base class for pipeline errors. Subclasses set `kind`."""
    kind: ErrorKind = ErrorKind.GENERATION_FAILURE


class QuotaExceeded(BanterError):
    """Generation service kept rejecting calls for quota/rate reasons."""
    kind = ErrorKind.QUOTA_EXCEEDED


class GenerationFailure(BanterError):
    """Generation service failed for a non-quota reason after all retries."""
    kind = ErrorKind.GENERATION_FAILURE


class InputInvalid(BanterError):
    kind = ErrorKind.INPUT_INVALID


_QUOTA_TEXT = re.compile(r"\b429\b|quota|resource_exhausted|rate limit", re.IGNORECASE)


def is_quota_error(error: BaseException) -> bool:
    """
    Check whether an error signals quota or rate-limit exhaustion.

    Recognizes google-api-core's ResourceExhausted, anything carrying an
    HTTP 429 code (google-genai APIError, httpx status errors), and error
    text mentioning a standalone 429 or a quota marker.
    """
    if isinstance(error, ResourceExhausted):
        return True

    code = getattr(error, "code", None)
    if code == 429:
        return True

    response = getattr(error, "response", None)
    if getattr(response, "status_code", None) == 429:
        return True

    return _QUOTA_TEXT.search(str(error)) is not None
