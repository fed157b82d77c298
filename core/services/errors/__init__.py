"""Error handling and fallback responses."""
from core.services.errors.error_handler import ErrorHandler
from core.services.errors.fallback_responses import FallbackResponses
from core.services.errors.exceptions import (
    AnswerNotFoundError,
    ChatError,
    GeminiAPIError,
    GeminiConfigurationError,
    QuestionRequiredError,
    SessionNotFoundError,
    SessionStoreError,
)

__all__ = [
    "ErrorHandler",
    "FallbackResponses",
    "ChatError",
    "QuestionRequiredError",
    "SessionNotFoundError",
    "AnswerNotFoundError",
    "SessionStoreError",
    "GeminiConfigurationError",
    "GeminiAPIError",
]
