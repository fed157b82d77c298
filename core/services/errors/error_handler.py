"""Error handling utilities."""
from typing import Any, Callable

from core.services.errors.exceptions import ChatError
from core.services.errors.fallback_responses import FallbackResponses
from core.utils.logger import logger


class ErrorHandler:
    """Turns service failures into reply text the chat can show."""

    @staticmethod
    def describe(error: Exception) -> str:
        """Message of an error without the exception class noise."""
        if isinstance(error, ChatError):
            return error.message
        return str(error) or error.__class__.__name__

    @staticmethod
    def handle_llm_error(error: Exception, question: str) -> str:
        """Handle LLM errors with a reply that carries the error message."""
        logger.error(f"LLM error for question '{question[:100]}': {ErrorHandler.describe(error)}")
        return FallbackResponses.get_response("llm_error", error=ErrorHandler.describe(error))

    @staticmethod
    def safe_execute(func: Callable[[], Any], question: str) -> Any:
        """
        Run an LLM call, returning the fallback reply on any failure.

        Args:
            func: Zero-argument callable performing the call
            question: Question being answered, for logging

        Returns:
            Function result or the llm_error reply text
        """
        try:
            return func()
        except Exception as e:
            return ErrorHandler.handle_llm_error(e, question)
