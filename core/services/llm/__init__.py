"""LLM services: Gemini client and retry wrapper."""
from core.services.llm.gemini_client import GeminiClient, extract_text
from core.services.llm.retry import call_with_retry, is_retryable

__all__ = ["GeminiClient", "extract_text", "call_with_retry", "is_retryable"]
