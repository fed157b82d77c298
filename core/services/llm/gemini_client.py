"""Client for the Google Generative Language (Gemini) API."""
import json
from typing import Any, Optional

from langchain_core.messages import HumanMessage
from langchain_google_genai import ChatGoogleGenerativeAI

from app.config import settings
from core.services.errors.exceptions import GeminiAPIError, GeminiConfigurationError
from core.services.llm.retry import call_with_retry, get_status_code
from core.utils.logger import logger


def extract_text(content: Any) -> str:
    """
    Pull answer text out of a chat model reply.

    The reply content is either a string or a list of parts, where a part is
    a string or a dict with a "text" key. Parts are joined with a space.
    """
    if isinstance(content, str):
        return content.strip()
    if isinstance(content, list):
        texts = []
        for part in content:
            if isinstance(part, str):
                texts.append(part)
            elif isinstance(part, dict) and isinstance(part.get("text"), str):
                texts.append(part["text"])
        return " ".join(t for t in texts if t).strip()
    return ""


class GeminiClient:
    """Sends a single question to Gemini and returns the answer text."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: Optional[str] = None,
        temperature: Optional[float] = None,
        max_output_tokens: Optional[int] = None,
        max_retries: Optional[int] = None,
        retry_delay_seconds: Optional[float] = None,
    ):
        self.api_key = api_key if api_key is not None else settings.GEMINI_API_KEY
        self.model = model or settings.GEMINI_MODEL
        self.temperature = temperature if temperature is not None else settings.GEMINI_TEMPERATURE
        self.max_output_tokens = max_output_tokens or settings.GEMINI_MAX_OUTPUT_TOKENS
        self.max_retries = max_retries if max_retries is not None else settings.ASK_MAX_RETRIES
        self.retry_delay_seconds = (
            retry_delay_seconds if retry_delay_seconds is not None else settings.ASK_RETRY_DELAY_SECONDS
        )
        self._llm: Optional[ChatGoogleGenerativeAI] = None

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key)

    def _get_llm(self) -> ChatGoogleGenerativeAI:
        if not self.api_key:
            raise GeminiConfigurationError("GEMINI_API_KEY missing in .env")
        if self._llm is None:
            self._llm = ChatGoogleGenerativeAI(
                model=self.model,
                google_api_key=self.api_key,
                temperature=self.temperature,
                max_output_tokens=self.max_output_tokens,
            )
        return self._llm

    def ask(self, question: str) -> str:
        """
        Ask Gemini a single question.

        Returns:
            Answer text, or a JSON dump of the reply when it carries no text

        Raises:
            GeminiConfigurationError: API key is not set
            GeminiAPIError: The API call failed
        """
        llm = self._get_llm()
        try:
            result = llm.invoke([HumanMessage(content=question)])
        except Exception as e:
            status = get_status_code(e)
            prefix = f"Gemini API error {status}" if status else "Gemini API error"
            raise GeminiAPIError(f"{prefix}: {str(e)}", upstream_status=status) from e

        text = extract_text(result.content)
        if not text:
            logger.warning("Gemini reply carried no text, returning raw reply")
            text = json.dumps(
                {
                    "content": result.content,
                    "response_metadata": getattr(result, "response_metadata", {}),
                },
                indent=2,
                default=str,
            )
        return text

    def ask_with_retry(self, question: str) -> str:
        """Ask, retrying rate limits and transient server errors."""
        return call_with_retry(
            self.ask,
            question,
            retries=self.max_retries,
            delay_seconds=self.retry_delay_seconds,
        )
