"""Exception types raised by the chat services."""
from typing import Optional


class ChatError(Exception):
    """Base error; carries the HTTP status the API layer should answer with."""
    status_code: int = 500

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class QuestionRequiredError(ChatError):
    status_code = 400

    def __init__(self, message: str = "question required"):
        super().__init__(message)


class SessionNotFoundError(ChatError):
    status_code = 404

    def __init__(self, message: str = "session not found"):
        super().__init__(message)


class AnswerNotFoundError(ChatError):
    status_code = 404

    def __init__(self, message: str = "answer not found"):
        super().__init__(message)


class SessionStoreError(ChatError):
    """Session file could not be read or written."""
    status_code = 500


class GeminiConfigurationError(ChatError):
    """Gemini client is missing required configuration (API key)."""
    status_code = 500


class GeminiAPIError(ChatError):
    """
    Error returned by the Generative Language API.

    `upstream_status` holds the HTTP status reported by the API when known,
    so the retry wrapper can tell transient failures apart.
    """
    status_code = 502

    def __init__(self, message: str, upstream_status: Optional[int] = None):
        super().__init__(message)
        self.upstream_status = upstream_status
