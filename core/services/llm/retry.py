"""Bounded retry for calls to the Generative Language API."""
import re
import time
from typing import Any, Callable, Optional

from core.services.errors.exceptions import ChatError
from core.utils.logger import logger

RETRYABLE_STATUS_CODES = {429, 500, 503}
STATUS_IN_MESSAGE_RE = re.compile(r"\b(429|500|503)\b")


def get_status_code(error: Exception) -> Optional[int]:
    """HTTP status carried by an error, if any."""
    if isinstance(error, ChatError):
        # Our own errors carry the status we answer with, not the upstream one
        return getattr(error, "upstream_status", None)
    for attr in ("status_code", "code"):
        value = getattr(error, attr, None)
        try:
            if value is not None:
                return int(value)
        except (TypeError, ValueError):
            continue
    return None


def is_retryable(error: Exception) -> bool:
    """Rate limits and transient server errors are worth another attempt."""
    status = get_status_code(error)
    if status is not None:
        return status in RETRYABLE_STATUS_CODES
    # Client libraries do not always expose the status; fall back to the message
    return STATUS_IN_MESSAGE_RE.search(str(error)) is not None


def call_with_retry(
    func: Callable[..., Any],
    *args: Any,
    retries: int = 3,
    delay_seconds: float = 1.0,
    sleep: Callable[[float], None] = time.sleep,
    **kwargs: Any
) -> Any:
    """
    Call `func`, retrying retryable failures with a fixed delay.

    Args:
        func: Callable to invoke
        retries: Total number of attempts (at least one is always made)
        delay_seconds: Pause between attempts
        sleep: Sleep function, replaceable in tests

    Returns:
        Whatever `func` returns

    Raises:
        The last error when attempts run out or the error is not retryable
    """
    attempts = max(1, retries)
    for attempt in range(1, attempts + 1):
        try:
            return func(*args, **kwargs)
        except Exception as e:
            if attempt < attempts and is_retryable(e):
                logger.warning(
                    f"Attempt {attempt}/{attempts} failed with retryable error: {str(e)[:200]}. "
                    f"Retrying in {delay_seconds}s..."
                )
                sleep(delay_seconds)
                continue
            raise
