"""Text processing utilities."""
import re
import secrets
import string
from typing import Optional

GREETING_RE = re.compile(r"^(hi|hello|hey|hlo|yo)([!. ]|$)", re.IGNORECASE)

ID_ALPHABET = string.ascii_letters + string.digits + "_-"


def new_id(size: int = 8) -> str:
    """Short random id for sessions and history entries."""
    return "".join(secrets.choice(ID_ALPHABET) for _ in range(size))


def is_greeting(text: Optional[str]) -> bool:
    """True for short salutations such as "hi", "Hello!" or "hey there"."""
    if not text:
        return False
    return GREETING_RE.match(text.strip().lower()) is not None


def truncate_title(text: Optional[str], max_length: int = 48) -> str:
    """
    Derive a session title from a question.

    Args:
        text: Question text
        max_length: Maximum title length, including the "..." suffix

    Returns:
        Trimmed text, cut to max_length - 3 characters plus "..." when longer
    """
    if not text:
        return ""
    title = str(text).strip()
    if len(title) > max_length:
        return title[:max_length - 3] + "..."
    return title
