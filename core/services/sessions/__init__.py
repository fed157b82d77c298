"""Session storage and the chat flow built on it."""
from core.services.sessions.session_store import SessionStore
from core.services.sessions.session_service import SessionService

__all__ = ["SessionStore", "SessionService"]
