"""Shared FastAPI dependencies."""
from functools import lru_cache

from core.services.sessions import SessionService


@lru_cache
def get_session_service() -> SessionService:
    """Process-wide session service built from settings."""
    return SessionService()
