"""Browser UI: a single server-rendered chat page."""
from pathlib import Path
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from app.config import settings
from app.dependencies import get_session_service
from core.services.errors import FallbackResponses, SessionNotFoundError
from core.services.markdown import render_answer_html
from core.services.markdown.renderer import THEMES
from core.services.sessions import SessionService

router = APIRouter()
templates = Jinja2Templates(directory=str(Path(__file__).resolve().parent.parent / "templates"))


def _messages(history, theme: str) -> List[Dict[str, Any]]:
    messages = []
    for entry in history:
        if entry.is_assistant:
            feedback = entry.feedback
            messages.append({
                "id": entry.id,
                "is_assistant": True,
                "html": render_answer_html(entry.answer, theme=theme),
                "likes": feedback.likes if feedback else 0,
                "dislikes": feedback.dislikes if feedback else 0,
            })
        else:
            messages.append({"id": entry.id, "is_assistant": False, "question": entry.question or ""})
    return messages


@router.get("/", response_class=HTMLResponse)
def index(
    request: Request,
    session: Optional[str] = None,
    theme: Optional[str] = None,
    service: SessionService = Depends(get_session_service),
):
    """Chat page for the selected session; theme is passed explicitly."""
    theme = theme if theme in THEMES else settings.DEFAULT_THEME
    error = None
    messages: List[Dict[str, Any]] = []
    current = None

    if session:
        try:
            current = service.get_session(session)
            messages = _messages(current.history, theme)
        except SessionNotFoundError:
            error = "Could not load session history."

    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "title": settings.API_TITLE,
            "theme": theme,
            "other_theme": "light" if theme == "dark" else "dark",
            "sessions": service.list_sessions(),
            "current": current,
            "messages": messages,
            "empty_message": FallbackResponses.get_response("empty_history"),
            "error": error,
        },
    )
