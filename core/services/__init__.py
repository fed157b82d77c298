"""Core services package, organized by domain.

Main Services:
- SessionService: Session CRUD, asking questions and answer feedback
- SessionStore: Flat JSON file persistence for sessions
- GeminiClient: Google Generative Language API client with retry
- render_answer_html: Markdown-subset rendering of assistant answers

Usage:
    from core.services import SessionService, render_answer_html

    service = SessionService()
    session = service.start_session()
    answer = service.ask(session.id, "What is a monad?")
    html = render_answer_html(answer.response, theme="dark")
"""
# Session services
from core.services.sessions import SessionService, SessionStore

# LLM services
from core.services.llm import GeminiClient

# Answer rendering
from core.services.markdown import render_answer, render_answer_html

__all__ = [
    "SessionService",
    "SessionStore",
    "GeminiClient",
    "render_answer",
    "render_answer_html",
]
