"""Q&A endpoints: asking questions and rating answers."""
from fastapi import APIRouter, Depends

from app.dependencies import get_session_service
from core.models.session import AskRequest, FeedbackRequest, HistoryEntry
from core.services.sessions import SessionService

router = APIRouter()


@router.post("/ask", response_model=HistoryEntry, response_model_exclude_none=True)
def ask_question(request: AskRequest, service: SessionService = Depends(get_session_service)):
    """
    Ask a question within a session.

    Runs in the threadpool: the Gemini call and its retry delays block.
    Model failures come back as the answer text, not as an HTTP error.
    """
    return service.ask(request.session_id, request.question)


@router.post("/feedback")
def give_feedback(request: FeedbackRequest, service: SessionService = Depends(get_session_service)):
    """Toggle like/dislike on an assistant answer."""
    feedback = service.give_feedback(request.session_id, request.answer_id, request.type)
    return {"feedback": feedback.model_dump()}
