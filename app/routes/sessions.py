"""Session endpoints."""
from typing import List

from fastapi import APIRouter, Depends

from app.dependencies import get_session_service
from core.models.response import OkResponse
from core.models.session import Session, SessionSummary
from core.services.sessions import SessionService

router = APIRouter()


@router.post("/start")
def start_session(service: SessionService = Depends(get_session_service)):
    """Create a new empty session."""
    session = service.start_session()
    return {"sessionId": session.id, "title": session.title}


@router.get("/sessions", response_model=List[SessionSummary])
def list_sessions(service: SessionService = Depends(get_session_service)):
    """List sessions, newest first."""
    return service.list_sessions()


@router.get("/session/{session_id}", response_model=Session, response_model_exclude_none=True)
def get_session(session_id: str, service: SessionService = Depends(get_session_service)):
    """Full session including its history."""
    return service.get_session(session_id)


@router.delete("/session/{session_id}", response_model=OkResponse)
def delete_session(session_id: str, service: SessionService = Depends(get_session_service)):
    """Delete a session."""
    service.delete_session(session_id)
    return OkResponse()
