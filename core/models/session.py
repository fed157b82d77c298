"""Session data models."""
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Feedback(BaseModel):
    """Like/dislike counters on an assistant answer (each 0 or 1)."""
    likes: int = 0
    dislikes: int = 0


class HistoryEntry(BaseModel):
    """One message in a session: a user question or an assistant response."""
    model_config = ConfigDict(extra="allow")

    id: str
    role: Optional[str] = None
    question: Optional[str] = None
    response: Optional[Any] = None  # str, or a structured answer object
    feedback: Optional[Feedback] = None

    @model_validator(mode="before")
    @classmethod
    def infer_role(cls, data: Any) -> Any:
        """Older entries carry no role; answers are recognized by their payload."""
        if isinstance(data, dict) and not data.get("role"):
            data = dict(data)
            has_answer = any(data.get(key) for key in ("response", "answer", "text"))
            data["role"] = "assistant" if has_answer else "user"
        return data

    @property
    def is_assistant(self) -> bool:
        return self.role == "assistant"

    @property
    def answer(self) -> Any:
        """Answer payload, whichever key the entry stored it under."""
        if self.response is not None:
            return self.response
        extra = self.model_extra or {}
        return extra.get("answer", extra.get("text"))


class Session(BaseModel):
    """Chat session with its full history."""
    model_config = ConfigDict(extra="allow")

    id: str
    title: str = "New Chat"
    history: List[HistoryEntry] = Field(default_factory=list)


class SessionSummary(BaseModel):
    """Session as listed in the sidebar."""
    id: str
    title: str


class StoreData(BaseModel):
    """Whole content of the session file."""
    sessions: List[Session] = Field(default_factory=list)
    templates: Dict[str, Any] = Field(default_factory=dict)


class AskRequest(BaseModel):
    """Ask request model."""
    model_config = ConfigDict(populate_by_name=True)

    session_id: Optional[str] = Field(default=None, alias="sessionId")
    question: Optional[str] = None


class FeedbackRequest(BaseModel):
    """Feedback request model; unknown types are accepted and change nothing."""
    model_config = ConfigDict(populate_by_name=True)

    session_id: Optional[str] = Field(default=None, alias="sessionId")
    answer_id: Optional[str] = Field(default=None, alias="answerId")
    type: Optional[str] = None


class RenderRequest(BaseModel):
    """Render an arbitrary answer value to HTML."""
    answer: Optional[Any] = None
    theme: str = "light"
