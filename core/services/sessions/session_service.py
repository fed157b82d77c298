"""Session service: session CRUD, the ask flow and answer feedback."""
from typing import List, Optional

from app.config import settings
from core.models.session import Feedback, HistoryEntry, Session, SessionSummary, StoreData
from core.services.errors import (
    AnswerNotFoundError,
    ErrorHandler,
    FallbackResponses,
    QuestionRequiredError,
    SessionNotFoundError,
)
from core.services.llm.gemini_client import GeminiClient
from core.services.sessions.session_store import SessionStore
from core.utils.logger import logger
from core.utils.text_utils import is_greeting, new_id, truncate_title

DEFAULT_TITLE = "New Chat"


def _find_session(data: StoreData, session_id: Optional[str]) -> Session:
    for session in data.sessions:
        if session.id == session_id:
            return session
    raise SessionNotFoundError()


class SessionService:
    """Chat sessions persisted in a single JSON file."""

    def __init__(self, store: Optional[SessionStore] = None, llm_client: Optional[GeminiClient] = None):
        self.store = store or SessionStore()
        self.llm_client = llm_client or GeminiClient()

    def start_session(self) -> Session:
        """Create an empty session at the top of the list."""
        data = self.store.read()
        session = Session(id=new_id(), title=DEFAULT_TITLE, history=[])
        data.sessions.insert(0, session)
        self.store.write(data)
        logger.info(f"Started session {session.id}")
        return session

    def list_sessions(self) -> List[SessionSummary]:
        data = self.store.read()
        return [SessionSummary(id=s.id, title=s.title) for s in data.sessions]

    def get_session(self, session_id: str) -> Session:
        return _find_session(self.store.read(), session_id)

    def delete_session(self, session_id: str) -> None:
        data = self.store.read()
        session = _find_session(data, session_id)
        data.sessions.remove(session)
        self.store.write(data)
        logger.info(f"Deleted session {session_id}")

    def _reply_to(self, question: str) -> str:
        if is_greeting(question):
            return FallbackResponses.get_response("greeting")
        return ErrorHandler.safe_execute(lambda: self.llm_client.ask_with_retry(question), question)

    def ask(self, session_id: Optional[str], question: Optional[str]) -> HistoryEntry:
        """
        Record a question, answer it and persist both entries.

        Greetings get a canned reply and never rename the session; model
        failures are stored as the reply text instead of being raised.

        Args:
            session_id: Target session
            question: User question

        Returns:
            The assistant history entry

        Raises:
            QuestionRequiredError: Question is empty
            SessionNotFoundError: Session does not exist
        """
        if not question or not question.strip():
            raise QuestionRequiredError()

        data = self.store.read()
        session = _find_session(data, session_id)

        session.history.append(HistoryEntry(id=new_id(), role="user", question=question))

        logger.info(f"Answering question in session {session.id} ({len(question)} chars)")
        reply = self._reply_to(question)

        answer = HistoryEntry(
            id=new_id(),
            role="assistant",
            response=reply,
            feedback=Feedback(likes=0, dislikes=0),
        )

        current_title = (session.title or "").strip()
        if (not current_title or current_title == DEFAULT_TITLE) and not is_greeting(question):
            session.title = truncate_title(question, settings.TITLE_MAX_LENGTH)

        session.history.append(answer)
        self.store.write(data)
        return answer

    def give_feedback(self, session_id: Optional[str], answer_id: Optional[str], feedback_type: Optional[str]) -> Feedback:
        """
        Toggle like/dislike on an answer.

        A like and a dislike exclude each other; sending the same type again
        clears it. Other types leave the counters unchanged.
        """
        data = self.store.read()
        session = _find_session(data, session_id)

        answer = next((entry for entry in session.history if entry.id == answer_id), None)
        if answer is None:
            raise AnswerNotFoundError()

        if answer.feedback is None:
            answer.feedback = Feedback()

        if feedback_type == "like":
            answer.feedback.likes = 0 if answer.feedback.likes == 1 else 1
            answer.feedback.dislikes = 0
        elif feedback_type == "dislike":
            answer.feedback.dislikes = 0 if answer.feedback.dislikes == 1 else 1
            answer.feedback.likes = 0

        self.store.write(data)
        return answer.feedback
