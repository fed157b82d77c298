"""Shared fixtures."""
import pytest

from core.services.sessions import SessionService, SessionStore


class FakeLLMClient:
    """Stands in for GeminiClient; records questions and returns a fixed reply."""

    def __init__(self, reply="Here is the **answer**.", error=None):
        self.reply = reply
        self.error = error
        self.questions = []

    def ask_with_retry(self, question):
        self.questions.append(question)
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture
def store(tmp_path):
    return SessionStore(tmp_path / "mock-data.json")


@pytest.fixture
def llm_client():
    return FakeLLMClient()


@pytest.fixture
def service(store, llm_client):
    return SessionService(store=store, llm_client=llm_client)


@pytest.fixture
def fake_llm_factory():
    return FakeLLMClient
