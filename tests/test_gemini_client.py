"""Tests for the Gemini client and the retry wrapper."""
from types import SimpleNamespace

import pytest
from core.services.errors import GeminiAPIError, GeminiConfigurationError
from core.services.llm.gemini_client import GeminiClient, extract_text
from core.services.llm.retry import call_with_retry, get_status_code, is_retryable


class StatusError(Exception):
    def __init__(self, message, code):
        super().__init__(message)
        self.code = code


class FakeChatModel:
    """Replays a scripted sequence of replies and errors."""

    def __init__(self, *outcomes):
        self.outcomes = list(outcomes)
        self.calls = 0

    def invoke(self, messages):
        self.calls += 1
        outcome = self.outcomes.pop(0)
        if isinstance(outcome, Exception):
            raise outcome
        return SimpleNamespace(content=outcome, response_metadata={"finish_reason": "STOP"})


def _client(*outcomes, retries=3):
    client = GeminiClient(api_key="test-key", max_retries=retries, retry_delay_seconds=0)
    client._llm = FakeChatModel(*outcomes)
    return client


class TestRetry:
    """Test cases for call_with_retry."""

    def test_retries_until_success(self):
        outcomes = [GeminiAPIError("busy", upstream_status=503), StatusError("slow down", 429), "ok"]
        sleeps = []

        def flaky():
            outcome = outcomes.pop(0)
            if isinstance(outcome, Exception):
                raise outcome
            return outcome

        assert call_with_retry(flaky, retries=3, delay_seconds=0.5, sleep=sleeps.append) == "ok"
        assert sleeps == [0.5, 0.5]

    def test_gives_up_after_last_attempt(self):
        calls = []

        def always_busy():
            calls.append(1)
            raise Exception("Gemini API error 500: internal")

        with pytest.raises(Exception, match="500"):
            call_with_retry(always_busy, retries=3, delay_seconds=0, sleep=lambda s: None)
        assert len(calls) == 3

    def test_non_retryable_error_is_raised_at_once(self):
        calls = []

        def bad_request():
            calls.append(1)
            raise ValueError("400 invalid argument")

        with pytest.raises(ValueError):
            call_with_retry(bad_request, retries=3, delay_seconds=0, sleep=lambda s: None)
        assert len(calls) == 1

    def test_arguments_are_passed_through(self):
        assert call_with_retry(lambda a, b=0: a + b, 1, b=2) == 3

    @pytest.mark.parametrize("error, expected", [
        (StatusError("x", 429), True),
        (StatusError("x", 404), False),
        (StatusError("models/gemini-500 is not found", 404), False),
        (GeminiAPIError("Gemini API error 404: models/gemini-500 is not found", upstream_status=404), False),
        (GeminiAPIError("x", upstream_status=503), True),
        (Exception("HTTP 503 Service Unavailable"), True),
        (Exception("timeout after 5000ms"), False),
        (Exception("bad request"), False),
    ])
    def test_is_retryable(self, error, expected):
        assert is_retryable(error) is expected

    def test_status_code_from_attributes(self):
        assert get_status_code(StatusError("x", "503")) == 503
        assert get_status_code(StatusError("x", "UNAVAILABLE")) is None
        assert get_status_code(Exception("x")) is None


class TestGeminiClient:
    """Test cases for GeminiClient."""

    def test_missing_api_key(self):
        client = GeminiClient(api_key="")
        assert not client.is_configured
        with pytest.raises(GeminiConfigurationError, match="GEMINI_API_KEY"):
            client.ask("question")

    def test_ask_returns_text(self):
        assert _client("  Paris.  ").ask("Capital of France?") == "Paris."

    def test_ask_joins_parts(self):
        reply = [{"type": "text", "text": "Hello"}, "world"]
        assert _client(reply).ask("q") == "Hello world"

    def test_reply_without_text_is_dumped(self):
        text = _client([]).ask("q")
        assert '"finish_reason": "STOP"' in text

    def test_api_errors_are_wrapped(self):
        client = _client(StatusError("quota", 429))
        with pytest.raises(GeminiAPIError) as exc_info:
            client.ask("q")
        assert exc_info.value.upstream_status == 429
        assert "Gemini API error 429" in exc_info.value.message

    def test_ask_with_retry(self):
        client = _client(StatusError("unavailable", 503), "recovered")
        assert client.ask_with_retry("q") == "recovered"
        assert client._llm.calls == 2

    def test_ask_with_retry_stops_on_client_errors(self):
        client = _client(StatusError("bad key", 403), "never")
        with pytest.raises(GeminiAPIError):
            client.ask_with_retry("q")
        assert client._llm.calls == 1


class TestExtractText:
    """Test cases for extract_text."""

    def test_shapes(self):
        assert extract_text("text") == "text"
        assert extract_text(["a", {"text": "b"}, {"type": "image"}]) == "a b"
        assert extract_text(None) == ""
