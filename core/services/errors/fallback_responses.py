"""Canned replies used in place of a model answer."""


class FallbackResponses:
    """Predefined replies for greetings and error scenarios."""

    RESPONSES = {
        "greeting": "Hello! How can I help you today?",
        "llm_error": "Gemini Error: {error}",
        "empty_history": "No messages yet. Start by sending a question.",
    }

    @classmethod
    def get_response(cls, response_type: str, error: str = "unknown error") -> str:
        """
        Get a canned reply.

        Args:
            response_type: Key in RESPONSES (greeting, llm_error, empty_history)
            error: Error message substituted into error replies

        Returns:
            Reply text; unknown types fall back to the llm_error reply
        """
        template = cls.RESPONSES.get(response_type, cls.RESPONSES["llm_error"])
        return template.format(error=error)
