"""Provider doubles and client helpers shared by the test modules."""

from __future__ import annotations

from fastapi.testclient import TestClient

from bfhl.api.http_api import create_app
from bfhl.llm.provider_config import Settings
from bfhl.llm.service import AnswerService


class ScriptedProvider:
    """Provider double that returns a fixed word or raises a fixed error."""

    def __init__(
        self,
        name: str,
        display_name: str,
        answer: str | None = None,
        error: Exception | None = None,
        configured: bool = True,
    ) -> None:
        self.name = name
        self.display_name = display_name
        self.answer = answer
        self.error = error
        self.configured = configured
        self.calls: list[str] = []

    @property
    def is_configured(self) -> bool:
        return self.configured

    async def answer_single_word(self, question: str) -> str:
        self.calls.append(question)
        if self.error is not None:
            raise self.error
        return self.answer


def gemini_double(**kwargs) -> ScriptedProvider:
    return ScriptedProvider("gemini", "Gemini", **kwargs)


def openai_double(**kwargs) -> ScriptedProvider:
    return ScriptedProvider("openai", "OpenAI", **kwargs)


TEST_EMAIL = "tester@example.com"


def make_client(settings: Settings, answer_service: AnswerService | None = None) -> TestClient:
    """Build a test client that turns server errors into HTTP 500 responses."""
    app = create_app(settings, answer_service=answer_service)
    return TestClient(app, raise_server_exceptions=False)
