"""
Unit tests for the Gemini and OpenAI adapters.

Provider endpoints are faked at the transport boundary with
`httpx.MockTransport`, so request construction and response parsing run for real.
"""

from __future__ import annotations

import json

import httpx
import pytest

from bfhl.llm.client import (
    GeminiClient,
    OpenAIClient,
    extract_single_word,
)
from bfhl.llm.errors import ProviderNotConfiguredError, SingleWordExtractionError


def gemini_body(text: str) -> dict:
    return {"candidates": [{"content": {"parts": [{"text": text}]}}]}


def openai_body(text: str) -> dict:
    return {"choices": [{"message": {"role": "assistant", "content": text}}]}


class RecordingTransport:
    """Builds a MockTransport that records requests and replies with a fixed response."""

    def __init__(self, status_code: int = 200, body: dict | None = None) -> None:
        self.status_code = status_code
        self.body = body if body is not None else {}
        self.requests: list[httpx.Request] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status_code, json=self.body)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


class TestExtractSingleWord:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("Paris", "Paris"),
            ("  Paris.\n", "Paris"),
            ("Paris is the capital", "Paris"),
            ("**Paris**", "Paris"),
            ("\"Zürich\"", "Zürich"),
            ("42!", "42"),
        ],
    )
    def test_first_token_stripped(self, text: str, expected: str) -> None:
        assert extract_single_word(text) == expected

    @pytest.mark.parametrize("text", ["", "   ", None])
    def test_empty_text_fails(self, text) -> None:
        with pytest.raises(SingleWordExtractionError, match="Empty response"):
            extract_single_word(text)

    def test_punctuation_only_token_fails(self) -> None:
        with pytest.raises(SingleWordExtractionError, match="Unable to extract"):
            extract_single_word("... Paris")


class TestGeminiClient:
    @pytest.mark.asyncio
    async def test_builds_combined_prompt_request(self) -> None:
        fake = RecordingTransport(body=gemini_body("Paris."))
        client = GeminiClient(api_key="g-key", model="gemini-test", transport=fake.transport)

        assert await client.answer_single_word("What is the capital of France?") == "Paris"

        request = fake.requests[0]
        assert request.method == "POST"
        assert str(request.url).endswith("/models/gemini-test:generateContent")
        assert request.headers["x-goog-api-key"] == "g-key"
        payload = json.loads(request.content)
        prompt = payload["contents"][0]["parts"][0]["text"]
        assert prompt.startswith("Answer the following question in exactly one word.")
        assert prompt.endswith("Question: What is the capital of France?")

    @pytest.mark.asyncio
    async def test_missing_answer_field_fails_extraction(self) -> None:
        fake = RecordingTransport(body={"candidates": []})
        client = GeminiClient(api_key="g-key", transport=fake.transport)

        with pytest.raises(SingleWordExtractionError):
            await client.answer_single_word("Anything?")

    @pytest.mark.asyncio
    async def test_http_error_propagates_unnormalized(self) -> None:
        fake = RecordingTransport(status_code=429, body={"error": "quota"})
        client = GeminiClient(api_key="g-key", transport=fake.transport)

        with pytest.raises(httpx.HTTPStatusError) as excinfo:
            await client.answer_single_word("Anything?")
        assert excinfo.value.response.status_code == 429

    @pytest.mark.asyncio
    async def test_missing_key_fails_before_io(self) -> None:
        fake = RecordingTransport(body=gemini_body("Paris"))
        client = GeminiClient(api_key=None, transport=fake.transport)

        assert client.is_configured is False
        with pytest.raises(ProviderNotConfiguredError) as excinfo:
            await client.answer_single_word("Anything?")
        assert excinfo.value.provider == "Gemini"
        assert "GEMINI_API_KEY" in excinfo.value.message
        assert fake.requests == []


class TestOpenAIClient:
    @pytest.mark.asyncio
    async def test_builds_message_pair_with_zero_temperature(self) -> None:
        fake = RecordingTransport(body=openai_body("Blue, mostly."))
        client = OpenAIClient(api_key="o-key", model="gpt-test", transport=fake.transport)

        assert await client.answer_single_word("Sky colour?") == "Blue"

        request = fake.requests[0]
        assert str(request.url) == "https://api.openai.com/v1/chat/completions"
        assert request.headers["authorization"] == "Bearer o-key"
        payload = json.loads(request.content)
        assert payload["model"] == "gpt-test"
        assert payload["temperature"] == 0
        assert payload["messages"] == [
            {"role": "system", "content": "Answer in exactly one word."},
            {"role": "user", "content": "Sky colour?"},
        ]

    @pytest.mark.asyncio
    async def test_null_content_fails_extraction(self) -> None:
        fake = RecordingTransport(body=openai_body(None))
        client = OpenAIClient(api_key="o-key", transport=fake.transport)

        with pytest.raises(SingleWordExtractionError):
            await client.answer_single_word("Sky colour?")

    @pytest.mark.asyncio
    async def test_timeout_propagates_as_transport_error(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("timed out", request=request)

        client = OpenAIClient(api_key="o-key", transport=httpx.MockTransport(handler))

        with pytest.raises(httpx.TimeoutException):
            await client.answer_single_word("Sky colour?")

    def test_default_timeout_is_eight_seconds(self) -> None:
        assert OpenAIClient(api_key="o-key").timeout_seconds == 8.0
        assert GeminiClient(api_key="g-key").timeout_seconds == 8.0
