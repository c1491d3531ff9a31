"""Provider-specific transport clients for single-word answers.

Architectural role:
    Implements the two interchangeable adapters used by `bfhl.llm.service`.
    Each adapter owns its request construction and the path to the answer text
    inside its provider's response shape.

Model invocation flow:
    `AnswerService.answer` -> `<adapter>.answer_single_word(question)` ->
    one HTTP POST -> answer text -> `extract_single_word`.

Retry behavior:
    No retry loop is implemented. Each call is attempted once with the
    configured timeout (8s by default).

Determinism:
    Request construction is deterministic. OpenAI requests pin
    `temperature=0`; output text remains provider dependent.

Failure handling model:
    Adapters do not normalize errors. Missing keys raise
    `ProviderNotConfiguredError` before any I/O; `httpx` transport/status errors
    and `SingleWordExtractionError` propagate to the orchestrator, which applies
    `service.normalize_ai_error`.
"""

from typing import Any, Protocol

import httpx

from bfhl.llm.errors import ProviderNotConfiguredError, SingleWordExtractionError
from bfhl.llm.provider_config import (
    DEFAULT_AI_TIMEOUT_SECONDS,
    DEFAULT_GEMINI_MODEL,
    DEFAULT_OPENAI_MODEL,
    GEMINI_URL_TEMPLATE,
    OPENAI_URL,
    PROVIDERS,
)


GEMINI_PROMPT_TEMPLATE = "Answer the following question in exactly one word.\nQuestion: {question}"
OPENAI_SYSTEM_MESSAGE = "Answer in exactly one word."


class SingleWordProvider(Protocol):
    """Minimal async interface required by the answer orchestrator."""

    name: str
    display_name: str

    @property
    def is_configured(self) -> bool:
        ...

    async def answer_single_word(self, question: str) -> str:
        """Return exactly one word answering `question`."""
        ...


def extract_single_word(text: str) -> str:
    """Reduce provider text to its first token, keeping only letters and digits.

    Raises:
        SingleWordExtractionError: Empty text, or nothing left after stripping.
    """
    if not text or not text.strip():
        raise SingleWordExtractionError("Empty response from AI")

    first_token = text.split()[0]
    word = "".join(ch for ch in first_token if ch.isalnum())

    if not word:
        raise SingleWordExtractionError(
            "Unable to extract single-word answer from AI response"
        )
    return word


def _dig(data: Any, *path) -> str:
    """Follow `path` through nested dicts/lists; return "" when any step is missing."""
    current = data
    for step in path:
        try:
            current = current[step]
        except (KeyError, IndexError, TypeError):
            return ""
    return current if isinstance(current, str) else ""


class _HTTPProvider:
    """Shared key handling and POST execution for the concrete adapters."""

    name = ""

    def __init__(
        self,
        api_key: str | None,
        model: str,
        timeout_seconds: float = DEFAULT_AI_TIMEOUT_SECONDS,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.api_key = api_key
        self.model = model
        self.timeout_seconds = timeout_seconds
        # Tests inject `httpx.MockTransport` here.
        self._transport = transport

    @property
    def display_name(self) -> str:
        return PROVIDERS[self.name]["display_name"]

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key)

    def _require_key(self) -> str:
        if not self.api_key:
            raise ProviderNotConfiguredError(self.display_name, PROVIDERS[self.name]["key_env"])
        return self.api_key

    async def _post_json(self, url: str, headers: dict[str, str], body: dict) -> Any:
        async with httpx.AsyncClient(
            timeout=self.timeout_seconds,
            transport=self._transport,
        ) as client:
            response = await client.post(url, headers=headers, json=body)

        response.raise_for_status()
        return response.json()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(model={self.model!r}, configured={self.is_configured})"


class GeminiClient(_HTTPProvider):
    """Gemini `generateContent` adapter.

    The one-word instruction and the question travel as one combined prompt.
    Answer path: `candidates[0].content.parts[0].text`.
    """

    name = "gemini"

    def __init__(self, api_key=None, model=DEFAULT_GEMINI_MODEL, **kwargs):
        super().__init__(api_key, model, **kwargs)

    def build_payload(self, question: str) -> dict:
        return {
            "contents": [
                {"parts": [{"text": GEMINI_PROMPT_TEMPLATE.format(question=question)}]}
            ]
        }

    async def answer_single_word(self, question: str) -> str:
        api_key = self._require_key()
        headers = {
            "x-goog-api-key": api_key,
            "Content-Type": "application/json",
        }
        data = await self._post_json(
            GEMINI_URL_TEMPLATE.format(model=self.model),
            headers,
            self.build_payload(question),
        )
        return extract_single_word(_dig(data, "candidates", 0, "content", "parts", 0, "text"))


class OpenAIClient(_HTTPProvider):
    """OpenAI chat-completions adapter.

    Sends a system/user message pair with `temperature=0`.
    Answer path: `choices[0].message.content`.
    """

    name = "openai"

    def __init__(self, api_key=None, model=DEFAULT_OPENAI_MODEL, **kwargs):
        super().__init__(api_key, model, **kwargs)

    def build_payload(self, question: str) -> dict:
        return {
            "model": self.model,
            "messages": [
                {"role": "system", "content": OPENAI_SYSTEM_MESSAGE},
                {"role": "user", "content": question},
            ],
            "temperature": 0,
        }

    async def answer_single_word(self, question: str) -> str:
        api_key = self._require_key()
        headers = {
            "Authorization": f"Bearer {api_key}",
            "Content-Type": "application/json",
        }
        data = await self._post_json(OPENAI_URL, headers, self.build_payload(question))
        return extract_single_word(_dig(data, "choices", 0, "message", "content"))
