"""Single-word answer orchestration with provider fallback.

Architectural role:
    Provides the canonical AI entrypoint used by `bfhl.core.engine`. Selects
    which adapter(s) from `bfhl.llm.client` to call based on the configured
    preference, and normalizes every adapter failure into the `AIProviderError`
    taxonomy.

Selection policy:
    - Preference `gemini` / `openai`: only that adapter is called; its failure is
      final, including "not configured".
    - Preference `auto` (or any unrecognized value): configured adapters are
      tried in priority order (Gemini, then OpenAI). A failed attempt is logged
      and the next configured adapter is tried; when all fail, the last failure
      is raised. With no configured adapter, `NoProviderConfiguredError` is raised
      before any I/O.

Retry behavior:
    None. Each adapter is attempted at most once per request, strictly in sequence.
"""

import logging

import httpx

from bfhl.llm.client import GeminiClient, OpenAIClient, SingleWordProvider
from bfhl.llm.errors import (
    AIProviderError,
    NoProviderConfiguredError,
    ProviderRateLimitError,
    ProviderRequestFailedError,
    ProviderUpstreamError,
)
from bfhl.llm.provider_config import AUTO_PROVIDER, Settings


logger = logging.getLogger(__name__)


def normalize_ai_error(err: Exception, provider: str) -> AIProviderError:
    """Map an adapter failure onto the normalized error taxonomy.

    Args:
        err: Exception raised by an adapter call.
        provider: Display name of the adapter that raised it.

    Returns:
        - `err` unchanged when it is already an `AIProviderError`.
        - `ProviderRateLimitError` for upstream status 429.
        - `ProviderUpstreamError` for any other upstream status >= 400.
        - `ProviderRequestFailedError` for everything without a usable status
          (transport errors, timeouts, bad JSON, extraction failures).
    """
    if isinstance(err, AIProviderError):
        return err

    status = None
    if isinstance(err, httpx.HTTPStatusError) and err.response is not None:
        status = err.response.status_code

    if status == 429:
        return ProviderRateLimitError(provider)
    if status is not None and status >= 400:
        return ProviderUpstreamError(provider, status)
    return ProviderRequestFailedError(provider)


class AnswerService:
    """Fallback orchestrator over named `SingleWordProvider` adapters."""

    def __init__(self, providers: list[SingleWordProvider], preference: str = AUTO_PROVIDER):
        # List order is the fallback priority.
        self.providers = list(providers)
        self.preference = (preference or AUTO_PROVIDER).lower()

    def _provider_named(self, name: str) -> SingleWordProvider | None:
        for provider in self.providers:
            if provider.name == name:
                return provider
        return None

    async def _attempt(self, provider: SingleWordProvider, question: str) -> str:
        try:
            return await provider.answer_single_word(question)
        except (AIProviderError, httpx.HTTPError, ValueError) as err:
            normalized = normalize_ai_error(err, provider.display_name)
            logger.warning(
                "%s attempt failed: %s (%s)",
                provider.display_name,
                type(normalized).__name__,
                err,
            )
            raise normalized from err
        except Exception as err:
            # Any other adapter fault (e.g. httpx.InvalidURL) is a failed request.
            logger.exception("%s attempt failed unexpectedly", provider.display_name)
            raise ProviderRequestFailedError(provider.display_name) from err

    async def answer(self, question: str) -> str:
        """Return a single-word answer for `question`.

        Raises:
            AIProviderError: The final normalized failure.
        """
        pinned = self._provider_named(self.preference)
        if pinned is not None:
            return await self._attempt(pinned, question)

        candidates = [provider for provider in self.providers if provider.is_configured]
        if not candidates:
            raise NoProviderConfiguredError()

        last_error: AIProviderError | None = None
        for provider in candidates:
            try:
                return await self._attempt(provider, question)
            except AIProviderError as err:
                last_error = err
                if provider is not candidates[-1]:
                    logger.info("Falling back from %s to next configured provider", provider.display_name)

        raise last_error


def build_answer_service(
    settings: Settings,
    transport: httpx.AsyncBaseTransport | None = None,
) -> AnswerService:
    """Build the orchestrator and both adapters from immutable settings.

    Args:
        settings: Process-wide configuration.
        transport: Optional `httpx` transport shared by both adapters (tests).
    """
    providers = [
        GeminiClient(
            api_key=settings.gemini_api_key,
            model=settings.gemini_model,
            timeout_seconds=settings.ai_timeout_seconds,
            transport=transport,
        ),
        OpenAIClient(
            api_key=settings.openai_api_key,
            model=settings.openai_model,
            timeout_seconds=settings.ai_timeout_seconds,
            transport=transport,
        ),
    ]
    return AnswerService(providers, preference=settings.ai_provider)
