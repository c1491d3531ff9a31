"""Error taxonomy for the AI answer subsystem.

Every error carries the display name of the provider it originated from and the
HTTP status the API boundary answers with. Messages are safe to show to callers:
they never include keys, URLs, or upstream response bodies.
"""


class AIProviderError(Exception):
    """Base class for normalized AI provider failures."""

    status_code = 502

    def __init__(self, provider: str, message: str, upstream_status: int | None = None):
        super().__init__(message)
        self.provider = provider
        self.message = message
        self.upstream_status = upstream_status


class ProviderNotConfiguredError(AIProviderError):
    """The provider's API key is missing; no request was sent."""

    def __init__(self, provider: str, key_env: str):
        super().__init__(provider, f"{provider} is not configured. Set {key_env}.")
        self.key_env = key_env


class NoProviderConfiguredError(AIProviderError):
    """No provider key is set at all under the `auto` preference."""

    def __init__(self):
        super().__init__(
            "AI",
            "No AI provider configured. Set GEMINI_API_KEY or OPENAI_API_KEY.",
        )


class ProviderRateLimitError(AIProviderError):
    status_code = 429

    def __init__(self, provider: str, upstream_status: int = 429):
        super().__init__(
            provider,
            f"{provider} rate limit or quota exceeded",
            upstream_status=upstream_status,
        )


class ProviderUpstreamError(AIProviderError):
    """Provider answered with a 4xx/5xx status other than 429."""

    def __init__(self, provider: str, upstream_status: int):
        super().__init__(
            provider,
            f"{provider} API error ({upstream_status})",
            upstream_status=upstream_status,
        )


class ProviderRequestFailedError(AIProviderError):
    """Network failure, timeout, or a response without a usable answer."""

    def __init__(self, provider: str):
        super().__init__(provider, f"{provider} API request failed")


class SingleWordExtractionError(ValueError):
    """Provider text did not contain a usable single-word answer."""
