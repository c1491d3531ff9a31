"""Provider/runtime configuration for the service.

Architectural role:
    Centralizes operator identity, AI provider selection, credential lookup, and
    listener settings. `Settings` is built once at startup (`bfhl.api.http_api`)
    and passed by reference to the components that need it.

Model call flow integration:
    - `client.GeminiClient` consumes `GEMINI_URL_TEMPLATE`, key and model.
    - `client.OpenAIClient` consumes `OPENAI_URL`, key and model.
    - `service.build_answer_service` consumes `ai_provider` and the timeout.

Determinism:
    Deterministic for a fixed process environment. `Settings` is frozen and is
    never mutated after construction.

Failure behavior:
    Missing key material is represented as `None`; the adapters turn it into a
    "not configured" error at call time.
"""

import os
from dataclasses import dataclass

from dotenv import load_dotenv


GEMINI_URL_TEMPLATE = (
    "https://generativelanguage.googleapis.com/v1beta/models/"
    "{model}:generateContent"
)

OPENAI_URL = "https://api.openai.com/v1/chat/completions"

# Provider name -> display name and environment variable holding its key.
# Iteration order is the fallback priority under the "auto" preference.
PROVIDERS = {
    "gemini": {
        "display_name": "Gemini",
        "key_env": "GEMINI_API_KEY",
    },
    "openai": {
        "display_name": "OpenAI",
        "key_env": "OPENAI_API_KEY",
    },
}

AUTO_PROVIDER = "auto"

DEFAULT_OFFICIAL_EMAIL = "operator@example.com"
DEFAULT_AI_PROVIDER = AUTO_PROVIDER
DEFAULT_GEMINI_MODEL = "gemini-2.5-flash"
DEFAULT_OPENAI_MODEL = "gpt-4o-mini"
DEFAULT_AI_TIMEOUT_SECONDS = 8.0
DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 3001


def load_key(env_name: str) -> str | None:
    """Return a stripped API key from the environment, or `None` when unset/blank."""
    value = os.getenv(env_name, "").strip()
    return value or None


@dataclass(frozen=True)
class Settings:
    """Immutable process-wide configuration.

    Relevant environment variables:
        - `OFFICIAL_EMAIL`
        - `AI_PROVIDER` (`gemini`, `openai`, or `auto`)
        - `GEMINI_API_KEY`, `GEMINI_MODEL`
        - `OPENAI_API_KEY`, `OPENAI_MODEL`
        - `AI_TIMEOUT_SECONDS`
        - `HOST`, `PORT`, `LOG_LEVEL`
    """

    official_email: str = DEFAULT_OFFICIAL_EMAIL
    ai_provider: str = DEFAULT_AI_PROVIDER
    gemini_api_key: str | None = None
    gemini_model: str = DEFAULT_GEMINI_MODEL
    openai_api_key: str | None = None
    openai_model: str = DEFAULT_OPENAI_MODEL
    ai_timeout_seconds: float = DEFAULT_AI_TIMEOUT_SECONDS
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        """Load `.env` (if present) and build settings from the environment.

        Edge cases:
            - Provider preference is lower-cased; unknown values are kept and
              treated as `auto` by the answer service.
            - Blank API keys count as unset.
        """
        load_dotenv()

        return cls(
            official_email=os.getenv("OFFICIAL_EMAIL", DEFAULT_OFFICIAL_EMAIL).strip(),
            ai_provider=os.getenv("AI_PROVIDER", DEFAULT_AI_PROVIDER).strip().lower(),
            gemini_api_key=load_key(PROVIDERS["gemini"]["key_env"]),
            gemini_model=os.getenv("GEMINI_MODEL", DEFAULT_GEMINI_MODEL).strip(),
            openai_api_key=load_key(PROVIDERS["openai"]["key_env"]),
            openai_model=os.getenv("OPENAI_MODEL", DEFAULT_OPENAI_MODEL).strip(),
            ai_timeout_seconds=float(
                os.getenv("AI_TIMEOUT_SECONDS", str(DEFAULT_AI_TIMEOUT_SECONDS))
            ),
            host=os.getenv("HOST", DEFAULT_HOST).strip(),
            port=int(os.getenv("PORT", str(DEFAULT_PORT))),
            log_level=os.getenv("LOG_LEVEL", "INFO").strip().upper(),
        )
