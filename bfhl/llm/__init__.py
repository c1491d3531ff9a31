"""AI answer package.

Architectural role:
    Provides configuration, provider adapters, and the fallback orchestrator
    used by `bfhl.core.engine` to answer `AI` operations with one word.

Module split:
    - `provider_config`: environment-driven `Settings` and provider metadata.
    - `errors`: normalized AI error taxonomy.
    - `client`: Gemini and OpenAI transport adapters.
    - `service`: error normalization and provider fallback.
"""
