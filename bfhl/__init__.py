"""BFHL compute and single-word answer service.

Architectural role:
    Root package for the HTTP service that accepts one operation per request
    (`fibonacci`, `prime`, `lcm`, `hcf`, `AI`) and answers with a uniform
    success/error envelope.

Package split:
    - `core`: request classification, numeric kernel, dispatch, envelopes.
    - `llm`: configuration, provider adapters, and fallback orchestration.
    - `api`: FastAPI boundary and process entrypoint.
"""

__version__ = "1.0.0"
