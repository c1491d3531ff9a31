"""
HTTP API adapter for the BFHL service.

Architectural role:
- Expose `GET /health` and `POST /bfhl`.
- Enforce transport-level checks (content type, JSON decoding).
- Delegate classification to `bfhl.core.classifier` and execution to
  `bfhl.core.engine`.
- Wrap every outcome in the uniform envelope from `bfhl.core.envelope`.

API request lifecycle (`POST /bfhl`):
1. Reject non-JSON content types with HTTP 415.
2. Decode the body (empty body -> `{}`); undecodable JSON -> HTTP 400.
3. Classify into exactly one operation; validation failures -> HTTP 400.
4. Execute; AI failures -> HTTP 429 (rate limit) or 502 (other upstream).
5. Return HTTP 200 with `data`.

Error handling strategy:
- Unknown routes and wrong methods answer 404 "Not found"; other framework
  HTTP errors keep their status. All use the envelope shape.
- Any other exception is logged with traceback and converted to a generic
  HTTP 500 without leaking internal detail.

Side effects:
- Outbound provider calls for `AI` operations only.
"""

import json
import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from bfhl import __version__
from bfhl.core.classifier import RequestValidationError, classify_request
from bfhl.core.engine import execute
from bfhl.core.envelope import (
    ErrorEnvelope,
    HealthEnvelope,
    SuccessEnvelope,
    error_envelope,
    health_envelope,
    success_envelope,
)
from bfhl.llm.errors import AIProviderError
from bfhl.llm.provider_config import Settings
from bfhl.llm.service import AnswerService, build_answer_service


logger = logging.getLogger(__name__)

JSON_MEDIA_TYPE = "application/json"


def is_json_content_type(content_type: str | None) -> bool:
    """True when the media type (parameters ignored) is `application/json`."""
    if not content_type:
        return False
    media_type = content_type.split(";", 1)[0].strip().lower()
    return media_type == JSON_MEDIA_TYPE


async def _decode_body(request: Request):
    raw = await request.body()
    if not raw.strip():
        return {}
    return json.loads(raw)


def create_app(
    settings: Settings | None = None,
    answer_service: AnswerService | None = None,
) -> FastAPI:
    """Build the FastAPI application.

    Args:
        settings: Immutable configuration; loaded from the environment when omitted.
        answer_service: AI orchestrator; built from `settings` when omitted.
            Tests pass one wired to fake providers.
    """
    settings = settings or Settings.from_env()
    answer_service = answer_service or build_answer_service(settings)
    official_email = settings.official_email

    app = FastAPI(title="BFHL Service", version=__version__)
    app.state.settings = settings
    app.state.answer_service = answer_service

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    def respond(status_code: int, content: dict) -> JSONResponse:
        return JSONResponse(status_code=status_code, content=content)

    # ============================================================
    # Error Handlers
    # ============================================================

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        # A known path with the wrong method is an unmatched route too.
        if exc.status_code in (404, 405):
            return respond(404, error_envelope("Not found", official_email))
        return respond(exc.status_code, error_envelope(str(exc.detail), official_email))

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return respond(500, error_envelope("Internal server error", official_email))

    # ============================================================
    # Routes
    # ============================================================

    @app.get("/health", responses={200: {"model": HealthEnvelope}, 500: {"model": ErrorEnvelope}})
    async def health():
        return respond(200, health_envelope(official_email))

    @app.post(
        "/bfhl",
        responses={
            200: {"model": SuccessEnvelope},
            400: {"model": ErrorEnvelope},
            415: {"model": ErrorEnvelope},
            429: {"model": ErrorEnvelope},
            500: {"model": ErrorEnvelope},
            502: {"model": ErrorEnvelope},
        },
    )
    async def bfhl(request: Request):
        if not is_json_content_type(request.headers.get("content-type")):
            return respond(
                415,
                error_envelope("Content-Type must be application/json", official_email),
            )

        try:
            body = await _decode_body(request)
        except ValueError:
            return respond(400, error_envelope("Invalid JSON body", official_email))

        try:
            operation = classify_request(body)
        except RequestValidationError as err:
            return respond(400, error_envelope(err.message, official_email))

        try:
            data = await execute(operation, app.state.answer_service)
        except AIProviderError as err:
            logger.warning(
                "AI error from %s: %s (upstream status %s)",
                err.provider,
                err.message,
                err.upstream_status,
            )
            return respond(err.status_code, error_envelope(err.message, official_email))

        return respond(200, success_envelope(data, official_email))

    return app
