"""Uniform response envelope shared by every endpoint.

Response formatting:
- Success: `{"is_success": true, "official_email": ..., "data": ...}`
- Failure: `{"is_success": false, "official_email": ..., "error": ...}`
- Health:  `{"is_success": true, "official_email": ...}`

Exactly one of `data` / `error` is present on `/bfhl` responses. The pydantic
models double as OpenAPI response schemas in `bfhl.api.http_api`; the builder
functions return plain dicts and never raise.
"""

from typing import Any, Literal

from pydantic import BaseModel


class HealthEnvelope(BaseModel):
    is_success: Literal[True] = True
    official_email: str


class SuccessEnvelope(BaseModel):
    is_success: Literal[True] = True
    official_email: str
    data: Any


class ErrorEnvelope(BaseModel):
    is_success: Literal[False] = False
    official_email: str
    error: str


def success_envelope(data: Any, official_email: str) -> dict:
    return SuccessEnvelope(official_email=official_email, data=data).model_dump()


def error_envelope(message: str, official_email: str) -> dict:
    return ErrorEnvelope(official_email=official_email, error=message).model_dump()


def health_envelope(official_email: str) -> dict:
    return HealthEnvelope(official_email=official_email).model_dump()
