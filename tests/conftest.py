"""
Shared fixtures for BFHL service tests.

Provides immutable settings and a FastAPI test client. Provider doubles and
client helpers live in `tests.support`.
"""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from bfhl.llm.provider_config import Settings
from tests.support import TEST_EMAIL, make_client


@pytest.fixture
def settings() -> Settings:
    """Settings with no provider keys; AI tests inject provider doubles instead."""
    return Settings(official_email=TEST_EMAIL)


@pytest.fixture
def client(settings: Settings) -> TestClient:
    return make_client(settings)
