"""Shared test fixtures for goinstant-auth."""

import pytest

from goinstant_auth.crypto.signer import Signer

SECRET_KEY = "HKYdFdnezle2yrI2_Ph3cHz144bISk-cvuAbeAAA999"


@pytest.fixture(autouse=True)
def _set_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Set environment variables for test settings."""
    monkeypatch.setenv("GOINSTANT_SECRET_KEY", SECRET_KEY)
    monkeypatch.delenv("GOINSTANT_AUDIENCE", raising=False)
    monkeypatch.delenv("GOINSTANT_LOG_LEVEL", raising=False)


@pytest.fixture
def signer() -> Signer:
    """Create a Signer with the fixed regression key."""
    return Signer(SECRET_KEY)


@pytest.fixture
def user_data() -> dict:
    """Minimal valid user data."""
    return {"id": "bar", "domain": "example.com", "displayName": "Bob"}
