"""Signer settings loaded from environment variables."""

from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from goinstant_auth.core.logging import LogLevel
from goinstant_auth.crypto.claims import DEFAULT_AUDIENCE


class SignerSettings(BaseSettings):
    """App key and token options for the signer."""

    model_config = SettingsConfigDict(env_prefix="GOINSTANT_")

    secret_key: SecretStr = SecretStr("")
    audience: str = DEFAULT_AUDIENCE
    log_level: LogLevel = "info"

    def get_audience(self) -> str | None:
        """Return the forced audience, or None when ``aud`` is disabled."""
        return self.audience or None
