"""Signer construction from settings."""

from goinstant_auth.core.logging import configure_logging
from goinstant_auth.core.settings import SignerSettings
from goinstant_auth.crypto.signer import Signer


def build_signer(settings: SignerSettings | None = None) -> Signer:
    """Build a Signer, reading settings from the environment if omitted."""
    settings = settings or SignerSettings()
    configure_logging(settings.log_level)
    return Signer(
        settings.secret_key.get_secret_value(),
        audience=settings.get_audience(),
    )
