"""HS256 token signing for GoInstant users and groups.

This is not a general-purpose JWT library. Tokens follow the narrow
Compact JWS profile GoInstant accepts::

    signer = Signer(my_base64_app_key)
    token = signer.sign({
        "domain": "mydomain.com",
        "id": user.id,
        "displayName": user.full_name,
        "groups": [{"id": f"room-{room_id}", "displayName": f"Room {room_id}"}],
    })
"""

from collections.abc import Mapping
from typing import Any

from cryptography.hazmat.primitives import hashes, hmac

from goinstant_auth.core.errors import InvalidArgumentError
from goinstant_auth.core.logging import get_logger
from goinstant_auth.crypto.claims import DEFAULT_AUDIENCE, user_data_to_claims
from goinstant_auth.crypto.codec import (
    base64url_decode,
    base64url_encode,
    compact_encode,
)
from goinstant_auth.crypto.types import Header, UserData

TOKEN_TYPE = "JWT"
ALGORITHM = "HS256"

log = get_logger(__name__)


class Signer:
    """Creates HS256-signed tokens from a shared base64 app key."""

    def __init__(
        self, secret_key: str, audience: str | None = DEFAULT_AUDIENCE
    ) -> None:
        if not isinstance(secret_key, str):
            raise InvalidArgumentError("Secret Key must be a string")
        binary_key = base64url_decode(secret_key)
        if binary_key is None:
            log.warning("secret_key_rejected")
            raise InvalidArgumentError("Secret Key must be base64 or base64url")
        self._binary_key = binary_key
        self._audience = audience
        log.debug("signer_created", audience=audience)

    @property
    def audience(self) -> str | None:
        """The forced ``aud`` claim, or None when it is not emitted."""
        return self._audience

    def __repr__(self) -> str:
        return f"Signer(audience={self._audience!r})"

    def sign(
        self, user_data: UserData, extra_header: Mapping[str, Any] | None = None
    ) -> str:
        """Create a Compact JWS token for the supplied user data.

        ``user_data`` requires ``id``, ``domain`` and ``displayName``. An
        optional ``groups`` sequence may be given, each group requiring
        ``id`` and ``displayName``. ``extra_header`` entries are added to
        the JWS header; ``typ`` and ``alg`` are always overwritten.
        """
        claims = user_data_to_claims(user_data, self._audience)
        header = build_header(extra_header)

        signing_input = f"{compact_encode(header)}.{compact_encode(claims)}"
        signature = base64url_encode(self._digest(signing_input.encode("utf-8")))

        log.debug(
            "token_signed",
            claims=list(claims),
            groups=len(claims.get("g") or ()),
            header=list(header),
        )
        return f"{signing_input}.{signature}"

    def _digest(self, message: bytes) -> bytes:
        mac = hmac.HMAC(self._binary_key, hashes.SHA256())
        mac.update(message)
        return mac.finalize()


def build_header(extra_header: Mapping[str, Any] | None = None) -> Header:
    """Merge caller header fields with the forced ``typ`` and ``alg``."""
    if extra_header is None:
        extra_header = {}
    if not isinstance(extra_header, Mapping):
        raise InvalidArgumentError("extraHeader must be an array")
    return {**extra_header, "typ": TOKEN_TYPE, "alg": ALGORITHM}
