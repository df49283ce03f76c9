"""Base64url and Compact Serialization encoding for token segments."""

import base64
import json
from typing import Any

from goinstant_auth.core.errors import EncodingError

_TRIM_CHARS = " \t\n\r\0\x0b"


def base64url_encode(raw: bytes) -> str:
    """Encode bytes as base64url without padding."""
    return base64.urlsafe_b64encode(raw).rstrip(b"=").decode("ascii")


def base64url_decode(text: str) -> bytes | None:
    """Strictly decode base64 or base64url, padded or not.

    Returns ``None`` when the input is not a string or contains anything
    outside the base64 alphabet.
    """
    if not isinstance(text, str):
        return None
    text = text.strip(_TRIM_CHARS).replace("-", "+").replace("_", "/")
    text += "=" * (-len(text) % 4)
    try:
        return base64.b64decode(text, validate=True)
    except ValueError:
        return None


def compact_encode(value: Any) -> str:
    """Encode a JSON-representable value in Compact Serialization form.

    Keys keep their insertion order and ``/`` is never escaped, so the
    output is stable for a given construction order.
    """
    try:
        serialized = json.dumps(value, separators=(",", ":"), allow_nan=False)
    except (TypeError, ValueError) as exc:
        raise EncodingError(f"JSON encoding failed: {exc}") from exc
    return base64url_encode(serialized.encode("utf-8"))


def compact_decode(text: str, default: Any = None) -> Any:
    """Decode Compact Serialization, returning ``default`` on failure."""
    raw = base64url_decode(text)
    if raw is None:
        return default
    try:
        return json.loads(raw)
    except ValueError:
        return default
