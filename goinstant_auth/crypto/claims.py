"""Conversion of application user data into token claims."""

from collections.abc import Mapping, Sequence
from typing import Any

from goinstant_auth.core.errors import InvalidArgumentError
from goinstant_auth.crypto.types import Claims, RemapTable, UserData

DEFAULT_AUDIENCE = "goinstant.net"

REQUIRED_CLAIMS: RemapTable = (
    ("id", "sub"),
    ("domain", "iss"),
    ("displayName", "dn"),
)
OPTIONAL_CLAIMS: RemapTable = (("groups", "g"),)
GROUP_REQUIRED_CLAIMS: RemapTable = (
    ("id", "id"),
    ("displayName", "dn"),
)

MISSING_KEY = "missing required key"


def map_required_claims(
    record: Any, table: RemapTable, message: str = MISSING_KEY
) -> Claims:
    """Return a new mapping with every table key renamed to its claim.

    Keys are checked in table order, so the first absent (or ``None``)
    key determines the error. Renamed claims move to the end unless the
    claim name is already present, in which case it is replaced in place.
    """
    if not isinstance(record, Mapping):
        raise InvalidArgumentError(f"{message}: {table[0][0]}")
    moved: Claims = {}
    for name, claim in table:
        value = record.get(name)
        if value is None:
            raise InvalidArgumentError(f"{message}: {name}")
        moved[claim] = value
    sources = {name for name, _ in table}
    kept = {key: value for key, value in record.items() if key not in sources}
    return {**kept, **moved}


def map_optional_claims(record: Mapping[str, Any], table: RemapTable) -> Claims:
    """Like :func:`map_required_claims`, but absent keys are skipped."""
    present = tuple(
        (name, claim) for name, claim in table if record.get(name) is not None
    )
    if not present:
        return dict(record)
    return map_required_claims(record, present)


def _is_group_list(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(
        value, (str, bytes, bytearray)
    )


def map_groups(groups: Any) -> list[Claims]:
    """Validate and remap every group record into a new list."""
    if not _is_group_list(groups):
        raise InvalidArgumentError('optional "groups" key must be an array')
    return [
        map_required_claims(
            group, GROUP_REQUIRED_CLAIMS, f"group {i} missing required key"
        )
        for i, group in enumerate(groups)
    ]


def user_data_to_claims(
    user_data: UserData, audience: str | None = DEFAULT_AUDIENCE
) -> Claims:
    """Convert user data into a fresh claims mapping.

    The caller's mapping and its nested group records are never modified.
    When ``audience`` is ``None`` no ``aud`` claim is forced.
    """
    if not isinstance(user_data, Mapping):
        raise InvalidArgumentError("userData must be an array")

    claims: Claims = dict(user_data)
    if audience is not None:
        claims["aud"] = audience

    claims = map_required_claims(claims, REQUIRED_CLAIMS)
    claims = map_optional_claims(claims, OPTIONAL_CLAIMS)

    if claims.get("g") is not None:
        claims["g"] = map_groups(claims["g"])
    return claims
