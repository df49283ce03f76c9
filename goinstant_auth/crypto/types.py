"""Type definitions for claims remapping and token signing."""

from collections.abc import Mapping
from typing import Any

UserData = Mapping[str, Any]
Claims = dict[str, Any]
Header = dict[str, Any]

# Ordered (source key, claim name) pairs.
RemapTable = tuple[tuple[str, str], ...]
