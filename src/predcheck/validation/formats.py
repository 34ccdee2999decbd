"""Address, identifier and token formats shared by entity fields and parameters."""

from __future__ import annotations

import re
from typing import Any

ADDRESS_RE = re.compile(r"^0x[0-9a-fA-F]{40}$")
CONDITION_ID_RE = re.compile(r"^0x[0-9a-fA-F]{64}$")
SLUG_RE = re.compile(r"^[a-zA-Z0-9_-]+$")
FIELD_NAME_RE = re.compile(r"^[a-zA-Z_][a-zA-Z0-9_]*$")
NON_NEGATIVE_INT_RE = re.compile(r"^\d+$")


def is_address(value: Any) -> bool:
    """0x followed by exactly 40 hex characters."""
    return isinstance(value, str) and ADDRESS_RE.match(value) is not None


def is_condition_id(value: Any) -> bool:
    """0x followed by exactly 64 hex characters."""
    return isinstance(value, str) and CONDITION_ID_RE.match(value) is not None


def is_slug(value: Any) -> bool:
    return isinstance(value, str) and SLUG_RE.match(value) is not None


def is_field_name(value: Any) -> bool:
    return isinstance(value, str) and FIELD_NAME_RE.match(value) is not None
