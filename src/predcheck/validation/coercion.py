"""Decoders for fields that may arrive string-encoded.

Decoders are pure: they return the decoded value and never touch the payload
they were read from. Failures raise CoercionError with a short reason that
ends up as a violation, never as a raw parse exception.
"""

from __future__ import annotations

import json
import math
import re
from typing import Any

NUMERIC_RE = re.compile(r"^-?\d+(\.\d+)?([eE][+-]?\d+)?$")


class CoercionError(ValueError):
    """Raised when a string-encoded value cannot be decoded."""


def decode_json_array(value: Any) -> Any:
    """Decode a JSON-encoded string (e.g. '["Yes","No"]'); other values pass through."""
    if not isinstance(value, str):
        return value
    try:
        return json.loads(value)
    # deeply nested input exhausts the decoder's recursion limit
    except (ValueError, TypeError, RecursionError) as exc:
        raise CoercionError("invalid JSON string") from exc


def decode_numeric(value: Any) -> Any:
    """Decode a numeric string ("42", "1.5") to int/float; other values pass through."""
    if not isinstance(value, str):
        return value
    text = value.strip()
    if NUMERIC_RE.match(text) is None:
        raise CoercionError("must be a valid number")
    try:
        return int(text)
    except ValueError:
        pass
    try:
        number = float(text)
    except ValueError as exc:
        raise CoercionError("must be a valid number") from exc
    if not math.isfinite(number):
        raise CoercionError("must be a valid number")
    return number
