"""Primitive type checks. Pure and total: they never raise."""

from __future__ import annotations

import math
from typing import Any


def is_string(value: Any) -> bool:
    return isinstance(value, str)


def is_finite_number(value: Any) -> bool:
    """True for int/float that is not a bool, NaN or infinite."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)


def is_boolean(value: Any) -> bool:
    return isinstance(value, bool)


def is_array(value: Any) -> bool:
    return isinstance(value, list)


def is_plain_object(value: Any) -> bool:
    """True only for key-value mappings (never None, never a list)."""
    return isinstance(value, dict)


def type_name(value: Any) -> str:
    """JSON-flavoured name of a value's kind, used in violation messages."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__
