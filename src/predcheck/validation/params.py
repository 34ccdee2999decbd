"""Request parameter validators.

Unlike entity contracts these stop at the first problem: each check either
returns the normalized value or raises a ``ValidationError`` carrying one
``ParameterViolation``.
"""

from __future__ import annotations

import math
from enum import Enum
from typing import Any

from predcheck.errors import ParameterViolation, ValidationError
from predcheck.models.enums import ParentEntityType, PriceInterval, TimePeriod, enum_values
from predcheck.validation.formats import (
    NON_NEGATIVE_INT_RE,
    is_address,
    is_condition_id,
    is_field_name,
    is_slug,
)
from predcheck.validation.predicates import is_array, is_boolean, is_string

BUILDER_LIMIT_MAX = 50
BUILDER_OFFSET_MAX = 1000


def _fail(param: str, message: str, **details: Any) -> ValidationError:
    return ValidationError(
        message,
        details or {"paramName": param},
        [ParameterViolation(param=param, reason=message)],
    )


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _present(params: dict[str, Any], key: str) -> bool:
    return params.get(key) is not None


def _choice(value: Any, param: str, choices: type[Enum]) -> str:
    allowed = enum_values(choices)
    if not is_string(value) or value not in allowed:
        raise _fail(
            param,
            f"{param} must be one of: {', '.join(allowed)}",
            **{param: value, "allowed": allowed},
        )
    return value


# --- Scalars ---
def validate_non_empty_string(value: Any, param: str) -> str:
    if not is_string(value):
        raise _fail(param, f"{param} must be a string", paramName=param, value=value)
    if not value.strip():
        raise _fail(param, f"{param} cannot be empty", paramName=param, value=value)
    return value


def _finite_number(value: Any, param: str) -> int | float:
    if not _is_number(value):
        raise _fail(param, f"{param} must be a number", paramName=param, value=value)
    if not math.isfinite(value):
        raise _fail(param, f"{param} must be a finite number", paramName=param, value=value)
    return value


def validate_positive_number(value: Any, param: str) -> int | float:
    number = _finite_number(value, param)
    if number <= 0:
        raise _fail(param, f"{param} must be positive", paramName=param, value=value)
    return number


def validate_non_negative_number(value: Any, param: str) -> int | float:
    number = _finite_number(value, param)
    if number < 0:
        raise _fail(param, f"{param} must be non-negative", paramName=param, value=value)
    return number


def validate_boolean(value: Any, param: str) -> bool:
    if not is_boolean(value):
        raise _fail(param, f"{param} must be a boolean", paramName=param, value=value)
    return value


def _non_negative_int(value: Any, param: str) -> int:
    """Integer from an int, an integral float or a string of digits."""
    if isinstance(value, bool) or not isinstance(value, (int, float, str)):
        raise _fail(param, f"{param} must be a number or string", **{param: value})
    if isinstance(value, str):
        text = value.strip()
        if NON_NEGATIVE_INT_RE.match(text) is None:
            raise _fail(param, f"{param} must be a non-negative integer", **{param: value})
        try:
            return int(text)
        except ValueError:
            # longer than the interpreter's int conversion limit
            raise _fail(
                param, f"{param} must be a non-negative integer", **{param: value[:32]}
            ) from None
    if isinstance(value, float) and not (math.isfinite(value) and value.is_integer()):
        raise _fail(param, f"{param} must be a non-negative integer", **{param: value})
    if value < 0:
        raise _fail(param, f"{param} must be a non-negative integer", **{param: value})
    return int(value)


# --- Identifiers ---
def validate_market_id(value: Any) -> str:
    return validate_non_empty_string(value, "market ID")


def validate_market_slug(value: Any) -> str:
    return validate_non_empty_string(value, "market slug")


def validate_event_id(value: Any) -> str:
    return validate_non_empty_string(value, "event ID")


def validate_event_slug(value: Any) -> str:
    slug = validate_non_empty_string(value, "event slug")
    if not is_slug(slug):
        raise _fail(
            "event slug",
            "event slug must contain only alphanumeric characters, hyphens, and underscores",
            slug=slug,
        )
    return slug


def validate_tag_id(value: Any) -> str:
    return validate_non_empty_string(value, "tag ID")


def validate_tag_slug(value: Any) -> str:
    return validate_non_empty_string(value, "tag slug")


def validate_series_id(value: Any) -> str:
    return validate_non_empty_string(value, "series ID")


def validate_series_slug(value: Any) -> str:
    return validate_non_empty_string(value, "series slug")


def validate_token_id(value: Any) -> str:
    """CLOB token id, sent upstream as the ``market`` parameter."""
    return validate_non_empty_string(value, "market")


def validate_comment_id(value: Any) -> int:
    return _non_negative_int(value, "comment ID")


def validate_parent_entity_id(value: Any) -> int:
    return _non_negative_int(value, "parent entity ID")


def validate_parent_entity_type(value: Any) -> str:
    if not is_string(value):
        raise _fail("parent entity type", "parent entity type must be a string", type=value)
    return _choice(value, "parent entity type", ParentEntityType)


# --- Formats ---
def validate_proxy_wallet(value: Any) -> str:
    wallet = validate_non_empty_string(value, "proxy wallet")
    if not is_address(wallet):
        raise _fail(
            "proxy wallet",
            "proxy wallet must be a valid Ethereum address "
            "(0x followed by 40 hexadecimal characters)",
            wallet=wallet,
        )
    return wallet


def validate_ethereum_address(value: Any) -> str:
    """Trimmed and lower-cased account address."""
    if not is_string(value):
        raise _fail("address", "address must be a string", address=value)
    trimmed = value.strip()
    if not trimmed:
        raise _fail("address", "address cannot be empty", address=value)
    if not is_address(trimmed):
        raise _fail(
            "address",
            "Invalid Ethereum address format",
            address=value,
            expected="0x followed by 40 hexadecimal characters",
        )
    return trimmed.lower()


def validate_condition_id(value: Any) -> str:
    condition_id = validate_non_empty_string(value, "condition ID")
    if not is_condition_id(condition_id):
        raise _fail(
            "condition ID",
            "condition ID must be a valid format (0x followed by 64 hexadecimal characters)",
            conditionId=condition_id,
        )
    return condition_id


def validate_timestamp(value: Any, param: str = "timestamp") -> int:
    """Unix seconds from an int or a string of digits."""
    return _non_negative_int(value, param)


def validate_interval(value: Any) -> str:
    if not is_string(value):
        raise _fail("interval", "interval must be a string", interval=value)
    return _choice(value, "interval", PriceInterval)


def validate_time_period(value: Any, param: str = "timePeriod") -> str:
    return _choice(value, param, TimePeriod)


def validate_order_string(value: Any) -> str:
    """Comma-separated field names, e.g. ``"createdAt,volume"``."""
    if not is_string(value):
        raise _fail("order", "order must be a string", order=value)
    if not value.strip():
        raise _fail("order", "order cannot be empty", order=value)
    for field in (part.strip() for part in value.split(",")):
        if not is_field_name(field):
            raise _fail("order", f"invalid field name in order: {field}", order=value, field=field)
    return value


def validate_market_tokens(value: Any) -> list[str]:
    if not is_array(value):
        raise _fail("market", "market tokens must be an array", tokens=value)
    if not value:
        raise _fail("market", "market tokens array cannot be empty", tokens=value)
    for index, token in enumerate(value):
        if not is_string(token) or not token.strip():
            raise _fail(
                "market",
                f"market token at index {index} must be a non-empty string",
                token=token,
                index=index,
            )
    return list(value)


def _string_list(value: Any, param: str, *, allow_empty_items: bool = False) -> list[str]:
    if not is_array(value):
        raise _fail(param, f"{param} must be an array", **{param: value})
    for index, item in enumerate(value):
        if not is_string(item) or (not allow_empty_items and not item.strip()):
            raise _fail(
                param,
                f"{param}[{index}] must be a non-empty string",
                **{param: value, "index": index},
            )
    return list(value)


def _market_list(params: dict[str, Any]) -> list[str]:
    market = params["market"]
    return validate_market_tokens(market if is_array(market) else [market])


# --- Query groups ---
def _check_keys(
    params: dict[str, Any],
    *,
    numbers: tuple[str, ...] = (),
    flags: tuple[str, ...] = (),
    texts: tuple[str, ...] = (),
) -> dict[str, Any]:
    """Check known keys by kind; unknown keys pass through untouched."""
    validated: dict[str, Any] = {}
    for key, value in params.items():
        if key in numbers:
            validated[key] = validate_non_negative_number(value, key)
        elif key in flags:
            validated[key] = validate_boolean(value, key)
        elif key in texts:
            validated[key] = validate_non_empty_string(value, key)
        else:
            validated[key] = value
    return validated


def validate_market_query_params(params: dict[str, Any]) -> dict[str, Any]:
    return _check_keys(
        params, numbers=("limit", "offset"), flags=("active", "closed"), texts=("category",)
    )


def validate_series_query_params(params: dict[str, Any]) -> dict[str, Any]:
    return _check_keys(
        params, numbers=("limit", "offset"), flags=("active", "closed"), texts=("category",)
    )


def validate_event_query_params(params: dict[str, Any]) -> dict[str, Any]:
    validated = _check_keys(
        {k: v for k, v in params.items() if k != "exclude_tag_id"},
        numbers=("limit", "offset"),
        flags=("active", "closed", "archived", "ascending", "featured_order"),
        texts=("category", "tag_slug", "order"),
    )
    if "exclude_tag_id" in params:
        excluded = params["exclude_tag_id"]
        if is_array(excluded):
            validated["exclude_tag_id"] = [
                validate_non_empty_string(v, "exclude_tag_id") for v in excluded
            ]
        else:
            validated["exclude_tag_id"] = validate_non_empty_string(excluded, "exclude_tag_id")
    return validated


def validate_comments_query_params(params: dict[str, Any]) -> dict[str, Any]:
    validated = _check_keys(
        params,
        numbers=("limit", "offset", "parent_entity_id"),
        flags=("ascending", "get_positions", "holders_only"),
    )
    if "order" in params:
        validated["order"] = validate_order_string(params["order"])
    if "parent_entity_type" in params:
        validated["parent_entity_type"] = validate_parent_entity_type(params["parent_entity_type"])
    return validated


def validate_user_comments_query_params(params: dict[str, Any]) -> dict[str, Any]:
    validated = _check_keys(params, numbers=("limit", "offset"), flags=("ascending",))
    if "order" in params:
        validated["order"] = validate_order_string(params["order"])
    return validated


def validate_search_query_params(params: dict[str, Any]) -> dict[str, Any]:
    validated = _check_keys(
        params,
        numbers=("limit_per_type", "page"),
        flags=("cache", "ascending", "search_tags", "search_profiles", "optimized"),
        texts=("q",),
    )
    if "keep_closed_markets" in params:
        keep = params["keep_closed_markets"]
        if not _is_number(keep) or keep not in (0, 1):
            raise _fail(
                "keep_closed_markets",
                "keep_closed_markets must be 0 or 1",
                keep_closed_markets=keep,
            )
    for key in ("events_status", "sort", "recurrence"):
        # may be empty
        if key in params and not is_string(params[key]):
            raise _fail(key, f"{key} must be a string", **{key: params[key]})
    if "events_tag" in params:
        tags = params["events_tag"]
        if not is_array(tags):
            raise _fail("events_tag", "events_tag must be an array", events_tag=tags)
        for index, tag in enumerate(tags):
            if not is_string(tag):
                raise _fail(
                    "events_tag",
                    f"events_tag at index {index} must be a string",
                    events_tag=tags,
                    index=index,
                )
    if "exclude_tag_id" in params:
        excluded = params["exclude_tag_id"]
        if not is_array(excluded):
            raise _fail(
                "exclude_tag_id", "exclude_tag_id must be an array", exclude_tag_id=excluded
            )
        for index, tag_id in enumerate(excluded):
            if not (_is_number(tag_id) and float(tag_id).is_integer()):
                raise _fail(
                    "exclude_tag_id",
                    f"exclude_tag_id at index {index} must be an integer",
                    exclude_tag_id=excluded,
                    index=index,
                )
    if not validated.get("q"):
        raise _fail("q", "q parameter is required", params=params)
    return validated


def validate_team_query_params(params: dict[str, Any]) -> dict[str, Any]:
    validated: dict[str, Any] = {
        "limit": validate_non_negative_number(params.get("limit"), "limit"),
        "offset": validate_non_negative_number(params.get("offset"), "offset"),
    }
    if "order" in params:
        validated["order"] = validate_non_empty_string(params["order"], "order")
    if "ascending" in params:
        validated["ascending"] = validate_boolean(params["ascending"], "ascending")
    for key in ("league", "name", "abbreviation"):
        if key in params:
            items = _string_list(params[key], key)
            # an empty filter is the same as no filter
            if items:
                validated[key] = items
    return validated


def _bounded(params: dict[str, Any], key: str, upper: int) -> int | float:
    raw = params[key]
    try:
        value = float(raw) if not _is_number(raw) else raw
    except (TypeError, ValueError):
        raise _fail(key, f"{key} must be a valid number", **{key: raw}) from None
    if math.isnan(value):
        raise _fail(key, f"{key} must be a valid number", **{key: raw})
    if value < 0 or value > upper:
        raise _fail(key, f"{key} must be between 0 and {upper}", **{key: value})
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def validate_builder_leaderboard_params(params: dict[str, Any]) -> dict[str, Any]:
    validated: dict[str, Any] = {"timePeriod": TimePeriod.DAY.value}
    if _present(params, "timePeriod"):
        validated["timePeriod"] = validate_time_period(params["timePeriod"])
    if _present(params, "limit"):
        validated["limit"] = _bounded(params, "limit", BUILDER_LIMIT_MAX)
    if _present(params, "offset"):
        validated["offset"] = _bounded(params, "offset", BUILDER_OFFSET_MAX)
    return validated


def validate_builder_volume_params(params: dict[str, Any]) -> dict[str, Any]:
    period = params.get("timePeriod")
    return {"timePeriod": validate_time_period(TimePeriod.DAY.value if period is None else period)}


def validate_price_history_params(params: dict[str, Any]) -> dict[str, Any]:
    validated: dict[str, Any] = {"market": validate_token_id(params.get("market"))}
    has_range = _present(params, "startTs") or _present(params, "endTs")
    if _present(params, "interval") and has_range:
        raise _fail(
            "interval",
            "interval parameter is mutually exclusive with startTs and endTs",
            interval=params.get("interval"),
            startTs=params.get("startTs"),
            endTs=params.get("endTs"),
        )
    if _present(params, "startTs"):
        validated["startTs"] = validate_timestamp(params["startTs"], "startTs")
    if _present(params, "endTs"):
        validated["endTs"] = validate_timestamp(params["endTs"], "endTs")
    if _present(params, "interval"):
        validated["interval"] = validate_interval(params["interval"])
    if _present(params, "fidelity"):
        validated["fidelity"] = validate_positive_number(params["fidelity"], "fidelity")
    if "startTs" in validated and "endTs" in validated and validated["startTs"] > validated["endTs"]:
        raise _fail(
            "startTs",
            "startTs must be less than or equal to endTs",
            startTs=validated["startTs"],
            endTs=validated["endTs"],
        )
    return validated


def validate_user_positions_params(params: dict[str, Any]) -> dict[str, Any]:
    validated: dict[str, Any] = {"user": validate_proxy_wallet(params.get("user"))}
    if _present(params, "market"):
        validated["market"] = _market_list(params)
    return validated


def validate_portfolio_value_params(params: dict[str, Any]) -> dict[str, Any]:
    return validate_user_positions_params(params)


def validate_trades_params(params: dict[str, Any]) -> dict[str, Any]:
    """Either ``user`` or ``market`` (or both) must be given."""
    if not _present(params, "user") and not _present(params, "market"):
        raise _fail(
            "user|market",
            "trades endpoint requires at least one of: user or market",
            params=params,
        )
    validated: dict[str, Any] = {}
    if _present(params, "user"):
        validated["user"] = validate_proxy_wallet(params["user"])
    if _present(params, "market"):
        validated["market"] = _market_list(params)
    return validated


def validate_user_activity_params(params: dict[str, Any]) -> dict[str, Any]:
    return {"user": validate_proxy_wallet(params.get("user"))}


def validate_closed_positions_params(params: dict[str, Any]) -> dict[str, Any]:
    return {"user": validate_proxy_wallet(params.get("user"))}


def validate_top_holders_params(params: dict[str, Any]) -> dict[str, Any]:
    if not _present(params, "market"):
        raise _fail("market", "holders endpoint requires market parameter", params=params)
    return {"market": _market_list(params)}
