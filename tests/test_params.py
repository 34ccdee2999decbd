"""Request parameter validator tests."""

import math

import pytest

from predcheck.errors import ParameterViolation, ValidationError
from predcheck.validation import params

WALLET = "0x56687bf447db6ffa42ffe2204a05edaa20f55839"


def _error(fn, *args):
    with pytest.raises(ValidationError) as exc:
        fn(*args)
    assert len(exc.value.violations) == 1
    assert isinstance(exc.value.violations[0], ParameterViolation)
    return exc.value


def test_non_empty_string():
    assert params.validate_non_empty_string("x", "q") == "x"
    assert _error(params.validate_non_empty_string, 1, "q").message == "q must be a string"
    assert _error(params.validate_non_empty_string, "  ", "q").message == "q cannot be empty"


def test_numbers():
    assert params.validate_positive_number(1.5, "fidelity") == 1.5
    assert _error(params.validate_positive_number, 0, "fidelity").message == "fidelity must be positive"
    assert params.validate_non_negative_number(0, "limit") == 0
    assert _error(params.validate_non_negative_number, -1, "limit").message == "limit must be non-negative"
    assert _error(params.validate_non_negative_number, "5", "limit").message == "limit must be a number"
    assert _error(params.validate_non_negative_number, True, "limit").message == "limit must be a number"
    assert (
        _error(params.validate_non_negative_number, math.inf, "limit").message
        == "limit must be a finite number"
    )


def test_boolean():
    assert params.validate_boolean(False, "active") is False
    assert _error(params.validate_boolean, "false", "active").message == "active must be a boolean"


def test_ethereum_address_is_trimmed_and_lowered():
    assert params.validate_ethereum_address("  " + WALLET.upper().replace("0X", "0x") + " ") == WALLET
    assert _error(params.validate_ethereum_address, "").message == "address cannot be empty"
    err = _error(params.validate_ethereum_address, "0x1234")
    assert err.message == "Invalid Ethereum address format"
    assert err.violations[0].param == "address"


def test_proxy_wallet_keeps_case():
    mixed = "0x56687BF447db6ffa42ffe2204a05edaa20f55839"
    assert params.validate_proxy_wallet(mixed) == mixed
    assert _error(params.validate_proxy_wallet, "0xzz").details == {"wallet": "0xzz"}


def test_condition_id():
    cid = "0x" + "a" * 64
    assert params.validate_condition_id(cid) == cid
    _error(params.validate_condition_id, "0x" + "a" * 63)


@pytest.mark.parametrize("raw, expected", [(0, 0), (1700000000, 1700000000), ("42", 42), (" 7 ", 7), (5.0, 5)])
def test_timestamp_accepts(raw, expected):
    assert params.validate_timestamp(raw, "startTs") == expected


@pytest.mark.parametrize("raw", [-1, "-1", "12abc", "", 1.5, None, True, "1" * 5000])
def test_timestamp_rejects(raw):
    err = _error(params.validate_timestamp, raw, "startTs")
    assert err.violations[0].param == "startTs"


def test_ids():
    assert params.validate_comment_id("12") == 12
    assert params.validate_parent_entity_id(9) == 9
    _error(params.validate_comment_id, "-3")
    assert params.validate_market_id("123") == "123"
    assert _error(params.validate_tag_slug, "").message == "tag slug cannot be empty"
    assert params.validate_token_id("tok") == "tok"


def test_event_slug():
    assert params.validate_event_slug("rain-event_2") == "rain-event_2"
    _error(params.validate_event_slug, "rain event")


def test_closed_sets():
    assert params.validate_interval("1h") == "1h"
    assert _error(params.validate_interval, "2h").message == "interval must be one of: 1m, 1w, 1d, 6h, 1h, max"
    assert params.validate_time_period("WEEK") == "WEEK"
    _error(params.validate_time_period, "week")
    assert params.validate_parent_entity_type("Series") == "Series"
    _error(params.validate_parent_entity_type, "series")


def test_order_string():
    assert params.validate_order_string("createdAt, volume") == "createdAt, volume"
    assert _error(params.validate_order_string, "createdAt,1x").message == "invalid field name in order: 1x"


def test_market_tokens():
    assert params.validate_market_tokens(["a", "b"]) == ["a", "b"]
    assert _error(params.validate_market_tokens, []).message == "market tokens array cannot be empty"
    err = _error(params.validate_market_tokens, ["a", " "])
    assert err.message == "market token at index 1 must be a non-empty string"


def test_query_groups_pass_unknown_keys():
    result = params.validate_market_query_params({"limit": 10, "active": True, "extra": "x"})
    assert result == {"limit": 10, "active": True, "extra": "x"}
    _error(params.validate_event_query_params, {"archived": "no"})
    assert params.validate_event_query_params({"exclude_tag_id": ["1", "2"]}) == {
        "exclude_tag_id": ["1", "2"]
    }
    _error(params.validate_series_query_params, {"offset": -1})


def test_comment_queries():
    result = params.validate_comments_query_params(
        {"parent_entity_type": "Event", "parent_entity_id": 5, "order": "createdAt"}
    )
    assert result["parent_entity_type"] == "Event"
    _error(params.validate_comments_query_params, {"parent_entity_type": "event"})
    _error(params.validate_user_comments_query_params, {"ascending": 1})


def test_search_query():
    assert params.validate_search_query_params({"q": "rain", "keep_closed_markets": 1})["q"] == "rain"
    assert _error(params.validate_search_query_params, {}).message == "q parameter is required"
    _error(params.validate_search_query_params, {"q": "rain", "keep_closed_markets": 2})
    _error(params.validate_search_query_params, {"q": "rain", "exclude_tag_id": [1.5]})
    _error(params.validate_search_query_params, {"q": "rain", "events_tag": ["a", 1]})


def test_team_query():
    result = params.validate_team_query_params({"limit": 10, "offset": 0, "league": []})
    assert result == {"limit": 10, "offset": 0}
    assert params.validate_team_query_params({"limit": 1, "offset": 0, "name": ["Lakers"]})["name"] == ["Lakers"]
    assert _error(params.validate_team_query_params, {"limit": 1, "offset": 0, "league": ["NBA", ""]}).message == (
        "league[1] must be a non-empty string"
    )


def test_builder_params():
    assert params.validate_builder_leaderboard_params({}) == {"timePeriod": "DAY"}
    assert params.validate_builder_leaderboard_params({"limit": "25", "offset": 0}) == {
        "timePeriod": "DAY",
        "limit": 25,
        "offset": 0,
    }
    assert _error(params.validate_builder_leaderboard_params, {"limit": 51}).message == (
        "limit must be between 0 and 50"
    )
    _error(params.validate_builder_leaderboard_params, {"offset": "many"})
    assert params.validate_builder_volume_params({"timePeriod": "ALL"}) == {"timePeriod": "ALL"}


def test_price_history_params():
    assert params.validate_price_history_params({"market": "tok", "startTs": "10", "endTs": 20}) == {
        "market": "tok",
        "startTs": 10,
        "endTs": 20,
    }
    err = _error(params.validate_price_history_params, {"market": "tok", "interval": "1d", "startTs": 1})
    assert err.message == "interval parameter is mutually exclusive with startTs and endTs"
    err = _error(params.validate_price_history_params, {"market": "tok", "startTs": 20, "endTs": 10})
    assert err.message == "startTs must be less than or equal to endTs"
    _error(params.validate_price_history_params, {"market": "tok", "fidelity": 0})


def test_user_params():
    assert params.validate_user_positions_params({"user": WALLET, "market": "tok"}) == {
        "user": WALLET,
        "market": ["tok"],
    }
    assert params.validate_portfolio_value_params({"user": WALLET}) == {"user": WALLET}
    assert params.validate_user_activity_params({"user": WALLET}) == {"user": WALLET}
    assert params.validate_closed_positions_params({"user": WALLET}) == {"user": WALLET}
    _error(params.validate_closed_positions_params, {})


def test_trades_and_holders_params():
    assert params.validate_trades_params({"market": ["a", "b"]}) == {"market": ["a", "b"]}
    err = _error(params.validate_trades_params, {})
    assert err.message == "trades endpoint requires at least one of: user or market"
    assert params.validate_top_holders_params({"market": "tok"}) == {"market": ["tok"]}
    assert _error(params.validate_top_holders_params, {}).message == "holders endpoint requires market parameter"
