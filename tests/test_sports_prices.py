"""Team, leaderboard and price history validator tests."""

import pytest

from predcheck.errors import ValidationError
from predcheck.validation import (
    validate_builder_leaderboard,
    validate_builder_volume,
    validate_price_history,
    validate_price_points,
    validate_sports_metadata,
    validate_team,
    validate_teams,
    validate_trader_leaderboard,
)

WALLET = "0x56687bf447db6ffa42ffe2204a05edaa20f55839"

TEAM = {
    "id": 1,
    "name": "Lakers",
    "league": "NBA",
    "logo": "https://example.com/lal.png",
    "abbreviation": "LAL",
    "alias": "Lakers",
}


def test_team():
    assert validate_team(TEAM) is TEAM
    with pytest.raises(ValidationError) as exc:
        validate_teams([TEAM, dict(TEAM, id="1")])
    assert exc.value.details["index"] == 1


def test_sports_metadata():
    meta = {
        "sport": "nba",
        "image": "https://example.com/nba.png",
        "resolution": "https://nba.com",
        "ordering": "home",
        "tags": "1,745",
        "series": "10345",
    }
    assert validate_sports_metadata(meta) is meta


def test_builder_leaderboard():
    entry = {"builder": "acme", "rank": "1", "volume": 1e6, "activeUsers": 120, "verified": True}
    assert validate_builder_leaderboard([entry]) == [entry]
    with pytest.raises(ValidationError) as exc:
        validate_builder_leaderboard([dict(entry, rank=1)])
    assert exc.value.message == (
        "BuilderLeaderboardEntry at index 0 is invalid: BuilderLeaderboardEntry validation failed"
    )


def test_builder_volume():
    entry = {
        "dt": "2026-01-01",
        "builder": "acme",
        "rank": "3",
        "volume": 10.0,
        "activeUsers": 4,
        "verified": False,
    }
    assert validate_builder_volume([entry]) == [entry]
    with pytest.raises(ValidationError) as exc:
        validate_builder_volume(entry)
    assert exc.value.message == "BuilderVolumeEntries data must be an array"


def test_trader_leaderboard():
    entry = {"rank": "1", "proxyWallet": WALLET, "vol": 100.0, "pnl": -5.0, "userName": None}
    assert validate_trader_leaderboard([entry]) == [entry]
    with pytest.raises(ValidationError) as exc:
        validate_trader_leaderboard([dict(entry, proxyWallet="nope")])
    assert exc.value.details["originalError"]["invalidTypes"] == [
        "proxyWallet (expected 0x-prefixed 40-hex address, got 'nope')"
    ]


def test_price_history(price_history):
    assert validate_price_history(price_history) is price_history
    price_history["history"].append({"t": "later", "p": 0.6})
    with pytest.raises(ValidationError) as exc:
        validate_price_history(price_history)
    assert exc.value.details["invalidTypes"] == [
        "history at index 2 is invalid: PricePoint validation failed"
    ]


def test_price_points_empty():
    assert validate_price_points([]) == []
