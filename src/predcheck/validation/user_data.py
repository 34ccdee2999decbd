"""Data API entities: positions, trades, activity, holders, portfolio value."""

from __future__ import annotations

from typing import Any, cast

from predcheck.models.enums import ActivityType, TradeSide
from predcheck.models.user import (
    Activity,
    ClosedPosition,
    HolderInfo,
    MarketHolders,
    PortfolioValue,
    Position,
    Trade,
)
from predcheck.validation.contract import (
    Conditional,
    EntityContract,
    address,
    array,
    boolean,
    booleans,
    enum,
    number,
    numbers,
    string,
    strings,
)

_PROFILE_FIELDS = strings(
    "name", "pseudonym", "bio", "profileImage", "profileImageOptimized", required=False
)

POSITION = EntityContract(
    "Position",
    fields=(
        address("proxyWallet"),
        *strings(
            "asset",
            "conditionId",
            "title",
            "slug",
            "icon",
            "eventSlug",
            "outcome",
            "oppositeOutcome",
            "oppositeAsset",
        ),
        *numbers(
            "size",
            "avgPrice",
            "initialValue",
            "currentValue",
            "cashPnl",
            "percentPnl",
            "totalBought",
            "realizedPnl",
            "percentRealizedPnl",
            "curPrice",
            "outcomeIndex",
        ),
        *booleans("redeemable", "mergeable"),
        string("endDate", required=False),
        boolean("negativeRisk", required=False),
    ),
)

TRADE = EntityContract(
    "Trade",
    fields=(
        address("proxyWallet"),
        enum("side", TradeSide),
        *strings(
            "asset",
            "conditionId",
            "title",
            "slug",
            "icon",
            "eventSlug",
            "outcome",
            "transactionHash",
        ),
        *numbers("size", "price", "timestamp", "outcomeIndex"),
        *_PROFILE_FIELDS,
    ),
)

ACTIVITY = EntityContract(
    "Activity",
    plural="Activities",
    fields=(
        address("proxyWallet"),
        enum("type", ActivityType),
        *numbers("timestamp", "size", "usdcSize"),
        *strings("conditionId", "transactionHash"),
        *strings("title", "slug", "icon", "eventSlug", "outcome", required=False),
        *_PROFILE_FIELDS,
    ),
    conditionals=(
        Conditional(
            "type",
            ActivityType.TRADE,
            fields=(
                number("price"),
                string("asset"),
                enum("side", TradeSide),
                number("outcomeIndex"),
            ),
        ),
    ),
)

HOLDER_INFO = EntityContract(
    "HolderInfo",
    plural="HolderInfo",
    fields=(
        address("proxyWallet"),
        string("asset"),
        *numbers("amount", "outcomeIndex"),
        *_PROFILE_FIELDS,
        boolean("displayUsernamePublic", required=False),
    ),
)

MARKET_HOLDERS = EntityContract(
    "MarketHolders",
    plural="MarketHolders",
    fields=(
        string("token"),
        array("holders", contract=HOLDER_INFO, deep=True),
    ),
)

PORTFOLIO_VALUE = EntityContract(
    "PortfolioValue",
    fields=(
        address("user"),
        number("value"),
    ),
)

CLOSED_POSITION = EntityContract(
    "ClosedPosition",
    fields=(
        address("proxyWallet"),
        *strings(
            "asset",
            "conditionId",
            "title",
            "slug",
            "icon",
            "eventSlug",
            "outcome",
            "oppositeOutcome",
            "oppositeAsset",
        ),
        *numbers("avgPrice", "totalBought", "realizedPnl", "curPrice", "timestamp", "outcomeIndex"),
        string("endDate", required=False),
    ),
)


def validate_position(data: Any, *, deep: bool = False) -> Position:
    return cast(Position, POSITION.validate(data, deep=deep))


def validate_positions(data: Any, *, deep: bool = False) -> list[Position]:
    return cast(list[Position], POSITION.validate_many(data, deep=deep))


def validate_trade(data: Any, *, deep: bool = False) -> Trade:
    return cast(Trade, TRADE.validate(data, deep=deep))


def validate_trades(data: Any, *, deep: bool = False) -> list[Trade]:
    return cast(list[Trade], TRADE.validate_many(data, deep=deep))


def validate_activity(data: Any, *, deep: bool = False) -> Activity:
    """Validate an activity record.

    ``TRADE`` records must also carry price, asset, side and outcomeIndex; for
    every other type those fields are ignored even when present.
    """
    return cast(Activity, ACTIVITY.validate(data, deep=deep))


def validate_activities(data: Any, *, deep: bool = False) -> list[Activity]:
    return cast(list[Activity], ACTIVITY.validate_many(data, deep=deep))


def validate_holder_info(data: Any, *, deep: bool = False) -> HolderInfo:
    return cast(HolderInfo, HOLDER_INFO.validate(data, deep=deep))


def validate_holder_infos(data: Any, *, deep: bool = False) -> list[HolderInfo]:
    return cast(list[HolderInfo], HOLDER_INFO.validate_many(data, deep=deep))


def validate_market_holders(data: Any, *, deep: bool = False) -> MarketHolders:
    """Validate one token's holder list; every holder is checked."""
    return cast(MarketHolders, MARKET_HOLDERS.validate(data, deep=deep))


def validate_market_holders_list(data: Any, *, deep: bool = False) -> list[MarketHolders]:
    return cast(list[MarketHolders], MARKET_HOLDERS.validate_many(data, deep=deep))


def validate_portfolio_value(data: Any, *, deep: bool = False) -> PortfolioValue:
    return cast(PortfolioValue, PORTFOLIO_VALUE.validate(data, deep=deep))


def validate_portfolio_values(data: Any, *, deep: bool = False) -> list[PortfolioValue]:
    return cast(list[PortfolioValue], PORTFOLIO_VALUE.validate_many(data, deep=deep))


def validate_closed_position(data: Any, *, deep: bool = False) -> ClosedPosition:
    return cast(ClosedPosition, CLOSED_POSITION.validate(data, deep=deep))


def validate_closed_positions(data: Any, *, deep: bool = False) -> list[ClosedPosition]:
    return cast(list[ClosedPosition], CLOSED_POSITION.validate_many(data, deep=deep))
