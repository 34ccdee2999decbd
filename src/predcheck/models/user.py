"""Position, Trade, Activity, holders and portfolio - Data API entities."""

from __future__ import annotations

from typing import Literal, NotRequired, TypedDict


class Position(TypedDict):
    proxyWallet: str
    asset: str
    conditionId: str
    size: float
    avgPrice: float
    initialValue: float
    currentValue: float
    cashPnl: float
    percentPnl: float
    totalBought: float
    realizedPnl: float
    percentRealizedPnl: float
    curPrice: float
    redeemable: bool
    mergeable: bool
    title: str
    slug: str
    icon: str
    eventSlug: str
    outcome: str
    outcomeIndex: int
    oppositeOutcome: str
    oppositeAsset: str
    endDate: NotRequired[str | None]
    negativeRisk: NotRequired[bool | None]


class Trade(TypedDict):
    proxyWallet: str
    side: Literal["BUY", "SELL"]
    asset: str
    conditionId: str
    size: float
    price: float
    timestamp: int
    title: str
    slug: str
    icon: str
    eventSlug: str
    outcome: str
    outcomeIndex: int
    transactionHash: str
    name: NotRequired[str | None]
    pseudonym: NotRequired[str | None]
    bio: NotRequired[str | None]
    profileImage: NotRequired[str | None]
    profileImageOptimized: NotRequired[str | None]


class Activity(TypedDict):
    proxyWallet: str
    timestamp: int
    conditionId: str
    type: Literal["TRADE", "SPLIT", "MERGE", "REDEEM", "REWARD", "CONVERSION"]
    size: float
    usdcSize: float
    transactionHash: str
    # present when type == "TRADE"
    price: NotRequired[float]
    asset: NotRequired[str]
    side: NotRequired[Literal["BUY", "SELL"]]
    outcomeIndex: NotRequired[int]
    title: NotRequired[str | None]
    slug: NotRequired[str | None]
    icon: NotRequired[str | None]
    eventSlug: NotRequired[str | None]
    outcome: NotRequired[str | None]
    name: NotRequired[str | None]
    pseudonym: NotRequired[str | None]
    bio: NotRequired[str | None]
    profileImage: NotRequired[str | None]
    profileImageOptimized: NotRequired[str | None]


class HolderInfo(TypedDict):
    proxyWallet: str
    asset: str
    amount: float
    outcomeIndex: int
    bio: NotRequired[str | None]
    pseudonym: NotRequired[str | None]
    name: NotRequired[str | None]
    profileImage: NotRequired[str | None]
    profileImageOptimized: NotRequired[str | None]
    displayUsernamePublic: NotRequired[bool | None]


class MarketHolders(TypedDict):
    token: str
    holders: list[HolderInfo]


class PortfolioValue(TypedDict):
    user: str
    value: float


class ClosedPosition(TypedDict):
    proxyWallet: str
    asset: str
    conditionId: str
    avgPrice: float
    totalBought: float
    realizedPnl: float
    curPrice: float
    timestamp: int
    title: str
    slug: str
    icon: str
    eventSlug: str
    outcome: str
    outcomeIndex: int
    oppositeOutcome: str
    oppositeAsset: str
    endDate: NotRequired[str | None]
