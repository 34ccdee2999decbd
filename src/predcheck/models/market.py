"""Market, Event, Tag, Series - Gamma API entities."""

from __future__ import annotations

from typing import Any, Literal, NotRequired, TypedDict


class Market(TypedDict):
    id: str
    question: str
    conditionId: str
    slug: str
    endDate: str
    category: str
    liquidity: str
    image: str
    icon: str
    description: str
    outcomes: list[str]
    outcomePrices: list[str]
    clobTokenIds: NotRequired[list[str] | None]
    volume: str
    active: bool
    marketType: Literal["normal", "scalar"]
    closed: bool
    volumeNum: float
    liquidityNum: float
    volume24hr: float
    volume1wk: float
    volume1mo: float
    lastTradePrice: float
    bestBid: float
    bestAsk: float


class Tag(TypedDict):
    id: str
    label: str
    slug: str
    forceShow: NotRequired[bool | None]
    isCarousel: NotRequired[bool | None]
    publishedAt: NotRequired[str | None]
    createdAt: NotRequired[str | None]
    updatedAt: NotRequired[str | None]


class RelatedTag(TypedDict):
    id: str
    tagID: int
    relatedTagID: int
    rank: NotRequired[float | None]


class Event(TypedDict):
    id: str
    ticker: str
    slug: str
    title: str
    active: bool
    closed: bool
    archived: bool
    markets: list[Any]  # Market elements, validated on demand
    subtitle: NotRequired[str | None]
    description: NotRequired[str | None]
    resolutionSource: NotRequired[str | None]
    startDate: NotRequired[str | None]
    creationDate: NotRequired[str | None]
    endDate: NotRequired[str | None]
    image: NotRequired[str | None]
    icon: NotRequired[str | None]
    category: NotRequired[str | None]
    subcategory: NotRequired[str | None]
    new: NotRequired[bool | None]
    featured: NotRequired[bool | None]
    restricted: NotRequired[bool | None]
    liquidity: NotRequired[float | None]
    volume: NotRequired[float | None]
    openInterest: NotRequired[float | None]
    volume24hr: NotRequired[float | None]
    volume1wk: NotRequired[float | None]
    volume1mo: NotRequired[float | None]
    volume1yr: NotRequired[float | None]
    commentCount: NotRequired[float | None]
    tags: NotRequired[list[Any] | None]
    categories: NotRequired[list[Any] | None]


class Series(TypedDict):
    id: str
    ticker: str
    slug: str
    title: str
    subtitle: NotRequired[str | None]
    seriesType: NotRequired[str | None]
    recurrence: NotRequired[str | None]
    description: NotRequired[str | None]
    image: NotRequired[str | None]
    icon: NotRequired[str | None]
    layout: NotRequired[str | None]
    active: NotRequired[bool | None]
    closed: NotRequired[bool | None]
    archived: NotRequired[bool | None]
    new: NotRequired[bool | None]
    featured: NotRequired[bool | None]
    restricted: NotRequired[bool | None]
    isTemplate: NotRequired[bool | None]
    templateVariables: NotRequired[bool | None]
    publishedAt: NotRequired[str | None]
    createdBy: NotRequired[str | None]
    updatedBy: NotRequired[str | None]
    createdAt: NotRequired[str | None]
    updatedAt: NotRequired[str | None]
    commentsEnabled: NotRequired[bool | None]
    competitive: NotRequired[str | None]
    volume24hr: NotRequired[float | None]
    volume: NotRequired[float | None]
    liquidity: NotRequired[float | None]
    startDate: NotRequired[str | None]
    pythTokenID: NotRequired[str | None]
    cgAssetName: NotRequired[str | None]
    score: NotRequired[float | None]
    commentCount: NotRequired[float | None]
    events: NotRequired[list[Any] | None]
    collections: NotRequired[list[Any] | None]
    categories: NotRequired[list[Any] | None]
    tags: NotRequired[list[Any] | None]
    chats: NotRequired[list[Any] | None]
