"""Gamma API entities: markets, events, tags, series."""

from __future__ import annotations

from typing import Any, cast

from predcheck.models.enums import MarketType
from predcheck.models.market import Event, Market, RelatedTag, Series, Tag
from predcheck.validation.contract import (
    EntityContract,
    Kind,
    array,
    booleans,
    enum,
    number,
    numbers,
    string,
    strings,
)

MARKET = EntityContract(
    "Market",
    fields=(
        *strings(
            "id",
            "question",
            "conditionId",
            "slug",
            "endDate",
            "category",
            "liquidity",
            "image",
            "icon",
            "description",
            "volume",
        ),
        enum("marketType", MarketType),
        # Gamma sends these as JSON-encoded strings on some endpoints
        array("outcomes", items=Kind.STRING, json_string=True),
        array("outcomePrices", items=Kind.STRING, json_string=True),
        array("clobTokenIds", items=Kind.STRING, json_string=True, required=False),
        *booleans("active", "closed"),
        *numbers(
            "volumeNum",
            "liquidityNum",
            "volume24hr",
            "volume1wk",
            "volume1mo",
            "lastTradePrice",
            "bestBid",
            "bestAsk",
        ),
    ),
)

TAG = EntityContract(
    "Tag",
    fields=(
        *strings("id", "label", "slug"),
        *booleans("forceShow", "isCarousel", required=False),
        *strings("publishedAt", "createdAt", "updatedAt", required=False),
    ),
)

RELATED_TAG = EntityContract(
    "RelatedTag",
    fields=(
        string("id"),
        number("tagID", coerce_string=True),
        number("relatedTagID", coerce_string=True),
        number("rank", required=False),
    ),
)

EVENT = EntityContract(
    "Event",
    fields=(
        *strings("id", "ticker", "slug", "title"),
        *booleans("active", "closed", "archived"),
        array("markets", contract=MARKET),
        *strings(
            "subtitle",
            "description",
            "resolutionSource",
            "startDate",
            "creationDate",
            "endDate",
            "image",
            "icon",
            "category",
            "subcategory",
            required=False,
        ),
        *booleans("new", "featured", "restricted", required=False),
        *numbers(
            "liquidity",
            "volume",
            "openInterest",
            "volume24hr",
            "volume1wk",
            "volume1mo",
            "volume1yr",
            "commentCount",
            required=False,
        ),
        array("tags", contract=TAG, required=False),
        array("categories", required=False),
    ),
)

SERIES = EntityContract(
    "Series",
    plural="Series",
    fields=(
        *strings("id", "ticker", "slug", "title"),
        *strings(
            "subtitle",
            "seriesType",
            "recurrence",
            "description",
            "image",
            "icon",
            "layout",
            "publishedAt",
            "createdBy",
            "updatedBy",
            "createdAt",
            "updatedAt",
            "competitive",
            "startDate",
            "pythTokenID",
            "cgAssetName",
            required=False,
        ),
        *booleans(
            "active",
            "closed",
            "archived",
            "new",
            "featured",
            "restricted",
            "isTemplate",
            "templateVariables",
            "commentsEnabled",
            required=False,
        ),
        *numbers("volume24hr", "volume", "liquidity", "score", "commentCount", required=False),
        array("events", contract=EVENT, required=False),
        array("collections", required=False),
        array("categories", required=False),
        array("tags", contract=TAG, required=False),
        array("chats", required=False),
    ),
)


def validate_market(data: Any, *, deep: bool = False) -> Market:
    """Validate a market, decoding outcome lists that arrive as JSON strings."""
    return cast(Market, MARKET.validate(data, deep=deep))


def validate_markets(data: Any, *, deep: bool = False) -> list[Market]:
    return cast(list[Market], MARKET.validate_many(data, deep=deep))


def validate_event(data: Any, *, deep: bool = False) -> Event:
    """Validate an event. Embedded markets and tags are only checked to be lists
    unless ``deep`` is set."""
    return cast(Event, EVENT.validate(data, deep=deep))


def validate_events(data: Any, *, deep: bool = False) -> list[Event]:
    return cast(list[Event], EVENT.validate_many(data, deep=deep))


def validate_tag(data: Any, *, deep: bool = False) -> Tag:
    return cast(Tag, TAG.validate(data, deep=deep))


def validate_tags(data: Any, *, deep: bool = False) -> list[Tag]:
    return cast(list[Tag], TAG.validate_many(data, deep=deep))


def validate_related_tag(data: Any, *, deep: bool = False) -> RelatedTag:
    return cast(RelatedTag, RELATED_TAG.validate(data, deep=deep))


def validate_related_tags(data: Any, *, deep: bool = False) -> list[RelatedTag]:
    return cast(list[RelatedTag], RELATED_TAG.validate_many(data, deep=deep))


def validate_series(data: Any, *, deep: bool = False) -> Series:
    return cast(Series, SERIES.validate(data, deep=deep))


def validate_series_list(data: Any, *, deep: bool = False) -> list[Series]:
    return cast(list[Series], SERIES.validate_many(data, deep=deep))
