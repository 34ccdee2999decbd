"""CLOB price history."""

from __future__ import annotations

from typing import Any, cast

from predcheck.models.prices import PriceHistory, PricePoint
from predcheck.validation.contract import EntityContract, array, numbers

PRICE_POINT = EntityContract("PricePoint", fields=numbers("t", "p"))

PRICE_HISTORY = EntityContract(
    "PriceHistory",
    plural="PriceHistories",
    fields=(array("history", contract=PRICE_POINT, deep=True),),
)


def validate_price_point(data: Any, *, deep: bool = False) -> PricePoint:
    return cast(PricePoint, PRICE_POINT.validate(data, deep=deep))


def validate_price_points(data: Any, *, deep: bool = False) -> list[PricePoint]:
    return cast(list[PricePoint], PRICE_POINT.validate_many(data, deep=deep))


def validate_price_history(data: Any, *, deep: bool = False) -> PriceHistory:
    return cast(PriceHistory, PRICE_HISTORY.validate(data, deep=deep))
