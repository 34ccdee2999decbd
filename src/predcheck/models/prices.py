"""CLOB price history."""

from typing import TypedDict


class PricePoint(TypedDict):
    t: int  # unix seconds
    p: float


class PriceHistory(TypedDict):
    history: list[PricePoint]
