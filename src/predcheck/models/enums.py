"""Closed enumerations for every enumerated wire field."""

from enum import Enum


class MarketType(str, Enum):
    NORMAL = "normal"
    SCALAR = "scalar"


class TradeSide(str, Enum):
    BUY = "BUY"
    SELL = "SELL"


class ActivityType(str, Enum):
    TRADE = "TRADE"
    SPLIT = "SPLIT"
    MERGE = "MERGE"
    REDEEM = "REDEEM"
    REWARD = "REWARD"
    CONVERSION = "CONVERSION"


class ParentEntityType(str, Enum):
    EVENT = "Event"
    SERIES = "Series"
    MARKET = "market"


class PriceInterval(str, Enum):
    ONE_MONTH = "1m"
    ONE_WEEK = "1w"
    ONE_DAY = "1d"
    SIX_HOURS = "6h"
    ONE_HOUR = "1h"
    MAX = "max"


class TimePeriod(str, Enum):
    DAY = "DAY"
    WEEK = "WEEK"
    MONTH = "MONTH"
    ALL = "ALL"


class ChainType(str, Enum):
    EVM = "evm"
    SVM = "svm"
    BTC = "btc"


def enum_values(enum_cls: type[Enum]) -> list[str]:
    return [member.value for member in enum_cls]
