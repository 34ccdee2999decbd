"""Entity types (TypedDict) and closed enumerations for validated payloads."""

from predcheck.models.bridge import (
    BridgeToken,
    DepositAddresses,
    DepositAddressMap,
    SupportedAsset,
    SupportedAssets,
)
from predcheck.models.comment import Comment, CommentProfile, Reaction
from predcheck.models.enums import (
    ActivityType,
    ChainType,
    MarketType,
    ParentEntityType,
    PriceInterval,
    TimePeriod,
    TradeSide,
)
from predcheck.models.market import Event, Market, RelatedTag, Series, Tag
from predcheck.models.prices import PriceHistory, PricePoint
from predcheck.models.sports import (
    BuilderLeaderboardEntry,
    BuilderVolumeEntry,
    SportsMetadata,
    Team,
    TraderLeaderboardEntry,
)
from predcheck.models.user import (
    Activity,
    ClosedPosition,
    HolderInfo,
    MarketHolders,
    PortfolioValue,
    Position,
    Trade,
)

__all__ = [
    "Activity",
    "ActivityType",
    "BridgeToken",
    "BuilderLeaderboardEntry",
    "BuilderVolumeEntry",
    "ChainType",
    "ClosedPosition",
    "Comment",
    "CommentProfile",
    "DepositAddresses",
    "DepositAddressMap",
    "Event",
    "HolderInfo",
    "Market",
    "MarketHolders",
    "MarketType",
    "ParentEntityType",
    "PortfolioValue",
    "Position",
    "PriceHistory",
    "PriceInterval",
    "PricePoint",
    "Reaction",
    "RelatedTag",
    "Series",
    "SportsMetadata",
    "SupportedAsset",
    "SupportedAssets",
    "Tag",
    "Team",
    "TimePeriod",
    "Trade",
    "TradeSide",
    "TraderLeaderboardEntry",
]
