"""Name -> validator lookup for callers that pick an entity at run time."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from predcheck.validation import bridge, comments, markets, prices, sports, user_data
from predcheck.validation.contract import EntityContract


@dataclass(frozen=True)
class RegisteredEntity:
    name: str
    contract: EntityContract

    def validate(self, data: Any, *, many: bool = False, deep: bool = False) -> Any:
        if many:
            return self.contract.validate_many(data, deep=deep)
        return self.contract.validate(data, deep=deep)


_CONTRACTS: tuple[EntityContract, ...] = (
    markets.MARKET,
    markets.EVENT,
    markets.TAG,
    markets.RELATED_TAG,
    markets.SERIES,
    user_data.POSITION,
    user_data.TRADE,
    user_data.ACTIVITY,
    user_data.HOLDER_INFO,
    user_data.MARKET_HOLDERS,
    user_data.PORTFOLIO_VALUE,
    user_data.CLOSED_POSITION,
    comments.COMMENT_PROFILE,
    comments.REACTION,
    comments.COMMENT,
    bridge.BRIDGE_TOKEN,
    bridge.SUPPORTED_ASSET,
    bridge.SUPPORTED_ASSETS,
    bridge.DEPOSIT_ADDRESS_MAP,
    bridge.DEPOSIT_ADDRESSES,
    sports.TEAM,
    sports.SPORTS_METADATA,
    sports.BUILDER_LEADERBOARD_ENTRY,
    sports.BUILDER_VOLUME_ENTRY,
    sports.TRADER_LEADERBOARD_ENTRY,
    prices.PRICE_POINT,
    prices.PRICE_HISTORY,
)

ENTITIES: dict[str, RegisteredEntity] = {
    c.name: RegisteredEntity(c.name, c) for c in _CONTRACTS
}


def entity_names() -> list[str]:
    return sorted(ENTITIES)


def get_entity(name: str) -> RegisteredEntity:
    """Look up by contract name, case-insensitively (``market`` finds ``Market``)."""
    if name in ENTITIES:
        return ENTITIES[name]
    folded = {key.lower(): entry for key, entry in ENTITIES.items()}
    try:
        return folded[name.lower()]
    except KeyError:
        raise KeyError(f"unknown entity: {name}") from None
