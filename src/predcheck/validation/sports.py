"""Sports teams/metadata and the builder and trader leaderboards."""

from __future__ import annotations

from typing import Any, cast

from predcheck.models.sports import (
    BuilderLeaderboardEntry,
    BuilderVolumeEntry,
    SportsMetadata,
    Team,
    TraderLeaderboardEntry,
)
from predcheck.validation.contract import (
    EntityContract,
    address,
    boolean,
    number,
    numbers,
    string,
    strings,
)

TEAM = EntityContract(
    "Team",
    fields=(
        number("id"),
        *strings("name", "league", "logo", "abbreviation", "alias"),
        *strings("record", "createdAt", "updatedAt", required=False),
    ),
)

SPORTS_METADATA = EntityContract(
    "SportsMetadata",
    plural="SportsMetadata",
    fields=strings("sport", "image", "resolution", "ordering", "tags", "series"),
)

BUILDER_LEADERBOARD_ENTRY = EntityContract(
    "BuilderLeaderboardEntry",
    plural="BuilderLeaderboardEntries",
    fields=(
        *strings("builder", "rank"),
        *numbers("volume", "activeUsers"),
        boolean("verified"),
        string("builderLogo", required=False),
    ),
)

BUILDER_VOLUME_ENTRY = EntityContract(
    "BuilderVolumeEntry",
    plural="BuilderVolumeEntries",
    fields=(
        *strings("dt", "builder", "rank"),
        *numbers("volume", "activeUsers"),
        boolean("verified"),
        string("builderLogo", required=False),
    ),
)

TRADER_LEADERBOARD_ENTRY = EntityContract(
    "TraderLeaderboardEntry",
    plural="TraderLeaderboardEntries",
    fields=(
        string("rank"),
        address("proxyWallet"),
        *numbers("vol", "pnl"),
        *strings("userName", "profileImage", "xUsername", required=False),
        boolean("verifiedBadge", required=False),
    ),
)


def validate_team(data: Any, *, deep: bool = False) -> Team:
    return cast(Team, TEAM.validate(data, deep=deep))


def validate_teams(data: Any, *, deep: bool = False) -> list[Team]:
    return cast(list[Team], TEAM.validate_many(data, deep=deep))


def validate_sports_metadata(data: Any, *, deep: bool = False) -> SportsMetadata:
    return cast(SportsMetadata, SPORTS_METADATA.validate(data, deep=deep))


def validate_sports_metadata_list(data: Any, *, deep: bool = False) -> list[SportsMetadata]:
    return cast(list[SportsMetadata], SPORTS_METADATA.validate_many(data, deep=deep))


def validate_builder_leaderboard_entry(data: Any, *, deep: bool = False) -> BuilderLeaderboardEntry:
    return cast(BuilderLeaderboardEntry, BUILDER_LEADERBOARD_ENTRY.validate(data, deep=deep))


def validate_builder_leaderboard(data: Any, *, deep: bool = False) -> list[BuilderLeaderboardEntry]:
    return cast(
        list[BuilderLeaderboardEntry], BUILDER_LEADERBOARD_ENTRY.validate_many(data, deep=deep)
    )


def validate_builder_volume_entry(data: Any, *, deep: bool = False) -> BuilderVolumeEntry:
    return cast(BuilderVolumeEntry, BUILDER_VOLUME_ENTRY.validate(data, deep=deep))


def validate_builder_volume(data: Any, *, deep: bool = False) -> list[BuilderVolumeEntry]:
    return cast(list[BuilderVolumeEntry], BUILDER_VOLUME_ENTRY.validate_many(data, deep=deep))


def validate_trader_leaderboard_entry(data: Any, *, deep: bool = False) -> TraderLeaderboardEntry:
    return cast(TraderLeaderboardEntry, TRADER_LEADERBOARD_ENTRY.validate(data, deep=deep))


def validate_trader_leaderboard(data: Any, *, deep: bool = False) -> list[TraderLeaderboardEntry]:
    return cast(
        list[TraderLeaderboardEntry], TRADER_LEADERBOARD_ENTRY.validate_many(data, deep=deep)
    )
