"""Sports teams/metadata and leaderboard rows."""

from __future__ import annotations

from typing import NotRequired, TypedDict


class Team(TypedDict):
    id: int
    name: str
    league: str
    logo: str
    abbreviation: str
    alias: str
    record: NotRequired[str | None]
    createdAt: NotRequired[str | None]
    updatedAt: NotRequired[str | None]


class SportsMetadata(TypedDict):
    sport: str
    image: str
    resolution: str
    ordering: str
    tags: str
    series: str


class BuilderLeaderboardEntry(TypedDict):
    builder: str
    volume: float
    rank: str
    activeUsers: int
    verified: bool
    builderLogo: NotRequired[str | None]


class BuilderVolumeEntry(TypedDict):
    dt: str
    builder: str
    volume: float
    rank: str
    activeUsers: int
    verified: bool
    builderLogo: NotRequired[str | None]


class TraderLeaderboardEntry(TypedDict):
    rank: str
    proxyWallet: str
    vol: float
    pnl: float
    userName: NotRequired[str | None]
    profileImage: NotRequired[str | None]
    xUsername: NotRequired[str | None]
    verifiedBadge: NotRequired[bool | None]
