"""Comment, CommentProfile, Reaction."""

from __future__ import annotations

from typing import Any, Literal, NotRequired, TypedDict


class CommentProfile(TypedDict):
    pseudonym: str
    name: NotRequired[str | None]
    bio: NotRequired[str | None]
    proxyWallet: NotRequired[str | None]
    baseAddress: NotRequired[str | None]
    profileImage: NotRequired[str | None]
    profileImageOptimized: NotRequired[str | None]
    displayUsernamePublic: NotRequired[bool | None]
    isMod: NotRequired[bool | None]
    isCreator: NotRequired[bool | None]
    positions: NotRequired[list[Any] | None]


class Reaction(TypedDict):
    id: int
    commentID: int
    reactionType: str
    userAddress: str
    createdAt: str
    icon: NotRequired[str | None]
    profile: NotRequired[CommentProfile | None]


class Comment(TypedDict):
    id: int
    body: str
    userAddress: str
    createdAt: str
    parentEntityType: Literal["Event", "Series", "market"]
    parentEntityID: int
    parentCommentID: NotRequired[int | None]
    replyAddress: NotRequired[str | None]
    updatedAt: NotRequired[str | None]
    profile: NotRequired[CommentProfile | None]
    reactions: NotRequired[list[Reaction] | None]
    reportCount: NotRequired[float | None]
    reactionCount: NotRequired[float | None]
