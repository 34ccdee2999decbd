"""Comments, their author profiles and reactions."""

from __future__ import annotations

from typing import Any, cast

from predcheck.models.comment import Comment, CommentProfile, Reaction
from predcheck.models.enums import ParentEntityType
from predcheck.validation.contract import (
    EntityContract,
    array,
    booleans,
    enum,
    nested,
    number,
    numbers,
    string,
    strings,
)

COMMENT_PROFILE = EntityContract(
    "CommentProfile",
    fields=(
        string("pseudonym"),
        *strings(
            "name",
            "bio",
            "proxyWallet",
            "baseAddress",
            "profileImage",
            "profileImageOptimized",
            required=False,
        ),
        *booleans("displayUsernamePublic", "isMod", "isCreator", required=False),
        array("positions", required=False),
    ),
)

# ids may arrive as numbers or numeric strings
REACTION = EntityContract(
    "Reaction",
    fields=(
        number("id", coerce_string=True),
        number("commentID", coerce_string=True),
        *strings("reactionType", "userAddress", "createdAt"),
        string("icon", required=False),
        nested("profile", COMMENT_PROFILE, required=False),
    ),
)

COMMENT = EntityContract(
    "Comment",
    fields=(
        number("id", coerce_string=True),
        *strings("body", "userAddress", "createdAt"),
        enum("parentEntityType", ParentEntityType),
        number("parentEntityID", coerce_string=True),
        number("parentCommentID", coerce_string=True, required=False),
        *strings("replyAddress", "updatedAt", required=False),
        nested("profile", COMMENT_PROFILE, required=False),
        array("reactions", contract=REACTION, deep=True, required=False),
        *numbers("reportCount", "reactionCount", required=False),
    ),
)


def validate_comment_profile(data: Any, *, deep: bool = False) -> CommentProfile:
    return cast(CommentProfile, COMMENT_PROFILE.validate(data, deep=deep))


def validate_comment_profiles(data: Any, *, deep: bool = False) -> list[CommentProfile]:
    return cast(list[CommentProfile], COMMENT_PROFILE.validate_many(data, deep=deep))


def validate_reaction(data: Any, *, deep: bool = False) -> Reaction:
    return cast(Reaction, REACTION.validate(data, deep=deep))


def validate_reactions(data: Any, *, deep: bool = False) -> list[Reaction]:
    return cast(list[Reaction], REACTION.validate_many(data, deep=deep))


def validate_comment(data: Any, *, deep: bool = False) -> Comment:
    """Validate a comment with its embedded profile and reactions.

    Numeric ids sent as strings are decoded in the returned copy.
    """
    return cast(Comment, COMMENT.validate(data, deep=deep))


def validate_comments(data: Any, *, deep: bool = False) -> list[Comment]:
    return cast(list[Comment], COMMENT.validate_many(data, deep=deep))
