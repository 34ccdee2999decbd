"""Entity, collection and parameter validators."""

from predcheck.validation.bridge import (
    validate_bridge_token,
    validate_bridge_tokens,
    validate_deposit_address_map,
    validate_deposit_address_maps,
    validate_deposit_addresses,
    validate_deposit_addresses_list,
    validate_supported_asset,
    validate_supported_asset_list,
    validate_supported_assets,
)
from predcheck.validation.comments import (
    validate_comment,
    validate_comment_profile,
    validate_comment_profiles,
    validate_comments,
    validate_reaction,
    validate_reactions,
)
from predcheck.validation.contract import EntityContract, FieldSpec, Kind
from predcheck.validation.markets import (
    validate_event,
    validate_events,
    validate_market,
    validate_markets,
    validate_related_tag,
    validate_related_tags,
    validate_series,
    validate_series_list,
    validate_tag,
    validate_tags,
)
from predcheck.validation.prices import (
    validate_price_history,
    validate_price_point,
    validate_price_points,
)
from predcheck.validation.registry import entity_names, get_entity
from predcheck.validation.sports import (
    validate_builder_leaderboard,
    validate_builder_leaderboard_entry,
    validate_builder_volume,
    validate_builder_volume_entry,
    validate_sports_metadata,
    validate_sports_metadata_list,
    validate_team,
    validate_teams,
    validate_trader_leaderboard,
    validate_trader_leaderboard_entry,
)
from predcheck.validation.user_data import (
    validate_activities,
    validate_activity,
    validate_closed_position,
    validate_closed_positions,
    validate_holder_info,
    validate_holder_infos,
    validate_market_holders,
    validate_market_holders_list,
    validate_portfolio_value,
    validate_portfolio_values,
    validate_position,
    validate_positions,
    validate_trade,
    validate_trades,
)
