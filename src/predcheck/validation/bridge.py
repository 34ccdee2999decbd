"""Bridge API entities: supported assets and deposit addresses."""

from __future__ import annotations

from typing import Any, cast

from predcheck.models.bridge import (
    BridgeToken,
    DepositAddresses,
    DepositAddressMap,
    SupportedAsset,
    SupportedAssets,
)
from predcheck.models.enums import ChainType, enum_values
from predcheck.validation.contract import (
    EntityContract,
    array,
    nested,
    number,
    string,
    strings,
)

BRIDGE_TOKEN = EntityContract(
    "BridgeToken",
    fields=(
        *strings("name", "symbol", "address"),
        number("decimals"),
    ),
)

SUPPORTED_ASSET = EntityContract(
    "SupportedAsset",
    fields=(
        *strings("chainId", "chainName"),
        nested("token", BRIDGE_TOKEN),
        number("minCheckoutUsd"),
    ),
)

SUPPORTED_ASSETS = EntityContract(
    "SupportedAssets",
    plural="SupportedAssets",
    fields=(array("supportedAssets", contract=SUPPORTED_ASSET, deep=True),),
)

# one optional address per chain type, at least one present
DEPOSIT_ADDRESS_MAP = EntityContract(
    "DepositAddressMap",
    plural="DepositAddressMaps",
    fields=strings(*enum_values(ChainType), required=False),
    at_least_one_of=tuple(enum_values(ChainType)),
)

DEPOSIT_ADDRESSES = EntityContract(
    "DepositAddresses",
    plural="DepositAddresses",
    fields=(
        nested("address", DEPOSIT_ADDRESS_MAP),
        string("note", required=False),
    ),
)


def validate_bridge_token(data: Any, *, deep: bool = False) -> BridgeToken:
    return cast(BridgeToken, BRIDGE_TOKEN.validate(data, deep=deep))


def validate_bridge_tokens(data: Any, *, deep: bool = False) -> list[BridgeToken]:
    return cast(list[BridgeToken], BRIDGE_TOKEN.validate_many(data, deep=deep))


def validate_supported_asset(data: Any, *, deep: bool = False) -> SupportedAsset:
    return cast(SupportedAsset, SUPPORTED_ASSET.validate(data, deep=deep))


def validate_supported_asset_list(data: Any, *, deep: bool = False) -> list[SupportedAsset]:
    return cast(list[SupportedAsset], SUPPORTED_ASSET.validate_many(data, deep=deep))


def validate_supported_assets(data: Any, *, deep: bool = False) -> SupportedAssets:
    """Validate the ``{"supportedAssets": [...]}`` envelope and every asset in it."""
    return cast(SupportedAssets, SUPPORTED_ASSETS.validate(data, deep=deep))


def validate_deposit_address_map(data: Any, *, deep: bool = False) -> DepositAddressMap:
    return cast(DepositAddressMap, DEPOSIT_ADDRESS_MAP.validate(data, deep=deep))


def validate_deposit_address_maps(data: Any, *, deep: bool = False) -> list[DepositAddressMap]:
    return cast(list[DepositAddressMap], DEPOSIT_ADDRESS_MAP.validate_many(data, deep=deep))


def validate_deposit_addresses(data: Any, *, deep: bool = False) -> DepositAddresses:
    return cast(DepositAddresses, DEPOSIT_ADDRESSES.validate(data, deep=deep))


def validate_deposit_addresses_list(data: Any, *, deep: bool = False) -> list[DepositAddresses]:
    return cast(list[DepositAddresses], DEPOSIT_ADDRESSES.validate_many(data, deep=deep))
