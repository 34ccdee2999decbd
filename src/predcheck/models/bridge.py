"""Bridge/deposit entities."""

from __future__ import annotations

from typing import NotRequired, TypedDict


class BridgeToken(TypedDict):
    name: str
    symbol: str
    address: str
    decimals: int


class SupportedAsset(TypedDict):
    chainId: str
    chainName: str
    token: BridgeToken
    minCheckoutUsd: float


class SupportedAssets(TypedDict):
    supportedAssets: list[SupportedAsset]


class DepositAddressMap(TypedDict, total=False):
    evm: str | None
    svm: str | None
    btc: str | None


class DepositAddresses(TypedDict):
    address: DepositAddressMap
    note: NotRequired[str | None]
