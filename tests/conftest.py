"""Shared payload fixtures. Each returns a fresh, valid payload."""

import pytest

WALLET = "0x56687bf447db6ffa42ffe2204a05edaa20f55839"
CONDITION_ID = "0x" + "ab" * 32


@pytest.fixture
def market():
    return {
        "id": "12345",
        "question": "Will it rain tomorrow?",
        "conditionId": CONDITION_ID,
        "slug": "will-it-rain-tomorrow",
        "endDate": "2026-12-31T00:00:00Z",
        "category": "Weather",
        "liquidity": "1000.5",
        "image": "https://example.com/image.png",
        "icon": "https://example.com/icon.png",
        "description": "Resolves YES if it rains.",
        "volume": "25000",
        "marketType": "normal",
        "outcomes": ["Yes", "No"],
        "outcomePrices": ["0.6", "0.4"],
        "active": True,
        "closed": False,
        "volumeNum": 25000.0,
        "liquidityNum": 1000.5,
        "volume24hr": 1200.0,
        "volume1wk": 8000.0,
        "volume1mo": 20000.0,
        "lastTradePrice": 0.6,
        "bestBid": 0.59,
        "bestAsk": 0.61,
    }


@pytest.fixture
def tag():
    return {"id": "100", "label": "Politics", "slug": "politics"}


@pytest.fixture
def event(market, tag):
    return {
        "id": "9001",
        "ticker": "rain",
        "slug": "rain-event",
        "title": "Rain",
        "active": True,
        "closed": False,
        "archived": False,
        "markets": [market],
        "tags": [tag],
    }


@pytest.fixture
def position():
    return {
        "proxyWallet": WALLET,
        "asset": "token-yes",
        "conditionId": CONDITION_ID,
        "title": "Will it rain tomorrow?",
        "slug": "will-it-rain-tomorrow",
        "icon": "https://example.com/icon.png",
        "eventSlug": "rain-event",
        "outcome": "Yes",
        "oppositeOutcome": "No",
        "oppositeAsset": "token-no",
        "size": 100.0,
        "avgPrice": 0.55,
        "initialValue": 55.0,
        "currentValue": 60.0,
        "cashPnl": 5.0,
        "percentPnl": 9.09,
        "totalBought": 100.0,
        "realizedPnl": 0.0,
        "percentRealizedPnl": 0.0,
        "curPrice": 0.6,
        "outcomeIndex": 0,
        "redeemable": False,
        "mergeable": False,
    }


@pytest.fixture
def trade():
    return {
        "proxyWallet": WALLET,
        "side": "BUY",
        "asset": "token-yes",
        "conditionId": CONDITION_ID,
        "title": "Will it rain tomorrow?",
        "slug": "will-it-rain-tomorrow",
        "icon": "https://example.com/icon.png",
        "eventSlug": "rain-event",
        "outcome": "Yes",
        "transactionHash": "0xdeadbeef",
        "size": 10.0,
        "price": 0.6,
        "timestamp": 1700000000,
        "outcomeIndex": 0,
    }


@pytest.fixture
def activity():
    return {
        "proxyWallet": WALLET,
        "type": "TRADE",
        "timestamp": 1700000000,
        "size": 10.0,
        "usdcSize": 6.0,
        "conditionId": CONDITION_ID,
        "transactionHash": "0xdeadbeef",
        "price": 0.6,
        "asset": "token-yes",
        "side": "SELL",
        "outcomeIndex": 1,
    }


@pytest.fixture
def holder():
    return {
        "proxyWallet": WALLET,
        "asset": "token-yes",
        "amount": 500.0,
        "outcomeIndex": 0,
        "pseudonym": "Rainy-Day",
    }


@pytest.fixture
def profile():
    return {"pseudonym": "Quiet-Owl", "name": "owl", "isMod": False}


@pytest.fixture
def reaction(profile):
    return {
        "id": 7,
        "commentID": 42,
        "reactionType": "HEART",
        "userAddress": WALLET,
        "createdAt": "2026-01-01T00:00:00Z",
        "profile": dict(profile),
    }


@pytest.fixture
def comment(profile, reaction):
    return {
        "id": 42,
        "body": "Looks like rain.",
        "userAddress": WALLET,
        "createdAt": "2026-01-01T00:00:00Z",
        "parentEntityType": "Event",
        "parentEntityID": 9001,
        "profile": profile,
        "reactions": [reaction],
    }


@pytest.fixture
def bridge_token():
    return {"name": "USD Coin", "symbol": "USDC", "address": WALLET, "decimals": 6}


@pytest.fixture
def supported_asset(bridge_token):
    return {
        "chainId": "137",
        "chainName": "Polygon",
        "token": bridge_token,
        "minCheckoutUsd": 10,
    }


@pytest.fixture
def price_history():
    return {"history": [{"t": 1700000000, "p": 0.5}, {"t": 1700003600, "p": 0.55}]}
