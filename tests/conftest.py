"""Pytest configuration and fixtures."""

import pytest

from besttrade.constants import ETHER
from besttrade.models import Currency, Pool, Route
from besttrade.quoting import MockQuoter
from besttrade.selection import BestTradeSelector, SelectorConfig
from tests.helpers import DAI, USDC, USDT, WETH, make_path_route, make_pool, make_token

# =============================================================================
# Currencies
# =============================================================================


@pytest.fixture
def usdc() -> Currency:
    return make_token(USDC)


@pytest.fixture
def weth() -> Currency:
    return make_token(WETH)


@pytest.fixture
def ether() -> Currency:
    """Native ETH, wrapped as WETH in pool paths."""
    return ETHER


# =============================================================================
# Routes
# =============================================================================


@pytest.fixture
def hop1_route() -> Route:
    """Direct USDC -> WETH route (token path length 2)."""
    return make_path_route(USDC, WETH)


@pytest.fixture
def hop3_route() -> Route:
    """USDC -> DAI -> USDT -> WETH route (token path length 4)."""
    return make_path_route(USDC, DAI, USDT, WETH)


@pytest.fixture
def usdc_weth_pools() -> list[Pool]:
    """Two direct USDC/WETH pools and a USDC/DAI/WETH detour."""
    return [
        make_pool(USDC, WETH, 3000),
        make_pool(USDC, WETH, 500),
        make_pool(WETH, DAI, 3000),
        make_pool(DAI, USDC, 500),
    ]


# =============================================================================
# Selectors and quoters
# =============================================================================


@pytest.fixture
def selector() -> BestTradeSelector:
    """Selector with the default 50 bip fewer-hops threshold."""
    return BestTradeSelector()


@pytest.fixture
def wide_threshold_selector() -> BestTradeSelector:
    """Selector whose exact-input fewer-hops test passes for near-equal quotes."""
    return BestTradeSelector(SelectorConfig.from_threshold_bips(20_000))


@pytest.fixture
def mock_quoter() -> MockQuoter:
    """A mock quoter with no configured quotes (every lookup reverts)."""
    return MockQuoter()
