"""Tests for candidate route discovery."""

from besttrade.constants import ETHER
from besttrade.routing import PoolRouteProvider, RouteSet, compute_all_routes
from tests.helpers import DAI, USDC, WBTC, WETH, make_pool, make_token


class TestComputeAllRoutes:
    """Tests for compute_all_routes depth-first enumeration."""

    def test_finds_direct_and_two_hop_routes(self, usdc_weth_pools):
        """Both direct pools and the DAI detour are found, in pool order."""
        routes = compute_all_routes(make_token(USDC), make_token(WETH), usdc_weth_pools)

        assert len(routes) == 3
        assert [r.hop_count for r in routes] == [1, 1, 2]
        assert [r.pools[0].fee for r in routes[:2]] == [3000, 500]
        assert [t.address for t in routes[2].token_path] == [USDC, DAI, WETH]

    def test_max_hops_limits_depth(self, usdc_weth_pools):
        routes = compute_all_routes(
            make_token(USDC), make_token(WETH), usdc_weth_pools, max_hops=1
        )
        assert len(routes) == 2
        assert all(r.hop_count == 1 for r in routes)

    def test_same_currency_has_no_routes(self, usdc_weth_pools):
        assert compute_all_routes(make_token(USDC), make_token(USDC), usdc_weth_pools) == []

    def test_unconnected_token_has_no_routes(self, usdc_weth_pools):
        assert compute_all_routes(make_token(USDC), make_token(WBTC), usdc_weth_pools) == []

    def test_pool_never_reused(self):
        """A route never passes through the same pool twice."""
        pools = [make_pool(USDC, DAI), make_pool(DAI, WETH)]
        routes = compute_all_routes(make_token(USDC), make_token(WETH), pools, max_hops=4)
        assert len(routes) == 1
        assert routes[0].hop_count == 2

    def test_native_currency_routes_through_wrapped(self, usdc_weth_pools):
        """ETH output is discovered through WETH pools and kept as route output."""
        routes = compute_all_routes(make_token(USDC), ETHER, usdc_weth_pools)
        assert len(routes) == 3
        assert all(r.output is ETHER for r in routes)


class TestPoolRouteProvider:
    """Tests for PoolRouteProvider."""

    def test_returns_route_set(self, usdc_weth_pools):
        provider = PoolRouteProvider(usdc_weth_pools)
        route_set = provider.get_routes(make_token(USDC), make_token(WETH))

        assert isinstance(route_set, RouteSet)
        assert len(route_set) == 3
        assert route_set.loading is False

    def test_missing_currency_returns_empty(self, usdc_weth_pools):
        provider = PoolRouteProvider(usdc_weth_pools, loading=True)
        assert provider.get_routes(None, make_token(WETH)) == RouteSet.empty()
        assert provider.get_routes(make_token(USDC), None) == RouteSet.empty()

    def test_loading_flag_propagates(self, usdc_weth_pools):
        provider = PoolRouteProvider(usdc_weth_pools, loading=True)
        assert provider.get_routes(make_token(USDC), make_token(WETH)).loading is True

    def test_set_pools_replaces_pools(self, usdc_weth_pools):
        provider = PoolRouteProvider(loading=True)
        assert len(provider.get_routes(make_token(USDC), make_token(WETH))) == 0

        provider.set_pools(usdc_weth_pools)
        route_set = provider.get_routes(make_token(USDC), make_token(WETH))
        assert len(route_set) == 3
        assert route_set.loading is False

    def test_routes_are_deterministic(self, usdc_weth_pools):
        provider = PoolRouteProvider(usdc_weth_pools)
        first = provider.get_routes(make_token(USDC), make_token(WETH))
        second = provider.get_routes(make_token(USDC), make_token(WETH))
        assert first == second
