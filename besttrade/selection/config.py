"""Selector configuration."""

from __future__ import annotations

from dataclasses import dataclass

from besttrade.constants import BETTER_TRADE_LESS_HOPS_THRESHOLD, ONE_BIPS, ONE_HUNDRED_PERCENT
from besttrade.math import Percent


@dataclass(frozen=True)
class SelectorConfig:
    """Ratio constants bound into a BestTradeSelector.

    Attributes:
        one_bips: Rounding allowance subtracted from the exact-input ratio
        less_hops_threshold: Slack within which a route with fewer hops
            replaces the current best
        one_hundred_percent: Unit ratio used by the exact-output comparison
    """

    one_bips: Percent = ONE_BIPS
    less_hops_threshold: Percent = BETTER_TRADE_LESS_HOPS_THRESHOLD
    one_hundred_percent: Percent = ONE_HUNDRED_PERCENT

    @classmethod
    def from_threshold_bips(cls, bips: int) -> SelectorConfig:
        """Default config with the fewer-hops threshold set in basis points."""
        return cls(less_hops_threshold=Percent.from_bips(bips))


# Default configuration instance
DEFAULT_SELECTOR_CONFIG = SelectorConfig()
