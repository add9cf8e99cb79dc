"""Exact integer-ratio math for amount comparisons."""

from besttrade.math.percent import Percent

__all__ = ["Percent"]
