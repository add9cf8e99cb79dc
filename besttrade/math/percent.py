"""Exact rational percentages for comparing quoted amounts.

Percent holds an integer numerator and denominator and never divides:
every comparison cross-multiplies, so ratios of arbitrarily large token
amounts are compared exactly and a zero amount never raises.

Usage pattern:
    from besttrade.math import Percent

    ratio = Percent(best_amount, candidate_amount)  # best / candidate
    if ratio.subtract(ONE_BIPS).less_than(threshold):
        ...

Denominators are expected to be positive. Cross-multiplication assumes
it, matching how the quoter-facing code only ever builds ratios from
non-negative amounts and positive constants.
"""

from __future__ import annotations

from fractions import Fraction


class Percent:
    """Exact rational number used as a percentage.

    Percent(1, 100) is one percent, Percent(1, 1) is one hundred percent.
    Arithmetic results are not reduced; equality and ordering compare the
    represented values, not the raw numerator/denominator pairs.

    Attributes:
        numerator: Integer numerator (may be negative)
        denominator: Integer denominator
    """

    __slots__ = ("_numerator", "_denominator")
    _numerator: int
    _denominator: int

    def __init__(self, numerator: int, denominator: int = 1) -> None:
        """Create a Percent from an integer ratio.

        Args:
            numerator: Integer numerator
            denominator: Integer denominator (default 1)

        Raises:
            TypeError: If either part is not an int
        """
        if isinstance(numerator, bool) or not isinstance(numerator, int):
            raise TypeError(f"Percent numerator must be int, got {type(numerator).__name__}")
        if isinstance(denominator, bool) or not isinstance(denominator, int):
            raise TypeError(f"Percent denominator must be int, got {type(denominator).__name__}")
        self._numerator = numerator
        self._denominator = denominator

    @classmethod
    def from_bips(cls, bips: int) -> Percent:
        """Create a Percent from a number of basis points (1 bip = 1/10000)."""
        return cls(bips, 10_000)

    @property
    def numerator(self) -> int:
        return self._numerator

    @property
    def denominator(self) -> int:
        return self._denominator

    def __repr__(self) -> str:
        return f"Percent({self._numerator}, {self._denominator})"

    def __str__(self) -> str:
        return f"{self.to_fixed(2)}%"

    # --- Arithmetic ---

    def subtract(self, other: Percent | int) -> Percent:
        """Return self - other. Result may be negative."""
        other = _as_percent(other)
        if self._denominator == other._denominator:
            return Percent(self._numerator - other._numerator, self._denominator)
        return Percent(
            self._numerator * other._denominator - other._numerator * self._denominator,
            self._denominator * other._denominator,
        )

    def __sub__(self, other: Percent | int) -> Percent:
        return self.subtract(other)

    # --- Comparison ---

    def less_than(self, other: Percent | int) -> bool:
        other = _as_percent(other)
        return self._numerator * other._denominator < other._numerator * self._denominator

    def greater_than(self, other: Percent | int) -> bool:
        other = _as_percent(other)
        return self._numerator * other._denominator > other._numerator * self._denominator

    def equal_to(self, other: Percent | int) -> bool:
        other = _as_percent(other)
        return self._numerator * other._denominator == other._numerator * self._denominator

    def __lt__(self, other: Percent | int) -> bool:
        return self.less_than(other)

    def __gt__(self, other: Percent | int) -> bool:
        return self.greater_than(other)

    def __le__(self, other: Percent | int) -> bool:
        return not self.greater_than(other)

    def __ge__(self, other: Percent | int) -> bool:
        return not self.less_than(other)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, bool) or not isinstance(other, Percent | int):
            return NotImplemented
        other = _as_percent(other)
        # Zero-denominator ratios only equal each other
        if (self._denominator == 0) != (other._denominator == 0):
            return False
        return self.equal_to(other)

    def __hash__(self) -> int:
        if self._denominator == 0:
            return hash((Percent, 0))
        return hash(Fraction(self._numerator, self._denominator))

    # --- Formatting ---

    def to_fixed(self, decimals: int = 2) -> str:
        """Format the value as a percentage with a fixed number of decimals.

        Rounds half away from zero. Intended for logs and API output only.
        """
        if self._denominator == 0:
            return "NaN"
        scale = 10**decimals
        scaled_num = self._numerator * 100 * scale
        sign = -1 if (scaled_num < 0) != (self._denominator < 0) else 1
        quotient, remainder = divmod(abs(scaled_num), abs(self._denominator))
        if remainder * 2 >= abs(self._denominator):
            quotient += 1
        whole, frac = divmod(quotient, scale)
        text = f"{whole}.{frac:0{decimals}d}" if decimals > 0 else f"{whole}"
        return f"-{text}" if sign < 0 and quotient != 0 else text


def _as_percent(value: Percent | int) -> Percent:
    """Coerce an int to Percent(value, 1); pass Percent through."""
    if isinstance(value, Percent):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return Percent(value, 1)
    raise TypeError(f"Expected Percent or int, got {type(value).__name__}")


__all__ = ["Percent"]
