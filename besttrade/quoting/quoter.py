"""Path-based quoter implementations for pricing routes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

import structlog

from besttrade.constants import QUOTER_ADDRESS

logger = structlog.get_logger()


class Quoter(Protocol):
    """Protocol for quoter implementations.

    This allows swapping between a real RPC-based quoter and a mock quoter
    for testing. Paths are packed route encodings (see encode_route_to_path);
    exact-output paths are already reversed.
    """

    def quote_exact_input(self, path: str, amount_in: int) -> int | None:
        """Get output amount for exact input.

        Args:
            path: Encoded route path, input token first
            amount_in: Input amount

        Returns:
            Output amount, or None if the quote fails
        """
        ...

    def quote_exact_output(self, path: str, amount_out: int) -> int | None:
        """Get input amount for exact output.

        Args:
            path: Encoded route path, output token first
            amount_out: Desired output amount

        Returns:
            Required input amount, or None if the quote fails
        """
        ...


@dataclass(frozen=True)
class QuoteKey:
    """Key for looking up quotes in MockQuoter."""

    path: str
    amount: int
    is_exact_input: bool

    def __post_init__(self) -> None:
        object.__setattr__(self, "path", self.path.lower())


class MockQuoter:
    """Mock quoter for testing without RPC calls.

    Configure with expected quotes, and track calls for assertions.
    """

    def __init__(
        self,
        quotes: dict[QuoteKey, int | None] | None = None,
        default_rate: tuple[int, int] | None = None,
    ):
        """Initialize mock quoter.

        Args:
            quotes: Mapping of QuoteKey -> result amount. A None result
                    simulates a reverted quote.
            default_rate: If set, (numerator, denominator) ratio for any unconfigured quote.
                         For exact_input: amount_out = amount_in * num // denom
                         For exact_output: amount_in = (amount_out * denom + num - 1) // num
        """
        self.quotes = quotes or {}
        self.default_rate = default_rate
        self.calls: list[tuple[str, str, int]] = []  # (method, path, amount)

    def quote_exact_input(self, path: str, amount_in: int) -> int | None:
        """Get output amount for exact input."""
        self.calls.append(("exact_input", path, amount_in))

        key = QuoteKey(path, amount_in, is_exact_input=True)
        if key in self.quotes:
            return self.quotes[key]

        if self.default_rate is not None:
            num, denom = self.default_rate
            # Floor division for output amount (conservative for receiver)
            return amount_in * num // denom

        return None

    def quote_exact_output(self, path: str, amount_out: int) -> int | None:
        """Get input amount for exact output."""
        self.calls.append(("exact_output", path, amount_out))

        key = QuoteKey(path, amount_out, is_exact_input=False)
        if key in self.quotes:
            return self.quotes[key]

        if self.default_rate is not None:
            num, denom = self.default_rate
            if num > 0:
                # Ceiling division for input amount (conservative for payer)
                return (amount_out * denom + num - 1) // num

        return None


# Quoter (V1) ABI - minimal, just the path-based functions we need
QUOTER_ABI = [
    {
        "name": "quoteExactInput",
        "type": "function",
        "stateMutability": "nonpayable",
        "inputs": [
            {"name": "path", "type": "bytes"},
            {"name": "amountIn", "type": "uint256"},
        ],
        "outputs": [{"name": "amountOut", "type": "uint256"}],
    },
    {
        "name": "quoteExactOutput",
        "type": "function",
        "stateMutability": "nonpayable",
        "inputs": [
            {"name": "path", "type": "bytes"},
            {"name": "amountOut", "type": "uint256"},
        ],
        "outputs": [{"name": "amountIn", "type": "uint256"}],
    },
]


class Web3Quoter:
    """Real quoter that calls the Quoter contract via RPC.

    This makes actual eth_call requests. Reverted or failed calls are logged
    and reported as None, which the selector treats as "no usable quote".
    """

    def __init__(self, web3_provider: str, quoter_address: str = QUOTER_ADDRESS):
        """Initialize quoter with web3 provider.

        Args:
            web3_provider: HTTP RPC URL (e.g., "https://eth.llamarpc.com")
            quoter_address: Quoter contract address
        """
        try:
            from web3 import Web3
        except ImportError as e:
            raise ImportError(
                "web3 package required for Web3Quoter. Install with: pip install besttrade[web3]"
            ) from e

        self.w3 = Web3(Web3.HTTPProvider(web3_provider))
        self.quoter = self.w3.eth.contract(
            address=Web3.to_checksum_address(quoter_address),
            abi=QUOTER_ABI,
        )

    def quote_exact_input(self, path: str, amount_in: int) -> int | None:
        """Get output amount for exact input via RPC call."""
        try:
            result = self.quoter.functions.quoteExactInput(
                bytes.fromhex(path.removeprefix("0x")), amount_in
            ).call()
            return int(result)
        except Exception as e:
            logger.warning(
                "quote_exact_input_failed",
                path=path,
                amount_in=amount_in,
                error=str(e),
            )
            return None

    def quote_exact_output(self, path: str, amount_out: int) -> int | None:
        """Get input amount for exact output via RPC call."""
        try:
            result = self.quoter.functions.quoteExactOutput(
                bytes.fromhex(path.removeprefix("0x")), amount_out
            ).call()
            return int(result)
        except Exception as e:
            logger.warning(
                "quote_exact_output_failed",
                path=path,
                amount_out=amount_out,
                error=str(e),
            )
            return None


__all__ = [
    "Quoter",
    "QuoteKey",
    "MockQuoter",
    "Web3Quoter",
    "QUOTER_ABI",
]
