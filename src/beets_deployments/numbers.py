"""Fixed-point helpers matching the 18-decimal conventions of the vault contracts."""

from __future__ import annotations

from decimal import Decimal, localcontext
from typing import Sequence

ONE = 10**18
MAX_UINT256 = 2**256 - 1
ZERO_ADDRESS = "0x0000000000000000000000000000000000000000"

# The weighted pool factories refuse more tokens than this.
MAX_WEIGHTED_TOKENS = 100


def _to_decimal(value) -> Decimal:
    if isinstance(value, float):
        # repr() gives the shortest string that round-trips, which is what a
        # human typed in the first place.
        return Decimal(repr(value))
    return Decimal(value)


def fp(value) -> int:
    """Scale `value` by 1e18, e.g. ``fp(0.0025) == 2_500_000_000_000_000``."""
    with localcontext() as ctx:
        ctx.prec = 80
        return int(_to_decimal(value) * ONE)


def scale(value, decimals: int) -> int:
    """Scale a human amount to the raw units of a token with `decimals`.

    Amounts finer than the token can represent are rejected, not truncated.
    """
    with localcontext() as ctx:
        ctx.prec = 80
        scaled = _to_decimal(value) * (Decimal(10) ** decimals)
        if scaled != scaled.to_integral_value():
            raise ValueError(f"{value} has more than {decimals} decimal places")
        return int(scaled)


def bn(value) -> int:
    decimal = _to_decimal(value)
    if decimal != decimal.to_integral_value():
        raise ValueError(f"{value!r} is not a whole number")
    return int(decimal)


def to_normalized_weights(weights: Sequence[int]) -> list[int]:
    """Normalize `weights` so that they add up to exactly ``ONE``.

    Every weight but the last is scaled down; the last one absorbs the
    rounding remainder.
    """
    if len(weights) == MAX_WEIGHTED_TOKENS:
        return [ONE // MAX_WEIGHTED_TOKENS] * MAX_WEIGHTED_TOKENS

    total = sum(weights)
    if total <= 0:
        raise ValueError(f"Weights must add up to a positive total, got {list(weights)}")
    if total == ONE:
        return list(weights)

    normalized = []
    normalized_sum = 0
    for index, weight in enumerate(weights):
        if index < len(weights) - 1:
            value = weight * ONE // total
            normalized_sum += value
        else:
            value = ONE - normalized_sum
        normalized.append(value)
    return normalized


def format_units(amount: int, decimals: int) -> str:
    return f"{amount / (10 ** decimals):,.6f}"
