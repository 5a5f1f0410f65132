"""Fees owed to a position."""

from __future__ import annotations

from .constants import Q128

_MASK = (1 << 256) - 1


def get_tokens_owed(
    fee_growth_inside_0_last_x128: int,
    fee_growth_inside_1_last_x128: int,
    liquidity: int,
    fee_growth_inside_0_x128: int,
    fee_growth_inside_1_x128: int,
) -> tuple[int, int]:
    """Return the amounts of token0 and token1 owed to a position.

    Arithmetic wraps modulo 2**256 before the final division by 2**128.
    """
    delta0 = (fee_growth_inside_0_x128 - fee_growth_inside_0_last_x128) & _MASK
    delta1 = (fee_growth_inside_1_x128 - fee_growth_inside_1_last_x128) & _MASK
    owed0 = ((delta0 * liquidity) & _MASK) // Q128
    owed1 = ((delta1 * liquidity) & _MASK) // Q128
    return owed0, owed1