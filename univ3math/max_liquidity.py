"""Maximum liquidity obtainable for given token amounts and a price range."""

from __future__ import annotations


def _sorted_pair(a: int, b: int) -> tuple[int, int]:
    return (b, a) if a > b else (a, b)


def max_liquidity_for_amount0_imprecise(
    sqrt_ratio_a_x96: int, sqrt_ratio_b_x96: int, amount0: int
) -> int:
    """Return an imprecise maximum liquidity for ``amount0`` of token0.

    Matches what the v3 periphery router computes: the intermediate product of
    the prices is divided by 2**96 before use, losing precision.
    """
    lower, upper = _sorted_pair(sqrt_ratio_a_x96, sqrt_ratio_b_x96)
    intermediate = (lower * upper) >> 96
    return amount0 * intermediate // (upper - lower)


def max_liquidity_for_amount0_precise(
    sqrt_ratio_a_x96: int, sqrt_ratio_b_x96: int, amount0: int
) -> int:
    """Return the precise maximum liquidity for ``amount0`` of token0."""
    lower, upper = _sorted_pair(sqrt_ratio_a_x96, sqrt_ratio_b_x96)
    numerator = amount0 * lower * upper
    denominator = (upper - lower) << 96
    return numerator // denominator


def max_liquidity_for_amount1(
    sqrt_ratio_a_x96: int, sqrt_ratio_b_x96: int, amount1: int
) -> int:
    """Return the maximum liquidity for ``amount1`` of token1."""
    lower, upper = _sorted_pair(sqrt_ratio_a_x96, sqrt_ratio_b_x96)
    return (amount1 << 96) // (upper - lower)


def max_liquidity_for_amounts(
    sqrt_ratio_current_x96: int,
    sqrt_ratio_a_x96: int,
    sqrt_ratio_b_x96: int,
    amount0: int,
    amount1: int,
    use_full_precision: bool,
) -> int:
    """Return the maximum liquidity for the given amounts at the current price.

    With ``use_full_precision`` false, token0 liquidity is computed the way the
    router does rather than as precisely as the core contract allows.
    """
    lower, upper = _sorted_pair(sqrt_ratio_a_x96, sqrt_ratio_b_x96)
    for_amount0 = (
        max_liquidity_for_amount0_precise
        if use_full_precision
        else max_liquidity_for_amount0_imprecise
    )

    if sqrt_ratio_current_x96 <= lower:
        return for_amount0(lower, upper, amount0)
    if sqrt_ratio_current_x96 < upper:
        liquidity0 = for_amount0(sqrt_ratio_current_x96, upper, amount0)
        liquidity1 = max_liquidity_for_amount1(lower, sqrt_ratio_current_x96, amount1)
        return min(liquidity0, liquidity1)
    return max_liquidity_for_amount1(lower, upper, amount1)