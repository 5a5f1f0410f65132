"""Encoding of a price ratio as a Q64.96 square root."""

from __future__ import annotations

from math import isqrt


def encode_sqrt_ratio_x96(amount1: int, amount0: int) -> int:
    """Return sqrt(amount1 / amount0) as a Q64.96 number.

    The intermediate quotient truncates toward zero. Raises ValueError if the
    ratio is negative and ZeroDivisionError if ``amount0`` is zero.
    """
    numerator = int(amount1) << 192
    denominator = int(amount0)
    if denominator == 0:
        raise ZeroDivisionError("amount0 must be non-zero")
    quotient = abs(numerator) // abs(denominator)
    if (numerator < 0) != (denominator < 0) and quotient:
        raise ValueError("ratio must not be negative")
    return isqrt(quotient)