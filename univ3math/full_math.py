"""Full-precision multiply-then-divide on 256-bit unsigned integers."""

from __future__ import annotations

from .constants import MAX_UINT256, MulDivOverflowError


def mul_div(a: int, b: int, denominator: int) -> int:
    """Return floor(a*b/denominator).

    Raises MulDivOverflowError if the result overflows 256 bits or the
    denominator is zero.
    """
    product = a * b
    if denominator <= product >> 256:
        raise MulDivOverflowError()
    return product // denominator


def mul_div_rounding_up(a: int, b: int, denominator: int) -> int:
    """Return ceil(a*b/denominator), raising MulDivOverflowError on overflow."""
    result = mul_div(a, b, denominator)
    if (a * b) % denominator == 0:
        return result
    if result == MAX_UINT256:
        raise MulDivOverflowError()
    return result + 1


def mul_div_q96(a: int, b: int) -> int:
    """Return floor(a*b / 2**96), raising MulDivOverflowError on overflow."""
    result = (a * b) >> 96
    if result > MAX_UINT256:
        raise MulDivOverflowError()
    return result