"""Sqrt price updates and token amount deltas for concentrated liquidity."""

from __future__ import annotations

from .constants import (
    MAX_UINT160,
    MAX_UINT256,
    Q96,
    InsufficientLiquidityError,
    InvalidPriceError,
    InvalidPriceOrLiquidityError,
    PriceOverflowError,
    SafeCastOverflowError,
)
from .full_math import mul_div, mul_div_q96, mul_div_rounding_up


def _div_ceil(numerator: int, denominator: int) -> int:
    return -(-numerator // denominator)


def _to_uint160(value: int) -> int:
    if value > MAX_UINT160:
        raise SafeCastOverflowError()
    return value


def get_next_sqrt_price_from_amount_0_rounding_up(
    sqrt_price_x96: int, liquidity: int, amount: int, add: bool
) -> int:
    """Return the sqrt price after adding or removing ``amount`` of token0.

    Always rounds up. Raises PriceOverflowError when removing more than the
    virtual reserves allow and SafeCastOverflowError if the result exceeds 160 bits.
    """
    if amount == 0:
        return sqrt_price_x96
    numerator_1 = liquidity << 96
    product = (amount * sqrt_price_x96) & MAX_UINT256
    product_fits = product // amount == sqrt_price_x96

    if add:
        if product_fits:
            denominator = (numerator_1 + product) & MAX_UINT256
            if denominator >= numerator_1:
                return _to_uint160(
                    mul_div_rounding_up(numerator_1, sqrt_price_x96, denominator)
                )
        denominator = (numerator_1 // sqrt_price_x96 + amount) & MAX_UINT256
        return _to_uint160(_div_ceil(numerator_1, denominator))

    if not (product_fits and numerator_1 > product):
        raise PriceOverflowError()
    denominator = numerator_1 - product
    return _to_uint160(mul_div_rounding_up(numerator_1, sqrt_price_x96, denominator))


def get_next_sqrt_price_from_amount_1_rounding_down(
    sqrt_price_x96: int, liquidity: int, amount: int, add: bool
) -> int:
    """Return the sqrt price after adding or removing ``amount`` of token1.

    Always rounds down. Raises SafeCastOverflowError if the result exceeds
    160 bits and InsufficientLiquidityError if the price would reach zero.
    """
    if add:
        if amount <= MAX_UINT160:
            quotient = (amount << 96) // liquidity
        else:
            quotient = mul_div(amount, Q96, liquidity)
        return _to_uint160((sqrt_price_x96 + quotient) & MAX_UINT256)

    if amount <= MAX_UINT160:
        quotient = _div_ceil(amount << 96, liquidity)
    else:
        quotient = mul_div_rounding_up(amount, Q96, liquidity)
    if sqrt_price_x96 > quotient:
        return sqrt_price_x96 - quotient
    raise InsufficientLiquidityError()


def get_next_sqrt_price_from_input(
    sqrt_price_x96: int, liquidity: int, amount_in: int, zero_for_one: bool
) -> int:
    """Return the sqrt price after swapping ``amount_in`` of token0 or token1 in.

    Raises InvalidPriceOrLiquidityError if the price or liquidity is zero.
    """
    if sqrt_price_x96 == 0 or liquidity == 0:
        raise InvalidPriceOrLiquidityError()
    if zero_for_one:
        return get_next_sqrt_price_from_amount_0_rounding_up(
            sqrt_price_x96, liquidity, amount_in, True
        )
    return get_next_sqrt_price_from_amount_1_rounding_down(
        sqrt_price_x96, liquidity, amount_in, True
    )


def get_next_sqrt_price_from_output(
    sqrt_price_x96: int, liquidity: int, amount_out: int, zero_for_one: bool
) -> int:
    """Return the sqrt price after swapping ``amount_out`` of token1 or token0 out.

    Raises InvalidPriceOrLiquidityError if the price or liquidity is zero.
    """
    if sqrt_price_x96 == 0 or liquidity == 0:
        raise InvalidPriceOrLiquidityError()
    if zero_for_one:
        return get_next_sqrt_price_from_amount_1_rounding_down(
            sqrt_price_x96, liquidity, amount_out, False
        )
    return get_next_sqrt_price_from_amount_0_rounding_up(
        sqrt_price_x96, liquidity, amount_out, False
    )


def get_amount_0_delta(
    sqrt_ratio_a_x96: int, sqrt_ratio_b_x96: int, liquidity: int, round_up: bool
) -> int:
    """Return the token0 amount covering ``liquidity`` between two sqrt prices.

    The prices may be given in either order. Raises InvalidPriceError if the
    lower price is zero.
    """
    lower, upper = sorted((sqrt_ratio_a_x96, sqrt_ratio_b_x96))
    if lower == 0:
        raise InvalidPriceError()
    numerator_1 = liquidity << 96
    numerator_2 = upper - lower
    if round_up:
        return _div_ceil(mul_div_rounding_up(numerator_1, numerator_2, upper), lower)
    return mul_div(numerator_1, numerator_2, upper) // lower


def get_amount_1_delta(
    sqrt_ratio_a_x96: int, sqrt_ratio_b_x96: int, liquidity: int, round_up: bool
) -> int:
    """Return the token1 amount covering ``liquidity`` between two sqrt prices.

    The prices may be given in either order.
    """
    lower, upper = sorted((sqrt_ratio_a_x96, sqrt_ratio_b_x96))
    numerator = upper - lower
    amount_1 = mul_div_q96(liquidity, numerator)
    carry = round_up and (liquidity * numerator) % Q96 > 0
    return (amount_1 + int(carry)) & MAX_UINT256


def get_amount_0_delta_signed(
    sqrt_ratio_a_x96: int, sqrt_ratio_b_x96: int, liquidity: int
) -> int:
    """Return the signed token0 delta for a signed liquidity change.

    Positive liquidity rounds up; negative liquidity rounds down and negates.
    """
    if liquidity < 0:
        return -get_amount_0_delta(sqrt_ratio_a_x96, sqrt_ratio_b_x96, -liquidity, False)
    return get_amount_0_delta(sqrt_ratio_a_x96, sqrt_ratio_b_x96, liquidity, True)


def get_amount_1_delta_signed(
    sqrt_ratio_a_x96: int, sqrt_ratio_b_x96: int, liquidity: int
) -> int:
    """Return the signed token1 delta for a signed liquidity change.

    Positive liquidity rounds up; negative liquidity rounds down and negates.
    """
    if liquidity < 0:
        return -get_amount_1_delta(sqrt_ratio_a_x96, sqrt_ratio_b_x96, -liquidity, False)
    return get_amount_1_delta(sqrt_ratio_a_x96, sqrt_ratio_b_x96, liquidity, True)