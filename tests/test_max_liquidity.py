import pytest

from univ3math.constants import MAX_UINT256
from univ3math.encode_sqrt_ratio import encode_sqrt_ratio_x96
from univ3math.max_liquidity import (
    max_liquidity_for_amount0_imprecise,
    max_liquidity_for_amount0_precise,
    max_liquidity_for_amount1,
    max_liquidity_for_amounts,
)

LOWER = encode_sqrt_ratio_x96(100, 110)
UPPER = encode_sqrt_ratio_x96(110, 100)
INSIDE = encode_sqrt_ratio_x96(1, 1)
BELOW = encode_sqrt_ratio_x96(99, 110)
ABOVE = encode_sqrt_ratio_x96(111, 100)

CASES = [
    (INSIDE, 100, 200, 2148),
    (INSIDE, 100, MAX_UINT256, 2148),
    (INSIDE, MAX_UINT256, 200, 4297),
    (BELOW, 100, 200, 1048),
    (BELOW, 100, MAX_UINT256, 1048),
    (ABOVE, 100, 200, 2097),
    (
        ABOVE,
        100,
        MAX_UINT256,
        1214437677402050006470401421098959354205873606971497132040612572422243086574654,
    ),
    (ABOVE, MAX_UINT256, 200, 2097),
]


@pytest.mark.parametrize("current, amount0, amount1, expected", CASES)
def test_imprecise(current, amount0, amount1, expected):
    assert (
        max_liquidity_for_amounts(current, LOWER, UPPER, amount0, amount1, False)
        == expected
    )


@pytest.mark.parametrize("current, amount0, amount1, expected", CASES)
def test_precise(current, amount0, amount1, expected):
    assert (
        max_liquidity_for_amounts(current, LOWER, UPPER, amount0, amount1, True)
        == expected
    )


def test_imprecise_price_below_max_token0():
    assert max_liquidity_for_amounts(
        BELOW, LOWER, UPPER, MAX_UINT256, 200, False
    ) == 1214437677402050006470401421068302637228917309992228326090730924516431320489727


def test_precise_price_below_max_token0():
    assert max_liquidity_for_amounts(
        BELOW, LOWER, UPPER, MAX_UINT256, 200, True
    ) == 1214437677402050006470401421082903520362793114274352355276488318240158678126184


def test_bounds_order_does_not_matter():
    assert max_liquidity_for_amounts(
        INSIDE, UPPER, LOWER, 100, 200, False
    ) == max_liquidity_for_amounts(INSIDE, LOWER, UPPER, 100, 200, False)


def test_single_sided_helpers_are_symmetric_in_bounds():
    assert max_liquidity_for_amount1(LOWER, UPPER, 200) == max_liquidity_for_amount1(
        UPPER, LOWER, 200
    )
    assert max_liquidity_for_amount0_precise(
        LOWER, UPPER, 100
    ) == max_liquidity_for_amount0_precise(UPPER, LOWER, 100)


def test_precise_is_at_least_imprecise():
    precise = max_liquidity_for_amount0_precise(LOWER, UPPER, MAX_UINT256)
    imprecise = max_liquidity_for_amount0_imprecise(LOWER, UPPER, MAX_UINT256)
    assert precise >= imprecise


def test_equal_bounds_divide_by_zero():
    with pytest.raises(ZeroDivisionError):
        max_liquidity_for_amount1(LOWER, LOWER, 1)