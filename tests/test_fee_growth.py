from univ3math.constants import Q128
from univ3math.fee_growth import FeeGrowthOutside, get_fee_growth_inside


def test_zero():
    result = get_fee_growth_inside(FeeGrowthOutside(), FeeGrowthOutside(), -1, 1, 0, 0, 0)
    assert result == (0, 0)


def test_non_zero_all_inside():
    result = get_fee_growth_inside(
        FeeGrowthOutside(), FeeGrowthOutside(), -1, 1, 0, Q128, Q128
    )
    assert result == (Q128, Q128)


def test_non_zero_some_outside():
    q127 = Q128 >> 1
    lower = FeeGrowthOutside(q127, q127)
    result = get_fee_growth_inside(lower, FeeGrowthOutside(), -1, 1, 0, Q128, Q128)
    assert result == (q127, q127)


def test_below_range_uses_lower_minus_upper_wrapping():
    lower = FeeGrowthOutside(0, 5)
    upper = FeeGrowthOutside(1, 2)
    inside0, inside1 = get_fee_growth_inside(lower, upper, -1, 1, -5, Q128, Q128)
    assert inside0 == (1 << 256) - 1
    assert inside1 == 3


def test_above_range_uses_upper_minus_lower():
    lower = FeeGrowthOutside(2, 3)
    upper = FeeGrowthOutside(10, 30)
    assert get_fee_growth_inside(lower, upper, -1, 1, 1, Q128, Q128) == (8, 27)