import pytest

from univ3math.constants import MAX_UINT256, Q96, Q128, MulDivOverflowError
from univ3math.full_math import mul_div, mul_div_q96, mul_div_rounding_up


def test_mul_div_raises_for_zero_denominator():
    with pytest.raises(MulDivOverflowError):
        mul_div(Q128, 5, 0)


def test_mul_div_raises_when_result_overflows():
    with pytest.raises(MulDivOverflowError):
        mul_div(Q128, Q128, 1)


def test_mul_div_raises_on_max_inputs_with_denominator_minus_one():
    with pytest.raises(MulDivOverflowError):
        mul_div(MAX_UINT256, MAX_UINT256, MAX_UINT256 - 1)


def test_mul_div_max_inputs():
    assert mul_div(MAX_UINT256, MAX_UINT256, MAX_UINT256) == MAX_UINT256


@pytest.mark.parametrize(
    "a, b, d",
    [
        (Q128, 50 * Q128 // 100, 150 * Q128 // 100),
        (Q128, 35 * Q128, 8 * Q128),
        (Q128, 1000 * Q128, 3000 * Q128),
        (7, 11, 3),
        (MAX_UINT256, 12345, MAX_UINT256 - 1),
    ],
)
def test_mul_div_is_floor(a, b, d):
    result = mul_div(a, b, d)
    assert result * d <= a * b < (result + 1) * d


@pytest.mark.parametrize(
    "a, b, d",
    [
        (Q128, 50 * Q128 // 100, 150 * Q128 // 100),
        (Q128, 1000 * Q128, 3000 * Q128),
        (7, 11, 3),
        (6, 10, 3),
    ],
)
def test_mul_div_rounding_up_is_ceiling(a, b, d):
    result = mul_div_rounding_up(a, b, d)
    assert (result - 1) * d < a * b <= result * d
    floor = mul_div(a, b, d)
    assert result - floor in (0, 1)
    assert (result == floor) == ((a * b) % d == 0)


def test_mul_div_rounding_up_raises_for_zero_denominator():
    with pytest.raises(MulDivOverflowError):
        mul_div_rounding_up(Q128, 5, 0)


def test_mul_div_rounding_up_raises_when_rounding_overflows():
    with pytest.raises(MulDivOverflowError):
        mul_div_rounding_up(
            535006138814359,
            432862656469423142931042426214547535783388063929571229938474969,
            2,
        )


def test_mul_div_q96_identity():
    assert mul_div_q96(Q96, 123456789) == 123456789
    assert mul_div_q96(MAX_UINT256, Q96) == MAX_UINT256


def test_mul_div_q96_raises_on_overflow():
    with pytest.raises(MulDivOverflowError):
        mul_div_q96(MAX_UINT256, Q96 * 2)


def test_mul_div_q96_agrees_with_mul_div():
    a, b = 3 * Q128 + 17, 5 * Q96 + 99
    assert mul_div_q96(a, b) == mul_div(a, b, Q96)