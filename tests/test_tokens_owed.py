from univ3math.constants import Q128
from univ3math.tokens_owed import get_tokens_owed


def test_get_tokens_owed():
    assert get_tokens_owed(0, 0, 1, Q128, Q128) == (1, 1)


def test_no_growth_owes_nothing():
    assert get_tokens_owed(Q128, Q128, 10**18, Q128, Q128) == (0, 0)


def test_owed_scales_with_liquidity():
    assert get_tokens_owed(0, 0, 7, Q128, 2 * Q128) == (7, 14)