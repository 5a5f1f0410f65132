"""Signed liquidity deltas applied to uint128 liquidity."""

from __future__ import annotations

from .constants import MAX_UINT128, AddDeltaOverflowError


def add_delta(x: int, y: int) -> int:
    """Add a signed delta ``y`` to liquidity ``x``.

    Raises AddDeltaOverflowError if the result leaves the uint128 range.
    """
    result = x + y
    if not 0 <= result <= MAX_UINT128:
        raise AddDeltaOverflowError()
    return result