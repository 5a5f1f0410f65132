"""Fee growth accumulated inside a tick range."""

from __future__ import annotations

from dataclasses import dataclass

_MASK = (1 << 256) - 1


@dataclass(frozen=True)
class FeeGrowthOutside:
    """Fee growth recorded on the other side of a tick, per token, as X128."""

    fee_growth_outside0_x128: int = 0
    fee_growth_outside1_x128: int = 0


def get_fee_growth_inside(
    lower: FeeGrowthOutside,
    upper: FeeGrowthOutside,
    tick_lower: int,
    tick_upper: int,
    tick_current: int,
    fee_growth_global0_x128: int,
    fee_growth_global1_x128: int,
) -> tuple[int, int]:
    """Return the fee growth inside [tick_lower, tick_upper) for both tokens.

    Subtractions wrap modulo 2**256, as the on-chain accumulators do.
    """
    if tick_current < tick_lower:
        inside0 = lower.fee_growth_outside0_x128 - upper.fee_growth_outside0_x128
        inside1 = lower.fee_growth_outside1_x128 - upper.fee_growth_outside1_x128
    elif tick_current >= tick_upper:
        inside0 = upper.fee_growth_outside0_x128 - lower.fee_growth_outside0_x128
        inside1 = upper.fee_growth_outside1_x128 - lower.fee_growth_outside1_x128
    else:
        inside0 = (
            fee_growth_global0_x128
            - lower.fee_growth_outside0_x128
            - upper.fee_growth_outside0_x128
        )
        inside1 = (
            fee_growth_global1_x128
            - lower.fee_growth_outside1_x128
            - upper.fee_growth_outside1_x128
        )
    return inside0 & _MASK, inside1 & _MASK