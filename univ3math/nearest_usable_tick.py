"""Rounding a tick to the nearest one usable for a tick spacing."""

from __future__ import annotations

from .constants import MAX_TICK, MIN_TICK


def nearest_usable_tick(tick: int, tick_spacing: int) -> int:
    """Return the usable tick closest to ``tick`` for ``tick_spacing``.

    Raises ValueError("TICK_SPACING") for a non-positive spacing and
    ValueError("TICK_BOUND") for a tick outside [MIN_TICK, MAX_TICK].
    """
    if tick_spacing <= 0:
        raise ValueError("TICK_SPACING")
    if not MIN_TICK <= tick <= MAX_TICK:
        raise ValueError("TICK_BOUND")
    quotient, remainder = divmod(tick, tick_spacing)
    rounded = (quotient + (remainder + tick_spacing // 2) // tick_spacing) * tick_spacing
    if rounded < MIN_TICK:
        return rounded + tick_spacing
    if rounded > MAX_TICK:
        return rounded - tick_spacing
    return rounded