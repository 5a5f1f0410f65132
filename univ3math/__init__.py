"""Exact integer math for concentrated-liquidity pools: mul-div, sqrt price deltas, liquidity, tick lists and pool addresses."""

__version__ = "4.0.0"