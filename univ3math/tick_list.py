"""Sorted lists of initialized ticks and lookups over them."""

from __future__ import annotations

from bisect import bisect_right
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from typing import overload

from .constants import MAX_UINT128, TickListError


@dataclass(frozen=True)
class Tick:
    """An initialized tick with its gross and net liquidity."""

    index: int
    liquidity_gross: int = 0
    liquidity_net: int = 0


class TickList(Sequence):
    """An immutable list of ticks sorted by index, usable as a tick data provider."""

    def __init__(self, ticks: Iterable[Tick] = ()) -> None:
        self._ticks: tuple[Tick, ...] = tuple(ticks)
        self._indices: list[int] = [tick.index for tick in self._ticks]

    @overload
    def __getitem__(self, position: int) -> Tick: ...

    @overload
    def __getitem__(self, position: slice) -> tuple[Tick, ...]: ...

    def __getitem__(self, position):
        return self._ticks[position]

    def __len__(self) -> int:
        return len(self._ticks)

    def __iter__(self) -> Iterator[Tick]:
        return iter(self._ticks)

    def __repr__(self) -> str:
        return f"TickList({list(self._ticks)!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, TickList):
            return self._ticks == other._ticks
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._ticks)

    def validate_list(self, tick_spacing: int) -> None:
        """Check spacing, sort order and that the net liquidity sums to zero.

        Raises ValueError naming the first check that fails: TICK_SPACING_NONZERO,
        LENGTH, TICK_SPACING, SORTED or ZERO_NET.
        """
        if tick_spacing <= 0:
            raise ValueError("TICK_SPACING_NONZERO")
        if not self._ticks:
            raise ValueError("LENGTH")
        if any(tick.index % tick_spacing for tick in self._ticks):
            raise ValueError("TICK_SPACING")
        if any(later < earlier for earlier, later in zip(self._indices, self._indices[1:])):
            raise ValueError("SORTED")
        total = 0
        for tick in self._ticks:
            total += tick.liquidity_net
            if not 0 <= total <= MAX_UINT128:
                raise ValueError("ZERO_NET")
        if total != 0:
            raise ValueError("ZERO_NET")

    def is_below_smallest(self, tick: int) -> bool:
        """Return True if ``tick`` lies below the first tick's index."""
        return tick < self._ticks[0].index

    def is_at_or_above_largest(self, tick: int) -> bool:
        """Return True if ``tick`` is at or above the last tick's index."""
        return tick >= self._ticks[-1].index

    def binary_search_by_tick(self, tick: int) -> int:
        """Return the position of the largest tick whose index is at most ``tick``.

        Raises TickListError(BELOW_SMALLEST) if ``tick`` is below the smallest index.
        """
        if self.is_below_smallest(tick):
            raise TickListError(TickListError.BELOW_SMALLEST)
        return bisect_right(self._indices, tick) - 1

    def next_initialized_tick(self, tick: int, lte: bool) -> Tick:
        """Return the nearest initialized tick at or below (``lte``) or above ``tick``.

        Raises TickListError when no such tick exists.
        """
        if lte:
            if self.is_below_smallest(tick):
                raise TickListError(TickListError.BELOW_SMALLEST)
            if self.is_at_or_above_largest(tick):
                return self._ticks[-1]
            return self._ticks[self.binary_search_by_tick(tick)]
        if self.is_at_or_above_largest(tick):
            raise TickListError(TickListError.AT_OR_ABOVE_LARGEST)
        if self.is_below_smallest(tick):
            return self._ticks[0]
        return self._ticks[self.binary_search_by_tick(tick) + 1]

    def get_tick(self, index: int) -> Tick:
        """Return the tick with exactly ``index``.

        Raises TickListError(NOT_CONTAINED) if no tick has that index.
        """
        tick = self._ticks[self.binary_search_by_tick(index)]
        if tick.index != index:
            raise TickListError(TickListError.NOT_CONTAINED)
        return tick

    def next_initialized_tick_within_one_word(
        self, tick: int, lte: bool, tick_spacing: int
    ) -> tuple[int, bool]:
        """Return the next tick within the same 256-tick bitmap word and whether it is initialized."""
        compressed = tick // tick_spacing
        if lte:
            word_pos = compressed >> 8
            minimum = (word_pos << 8) * tick_spacing
            if self.is_below_smallest(tick):
                return minimum, False
            index = self.next_initialized_tick(tick, lte).index
            next_tick = max(minimum, index)
            return next_tick, next_tick == index
        word_pos = (compressed + 1) >> 8
        maximum = (((word_pos + 1) << 8) - 1) * tick_spacing
        if self.is_at_or_above_largest(tick):
            return maximum, False
        index = self.next_initialized_tick(tick, lte).index
        next_tick = min(maximum, index)
        return next_tick, next_tick == index