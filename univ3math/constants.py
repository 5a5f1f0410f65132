"""Fixed-point constants, integer bounds, shared result types and the package's exceptions."""

from __future__ import annotations

from dataclasses import dataclass

Q96 = 1 << 96
Q128 = 1 << 128
Q192 = 1 << 192

MAX_UINT128 = (1 << 128) - 1
MAX_UINT160 = (1 << 160) - 1
MAX_UINT256 = (1 << 256) - 1
MIN_INT128 = -(1 << 127)
MAX_INT128 = (1 << 127) - 1

MAX_TICK = 887272
MIN_TICK = -MAX_TICK

MIN_SQRT_RATIO = 4295128739
MAX_SQRT_RATIO = 1461446703485210103287273052203988822378723970342


@dataclass(frozen=True)
class MethodParameters:
    """Generated parameters for executing a call."""

    calldata: bytes
    """The encoded calldata to perform the given operation."""
    value: int
    """The amount of ether (wei) to send."""


class UniswapV3Error(Exception):
    """Base class for every error raised by the math routines."""


class MulDivOverflowError(UniswapV3Error):
    """A full-precision multiply-divide overflowed 256 bits or divided by zero."""

    def __init__(self) -> None:
        super().__init__("mul_div overflow")


class AddDeltaOverflowError(UniswapV3Error):
    """Adding a liquidity delta overflowed or underflowed a uint128."""

    def __init__(self) -> None:
        super().__init__("add delta overflow")


class PriceOverflowError(UniswapV3Error):
    """The next price would overflow."""

    def __init__(self) -> None:
        super().__init__("price overflow")


class SafeCastOverflowError(UniswapV3Error):
    """A value did not fit in a uint160."""

    def __init__(self) -> None:
        super().__init__("safe cast to uint160 overflow")


class InsufficientLiquidityError(UniswapV3Error):
    """There is not enough liquidity to move the price that far."""

    def __init__(self) -> None:
        super().__init__("insufficient liquidity")


class InvalidPriceOrLiquidityError(UniswapV3Error):
    """The price or the liquidity is zero."""

    def __init__(self) -> None:
        super().__init__("invalid price or liquidity")


class InvalidPriceError(UniswapV3Error):
    """The price is zero."""

    def __init__(self) -> None:
        super().__init__("invalid price")


class InvalidTickError(UniswapV3Error):
    """A tick lies outside the supported range."""

    def __init__(self, tick: int) -> None:
        self.tick = tick
        super().__init__(f"InvalidTick({tick})")


class InvalidSqrtPriceError(UniswapV3Error):
    """A sqrt price lies outside the supported range."""

    def __init__(self, sqrt_price: int) -> None:
        self.sqrt_price = sqrt_price
        super().__init__(f"InvalidSqrtPrice({sqrt_price})")


class TickListError(UniswapV3Error):
    """A lookup in a sorted tick list failed; ``kind`` names the reason."""

    BELOW_SMALLEST = "BelowSmallest"
    AT_OR_ABOVE_LARGEST = "AtOrAboveLargest"
    NOT_CONTAINED = "NotContained"

    def __init__(self, kind: str) -> None:
        self.kind = kind
        super().__init__(kind)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TickListError):
            return NotImplemented
        return self.kind == other.kind

    def __hash__(self) -> int:
        return hash(self.kind)