# univ3math

Exact integer math for concentrated-liquidity pools in the style of Uniswap V3.
The functions reproduce the on-chain fixed-point arithmetic, including its
rounding and its wrap-around where the contracts wrap. Where the contracts
revert, the functions raise.

## Installation

```
pip install univ3math
```

To run the tests, install the `test` extra and run `pytest`:

```
pip install "univ3math[test]"
pytest
```

## Modules

- `univ3math.full_math`: `mul_div`, `mul_div_rounding_up` and `mul_div_q96`.
  They compute `a*b/denominator` (or `a*b/2**96`) exactly and raise
  `MulDivOverflowError` when the result does not fit in 256 bits or the
  denominator is zero.
- `univ3math.sqrt_price_math`: the next sqrt price after a token0 or token1
  amount is added or removed
  (`get_next_sqrt_price_from_amount_0_rounding_up`,
  `get_next_sqrt_price_from_amount_1_rounding_down`,
  `get_next_sqrt_price_from_input`, `get_next_sqrt_price_from_output`), and the
  token amounts between two sqrt prices (`get_amount_0_delta`,
  `get_amount_1_delta` and their signed forms `get_amount_0_delta_signed`,
  `get_amount_1_delta_signed`).
- `univ3math.liquidity_math`: `add_delta` adds a signed change to a uint128
  liquidity and raises `AddDeltaOverflowError` if it leaves that range.
- `univ3math.max_liquidity`: `max_liquidity_for_amounts` and its helpers
  `max_liquidity_for_amount0_imprecise`, `max_liquidity_for_amount0_precise`
  and `max_liquidity_for_amount1` give the largest liquidity that given token
  amounts can buy within a price range.
- `univ3math.tick_list`: `Tick` and `TickList`, an immutable sorted sequence of
  initialized ticks with `validate_list`, `binary_search_by_tick`,
  `next_initialized_tick`, `get_tick` and
  `next_initialized_tick_within_one_word`. Failed lookups raise `TickListError`.
- `univ3math.pool_address`: `compute_pool_address` returns the checksummed
  CREATE2 address of a pool for two tokens and a fee tier, with the zkSync
  variant when `chain_id` is 324.
- `univ3math.encode_sqrt_ratio`: `encode_sqrt_ratio_x96` encodes
  `sqrt(amount1 / amount0)` as a Q64.96 number.
- `univ3math.fee_growth`: `FeeGrowthOutside` and `get_fee_growth_inside`.
- `univ3math.tokens_owed`: `get_tokens_owed` computes the fees owed to a
  position.
- `univ3math.nearest_usable_tick`: `nearest_usable_tick` rounds a tick to the
  nearest multiple of a tick spacing within the tick bounds.
- `univ3math.bit_math`: `most_significant_bit` and `least_significant_bit`.
- `univ3math.constants`: `Q96`, `Q128`, `Q192`, the integer bounds, `MIN_TICK`,
  `MAX_TICK`, `MIN_SQRT_RATIO`, `MAX_SQRT_RATIO`, `MethodParameters` and the
  exception classes. All of the exceptions derive from `UniswapV3Error`.

## Example

```python
from univ3math.constants import Q96
from univ3math.encode_sqrt_ratio import encode_sqrt_ratio_x96
from univ3math.max_liquidity import max_liquidity_for_amounts
from univ3math.nearest_usable_tick import nearest_usable_tick
from univ3math.pool_address import compute_pool_address
from univ3math.tick_list import Tick, TickList

assert encode_sqrt_ratio_x96(1, 1) == Q96
assert nearest_usable_tick(5, 10) == 10

liquidity = max_liquidity_for_amounts(
    encode_sqrt_ratio_x96(1, 1),
    encode_sqrt_ratio_x96(100, 110),
    encode_sqrt_ratio_x96(110, 100),
    100,
    200,
    False,
)
assert liquidity == 2148

ticks = TickList([Tick(-10, 5, 5), Tick(10, 5, -5)])
ticks.validate_list(1)
assert ticks.next_initialized_tick(0, True).index == -10

address = compute_pool_address(
    "0x1111111111111111111111111111111111111111",
    "0xA0b86991c6218b36c1d19D4a2e9Eb0cE3606eB48",
    "0x6B175474E89094C44Da98b954EedeAC495271d0F",
    500,
)
assert address == "0x90B1b09A9715CaDbFD9331b3A7652B24BfBEfD32"
```

All values are plain Python `int`s; addresses are hex strings or 20-byte
`bytes`.

## What this package does not do

It does not convert between ticks and sqrt prices, it has no token or price
types for turning a tick into a human-readable price, and it does not simulate
a swap across ticks. It offers the arithmetic building blocks above, but no
swap step, no swap loop and no tick-to-price conversion.