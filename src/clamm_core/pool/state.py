import dataclasses

from clamm_core.decimals import FeeGrowth, FixedPoint, Liquidity, Price, TokenAmount
from clamm_core.types.aliases import Pubkey, TickIndex, Timestamp


@dataclasses.dataclass(slots=True, frozen=True, kw_only=True)
class PoolState:
    """
    An immutable snapshot of every field of a `Pool`, in record order.
    """

    token_x: Pubkey
    token_y: Pubkey
    token_x_reserve: Pubkey
    token_y_reserve: Pubkey
    position_iterator: int
    tick_spacing: int
    fee: FixedPoint
    protocol_fee: FixedPoint
    liquidity: Liquidity
    sqrt_price: Price
    current_tick_index: TickIndex
    tickmap: Pubkey
    fee_growth_global_x: FeeGrowth
    fee_growth_global_y: FeeGrowth
    fee_protocol_token_x: int
    fee_protocol_token_y: int
    seconds_per_liquidity_global: FixedPoint
    start_timestamp: Timestamp
    last_timestamp: Timestamp
    fee_receiver: Pubkey
    oracle_address: Pubkey
    oracle_initialized: bool
    bump: int


@dataclasses.dataclass(slots=True, frozen=True, kw_only=True)
class FeeSplit:
    """
    The division of a trading fee. The three shares always sum to the collected amount.
    """

    protocol_fee: TokenAmount
    referral_fee: TokenAmount
    pool_fee: TokenAmount
