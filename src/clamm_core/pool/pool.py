import dataclasses
from typing import Self

from clamm_core.config import settings
from clamm_core.constants import (
    MAX_INT32,
    MAX_UINT8,
    MAX_UINT16,
    MAX_UINT64,
    MAX_UINT128,
    MIN_INT32,
    ZERO_PUBKEY,
)
from clamm_core.decimals import FeeGrowth, FixedPoint, Liquidity, Price, TokenAmount
from clamm_core.exceptions import (
    ArithmeticOverflow,
    DecimalTypeError,
    InvalidPoolConfiguration,
    InvalidPoolLiquidity,
    TimestampRegression,
)
from clamm_core.functions import get_pubkey
from clamm_core.logging import logger
from clamm_core.pool.state import FeeSplit, PoolState
from clamm_core.types.aliases import Pubkey, TickIndex, Timestamp


def _checked_add_u64(a: int, b: int) -> int:
    result = a + b
    if result > MAX_UINT64:
        raise ArithmeticOverflow(type_name="u64", value=result)
    return result


@dataclasses.dataclass(slots=True, kw_only=True)
class Pool:
    """
    The accounting record of a single trading pair.

    A pool is owned by one caller at a time: every method is a synchronous state transition with no
    I/O, and the hosting environment is responsible for serializing calls against the same
    instance. Pools share no mutable state, so independent pools may be used concurrently.

    Field order matches the packed binary layout in `clamm_core.pool.layout`.
    """

    token_x: Pubkey = ZERO_PUBKEY
    token_y: Pubkey = ZERO_PUBKEY
    token_x_reserve: Pubkey = ZERO_PUBKEY
    token_y_reserve: Pubkey = ZERO_PUBKEY
    position_iterator: int = 0
    tick_spacing: int = 0
    fee: FixedPoint = FixedPoint(0)
    protocol_fee: FixedPoint = FixedPoint(0)
    liquidity: Liquidity = Liquidity(0)
    sqrt_price: Price = Price(0)
    current_tick_index: TickIndex = 0  # nearest tick at or below the current price
    tickmap: Pubkey = ZERO_PUBKEY
    fee_growth_global_x: FeeGrowth = FeeGrowth(0)
    fee_growth_global_y: FeeGrowth = FeeGrowth(0)
    fee_protocol_token_x: int = 0
    fee_protocol_token_y: int = 0
    seconds_per_liquidity_global: FixedPoint = FixedPoint(0)
    start_timestamp: Timestamp = 0
    last_timestamp: Timestamp = 0
    fee_receiver: Pubkey = ZERO_PUBKEY
    oracle_address: Pubkey = ZERO_PUBKEY
    oracle_initialized: bool = False
    bump: int = 0

    @classmethod
    def create(
        cls,
        *,
        token_x: bytes | str,
        token_y: bytes | str,
        token_x_reserve: bytes | str,
        token_y_reserve: bytes | str,
        tickmap: bytes | str,
        fee_receiver: bytes | str,
        fee: FixedPoint,
        protocol_fee: FixedPoint,
        timestamp: Timestamp,
        tick_spacing: int | None = None,
        sqrt_price: Price | None = None,
        current_tick_index: TickIndex = 0,
        bump: int = 0,
    ) -> Self:
        """
        Register a new trading pair. All accumulators start at zero and both timestamps are set to
        `timestamp`. The square root price defaults to 1.0 at tick 0. The tick spacing defaults to
        the configured `pool.default_tick_spacing`.
        """

        if tick_spacing is None:
            tick_spacing = settings.pool.default_tick_spacing

        for name, rate in (("fee", fee), ("protocol_fee", protocol_fee)):
            if not isinstance(rate, FixedPoint):
                raise DecimalTypeError(expected="FixedPoint", received=type(rate).__name__)
            if rate >= FixedPoint.one():
                raise InvalidPoolConfiguration(message=f"{name} {rate} must be less than 1.")
        if not (0 < tick_spacing <= MAX_UINT16):
            raise InvalidPoolConfiguration(message=f"Invalid tick spacing {tick_spacing}.")
        if not (MIN_INT32 <= current_tick_index <= MAX_INT32):
            raise InvalidPoolConfiguration(message=f"Invalid initial tick {current_tick_index}.")
        if current_tick_index % tick_spacing != 0:
            raise InvalidPoolConfiguration(
                message=f"Initial tick {current_tick_index} is not a multiple of the tick spacing {tick_spacing}."  # noqa: E501
            )

        token_x = get_pubkey(token_x)
        token_y = get_pubkey(token_y)
        if token_x == token_y:
            raise InvalidPoolConfiguration(message="A pool requires two different tokens.")
        if not (0 <= bump <= MAX_UINT8):
            raise InvalidPoolConfiguration(message=f"Invalid bump {bump}.")

        pool = cls(
            token_x=token_x,
            token_y=token_y,
            token_x_reserve=get_pubkey(token_x_reserve),
            token_y_reserve=get_pubkey(token_y_reserve),
            tick_spacing=tick_spacing,
            fee=fee,
            protocol_fee=protocol_fee,
            sqrt_price=sqrt_price if sqrt_price is not None else Price.from_integer(1),
            current_tick_index=current_tick_index,
            tickmap=get_pubkey(tickmap),
            start_timestamp=timestamp,
            last_timestamp=timestamp,
            fee_receiver=get_pubkey(fee_receiver),
            bump=bump,
        )
        logger.debug(
            f"Created pool {token_x.to_0x_hex()}/{token_y.to_0x_hex()} (fee={fee}, protocol fee={protocol_fee}, tick spacing={tick_spacing})"  # noqa: E501
        )
        return pool

    @property
    def state(self) -> PoolState:
        return PoolState(
            **{field.name: getattr(self, field.name) for field in dataclasses.fields(self)}
        )

    def split_fee(self, amount: TokenAmount, ref_percentage: FixedPoint) -> FeeSplit:
        """
        Divide a trading fee into protocol, referral and liquidity provider shares without
        modifying the pool.

        The protocol share rounds up and the referral share rounds down, so the liquidity provider
        share absorbs the rounding and the three parts always sum to `amount`.
        """

        if not isinstance(amount, TokenAmount):
            raise DecimalTypeError(expected="TokenAmount", received=type(amount).__name__)
        if not isinstance(ref_percentage, FixedPoint):
            raise DecimalTypeError(expected="FixedPoint", received=type(ref_percentage).__name__)

        protocol_fee = TokenAmount.from_decimal_up(amount.big_mul_up(self.protocol_fee))
        ref_fee = (
            TokenAmount(0)
            if ref_percentage.is_zero()
            else TokenAmount.from_decimal(amount.big_mul(ref_percentage))
        )
        return FeeSplit(
            protocol_fee=protocol_fee,
            referral_fee=ref_fee,
            pool_fee=amount - protocol_fee - ref_fee,
        )

    def records_fee(self, split: FeeSplit) -> bool:
        """
        Whether `add_fee` records the protocol share and fee growth of `split`. A fee is only
        recorded when the liquidity provider share is non-zero and the pool holds liquidity.
        """

        return not split.pool_fee.is_zero() and not self.liquidity.is_zero()

    def add_fee(
        self,
        amount: TokenAmount,
        ref_percentage: FixedPoint,
        in_x: bool,
    ) -> TokenAmount:
        """
        Split a trading fee collected in token X (`in_x=True`) or token Y with `split_fee`,
        recording the protocol share and the liquidity provider fee growth. Returns the referral
        share, which the caller is responsible for transferring.

        If the liquidity provider share is zero, or the pool has no active liquidity, nothing is
        recorded and only the referral share is returned. The protocol and liquidity provider
        shares of that fee are not credited anywhere.
        """

        split = self.split_fee(amount, ref_percentage)
        protocol_fee, ref_fee, pool_fee = split.protocol_fee, split.referral_fee, split.pool_fee

        if not self.records_fee(split):
            if not (protocol_fee.is_zero() and pool_fee.is_zero()):
                logger.warning(
                    f"Fee {amount} not recorded (liquidity {self.liquidity}), dropping protocol share {protocol_fee} and pool share {pool_fee}"  # noqa: E501
                )
            return ref_fee

        fee_growth = FeeGrowth.from_fee(self.liquidity, pool_fee)

        # compute both updates before assigning either, so an overflow leaves the pool unchanged
        if in_x:
            fee_growth_global_x = self.fee_growth_global_x.unchecked_add(fee_growth)
            fee_protocol_token_x = _checked_add_u64(self.fee_protocol_token_x, protocol_fee.v)
            self.fee_growth_global_x = fee_growth_global_x
            self.fee_protocol_token_x = fee_protocol_token_x
        else:
            fee_growth_global_y = self.fee_growth_global_y.unchecked_add(fee_growth)
            fee_protocol_token_y = _checked_add_u64(self.fee_protocol_token_y, protocol_fee.v)
            self.fee_growth_global_y = fee_growth_global_y
            self.fee_protocol_token_y = fee_protocol_token_y

        logger.debug(
            f"Added fee {amount} in token {'X' if in_x else 'Y'}: protocol={protocol_fee}, referral={ref_fee}, pool={pool_fee}, fee growth +{fee_growth}"  # noqa: E501
        )
        return ref_fee

    def update_liquidity_safely(self, liquidity_delta: Liquidity, add: bool) -> None:
        """
        Add or remove active liquidity. Removing more liquidity than the pool holds raises
        `InvalidPoolLiquidity` and leaves the pool unchanged.
        """

        if not isinstance(liquidity_delta, Liquidity):
            raise DecimalTypeError(expected="Liquidity", received=type(liquidity_delta).__name__)

        # validate in decrease liquidity case
        if not add and self.liquidity < liquidity_delta:
            raise InvalidPoolLiquidity(liquidity=self.liquidity, liquidity_delta=liquidity_delta)

        self.liquidity = (
            self.liquidity + liquidity_delta if add else self.liquidity - liquidity_delta
        )
        logger.debug(
            f"Liquidity {'increased' if add else 'decreased'} by {liquidity_delta} to {self.liquidity}"  # noqa: E501
        )

    def update_seconds_per_liquidity_global(self, current_timestamp: Timestamp) -> None:
        """
        Accumulate the elapsed seconds divided by the active liquidity, then advance the last
        update timestamp to `current_timestamp`.

        The pool must hold non-zero liquidity. Callers gate on this, see
        `update_seconds_per_liquidity_if_active`; a zero liquidity pool raises `DivisionByZero`.
        """

        if current_timestamp < self.last_timestamp:
            raise TimestampRegression(
                last_timestamp=self.last_timestamp, current_timestamp=current_timestamp
            )

        self.seconds_per_liquidity_global = self.seconds_per_liquidity_global.unchecked_add(
            FixedPoint.from_integer(current_timestamp - self.last_timestamp) / self.liquidity
        )
        self.last_timestamp = current_timestamp

    def update_seconds_per_liquidity_if_active(self, current_timestamp: Timestamp) -> None:
        """
        Advance the time-weighted accumulator when the pool holds liquidity. An idle pool only
        records the new timestamp, so idle time never contributes to the accumulator.
        """

        if not self.liquidity.is_zero():
            self.update_seconds_per_liquidity_global(current_timestamp)
            return

        if current_timestamp < self.last_timestamp:
            raise TimestampRegression(
                last_timestamp=self.last_timestamp, current_timestamp=current_timestamp
            )
        self.last_timestamp = current_timestamp

    def set_oracle(self, address: bytes | str) -> None:
        self.oracle_address = get_pubkey(address)
        self.oracle_initialized = True

    def withdraw_protocol_fee(self) -> tuple[TokenAmount, TokenAmount]:
        """
        Return the accrued protocol fee for both tokens and reset the counters. The caller moves
        the tokens from the reserves to the fee receiver.
        """

        fee_x = TokenAmount(self.fee_protocol_token_x)
        fee_y = TokenAmount(self.fee_protocol_token_y)
        self.fee_protocol_token_x = 0
        self.fee_protocol_token_y = 0
        logger.debug(f"Withdrew protocol fee: x={fee_x}, y={fee_y}")
        return fee_x, fee_y

    def increment_position_iterator(self) -> int:
        """
        Return the next position index and advance the counter.
        """

        position_index = self.position_iterator
        if position_index + 1 > MAX_UINT128:
            raise ArithmeticOverflow(type_name="u128", value=position_index + 1)
        self.position_iterator = position_index + 1
        return position_index
