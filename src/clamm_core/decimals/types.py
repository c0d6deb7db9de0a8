from clamm_core.constants import MAX_UINT64, MAX_UINT128
from clamm_core.decimals.base import BaseDecimal, div_rounding
from clamm_core.decimals.rounding import Rounding
from clamm_core.exceptions.arithmetic import DivisionByZero
from clamm_core.exceptions.decimals import DecimalTypeError


class TokenAmount(BaseDecimal):
    """
    Raw integer amount of a token, in its smallest unit.
    """

    __slots__ = ()
    SCALE = 0
    MAX_VALUE = MAX_UINT64


class Liquidity(BaseDecimal):
    __slots__ = ()
    SCALE = 6
    MAX_VALUE = MAX_UINT128


class Price(BaseDecimal):
    """
    Square root of the price of token X denominated in token Y.
    """

    __slots__ = ()
    SCALE = 24
    MAX_VALUE = MAX_UINT128


class FixedPoint(BaseDecimal):
    """
    General purpose fraction, used for fee rates and the seconds-per-liquidity accumulator.
    """

    __slots__ = ()
    SCALE = 12
    MAX_VALUE = MAX_UINT128

    def __truediv__(self, liquidity: Liquidity) -> "FixedPoint":
        """
        Divide by a liquidity value, truncating toward zero.
        """

        if not isinstance(liquidity, Liquidity):
            raise DecimalTypeError(expected="Liquidity", received=type(liquidity).__name__)
        if liquidity.is_zero():
            raise DivisionByZero(divisor="liquidity")
        return FixedPoint(div_rounding(self.v * 10**Liquidity.SCALE, liquidity.v, Rounding.FLOOR))


class FeeGrowth(BaseDecimal):
    """
    Cumulative fee earned per unit of liquidity.
    """

    __slots__ = ()
    SCALE = 28
    MAX_VALUE = MAX_UINT128

    @classmethod
    def from_fee(cls, liquidity: Liquidity, fee: TokenAmount) -> "FeeGrowth":
        """
        The fee growth produced by distributing `fee` across `liquidity`, rounded down so that
        liquidity providers are never credited more than was collected.
        """

        if not isinstance(liquidity, Liquidity):
            raise DecimalTypeError(expected="Liquidity", received=type(liquidity).__name__)
        if not isinstance(fee, TokenAmount):
            raise DecimalTypeError(expected="TokenAmount", received=type(fee).__name__)
        if liquidity.is_zero():
            raise DivisionByZero(divisor="liquidity")

        # fee has scale 0, so scaling by both units leaves the quotient at the fee growth scale
        return cls(
            div_rounding(
                fee.v * 10 ** (cls.SCALE + Liquidity.SCALE),
                liquidity.v,
                Rounding.FLOOR,
            )
        )
