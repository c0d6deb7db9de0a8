"""
Scaled-integer decimal base type.

Every concrete decimal stores a non-negative integer `v` representing `v * 10**-SCALE`, bounded by
the unsigned width of the persisted field. Arithmetic is only defined between values of the same
concrete type, so a `Liquidity` can never be added to a `Price`. Python integers do not overflow,
so each result is checked against the type's width on construction and an out-of-range value
raises an `InvariantViolation` instead of wrapping.
"""

import dataclasses
from fractions import Fraction
from typing import ClassVar, Self

from clamm_core.decimals.rounding import Rounding
from clamm_core.exceptions.arithmetic import ArithmeticOverflow, ArithmeticUnderflow
from clamm_core.exceptions.decimals import DecimalTypeError, InexactDecimal


def div_rounding(numerator: int, denominator: int, rounding: Rounding) -> int:
    """
    Divide two non-negative integers, truncating or rounding up the quotient.
    """

    # operands are non-negative, so floor division truncates toward zero
    quotient, remainder = divmod(numerator, denominator)
    if rounding is Rounding.CEIL and remainder:
        quotient += 1
    return quotient


def rescale(value: int, from_scale: int, to_scale: int, rounding: Rounding) -> int:
    """
    Convert a raw value from one decimal scale to another. Widening is exact, narrowing truncates or
    rounds up according to `rounding`.
    """

    if to_scale >= from_scale:
        return value * 10 ** (to_scale - from_scale)
    return div_rounding(value, 10 ** (from_scale - to_scale), rounding)


@dataclasses.dataclass(slots=True, frozen=True, order=True)
class BaseDecimal:
    v: int

    SCALE: ClassVar[int]
    MAX_VALUE: ClassVar[int]

    def __post_init__(self) -> None:
        if isinstance(self.v, bool) or not isinstance(self.v, int):
            raise DecimalTypeError(expected="int", received=type(self.v).__name__)
        if self.v < 0:
            raise ArithmeticUnderflow(type_name=type(self).__name__, value=self.v)
        if self.v > self.MAX_VALUE:
            raise ArithmeticOverflow(type_name=type(self).__name__, value=self.v)

    def __str__(self) -> str:
        if self.SCALE == 0:
            return str(self.v)
        whole, fraction = divmod(self.v, 10**self.SCALE)
        fraction_digits = str(fraction).zfill(self.SCALE).rstrip("0")
        return f"{whole}.{fraction_digits}" if fraction_digits else str(whole)

    # ------------- constructors -------------

    @classmethod
    def zero(cls) -> Self:
        return cls(0)

    @classmethod
    def one(cls) -> Self:
        return cls(10**cls.SCALE)

    @classmethod
    def from_integer(cls, n: int) -> Self:
        """
        Exact representation of the integer `n`.
        """

        return cls(n * 10**cls.SCALE)

    @classmethod
    def from_scale(cls, mantissa: int, exponent: int) -> Self:
        """
        Build the value `mantissa * 10**-exponent`, e.g. `FixedPoint.from_scale(2, 1)` is 0.2.

        Digits beyond the type's scale are truncated.
        """

        return cls(rescale(mantissa, exponent, cls.SCALE, Rounding.FLOOR))

    @classmethod
    def from_decimal(cls, other: "BaseDecimal") -> Self:
        """
        Convert a decimal of another unit to this type, truncating toward zero.
        """

        return cls(rescale(other.v, other.SCALE, cls.SCALE, Rounding.FLOOR))

    @classmethod
    def from_decimal_up(cls, other: "BaseDecimal") -> Self:
        """
        Convert a decimal of another unit to this type, rounding up any truncated digits.
        """

        return cls(rescale(other.v, other.SCALE, cls.SCALE, Rounding.CEIL))

    @classmethod
    def parse(cls, text: str) -> Self:
        """
        Parse a decimal literal such as "0.01". The literal must be exactly representable.
        """

        try:
            scaled = Fraction(text) * 10**cls.SCALE
        except (ValueError, ZeroDivisionError):
            raise InexactDecimal(text=text, type_name=cls.__name__) from None
        if scaled.denominator != 1:
            raise InexactDecimal(text=text, type_name=cls.__name__)
        return cls(scaled.numerator)

    # ------------- predicates -------------

    def is_zero(self) -> bool:
        return self.v == 0

    # ------------- arithmetic -------------

    def _check_same_type(self, other: object) -> None:
        if type(other) is not type(self):
            raise DecimalTypeError(expected=type(self).__name__, received=type(other).__name__)

    def __add__(self, other: Self) -> Self:
        self._check_same_type(other)
        return type(self)(self.v + other.v)

    def __sub__(self, other: Self) -> Self:
        self._check_same_type(other)
        return type(self)(self.v - other.v)

    def unchecked_add(self, other: Self) -> Self:
        """
        Accumulator addition. Python integers cannot wrap, so this has the same checked behavior as
        `+` and an overflowing accumulator raises `ArithmeticOverflow`.
        """

        return self + other

    def big_mul(self, rhs: "BaseDecimal") -> Self:
        """
        Multiply by a decimal of any unit, keeping this value's unit. The full-width product is
        narrowed back to this scale by truncation.
        """

        return type(self)(div_rounding(self.v * rhs.v, 10**rhs.SCALE, Rounding.FLOOR))

    def big_mul_up(self, rhs: "BaseDecimal") -> Self:
        """
        Multiply by a decimal of any unit, keeping this value's unit. The full-width product is
        narrowed back to this scale, rounding up any truncated digits.
        """

        return type(self)(div_rounding(self.v * rhs.v, 10**rhs.SCALE, Rounding.CEIL))
