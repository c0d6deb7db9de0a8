from clamm_core.exceptions.arithmetic import (
    ArithmeticOverflow,
    ArithmeticUnderflow,
    DivisionByZero,
    InvariantViolation,
    TimestampRegression,
)
from clamm_core.exceptions.base import ClammError, ClammTypeError, ClammValueError
from clamm_core.exceptions.decimals import DecimalTypeError, InexactDecimal
from clamm_core.exceptions.layout import LayoutError
from clamm_core.exceptions.pool import InvalidPoolConfiguration, InvalidPoolLiquidity, PoolError

from . import arithmetic, decimals, layout, pool

__all__ = (
    "ArithmeticOverflow",
    "ArithmeticUnderflow",
    "ClammError",
    "ClammTypeError",
    "ClammValueError",
    "DecimalTypeError",
    "DivisionByZero",
    "InexactDecimal",
    "InvalidPoolConfiguration",
    "InvalidPoolLiquidity",
    "InvariantViolation",
    "LayoutError",
    "PoolError",
    "TimestampRegression",
    "arithmetic",
    "decimals",
    "layout",
    "pool",
)
