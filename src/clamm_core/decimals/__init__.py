from clamm_core.decimals.base import BaseDecimal, div_rounding, rescale
from clamm_core.decimals.rounding import Rounding
from clamm_core.decimals.types import FeeGrowth, FixedPoint, Liquidity, Price, TokenAmount

__all__ = (
    "BaseDecimal",
    "FeeGrowth",
    "FixedPoint",
    "Liquidity",
    "Price",
    "Rounding",
    "TokenAmount",
    "div_rounding",
    "rescale",
)
