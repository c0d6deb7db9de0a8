"""
Exceptions defined here are validated domain errors raised by the `Pool` state machine. They are
raised before any field is mutated, so the pool is unchanged when one is caught.
"""

from typing import TYPE_CHECKING, Any

from clamm_core.exceptions.base import ClammError

if TYPE_CHECKING:
    from clamm_core.decimals import Liquidity


class PoolError(ClammError):
    """
    Exception raised inside pool helpers.
    """


class InvalidPoolLiquidity(PoolError):
    """
    Raised when a liquidity decrease exceeds the liquidity currently held by the pool.
    """

    def __init__(self, liquidity: "Liquidity", liquidity_delta: "Liquidity") -> None:
        self.liquidity = liquidity
        self.liquidity_delta = liquidity_delta
        super().__init__(
            message=f"Cannot remove {liquidity_delta} liquidity from a pool holding {liquidity}."
        )

    def __reduce__(self) -> tuple[Any, ...]:
        # Pickling will raise an exception if a reduction method is not defined
        return self.__class__, (self.liquidity, self.liquidity_delta)


class InvalidPoolConfiguration(PoolError):
    """
    Raised by `Pool.create` when the fee tier, tick spacing or token pair is invalid.
    """
