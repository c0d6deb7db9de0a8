from .config import settings
from .version import __version__

# isort: split

from .decimals import FeeGrowth, FixedPoint, Liquidity, Price, TokenAmount
from .exceptions import ClammError, InvalidPoolLiquidity, InvariantViolation
from .functions import get_pubkey
from .logging import logger
from .pool import Pool, PoolState, decode_pool, encode_pool

__all__ = (
    "ClammError",
    "FeeGrowth",
    "FixedPoint",
    "InvalidPoolLiquidity",
    "InvariantViolation",
    "Liquidity",
    "Pool",
    "PoolState",
    "Price",
    "TokenAmount",
    "__version__",
    "decode_pool",
    "encode_pool",
    "get_pubkey",
    "logger",
    "settings",
)
