from clamm_core.pool.layout import POOL_LAYOUT, POOL_RECORD_SIZE, decode_pool, encode_pool
from clamm_core.pool.pool import Pool
from clamm_core.pool.state import FeeSplit, PoolState

__all__ = (
    "POOL_LAYOUT",
    "POOL_RECORD_SIZE",
    "FeeSplit",
    "Pool",
    "PoolState",
    "decode_pool",
    "encode_pool",
)
