__all__ = (
    "MAX_INT32",
    "MAX_UINT8",
    "MAX_UINT16",
    "MAX_UINT64",
    "MAX_UINT128",
    "MIN_INT32",
    "PUBKEY_LENGTH",
    "ZERO_PUBKEY",
)

import typing

from hexbytes import HexBytes


def _max_uint(bits: int) -> int:
    return typing.cast("int", 2**bits - 1)


def _min_int(bits: int) -> int:
    return typing.cast("int", -(2 ** (bits - 1)))


def _max_int(bits: int) -> int:
    return typing.cast("int", (2 ** (bits - 1)) - 1)


MIN_INT32 = _min_int(32)
MAX_INT32 = _max_int(32)

MAX_UINT8 = _max_uint(8)
MAX_UINT16 = _max_uint(16)
MAX_UINT64 = _max_uint(64)
MAX_UINT128 = _max_uint(128)

# Account addresses are opaque 32 byte public keys
PUBKEY_LENGTH = 32
ZERO_PUBKEY = HexBytes(bytes(PUBKEY_LENGTH))
