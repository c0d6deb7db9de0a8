from hexbytes import HexBytes

from clamm_core.constants import PUBKEY_LENGTH
from clamm_core.exceptions import ClammValueError
from clamm_core.types.aliases import Pubkey


def get_pubkey(address: bytes | str) -> Pubkey:
    """
    Normalize a 32 byte account address given as raw bytes or a hex string (with or without the
    0x prefix).
    """

    try:
        pubkey = HexBytes(address)
    except ValueError:
        raise ClammValueError(message=f"{address!r} is not a valid hex address.") from None

    if len(pubkey) != PUBKEY_LENGTH:
        raise ClammValueError(
            message=f"Address must be {PUBKEY_LENGTH} bytes, got {len(pubkey)}."
        )
    return pubkey
