"""
Packed binary layout of the pool record.

Fields are stored in declaration order with no implicit padding, integers little-endian. Decimal
fields are stored as their raw scaled integer. The layout is fixed-size and carries no length
prefix or type tags, so field order alone defines each byte offset.
"""

import dataclasses
from typing import Literal

from hexbytes import HexBytes

from clamm_core.constants import PUBKEY_LENGTH
from clamm_core.decimals import BaseDecimal, FeeGrowth, FixedPoint, Liquidity, Price
from clamm_core.exceptions import LayoutError
from clamm_core.pool.pool import Pool

type FieldKind = Literal["pubkey", "uint", "int", "bool", "decimal"]


@dataclasses.dataclass(slots=True, frozen=True)
class LayoutField:
    name: str
    kind: FieldKind
    size: int
    decimal_type: type[BaseDecimal] | None = None

    @property
    def max_value(self) -> int:
        match self.kind:
            case "uint" | "decimal":
                return 2 ** (8 * self.size) - 1
            case "int":
                return 2 ** (8 * self.size - 1) - 1
            case _:
                raise LayoutError(message=f"Field {self.name} is not an integer field.")


POOL_LAYOUT: tuple[LayoutField, ...] = (
    LayoutField("token_x", "pubkey", PUBKEY_LENGTH),
    LayoutField("token_y", "pubkey", PUBKEY_LENGTH),
    LayoutField("token_x_reserve", "pubkey", PUBKEY_LENGTH),
    LayoutField("token_y_reserve", "pubkey", PUBKEY_LENGTH),
    LayoutField("position_iterator", "uint", 16),
    LayoutField("tick_spacing", "uint", 2),
    LayoutField("fee", "decimal", 16, FixedPoint),
    LayoutField("protocol_fee", "decimal", 16, FixedPoint),
    LayoutField("liquidity", "decimal", 16, Liquidity),
    LayoutField("sqrt_price", "decimal", 16, Price),
    LayoutField("current_tick_index", "int", 4),
    LayoutField("tickmap", "pubkey", PUBKEY_LENGTH),
    LayoutField("fee_growth_global_x", "decimal", 16, FeeGrowth),
    LayoutField("fee_growth_global_y", "decimal", 16, FeeGrowth),
    LayoutField("fee_protocol_token_x", "uint", 8),
    LayoutField("fee_protocol_token_y", "uint", 8),
    LayoutField("seconds_per_liquidity_global", "decimal", 16, FixedPoint),
    LayoutField("start_timestamp", "uint", 8),
    LayoutField("last_timestamp", "uint", 8),
    LayoutField("fee_receiver", "pubkey", PUBKEY_LENGTH),
    LayoutField("oracle_address", "pubkey", PUBKEY_LENGTH),
    LayoutField("oracle_initialized", "bool", 1),
    LayoutField("bump", "uint", 1),
)

POOL_RECORD_SIZE = sum(field.size for field in POOL_LAYOUT)

assert POOL_RECORD_SIZE == 392
assert {field.name for field in POOL_LAYOUT} == {field.name for field in dataclasses.fields(Pool)}


def field_offsets() -> dict[str, int]:
    """
    Byte offset of each field within the packed record.
    """

    offsets: dict[str, int] = {}
    offset = 0
    for field in POOL_LAYOUT:
        offsets[field.name] = offset
        offset += field.size
    return offsets


def _encode_field(field: LayoutField, value: object) -> bytes:
    match field.kind:
        case "pubkey":
            if not isinstance(value, bytes) or len(value) != field.size:
                raise LayoutError(message=f"{field.name} must be a {field.size} byte address.")
            return bytes(value)
        case "bool":
            if not isinstance(value, bool):
                raise LayoutError(message=f"{field.name} must be a bool.")
            return b"\x01" if value else b"\x00"
        case "decimal":
            if type(value) is not field.decimal_type:
                raise LayoutError(
                    message=f"{field.name} must be {field.decimal_type.__name__}, got {type(value).__name__}."  # type: ignore[union-attr]  # noqa: E501
                )
            return value.v.to_bytes(field.size, "little")  # type: ignore[attr-defined]
        case "uint":
            if not isinstance(value, int) or not (0 <= value <= field.max_value):
                raise LayoutError(message=f"{field.name}={value!r} does not fit in u{8 * field.size}.")
            return value.to_bytes(field.size, "little")
        case "int":
            if not isinstance(value, int) or not (-field.max_value - 1 <= value <= field.max_value):
                raise LayoutError(message=f"{field.name}={value!r} does not fit in i{8 * field.size}.")
            return value.to_bytes(field.size, "little", signed=True)


def _decode_field(field: LayoutField, chunk: bytes) -> object:
    match field.kind:
        case "pubkey":
            return HexBytes(chunk)
        case "bool":
            if chunk not in (b"\x00", b"\x01"):
                raise LayoutError(message=f"{field.name} holds invalid bool byte {chunk.hex()}.")
            return chunk == b"\x01"
        case "decimal":
            assert field.decimal_type is not None
            return field.decimal_type(int.from_bytes(chunk, "little"))
        case "uint":
            return int.from_bytes(chunk, "little")
        case "int":
            return int.from_bytes(chunk, "little", signed=True)


def encode_pool(pool: Pool) -> bytes:
    """
    Serialize a pool to its packed record.
    """

    return b"".join(
        _encode_field(field, getattr(pool, field.name)) for field in POOL_LAYOUT
    )


def decode_pool(data: bytes) -> Pool:
    """
    Deserialize a packed record into a new `Pool`.
    """

    if len(data) != POOL_RECORD_SIZE:
        raise LayoutError(
            message=f"Pool record must be {POOL_RECORD_SIZE} bytes, got {len(data)}."
        )

    values: dict[str, object] = {}
    offset = 0
    for field in POOL_LAYOUT:
        values[field.name] = _decode_field(field, data[offset : offset + field.size])
        offset += field.size

    return Pool(**values)  # type: ignore[arg-type]
