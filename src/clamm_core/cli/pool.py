from pathlib import Path

import click
from hexbytes import HexBytes
from pydantic import TypeAdapter

from clamm_core.cli import cli
from clamm_core.decimals import BaseDecimal
from clamm_core.exceptions import ClammError
from clamm_core.pool import POOL_RECORD_SIZE, PoolState, decode_pool


def _jsonable(value: object) -> object:
    match value:
        case HexBytes():
            return value.to_0x_hex()
        case BaseDecimal():
            return str(value)
        case _:
            return value


def pool_state_to_dict(state: PoolState) -> dict[str, object]:
    return {field: _jsonable(getattr(state, field)) for field in state.__dataclass_fields__}


@cli.group()
def pool() -> None:
    """
    Pool record commands
    """


@pool.command("decode")
@click.argument(
    "record_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
def pool_decode(record_file: Path) -> None:
    """
    Decode a packed pool record (raw bytes or hex text) and print it as JSON.
    """

    data = record_file.read_bytes()
    if len(data) != POOL_RECORD_SIZE:
        try:
            data = bytes(HexBytes(data.decode().strip()))
        except (UnicodeDecodeError, ValueError):
            raise click.ClickException(f"{record_file} is neither a raw nor a hex encoded pool record.") from None  # noqa: E501

    try:
        decoded = decode_pool(data)
    except ClammError as exc:
        raise click.ClickException(exc.message or str(exc)) from exc

    click.echo(
        TypeAdapter(dict).dump_json(
            pool_state_to_dict(decoded.state),
            indent=2,
        ),
    )
