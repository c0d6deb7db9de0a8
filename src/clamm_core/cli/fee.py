import click
from pydantic import TypeAdapter

from clamm_core.cli import cli
from clamm_core.config import settings
from clamm_core.decimals import FixedPoint, Liquidity, TokenAmount
from clamm_core.exceptions import ClammError
from clamm_core.pool import Pool


@cli.group()
def fee() -> None:
    """
    Fee commands
    """


@fee.command("split")
@click.option("--amount", type=click.IntRange(min=0), required=True, help="Fee amount, raw units")
@click.option(
    "--protocol-fee",
    type=str,
    default=None,
    help="Protocol fee fraction, e.g. 0.2 (defaults to the configured value)",
)
@click.option("--liquidity", type=str, required=True, help="Active pool liquidity")
@click.option("--ref", "ref_percentage", type=str, default="0", help="Referral fraction")
@click.option(
    "--token",
    type=click.Choice(["x", "y"], case_sensitive=False),
    default="x",
    help="Token the fee is denominated in",
)
def fee_split(
    amount: int,
    protocol_fee: str | None,
    liquidity: str,
    ref_percentage: str,
    token: str,
) -> None:
    """
    Show how a trading fee is divided between the protocol, a referrer and liquidity providers.
    """

    in_x = token.lower() == "x"
    try:
        pool = Pool(
            protocol_fee=(
                FixedPoint.parse(protocol_fee)
                if protocol_fee is not None
                else settings.pool.default_protocol_fee
            ),
            liquidity=Liquidity.parse(liquidity),
        )
        fee_amount = TokenAmount(amount)
        ref = FixedPoint.parse(ref_percentage)
        split = pool.split_fee(fee_amount, ref)
        recorded = pool.records_fee(split)
        pool.add_fee(fee_amount, ref, in_x=in_x)
    except ClammError as exc:
        raise click.ClickException(exc.message or str(exc)) from exc

    click.echo(
        TypeAdapter(dict).dump_json(
            {
                "amount": amount,
                "protocol_fee": split.protocol_fee.v,
                "referral_fee": split.referral_fee.v,
                "pool_fee": split.pool_fee.v,
                "fee_growth": str(pool.fee_growth_global_x if in_x else pool.fee_growth_global_y),
                "recorded": recorded,
            },
            indent=2,
        ),
    )
