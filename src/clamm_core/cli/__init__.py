import click

from clamm_core.version import __version__


@click.group()
@click.version_option(version=__version__)
def cli() -> None: ...


from . import config, fee, pool  # noqa: F401, E402
