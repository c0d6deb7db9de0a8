from pathlib import Path

import click
import tomlkit
from pydantic import TypeAdapter

from clamm_core.cli import cli
from clamm_core.config import CONFIG_FILE, Settings, save_config_to_file, settings


@cli.group()
def config() -> None:
    """
    Configuration commands
    """


@config.command("show")
@click.option(
    "--json",
    "output_format",
    flag_value="json",
    type=str,
    help="Show configuration in JSON format",
)
@click.option(
    "--toml",
    "output_format",
    flag_value="toml",
    type=str,
    help="Show configuration in TOML format (default)",
    default=True,
)
def config_show(output_format: str) -> None:
    """
    Display the current configuration in JSON or TOML (default) format.
    """

    match output_format:
        case "json":
            click.echo(
                TypeAdapter(dict).dump_json(
                    settings.model_dump(),
                    indent=2,
                ),
            )
        case "toml":
            click.echo(
                tomlkit.dumps(
                    settings.model_dump(),
                ),
            )


@config.command("init")
@click.option(
    "--path",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=CONFIG_FILE,
    show_default=True,
    help="Location of the configuration file",
)
@click.option(
    "--force",
    is_flag=True,
    help="Skip confirmation prompt",
)
def config_init(config_path: Path, *, force: bool) -> None:
    """
    Write a configuration file populated with the default values.
    """

    if (
        config_path.exists()
        and not force
        and not click.confirm(
            f"A configuration file already exists at {config_path}. Do you want to overwrite it?",
            default=False,
        )
    ):
        raise click.Abort

    save_config_to_file(Settings(), config_path)
    click.echo(f"Wrote default configuration to {config_path}")
