import tomllib
from pathlib import Path
from typing import Annotated, Literal

import tomlkit
from pydantic import BaseModel, ConfigDict, Field, PlainSerializer, PlainValidator
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

from clamm_core.constants import MAX_UINT16
from clamm_core.decimals import FixedPoint
from clamm_core.exceptions import InexactDecimal
from clamm_core.logging import logger, set_log_level

CONFIG_DIR = Path.home() / ".config" / "clamm_core"
CONFIG_FILE = CONFIG_DIR / "config.toml"


def _validate_fee_fraction(value: object) -> FixedPoint:
    """
    Accept a FixedPoint or a decimal literal. The protocol fee is a fraction of the trading fee, so
    it must be below 1.
    """

    if isinstance(value, FixedPoint):
        fee = value
    else:
        try:
            fee = FixedPoint.parse(str(value))
        except InexactDecimal as exc:
            raise ValueError(exc.message) from None
    if fee >= FixedPoint.one():
        raise ValueError(f"protocol fee {fee} must be less than 1")
    return fee


class PoolSettings(BaseModel):
    model_config = ConfigDict(arbitrary_types_allowed=True)

    # Stored as a decimal string, e.g. "0.01"
    default_protocol_fee: Annotated[
        FixedPoint,
        PlainValidator(_validate_fee_fraction),
        PlainSerializer(str, return_type=str),
    ] = FixedPoint.from_scale(1, 2)
    default_tick_spacing: int = Field(default=10, gt=0, le=MAX_UINT16)


class LoggingSettings(BaseModel):
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="CLAMM_", env_nested_delimiter="__")

    pool: PoolSettings = PoolSettings()
    logging: LoggingSettings = LoggingSettings()

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        # Environment variables take priority over values read from the config file
        return env_settings, init_settings


def load_config_from_file(config_path: Path) -> Settings:
    return Settings(
        **tomllib.loads(
            config_path.read_text(),
        ),
    )


def save_config_to_file(config: Settings, config_path: Path = CONFIG_FILE) -> None:
    config_path.parent.mkdir(parents=True, exist_ok=True)
    config_path.write_text(
        tomlkit.dumps(
            config.model_dump(),
        ),
    )
    logger.info(f"Saved configuration to {config_path}.")


if CONFIG_FILE.exists():
    settings = load_config_from_file(CONFIG_FILE)
else:
    settings = Settings()

set_log_level(settings.logging.level)
