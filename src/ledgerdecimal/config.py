import tomllib
from pathlib import Path

import tomlkit
from pydantic_settings import BaseSettings, SettingsConfigDict

from ledgerdecimal.constants import DEFAULT_DECIMAL_PRECISION, MAX_NUMBER_DIGITS
from ledgerdecimal.exceptions.config import ConfigFileExists
from ledgerdecimal.logging import logger
from ledgerdecimal.validation.decimal_values import DecimalsSetting, DigitBudgetSetting

CONFIG_DIR = Path.home() / ".config" / "ledgerdecimal"
CONFIG_FILE = CONFIG_DIR / "config.toml"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="LEDGERDECIMAL_")

    # Precision used by the command line tools when none is given
    default_decimals: DecimalsSetting = DEFAULT_DECIMAL_PRECISION

    # Formatted decimals up to this many characters are returned as native numbers
    max_number_digits: DigitBudgetSetting = MAX_NUMBER_DIGITS


def load_config_from_file(config_path: Path) -> Settings:
    return Settings.model_validate(
        tomllib.loads(
            config_path.read_text(),
        ),
    )


def save_config_to_file(
    config: Settings,
    config_path: Path = CONFIG_FILE,
    *,
    overwrite: bool = False,
) -> None:
    if config_path.exists() and not overwrite:
        raise ConfigFileExists(path=config_path)

    config_path.parent.mkdir(parents=True, exist_ok=True)
    config_path.write_text(
        tomlkit.dumps(
            config.model_dump(),
        ),
    )
    logger.info(f"Created a configuration file at {config_path}.")


if CONFIG_FILE.exists():
    settings = load_config_from_file(CONFIG_FILE)
    logger.debug(f"Loaded configuration from {CONFIG_FILE}.")
else:
    settings = Settings()
