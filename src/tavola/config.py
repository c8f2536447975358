"""Configuration management for tavola."""

import logging
import os
from pathlib import Path
from typing import Literal, Optional, Union

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel

# Settings field -> environment variable
ENV_VARS = {
    "value_render_option": "TAVOLA_VALUE_RENDER_OPTION",
    "value_input_option": "TAVOLA_VALUE_INPUT_OPTION",
    "log_level": "TAVOLA_LOG_LEVEL",
    "service_account_file": "TAVOLA_SERVICE_ACCOUNT_FILE",
}


class Settings(BaseModel):
    """Library settings."""

    # How values are rendered by Table.get_values
    value_render_option: Literal["FORMATTED_VALUE", "UNFORMATTED_VALUE", "FORMULA"] = "FORMATTED_VALUE"

    # How values written by Table.set_values are interpreted
    value_input_option: Literal["RAW", "USER_ENTERED"] = "USER_ENTERED"

    log_level: str = "WARNING"

    # Service account key for the example scripts; tavola itself takes an authenticated client
    service_account_file: Optional[Path] = None

    @staticmethod
    def from_env(dotenv_path: Optional[Union[str, Path]] = None) -> "Settings":
        """Load settings from the environment, after reading an optional dotenv file."""
        load_dotenv(dotenv_path or find_dotenv(usecwd=True))
        values = {
            name: os.environ[var]
            for name, var in ENV_VARS.items()
            if os.environ.get(var)
        }
        return Settings.model_validate(values)


def configure_logging(settings: Optional[Settings] = None) -> None:
    """Send tavola's log records to stderr at the configured level."""
    settings = settings or Settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
