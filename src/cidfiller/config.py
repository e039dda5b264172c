"""Runtime configuration, read from a .env file and the process environment."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional, Union

from dotenv import load_dotenv
from pydantic import ValidationError

from cidfiller.errors import ConfigError
from cidfiller.models import LookupConfig

logger = logging.getLogger(__name__)

# Environment variable -> LookupConfig field, in the order they are checked.
SETTINGS = {
    "DB_PATH": "db_path",
    "TABLE_NAME": "table_name",
    "INPUT_COLUMN": "input_column",
    "OUTPUT_COLUMN": "output_column",
}

_SETTING_FOR_FIELD = {field: setting for setting, field in SETTINGS.items()}


def _load_env_file(env_file: Optional[Union[str, Path]]) -> None:
    """Copy the settings file into os.environ without overriding existing values."""
    # Only the working directory is searched, never its parents.
    path = Path(env_file) if env_file is not None else Path.cwd() / ".env"
    if not path.is_file():
        logger.warning(
            "Settings file %s not found, using the process environment only", path
        )
        return
    try:
        load_dotenv(path, override=False)
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning("Could not read settings file %s: %s", path, exc)


def load(env_file: Optional[Union[str, Path]] = None) -> LookupConfig:
    """Build the lookup configuration.

    Settings are checked in the order of SETTINGS and the first missing one
    raises ConfigError. Identifier-shaped settings are validated too.
    """
    _load_env_file(env_file)

    values = {}
    for setting, field in SETTINGS.items():
        value = os.environ.get(setting, "")
        if not value:
            raise ConfigError(setting, f"{setting} is required in .env")
        values[field] = value

    try:
        return LookupConfig(**values)
    except ValidationError as exc:
        error = exc.errors()[0]
        setting = _SETTING_FOR_FIELD[error["loc"][0]]
        reason = error.get("ctx", {}).get("error") or error["msg"]
        raise ConfigError(setting, f"{setting} is invalid: {reason}") from exc
