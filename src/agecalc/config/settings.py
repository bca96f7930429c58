"""
Runtime Configuration.

Settings are read from a `.env` file and the process environment, with the
environment taking precedence. Values are validated by a Pydantic model so a
typo in a date or log level fails loudly instead of silently falling back.

Recognised variables:
- `AGECALC_REFERENCE_DATE`: an ISO date (YYYY-MM-DD) to use instead of today.
- `AGECALC_LOG_LEVEL`: DEBUG, INFO, WARNING, ERROR or CRITICAL.
"""

import os
from datetime import date
from pathlib import Path
from typing import Literal, Optional

from dotenv import dotenv_values
from pydantic import BaseModel, field_validator

# --- Configuration ---
ENV_PREFIX = "AGECALC_"
DEFAULT_ENV_FILE = Path(".env")

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseModel):
    """Validated runtime settings."""
    reference_date: Optional[date] = None
    log_level: LogLevel = "WARNING"

    @field_validator("reference_date", mode="before")
    @classmethod
    def _parse_iso_date(cls, value):
        if isinstance(value, str):
            if not value.strip():
                return None
            # ISO calendar dates only, never numeric timestamps.
            return date.fromisoformat(value.strip())
        return value

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalise_log_level(cls, value):
        if isinstance(value, str):
            return value.strip().upper()
        return value


def load_settings(env_file: Optional[Path] = None) -> Settings:
    """
    Builds `Settings` from a `.env` file overlaid by the environment.

    The `.env` file is parsed without touching `os.environ`. A missing file is
    not an error; it just contributes nothing.

    Raises:
        pydantic.ValidationError: If any value fails validation.
    """
    path = env_file if env_file is not None else DEFAULT_ENV_FILE
    file_values = dotenv_values(path) if path.is_file() else {}
    merged = {**file_values, **os.environ}

    raw = {}
    for field_name in Settings.model_fields:
        value = merged.get(f"{ENV_PREFIX}{field_name.upper()}")
        if value is not None:
            raw[field_name] = value
    return Settings(**raw)
