"""
Environment-driven configuration.

Every ConversionOptions field can be set with NUMBER_WORDS_<FIELD>:

    NUMBER_WORDS_NEGATIVE="minus "
    NUMBER_WORDS_CURRENCY_MAJOR=euro
    NUMBER_WORDS_CAPITALIZE=false

Values are validated by the pydantic model, so "false", "0", "no" and "off"
all work for the boolean switches.  The entry points load a .env file first
(python-dotenv) when one is present.
"""

from __future__ import annotations

import logging
import os
from typing import Mapping

from .models import ConversionMode, ConversionOptions

logger = logging.getLogger(__name__)

ENV_PREFIX = "NUMBER_WORDS_"
LOG_LEVEL_VAR = ENV_PREFIX + "LOG_LEVEL"
MODE_VAR = ENV_PREFIX + "MODE"


def load_options(environ: Mapping[str, str] | None = None) -> ConversionOptions:
    """Build ConversionOptions from NUMBER_WORDS_* variables.

    Raises:
        pydantic.ValidationError: If a variable holds an invalid value.
    """
    env = os.environ if environ is None else environ
    values: dict[str, str] = {}
    for field_name in ConversionOptions.model_fields:
        raw = env.get(ENV_PREFIX + field_name.upper())
        if raw is not None:
            values[field_name] = raw

    if values:
        logger.info("Conversion options from environment: %s", sorted(values))
    return ConversionOptions.model_validate(values)


def load_mode(environ: Mapping[str, str] | None = None) -> ConversionMode:
    """Default conversion mode from NUMBER_WORDS_MODE (automatic if unset)."""
    env = os.environ if environ is None else environ
    return ConversionMode(env.get(MODE_VAR, ConversionMode.AUTOMATIC.value).lower())


def log_level(environ: Mapping[str, str] | None = None) -> str:
    """Log level name from NUMBER_WORDS_LOG_LEVEL, WARNING by default."""
    env = os.environ if environ is None else environ
    return env.get(LOG_LEVEL_VAR, "WARNING").upper()
