"""Runtime settings read from the environment.

Settings are loaded once, when this module is imported. An optional `.env` file
is read first; variables already present in the environment take precedence
over it. `reload_settings` reads them again.

Supported variables:
    PRECISE_MONEY_DISPLAY_PRECISION: default number of decimal digits used by
        `Amount.rounded_value` and `Amount.format` (non-negative integer, default 2).
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv

DISPLAY_PRECISION_ENV_VAR = "PRECISE_MONEY_DISPLAY_PRECISION"
DEFAULT_DISPLAY_PRECISION = 2


@dataclass(frozen=True)
class Settings:
    display_precision: int = DEFAULT_DISPLAY_PRECISION


def _read_display_precision() -> int:
    raw_value = os.environ.get(DISPLAY_PRECISION_ENV_VAR)
    if raw_value is None or not raw_value.strip():
        return DEFAULT_DISPLAY_PRECISION

    try:
        precision = int(raw_value)
    except ValueError as e:
        raise ValueError(f"${DISPLAY_PRECISION_ENV_VAR} must be an integer, but provided value is: '{raw_value}'") from e

    # Raise: negative display precision would round to tens, hundreds, ...
    if precision < 0:
        raise ValueError(f"${DISPLAY_PRECISION_ENV_VAR} must be non-negative, but provided value is: {precision}")

    return precision


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Returns the process-wide settings, loading them on first use."""
    load_dotenv()
    return Settings(display_precision=_read_display_precision())


def reload_settings() -> Settings:
    """Drops cached settings and reads them again from the environment."""
    get_settings.cache_clear()
    return get_settings()


# Load once at import so display calls only read the cache
get_settings()
