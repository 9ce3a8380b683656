"""Runtime settings.

The data file and interactive input are the only state the tool reads;
nothing is taken from the environment.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache


@dataclass(frozen=True)
class Settings:
    store_extension: str = ".dat"
    currency_symbol: str = "$"
    log_level: str = "WARNING"


@lru_cache
def get_settings() -> Settings:
    return Settings()
