# Settings are read from the environment
from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from .rules import DEFAULT_DELIMITER


@dataclass(frozen=True)
class Settings:
    csv_source: str = "data/programs.csv"
    delimiter: str = DEFAULT_DELIMITER
    fetch_timeout: float = 15.0
    log_level: str = "info"


def get_settings() -> Settings:
    # Local path or http(s) URL of the programs CSV
    return Settings(
        csv_source=os.getenv("CATALOG_CSV_SOURCE", "data/programs.csv"),
        delimiter=os.getenv("CATALOG_CSV_DELIMITER", DEFAULT_DELIMITER) or DEFAULT_DELIMITER,
        fetch_timeout=float(os.getenv("CATALOG_FETCH_TIMEOUT", "15") or "15"),
        log_level=os.getenv("LOG_LEVEL", "info").lower(),
    )


def log_level(name: str) -> int:
    # unknown names fall back to INFO
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else logging.INFO
