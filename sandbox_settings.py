from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

from dotenv import load_dotenv


DEFAULT_API_URL = "https://randomuser.me/api"


@dataclass(frozen=True)
class Settings:
    api_url: str
    timeout_seconds: float

    # Page behaviour
    initial_count: int
    debounce_seconds: float
    date_format: Optional[str]

    log_level: str


def _float_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return float(raw)


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return int(raw)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    # .env is optional; real environment variables win
    load_dotenv()
    return Settings(
        api_url=(os.getenv("RANDOMUSER_API_URL") or DEFAULT_API_URL).rstrip("/"),
        timeout_seconds=_float_env("RANDOMUSER_TIMEOUT_SECONDS", 10.0),
        initial_count=_int_env("SANDBOX_INITIAL_COUNT", 20),
        debounce_seconds=_float_env("SANDBOX_DEBOUNCE_SECONDS", 0.3),
        date_format=os.getenv("SANDBOX_DATE_FORMAT") or None,
        log_level=os.getenv("LOG_LEVEL") or "INFO",
    )
