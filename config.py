# config.py
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ROOT_DIR = Path(__file__).resolve().parent
load_dotenv(dotenv_path=ROOT_DIR / ".env")


def _get_env(*keys: str, default: str | None = None) -> str | None:
    # First non-blank variable wins.
    for k in keys:
        v = os.getenv(k)
        if v is not None and str(v).strip() != "":
            return v.strip()
    return default


def _get_int(*keys: str, default: int, min_value: int | None = None) -> int:
    v = _get_env(*keys, default=None)
    if v is None:
        return default
    try:
        n = int(v)
    except ValueError:
        raise ValueError(f"{keys[0]} must be an integer, got {v!r}") from None
    if min_value is not None and n < min_value:
        raise ValueError(f"{keys[0]} must be >= {min_value}, got {n}")
    return n


@dataclass(frozen=True)
class Settings:
    log_dir: str
    log_level: str
    log_backup_count: int


def load_settings() -> Settings:
    return Settings(
        log_dir=_get_env("CART_LOG_DIR", "LOG_DIR", default="data/logs") or "data/logs",
        log_level=(_get_env("CART_LOG_LEVEL", "LOG_LEVEL", default="INFO") or "INFO").upper(),
        log_backup_count=_get_int("CART_LOG_BACKUP_COUNT", default=7, min_value=0),
    )


settings = load_settings()
