from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from orders_api.core.domain.model.order import DEFAULT_CURRENCY


def _get_int(name: str, fallback: int) -> int:
    raw_value = os.getenv(name)
    if not raw_value:
        return fallback
    try:
        return int(raw_value)
    except ValueError:
        raise RuntimeError(
            f"Environment variable {name} must be an integer, got {raw_value!r}"
        ) from None


def _get_path(name: str) -> Path | None:
    raw_value = os.getenv(name)
    if not raw_value:
        return None
    return Path(raw_value)


@dataclass(frozen=True)
class Settings:
    host: str = "0.0.0.0"
    port: int = 8000
    log_level: str = "INFO"
    log_file: Path | None = None
    currency: str = DEFAULT_CURRENCY
    seed_file: Path | None = None


def load_settings(env_file: str | os.PathLike[str] | None = None) -> Settings:
    """Read settings from the environment, after loading ``.env`` if present."""
    load_dotenv(env_file)
    return Settings(
        host=os.getenv("ORDERS_API_HOST", "0.0.0.0"),
        port=_get_int("ORDERS_API_PORT", 8000),
        log_level=os.getenv("ORDERS_API_LOG_LEVEL", "INFO").upper(),
        log_file=_get_path("ORDERS_API_LOG_FILE"),
        currency=os.getenv("ORDERS_API_CURRENCY", DEFAULT_CURRENCY),
        seed_file=_get_path("ORDERS_API_SEED_FILE"),
    )
