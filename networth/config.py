from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Tuple

from dotenv import load_dotenv

DEFAULT_CORS_ORIGINS = (
    "http://localhost:5173",
    "http://127.0.0.1:5173",
)


@dataclass(frozen=True)
class Settings:
    env: str = "dev"
    log_level: str = "INFO"
    cors_origins: Tuple[str, ...] = DEFAULT_CORS_ORIGINS
    port: int = 5000


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _origins_env(name: str, default: Tuple[str, ...]) -> Tuple[str, ...]:
    raw = os.getenv(name)
    if raw is None:
        return default
    origins = tuple(part.strip() for part in raw.split(",") if part.strip())
    return origins or default


def load_settings() -> Settings:
    """
    Loads settings from environment variables (a local .env is read first).
    """
    load_dotenv()

    return Settings(
        env=os.getenv("NETWORTH_ENV", "dev"),
        log_level=os.getenv("NETWORTH_LOG_LEVEL", "INFO"),
        cors_origins=_origins_env("NETWORTH_CORS_ORIGINS", DEFAULT_CORS_ORIGINS),
        port=_int_env("NETWORTH_PORT", 5000),
    )
