from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class RedisConfig:
    host: str = "localhost"
    port: int = 6379
    db: int = 0


def redis_config_from_env() -> RedisConfig:
    return RedisConfig(
        host=os.getenv("GROWCALC_REDIS_HOST", "localhost"),
        port=int(os.getenv("GROWCALC_REDIS_PORT", "6379")),
        db=int(os.getenv("GROWCALC_REDIS_DB", "0")),
    )


@dataclass(frozen=True)
class WebConfig:
    host: str = "0.0.0.0"
    port: int = 5000
    debug: bool = False


def web_config_from_env() -> WebConfig:
    return WebConfig(
        host=os.getenv("GROWCALC_WEB_HOST", "0.0.0.0"),
        port=int(os.getenv("GROWCALC_WEB_PORT", "5000")),
        debug=os.getenv("GROWCALC_WEB_DEBUG", "").strip().lower() in ("1", "true", "yes", "on"),
    )


@dataclass(frozen=True)
class StorageConfig:
    settings_key: str = "growcalc:settings"
    readings_key: str = "growcalc:readings"
    # Older readings are dropped past this count.
    max_readings: int = 100


def storage_config_from_env() -> StorageConfig:
    """
    Allow overriding Redis keys, e.g. to share one Redis between installs.
    """

    def _get_int(name: str, default: int) -> int:
        val = os.getenv(name)
        return default if val is None or val == "" else int(val)

    return StorageConfig(
        settings_key=os.getenv("GROWCALC_SETTINGS_KEY", "growcalc:settings"),
        readings_key=os.getenv("GROWCALC_READINGS_KEY", "growcalc:readings"),
        max_readings=_get_int("GROWCALC_MAX_READINGS", 100),
    )


def timezone_name_from_env() -> str:
    return os.getenv("GROWCALC_TZ", "UTC")


def log_level_from_env() -> str:
    return os.getenv("GROWCALC_LOG_LEVEL", "INFO").strip().upper()
