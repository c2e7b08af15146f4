"""
Redis-backed settings snapshot and reading log.

Both are opaque JSON blobs of the flat snapshot dicts; Redis errors are left
to the caller.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, List, Optional

import redis

from growcalc.config import RedisConfig, StorageConfig, redis_config_from_env, storage_config_from_env
from growcalc.time import now

logger = logging.getLogger(__name__)


def redis_client_from_config(cfg: Optional[RedisConfig] = None) -> redis.Redis:
    cfg = cfg or redis_config_from_env()
    return redis.Redis(host=cfg.host, port=cfg.port, db=cfg.db)


class CalculatorStore:
    def __init__(self, client: redis.Redis, config: Optional[StorageConfig] = None) -> None:
        self.client = client
        self.config = config or storage_config_from_env()

    # Settings snapshot

    def save_settings(self, settings: Dict[str, Any]) -> Dict[str, Any]:
        snapshot = dict(settings)
        snapshot["timestamp"] = now().isoformat()
        self.client.set(self.config.settings_key, json.dumps(snapshot))
        logger.info("Saved settings snapshot (%s)", snapshot.get("growthStage"))
        return snapshot

    def load_settings(self) -> Optional[Dict[str, Any]]:
        raw = self.client.get(self.config.settings_key)
        if raw is None:
            return None
        return json.loads(raw)

    def clear_settings(self) -> None:
        self.client.delete(self.config.settings_key)
        logger.info("Cleared settings snapshot")

    # Reading log

    def log_reading(self, reading: Dict[str, Any]) -> int:
        """
        Append a reading, keeping only the newest `max_readings`.
        Returns the number of readings stored afterwards.
        """
        key = self.config.readings_key
        self.client.rpush(key, json.dumps(reading))
        self.client.ltrim(key, -self.config.max_readings, -1)
        count = self.client.llen(key)
        logger.debug("Logged reading, %d stored", count)
        return count

    def get_readings(self) -> List[Dict[str, Any]]:
        return [json.loads(raw) for raw in self.client.lrange(self.config.readings_key, 0, -1)]

    def clear_readings(self) -> None:
        self.client.delete(self.config.readings_key)
        logger.info("Cleared reading log")
