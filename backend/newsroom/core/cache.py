"""
Key-value cache backed by Redis.

The cache is advisory: a failed lookup behaves like a miss and a failed write
or delete is logged and reported as ``False``. Callers never see Redis errors.
"""

import json
import logging
from typing import Any, Optional, Protocol

import redis

from newsroom.core.config import settings

logger = logging.getLogger(__name__)

SOCKET_TIMEOUT = 1.0  # seconds
CONNECT_TIMEOUT = 1.0  # seconds


class CacheBackend(Protocol):
    """Minimal get/set/delete contract the API layer depends on."""

    def get(self, key: str) -> Optional[Any]: ...

    def set(self, key: str, value: Any, ttl: int) -> bool: ...

    def delete(self, key: str) -> bool: ...


class RedisCache:
    """JSON-serializing cache on top of a redis-py client."""

    def __init__(self, client: redis.Redis, default_ttl: int = 300):
        self.client = client
        self.default_ttl = default_ttl

    @classmethod
    def from_settings(cls) -> "RedisCache":
        client = redis.Redis(
            host=settings.REDIS_HOST,
            port=settings.REDIS_PORT,
            db=settings.REDIS_DB,
            password=settings.REDIS_PASSWORD,
            decode_responses=True,
            socket_timeout=SOCKET_TIMEOUT,
            socket_connect_timeout=CONNECT_TIMEOUT,
            retry_on_timeout=False,
        )
        return cls(client, default_ttl=settings.REDIS_TTL)

    def ping(self) -> bool:
        try:
            return bool(self.client.ping())
        except redis.RedisError as e:
            logger.warning(f"Redis ping failed, continuing without cache: {e}")
            return False

    def get(self, key: str) -> Optional[Any]:
        try:
            cached_value = self.client.get(key)
        except redis.RedisError as e:
            logger.warning(f"Cache lookup failed (key: {key}): {e}")
            return None

        if cached_value is None:
            return None

        try:
            return json.loads(cached_value)
        except json.JSONDecodeError as e:
            logger.warning(f"Cached value is not valid JSON (key: {key}): {e}")
            return None

    def set(self, key: str, value: Any, ttl: Optional[int] = None) -> bool:
        ttl = ttl or self.default_ttl
        try:
            serialized_value = json.dumps(value, ensure_ascii=False, default=str)
            self.client.setex(key, ttl, serialized_value)
        except (redis.RedisError, TypeError, ValueError) as e:
            logger.warning(f"Cache store failed (key: {key}): {e}")
            return False

        logger.debug(f"Cached {key} for {ttl}s")
        return True

    def delete(self, key: str) -> bool:
        try:
            deleted_count = self.client.delete(key)
        except redis.RedisError as e:
            logger.warning(f"Cache delete failed (key: {key}): {e}")
            return False

        logger.debug(f"Invalidated {key}")
        return deleted_count > 0

    def close(self) -> None:
        try:
            self.client.close()
        except redis.RedisError as e:
            logger.warning(f"Closing Redis connection failed: {e}")
