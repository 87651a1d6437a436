"""
Cache-aside reads and write invalidation for one API resource.

Keys:
- ``all_<resource plural>``: the list endpoint's response payload
- ``<resource>:<id>``: a single serialized item

Reads check the cache first and fall through to the loader on a miss. Writes
invalidate keys after the store has been updated. A cache error is logged
and treated as a miss or a no-op, never surfaced to the client.
"""

import logging
from typing import Any, Callable, Dict, Optional, Tuple

from newsroom.core.cache import CacheBackend

logger = logging.getLogger(__name__)

ITEM_TTL = 300  # seconds
MAX_VARIANTS = 20


class CacheAside:
    def __init__(
        self,
        cache: CacheBackend,
        resource: str,
        list_key: str,
        item_ttl: int = ITEM_TTL,
        list_ttl: Optional[int] = None,
        max_variants: int = MAX_VARIANTS,
    ):
        self.cache = cache
        self.resource = resource
        self.list_key = list_key
        self.item_ttl = item_ttl
        self.list_ttl = list_ttl or item_ttl
        self.max_variants = max_variants

    def item_key(self, item_id: str) -> str:
        return f"{self.resource}:{item_id}"

    def read_item(self, item_id: str, loader: Callable[[], Any]) -> Tuple[Any, bool]:
        """
        Return ``(value, from_cache)`` for one item.

        ``loader`` is only called on a miss; its result is cached for
        ``item_ttl`` seconds. Errors raised by ``loader`` propagate.
        """
        key = self.item_key(item_id)

        cached = self._get(key)
        if cached is not None:
            return cached, True

        value = loader()
        self._set(key, value, self.item_ttl)
        return value, False

    def read_list(self, loader: Callable[[], Any], variant: Optional[str] = None) -> Any:
        """
        Return the list payload, loading and caching it on a miss.

        When ``variant`` is given (e.g. ``"2:10"`` for page 2 of size 10) the
        list key holds a mapping of variant to payload, so one delete of the
        list key drops every variant. At most ``max_variants`` are kept; the
        oldest is dropped to make room.
        """
        cached = self._get(self.list_key)

        if variant is None:
            if cached is not None:
                return cached
            value = loader()
            self._set(self.list_key, value, self.list_ttl)
            return value

        variants: Dict[str, Any] = cached if isinstance(cached, dict) else {}
        if variant in variants:
            return variants[variant]

        value = loader()
        while variants and len(variants) >= self.max_variants:
            del variants[next(iter(variants))]
        variants[variant] = value
        self._set(self.list_key, variants, self.list_ttl)
        return value

    def invalidate(self, *item_ids: str) -> None:
        """Drop the list key and the key of every id in ``item_ids``."""
        self._delete(self.list_key)
        for item_id in item_ids:
            self._delete(self.item_key(item_id))

    def _get(self, key: str) -> Optional[Any]:
        try:
            return self.cache.get(key)
        except Exception as e:
            logger.warning(f"Cache read failed, falling back to store (key: {key}): {e}")
            return None

    def _set(self, key: str, value: Any, ttl: int) -> None:
        try:
            self.cache.set(key, value, ttl)
        except Exception as e:
            logger.warning(f"Cache write failed (key: {key}): {e}")

    def _delete(self, key: str) -> None:
        try:
            self.cache.delete(key)
        except Exception as e:
            logger.warning(f"Cache invalidation failed (key: {key}): {e}")
