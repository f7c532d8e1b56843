"""
In-process memoizing cache for remote fetches.

One instance per entity kind (orders, categories, products). Entries are
keyed by entity identifier; whole-collection fetches use `COLLECTION_KEY`.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Awaitable, Callable, Dict, Generic, Hashable, Optional, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

COLLECTION_KEY = "__all__"


class CachePolicy(str, Enum):
    # Entries live as long as the cache: no TTL, no size bound, no invalidation.
    NEVER_EXPIRE = "never_expire"


class MemoCache(Generic[T]):
    """
    Memoizes the result of an async fetch per key.

    There is no single-flight: concurrent misses for the same key each run
    the fetch and the last one to finish owns the slot. Failed fetches are
    not cached.
    """

    def __init__(self, name: str, policy: CachePolicy = CachePolicy.NEVER_EXPIRE) -> None:
        self.name = name
        self.policy = policy
        self._entries: Dict[Hashable, T] = {}

    def get(self, key: Hashable) -> Optional[T]:
        return self._entries.get(key)

    def set(self, key: Hashable, value: T) -> None:
        self._entries[key] = value

    def __contains__(self, key: Any) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    async def get_or_fetch(self, key: Hashable, fetch: Callable[[], Awaitable[T]]) -> T:
        if key in self._entries:
            logger.debug("%s cache hit for %r", self.name, key)
            return self._entries[key]

        value = await fetch()
        self._entries[key] = value
        logger.info("%s cache filled for %r", self.name, key)
        return value

    def clear(self) -> None:
        self._entries.clear()
