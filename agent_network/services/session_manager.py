# Per-thread key-value state, persisted in Redis.
# Date: 2025-06-13
# Version: 0.2.0

import json
from abc import ABC, abstractmethod
from functools import lru_cache
from typing import Any, Dict, List, Optional

from redis.asyncio import Redis, from_url
from redis.exceptions import ConnectionError as RedisConnectionError, RedisError

from agent_network.core.config import get_settings
from agent_network.core.exceptions import StateStoreError
from agent_network.core.history import keep_recent
from agent_network.utils.logger import console


def thread_key(thread_id: str, key: str) -> str:
    return f"thread:{thread_id}:{key}"


class ThreadStateStore(ABC):
    """
    Namespaced key-value store backing conversation threads.
    Values are JSON-compatible. Each operation is atomic for its key;
    there are no cross-key transactions.
    """

    @abstractmethod
    async def get(self, key: str) -> Optional[Any]:
        ...

    @abstractmethod
    async def set(self, key: str, value: Any) -> None:
        ...

    @abstractmethod
    async def delete(self, key: str) -> None:
        ...

    @abstractmethod
    async def push(self, key: str, item: Any, capacity: int) -> None:
        """Appends `item`, then keeps only the most recent `capacity` items."""

    def for_thread(self, thread_id: str) -> "ThreadState":
        return ThreadState(self, thread_id)


class ThreadState:
    """A view of a ThreadStateStore scoped to a single thread id."""
    def __init__(self, store: ThreadStateStore, thread_id: str):
        self._store = store
        self.thread_id = thread_id

    async def get(self, key: str, default: Any = None) -> Any:
        value = await self._store.get(thread_key(self.thread_id, key))
        return default if value is None else value

    async def set(self, key: str, value: Any) -> None:
        await self._store.set(thread_key(self.thread_id, key), value)

    async def delete(self, key: str) -> None:
        await self._store.delete(thread_key(self.thread_id, key))

    async def push(self, key: str, item: Any, capacity: int) -> None:
        await self._store.push(thread_key(self.thread_id, key), item, capacity)


class RedisThreadStore(ThreadStateStore):
    """
    Stores plain values as JSON strings and pushed items as Redis lists,
    so push-with-cap is a single RPUSH + LTRIM transaction.
    """
    def __init__(self, redis_client: Redis, ttl_seconds: int = 86400):
        self._redis_client = redis_client
        self._ttl_seconds = ttl_seconds

    async def get(self, key: str) -> Optional[Any]:
        try:
            if await self._redis_client.type(key) == "list":
                items = await self._redis_client.lrange(key, 0, -1)
                return [json.loads(item) for item in items]
            raw = await self._redis_client.get(key)
        except RedisConnectionError:
            console.exception(f"Could not connect to Redis when reading '{key}'. Treating it as empty.")
            return None
        except RedisError as e:
            console.exception(f"Failed to read '{key}' from Redis.")
            raise StateStoreError(f"Failed to read '{key}': {e}") from e
        return json.loads(raw) if raw is not None else None

    async def set(self, key: str, value: Any) -> None:
        try:
            await self._redis_client.set(key, json.dumps(value), ex=self._ttl_seconds)
        except RedisError as e:
            console.exception(f"Failed to save '{key}' to Redis.")
            raise StateStoreError(f"Failed to save '{key}': {e}") from e
        console.debug(f"Key '{key}' saved to Redis.")

    async def delete(self, key: str) -> None:
        try:
            await self._redis_client.delete(key)
        except RedisError as e:
            console.exception(f"Failed to delete '{key}' from Redis.")
            raise StateStoreError(f"Failed to delete '{key}': {e}") from e

    async def push(self, key: str, item: Any, capacity: int) -> None:
        # LTRIM with a start of -0 would keep the whole list
        if capacity <= 0:
            await self.delete(key)
            return
        try:
            async with self._redis_client.pipeline(transaction=True) as pipe:
                pipe.rpush(key, json.dumps(item))
                pipe.ltrim(key, -capacity, -1)
                pipe.expire(key, self._ttl_seconds)
                await pipe.execute()
        except RedisError as e:
            console.exception(f"Failed to push to '{key}' in Redis.")
            raise StateStoreError(f"Failed to push to '{key}': {e}") from e


class InMemoryThreadStore(ThreadStateStore):
    """
    Process-local store for tests and single-process local runs.
    Values are round-tripped through JSON like the Redis store.
    """
    def __init__(self):
        self._data: Dict[str, str] = {}
        self._lists: Dict[str, List[str]] = {}

    async def get(self, key: str) -> Optional[Any]:
        if key in self._lists:
            return [json.loads(item) for item in self._lists[key]]
        raw = self._data.get(key)
        return json.loads(raw) if raw is not None else None

    async def set(self, key: str, value: Any) -> None:
        self._lists.pop(key, None)
        self._data[key] = json.dumps(value)

    async def delete(self, key: str) -> None:
        self._data.pop(key, None)
        self._lists.pop(key, None)

    async def push(self, key: str, item: Any, capacity: int) -> None:
        if key in self._data:
            raise StateStoreError(f"Key '{key}' holds a plain value and cannot be pushed to.")
        items = self._lists.get(key, []) + [json.dumps(item)]
        self._lists[key] = keep_recent(items, capacity)


@lru_cache
def get_state_store() -> ThreadStateStore:
    settings = get_settings()
    if settings.STATE_BACKEND == "memory":
        console.info("Using in-memory thread state store.")
        return InMemoryThreadStore()
    store = RedisThreadStore(
        from_url(settings.REDIS_URL, decode_responses=True),
        ttl_seconds=settings.STATE_TTL_SECONDS,
    )
    console.info("Async Redis client for thread state initialized.")
    return store
