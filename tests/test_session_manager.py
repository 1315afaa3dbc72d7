import json
from unittest.mock import AsyncMock, MagicMock

import pytest
from redis.exceptions import ConnectionError as RedisConnectionError, ResponseError, TimeoutError as RedisTimeoutError

from agent_network.core.exceptions import StateStoreError
from agent_network.core.history import append_exchange, keep_recent, load_history
from agent_network.models.common import HistoryEntry
from agent_network.services.session_manager import InMemoryThreadStore, RedisThreadStore, thread_key


class TestHistoryHelpers:
    """Tests for the sliding-window helpers."""

    def test_keep_recent(self):
        assert keep_recent([1, 2, 3, 4], 2) == [3, 4]
        assert keep_recent([1, 2], 5) == [1, 2]
        assert keep_recent([1, 2], 0) == []

    def test_append_exchange_evicts_oldest(self):
        history = [HistoryEntry(role="user", content="a"), HistoryEntry(role="assistant", content="b")]
        updated = append_exchange(history, "c", "d", limit=3)
        assert [e.content for e in updated] == ["b", "c", "d"]
        assert len(history) == 2

    def test_load_history_skips_bad_entries(self):
        raw = [
            {"role": "user", "content": "hi"},
            {"role": "tool", "content": "x"},
            {"role": "assistant"},
            "garbage",
            {"role": "assistant", "content": "hello"},
        ]
        assert [e.content for e in load_history(raw)] == ["hi", "hello"]
        assert load_history(None) == []


class TestInMemoryThreadStore:
    """Tests for the in-process store."""

    @pytest.mark.asyncio
    async def test_set_get_delete(self, store):
        await store.set("k", {"a": 1})
        assert await store.get("k") == {"a": 1}
        await store.delete("k")
        assert await store.get("k") is None

    @pytest.mark.asyncio
    async def test_push_keeps_most_recent_items(self, store):
        for i in range(7):
            await store.push("items", {"n": i}, capacity=5)
        assert await store.get("items") == [{"n": i} for i in range(2, 7)]

    @pytest.mark.asyncio
    async def test_push_onto_plain_value_fails(self, store):
        await store.set("k", "value")
        with pytest.raises(StateStoreError):
            await store.push("k", "item", capacity=3)

    @pytest.mark.asyncio
    async def test_thread_views_are_namespaced(self, store):
        await store.for_thread("a").set("conversation", ["x"])
        assert await store.for_thread("b").get("conversation", []) == []
        assert await store.get(thread_key("a", "conversation")) == ["x"]
        assert thread_key("a", "conversation") == "thread:a:conversation"


def make_redis(key_type: str = "string") -> MagicMock:
    pipe = MagicMock()
    pipe.execute = AsyncMock(return_value=[1, True, True])
    pipe.__aenter__ = AsyncMock(return_value=pipe)
    pipe.__aexit__ = AsyncMock(return_value=False)

    client = MagicMock()
    client.type = AsyncMock(return_value=key_type)
    client.get = AsyncMock(return_value=None)
    client.lrange = AsyncMock(return_value=[])
    client.set = AsyncMock()
    client.delete = AsyncMock()
    client.pipeline = MagicMock(return_value=pipe)
    return client


class TestRedisThreadStore:
    """Tests for the Redis-backed store with a mocked client."""

    @pytest.mark.asyncio
    async def test_set_writes_json_with_ttl(self):
        client = make_redis()
        await RedisThreadStore(client, ttl_seconds=60).set("k", {"a": 1})
        client.set.assert_awaited_once_with("k", json.dumps({"a": 1}), ex=60)

    @pytest.mark.asyncio
    async def test_get_decodes_plain_values_and_lists(self):
        client = make_redis()
        client.get.return_value = json.dumps([1, 2])
        assert await RedisThreadStore(client).get("k") == [1, 2]

        client = make_redis("list")
        client.lrange.return_value = [json.dumps({"n": 1}), json.dumps({"n": 2})]
        assert await RedisThreadStore(client).get("k") == [{"n": 1}, {"n": 2}]
        client.lrange.assert_awaited_once_with("k", 0, -1)

    @pytest.mark.asyncio
    async def test_get_treats_connection_errors_as_missing(self):
        client = make_redis()
        client.type.side_effect = RedisConnectionError("down")
        assert await RedisThreadStore(client).get("k") is None

    @pytest.mark.asyncio
    @pytest.mark.parametrize("error", [RedisTimeoutError("slow"), ResponseError("WRONGTYPE")])
    async def test_other_read_failures_raise_state_store_error(self, error):
        client = make_redis()
        client.get.side_effect = error
        with pytest.raises(StateStoreError):
            await RedisThreadStore(client).get("k")

    @pytest.mark.asyncio
    async def test_push_trims_in_one_transaction(self):
        client = make_redis()
        await RedisThreadStore(client, ttl_seconds=30).push("k", {"n": 1}, capacity=5)

        client.pipeline.assert_called_once_with(transaction=True)
        pipe = client.pipeline.return_value
        pipe.rpush.assert_called_once_with("k", json.dumps({"n": 1}))
        pipe.ltrim.assert_called_once_with("k", -5, -1)
        pipe.expire.assert_called_once_with("k", 30)
        pipe.execute.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_push_with_zero_capacity_clears_key(self):
        client = make_redis()
        await RedisThreadStore(client).push("k", {"n": 1}, capacity=0)
        client.delete.assert_awaited_once_with("k")
        client.pipeline.assert_not_called()

    @pytest.mark.asyncio
    async def test_write_failures_raise_state_store_error(self):
        client = make_redis()
        client.set.side_effect = RedisConnectionError("down")
        with pytest.raises(StateStoreError):
            await RedisThreadStore(client).set("k", 1)
