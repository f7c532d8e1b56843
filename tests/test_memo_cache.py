import pytest

from northwind.utils.memo_cache import COLLECTION_KEY, CachePolicy, MemoCache


@pytest.mark.asyncio
async def test_get_or_fetch_memoizes_per_key():
    cache = MemoCache("things")
    calls = []

    async def fetch():
        calls.append(1)
        return {"n": len(calls)}

    first = await cache.get_or_fetch(1, fetch)
    second = await cache.get_or_fetch(1, fetch)
    other = await cache.get_or_fetch(2, fetch)

    assert second is first
    assert other == {"n": 2}
    assert len(calls) == 2
    assert cache.policy is CachePolicy.NEVER_EXPIRE


@pytest.mark.asyncio
async def test_failed_fetch_is_not_cached():
    cache = MemoCache("things")

    async def boom():
        raise RuntimeError("down")

    with pytest.raises(RuntimeError):
        await cache.get_or_fetch(COLLECTION_KEY, boom)

    assert COLLECTION_KEY not in cache
    assert cache.get(COLLECTION_KEY) is None


def test_set_clear():
    cache = MemoCache("things")
    cache.set("a", 1)

    assert len(cache) == 1
    cache.clear()
    assert len(cache) == 0
