import pytest

from dsakit.lru_cache import LRUCache


def test_classic_eviction_sequence():
    cache = LRUCache(2)
    cache.put(1, 1)
    cache.put(2, 2)
    assert cache.get(1) == 1
    cache.put(3, 3)
    assert cache.get(2) is None
    cache.put(4, 4)
    assert cache.get(1) is None
    assert cache.get(3) == 3
    assert cache.get(4) == 4


def test_put_existing_key_updates_and_refreshes():
    cache = LRUCache(2)
    cache.put("a", 1)
    cache.put("b", 2)
    cache.put("a", 10)
    cache.put("c", 3)
    assert "b" not in cache
    assert cache.get("a") == 10
    assert cache.get("c") == 3
    assert len(cache) == cache.capacity


def test_size_never_exceeds_capacity():
    cache = LRUCache(3)
    for key in range(10):
        cache.put(key, key * 2)
        assert len(cache) <= 3
    assert [k for k in range(10) if k in cache] == [7, 8, 9]


def test_zero_capacity_keeps_nothing():
    cache = LRUCache(0)
    cache.put("x", "y")
    assert cache.get("x") is None
    assert len(cache) == 0


def test_negative_capacity_rejected():
    with pytest.raises(ValueError):
        LRUCache(-1)