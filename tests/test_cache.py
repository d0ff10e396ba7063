from concurrent.futures import ThreadPoolExecutor

import pytest

from kinship_py.cache import ResponseCache, make_key
from kinship_py.models import Gender, KinshipResponse, Language, RelationStep


def _resp(title):
    return KinshipResponse(title, title, title, "", "")


def test_get_or_build_runs_factory_once():
    cache = ResponseCache()
    calls = []

    def factory():
        calls.append(1)
        return _resp("a")

    key = make_key(Language.EN, Gender.MALE, [RelationStep.FATHER])
    first = cache.get_or_build(key, factory)
    second = cache.get_or_build(key, factory)
    assert first is second
    assert len(calls) == 1
    assert cache.stats() == {"hits": 1, "misses": 1, "size": 1}


def test_keys_are_exact_and_ordered():
    a = make_key(Language.ZH, Gender.MALE, [RelationStep.FATHER, RelationStep.SON])
    b = make_key(Language.ZH, Gender.MALE, (RelationStep.SON, RelationStep.FATHER))
    c = make_key(Language.ZH, Gender.FEMALE, [RelationStep.FATHER, RelationStep.SON])
    assert a != b
    assert a != c
    assert a == make_key(Language.ZH, Gender.MALE, (RelationStep.FATHER, RelationStep.SON))


def test_lru_eviction():
    cache = ResponseCache(max_entries=2)
    cache.put("a", _resp("a"))
    cache.put("b", _resp("b"))
    assert cache.get("a").title == "a"
    cache.put("c", _resp("c"))
    assert "b" not in cache
    assert "a" in cache and "c" in cache
    assert len(cache) == 2


def test_unbounded_by_default():
    cache = ResponseCache()
    for i in range(500):
        cache.put(i, _resp(str(i)))
    assert len(cache) == 500


@pytest.mark.parametrize("bad", [0, -1])
def test_rejects_non_positive_size(bad):
    with pytest.raises(ValueError):
        ResponseCache(max_entries=bad)


def test_clear_resets_counters():
    cache = ResponseCache()
    cache.put("k", _resp("k"))
    cache.get("k")
    cache.get("missing")
    cache.clear()
    assert cache.stats() == {"hits": 0, "misses": 0, "size": 0}


def test_concurrent_get_or_build_converges():
    cache = ResponseCache(max_entries=8)
    keys = [make_key(Language.EN, Gender.MALE, [RelationStep.SON] * (i % 12)) for i in range(400)]

    def work(key):
        return key, cache.get_or_build(key, lambda: _resp(str(len(key[2]))))

    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(work, keys))
    for key, resp in results:
        assert resp.title == str(len(key[2]))
    assert len(cache) <= 8
