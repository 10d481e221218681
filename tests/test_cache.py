from __future__ import annotations

import threading
import time
from concurrent.futures import ThreadPoolExecutor

import pytest

from objadapt.core import NOT_FOUND, InvalidUsageError, MethodAccessor, ResolutionCache, resolve_member


class Widget:
    colour = "red"

    def getSize(self):
        return 3


class CountingResolver:
    def __init__(self, delay: float = 0.0) -> None:
        self.calls: list[tuple[type, str]] = []
        self._lock = threading.Lock()
        self._delay = delay

    def __call__(self, cls, name):
        with self._lock:
            self.calls.append((cls, name))
        if self._delay:
            time.sleep(self._delay)
        return resolve_member(cls, name)


def test_second_lookup_is_served_from_cache() -> None:
    resolver = CountingResolver()
    cache = ResolutionCache(resolver=resolver)
    first = cache.lookup_or_resolve(Widget, "size")
    second = cache.lookup_or_resolve(Widget, "size")
    assert isinstance(first, MethodAccessor)
    assert first is second
    assert resolver.calls == [(Widget, "size")]


def test_not_found_is_cached_too() -> None:
    resolver = CountingResolver()
    cache = ResolutionCache(resolver=resolver)
    assert cache.lookup_or_resolve(Widget, "weight") is NOT_FOUND
    assert cache.lookup_or_resolve(Widget, "weight") is NOT_FOUND
    assert len(resolver.calls) == 1


def test_peek_distinguishes_unresolved_from_not_found() -> None:
    cache = ResolutionCache()
    assert cache.peek(Widget, "weight") is None
    cache.lookup_or_resolve(Widget, "weight")
    assert cache.peek(Widget, "weight") is NOT_FOUND
    assert cache.peek(Widget, "colour") is None


def test_stats_and_clear() -> None:
    cache = ResolutionCache()
    cache.lookup_or_resolve(Widget, "size")
    cache.lookup_or_resolve(Widget, "size")
    cache.lookup_or_resolve(Widget, "colour")
    cache.lookup_or_resolve(int, "real")
    stats = cache.stats()
    assert (stats.types, stats.entries, stats.hits, stats.misses) == (2, 3, 1, 3)
    assert Widget in cache
    assert set(cache.types()) == {Widget, int}

    cache.clear()
    assert len(cache) == 0
    assert cache.stats().misses == 0
    assert cache.peek(Widget, "size") is None


def test_invalid_inputs_are_not_cached() -> None:
    cache = ResolutionCache()
    with pytest.raises(InvalidUsageError):
        cache.lookup_or_resolve(None, "size")
    with pytest.raises(InvalidUsageError):
        cache.lookup_or_resolve(Widget, None)
    assert len(cache) == 0


def test_concurrent_lookups_of_one_pair_share_one_accessor() -> None:
    cache = ResolutionCache(resolver=CountingResolver(delay=0.01))
    workers = 16
    barrier = threading.Barrier(workers)

    def lookup(_: int):
        barrier.wait()
        return cache.lookup_or_resolve(Widget, "size")

    with ThreadPoolExecutor(max_workers=workers) as pool:
        results = list(pool.map(lookup, range(workers)))

    assert all(result is results[0] for result in results)
    assert results[0].read(Widget()) == 3
    assert cache.peek(Widget, "size") is results[0]
    assert cache.stats().entries == 1


def test_concurrent_lookups_of_not_found_agree() -> None:
    cache = ResolutionCache(resolver=CountingResolver(delay=0.005))
    workers = 8
    barrier = threading.Barrier(workers)

    def lookup(_: int):
        barrier.wait()
        return cache.lookup_or_resolve(Widget, "weight")

    with ThreadPoolExecutor(max_workers=workers) as pool:
        results = list(pool.map(lookup, range(workers)))

    assert all(result is NOT_FOUND for result in results)


def test_concurrent_population_loses_no_entries() -> None:
    cache = ResolutionCache()
    names = [f"attr{index}" for index in range(40)]
    types = [type(f"Model{index}", (), {name: index for name in names}) for index in range(4)]

    def populate(cls: type) -> None:
        for name in names:
            cache.lookup_or_resolve(cls, name)

    with ThreadPoolExecutor(max_workers=8) as pool:
        list(pool.map(populate, types * 4))

    stats = cache.stats()
    assert stats.types == len(types)
    assert stats.entries == len(types) * len(names)
    for cls in types:
        assert all(cache.peek(cls, name) is not None for name in names)
