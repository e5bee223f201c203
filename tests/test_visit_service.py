from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor

from music_library_api.app.services.visit_service import VisitCounter


def test_sequential_increments_count_up_from_zero():
    counter = VisitCounter()
    results = [counter.increment() for _ in range(25)]

    assert results == list(range(1, 26))
    assert counter.value == 25


def test_concurrent_increments_lose_no_updates():
    counter = VisitCounter()
    with ThreadPoolExecutor(max_workers=16) as pool:
        results = list(pool.map(lambda _: counter.increment(), range(2000)))

    assert counter.value == 2000
    assert sorted(results) == list(range(1, 2001))
