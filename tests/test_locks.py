from __future__ import annotations

import threading
import time

from music_library_api.app.core.locks import ReadWriteLock


def test_readers_share_the_lock():
    lock = ReadWriteLock()
    inside = threading.Barrier(3, timeout=5)

    def reader():
        with lock.read_locked():
            # All three readers must be inside at once to pass the barrier.
            inside.wait()

    threads = [threading.Thread(target=reader) for _ in range(3)]
    for t in threads:
        t.start()
    for t in threads:
        t.join(timeout=5)

    assert not any(t.is_alive() for t in threads)


def test_writer_excludes_readers():
    lock = ReadWriteLock()
    events = []
    writer_in = threading.Event()

    def writer():
        with lock.write_locked():
            writer_in.set()
            time.sleep(0.05)
            events.append("writer done")

    def reader():
        writer_in.wait(timeout=5)
        with lock.read_locked():
            events.append("reader")

    w = threading.Thread(target=writer)
    r = threading.Thread(target=reader)
    w.start()
    r.start()
    w.join(timeout=5)
    r.join(timeout=5)

    assert events == ["writer done", "reader"]


def test_waiting_writer_blocks_new_readers():
    lock = ReadWriteLock()
    order = []
    lock.acquire_read()

    def writer():
        with lock.write_locked():
            order.append("writer")

    def late_reader():
        with lock.read_locked():
            order.append("reader")

    w = threading.Thread(target=writer)
    w.start()
    # Wait until the writer is queued behind the held read lock.
    deadline = time.monotonic() + 5
    while lock._writers_waiting == 0 and time.monotonic() < deadline:
        time.sleep(0.001)
    r = threading.Thread(target=late_reader)
    r.start()
    time.sleep(0.05)
    assert order == []

    lock.release_read()
    w.join(timeout=5)
    r.join(timeout=5)

    assert order == ["writer", "reader"]
