import threading
import time

import pytest

from bytekit.syncx import RWMutex, shard_id


def test_shard_id_stable_in_thread():
    first = shard_id()
    second = shard_id()
    assert first == second
    assert first >= 0


def test_shard_id_distinct_across_threads():
    count = 8
    ids = []
    barrier = threading.Barrier(count)
    guard = threading.Lock()

    def work():
        barrier.wait()
        value = shard_id()
        with guard:
            ids.append(value)

    threads = [threading.Thread(target=work) for _ in range(count)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    main_id = shard_id()
    assert main_id == shard_id()
    assert len(ids) == count
    assert len(set(ids)) == count
    assert min(ids) >= 0


def test_invalid_shard_count():
    with pytest.raises(ValueError):
        RWMutex(0)


def test_shard_count():
    assert len(RWMutex(3)) == 3


def test_writer_blocks_reader():
    m = RWMutex(4)
    assert len(m) == 4
    entered = threading.Event()

    def reader():
        with m.rlocker():
            entered.set()

    m.lock()
    t = threading.Thread(target=reader)
    t.start()
    time.sleep(0.05)
    assert not entered.is_set()
    m.unlock()
    t.join(timeout=5)
    assert entered.is_set()


def test_reader_blocks_writer():
    m = RWMutex(2)
    assert len(m) == 2
    acquired = threading.Event()

    def writer():
        with m:
            acquired.set()

    reader = m.rlocker()
    reader.lock()
    t = threading.Thread(target=writer)
    t.start()
    time.sleep(0.05)
    assert not acquired.is_set()
    reader.unlock()
    t.join(timeout=5)
    assert acquired.is_set()


def test_readers_share():
    m = RWMutex(1)
    assert len(m) == 1
    done = threading.Event()

    def reader():
        with m.rlocker():
            done.set()

    with m.rlocker():
        t = threading.Thread(target=reader)
        t.start()
        t.join(timeout=5)
        assert done.is_set()


def test_unlock_unlocked_raises():
    m = RWMutex(2)
    with pytest.raises(RuntimeError):
        m.unlock()
    with pytest.raises(RuntimeError):
        m.rlocker().unlock()


def test_writers_serialize_updates():
    m = RWMutex(4)
    assert len(m) == 4
    counter = {"n": 0}

    def work():
        for _ in range(200):
            with m:
                value = counter["n"]
                counter["n"] = value + 1

    threads = [threading.Thread(target=work) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert counter["n"] == 1600