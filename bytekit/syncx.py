"""A sharded reader/writer lock that favours many readers over few writers."""

from __future__ import annotations

import itertools
import os
import threading
from typing import Any, Optional

_ids = itertools.count()
_local = threading.local()


def shard_id() -> int:
    """Return a small non-negative id that stays fixed for the calling thread."""
    try:
        return _local.id
    except AttributeError:
        _local.id = next(_ids)
        return _local.id


class _RWLock:
    """Reader/writer lock where a waiting writer blocks new readers."""

    def __init__(self) -> None:
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writer = False
        self._writers_waiting = 0

    def acquire_read(self) -> None:
        with self._cond:
            while self._writer or self._writers_waiting:
                self._cond.wait()
            self._readers += 1

    def release_read(self) -> None:
        with self._cond:
            if self._readers <= 0:
                raise RuntimeError("read unlock of unlocked RWMutex")
            self._readers -= 1
            if self._readers == 0:
                self._cond.notify_all()

    def acquire_write(self) -> None:
        with self._cond:
            self._writers_waiting += 1
            try:
                while self._writer or self._readers:
                    self._cond.wait()
            finally:
                self._writers_waiting -= 1
            self._writer = True

    def release_write(self) -> None:
        with self._cond:
            if not self._writer:
                raise RuntimeError("unlock of unlocked RWMutex")
            self._writer = False
            self._cond.notify_all()


class _ReadLocker:
    """Read side of one shard, usable with ``with``."""

    def __init__(self, shard: _RWLock) -> None:
        self._shard = shard

    def lock(self) -> None:
        self._shard.acquire_read()

    def unlock(self) -> None:
        self._shard.release_read()

    def __enter__(self) -> "_ReadLocker":
        self.lock()
        return self

    def __exit__(self, *args: Any) -> None:
        self.unlock()


class RWMutex:
    """Reader/writer lock split into shards.

    Readers take only the shard picked for their thread; writers take every shard.
    Using the object in a ``with`` block takes the write lock.
    """

    def __init__(self, shards: Optional[int] = None) -> None:
        count = shards if shards is not None else (os.cpu_count() or 1)
        if count < 1:
            raise ValueError("shards must be at least 1")
        self._shards = [_RWLock() for _ in range(count)]

    def __len__(self) -> int:
        return len(self._shards)

    def lock(self) -> None:
        """Take the write lock on every shard, in order."""
        for shard in self._shards:
            shard.acquire_write()

    def unlock(self) -> None:
        """Release the write lock on every shard."""
        for shard in self._shards:
            shard.release_write()

    def rlocker(self) -> _ReadLocker:
        """Return the read locker of the calling thread's shard."""
        return _ReadLocker(self._shards[shard_id() % len(self._shards)])

    def __enter__(self) -> "RWMutex":
        self.lock()
        return self

    def __exit__(self, *args: Any) -> None:
        self.unlock()