"""A bounded pool of worker threads that runs submitted callables and recovers from their errors."""

from __future__ import annotations

import threading
import traceback
from collections import deque
from dataclasses import dataclass
from typing import Any, Callable, Optional

from bytekit import logger

DEFAULT_SCALE_THRESHOLD = 1

PanicHandler = Callable[[Any, BaseException], None]


@dataclass
class Config:
    """Pool settings.

    A new worker is started when the number of queued tasks reaches
    ``scale_threshold`` and the pool is below its capacity.
    """

    scale_threshold: int = DEFAULT_SCALE_THRESHOLD


class PoolAlreadyRegisteredError(ValueError):
    """Raised when a pool is registered under a name that is already taken."""


@dataclass
class _Task:
    ctx: Any
    func: Callable[[], Any]


class Pool:
    """Runs callables on at most ``cap`` worker threads, started on demand."""

    def __init__(self, name: str, cap: int, config: Optional[Config] = None) -> None:
        self.name = name
        self._cap = cap
        self.config = config if config is not None else Config()
        self._tasks: deque[_Task] = deque()
        self._lock = threading.Lock()
        self._task_count = 0
        self._worker_count = 0
        self._panic_handler: Optional[PanicHandler] = None

    def __repr__(self) -> str:
        return f"Pool(name={self.name!r}, cap={self._cap})"

    @property
    def cap(self) -> int:
        """The maximum number of workers that scaling will start."""
        return self._cap

    def set_cap(self, cap: int) -> None:
        """Change the maximum number of workers."""
        with self._lock:
            self._cap = cap

    def go(self, f: Callable[[], Any]) -> None:
        """Run ``f`` on a worker without a context."""
        self.ctx_go(None, f)

    def ctx_go(self, ctx: Any, f: Callable[[], Any]) -> None:
        """Queue ``f`` with ``ctx`` and start a worker if the pool should grow."""
        with self._lock:
            self._tasks.append(_Task(ctx, f))
            self._task_count += 1
            start = (
                self._task_count >= self.config.scale_threshold
                and self._worker_count < self._cap
            ) or self._worker_count == 0
            if start:
                self._worker_count += 1
        if start:
            threading.Thread(
                target=self._work, name=f"{self.name}-worker", daemon=True
            ).start()

    def set_panic_handler(self, handler: Optional[PanicHandler]) -> None:
        """Set the callable invoked with ``(ctx, exception)`` after a task fails."""
        self._panic_handler = handler

    def worker_count(self) -> int:
        """Return the number of running workers."""
        with self._lock:
            return self._worker_count

    def _work(self) -> None:
        while True:
            with self._lock:
                if not self._tasks:
                    self._worker_count -= 1
                    return
                task = self._tasks.popleft()
                self._task_count -= 1
            self._run(task)

    def _run(self, task: _Task) -> None:
        try:
            task.func()
        except Exception as exc:
            msg = f"GOPOOL: panic in pool: {self.name}: {exc}: {traceback.format_exc()}"
            logger.ctx_errorf(task.ctx, msg)
            handler = self._panic_handler
            if handler is not None:
                handler(task.ctx, exc)


_default_pool = Pool("gopool.DefaultPool", 10000, Config())

_registry: dict[str, Pool] = {}
_registry_lock = threading.Lock()


def go(f: Callable[[], Any]) -> None:
    """Run ``f`` on the default pool."""
    ctx_go(None, f)


def ctx_go(ctx: Any, f: Callable[[], Any]) -> None:
    """Run ``f`` with ``ctx`` on the default pool."""
    _default_pool.ctx_go(ctx, f)


def set_cap(cap: int) -> None:
    """Change the capacity of the default pool, which every caller shares."""
    _default_pool.set_cap(cap)


def set_panic_handler(handler: Optional[PanicHandler]) -> None:
    """Set the failure handler of the default pool."""
    _default_pool.set_panic_handler(handler)


def register_pool(pool: Pool) -> None:
    """Register ``pool`` under its name; raises PoolAlreadyRegisteredError if taken."""
    with _registry_lock:
        if pool.name in _registry:
            raise PoolAlreadyRegisteredError(f"name: {pool.name} already registered")
        _registry[pool.name] = pool


def get_pool(name: str) -> Optional[Pool]:
    """Return the pool registered under ``name``, or None."""
    with _registry_lock:
        return _registry.get(name)