"""Pools of reusable byte buffers whose capacities are powers of two."""

from __future__ import annotations

from collections import deque
from typing import Optional, Union

MAX_SIZE = 46

_caches: list[deque[bytearray]] = [deque() for _ in range(MAX_SIZE)]


def bsr(x: int) -> int:
    """Return the index of the highest set bit of ``x`` (-1 for zero)."""
    if x < 0:
        raise ValueError("bsr requires a non-negative integer")
    return x.bit_length() - 1


def is_power_of_two(x: int) -> bool:
    """Return whether ``x`` is a power of two; zero counts as one."""
    return (x & -x) == x


def calc_index(size: int) -> int:
    """Return the pool index whose buffers hold at least ``size`` bytes."""
    if size == 0:
        return 0
    if is_power_of_two(size):
        return bsr(size)
    return bsr(size) + 1


def malloc(size: int, capacity: Optional[int] = None) -> memoryview:
    """Return a writable view of ``size`` bytes from a pooled buffer.

    The underlying buffer (``view.obj``) holds at least ``capacity`` bytes
    when given; its length is a power of two. Contents are not cleared.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    needed = size
    if capacity is not None and capacity > size:
        needed = capacity
    index = calc_index(needed)
    if index >= MAX_SIZE:
        raise ValueError(f"requested capacity {needed} exceeds the largest pool")
    try:
        buf = _caches[index].pop()
    except IndexError:
        buf = bytearray(1 << index)
    return memoryview(buf)[:size]


def free(buf: Union[memoryview, bytearray]) -> None:
    """Return a buffer obtained from ``malloc`` to its pool.

    Buffers whose capacity is not a power of two are ignored.
    """
    backing = buf.obj if isinstance(buf, memoryview) else buf
    if not isinstance(backing, bytearray):
        return
    size = len(backing)
    if size == 0 or not is_power_of_two(size):
        return
    index = bsr(size)
    if index >= MAX_SIZE:
        return
    _caches[index].append(backing)