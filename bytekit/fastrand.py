"""Pseudo-random numbers built on a shared 32-bit source."""

from __future__ import annotations

import random

_rng = random.Random()

_MAX_INT31 = (1 << 31) - 1
_MAX_INT63 = (1 << 63) - 1
_MASK32 = (1 << 32) - 1


def uint32() -> int:
    """Return a pseudo-random 32-bit unsigned value."""
    return _rng.getrandbits(32)


def uint64() -> int:
    """Return a pseudo-random 64-bit unsigned value."""
    return (uint32() << 32) | uint32()


def rand_int() -> int:
    """Return a non-negative pseudo-random int."""
    return int63()


def int31() -> int:
    """Return a non-negative pseudo-random 31-bit integer."""
    return uint32() & _MAX_INT31


def int63() -> int:
    """Return a non-negative pseudo-random 63-bit integer."""
    return uint64() & _MAX_INT63


def int63n(n: int) -> int:
    """Return a non-negative pseudo-random number in [0, n)."""
    if n <= 0 or n > _MAX_INT63:
        raise ValueError("invalid argument to int63n")
    if n & (n - 1) == 0:
        return int63() & (n - 1)
    limit = _MAX_INT63 - (1 << 63) % n
    v = int63()
    while v > limit:
        v = int63()
    return v % n


def int31n(n: int) -> int:
    """Return a non-negative pseudo-random number in [0, n) by multiply-shift reduction."""
    if n <= 0 or n > _MAX_INT31:
        raise ValueError("invalid argument to int31n")
    prod = uint32() * n
    low = prod & _MASK32
    if low < n:
        thresh = ((1 << 32) - n) % n
        while low < thresh:
            prod = uint32() * n
            low = prod & _MASK32
    return prod >> 32


def intn(n: int) -> int:
    """Return a non-negative pseudo-random number in [0, n)."""
    if n <= 0:
        raise ValueError("invalid argument to intn")
    if n <= _MAX_INT31:
        return int31n(n)
    return int63n(n)


def float64() -> float:
    """Return a pseudo-random float in [0.0, 1.0) with 53 bits of precision."""
    return int63n(1 << 53) / (1 << 53)


def float32() -> float:
    """Return a pseudo-random float in [0.0, 1.0) with 24 bits of precision."""
    return int31n(1 << 24) / (1 << 24)


def uint32n(n: int) -> int:
    """Return a pseudo-random number in [0, n) for a 32-bit unsigned ``n``."""
    if n < 0 or n > _MASK32:
        raise ValueError("uint32n argument must fit in 32 unsigned bits")
    return (uint32() * n) >> 32


def uint64n(n: int) -> int:
    """Return a pseudo-random number in [0, n); raises ZeroDivisionError for 0."""
    return uint64() % n