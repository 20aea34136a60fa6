"""64-bit wyhash: one-shot hashing and an incremental digest."""

from __future__ import annotations

import struct
from typing import Union

BytesLike = Union[bytes, bytearray, memoryview]

DEFAULT_SEED = 0xA0761D6478BD642F
_S1 = 0xE7037ED1A0B428DB
_S2 = 0x8EBC6AF09C88C6E3
_S3 = 0x589965CC75374CC3
_S4 = 0x1D8E4E27C47D124F

_MASK64 = (1 << 64) - 1
_BLOCK = 64

_read64 = struct.Struct("<Q").unpack_from
_read32 = struct.Struct("<I").unpack_from


def _wymix(a: int, b: int) -> int:
    product = a * b
    return (product >> 64) ^ (product & _MASK64)


def _mix_block(buf: BytesLike, off: int, seed: int, see1: int) -> tuple[int, int]:
    """Fold one 64-byte block at ``off`` into the two running seeds."""
    seed = _wymix(_read64(buf, off)[0] ^ _S1, _read64(buf, off + 8)[0] ^ seed) ^ _wymix(
        _read64(buf, off + 16)[0] ^ _S2, _read64(buf, off + 24)[0] ^ seed
    )
    see1 = _wymix(_read64(buf, off + 32)[0] ^ _S3, _read64(buf, off + 40)[0] ^ see1) ^ _wymix(
        _read64(buf, off + 48)[0] ^ _S4, _read64(buf, off + 56)[0] ^ see1
    )
    return seed, see1


def _finish(buf: BytesLike, off: int, remaining: int, seed: int, length: int) -> int:
    """Hash the final ``remaining`` (at most 64) bytes starting at ``off``."""
    while remaining > 16:
        seed = _wymix(_read64(buf, off)[0] ^ _S1, _read64(buf, off + 8)[0] ^ seed)
        off += 16
        remaining -= 16

    if remaining == 0:
        return _wymix(_S1, _wymix(_S1, seed))
    if remaining < 4:
        a = (buf[off] << 16) | (buf[off + (remaining >> 1)] << 8) | buf[off + remaining - 1]
        return _wymix(_S1 ^ length, _wymix(a ^ _S1, seed))
    if remaining == 4:
        a = _read32(buf, off)[0]
        return _wymix(_S1 ^ length, _wymix(a ^ _S1, seed))
    if remaining < 8:
        a = _read32(buf, off)[0]
        b = _read32(buf, off + remaining - 4)[0]
        return _wymix(_S1 ^ length, _wymix(a ^ _S1, b ^ seed))
    if remaining == 8:
        a = _read64(buf, off)[0]
        return _wymix(_S1 ^ length, _wymix(a ^ _S1, seed))
    a = _read64(buf, off)[0]
    b = _read64(buf, off + remaining - 8)[0]
    return _wymix(_S1 ^ length, _wymix(a ^ _S1, b ^ seed))


def sum64(data: BytesLike, seed: int = DEFAULT_SEED) -> int:
    """Return the 64-bit wyhash of ``data`` under ``seed``."""
    buf = bytes(data)
    seed &= _MASK64
    length = len(buf)
    off = 0
    remaining = length

    if remaining > _BLOCK:
        see1 = seed
        while remaining > _BLOCK:
            seed, see1 = _mix_block(buf, off, seed, see1)
            off += _BLOCK
            remaining -= _BLOCK
        seed ^= see1

    return _finish(buf, off, remaining, seed, length)


def sum64_string(data: str, seed: int = DEFAULT_SEED) -> int:
    """Return the 64-bit wyhash of the UTF-8 encoding of ``data``."""
    return sum64(data.encode("utf-8"), seed)


class Digest:
    """Incremental wyhash; feeding data in pieces gives the same result as ``sum64``."""

    digest_size = 8
    block_size = _BLOCK

    def __init__(self, seed: int = DEFAULT_SEED) -> None:
        seed &= _MASK64
        self.init_seed = seed
        self.seed = seed
        self._see1 = seed
        self._buf = bytearray()
        self._total = 0

    def reset(self) -> None:
        """Drop all written data and restore the seed to ``init_seed``."""
        self.seed = self.init_seed
        self._see1 = self.init_seed
        self._buf.clear()
        self._total = 0

    def write(self, data: BytesLike) -> int:
        """Add ``data`` to the running hash and return the number of bytes taken."""
        view = memoryview(bytes(data))
        size = len(view)
        self._total += size

        if len(self._buf) + size <= _BLOCK:
            self._buf += view
            return size

        if self._buf:
            take = _BLOCK - len(self._buf)
            self._buf += view[:take]
            view = view[take:]
            self.seed, self._see1 = _mix_block(self._buf, 0, self.seed, self._see1)
            self._buf.clear()

        seed, see1 = self.seed, self._see1
        off = 0
        while len(view) - off > _BLOCK:
            seed, see1 = _mix_block(view, off, seed, see1)
            off += _BLOCK
        self.seed, self._see1 = seed, see1

        self._buf += view[off:]
        return size

    def sum64(self) -> int:
        """Return the hash of everything written so far."""
        if self._total <= _BLOCK:
            return sum64(bytes(self._buf), self.seed)
        return _finish(self._buf, 0, len(self._buf), self.seed ^ self._see1, self._total)

    def sum(self, prefix: BytesLike = b"") -> bytes:
        """Return ``prefix`` followed by the current hash in big-endian order."""
        return bytes(prefix) + self.sum64().to_bytes(8, "big")