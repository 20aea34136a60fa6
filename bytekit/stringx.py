"""String helpers that count in Unicode code points rather than bytes."""

from __future__ import annotations

import sys
from typing import Iterable, Union

from bytekit import fastrand

_REPLACEMENT = "\ufffd"


class DecodeRuneError(ValueError):
    """Raised when text cannot be decoded as valid UTF-8 code points."""

    def __init__(self, message: str = "error occurred on rune decoding") -> None:
        super().__init__(message)


def _check_char(ch: str) -> None:
    if len(ch) != 1:
        raise ValueError(f"expected a single character, got {ch!r}")


def _pad(s: str, size: int, ch: str, left: bool) -> str:
    if size <= 0:
        return s
    pads = size - len(s)
    if pads <= 0:
        return s
    fill = repeat_char(ch, pads)
    return fill + s if left else s + fill


def pad_left_char(s: str, size: int, ch: str) -> str:
    """Pad ``s`` on the left with ``ch`` up to ``size`` characters."""
    return _pad(s, size, ch, left=True)


def pad_left_space(s: str, size: int) -> str:
    """Pad ``s`` on the left with spaces up to ``size`` characters."""
    return pad_left_char(s, size, " ")


def pad_right_char(s: str, size: int, ch: str) -> str:
    """Pad ``s`` on the right with ``ch`` up to ``size`` characters."""
    return _pad(s, size, ch, left=False)


def pad_right_space(s: str, size: int) -> str:
    """Pad ``s`` on the right with spaces up to ``size`` characters."""
    return pad_right_char(s, size, " ")


def pad_center_char(s: str, size: int, ch: str) -> str:
    """Center ``s`` in ``size`` characters; any odd pad goes to the right."""
    if size <= 0:
        return s
    length = len(s)
    pads = size - length
    if pads <= 0:
        return s
    left = pads // 2
    right = size - left - length
    return repeat_char(ch, left) + s + repeat_char(ch, right)


def pad_center_space(s: str, size: int) -> str:
    """Center ``s`` in ``size`` characters using spaces."""
    return pad_center_char(s, size, " ")


def repeat_char(ch: str, repeat: int) -> str:
    """Return ``ch`` repeated ``repeat`` times, or an empty string if not positive."""
    _check_char(ch)
    if repeat <= 0:
        return ""
    return ch * repeat


def remove_char(s: str, ch: str) -> str:
    """Remove every occurrence of the character ``ch`` from ``s``."""
    _check_char(ch)
    if not s:
        return s
    return s.replace(ch, "")


def remove_string(s: str, substring: str) -> str:
    """Remove every occurrence of ``substring`` from ``s``."""
    if not s or not substring:
        return s
    return s.replace(substring, "")


def rotate(s: str, shift: int) -> str:
    """Circularly shift ``s`` right by ``shift`` (left when negative).

    The shift is reduced modulo the UTF-8 byte length of ``s``.
    """
    if shift == 0 or not s:
        return s
    byte_len = len(s.encode("utf-8", "surrogatepass"))
    shift_mod = abs(shift) % byte_len
    if shift < 0:
        shift_mod = -shift_mod
    if shift_mod == 0:
        return s
    offset = -shift_mod
    return sub_start(s, offset) + sub(s, 0, offset)


def sub(s: str, start: int, end: int) -> str:
    """Return the characters of ``s`` in [start, end), clamping out-of-range indices.

    Negative indices count from the end, as in Python slicing.
    """
    if not s:
        return ""
    length = len(s)
    if end < 0:
        end += length
    if end > length:
        end = length
    if start < 0:
        start += length
    if start > end:
        return ""
    start = max(start, 0)
    end = max(end, 0)
    return s[start:end]


def sub_start(s: str, start: int) -> str:
    """Return the characters of ``s`` from ``start`` to the end."""
    return sub(s, start, sys.maxsize)


def reverse(s: Union[str, bytes, bytearray]) -> str:
    """Return ``s`` with its code points in reverse order.

    Bytes are decoded as UTF-8 first. Raises DecodeRuneError for undecodable
    input or input holding the replacement character.
    """
    if isinstance(s, (bytes, bytearray)):
        try:
            s = bytes(s).decode("utf-8")
        except UnicodeDecodeError as exc:
            raise DecodeRuneError() from exc
    if not s:
        return s
    if _REPLACEMENT in s:
        raise DecodeRuneError()
    try:
        s.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise DecodeRuneError() from exc
    return s[::-1]


def must_reverse(s: Union[str, bytes, bytearray]) -> str:
    """Reverse ``s``; any decoding failure propagates as DecodeRuneError."""
    return reverse(s)


def shuffle(s: str) -> str:
    """Return the characters of ``s`` in a random order."""
    if not s:
        return s
    chars = list(s)
    for i in range(len(chars) - 1, 0, -1):
        j = fastrand.intn(i + 1)
        if i != j:
            chars[i], chars[j] = chars[j], chars[i]
    return "".join(chars)


def contains_any_substrings(s: str, subs: Iterable[str]) -> bool:
    """Return whether ``s`` contains any of ``subs``."""
    return any(part in s for part in subs)


def is_alpha(s: str) -> bool:
    """Return whether every character of ``s`` is a Unicode letter."""
    return all(c.isalpha() for c in s)


def is_alphanumeric(s: str) -> bool:
    """Return whether every character of ``s`` is a Unicode letter or decimal digit."""
    return all(c.isalpha() or c.isdecimal() for c in s)


def is_numeric(s: str) -> bool:
    """Return whether every character of ``s`` is a decimal digit."""
    return all(c.isdecimal() for c in s)