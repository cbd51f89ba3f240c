"""Hash functions used by the linked hash table."""

from __future__ import annotations

import threading
from collections.abc import Callable
from enum import IntEnum

from jsoncore.seed import get_random_seed

_MASK32 = 0xFFFFFFFF
_MASK64 = 0xFFFFFFFFFFFFFFFF
LH_PRIME = 0x9E370001


class StringHash(IntEnum):
    """Selectable string hash functions."""

    DEFAULT = 0
    PERLLIKE = 1


def _as_bytes(data: bytes | bytearray | str) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(data)


def _c_string(key: bytes | bytearray | str) -> bytes:
    """Return the key as bytes, cut at the first NUL like a C string."""
    raw = _as_bytes(key)
    end = raw.find(b"\0")
    return raw if end < 0 else raw[:end]


def _rot(x: int, k: int) -> int:
    return ((x << k) | (x >> (32 - k))) & _MASK32


def _mix(a: int, b: int, c: int) -> tuple[int, int, int]:
    a = (a - c) & _MASK32; a ^= _rot(c, 4); c = (c + b) & _MASK32
    b = (b - a) & _MASK32; b ^= _rot(a, 6); a = (a + c) & _MASK32
    c = (c - b) & _MASK32; c ^= _rot(b, 8); b = (b + a) & _MASK32
    a = (a - c) & _MASK32; a ^= _rot(c, 16); c = (c + b) & _MASK32
    b = (b - a) & _MASK32; b ^= _rot(a, 19); a = (a + c) & _MASK32
    c = (c - b) & _MASK32; c ^= _rot(b, 4); b = (b + a) & _MASK32
    return a, b, c


def _final(a: int, b: int, c: int) -> int:
    c ^= b; c = (c - _rot(b, 14)) & _MASK32
    a ^= c; a = (a - _rot(c, 11)) & _MASK32
    b ^= a; b = (b - _rot(a, 25)) & _MASK32
    c ^= b; c = (c - _rot(b, 16)) & _MASK32
    a ^= c; a = (a - _rot(c, 4)) & _MASK32
    b ^= a; b = (b - _rot(a, 14)) & _MASK32
    c ^= b; c = (c - _rot(b, 24)) & _MASK32
    return c


def _words(block: bytes) -> tuple[int, int, int]:
    block = block.ljust(12, b"\0")
    return (
        int.from_bytes(block[0:4], "little"),
        int.from_bytes(block[4:8], "little"),
        int.from_bytes(block[8:12], "little"),
    )


def hashlittle(data: bytes | bytearray | str, initval: int = 0) -> int:
    """Hash a byte string into a 32-bit value (lookup3 hashlittle)."""
    raw = _as_bytes(data)
    length = len(raw)
    a = b = c = (0xDEADBEEF + (length & _MASK32) + initval) & _MASK32

    offset = 0
    while length - offset > 12:
        x, y, z = _words(raw[offset:offset + 12])
        a = (a + x) & _MASK32
        b = (b + y) & _MASK32
        c = (c + z) & _MASK32
        a, b, c = _mix(a, b, c)
        offset += 12

    tail = raw[offset:]
    if not tail:
        return c
    x, y, z = _words(tail)
    a = (a + x) & _MASK32
    b = (b + y) & _MASK32
    c = (c + z) & _MASK32
    return _final(a, b, c)


def perllike_str_hash(key: bytes | bytearray | str) -> int:
    """Simple multiplicative string hash similar to the one perl uses."""
    hashval = 1
    for byte in _c_string(key):
        signed = byte - 256 if byte >= 128 else byte
        hashval = (hashval * 33 + signed) & _MASK32
    return hashval


_seed_lock = threading.Lock()
_seed: int | None = None


def _hash_seed() -> int:
    global _seed
    if _seed is None:
        with _seed_lock:
            if _seed is None:
                seed = get_random_seed()
                while seed == -1:
                    seed = get_random_seed()
                _seed = seed
    return _seed


def char_hash(key: bytes | bytearray | str) -> int:
    """Hash a string with hashlittle, seeded once per process."""
    return hashlittle(_c_string(key), _hash_seed() & _MASK32)


def ptr_hash(key: object) -> int:
    """Hash an object by its identity."""
    product = (id(key) * LH_PRIME) & _MASK64
    if product & (1 << 63):
        product -= 1 << 64
    return (product >> 4) & _MASK64


_string_hashes: dict[StringHash, Callable[[bytes | bytearray | str], int]] = {
    StringHash.DEFAULT: char_hash,
    StringHash.PERLLIKE: perllike_str_hash,
}
_current = char_hash


def set_string_hash(kind: StringHash | int) -> None:
    """Select the hash function used for string keys.

    Raises ValueError if ``kind`` is not a known StringHash value.
    """
    global _current
    try:
        selected = StringHash(kind)
    except ValueError:
        raise ValueError(f"unknown string hash kind: {kind!r}") from None
    _current = _string_hashes[selected]


def current_string_hash() -> Callable[[bytes | bytearray | str], int]:
    """Return the hash function currently selected for string keys."""
    return _current