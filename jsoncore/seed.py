"""Source of random seeds for the string hash function."""

from __future__ import annotations

import os
import time

_TIME_MULTIPLIER = 433494437
_MASK32 = 0xFFFFFFFF


def _to_int32(value: int) -> int:
    value &= _MASK32
    return value - (1 << 32) if value & 0x80000000 else value


def _urandom_seed() -> int:
    return int.from_bytes(os.urandom(4), "little", signed=True)


def _time_seed() -> int:
    return _to_int32(int(time.time()) * _TIME_MULTIPLIER)


def get_random_seed() -> int:
    """Return a random signed 32-bit seed.

    The operating system's random source is preferred; when it is not
    available the seed is derived from the current time.
    """
    try:
        return _urandom_seed()
    except (NotImplementedError, OSError):
        return _time_seed()