"""Growable byte buffer used when building serialized output."""

from __future__ import annotations

from typing import Union

_INITIAL_CAPACITY = 32

BytesLike = Union[bytes, bytearray, memoryview, str]


def _to_bytes(data: BytesLike) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(data)


class PrintBuffer:
    """An append-only byte buffer that tracks its allocated capacity.

    The capacity starts at 32 bytes and grows to at least double its
    previous value whenever an append or fill would not leave room for a
    terminating byte.
    """

    def __init__(self) -> None:
        self._data = bytearray()
        self._capacity = _INITIAL_CAPACITY

    @property
    def capacity(self) -> int:
        """Number of bytes currently reserved for the buffer."""
        return self._capacity

    def _extend(self, min_size: int) -> None:
        if self._capacity >= min_size:
            return
        new_size = self._capacity * 2
        if new_size < min_size + 8:
            new_size = min_size + 8
        self._capacity = new_size

    def append(self, data: BytesLike) -> int:
        """Append ``data`` and return the number of bytes appended."""
        raw = _to_bytes(data)
        self._extend(len(self._data) + len(raw) + 1)
        self._data += raw
        return len(raw)

    def memset(self, offset: int, value: Union[int, str, bytes], length: int) -> None:
        """Write ``length`` copies of ``value`` starting at ``offset``.

        An offset of -1 starts at the end of the current data.  The buffer
        grows as needed; its length never shrinks.
        """
        if isinstance(value, (str, bytes)):
            raw = _to_bytes(value)
            if len(raw) != 1:
                raise ValueError("fill value must be a single byte")
            byte = raw[0]
        else:
            byte = value
        if not 0 <= byte <= 255:
            raise ValueError(f"fill value out of range: {byte}")
        if length < 0:
            raise ValueError(f"length must not be negative, got {length}")
        if offset == -1:
            offset = len(self._data)
        elif offset < 0:
            raise ValueError(f"invalid offset: {offset}")

        size_needed = offset + length
        self._extend(size_needed)
        if offset > len(self._data):
            self._data += bytes(offset - len(self._data))
        self._data[offset:size_needed] = bytes([byte]) * length

    def sprintf(self, fmt: str, *args: object) -> int:
        """Append ``fmt`` formatted with ``args``; return the bytes appended."""
        return self.append(fmt % args)

    def reset(self) -> None:
        """Discard the contents, keeping the capacity."""
        self._data.clear()

    def getvalue(self) -> bytes:
        """Return the current contents."""
        return bytes(self._data)

    def __len__(self) -> int:
        return len(self._data)