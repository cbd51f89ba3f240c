"""Insertion-ordered hash table with open addressing and linear probing."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional, Union

from jsoncore.hashing import current_string_hash, ptr_hash

HashFn = Callable[[Any], int]
EqualFn = Callable[[Any, Any], bool]
FreeFn = Callable[["Entry"], None]

LOAD_FACTOR = 0.66


class _Slot(Enum):
    EMPTY = "empty"
    FREED = "freed"


@dataclass(eq=False)
class Entry:
    """A key/value record stored in a LinkHash, linked in insertion order."""

    key: Any
    value: Any
    constant_key: bool = False
    next: Optional["Entry"] = field(default=None, repr=False)
    prev: Optional["Entry"] = field(default=None, repr=False)
    index: int = field(default=-1, repr=False)


class LinkHash:
    """Hash table that remembers the order in which entries were inserted.

    Keys are placed by ``hash_fn`` and compared with ``equal_fn``.  When
    ``free_fn`` is given it is called with each entry that is deleted or
    cleared from the table.
    """

    def __init__(
        self,
        size: int,
        hash_fn: HashFn,
        equal_fn: EqualFn,
        free_fn: Optional[FreeFn] = None,
    ) -> None:
        if size <= 0:
            raise ValueError(f"table size must be positive, got {size}")
        self.size = size
        self.count = 0
        self.hash_fn = hash_fn
        self.equal_fn = equal_fn
        self.free_fn = free_fn
        self.head: Optional[Entry] = None
        self.tail: Optional[Entry] = None
        self._slots: list[Union[Entry, _Slot]] = [_Slot.EMPTY] * size

    def get_hash(self, key: Any) -> int:
        """Return the hash of ``key`` as computed by this table."""
        return self.hash_fn(key)

    def insert(self, key: Any, value: Any) -> Entry:
        """Append a new record; existing records with an equal key are kept."""
        return self.insert_with_hash(key, value, self.get_hash(key))

    def insert_with_hash(
        self,
        key: Any,
        value: Any,
        hash_value: int,
        constant_key: bool = False,
    ) -> Entry:
        """Append a new record using a precomputed hash of its key."""
        if self.count >= self.size * LOAD_FACTOR:
            self.resize(self.size * 2)

        n = hash_value % self.size
        while isinstance(self._slots[n], Entry):
            n = (n + 1) % self.size

        entry = Entry(key, value, bool(constant_key), index=n)
        self._slots[n] = entry
        self.count += 1

        if self.tail is None:
            self.head = self.tail = entry
        else:
            self.tail.next = entry
            entry.prev = self.tail
            self.tail = entry
        return entry

    def lookup_entry(self, key: Any) -> Optional[Entry]:
        """Return the first entry whose key equals ``key``, or None."""
        return self.lookup_entry_with_hash(key, self.get_hash(key))

    def lookup_entry_with_hash(self, key: Any, hash_value: int) -> Optional[Entry]:
        """Like lookup_entry, with the key's hash already computed."""
        n = hash_value % self.size
        for _ in range(self.size):
            slot = self._slots[n]
            if slot is _Slot.EMPTY:
                return None
            if isinstance(slot, Entry) and self.equal_fn(slot.key, key):
                return slot
            n = (n + 1) % self.size
        return None

    def lookup(self, key: Any) -> Any:
        """Return the value stored for ``key``; raise KeyError if absent."""
        entry = self.lookup_entry(key)
        if entry is None:
            raise KeyError(key)
        return entry.value

    def delete_entry(self, entry: Entry) -> None:
        """Remove ``entry`` from the table; raise KeyError if it is not in it."""
        idx = entry.index
        if not 0 <= idx < self.size or self._slots[idx] is not entry:
            raise KeyError(entry.key)

        self.count -= 1
        if self.free_fn is not None:
            self.free_fn(entry)
        self._slots[idx] = _Slot.FREED

        if entry.prev is None:
            self.head = entry.next
        else:
            entry.prev.next = entry.next
        if entry.next is None:
            self.tail = entry.prev
        else:
            entry.next.prev = entry.prev
        entry.next = entry.prev = None
        entry.index = -1

    def delete(self, key: Any) -> None:
        """Remove the first record for ``key``; raise KeyError if absent."""
        entry = self.lookup_entry(key)
        if entry is None:
            raise KeyError(key)
        self.delete_entry(entry)

    def resize(self, new_size: int) -> None:
        """Rebuild the table with ``new_size`` slots, keeping the order."""
        if new_size <= 0:
            raise ValueError(f"table size must be positive, got {new_size}")
        fresh = LinkHash(new_size, self.hash_fn, self.equal_fn)
        for entry in self._entries():
            fresh.insert_with_hash(
                entry.key, entry.value, fresh.get_hash(entry.key), entry.constant_key
            )
        self._slots = fresh._slots
        self.size = fresh.size
        self.count = fresh.count
        self.head = fresh.head
        self.tail = fresh.tail

    def clear(self) -> None:
        """Remove every record, passing each to the free function if any."""
        if self.free_fn is not None:
            for entry in self._entries():
                self.free_fn(entry)
        self._slots = [_Slot.EMPTY] * self.size
        self.count = 0
        self.head = self.tail = None

    def _entries(self) -> Iterator[Entry]:
        entry = self.head
        while entry is not None:
            following = entry.next
            yield entry
            entry = following

    def __len__(self) -> int:
        return self.count

    def __iter__(self) -> Iterator[Any]:
        """Yield keys in insertion order; deleting while iterating is safe."""
        for entry in self._entries():
            yield entry.key

    def __contains__(self, key: Any) -> bool:
        return self.lookup_entry(key) is not None

    def items(self) -> Iterator[tuple[Any, Any]]:
        """Yield (key, value) pairs in insertion order."""
        for entry in self._entries():
            yield entry.key, entry.value


def _c_bytes(key: Any) -> bytes:
    raw = key.encode("utf-8") if isinstance(key, str) else bytes(key)
    end = raw.find(b"\0")
    return raw if end < 0 else raw[:end]


def _string_equal(k1: Any, k2: Any) -> bool:
    return _c_bytes(k1) == _c_bytes(k2)


def _identity_equal(k1: Any, k2: Any) -> bool:
    return k1 is k2


def string_table(size: int, free_fn: Optional[FreeFn] = None) -> LinkHash:
    """Create a table keyed by strings, using the selected string hash."""
    return LinkHash(size, current_string_hash(), _string_equal, free_fn)


def identity_table(size: int, free_fn: Optional[FreeFn] = None) -> LinkHash:
    """Create a table keyed by object identity."""
    return LinkHash(size, ptr_hash, _identity_equal, free_fn)