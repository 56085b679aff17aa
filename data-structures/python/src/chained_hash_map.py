"""
Chained hash map with string keys.

Keys are hashed by summing their character codes times a small prime and
taking the result modulo the current bucket count. Collisions are resolved by
chaining entries in a per-bucket singly linked list. The bucket count doubles
before an insert would push the load factor past 0.75, and every entry is
rehashed into the new buckets.
"""

import logging

from hash_chain import Chain

logger = logging.getLogger(__name__)

DEFAULT_CAPACITY = 16
LOAD_FACTOR_THRESHOLD = 0.75
HASH_MULTIPLIER = 11

_MISSING = object()


def hash_key(key, capacity):
    """Map key to a bucket index in [0, capacity)."""
    total = 0
    for char in key:
        total += ord(char) * HASH_MULTIPLIER
    return total % capacity


class ChainedHashMap:
    def __init__(self, capacity=DEFAULT_CAPACITY):
        if not isinstance(capacity, int) or isinstance(capacity, bool):
            raise TypeError("capacity must be an integer")
        if capacity < 1:
            raise ValueError("capacity must be positive")
        self._capacity = capacity
        self._size = 0
        self._buckets = [None] * capacity

    @property
    def capacity(self):
        return self._capacity

    def _bucket_index(self, key):
        return hash_key(key, self._capacity)

    def _find_entry(self, key):
        chain = self._buckets[self._bucket_index(key)]
        if chain is None:
            return None
        return chain.find(key)

    def _resize(self):
        old_buckets = self._buckets
        old_capacity = self._capacity
        self._capacity *= 2
        self._buckets = [None] * self._capacity
        for chain in old_buckets:
            if chain is None:
                continue
            for entry in chain:
                index = self._bucket_index(entry.key)
                if self._buckets[index] is None:
                    self._buckets[index] = Chain()
                self._buckets[index].append(entry.key, entry.value)
        logger.debug(
            "resized buckets %d -> %d (%d keys)", old_capacity, self._capacity, self._size
        )

    def set(self, key, value):
        # Checked before the lookup, so updating an existing key can also grow the map.
        if (self._size + 1) / self._capacity > LOAD_FACTOR_THRESHOLD:
            self._resize()
        index = self._bucket_index(key)
        chain = self._buckets[index]
        if chain is None:
            chain = Chain()
            self._buckets[index] = chain
        else:
            entry = chain.find(key)
            if entry is not None:
                entry.value = value
                return
        chain.append(key, value)
        self._size += 1

    def get(self, key):
        """Return the value stored under key, or None if it is absent.

        A key stored with a None value also returns None; use has(),
        get_or() or indexing to tell the two apart.
        """
        entry = self._find_entry(key)
        if entry is None:
            return None
        return entry.value

    def get_or(self, key, default):
        entry = self._find_entry(key)
        if entry is None:
            return default
        return entry.value

    def has(self, key):
        return self._find_entry(key) is not None

    def remove(self, key):
        index = self._bucket_index(key)
        chain = self._buckets[index]
        if chain is None:
            return False
        if not chain.remove(key):
            return False
        if chain.is_empty():
            self._buckets[index] = None
        self._size -= 1
        return True

    def length(self):
        return self._size

    def is_empty(self):
        return self._size == 0

    def load_factor(self):
        return self._size / self._capacity

    def clear(self):
        self._buckets = [None] * self._capacity
        self._size = 0

    def _iter_entries(self):
        for chain in self._buckets:
            if chain is None:
                continue
            yield from chain

    def keys(self):
        return [entry.key for entry in self._iter_entries()]

    def values(self):
        return [entry.value for entry in self._iter_entries()]

    def items(self):
        return [(entry.key, entry.value) for entry in self._iter_entries()]

    def entries(self):
        return [f"Key: {key} | Value: {value}" for key, value in self.items()]

    def chain_lengths(self):
        return [0 if chain is None else len(chain) for chain in self._buckets]

    def copy(self):
        """Create a copy of this map with the same capacity.

        Note: values are copied shallowly. Mutable values are shared between
        the original and the copy.
        """
        new_map = ChainedHashMap(self._capacity)
        for key, value in self.items():
            new_map.set(key, value)
        return new_map

    def __len__(self):
        return self._size

    def __contains__(self, key):
        return self.has(key)

    def __getitem__(self, key):
        value = self.get_or(key, _MISSING)
        if value is _MISSING:
            raise KeyError(key)
        return value

    def __setitem__(self, key, value):
        self.set(key, value)

    def __delitem__(self, key):
        if not self.remove(key):
            raise KeyError(key)

    def __iter__(self):
        for entry in self._iter_entries():
            yield entry.key

    def __repr__(self):
        return (
            f"ChainedHashMap(capacity={self._capacity}, length={self._size}, "
            f"load_factor={self.load_factor():.4f})"
        )
