class Chain:
    """Singly linked chain of key/value entries owned by one hash bucket."""

    class Entry:
        def __init__(self, key, value=None, next=None):
            self.key = key
            self.value = value
            self.next = next

        def __repr__(self):
            return f"Entry({self.key!r}, {self.value!r})"

    def __init__(self):
        self._head = None
        self._tail = None
        self._size = 0

    def find(self, key):
        current = self._head
        while current is not None:
            if current.key == key:
                return current
            current = current.next
        return None

    def append(self, key, value=None):
        entry = self.Entry(key, value)
        if self._tail is None:
            self._head = entry
            self._tail = entry
        else:
            self._tail.next = entry
            self._tail = entry
        self._size += 1
        return entry

    def remove(self, key):
        previous = None
        current = self._head
        while current is not None and current.key != key:
            previous = current
            current = current.next
        if current is None:
            return False
        if previous is None:
            self._head = current.next
        else:
            previous.next = current.next
        if current is self._tail:
            self._tail = previous
        current.next = None
        self._size -= 1
        return True

    def size(self):
        return self._size

    def is_empty(self):
        return self._size == 0

    def __iter__(self):
        current = self._head
        while current is not None:
            yield current
            current = current.next

    def __len__(self):
        return self._size
