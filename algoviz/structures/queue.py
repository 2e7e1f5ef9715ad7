from collections import deque

from ..errors import InvalidOperation, require_int, require_ints


class Queue:
    """FIFO container: enqueue at the rear, dequeue from the front."""

    def __init__(self, values=()):
        self._items = deque(require_ints(values))

    def __len__(self):
        return len(self._items)

    def __repr__(self):
        return f"Queue({list(self._items)!r})"

    @property
    def size(self):
        return len(self._items)

    def is_empty(self):
        return not self._items

    def enqueue(self, value):
        self._items.append(require_int(value))

    def dequeue(self):
        if not self._items:
            raise InvalidOperation("Queue is empty!", operation="dequeue", size=0)
        return self._items.popleft()

    def peek(self):
        if not self._items:
            raise InvalidOperation("Queue is empty!", operation="peek", size=0)
        return self._items[0]

    def to_list(self):
        """Front to rear."""
        return list(self._items)
