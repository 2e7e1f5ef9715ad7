from ..errors import InvalidOperation, require_int, require_ints


class Stack:
    """LIFO container; the top is the end of the backing list."""

    def __init__(self, values=()):
        self._items = require_ints(values)

    def __len__(self):
        return len(self._items)

    def __repr__(self):
        return f"Stack({self._items!r})"

    @property
    def size(self):
        return len(self._items)

    def is_empty(self):
        return not self._items

    def push(self, value):
        self._items.append(require_int(value))

    def pop(self):
        if not self._items:
            raise InvalidOperation("Stack is empty!", operation="pop", size=0)
        return self._items.pop()

    def peek(self):
        if not self._items:
            raise InvalidOperation("Stack is empty!", operation="peek", size=0)
        return self._items[-1]

    def to_list(self):
        """Bottom to top."""
        return list(self._items)
