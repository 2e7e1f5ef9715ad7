from ..errors import InvalidOperation, require_int, require_ints
from ..steps import VISIT, Step


class DynamicArray:
    """Index-addressable sequence of integers with O(1) access by index."""

    def __init__(self, values=()):
        self._items = require_ints(values)

    def __len__(self):
        return len(self._items)

    def __iter__(self):
        return iter(list(self._items))

    def __repr__(self):
        return f"DynamicArray({self._items!r})"

    def _check_index(self, index, upper):
        require_int(index, "index")
        if not 0 <= index < upper:
            raise InvalidOperation(
                f"Index {index} is out of range for an array of size {len(self._items)}",
                index=index, size=len(self._items),
            )

    def get(self, index):
        self._check_index(index, len(self._items))
        return self._items[index]

    def set(self, index, value):
        self._check_index(index, len(self._items))
        self._items[index] = require_int(value)

    def append(self, value):
        self._items.append(require_int(value))

    def insert(self, index, value):
        self._check_index(index, len(self._items) + 1)
        self._items.insert(index, require_int(value))

    def delete_at(self, index):
        self._check_index(index, len(self._items))
        return self._items.pop(index)

    def to_list(self):
        return list(self._items)

    def traverse(self):
        """Yield one visit step per index, left to right."""
        snapshot = tuple(self._items)
        for i, value in enumerate(snapshot):
            yield Step(VISIT, (i,), f"Visit index {i} (value {value})", snapshot, meta={"i": i})
        return snapshot
