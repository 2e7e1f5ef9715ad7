"""Singly and doubly linked lists.

Nodes carry a sequential `node_id` (starting at 1) next to their value, so
duplicate values can still be told apart when a node is removed or
highlighted during a traversal.
"""

from ..errors import InvalidOperation, PreconditionViolation, require_int, require_ints
from ..steps import VISIT, Step


class ListNode:
    __slots__ = ("node_id", "value", "next")

    def __init__(self, node_id, value):
        self.node_id = node_id
        self.value = value
        self.next = None

    def __repr__(self):
        return f"{type(self).__name__}(id={self.node_id}, value={self.value})"


class DoublyListNode(ListNode):
    __slots__ = ("prev",)

    def __init__(self, node_id, value):
        super().__init__(node_id, value)
        self.prev = None


class SinglyLinkedList:
    node_class = ListNode

    def __init__(self, values=()):
        self.head = None
        self._size = 0
        self._next_id = 1
        for value in require_ints(values):
            self.append(value)

    def __len__(self):
        return self._size

    def __iter__(self):
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def __repr__(self):
        return f"{type(self).__name__}({self.to_list()!r})"

    def _new_node(self, value):
        node = self.node_class(self._next_id, require_int(value))
        self._next_id += 1
        return node

    def to_list(self):
        return [node.value for node in self]

    def find(self, value):
        """Return the first node holding `value`, or None."""
        for node in self:
            if node.value == value:
                return node
        return None

    def prepend(self, value):
        node = self._new_node(value)
        node.next = self.head
        self.head = node
        self._size += 1
        return node

    def append(self, value):
        node = self._new_node(value)
        if self.head is None:
            self.head = node
        else:
            last = self.head
            while last.next is not None:
                last = last.next
            last.next = node
        self._size += 1
        return node

    def remove(self, node_id):
        prev, node = None, self.head
        while node is not None and node.node_id != node_id:
            prev, node = node, node.next
        if node is None:
            raise InvalidOperation(f"No node with id {node_id}", operation="remove", node_id=node_id)
        if prev is None:
            self.head = node.next
        else:
            prev.next = node.next
        node.next = None
        self._size -= 1
        return node.value

    def traverse(self):
        """Yield one visit step per node from head to tail."""
        snapshot = tuple(self.to_list())
        order = []
        for position, node in enumerate(self):
            order.append(node.value)
            yield Step(VISIT, (node.node_id,), f"Visit node {node.value}", snapshot,
                       meta={"position": position})
        return tuple(order)


class DoublyLinkedList(SinglyLinkedList):
    node_class = DoublyListNode

    def __init__(self, values=()):
        self.tail = None
        super().__init__(values)

    def prepend(self, value):
        node = self._new_node(value)
        node.next = self.head
        if self.head is not None:
            self.head.prev = node
        else:
            self.tail = node
        self.head = node
        self._size += 1
        return node

    def append(self, value):
        node = self._new_node(value)
        node.prev = self.tail
        if self.tail is not None:
            self.tail.next = node
        else:
            self.head = node
        self.tail = node
        self._size += 1
        return node

    def remove(self, node_id):
        node = self.head
        while node is not None and node.node_id != node_id:
            node = node.next
        if node is None:
            raise InvalidOperation(f"No node with id {node_id}", operation="remove", node_id=node_id)
        if node.prev is None:
            self.head = node.next
        else:
            node.prev.next = node.next
        if node.next is None:
            self.tail = node.prev
        else:
            node.next.prev = node.prev
        node.next = node.prev = None
        self._size -= 1
        return node.value

    def traverse_backward(self):
        """Yield one visit step per node from tail to head."""
        snapshot = tuple(self.to_list())
        order = []
        node, position = self.tail, self._size - 1
        while node is not None:
            order.append(node.value)
            yield Step(VISIT, (node.node_id,), f"Visit node {node.value}", snapshot,
                       meta={"position": position})
            node, position = node.prev, position - 1
        return tuple(order)

    def check_links(self):
        """Raise PreconditionViolation if any next/prev pair disagrees."""
        if self.head is not None and self.head.prev is not None:
            raise PreconditionViolation("Head node has a backward link", node_id=self.head.node_id)
        last = None
        for node in self:
            if node.next is not None and node.next.prev is not node:
                raise PreconditionViolation(
                    f"Broken backward link after node {node.node_id}", node_id=node.node_id)
            last = node
        if last is not self.tail:
            raise PreconditionViolation("Tail does not match the last node")
        return True
