import pytest

from algoviz.errors import InputFormatError, InvalidOperation, PreconditionViolation
from algoviz.steps import VISIT
from algoviz.structures import DoublyLinkedList, DynamicArray, Queue, SinglyLinkedList, Stack
from conftest import collect


def test_stack_is_lifo():
    stack = Stack([1, 2])
    stack.push(3)
    assert stack.peek() == 3
    assert stack.pop() == 3
    assert stack.pop() == 2
    assert stack.to_list() == [1]
    assert stack.size == 1


def test_pop_on_empty_stack_is_invalid_operation():
    stack = Stack()
    with pytest.raises(InvalidOperation) as excinfo:
        stack.pop()
    assert excinfo.value.message == "Stack is empty!"
    assert excinfo.value.context["size"] == 0
    assert stack.is_empty()


def test_queue_is_fifo():
    queue = Queue()
    for value in (5, 6, 7):
        queue.enqueue(value)
    assert queue.peek() == 5
    assert queue.dequeue() == 5
    assert queue.to_list() == [6, 7]


def test_dequeue_on_empty_queue():
    with pytest.raises(InvalidOperation, match="Queue is empty!"):
        Queue().dequeue()


def test_containers_reject_non_integers():
    with pytest.raises(InputFormatError):
        Stack().push("3")
    with pytest.raises(InputFormatError):
        Queue([1, True])
    with pytest.raises(InputFormatError):
        DynamicArray([1.5])


def test_dynamic_array_index_operations():
    arr = DynamicArray([10, 20, 30])
    arr.insert(1, 15)
    arr.set(0, 5)
    assert arr.to_list() == [5, 15, 20, 30]
    assert arr.delete_at(3) == 30
    assert arr.get(2) == 20
    assert len(arr) == 3

    with pytest.raises(InvalidOperation):
        arr.get(3)
    with pytest.raises(InvalidOperation):
        arr.delete_at(-1)


def test_dynamic_array_traverse_visits_each_index():
    steps, result = collect(DynamicArray([4, 8, 15]).traverse())
    assert [s.kind for s in steps] == [VISIT] * 3
    assert [s.indices for s in steps] == [(0,), (1,), (2,)]
    assert result == (4, 8, 15)


def test_singly_linked_list_ids_tell_duplicates_apart():
    lst = SinglyLinkedList([7, 7, 9])
    ids = [node.node_id for node in lst]
    assert ids == [1, 2, 3]

    assert lst.remove(2) == 7
    assert lst.to_list() == [7, 9]
    assert [node.node_id for node in lst] == [1, 3]

    new_head = lst.prepend(1)
    assert new_head.node_id == 4
    assert lst.to_list() == [1, 7, 9]


def test_remove_missing_node_is_invalid_operation():
    lst = SinglyLinkedList([1])
    with pytest.raises(InvalidOperation):
        lst.remove(99)


def test_linked_list_traversal_steps():
    lst = SinglyLinkedList([3, 1, 2])
    steps, order = collect(lst.traverse())
    assert order == (3, 1, 2)
    assert [s.indices[0] for s in steps] == [1, 2, 3]
    assert all(s.snapshot == (3, 1, 2) for s in steps)


def test_doubly_linked_list_links_stay_consistent():
    lst = DoublyLinkedList([1, 2, 3])
    lst.prepend(0)
    lst.remove(3)  # the node holding 3
    assert lst.to_list() == [0, 1, 2]
    assert lst.tail.value == 2
    assert lst.check_links()

    _, backward = collect(lst.traverse_backward())
    assert backward == (2, 1, 0)


def test_doubly_linked_list_remove_tail_and_head():
    lst = DoublyLinkedList([1, 2])
    lst.remove(2)
    assert lst.tail is lst.head
    lst.remove(1)
    assert lst.head is None and lst.tail is None
    assert len(lst) == 0
    assert lst.check_links()


def test_broken_backward_link_is_detected():
    lst = DoublyLinkedList([1, 2, 3])
    lst.head.next.prev = None
    with pytest.raises(PreconditionViolation):
        lst.check_links()
