from .array_list import DynamicArray
from .linked_list import DoublyLinkedList, SinglyLinkedList
from .queue import Queue
from .stack import Stack

__all__ = ["DynamicArray", "Stack", "Queue", "SinglyLinkedList", "DoublyLinkedList"]
