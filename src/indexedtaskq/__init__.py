"""indexedtaskq - Ordered, id-indexed task queue with FIFO semantics and O(1) operations."""

from indexedtaskq.core import TaskQueue
from indexedtaskq.errors import TaskNotFoundError, TaskQueueError
from indexedtaskq.linkedlist import DoublyLinkedList, Node
from indexedtaskq.types import TaskItem

__version__ = "0.0.1"

__all__ = [
    "TaskQueue",
    "Node",
    "DoublyLinkedList",
    "TaskItem",
    "TaskQueueError",
    "TaskNotFoundError",
]
