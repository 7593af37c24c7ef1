"""Main TaskQueue implementation."""

import logging
from collections.abc import Iterator, Mapping
from typing import Generic, overload

from indexedtaskq.errors import TaskNotFoundError
from indexedtaskq.linkedlist import DoublyLinkedList, Node
from indexedtaskq.types import D, K, TaskItem, V

logger = logging.getLogger(__name__)


class TaskQueue(Generic[K, V]):
    """
    Ordered, id-indexed task queue with FIFO semantics and O(1) operations.

    Combines a doubly-linked list (insertion order) with a dictionary from
    task id to list node (random access). Both structures are updated
    together by every mutating operation, so they always describe the same
    set of tasks.

    None of the queue operations raise: missing ids are reported as ``False``
    or ``None``. Only the mapping-style ``queue[id]`` and ``del queue[id]``
    raise ``TaskNotFoundError``.

    Not thread-safe; callers sharing a queue across threads must serialize
    access themselves.
    """

    def __init__(self, initial_tasks: Mapping[K, V] | None = None) -> None:
        """
        Initialize the queue.

        Args:
            initial_tasks: Optional mapping of task id to payload used to seed
                the queue. Tasks are enqueued in the mapping's iteration order,
                which becomes the initial queue order.
        """
        self._index: dict[K, Node[K, V]] = {}
        self._list = DoublyLinkedList[K, V]()

        if initial_tasks:
            for id, data in initial_tasks.items():
                self.enqueue(id, data)

    def enqueue(self, id: K, data: V) -> None:
        """
        Add a task as the newest entry in the queue.

        If ``id`` is already queued, the old entry is removed first and the
        task moves to the back of the queue with the new payload. Use
        ``update()`` to replace a payload without changing its position.
        """
        if id in self._index:
            logger.debug("Repositioning task %r to the back of the queue", id)
            self.remove(id)

        node = Node(id, data)
        self._list.append(node)
        self._index[id] = node

    @overload
    def dequeue(self) -> V | None: ...

    @overload
    def dequeue(self, default: D) -> V | D: ...

    def dequeue(self, default: object = None) -> object:
        """
        Remove and return the payload of the oldest task.

        Args:
            default: Value returned when the queue is empty.

        Returns:
            The payload, or ``default`` if the queue is empty. Use
            ``dequeue_item()`` when payloads may themselves be None.
        """
        item = self.dequeue_item()
        if item is None:
            return default
        return item[1]

    def dequeue_item(self) -> TaskItem[K, V] | None:
        """Remove the oldest task and return its ``(id, data)`` pair, or None if empty."""
        node = self._list.popleft()
        if node is None:
            return None
        del self._index[node.id]
        return (node.id, node.data)

    def remove(self, id: K) -> bool:
        """
        Remove the task with the given id, wherever it is in the queue.

        Returns:
            True if the task was removed, False if it was not queued
        """
        node = self._index.pop(id, None)
        if node is None:
            return False
        self._list.remove(node)
        return True

    @overload
    def get_task(self, id: K) -> V | None: ...

    @overload
    def get_task(self, id: K, default: D) -> V | D: ...

    def get_task(self, id: K, default: object = None) -> object:
        """
        Return the payload for ``id``, or ``default`` if it is not queued.

        Use ``get_item()`` or ``has()`` when payloads may themselves be None.
        """
        node = self._index.get(id)
        return node.data if node is not None else default

    def get_item(self, id: K) -> TaskItem[K, V] | None:
        """Return the ``(id, data)`` pair for ``id``, or None if it is not queued."""
        node = self._index.get(id)
        if node is None:
            return None
        return (node.id, node.data)

    def update(self, id: K, data: V) -> bool:
        """
        Replace the payload of a queued task, keeping its position.

        Returns:
            True if the task was updated, False if it was not queued. No task
            is created for an unknown id.
        """
        node = self._index.get(id)
        if node is None:
            return False
        node.data = data
        return True

    def has(self, id: K) -> bool:
        """Check if a task id is queued."""
        return id in self._index

    @overload
    def peek(self) -> V | None: ...

    @overload
    def peek(self, default: D) -> V | D: ...

    def peek(self, default: object = None) -> object:
        """Return the payload of the oldest task without removing it."""
        item = self.peek_item()
        if item is None:
            return default
        return item[1]

    def peek_item(self) -> TaskItem[K, V] | None:
        """Return the oldest ``(id, data)`` pair without removing it, or None if empty."""
        node = self._list.head
        if node is None:
            return None
        return (node.id, node.data)

    def clear(self) -> None:
        """Remove every task, returning the queue to its initial empty state."""
        logger.debug("Clearing %d queued tasks", len(self._index))
        self._index.clear()
        self._list.clear()

    @property
    def size(self) -> int:
        """Number of queued tasks."""
        return len(self._index)

    @property
    def queue(self) -> list[V]:
        """Snapshot of all payloads, oldest first."""
        return [node.data for node in self._list]

    def ids(self) -> list[K]:
        """Snapshot of all task ids, oldest first."""
        return [node.id for node in self._list]

    def items(self) -> Iterator[TaskItem[K, V]]:
        """Iterate ``(id, data)`` pairs, oldest first."""
        for node in self._list:
            yield (node.id, node.data)

    def __len__(self) -> int:
        return len(self._index)

    def __bool__(self) -> bool:
        return bool(self._index)

    def __contains__(self, id: object) -> bool:
        return id in self._index

    def __iter__(self) -> Iterator[K]:
        """Iterate task ids, oldest first."""
        for node in self._list:
            yield node.id

    def __getitem__(self, id: K) -> V:
        node = self._index.get(id)
        if node is None:
            raise TaskNotFoundError(f"Unknown task id: {id!r}")
        return node.data

    def __delitem__(self, id: K) -> None:
        if not self.remove(id):
            raise TaskNotFoundError(f"Unknown task id: {id!r}")

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self.items())!r})"
