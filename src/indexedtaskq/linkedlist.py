"""Intrusive doubly-linked list giving the queue its FIFO order."""

from collections.abc import Iterator
from typing import Generic, TypeVar

K = TypeVar("K")
V = TypeVar("V")


class Node(Generic[K, V]):
    """A node in the doubly-linked list."""

    __slots__ = ("id", "data", "prev", "next")

    def __init__(self, id: K, data: V) -> None:
        self.id = id
        self.data = data
        self.prev: Node[K, V] | None = None
        self.next: Node[K, V] | None = None

    def __repr__(self) -> str:
        return f"Node({self.id!r}, {self.data!r})"


class DoublyLinkedList(Generic[K, V]):
    """Doubly-linked list with explicit head/tail pointers for O(1) splicing."""

    def __init__(self) -> None:
        self._head: Node[K, V] | None = None
        self._tail: Node[K, V] | None = None
        self._size = 0

    @property
    def head(self) -> Node[K, V] | None:
        """Oldest node, or None if the list is empty."""
        return self._head

    @property
    def tail(self) -> Node[K, V] | None:
        """Newest node, or None if the list is empty."""
        return self._tail

    def append(self, node: Node[K, V]) -> None:
        """Append node after the current tail. O(1)."""
        node.prev = self._tail
        node.next = None
        if self._tail is not None:
            self._tail.next = node
        else:
            self._head = node
        self._tail = node
        self._size += 1

    def remove(self, node: Node[K, V]) -> None:
        """Splice a node out of the list. O(1)."""
        if node.prev is not None:
            node.prev.next = node.next
        else:
            self._head = node.next
        if node.next is not None:
            node.next.prev = node.prev
        else:
            self._tail = node.prev
        node.prev = None
        node.next = None
        self._size -= 1

    def popleft(self) -> Node[K, V] | None:
        """Remove and return the head node. O(1)."""
        node = self._head
        if node is not None:
            self.remove(node)
        return node

    def clear(self) -> None:
        """Unlink every node and reset to the empty state."""
        node = self._head
        while node is not None:
            following = node.next
            node.prev = None
            node.next = None
            node = following
        self._head = None
        self._tail = None
        self._size = 0

    def __iter__(self) -> Iterator[Node[K, V]]:
        """
        Iterate nodes from head to tail.

        The successor is read before each node is yielded, so removing the
        yielded node does not end the iteration early.
        """
        node = self._head
        while node is not None:
            following = node.next
            yield node
            node = following

    def __len__(self) -> int:
        """Return the number of nodes in the list."""
        return self._size

    def __bool__(self) -> bool:
        """Return True if the list is non-empty."""
        return self._size > 0
