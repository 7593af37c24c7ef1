"""Type definitions for indexedtaskq."""

from typing import TypeAlias, TypeVar

# Generic type variables for task ids and payloads
K = TypeVar("K")  # Task id type
V = TypeVar("V")  # Payload type
D = TypeVar("D")  # Caller-supplied default returned when no task matches

# (id, data) pair as returned by dequeue_item()/peek_item()/get_item()/items()
TaskItem: TypeAlias = tuple[K, V]
