"""Exception classes for indexedtaskq."""


class TaskQueueError(Exception):
    """Base exception for all indexedtaskq errors."""


class TaskNotFoundError(TaskQueueError, KeyError):
    """Raised by ``queue[id]`` and ``del queue[id]`` when the id is not queued."""

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return Exception.__str__(self)
