"""Randomized tests checking the queue against a simple reference model."""

import random

import pytest

from indexedtaskq import TaskQueue


def assert_consistent(queue: TaskQueue[str, int]) -> None:
    """Check that the index and the linked list describe the same tasks."""
    index = queue._index
    lst = queue._list

    nodes = list(lst)
    assert len(nodes) == len(index) == len(lst) == queue.size

    if not nodes:
        assert lst.head is None
        assert lst.tail is None
        return

    assert lst.head is nodes[0]
    assert lst.tail is nodes[-1]
    assert lst.head.prev is None
    assert lst.tail.next is None

    for prev, node in zip(nodes, nodes[1:]):
        assert prev.next is node
        assert node.prev is prev

    # One index entry per node, pointing at that node
    assert {node.id for node in nodes} == set(index)
    for node in nodes:
        assert index[node.id] is node


@pytest.mark.parametrize("seed", range(20))
def test_random_operations_match_model(seed: int) -> None:
    """Test random operation sequences against a dict-based model."""
    rng = random.Random(seed)
    queue = TaskQueue[str, int]()
    model: dict[str, int] = {}  # dicts keep insertion order
    ids = [f"task-{i}" for i in range(8)]

    for step in range(300):
        op = rng.choice(["enqueue", "dequeue", "remove", "update", "peek", "clear"])
        id = rng.choice(ids)

        if op == "enqueue":
            queue.enqueue(id, step)
            model.pop(id, None)
            model[id] = step
        elif op == "dequeue":
            expected = next(iter(model.items()), None)
            if expected is not None:
                del model[expected[0]]
            assert queue.dequeue_item() == expected
        elif op == "remove":
            assert queue.remove(id) is (model.pop(id, None) is not None)
        elif op == "update":
            present = id in model
            assert queue.update(id, -step) is present
            if present:
                model[id] = -step
        elif op == "peek":
            assert queue.peek_item() == next(iter(model.items()), None)
        elif op == "clear" and rng.random() < 0.1:
            queue.clear()
            model.clear()

        assert queue.ids() == list(model)
        assert queue.queue == list(model.values())
        for candidate in ids:
            assert queue.has(candidate) is (candidate in model)
        assert_consistent(queue)


def test_fifo_law() -> None:
    """Test n distinct enqueues followed by n dequeues preserve order."""
    queue = TaskQueue[str, int]()
    values = list(range(100))
    random.Random(7).shuffle(values)

    for value in values:
        queue.enqueue(str(value), value)
    assert_consistent(queue)

    assert [queue.dequeue() for _ in values] == values
    assert_consistent(queue)


def test_invariants_after_mixed_removals() -> None:
    """Test structural invariants after removing heads, tails and middles."""
    queue = TaskQueue[str, int]({str(i): i for i in range(10)})

    queue.remove("0")
    assert_consistent(queue)
    queue.remove("9")
    assert_consistent(queue)
    queue.remove("5")
    assert_consistent(queue)
    queue.enqueue("3", 33)
    assert_consistent(queue)
    queue.update("4", 44)
    assert_consistent(queue)

    assert queue.queue == [1, 2, 44, 6, 7, 8, 33]
