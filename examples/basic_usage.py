"""Basic usage example for indexedtaskq."""

import logging

from indexedtaskq import TaskQueue


def main() -> None:
    """Demonstrate basic queue operations."""
    logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    queue = TaskQueue[str, dict]()

    print("=== Basic Producer-Consumer Example ===\n")

    # Producer: Add some tasks
    print("Producer: Adding tasks...")
    queue.enqueue("task-1", {"action": "send_email", "to": "user@example.com"})
    queue.enqueue("task-2", {"action": "process_data", "records": 100})
    queue.enqueue("task-3", {"action": "generate_report", "format": "pdf"})

    print(f"Queue size: {queue.size}")
    print(f"Queued ids: {queue.ids()}\n")

    # Look up and change tasks by id
    queue.update("task-2", {"action": "process_data", "records": 250})
    queue.remove("task-3")
    print(f"After update/cancel: {queue.queue}\n")

    # Re-enqueue moves task-1 behind task-2
    queue.enqueue("task-1", {"action": "send_email", "to": "admin@example.com"})
    print(f"After re-enqueue: {queue.ids()}\n")

    # Consumer: Process tasks in FIFO order
    print("Consumer: Processing tasks...")
    while queue.size > 0:
        item = queue.dequeue_item()
        if item is None:
            break
        task_id, payload = item
        print(f"  Processing {task_id}: {payload}")

    print(f"\nFinal queue size: {queue.size}")


if __name__ == "__main__":
    main()
