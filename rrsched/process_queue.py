"""First-in first-out queue of processes."""

from __future__ import annotations

from collections import deque
from typing import Any, Iterator


class QueueUnderflowError(IndexError):
    """Raised when taking an item from an empty queue."""


class ProcessQueue:
    """Unbounded FIFO queue."""

    def __init__(self) -> None:
        self._items: deque[Any] = deque()

    def enqueue(self, item: Any) -> None:
        """Append ``item`` at the back."""
        self._items.append(item)

    def dequeue(self) -> Any:
        """Remove and return the front item."""
        if not self._items:
            raise QueueUnderflowError("dequeue from an empty queue")
        return self._items.popleft()

    def peek(self) -> Any:
        """Return the front item without removing it, or None when empty."""
        return self._items[0] if self._items else None

    def is_empty(self) -> bool:
        """True when the queue holds nothing."""
        return not self._items

    def debug_print(self) -> None:
        """Print the size and every item in order."""
        print(f"Queue Debug: size={len(self._items)}")
        for position, item in enumerate(self._items):
            print(f"  [{position}] = {item!r}")

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)