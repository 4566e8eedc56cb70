"""Frontier queue implementation for growing the road network.

Entries are served first in, first out. Duplicate entries for the same cell are
allowed; the consumer drops entries whose target became occupied.
"""
from collections import deque
from typing import Iterator, Optional

from roadgrid.citygen.dataclass import FrontierEntry


class FrontierQueue:
    """A FIFO worklist of frontier entries awaiting expansion."""

    def __init__(self):
        """Initialize an empty queue."""
        self.elements: deque = deque()

    def enqueue(self, entry: FrontierEntry):
        """Add an entry to the back of the queue.

        Args:
            entry: The entry to add.
        """
        self.elements.append(entry)

    def dequeue(self) -> Optional[FrontierEntry]:
        """Remove and return the oldest entry.

        Returns:
            The oldest entry, or None if the queue is empty.
        """
        if not self.elements:
            return None
        return self.elements.popleft()

    def empty(self) -> bool:
        """Check if the queue is empty."""
        return len(self.elements) == 0

    def clear(self):
        """Drop all entries."""
        self.elements.clear()

    def __iter__(self) -> Iterator[FrontierEntry]:
        return iter(self.elements)

    def __len__(self) -> int:
        return len(self.elements)
