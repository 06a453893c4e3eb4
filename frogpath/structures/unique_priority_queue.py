"""UniquePriorityQueue — an ordered container that refuses duplicates.

Entries are kept in a single list sorted by ascending priority, so the
front of the list is always the most preferred value.  Insertion is a
linear scan: a new entry goes immediately before the first entry whose
priority is *strictly* greater, which keeps equal priorities in arrival
order (a stable tie-break).  Only occupied entries are ever compared; the
position past the last entry is always a valid append point.

The queue is meant to be small and short-lived: the frog builds a fresh
one for every decision it makes and throws it away afterwards.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")

_DEFAULT_CAPACITY = 10
_DEFAULT_GROWTH = 5


class CollectionError(Exception):
    """Base class for errors raised by the ordered containers."""


class EmptyContainerError(CollectionError, IndexError):
    """Raised when reading from or removing out of an empty queue."""


class NotFoundError(CollectionError, LookupError):
    """Raised when an operation targets a value that is not queued."""


@dataclass
class Entry(Generic[T]):
    """A queued value and its priority (lower is more preferred)."""

    value: T
    priority: float


class UniquePriorityQueue(Generic[T]):
    """Priority queue with unique values and stable ordering of ties.

    Attributes:
        growth: Number of slots added whenever the queue is full.
    """

    def __init__(
        self,
        capacity: int = _DEFAULT_CAPACITY,
        growth: int = _DEFAULT_GROWTH,
    ) -> None:
        """Create an empty queue.

        Args:
            capacity: Initial number of slots.
            growth: Fixed number of slots added when the queue is full.

        Raises:
            ValueError: If ``capacity`` is negative or ``growth`` is not
                positive.
        """
        if capacity < 0:
            msg = f"capacity must be >= 0, got {capacity}"
            raise ValueError(msg)
        if growth <= 0:
            msg = f"growth must be > 0, got {growth}"
            raise ValueError(msg)
        self.growth = growth
        self._capacity = capacity
        self._entries: list[Entry[T]] = []

    def add(self, value: T, priority: float) -> None:
        """Queue ``value`` with ``priority`` unless it is already present.

        Args:
            value: The value to insert.
            priority: Its priority; lower values are served first.
        """
        if self.contains(value):
            return
        if len(self._entries) == self._capacity:
            self._capacity += self.growth
        self._insert(Entry(value, priority))

    def contains(self, value: T) -> bool:
        """Return True if an equal value is queued."""
        return any(entry.value == value for entry in self._entries)

    def peek(self) -> T:
        """Return the most preferred value without removing it.

        Raises:
            EmptyContainerError: If the queue is empty.
        """
        if self.is_empty():
            msg = "peek from an empty queue"
            raise EmptyContainerError(msg)
        return self._entries[0].value

    def remove_min(self) -> T:
        """Remove and return the most preferred value.

        Raises:
            EmptyContainerError: If the queue is empty.
        """
        if self.is_empty():
            msg = "remove_min from an empty queue"
            raise EmptyContainerError(msg)
        return self._entries.pop(0).value

    def update_priority(self, value: T, new_priority: float) -> None:
        """Move ``value`` to the position implied by ``new_priority``.

        The value is taken out and re-inserted, so it lands *after* any
        entries that already share ``new_priority``.

        Raises:
            NotFoundError: If ``value`` is not queued.
        """
        for i, entry in enumerate(self._entries):
            if entry.value == value:
                del self._entries[i]
                self._insert(Entry(value, new_priority))
                return
        msg = f"{value!r} is not in the queue"
        raise NotFoundError(msg)

    def priority_of(self, value: T) -> float:
        """Return the stored priority of ``value``.

        Raises:
            NotFoundError: If ``value`` is not queued.
        """
        for entry in self._entries:
            if entry.value == value:
                return entry.priority
        msg = f"{value!r} is not in the queue"
        raise NotFoundError(msg)

    def size(self) -> int:
        return len(self._entries)

    def is_empty(self) -> bool:
        return not self._entries

    def capacity(self) -> int:
        """Current number of slots (informational only)."""
        return self._capacity

    def _insert(self, new: Entry[T]) -> None:
        for i, entry in enumerate(self._entries):
            if new.priority < entry.priority:
                self._entries.insert(i, new)
                return
        self._entries.append(new)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, value: object) -> bool:
        return self.contains(value)  # type: ignore[arg-type]

    def __iter__(self) -> Iterator[tuple[T, float]]:
        """Yield ``(value, priority)`` pairs from most to least preferred."""
        for entry in self._entries:
            yield entry.value, entry.priority

    def __str__(self) -> str:
        if self.is_empty():
            return "The queue is empty"
        return ", ".join(f"{e.value} [{e.priority}]" for e in self._entries)
