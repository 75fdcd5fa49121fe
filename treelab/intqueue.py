"""A first-in first-out queue of integers kept on a linked list."""

from __future__ import annotations

import itertools
import sys
from typing import Iterator, Optional, Sequence


class Elem:
    """A linked-list element; every element gets a unique, increasing id."""

    _ids = itertools.count()

    def __init__(self, data: int = 0, next_elem: Optional[Elem] = None) -> None:
        self.data = data
        self.next_elem = next_elem
        self.id = next(Elem._ids)

    def __str__(self) -> str:
        following = None if self.next_elem is None else self.next_elem.id
        return f"Elem(id={self.id}, data={self.data}, next={following})"


class IntQueue:
    """A queue of ints; ``queue << 1 << 2`` enqueues in order."""

    def __init__(self) -> None:
        self._head: Optional[Elem] = None
        self._tail: Optional[Elem] = None
        self._size = 0

    def enqueue(self, value: int) -> None:
        """Add ``value`` at the back of the queue."""
        elem = Elem(value)
        if self._tail is None:
            self._head = self._tail = elem
        else:
            self._tail.next_elem = elem
            self._tail = elem
        self._size += 1

    def dequeue(self) -> int:
        """Remove and return the value at the front of the queue."""
        if self._head is None:
            raise IndexError("dequeue from an empty queue")
        elem = self._head
        self._head = elem.next_elem
        if self._head is None:
            self._tail = None
        self._size -= 1
        return elem.data

    def __lshift__(self, value: int) -> IntQueue:
        self.enqueue(value)
        return self

    def _elems(self) -> Iterator[Elem]:
        elem = self._head
        while elem is not None:
            yield elem
            elem = elem.next_elem

    def __iter__(self) -> Iterator[int]:
        return (elem.data for elem in self._elems())

    def __len__(self) -> int:
        return self._size

    def __str__(self) -> str:
        return "".join(f"{elem}\n" for elem in self._elems())


def _dequeue_or_default(queue: IntQueue) -> int:
    try:
        return queue.dequeue()
    except IndexError:
        return -1


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Show dequeuing from an empty queue, then a round of three values."""
    queue = IntQueue()
    print(_dequeue_or_default(queue))
    queue.enqueue(10)
    queue.enqueue(20)
    queue.enqueue(30)
    values = [_dequeue_or_default(queue) for _ in range(3)]
    print(" ".join(str(value) for value in values))
    return 0


if __name__ == "__main__":
    sys.exit(main())