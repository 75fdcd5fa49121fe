"""Student records stored as tree nodes keyed by student id."""

from __future__ import annotations

from treelab.bst import Node


class Student(Node):
    """A student; the node key is the student id."""

    def __init__(
        self,
        first: str = "",
        last: str = "",
        age: int = 0,
        student_id: int = 0,
    ) -> None:
        if age < 0:
            raise ValueError(f"age must not be negative: {age}")
        super().__init__(student_id)
        self.first = first
        self.last = last
        self.age = age

    @property
    def student_id(self) -> int:
        """The id this student is keyed by."""
        return self.key

    def describe(self) -> str:
        """Return the student's id, names and age on one line."""
        return (
            f"Student ID: {self.key}\tFirst: {self.first}"
            f"\tLast: {self.last}\tAge: {self.age}"
        )


class StudentIds:
    """Hands out consecutive student ids, starting from ``start``."""

    def __init__(self, start: int = 1) -> None:
        self._next = start

    def next_id(self) -> int:
        """Return a fresh id."""
        issued = self._next
        self._next += 1
        return issued

    def create(self, first: str, last: str, age: int) -> Student:
        """Create a student with the next free id."""
        if age < 0:
            raise ValueError(f"age must not be negative: {age}")
        return Student(first, last, age, self.next_id())