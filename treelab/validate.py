"""Reading numbers and checking their sign."""

from __future__ import annotations

import sys
from enum import Enum
from typing import Callable, Iterator, Optional, Sequence, TypeVar

T = TypeVar("T", int, float)


class CheckOp(Enum):
    """The check that ``validate`` applies."""

    POSITIVE = "positive"
    NEGATIVE = "negative"
    NONZERO = "nonzero"


def validate(value, check: CheckOp = CheckOp.POSITIVE) -> bool:
    """Return whether ``value`` passes ``check``."""
    if check is CheckOp.POSITIVE:
        return value > 0
    if check is CheckOp.NEGATIVE:
        return value < 0
    if check is CheckOp.NONZERO:
        return value != 0
    raise ValueError(f"unknown check: {check!r}")


def _read(text: str, kind: Callable[[str], T], check: CheckOp) -> T:
    try:
        value = kind(text.strip())
    except ValueError as error:
        raise ValueError(f"not a number: {text!r}") from error
    if not validate(value, check):
        raise ValueError(f"not {check.value}: {value}")
    return value


def read_positive(text: str, kind: Callable[[str], T] = int) -> T:
    """Parse ``text`` as ``kind``; raise ValueError unless it is positive."""
    return _read(text, kind, CheckOp.POSITIVE)


def read_negative(text: str, kind: Callable[[str], T] = int) -> T:
    """Parse ``text`` as ``kind``; raise ValueError unless it is negative."""
    return _read(text, kind, CheckOp.NEGATIVE)


class _Input:
    """Whitespace-separated tokens; once a token fails to parse, reads stop."""

    def __init__(self, tokens: Iterator[str]) -> None:
        self._tokens = tokens
        self.failed = False

    def next_token(self) -> str:
        if self.failed:
            return ""
        token = next(self._tokens, "")
        if not token:
            self.failed = True
        return token

    def read(self, reader, kind):
        token = self.next_token()
        try:
            return reader(token, kind)
        except ValueError:
            try:
                kind(token)
            except ValueError:
                self.failed = True
            raise


def _format(value) -> str:
    return format(value, "g") if isinstance(value, float) else str(value)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Ask for positive and negative numbers on standard input."""
    source = _Input(word for line in sys.stdin for word in line.split())

    print("Enter a positive integer: ", end="")
    try:
        i = source.read(read_positive, int)
        print(f"You entered the positive integer: {i}")
    except ValueError:
        print("Invalid input", file=sys.stderr)
    print()

    print("Enter a positive integer: ", end="")
    try:
        i = source.read(read_positive, int)
    except ValueError:
        print("Invalid input", file=sys.stderr)
        i = 10
    print(f"i is now {i}")
    print()

    print("Enter a negative decimal number: ", end="")
    try:
        i = source.read(read_negative, int)
        print(f"You entered the negative integer: {i}")
    except ValueError:
        print("Invalid input", file=sys.stderr)
    print()

    print("Enter a negative decimal number: ", end="")
    try:
        f = source.read(read_negative, float)
        print(f"You entered the negative floating point number: {_format(f)}")
    except ValueError:
        print("Invalid input", file=sys.stderr)
    print()
    return 0


if __name__ == "__main__":
    sys.exit(main())