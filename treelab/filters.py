"""Letter filters: each rewrites the letters of a text and keeps the rest."""

from __future__ import annotations

import sys
from typing import Optional, Sequence


def shift_cypher(ch: str, offset: int) -> str:
    """Upper-case ``ch`` and shift it ``offset`` places through the alphabet."""
    value = ord(ch.upper()) - ord("A") + offset
    remainder = abs(value) % 26
    if value < 0:
        remainder = -remainder
    return chr(remainder + ord("A"))


def _is_letter(ch: str) -> bool:
    return ch.isascii() and ch.isalpha()


class Filter:
    """Base filter, passing letters through unchanged."""

    def filter_letter(self, ch: str) -> str:
        """Return the replacement for the letter ``ch``."""
        return ch

    def exec(self, text: str) -> str:
        """Apply the filter to every ASCII letter of ``text``."""
        return "".join(self.filter_letter(ch) if _is_letter(ch) else ch for ch in text)


class ToUpper(Filter):
    """Makes every letter upper case."""

    def filter_letter(self, ch: str) -> str:
        return ch.upper()


class ToLower(Filter):
    """Makes every letter lower case."""

    def filter_letter(self, ch: str) -> str:
        return ch.lower()


class Encrypt(Filter):
    """Shift cypher with a fixed offset; letters come out upper case."""

    def __init__(self, offset: int) -> None:
        self.offset = offset

    def filter_letter(self, ch: str) -> str:
        return shift_cypher(ch, self.offset)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Encrypt each line of standard input with a shift of 13."""
    the_filter = Encrypt(13)
    for line in sys.stdin:
        print(the_filter.exec(line.rstrip("\n")))
    return 0


if __name__ == "__main__":
    sys.exit(main())