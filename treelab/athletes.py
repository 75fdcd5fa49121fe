"""Athletes that introduce themselves and announce their retirement."""

from __future__ import annotations

import sys
from typing import Optional, Sequence


class Athlete:
    """Someone who plays a sport."""

    def __init__(self, sport: str) -> None:
        self.sport = sport

    def display_info(self) -> str:
        """Return the athlete's introduction."""
        return f"I play {self.sport}"

    def retire(self) -> str:
        """Return the lines said on retirement."""
        return "I'm announcing my retirement!"


class Basketball(Athlete):
    """A named basketball player."""

    def __init__(self, name: str) -> None:
        super().__init__("basketball")
        self.name = name

    def display_info(self) -> str:
        return f"I play {self.sport} and my name is {self.name}"


class Baseball(Athlete):
    """A baseball player with a friend on the basketball team."""

    def __init__(self) -> None:
        super().__init__("baseball")

    def friends_name(self, other: Basketball) -> str:
        """Return a sentence naming the basketball friend."""
        return f"My friend's name is {other.name}"

    def retire(self) -> str:
        return "I'm a retired baseball player!\n" + super().retire()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Introduce three athletes, then retire them."""
    soccer = Athlete("soccer")
    baseball = Baseball()
    basketball = Basketball("Dribble")

    print(soccer.display_info())
    print(baseball.display_info())
    print(basketball.display_info())
    print(baseball.friends_name(basketball))

    print(baseball.retire())
    print(basketball.retire())
    print(soccer.retire())
    return 0


if __name__ == "__main__":
    sys.exit(main())