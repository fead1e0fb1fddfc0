"""Frame values for ten-pin bowling.

A frame is a ``FrameKind`` tag plus the rolls that produced it. Scoring and
labelling switch on the tag.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from ..rules import PINS


class FrameKind(str, Enum):
    STRIKE = "strike"
    SPARE = "spare"
    NORMAL = "normal"
    TENTH = "tenth"


@dataclass(frozen=True)
class Frame:
    kind: FrameKind
    rolls: tuple[int, ...]

    @classmethod
    def classify(cls, first: int, second: int | None = None) -> "Frame":
        """Build one of the first nine frames from its rolls.

        Without ``second`` a non-strike frame is an open frame still waiting
        for its second ball.
        """
        if first == PINS:
            return cls(FrameKind.STRIKE, (first,))
        if second is None:
            return cls(FrameKind.NORMAL, (first,))
        if first + second == PINS:
            return cls(FrameKind.SPARE, (first, second))
        return cls(FrameKind.NORMAL, (first, second))

    @classmethod
    def tenth(cls, *rolls: int) -> "Frame":
        if not 1 <= len(rolls) <= 3:
            raise ValueError("the tenth frame holds one to three rolls")
        return cls(FrameKind.TENTH, tuple(rolls))

    @property
    def first(self) -> int:
        return self.rolls[0]

    @property
    def second(self) -> int | None:
        return self.rolls[1] if len(self.rolls) > 1 else None

    @property
    def is_strike(self) -> bool:
        return self.kind is FrameKind.STRIKE

    @property
    def is_spare(self) -> bool:
        return self.kind is FrameKind.SPARE

    @property
    def bonus_eligible(self) -> bool:
        """Whether a tenth frame has earned its third roll."""
        if self.kind is not FrameKind.TENTH:
            return False
        if self.first == PINS:
            return True
        return self.second is not None and self.first + self.second == PINS

    @property
    def rolls_required(self) -> int:
        if self.kind is FrameKind.STRIKE:
            return 1
        if self.kind is FrameKind.TENTH:
            return 3 if self.bonus_eligible else 2
        return 2

    @property
    def is_complete(self) -> bool:
        return len(self.rolls) >= self.rolls_required

    @property
    def base_pins(self) -> int:
        """Pins knocked down inside the frame, before any bonus."""
        if self.kind in (FrameKind.STRIKE, FrameKind.SPARE):
            return PINS
        if self.kind is FrameKind.NORMAL:
            return sum(self.rolls)
        if self.kind is FrameKind.TENTH:
            return sum(self.rolls)
        raise ValueError(f"unknown frame kind {self.kind!r}")

    @property
    def label(self) -> str:
        """Scoreboard notation, e.g. ``X``, ``7 /``, ``3 4`` or ``X 7 3``."""
        if self.kind is FrameKind.STRIKE:
            return "X"
        if self.kind is FrameKind.SPARE:
            return f"{self.first} /"
        if self.kind is FrameKind.NORMAL:
            if self.second is None:
                return str(self.first)
            return f"{self.first} {self.second}"
        if self.kind is FrameKind.TENTH:
            return " ".join(_tenth_marks(self.rolls))
        raise ValueError(f"unknown frame kind {self.kind!r}")


def _tenth_marks(rolls: tuple[int, ...]) -> list[str]:
    first = rolls[0]
    marks = ["X" if first == PINS else str(first)]
    if len(rolls) > 1:
        second = rolls[1]
        if first < PINS and first + second == PINS:
            marks.append("/")
        else:
            marks.append("X" if second == PINS else str(second))
    if len(rolls) > 2:
        marks.append("X" if rolls[2] == PINS else str(rolls[2]))
    return marks
