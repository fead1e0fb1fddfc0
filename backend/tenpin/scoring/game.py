from __future__ import annotations

import logging
from threading import Lock
from typing import Any

from ..exceptions import InvalidPinCount
from ..rules import PINS
from ..services.validation import validate_pin_count
from . import accumulator, segmentation
from .accumulator import ScoreCard
from .frames import Frame

logger = logging.getLogger(__name__)


class Game:
    """A single bowling game backed by an append-only roll log.

    Frames and scores are never cached. Every query segments and scores a
    snapshot of the log taken under the lock that serialises ``record``.
    """

    def __init__(self) -> None:
        self._lock = Lock()
        self._rolls: list[int] = []

    @property
    def rolls(self) -> tuple[int, ...]:
        with self._lock:
            return tuple(self._rolls)

    def record(self, pins: Any) -> None:
        """Append one roll, raising ``InvalidPinCount`` if it cannot be valid.

        Rolls after the last frame are accepted and ignored by segmentation.
        """
        with self._lock:
            standing = segmentation.pins_standing(self._rolls)
            try:
                value = validate_pin_count(pins, standing=standing or PINS)
            except InvalidPinCount:
                logger.warning("Rejected roll %r (%d pin(s) standing)", pins, standing)
                raise
            self._rolls.append(value)
            # pins_standing is 0 only once the tenth frame is finished
            if standing and not segmentation.pins_standing(self._rolls):
                logger.info("Game complete after %d roll(s)", len(self._rolls))

    def segment(self) -> tuple[Frame, ...]:
        return segmentation.segment(self.rolls)

    def score(self) -> ScoreCard:
        rolls = self.rolls
        return accumulator.score(segmentation.segment(rolls), rolls)

    def final_score(self) -> int:
        rolls = self.rolls
        return accumulator.final_score(segmentation.segment(rolls), rolls)

    @property
    def is_complete(self) -> bool:
        return segmentation.is_complete(self.segment())

    @property
    def current_frame(self) -> int | None:
        return segmentation.current_frame(self.rolls)

    @property
    def pins_standing(self) -> int:
        return segmentation.pins_standing(self.rolls)

    def summary(self) -> dict:
        """Scoreboard snapshot: frames with labels and running totals."""
        rolls = self.rolls
        frames = segmentation.segment(rolls)
        card = accumulator.score(frames, rolls)
        return {
            "rolls": list(rolls),
            "frames": [
                {
                    "frame": number,
                    "kind": frame.kind.value,
                    "rolls": list(frame.rolls),
                    "label": frame.label,
                    "cumulative": running,
                }
                for number, (frame, running) in enumerate(
                    zip(frames, card.cumulative), start=1
                )
            ],
            "total": card.total,
            "complete": segmentation.is_complete(frames),
            "currentFrame": segmentation.current_frame(rolls),
            "pinsStanding": segmentation.pins_standing(rolls),
        }
