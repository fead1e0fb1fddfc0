"""Running totals for a segmented bowling game."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

from ..exceptions import IncompleteGame
from ..rules import FRAMES
from .frames import Frame, FrameKind
from .segmentation import is_complete

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScoreCard:
    cumulative: tuple[int, ...]
    total: int


def _lookahead(rolls: Sequence[int], *indexes: int) -> int:
    # bonus balls not yet thrown count as zero
    return sum(rolls[i] for i in indexes if i < len(rolls))


def score(frames: Sequence[Frame], rolls: Sequence[int]) -> ScoreCard:
    """Score ``frames`` progressively.

    ``rolls`` is the roll sequence the frames were segmented from; strike and
    spare bonuses are read from it by index. Bonuses that depend on balls not
    yet rolled count as zero, so a game in progress gets its best known
    running totals rather than an error.
    """
    cumulative: list[int] = []
    total = 0
    cursor = 0
    for index, frame in enumerate(frames):
        frame_score = frame.base_pins
        if index < FRAMES - 1:
            if frame.kind is FrameKind.STRIKE:
                frame_score += _lookahead(rolls, cursor + 1, cursor + 2)
            elif frame.kind is FrameKind.SPARE:
                frame_score += _lookahead(rolls, cursor + 2)
        total += frame_score
        cumulative.append(total)
        cursor += 1 if frame.is_strike else 2

    logger.debug("Scored %d frame(s), running total %d", len(frames), total)
    return ScoreCard(cumulative=tuple(cumulative), total=total)


def final_score(frames: Sequence[Frame], rolls: Sequence[int]) -> int:
    """Total for a finished game, raising ``IncompleteGame`` otherwise."""
    if not is_complete(frames):
        awaiting_bonus = len(frames) == FRAMES and frames[-1].bonus_eligible
        completed = sum(1 for frame in frames if frame.is_complete)
        raise IncompleteGame(completed, awaiting_bonus=awaiting_bonus)
    return score(frames, rolls).total
