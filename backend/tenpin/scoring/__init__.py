"""Ten-pin frame segmentation and scoring."""

from ..rules import FRAMES, MAX_ROLLS, PINS
from .frames import Frame, FrameKind
from .segmentation import current_frame, is_complete, pins_standing, segment
from .accumulator import ScoreCard, final_score, score
from .game import Game

__all__ = [
    "FRAMES",
    "MAX_ROLLS",
    "PINS",
    "Frame",
    "FrameKind",
    "Game",
    "ScoreCard",
    "current_frame",
    "final_score",
    "is_complete",
    "pins_standing",
    "score",
    "segment",
]
