from __future__ import annotations

import logging

from fastapi import APIRouter

from ..exceptions import InvalidPinCount
from ..schemas import FinalScoreOut, FramesOut, RollsIn, ScoreCardOut
from ..scoring import Game

logger = logging.getLogger(__name__)

# Resource-only prefix
router = APIRouter(prefix="/games", tags=["games"])


def _replay(body: RollsIn) -> Game:
    game = Game()
    for index, pins in enumerate(body.rolls, start=1):
        try:
            game.record(pins)
        except InvalidPinCount as exc:
            raise InvalidPinCount(pins, f"roll #{index}: {exc.detail}") from exc
    return game


# POST /api/v0/games/frames
@router.post("/frames", response_model=FramesOut)
def segment_frames(body: RollsIn) -> FramesOut:
    summary = _replay(body).summary()
    frames = [
        {key: value for key, value in frame.items() if key != "cumulative"}
        for frame in summary["frames"]
    ]
    return FramesOut(frames=frames, complete=summary["complete"])


# POST /api/v0/games/score
@router.post("/score", response_model=ScoreCardOut)
def score_game(body: RollsIn) -> ScoreCardOut:
    return ScoreCardOut(**_replay(body).summary())


# POST /api/v0/games/final-score
@router.post("/final-score", response_model=FinalScoreOut)
def final_score(body: RollsIn) -> FinalScoreOut:
    game = _replay(body)
    total = game.final_score()
    logger.info("Final score %d from %d roll(s)", total, len(body.rolls))
    return FinalScoreOut(total=total)
