from typing import Any, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from .rules import MAX_ROLLS

FrameKindName = Literal["strike", "spare", "normal", "tenth"]


class RollsIn(BaseModel):
    # Items are left untyped so malformed pins surface as invalid_pin_count
    rolls: List[Any] = Field(..., max_length=MAX_ROLLS)

    model_config = ConfigDict(extra="forbid")


class FrameOut(BaseModel):
    frame: int
    kind: FrameKindName
    rolls: List[int]
    label: str


class ScoredFrameOut(FrameOut):
    cumulative: int


class FramesOut(BaseModel):
    frames: List[FrameOut]
    complete: bool


class ScoreCardOut(BaseModel):
    rolls: List[int]
    frames: List[ScoredFrameOut]
    total: int
    complete: bool
    currentFrame: Optional[int] = None
    pinsStanding: int


class FinalScoreOut(BaseModel):
    total: int
