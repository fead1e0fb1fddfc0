from pydantic import BaseModel
from typing import Any, Optional


class ProblemDetail(BaseModel):
    """RFC 7807 compliant error response."""

    type: str = "about:blank"
    title: str
    detail: Optional[str] = None
    status: int
    instance: Optional[str] = None
    code: str


class DomainException(Exception):
    """Base class for domain-specific exceptions."""

    def __init__(
        self,
        status_code: int,
        title: str,
        *,
        code: str,
        detail: str | None = None,
        type_: str = "about:blank",
    ) -> None:
        super().__init__(detail or title)
        self.status_code = status_code
        self.title = title
        self.detail = detail
        self.type = type_
        self.code = code


class InvalidPinCount(DomainException):
    """A roll that cannot be recorded: not an integer, outside [0, 10], or
    more pins than are standing."""

    def __init__(self, pins: Any, reason: str | None = None) -> None:
        self.pins = pins
        super().__init__(
            status_code=422,
            title="Invalid pin count",
            detail=reason or f"pin count {pins!r} must be an integer between 0 and 10",
            code="invalid_pin_count",
        )


class IncompleteGame(DomainException):
    def __init__(self, frames: int, *, awaiting_bonus: bool = False) -> None:
        self.frames = frames
        self.awaiting_bonus = awaiting_bonus
        if awaiting_bonus:
            detail = "the tenth frame is still waiting for its bonus roll(s)"
        else:
            detail = f"only {frames} of 10 frames have been completed"
        super().__init__(
            status_code=409,
            title="Game incomplete",
            detail=detail,
            code="incomplete_game",
        )
