"""Partition a flat roll sequence into ten-pin frames."""
from __future__ import annotations

import logging
from typing import Sequence

from ..exceptions import InvalidPinCount
from ..rules import FRAMES, PINS
from ..services.validation import validate_pin_count
from .frames import Frame

logger = logging.getLogger(__name__)


def _read(rolls: Sequence[int], index: int, standing: int = PINS) -> int:
    try:
        return validate_pin_count(rolls[index], standing=standing)
    except InvalidPinCount as exc:
        raise InvalidPinCount(rolls[index], f"roll #{index + 1}: {exc.detail}") from exc


def _tenth_frame(rolls: Sequence[int], cursor: int) -> tuple[Frame, int]:
    first = _read(rolls, cursor)
    taken = [first]
    cursor += 1
    if cursor < len(rolls):
        second = _read(rolls, cursor, PINS if first == PINS else PINS - first)
        taken.append(second)
        cursor += 1
        if (first == PINS or first + second == PINS) and cursor < len(rolls):
            standing = PINS - second if first == PINS and second < PINS else PINS
            taken.append(_read(rolls, cursor, standing))
            cursor += 1
    return Frame.tenth(*taken), cursor


def _walk(rolls: Sequence[int]) -> tuple[list[Frame], int]:
    frames: list[Frame] = []
    cursor = 0
    while len(frames) < FRAMES - 1 and cursor < len(rolls):
        first = _read(rolls, cursor)
        if first == PINS:
            frames.append(Frame.classify(first))
            cursor += 1
            continue
        if cursor + 1 >= len(rolls):
            # frame cut off after its first ball
            frames.append(Frame.classify(first))
            cursor += 1
            break
        second = _read(rolls, cursor + 1, PINS - first)
        frames.append(Frame.classify(first, second))
        cursor += 2

    if len(frames) == FRAMES - 1 and cursor < len(rolls):
        tenth, cursor = _tenth_frame(rolls, cursor)
        frames.append(tenth)
    return frames, cursor


def segment(rolls: Sequence[int]) -> tuple[Frame, ...]:
    """Return the frames described by ``rolls``.

    Pure and idempotent: the input is never modified and the same rolls always
    produce equal frames. A game in progress yields fewer than ten frames, the
    last of which may hold only the balls thrown so far (see
    ``Frame.is_complete``). Rolls beyond a finished tenth frame are ignored.

    Raises ``InvalidPinCount`` if a roll is outside [0, 10] or knocks down more
    pins than were standing.
    """
    frames, cursor = _walk(rolls)
    if cursor < len(rolls) and len(frames) == FRAMES:
        logger.debug("Ignoring %d roll(s) after the tenth frame", len(rolls) - cursor)
    logger.debug("Segmented %d roll(s) into %d frame(s)", len(rolls), len(frames))
    return tuple(frames)


def is_complete(frames: Sequence[Frame]) -> bool:
    """True once ten frames exist and the tenth holds every roll it is owed."""
    return len(frames) == FRAMES and frames[-1].is_complete


def current_frame(rolls: Sequence[int]) -> int | None:
    """1-based number of the frame the next roll belongs to, ``None`` when over."""
    frames, _ = _walk(rolls)
    if is_complete(frames):
        return None
    if frames and not frames[-1].is_complete:
        return len(frames)
    return len(frames) + 1


def pins_standing(rolls: Sequence[int]) -> int:
    """How many pins the next roll can knock down (0 once the game is over)."""
    frames, _ = _walk(rolls)
    if is_complete(frames):
        return 0
    if not frames or frames[-1].is_complete:
        return PINS

    last = frames[-1]
    if last.second is None:
        return PINS if last.first == PINS else PINS - last.first
    # only an unfinished tenth frame gets here, owed its bonus ball
    if last.first == PINS and last.second < PINS:
        return PINS - last.second
    return PINS
