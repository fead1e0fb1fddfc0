import numbers
from typing import Any

from ..exceptions import InvalidPinCount
from ..rules import PINS


def validate_pin_count(raw: Any, *, standing: int = PINS) -> int:
    """Normalise a single roll to an ``int`` pin count.

    Rules:
    - Booleans and strings are rejected (``bool`` is a subclass of ``int``)
    - Other numbers are accepted only when integral, e.g. ``7.0``
    - The value must be between 0 and ``standing`` inclusive
    """

    if isinstance(raw, bool):
        raise InvalidPinCount(raw, "pin count must be an integer (not a boolean)")
    if isinstance(raw, numbers.Integral):
        pins = int(raw)
    elif isinstance(raw, numbers.Number):
        try:
            pins = int(raw)
        except (TypeError, ValueError, OverflowError):
            raise InvalidPinCount(raw, "pin count must be a whole number")
        if raw != pins:
            raise InvalidPinCount(raw, "pin count must be a whole number")
    else:
        raise InvalidPinCount(raw, "pin count must be an integer")

    if not 0 <= pins <= PINS:
        raise InvalidPinCount(pins)
    if pins > standing:
        raise InvalidPinCount(
            pins, f"cannot knock down {pins} pins with only {standing} standing"
        )
    return pins
