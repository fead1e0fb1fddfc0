"""Internal application services (pure helpers, no I/O)."""

from .validation import validate_pin_count

__all__ = ["validate_pin_count"]
