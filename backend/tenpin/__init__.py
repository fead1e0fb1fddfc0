"""Ten-pin bowling scorer."""

__version__ = "0.1.0"
