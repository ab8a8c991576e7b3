"""Chart series and deterministic colors for local fitness history."""

__version__ = "0.1.0"
