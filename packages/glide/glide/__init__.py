"""glide - Time-driven value interpolation and interval timers."""

from glide.clock import Clock, ManualClock, MonotonicClock
from glide.types import ConfigError, DimensionMismatchError

__all__ = [
    "Clock",
    "MonotonicClock",
    "ManualClock",
    "ConfigError",
    "DimensionMismatchError",
]
