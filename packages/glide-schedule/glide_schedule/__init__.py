"""glide-schedule - Interval timers and the schedulers that drive them."""
from __future__ import annotations

from glide_schedule.scheduler import ManualScheduler, Scheduler, ThreadScheduler
from glide_schedule.timer import Timer

__all__ = ["Timer", "Scheduler", "ManualScheduler", "ThreadScheduler"]
