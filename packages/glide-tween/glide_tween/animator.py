"""Animator - multi-dimensional tween state machine driven by a clock."""
from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from typing import Any, Callable, Mapping

from glide import Clock, ConfigError, DimensionMismatchError, MonotonicClock
from glide_tween.easing import DEFAULT_EASING, get_easing, resolve_easing_name

# Option names accepted by AnimatorConfig.from_dict, including the names
# used by sketch hosts.
_OPTION_ALIASES: dict[str, str] = {
    "values": "values",
    "end_values": "end_values",
    "endValues": "end_values",
    "duration": "duration",
    "durationMs": "duration",
    "easing": "easing",
    "easingFunctionName": "easing",
    "curveName": "easing",
}


def _default_values() -> dict[str, float]:
    return {"x": 0.0}


@dataclass(frozen=True)
class AnimatorConfig:
    """Immutable construction options for an Animator.

    Attributes:
        values: Initial value per dimension key.
        end_values: Target value per dimension key. ``None`` means ``values``.
        duration: Animation length in milliseconds.
        easing: Registered curve name. Unknown names fall back to the default.
    """

    values: Mapping[str, float] = field(default_factory=_default_values)
    end_values: Mapping[str, float] | None = None
    duration: float = 1000
    easing: str = DEFAULT_EASING

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> AnimatorConfig:
        """Build a config from an options dict. Raises ConfigError on unknown keys."""
        if not isinstance(data, Mapping):
            raise ConfigError("config", data)
        kwargs: dict[str, Any] = {}
        for key, value in data.items():
            name = _OPTION_ALIASES.get(key)
            if name is None:
                raise ConfigError(key, value, f"unknown animator option {key!r}")
            kwargs[name] = value
        return cls(**kwargs)


class Animator:
    """Interpolates a set of named values from start to end over a duration.

    Call ``start()`` to begin, then ``update()`` once per frame. When the
    duration has elapsed the current values are committed as the new start
    values and the animator stops itself.
    """

    def __init__(
        self,
        config: AnimatorConfig | None = None,
        *,
        clock: Clock | None = None,
        on_unknown_easing: Callable[[str], None] | None = None,
        **overrides: Any,
    ) -> None:
        if config is None:
            config = AnimatorConfig()
        if overrides:
            config = dataclasses.replace(config, **overrides)

        values = config.values
        end_values = config.end_values if config.end_values is not None else values
        if not isinstance(values, Mapping):
            raise ConfigError("values", values)
        if not isinstance(end_values, Mapping):
            raise ConfigError("end_values", end_values)
        _check_duration(config.duration)

        self._keys: tuple[str, ...] = tuple(values)
        if set(end_values) != set(self._keys):
            raise DimensionMismatchError(self._keys, tuple(end_values))

        self._clock: Clock = clock if clock is not None else MonotonicClock()
        self._start_values: dict[str, float] = dict(values)
        self._end_values: dict[str, float] = {k: end_values[k] for k in self._keys}
        self._current_values: dict[str, float] = dict(values)
        self._duration = config.duration
        self._easing_name = resolve_easing_name(config.easing)
        self._easing = get_easing(config.easing, on_unknown=on_unknown_easing)
        self._running = False
        self._start_time = 0.0

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(keys={list(self._keys)}, "
            f"easing={self._easing_name!r}, running={self._running})"
        )

    def _now(self, now: float | None) -> float:
        return self._clock.now() if now is None else now

    # --- Animation control ---

    def start(self, now: float | None = None) -> None:
        """Start (or restart) progress from 0 toward the end values."""
        self._start_time = self._now(now)
        self._running = True

    def stop(self) -> None:
        """Halt in place. Current values are kept."""
        self._running = False

    def update(self, now: float | None = None) -> dict[str, float]:
        """Advance current values to ``now``. No-op unless running.

        Returns a copy of the current values.
        """
        if not self._running:
            return self.get_current_values()

        elapsed = self._now(now) - self._start_time
        if self._duration <= 0:
            percent = 1.0 if elapsed >= 0 else 0.0
        else:
            percent = min(max(elapsed / self._duration, 0.0), 1.0)

        if percent == 1.0:
            self._current_values = dict(self._end_values)
            self._start_values = dict(self._current_values)
            self._running = False
        else:
            for key in self._keys:
                start = self._start_values[key]
                self._current_values[key] = self._easing(
                    percent, start, self._end_values[key] - start, 1
                )
        return self.get_current_values()

    # --- Values ---

    def get_current_values(self) -> dict[str, float]:
        return dict(self._current_values)

    def get_start_values(self) -> dict[str, float]:
        return dict(self._start_values)

    get_values = get_start_values

    def get_end_values(self) -> dict[str, float]:
        return dict(self._end_values)

    def set_start_values(self, values: Mapping[str, float]) -> None:
        """Replace start values and jump current values to them."""
        ordered = self._ordered(values)
        self._start_values = ordered
        self._current_values = dict(ordered)

    def set_end_values(self, values: Mapping[str, float]) -> None:
        """Retarget. Takes effect from the next ``start()``/``update()``."""
        self._end_values = self._ordered(values)

    def _ordered(self, values: Mapping[str, float]) -> dict[str, float]:
        if not isinstance(values, Mapping):
            raise ConfigError("values", values)
        if len(values) != len(self._keys) or set(values) != set(self._keys):
            raise DimensionMismatchError(self._keys, tuple(values))
        return {k: values[k] for k in self._keys}

    @property
    def dimension(self) -> int:
        return len(self._keys)

    @property
    def dimension_keys(self) -> tuple[str, ...]:
        return self._keys

    @property
    def easing_name(self) -> str:
        return self._easing_name

    # --- Duration ---

    @property
    def duration(self) -> float:
        return self._duration

    @duration.setter
    def duration(self, value: float) -> None:
        # Applies from the next update; an in-flight animation is not rescaled.
        _check_duration(value)
        self._duration = value

    # --- Time ---

    def get_elapsed(self, now: float | None = None) -> float:
        """Milliseconds since ``start()``, or 0 when not running."""
        if not self._running:
            return 0
        return self._now(now) - self._start_time

    def get_remaining(self, now: float | None = None) -> float:
        """Milliseconds until completion, or 0 when not running."""
        if not self._running:
            return 0
        return max(0, self._duration - (self._now(now) - self._start_time))

    # --- State ---

    @property
    def is_running(self) -> bool:
        """Whether the animation is in flight.

        Assigning forces the flag without touching the start timestamp. This
        is a power-user escape hatch; prefer ``start()`` and ``stop()``.
        """
        return self._running

    @is_running.setter
    def is_running(self, value: bool) -> None:
        self._running = bool(value)


class Animator2D(Animator):
    """Two-axis animator with an ``x``/``y`` position API."""

    def __init__(
        self,
        x: float = 0.0,
        y: float = 0.0,
        duration: float = 1000,
        easing: str = DEFAULT_EASING,
        *,
        clock: Clock | None = None,
        on_unknown_easing: Callable[[str], None] | None = None,
    ) -> None:
        super().__init__(
            AnimatorConfig(values={"x": x, "y": y}, duration=duration, easing=easing),
            clock=clock,
            on_unknown_easing=on_unknown_easing,
        )

    def get_current_position(self) -> tuple[float, float]:
        return self._current_values["x"], self._current_values["y"]

    def set_start_position(self, x: float, y: float) -> None:
        self.set_start_values({"x": x, "y": y})

    def set_target_position(self, x: float, y: float) -> None:
        self.set_end_values({"x": x, "y": y})


def _check_duration(duration: Any) -> None:
    if isinstance(duration, bool) or not isinstance(duration, (int, float)):
        raise ConfigError(
            "duration", duration, f"duration must be a number, got {type(duration).__name__}"
        )
    if duration < 0:
        raise ValueError("duration must be non-negative")
