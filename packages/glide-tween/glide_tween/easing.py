"""Easing curves for tween interpolation.

Every curve takes ``(t, b, c, d)``: elapsed time, start value, change in
value and total duration. Curves return ``b`` at ``t == 0`` and ``b + c``
at ``t == d``. Animators call them with ``d == 1`` and ``t`` already
normalized to ``[0, 1]``.
"""
from __future__ import annotations

import logging
import math
from types import MappingProxyType
from typing import Callable, Mapping

logger = logging.getLogger(__name__)

EasingFn = Callable[..., float]

DEFAULT_EASING = "easeInOutSine"

_HALF_PI = math.pi / 2
_TWO_PI = math.pi * 2


def linear(t: float, b: float, c: float, d: float) -> float:
    return c * t / d + b


# --- Sine ---


def ease_in_sine(t: float, b: float, c: float, d: float) -> float:
    return -c * math.cos(t / d * _HALF_PI) + c + b


def ease_out_sine(t: float, b: float, c: float, d: float) -> float:
    return c * math.sin(t / d * _HALF_PI) + b


def ease_in_out_sine(t: float, b: float, c: float, d: float) -> float:
    return -c / 2 * (math.cos(math.pi * t / d) - 1) + b


# --- Quadratic ---


def ease_in_quad(t: float, b: float, c: float, d: float) -> float:
    t /= d
    return c * t * t + b


def ease_out_quad(t: float, b: float, c: float, d: float) -> float:
    t /= d
    return -c * t * (t - 2) + b


def ease_in_out_quad(t: float, b: float, c: float, d: float) -> float:
    t /= d / 2
    if t < 1:
        return c / 2 * t * t + b
    t -= 1
    return -c / 2 * (t * (t - 2) - 1) + b


# --- Cubic ---


def ease_in_cubic(t: float, b: float, c: float, d: float) -> float:
    t /= d
    return c * t * t * t + b


def ease_out_cubic(t: float, b: float, c: float, d: float) -> float:
    t = t / d - 1
    return c * (t * t * t + 1) + b


def ease_in_out_cubic(t: float, b: float, c: float, d: float) -> float:
    t /= d / 2
    if t < 1:
        return c / 2 * t * t * t + b
    t -= 2
    return c / 2 * (t * t * t + 2) + b


# --- Quartic ---


def ease_in_quartic(t: float, b: float, c: float, d: float) -> float:
    t /= d
    return c * t * t * t * t + b


def ease_out_quartic(t: float, b: float, c: float, d: float) -> float:
    t = t / d - 1
    return -c * (t * t * t * t - 1) + b


def ease_in_out_quartic(t: float, b: float, c: float, d: float) -> float:
    t /= d / 2
    if t < 1:
        return c / 2 * t * t * t * t + b
    t -= 2
    return -c / 2 * (t * t * t * t - 2) + b


# --- Quintic ---


def ease_in_quintic(t: float, b: float, c: float, d: float) -> float:
    t /= d
    return c * t * t * t * t * t + b


def ease_out_quintic(t: float, b: float, c: float, d: float) -> float:
    t = t / d - 1
    return c * (t * t * t * t * t + 1) + b


def ease_in_out_quintic(t: float, b: float, c: float, d: float) -> float:
    t /= d / 2
    if t < 1:
        return c / 2 * t * t * t * t * t + b
    t -= 2
    return c / 2 * (t * t * t * t * t + 2) + b


# --- Bounce ---


def ease_out_bounce(t: float, b: float, c: float, d: float) -> float:
    t /= d
    if t < 1 / 2.75:
        return c * (7.5625 * t * t) + b
    if t < 2 / 2.75:
        t -= 1.5 / 2.75
        return c * (7.5625 * t * t + 0.75) + b
    if t < 2.5 / 2.75:
        t -= 2.25 / 2.75
        return c * (7.5625 * t * t + 0.9375) + b
    t -= 2.625 / 2.75
    return c * (7.5625 * t * t + 0.984375) + b


def ease_in_bounce(t: float, b: float, c: float, d: float) -> float:
    return c - ease_out_bounce(d - t, 0, c, d) + b


def ease_in_out_bounce(t: float, b: float, c: float, d: float) -> float:
    if t < d / 2:
        return ease_in_bounce(t * 2, 0, c, d) * 0.5 + b
    return ease_out_bounce(t * 2 - d, 0, c, d) * 0.5 + c * 0.5 + b


# --- Elastic ---


def elastic_amplitude_phase(
    c: float, p: float, a: float | None = None
) -> tuple[float, float]:
    """Resolve elastic amplitude and phase shift for a change ``c`` and period ``p``.

    An unset amplitude, or one smaller than ``|c|``, is clamped to ``c`` with
    a quarter-period phase. The returned amplitude always has ``|a| >= |c|``.
    """
    if not a or a < abs(c):
        return c, p / 4
    return a, p / _TWO_PI * math.asin(c / a)


def ease_in_elastic(
    t: float, b: float, c: float, d: float,
    a: float | None = None, p: float | None = None,
) -> float:
    if t == 0:
        return b
    t /= d
    if t == 1:
        return b + c
    if not p:
        p = d * 0.3
    a, s = elastic_amplitude_phase(c, p, a)
    t -= 1
    return -(a * 2 ** (10 * t) * math.sin((t * d - s) * _TWO_PI / p)) + b


def ease_out_elastic(
    t: float, b: float, c: float, d: float,
    a: float | None = None, p: float | None = None,
) -> float:
    if t == 0:
        return b
    t /= d
    if t == 1:
        return b + c
    if not p:
        p = d * 0.3
    a, s = elastic_amplitude_phase(c, p, a)
    return a * 2 ** (-10 * t) * math.sin((t * d - s) * _TWO_PI / p) + c + b


def ease_in_out_elastic(
    t: float, b: float, c: float, d: float,
    a: float | None = None, p: float | None = None,
) -> float:
    if t == 0:
        return b
    t /= d / 2
    if t == 2:
        return b + c
    if not p:
        p = d * (0.3 * 1.5)
    a, s = elastic_amplitude_phase(c, p, a)
    t -= 1
    wave = math.sin((t * d - s) * _TWO_PI / p)
    # t has been shifted by one, so the first half is t < 0
    if t < 0:
        return -0.5 * (a * 2 ** (10 * t) * wave) + b
    return a * 2 ** (-10 * t) * wave * 0.5 + c + b


EASINGS: Mapping[str, EasingFn] = MappingProxyType({
    "easeLinear": linear,
    "easeInSine": ease_in_sine,
    "easeOutSine": ease_out_sine,
    "easeInOutSine": ease_in_out_sine,
    "easeInQuad": ease_in_quad,
    "easeOutQuad": ease_out_quad,
    "easeInOutQuad": ease_in_out_quad,
    "easeInCubic": ease_in_cubic,
    "easeOutCubic": ease_out_cubic,
    "easeInOutCubic": ease_in_out_cubic,
    "easeInQuartic": ease_in_quartic,
    "easeOutQuartic": ease_out_quartic,
    "easeInOutQuartic": ease_in_out_quartic,
    "easeInQuintic": ease_in_quintic,
    "easeOutQuintic": ease_out_quintic,
    "easeInOutQuintic": ease_in_out_quintic,
    "easeInBounce": ease_in_bounce,
    "easeOutBounce": ease_out_bounce,
    "easeInOutBounce": ease_in_out_bounce,
    "easeInElastic": ease_in_elastic,
    "easeOutElastic": ease_out_elastic,
    "easeInOutElastic": ease_in_out_elastic,
})


def easing_names() -> list[str]:
    """List registered curve names in registry order."""
    return list(EASINGS)


def resolve_easing_name(name: str) -> str:
    """Return ``name`` if registered, else the default curve name."""
    return name if name in EASINGS else DEFAULT_EASING


def get_easing(
    name: str, on_unknown: Callable[[str], None] | None = None
) -> EasingFn:
    """Look up a curve by name, falling back to the default for unknown names.

    An unknown name is not an error. It is logged as a warning and reported
    to ``on_unknown`` when given.
    """
    fn = EASINGS.get(name)
    if fn is not None:
        return fn
    logger.warning(f"Unknown easing {name!r}, using {DEFAULT_EASING}")
    if on_unknown is not None:
        on_unknown(name)
    return EASINGS[DEFAULT_EASING]
