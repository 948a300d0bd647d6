"""Animator construction and retargeting for the gallery."""
from __future__ import annotations

import random
from typing import Sequence

from glide import Clock
from glide_schedule import Timer
from glide_tween import Animator, Animator2D, AnimatorConfig

from ui.constants import (
    BAR_MAX,
    BAR_MIN,
    CIRCLE_MAX,
    CIRCLE_MIN,
    EASING_NAMES,
    FIRST_LEG_MS,
    HOME_MARGIN_MS,
    JUMP_MS,
    LANE_H,
    LEFT_X,
    RIGHT_X,
    SCREEN_H,
    SCREEN_W,
    SIDEBAR_W,
    STATUS_H,
    SWING_MS,
)


def lane_y(index: int) -> float:
    return index * LANE_H + LANE_H / 2


def build_lane_animators(clock: Clock) -> list[Animator2D]:
    """One animator per curve, heading from the left column to the right."""
    animators = []
    for i, name in enumerate(EASING_NAMES):
        anim = Animator2D(LEFT_X, lane_y(i), duration=FIRST_LEG_MS, easing=name, clock=clock)
        anim.set_target_position(RIGHT_X, lane_y(i))
        animators.append(anim)
    return animators


def reverse_all(animators: Sequence[Animator2D]) -> None:
    """Swing every animator to the opposite column."""
    for i, anim in enumerate(animators):
        x, _ = anim.get_current_position()
        start_x = RIGHT_X if x == RIGHT_X else LEFT_X
        target_x = RIGHT_X if x == LEFT_X else LEFT_X
        anim.set_start_position(start_x, lane_y(i))
        anim.set_target_position(target_x, lane_y(i))
        anim.duration = SWING_MS
        anim.start()


def jump_to_random(anim: Animator2D, rng: random.Random) -> None:
    """Send one animator to a random point in the lanes area."""
    tx = rng.uniform(0, SCREEN_W - SIDEBAR_W)
    ty = rng.uniform(0, SCREEN_H - STATUS_H)
    anim.duration = JUMP_MS
    anim.set_target_position(tx, ty)
    anim.start()


def send_home(animators: Sequence[Animator2D], timer: Timer) -> None:
    """Return everyone to the left column before the timer fires next."""
    for i, anim in enumerate(animators):
        x, _ = anim.get_current_position()
        anim.set_start_position(x, lane_y(i))
        anim.set_end_values({"x": LEFT_X, "y": lane_y(i)})
        anim.duration = max(timer.remaining_time - HOME_MARGIN_MS, 0)
        anim.start()


def build_size_animators(clock: Clock) -> tuple[Animator, Animator]:
    """Bar and circle width animators, configured from host-style option dicts."""
    bar = Animator(
        AnimatorConfig.from_dict({
            "values": {"width": BAR_MIN},
            "endValues": {"width": BAR_MAX},
            "duration": JUMP_MS,
            "easingFunctionName": "easeOutBounce",
        }),
        clock=clock,
    )
    circle = Animator(
        AnimatorConfig.from_dict({
            "values": {"width": CIRCLE_MIN},
            "endValues": {"width": CIRCLE_MAX},
            "durationMs": FIRST_LEG_MS,
            "curveName": "easeOutElastic",
        }),
        clock=clock,
    )
    return bar, circle


def toggle_size(anim: Animator, small: float, large: float) -> None:
    """Grow from ``small`` or shrink from ``large``; mid-flight snaps to ``large``."""
    width = anim.get_current_values()["width"]
    start = small if width == small else large
    end = small if width == large else large
    anim.set_start_values({"width": start})
    anim.set_end_values({"width": end})
    anim.start()


def toggle_sizes(bar: Animator, circle: Animator) -> None:
    toggle_size(bar, BAR_MIN, BAR_MAX)
    toggle_size(circle, CIRCLE_MIN, CIRCLE_MAX)
