"""Lanes mode: one animator per easing curve."""
from __future__ import annotations

from typing import Sequence

import pygame

from glide_tween import Animator2D

from ui.constants import (
    CURVE_W,
    DOT_RADIUS,
    EASING_NAMES,
    LABEL_COLOR,
    LABEL_W,
    LANE_BG,
    LANE_BORDER,
    LANE_H,
    LEFT_X,
    RIGHT_X,
    TRACK_RAIL,
    TRACK_W,
    easing_color,
)
from ui.curves import draw_curve_plot


def _progress(anim: Animator2D) -> float:
    """Normalized time for the curve dot, or -1 when idle."""
    if not anim.is_running or anim.duration <= 0:
        return -1.0
    return min(anim.get_elapsed() / anim.duration, 1.0)


def draw_lanes(
    surface: pygame.Surface, animators: Sequence[Animator2D], font: pygame.font.Font
) -> None:
    """Draw each animator's lane: label, curve plot, rail and moving dot."""
    lanes_w = LABEL_W + CURVE_W + TRACK_W

    for i, (name, anim) in enumerate(zip(EASING_NAMES, animators)):
        lane_y = i * LANE_H
        pygame.draw.rect(surface, LANE_BG, (0, lane_y, lanes_w, LANE_H))
        pygame.draw.line(surface, LANE_BORDER, (0, lane_y + LANE_H - 1), (lanes_w, lane_y + LANE_H - 1))

        label = font.render(name, True, LABEL_COLOR)
        surface.blit(label, (8, lane_y + LANE_H // 2 - label.get_height() // 2))

        draw_curve_plot(surface, name, LABEL_W, lane_y + 1, CURVE_W, LANE_H - 2, _progress(anim))

        color = easing_color(name)
        x, y = anim.get_current_position()
        pygame.draw.line(surface, TRACK_RAIL, (LEFT_X, int(y)), (RIGHT_X, int(y)), 1)
        pygame.draw.circle(surface, color, (int(x), int(y)), DOT_RADIUS)
