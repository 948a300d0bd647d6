"""Easing curve plot renderer."""
from __future__ import annotations

import pygame

from glide_tween import EASINGS

from ui.constants import CURVE_BG, TEXT_DIM, easing_color

# Vertical range of the plot; elastic curves overshoot [0, 1].
_V_MIN = -0.3
_V_MAX = 1.3


def draw_curve_plot(
    surface: pygame.Surface,
    easing_name: str,
    x: int,
    y: int,
    w: int,
    h: int,
    current_t: float,
) -> None:
    """Draw an easing curve with a tracking dot at ``current_t`` (skipped if < 0)."""
    pad = 3
    plot_x = x + pad
    plot_y = y + pad
    plot_w = w - 2 * pad
    plot_h = h - 2 * pad

    pygame.draw.rect(surface, CURVE_BG, (x, y, w, h))

    def to_screen(t: float, v: float) -> tuple[float, float]:
        norm = (v - _V_MIN) / (_V_MAX - _V_MIN)
        return plot_x + t * plot_w, plot_y + plot_h - norm * plot_h

    # Baseline and target line
    pygame.draw.line(surface, TEXT_DIM, to_screen(0, 0), to_screen(1, 0))
    pygame.draw.line(surface, TEXT_DIM, to_screen(0, 1), to_screen(1, 1))

    easing_fn = EASINGS.get(easing_name)
    if easing_fn is None:
        return

    color = easing_color(easing_name)
    samples = 40
    points = [to_screen(i / samples, easing_fn(i / samples, 0, 1, 1)) for i in range(samples + 1)]
    pygame.draw.lines(surface, color, False, points, 1)

    if 0.0 <= current_t <= 1.0:
        dot_x, dot_y = to_screen(current_t, easing_fn(current_t, 0, 1, 1))
        pygame.draw.circle(surface, (255, 255, 255), (int(dot_x), int(dot_y)), 2)
