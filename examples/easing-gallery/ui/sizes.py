"""Sizes mode: a bouncing bar and a growing circle."""
from __future__ import annotations

import pygame

from glide_tween import Animator

from ui.constants import BAR_COLOR, SCREEN_H, SCREEN_W, SIDEBAR_W, STATUS_H, TEXT_DIM


def draw_sizes(
    surface: pygame.Surface, bar: Animator, circle: Animator, font: pygame.font.Font
) -> None:
    """Draw the width-animated bar and circle."""
    play_w = SCREEN_W - SIDEBAR_W
    play_h = SCREEN_H - STATUS_H
    pygame.draw.rect(surface, (220, 220, 220), (0, 0, play_w, play_h))

    bar_w = bar.get_current_values()["width"]
    pygame.draw.rect(surface, BAR_COLOR, (100, 50, max(int(bar_w), 0), 100))
    surface.blit(font.render(bar.easing_name, True, TEXT_DIM), (100, 160))

    diameter = circle.get_current_values()["width"]
    center = (play_w // 2, 200 + (play_h - 200) // 2)
    pygame.draw.circle(surface, BAR_COLOR, center, max(int(diameter / 2), 1))
    surface.blit(font.render(circle.easing_name, True, TEXT_DIM), (center[0] - 40, 190))
