"""Info panel (sidebar) and bottom status bar."""
from __future__ import annotations

import pygame

from glide_schedule import Timer

from ui.constants import (
    LABEL_COLOR,
    LANE_COUNT,
    LANE_H,
    SCREEN_W,
    SIDEBAR_BG,
    SIDEBAR_W,
    STATUS_BG,
    STATUS_H,
    TEXT_COLOR,
    TEXT_DIM,
)


def draw_sidebar(
    surface: pygame.Surface,
    font: pygame.font.Font,
    timer: Timer,
    fire_count: int,
    moving: int,
    mode: str,
) -> None:
    """Draw right-side info panel."""
    x = SCREEN_W - SIDEBAR_W
    h = LANE_H * LANE_COUNT

    pygame.draw.rect(surface, SIDEBAR_BG, (x, 0, SIDEBAR_W, h))
    pygame.draw.line(surface, (50, 50, 70), (x, 0), (x, h))

    pad = 10
    line_h = 22
    cx = x + pad
    cy = 8

    surface.blit(font.render("INFO", True, LABEL_COLOR), (cx, cy))
    cy += line_h + 4

    mode_label = "Lanes" if mode == "lanes" else "Sizes"
    surface.blit(font.render(f"Mode: {mode_label}", True, TEXT_COLOR), (cx, cy))
    cy += line_h

    timer_str = "ON" if timer.is_running else "OFF"
    timer_color = (100, 255, 100) if timer.is_running else TEXT_DIM
    surface.blit(font.render(f"Timer: {timer_str}", True, timer_color), (cx, cy))
    cy += line_h
    surface.blit(font.render(f"Every: {timer.interval:.0f}ms", True, TEXT_COLOR), (cx, cy))
    cy += line_h
    surface.blit(font.render(f"Next: {timer.remaining_time:.0f}ms", True, TEXT_COLOR), (cx, cy))
    cy += line_h
    surface.blit(font.render(f"Fires: {fire_count}", True, TEXT_COLOR), (cx, cy))
    cy += line_h + 8

    surface.blit(font.render(f"Moving: {moving}", True, TEXT_COLOR), (cx, cy))


def draw_status_bar(surface: pygame.Surface, font: pygame.font.Font, mode: str) -> None:
    """Draw bottom key-bindings bar."""
    y = LANE_H * LANE_COUNT
    pygame.draw.rect(surface, STATUS_BG, (0, y, SCREEN_W, STATUS_H))
    pygame.draw.line(surface, (50, 50, 70), (0, y), (SCREEN_W, y))

    if mode == "lanes":
        text = "[S] Timer  [T] Jump first  [R] Home  [Tab] Sizes  [Esc] Quit"
    else:
        text = "[Click] Grow/shrink  [S] Timer  [Tab] Lanes  [Esc] Quit"

    label = font.render(text, True, TEXT_DIM)
    surface.blit(label, (8, y + STATUS_H // 2 - label.get_height() // 2))
