"""Easing Gallery — every registered curve, swung back and forth by a Timer.

Exercises glide-tween (Animator, Animator2D, AnimatorConfig) and
glide-schedule (Timer on a frame-pumped ManualScheduler).

Controls:
  S       Toggle the reversal timer
  T       Send the first lane's dot to a random point (lanes mode)
  R       Send every dot home before the next timer fire (lanes mode)
  Tab     Toggle lanes / sizes mode
  Click   Grow or shrink the bar and circle (sizes mode)
  Esc     Quit
"""
from __future__ import annotations

import logging
import random
import sys

import pygame

from glide import ManualClock
from glide_schedule import ManualScheduler, Timer

from game.animators import (
    build_lane_animators,
    build_size_animators,
    jump_to_random,
    reverse_all,
    send_home,
    toggle_sizes,
)
from ui.constants import BG_COLOR, EASING_NAMES, FPS, SCREEN_H, SCREEN_W, TIMER_INTERVAL
from ui.lanes import draw_lanes
from ui.sizes import draw_sizes
from ui.status import draw_sidebar, draw_status_bar

logger = logging.getLogger("easing_gallery")


class GameState:
    """Holds the animators, the timer and the clock they share."""

    def __init__(self, now_ms: float) -> None:
        # Time advances once per frame; timer fires happen on the frame loop.
        self.scheduler = ManualScheduler(ManualClock(now_ms))
        clock = self.scheduler.clock

        self.mode = "lanes"
        self.fire_count = 0
        self.rng = random.Random(42)

        self.lanes = build_lane_animators(clock)
        self.bar, self.circle = build_size_animators(clock)
        self.timer = Timer(self._on_timer, TIMER_INTERVAL, scheduler=self.scheduler)

        logger.info(f"Curves: {', '.join(EASING_NAMES)}")
        self.timer.start()
        for anim in self.lanes:
            anim.start()

    def _on_timer(self) -> None:
        self.fire_count += 1
        logger.info("tick")
        reverse_all(self.lanes)

    def toggle_timer(self) -> None:
        if self.timer.is_running:
            self.timer.stop()
        else:
            self.timer.start()
        logger.info(f"timer running={self.timer.is_running}")

    def advance(self, now_ms: float) -> None:
        self.scheduler.advance_to(now_ms)
        for anim in self.lanes:
            anim.update()
        self.bar.update()
        self.circle.update()

    @property
    def moving(self) -> int:
        animators = self.lanes if self.mode == "lanes" else (self.bar, self.circle)
        return sum(1 for anim in animators if anim.is_running)


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(message)s")

    pygame.init()
    screen = pygame.display.set_mode((SCREEN_W, SCREEN_H))
    pygame.display.set_caption("Easing Gallery — glide demo")
    clock = pygame.time.Clock()
    font = pygame.font.SysFont("monospace", 12)

    state = GameState(pygame.time.get_ticks())
    running = True

    while running:
        clock.tick(FPS)

        # --- Events ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False

            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False

                elif event.key == pygame.K_TAB:
                    state.mode = "sizes" if state.mode == "lanes" else "lanes"

                elif event.key == pygame.K_s:
                    state.toggle_timer()

                elif event.key == pygame.K_t and state.mode == "lanes":
                    jump_to_random(state.lanes[0], state.rng)

                elif event.key == pygame.K_r and state.mode == "lanes":
                    send_home(state.lanes, state.timer)

            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                if state.mode == "sizes":
                    toggle_sizes(state.bar, state.circle)

        # --- Update ---
        state.advance(pygame.time.get_ticks())

        # --- Render ---
        screen.fill(BG_COLOR)

        if state.mode == "lanes":
            draw_lanes(screen, state.lanes, font)
        else:
            draw_sizes(screen, state.bar, state.circle, font)

        draw_sidebar(
            screen,
            font,
            timer=state.timer,
            fire_count=state.fire_count,
            moving=state.moving,
            mode=state.mode,
        )
        draw_status_bar(screen, font, state.mode)

        pygame.display.flip()

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
