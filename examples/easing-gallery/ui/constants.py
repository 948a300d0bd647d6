"""Layout constants and color definitions."""
from glide_tween import easing_names

# Timing
FPS = 60
TIMER_INTERVAL = 2000  # ms between automatic reversals
FIRST_LEG_MS = 1000
SWING_MS = 1500
JUMP_MS = 500
HOME_MARGIN_MS = 150

EASING_NAMES = easing_names()

# Layout dimensions
LANE_COUNT = len(EASING_NAMES)
LANE_H = 26
LABEL_W = 150
CURVE_W = 60
TRACK_W = 440
SIDEBAR_W = 150
STATUS_H = 36

SCREEN_W = LABEL_W + CURVE_W + TRACK_W + SIDEBAR_W
SCREEN_H = LANE_H * LANE_COUNT + STATUS_H

TRACK_PAD = 20
LEFT_X = LABEL_W + CURVE_W + TRACK_PAD
RIGHT_X = LABEL_W + CURVE_W + TRACK_W - TRACK_PAD

# Dot
DOT_RADIUS = 5

# Sizes mode
BAR_MIN, BAR_MAX = 20, 200
CIRCLE_MIN, CIRCLE_MAX = 20, 400

# Colors
BG_COLOR = (20, 20, 30)
LANE_BG = (30, 30, 45)
LANE_BORDER = (50, 50, 70)
CURVE_BG = (15, 15, 25)
TRACK_RAIL = (60, 60, 80)
SIDEBAR_BG = (25, 25, 38)
STATUS_BG = (35, 35, 50)
TEXT_COLOR = (200, 200, 210)
TEXT_DIM = (120, 120, 140)
LABEL_COLOR = (180, 180, 200)
BAR_COLOR = (0, 150, 255)

# Curve family -> color
FAMILY_COLORS: dict[str, tuple[int, int, int]] = {
    "Linear": (0, 220, 220),
    "Sine": (120, 200, 255),
    "Quad": (255, 160, 40),
    "Cubic": (60, 220, 80),
    "Quartic": (220, 80, 220),
    "Quintic": (255, 90, 90),
    "Bounce": (240, 230, 90),
    "Elastic": (150, 120, 255),
}


def easing_color(name: str) -> tuple[int, int, int]:
    for family, color in FAMILY_COLORS.items():
        if name.endswith(family):
            return color
    return (200, 200, 200)
