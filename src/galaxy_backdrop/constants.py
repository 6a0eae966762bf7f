"""Global constants for the starfield backdrop."""

import math

# Animation settings
DEFAULT_FPS = 60  # Nominal display refresh rate
TIME_STEP = 0.01  # Clock advance per frame (fixed, not wall-clock derived)

# Default viewport
DEFAULT_WIDTH = 800
DEFAULT_HEIGHT = 600

# Star counts
DYNAMIC_STAR_COUNT = 100
STATIC_STAR_COUNT = 180

# Depth (parallax factor)
DYNAMIC_DEPTH_MIN = 0.3
DYNAMIC_DEPTH_MAX = 1.5
STATIC_DEPTH = 0.2

# Per-star random ranges, upper bound exclusive
SPEED_FACTOR_RANGE = (0.05, 0.30)
SIZE_RANGE = (0.5, 1.5)
BASE_ALPHA_RANGE = (0.2, 0.6)
FLICKER_SPEED_RANGE = (0.02, 0.06)
FLICKER_PHASE_RANGE = (0.0, 2 * math.pi)

# Twinkle: sin() in [-1, 1] maps to opacity in [0.1, 0.4]
FLICKER_SCALE = 0.15
FLICKER_FLOOR = 0.1

# Sideways drift of dynamic stars
DRIFT_FREQUENCY = 0.002
DRIFT_AMPLITUDE = 0.2

# Dynamic stars respawn at -WRAP_MARGIN once below height + WRAP_MARGIN
WRAP_MARGIN = 10

# Colors (RGBA, alpha in 0..1 like a canvas fill style)
BACKGROUND_COLOR = (5, 6, 12)
STATIC_STAR_COLOR = (255, 255, 255, 0.8)  # Near-white
DYNAMIC_STAR_COLOR = (124, 244, 255, 1.0)  # Cyan tint
