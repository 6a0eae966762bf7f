"""Animation engine: per-frame update and render of the star field."""

import logging
import math
import random
from enum import Enum

from .config import BackdropConfig
from .constants import (
    DRIFT_AMPLITUDE,
    DRIFT_FREQUENCY,
    FLICKER_FLOOR,
    FLICKER_SCALE,
    WRAP_MARGIN,
)
from .host import HostEnvironment
from .stars import Star, StarField, generate_star_field, uniform
from .surface import DrawingSurface
from .viewport import ViewportTracker

logger = logging.getLogger(__name__)


class EngineState(Enum):
    IDLE = "idle"
    RUNNING = "running"


def flicker_opacity(time: float, flicker_speed: float, flicker_phase: float) -> float:
    """Map the twinkle sine from ``[-1, 1]`` onto an opacity in ``[0.1, 0.4]``."""
    flicker = math.sin(time * flicker_speed + flicker_phase)
    return (flicker + 1) * FLICKER_SCALE + FLICKER_FLOOR


def advance_dynamic_star(star: Star, bounds: tuple[int, int], rng: random.Random) -> None:
    """Move a dynamic star one frame down, drift it sideways, wrap it at the bottom."""
    width, height = bounds
    star.y += star.speed
    star.x += math.sin(star.y * DRIFT_FREQUENCY + star.flicker_phase) * DRIFT_AMPLITUDE
    if star.y > height + WRAP_MARGIN:
        star.y = -WRAP_MARGIN
        star.x = uniform(rng, 0, width)


class AnimationEngine:
    """
    Drives the starfield through the host's frame scheduler.

    The engine is either IDLE or RUNNING. While running it always holds the
    handle of the single pending frame callback, so ``stop`` can cancel it.
    """

    def __init__(
        self,
        host: HostEnvironment,
        config: BackdropConfig | None = None,
        rng: random.Random | None = None,
    ):
        """
        Initialize the engine in the IDLE state.

        Args:
            host: Provides viewport size, resize events, frames and the surface
            config: Star counts, depth band, clock step and palette
            rng: Random source for star generation and respawns
        """
        self.host = host
        self.config = config or BackdropConfig()
        self.rng = rng or random.Random()
        self.state = EngineState.IDLE
        self.surface: DrawingSurface | None = None
        self.viewport: ViewportTracker | None = None
        self.field = StarField()
        self.frame_count = 0
        self._pending_frame: int | None = None

    @property
    def time(self) -> float:
        # Derived from an integer counter so long sessions don't accumulate error.
        return self.frame_count * self.config.time_step

    @property
    def is_running(self) -> bool:
        return self.state is EngineState.RUNNING

    def start(self) -> None:
        """Generate the stars and enter the frame loop. No-op without a surface."""
        if self.is_running:
            logger.debug("Engine already running")
            return

        surface = self.host.get_surface()
        if surface is None:
            logger.debug("No drawing surface available; engine stays idle")
            return

        self.surface = surface
        self.viewport = ViewportTracker(self.host.viewport_size)
        self.surface.resize(*self.viewport.current_bounds())
        self.field = generate_star_field(self.viewport.current_bounds(), self.config, self.rng)
        self.frame_count = 0

        self.host.add_resize_listener(self._handle_resize)
        self.state = EngineState.RUNNING
        self._pending_frame = self.host.request_frame(self._on_frame)
        logger.debug(
            "Engine started with %d dynamic and %d static stars",
            len(self.field.dynamic_stars),
            len(self.field.static_stars),
        )

    def stop(self) -> None:
        """Deregister the resize listener and cancel the pending frame. Idempotent."""
        if not self.is_running:
            return
        self.host.remove_resize_listener(self._handle_resize)
        if self._pending_frame is not None:
            self.host.cancel_frame(self._pending_frame)
            self._pending_frame = None
        self.state = EngineState.IDLE
        logger.debug("Engine stopped after %d frames", self.frame_count)

    def reset(self) -> None:
        """Regenerate both star collections against the current bounds."""
        if not self.is_running or self.viewport is None:
            return
        self.field = generate_star_field(self.viewport.current_bounds(), self.config, self.rng)

    def render_frame(self) -> None:
        """Clear, advance the clock, draw static stars, then move and draw dynamic ones."""
        surface = self.surface
        if surface is None or self.viewport is None:
            return
        bounds = self.viewport.current_bounds()
        width, height = bounds

        surface.clear_rect(0, 0, width, height)
        self.frame_count += 1
        time = self.time

        surface.set_fill_style(self.config.static_color)
        for star in self.field.static_stars:
            surface.set_global_alpha(flicker_opacity(time, star.flicker_speed, star.flicker_phase))
            surface.fill_rect(star.x, star.y, star.size, star.size)

        surface.set_fill_style(self.config.dynamic_color)
        for star in self.field.dynamic_stars:
            surface.set_global_alpha(star.base_alpha * star.depth)
            advance_dynamic_star(star, bounds, self.rng)
            surface.fill_circle(star.x, star.y, star.size)

    def _on_frame(self, _timestamp: float) -> None:
        self._pending_frame = None
        if not self.is_running:
            return
        self.render_frame()
        # A listener or surface call may have stopped us mid-frame.
        if self.is_running:
            self._pending_frame = self.host.request_frame(self._on_frame)

    def _handle_resize(self) -> None:
        if self.viewport is None or self.surface is None:
            return
        self.viewport.on_resize()
        self.surface.resize(*self.viewport.current_bounds())
