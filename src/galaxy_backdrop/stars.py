"""Procedural generation of the two star collections."""

import random
from dataclasses import dataclass, field
from typing import Callable, Literal

from .config import BackdropConfig
from .constants import (
    BASE_ALPHA_RANGE,
    FLICKER_PHASE_RANGE,
    FLICKER_SPEED_RANGE,
    SIZE_RANGE,
    SPEED_FACTOR_RANGE,
)

StarRole = Literal["dynamic", "static"]
Bounds = tuple[int, int]
DepthSource = Callable[[], float]


@dataclass(slots=True)
class Star:
    x: float
    y: float
    depth: float
    speed: float
    size: float
    base_alpha: float
    flicker_speed: float
    flicker_phase: float


@dataclass
class StarField:
    """Dynamic (drifting) and static (twinkling) stars, in draw order."""

    dynamic_stars: list[Star] = field(default_factory=list)
    static_stars: list[Star] = field(default_factory=list)


def uniform(rng: random.Random, low: float, high: float) -> float:
    """Draw from ``[low, high)``; ``rng.uniform`` may return ``high``."""
    return low + rng.random() * (high - low)


def create_star(
    bounds: Bounds,
    depth: float,
    role: StarRole,
    rng: random.Random,
) -> Star:
    """
    Create one star somewhere inside the bounds.

    Args:
        bounds: Current ``(width, height)`` of the surface
        depth: Parallax factor, must be positive
        role: ``"dynamic"`` stars scale their size by depth, ``"static"`` ones don't
        rng: Random source
    """
    width, height = bounds
    x = uniform(rng, 0, width)
    y = uniform(rng, 0, height)
    speed = depth * uniform(rng, *SPEED_FACTOR_RANGE)
    size = uniform(rng, *SIZE_RANGE) * (depth if role == "dynamic" else 1)
    return Star(
        x=x,
        y=y,
        depth=depth,
        speed=speed,
        size=size,
        base_alpha=uniform(rng, *BASE_ALPHA_RANGE),
        flicker_speed=uniform(rng, *FLICKER_SPEED_RANGE),
        flicker_phase=uniform(rng, *FLICKER_PHASE_RANGE),
    )


def populate(
    count: int,
    bounds: Bounds,
    depth_source: DepthSource,
    role: StarRole,
    rng: random.Random,
) -> list[Star]:
    """Create ``count`` stars, taking one depth from ``depth_source`` per star."""
    if count < 0:
        raise ValueError(f"Star count must be >= 0, got {count}")
    return [create_star(bounds, depth_source(), role, rng) for _ in range(count)]


def dynamic_depth_source(config: BackdropConfig, rng: random.Random) -> DepthSource:
    depth_min, depth_max = config.dynamic_depth_range
    return lambda: uniform(rng, depth_min, depth_max)


def static_depth_source(config: BackdropConfig) -> DepthSource:
    return lambda: config.static_depth


def generate_star_field(
    bounds: Bounds,
    config: BackdropConfig,
    rng: random.Random,
) -> StarField:
    """Populate both collections, dynamic first."""
    dynamic_stars = populate(
        config.dynamic_count, bounds, dynamic_depth_source(config, rng), "dynamic", rng
    )
    static_stars = populate(
        config.static_count, bounds, static_depth_source(config), "static", rng
    )
    return StarField(dynamic_stars=dynamic_stars, static_stars=static_stars)
