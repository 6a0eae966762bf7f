"""Layered, animated starfield backdrop."""

from .config import BackdropConfig, ConfigError, load_config_from_env
from .engine import AnimationEngine, EngineState
from .host import HeadlessHost, HostEnvironment
from .scheduler import FrameScheduler
from .stars import Star, StarField, create_star, generate_star_field, populate
from .surface import DrawingSurface, PillowSurface
from .viewport import ViewportTracker

__all__ = [
    "AnimationEngine",
    "BackdropConfig",
    "ConfigError",
    "DrawingSurface",
    "EngineState",
    "FrameScheduler",
    "HeadlessHost",
    "HostEnvironment",
    "PillowSurface",
    "Star",
    "StarField",
    "ViewportTracker",
    "create_star",
    "generate_star_field",
    "load_config_from_env",
    "populate",
]
