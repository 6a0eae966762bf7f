"""Tunable settings for the starfield backdrop."""

import os
from dataclasses import dataclass
from typing import Mapping

from PIL import ImageColor

from .constants import (
    BACKGROUND_COLOR,
    DYNAMIC_DEPTH_MAX,
    DYNAMIC_DEPTH_MIN,
    DYNAMIC_STAR_COLOR,
    DYNAMIC_STAR_COUNT,
    STATIC_DEPTH,
    STATIC_STAR_COLOR,
    STATIC_STAR_COUNT,
    TIME_STEP,
)

RGB = tuple[int, int, int]
RGBA = tuple[int, int, int, float]

ENV_PREFIX = "GALAXY_"


class ConfigError(ValueError):
    """Raised when a backdrop setting is invalid."""
    pass


@dataclass(frozen=True)
class BackdropConfig:
    """Star counts, depth band, clock step and palette."""

    dynamic_count: int = DYNAMIC_STAR_COUNT
    static_count: int = STATIC_STAR_COUNT
    dynamic_depth_range: tuple[float, float] = (DYNAMIC_DEPTH_MIN, DYNAMIC_DEPTH_MAX)
    static_depth: float = STATIC_DEPTH
    time_step: float = TIME_STEP
    background_color: RGB = BACKGROUND_COLOR
    static_color: RGBA = STATIC_STAR_COLOR
    dynamic_color: RGBA = DYNAMIC_STAR_COLOR

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """
        Check invariants of the settings.

        Raises:
            ConfigError: If a count is negative, a depth is not positive,
                the depth band is inverted or the time step is negative.
        """
        if self.dynamic_count < 0 or self.static_count < 0:
            raise ConfigError("Star counts must be >= 0")
        depth_min, depth_max = self.dynamic_depth_range
        if depth_min <= 0 or self.static_depth <= 0:
            raise ConfigError("Star depth must be > 0")
        if depth_max < depth_min:
            raise ConfigError(
                f"Invalid depth range: {depth_min} > {depth_max}"
            )
        if self.time_step < 0:
            raise ConfigError("Time step must be >= 0")


def load_config_from_env(environ: Mapping[str, str] | None = None) -> BackdropConfig:
    """
    Build a config from ``GALAXY_*`` environment variables.

    Unset variables keep their defaults.

    Args:
        environ: Mapping to read from, defaults to ``os.environ``

    Raises:
        ConfigError: If a value cannot be parsed or is out of range
    """
    env = os.environ if environ is None else environ
    defaults = BackdropConfig()
    depth_min, depth_max = defaults.dynamic_depth_range

    return BackdropConfig(
        dynamic_count=_read(env, "DYNAMIC_STARS", int, defaults.dynamic_count),
        static_count=_read(env, "STATIC_STARS", int, defaults.static_count),
        dynamic_depth_range=(
            _read(env, "DEPTH_MIN", float, depth_min),
            _read(env, "DEPTH_MAX", float, depth_max),
        ),
        static_depth=_read(env, "STATIC_DEPTH", float, defaults.static_depth),
        time_step=_read(env, "TIME_STEP", float, defaults.time_step),
        background_color=_read(env, "BACKGROUND", parse_rgb, defaults.background_color),
    )


def parse_rgb(value: str) -> RGB:
    """Parse a color string such as ``#05060c`` into an RGB tuple."""
    try:
        rgb = ImageColor.getrgb(value)
    except ValueError as e:
        raise ConfigError(f"Invalid color '{value}'") from e
    return rgb[0], rgb[1], rgb[2]


def _read(env: Mapping[str, str], name: str, parse, default):
    raw = env.get(ENV_PREFIX + name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return parse(raw.strip())
    except ValueError as e:
        raise ConfigError(f"Invalid value for {ENV_PREFIX}{name}: {raw!r}") from e
