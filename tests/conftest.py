"""Shared fixtures and test doubles."""

import random
from typing import Callable, Iterator, Sequence

import pytest

from galaxy_backdrop.config import BackdropConfig
from galaxy_backdrop.engine import AnimationEngine
from galaxy_backdrop.host import HeadlessHost


class RecordingSurface:
    """Drawing surface that only records the calls made on it."""

    def __init__(self, width: int = 0, height: int = 0):
        self.bounds = (width, height)
        self.calls: list[tuple] = []
        self.fill_style: Sequence[float] | None = None
        self.global_alpha = 1.0
        self.on_clear: Callable[[], None] | None = None

    @property
    def draw_calls(self) -> int:
        return sum(1 for call in self.calls if call[0] in ("fill_rect", "fill_circle"))

    def get_bounds(self) -> tuple[int, int]:
        return self.bounds

    def resize(self, width: int, height: int) -> None:
        self.bounds = (width, height)
        self.calls.append(("resize", width, height))

    def clear_rect(self, x: float, y: float, w: float, h: float) -> None:
        self.calls.append(("clear_rect", x, y, w, h))
        if self.on_clear is not None:
            self.on_clear()

    def set_fill_style(self, color: Sequence[float]) -> None:
        self.fill_style = color

    def set_global_alpha(self, alpha: float) -> None:
        self.global_alpha = alpha

    def fill_rect(self, x: float, y: float, w: float, h: float) -> None:
        self.calls.append(("fill_rect", x, y, w, h, self.fill_style, self.global_alpha))

    def fill_circle(self, cx: float, cy: float, r: float) -> None:
        self.calls.append(("fill_circle", cx, cy, r, self.fill_style, self.global_alpha))


class FixedRandom(random.Random):
    """Random source whose ``random()`` always returns the same value."""

    def __init__(self, value: float = 0.5):
        super().__init__(0)
        self.value = value

    def random(self) -> float:
        return self.value


@pytest.fixture
def surface() -> RecordingSurface:
    return RecordingSurface()


@pytest.fixture
def host(surface: RecordingSurface) -> HeadlessHost:
    return HeadlessHost(surface, width=800, height=600)


@pytest.fixture
def small_config() -> BackdropConfig:
    return BackdropConfig(dynamic_count=10, static_count=15)


@pytest.fixture
def running_engine(host: HeadlessHost, small_config: BackdropConfig) -> Iterator[AnimationEngine]:
    engine = AnimationEngine(host, small_config, rng=random.Random(1234))
    engine.start()
    yield engine
    engine.stop()


@pytest.fixture
def fixed_random() -> type[FixedRandom]:
    return FixedRandom
