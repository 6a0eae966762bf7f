"""Host environment contract and an in-process headless host."""

import logging
from typing import Callable, Protocol

from .constants import DEFAULT_FPS, DEFAULT_HEIGHT, DEFAULT_WIDTH
from .scheduler import FrameCallback, FrameScheduler
from .surface import DrawingSurface

logger = logging.getLogger(__name__)

ResizeListener = Callable[[], None]


class HostEnvironment(Protocol):
    """What the engine needs from whatever embeds it."""

    def viewport_size(self) -> tuple[int, int]: ...

    def add_resize_listener(self, listener: ResizeListener) -> None: ...

    def remove_resize_listener(self, listener: ResizeListener) -> None: ...

    def request_frame(self, callback: FrameCallback) -> int: ...

    def cancel_frame(self, handle: int) -> None: ...

    def get_surface(self) -> DrawingSurface | None: ...


class HeadlessHost:
    """Host driven by hand: the caller resizes the viewport and ticks frames."""

    def __init__(
        self,
        surface: DrawingSurface | None = None,
        width: int = DEFAULT_WIDTH,
        height: int = DEFAULT_HEIGHT,
        fps: int = DEFAULT_FPS,
    ):
        self.surface = surface
        self.scheduler = FrameScheduler(fps)
        self._size = (width, height)
        self._listeners: list[ResizeListener] = []

    @property
    def resize_listener_count(self) -> int:
        return len(self._listeners)

    def viewport_size(self) -> tuple[int, int]:
        return self._size

    def set_viewport(self, width: int, height: int) -> None:
        """Change the viewport size and notify resize listeners synchronously."""
        self._size = (width, height)
        logger.debug("Host viewport resized to %dx%d", width, height)
        for listener in list(self._listeners):
            listener()

    def add_resize_listener(self, listener: ResizeListener) -> None:
        self._listeners.append(listener)

    def remove_resize_listener(self, listener: ResizeListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def request_frame(self, callback: FrameCallback) -> int:
        return self.scheduler.request(callback)

    def cancel_frame(self, handle: int) -> None:
        self.scheduler.cancel(handle)

    def get_surface(self) -> DrawingSurface | None:
        return self.surface

    def advance_frame(self) -> int:
        """Flush one display refresh; returns how many callbacks ran."""
        return self.scheduler.tick()
