"""Frame scheduler with requestAnimationFrame-style semantics."""

from typing import Callable

from .constants import DEFAULT_FPS

FrameCallback = Callable[[float], None]


class FrameScheduler:
    """
    Queue of one-shot frame callbacks, flushed once per display refresh.

    Callbacks requested while a tick is running are deferred to the next
    tick, so a callback that re-arms itself runs exactly once per frame.
    """

    def __init__(self, fps: int = DEFAULT_FPS):
        self.fps = fps
        self.frame_index = 0
        self._next_handle = 1
        self._callbacks: dict[int, FrameCallback] = {}

    @property
    def pending(self) -> int:
        """Number of callbacks waiting for the next tick."""
        return len(self._callbacks)

    @property
    def timestamp_ms(self) -> float:
        return self.frame_index * 1000 / self.fps

    def request(self, callback: FrameCallback) -> int:
        """Run ``callback`` once on the next tick; returns a handle for ``cancel``."""
        handle = self._next_handle
        self._next_handle += 1
        self._callbacks[handle] = callback
        return handle

    def cancel(self, handle: int | None) -> None:
        """Drop a pending callback. Unknown or already-run handles are ignored."""
        if handle is not None:
            self._callbacks.pop(handle, None)

    def tick(self) -> int:
        """
        Run every callback queued before this tick, in request order.

        Returns:
            Number of callbacks that ran
        """
        due = list(self._callbacks)
        timestamp = self.timestamp_ms
        ran = 0
        for handle in due:
            # An earlier callback in this tick may have cancelled it.
            callback = self._callbacks.pop(handle, None)
            if callback is None:
                continue
            callback(timestamp)
            ran += 1
        self.frame_index += 1
        return ran
