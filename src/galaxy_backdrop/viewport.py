"""Viewport bounds tracking."""

import logging
from typing import Callable

logger = logging.getLogger(__name__)

ViewportQuery = Callable[[], tuple[int, int]]


class ViewportTracker:
    """Owns the current surface bounds, refreshed on every resize notification."""

    def __init__(self, query: ViewportQuery):
        """
        Initialize the tracker and read the initial bounds.

        Args:
            query: Host callable reporting the viewport size
        """
        self._query = query
        self.width = 0
        self.height = 0
        self.on_resize()

    def current_bounds(self) -> tuple[int, int]:
        return self.width, self.height

    def on_resize(self) -> None:
        """Re-read the viewport size. Star positions are not remapped."""
        width, height = self._query()
        self.width = max(0, int(width))
        self.height = max(0, int(height))
        logger.debug("Viewport bounds now %dx%d", self.width, self.height)
