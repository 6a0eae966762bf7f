"""Drawing surface contract and its Pillow implementation."""

from typing import Protocol, Sequence

from PIL import Image, ImageDraw

from .constants import BACKGROUND_COLOR


class DrawingSurface(Protocol):
    """Minimal pixel API the animation engine draws through."""

    def get_bounds(self) -> tuple[int, int]: ...

    def resize(self, width: int, height: int) -> None: ...

    def clear_rect(self, x: float, y: float, w: float, h: float) -> None: ...

    def set_fill_style(self, color: Sequence[float]) -> None: ...

    def set_global_alpha(self, alpha: float) -> None: ...

    def fill_rect(self, x: float, y: float, w: float, h: float) -> None: ...

    def fill_circle(self, cx: float, cy: float, r: float) -> None: ...


class PillowSurface:
    """
    Canvas-like surface backed by an RGB Pillow image.

    Fill color and global alpha are independent channels, as on an HTML
    canvas: a fill lands with ``color_alpha * global_alpha`` opacity and is
    blended over what is already there.
    """

    def __init__(
        self,
        width: int,
        height: int,
        background_color: tuple[int, int, int] = BACKGROUND_COLOR,
    ):
        self.background_color = tuple(background_color)
        self._fill_color: tuple[int, int, int, float] = (0, 0, 0, 1.0)
        self._global_alpha = 1.0
        self.resize(width, height)

    def get_bounds(self) -> tuple[int, int]:
        return self.image.size

    def resize(self, width: int, height: int) -> None:
        """Replace the pixel buffer; like a canvas, resizing clears it."""
        self.image = Image.new("RGB", (max(0, width), max(0, height)), self.background_color)
        self._plain = ImageDraw.Draw(self.image)
        self._blend = ImageDraw.Draw(self.image, "RGBA")

    def clear_rect(self, x: float, y: float, w: float, h: float) -> None:
        if w <= 0 or h <= 0 or self._is_empty():
            return
        self._plain.rectangle(
            [x, y, x + w - 1, y + h - 1], fill=self.background_color
        )

    def set_fill_style(self, color: Sequence[float]) -> None:
        """Set the fill color as RGB or RGBA, alpha given in ``0..1``."""
        alpha = color[3] if len(color) > 3 else 1.0
        self._fill_color = (int(color[0]), int(color[1]), int(color[2]), float(alpha))

    def set_global_alpha(self, alpha: float) -> None:
        self._global_alpha = min(1.0, max(0.0, alpha))

    def fill_rect(self, x: float, y: float, w: float, h: float) -> None:
        if self._is_empty():
            return
        self._blend.rectangle(
            [x, y, x + max(w - 1, 0), y + max(h - 1, 0)], fill=self._ink()
        )

    def fill_circle(self, cx: float, cy: float, r: float) -> None:
        if self._is_empty():
            return
        r = max(r, 0)
        self._blend.ellipse([cx - r, cy - r, cx + r, cy + r], fill=self._ink())

    def snapshot(self) -> Image.Image:
        """Return a copy of the current pixel buffer."""
        return self.image.copy()

    def _is_empty(self) -> bool:
        return self.image.width == 0 or self.image.height == 0

    def _ink(self) -> tuple[int, int, int, int]:
        r, g, b, alpha = self._fill_color
        return r, g, b, round(255 * alpha * self._global_alpha)
