"""GIF output provider."""

from .base import OutputProvider


class GifOutputProvider(OutputProvider):
    """Palette GIF; browsers clamp frame delays under 20ms."""

    @property
    def output_format(self) -> str:
        return "gif"

    @property
    def save_options(self) -> dict[str, object]:
        # Keep every frame: optimizing drops near-identical twinkle frames.
        return {"optimize": False, "disposal": 1}
