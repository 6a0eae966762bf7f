"""WebP output provider."""

from .base import OutputProvider


class WebPOutputProvider(OutputProvider):
    """Lossless animated WebP, which keeps the faint star edges intact."""

    @property
    def output_format(self) -> str:
        return "webp"

    @property
    def save_options(self) -> dict[str, object]:
        return {"lossless": True, "quality": 80, "method": 4}
