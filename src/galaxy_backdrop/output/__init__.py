"""Output providers for animated backdrop formats."""

from dataclasses import dataclass
from pathlib import Path

from .base import OutputProvider
from .gif_provider import GifOutputProvider
from .webp_provider import WebPOutputProvider


@dataclass(frozen=True)
class OutputFormatSpec:
    extension: str
    provider_class: type[OutputProvider]


_OUTPUT_FORMATS: dict[str, OutputFormatSpec] = {
    "gif": OutputFormatSpec(extension=".gif", provider_class=GifOutputProvider),
    "webp": OutputFormatSpec(extension=".webp", provider_class=WebPOutputProvider),
}


def resolve_output_provider(file_path: str) -> OutputProvider:
    """
    Pick the provider matching the file extension.

    Raises:
        ValueError: If the extension is not a supported format
    """
    ext = Path(file_path).suffix.lower()
    format_spec = _OUTPUT_FORMATS.get(ext.removeprefix("."))
    if format_spec is None:
        supported = ", ".join(s.extension for s in _OUTPUT_FORMATS.values())
        raise ValueError(f"Unsupported output format: {ext or '(none)'}. Supported formats: {supported}")
    return format_spec.provider_class(file_path)


def supported_output_formats() -> tuple[str, ...]:
    return tuple(_OUTPUT_FORMATS.keys())


__all__ = [
    "OutputFormatSpec",
    "OutputProvider",
    "GifOutputProvider",
    "WebPOutputProvider",
    "resolve_output_provider",
    "supported_output_formats",
]
