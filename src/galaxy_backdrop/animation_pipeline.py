"""Shared encoding entry point used by the CLI."""

from .config import BackdropConfig
from .output import resolve_output_provider
from .output.base import OutputProvider
from .raster_animation import ResizeEvents, generate_backdrop_frames


def encode_backdrop(
    output_path: str,
    *,
    config: BackdropConfig,
    width: int,
    height: int,
    fps: int,
    max_frames: int,
    seed: int | None = None,
    resize_events: ResizeEvents | None = None,
    provider: OutputProvider | None = None,
) -> bytes:
    """Render the backdrop and encode it in the format implied by ``output_path``."""
    target_provider = provider or resolve_output_provider(output_path)
    frames = generate_backdrop_frames(
        config,
        width,
        height,
        fps=fps,
        max_frames=max_frames,
        seed=seed,
        resize_events=resize_events,
    )
    return target_provider.encode(frames, frame_duration=1000 // fps)
