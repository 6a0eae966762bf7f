"""Raster (Pillow) frame stream produced by running the engine on a headless host."""

import random
from typing import Iterator, Mapping

from PIL import Image

from .config import BackdropConfig
from .engine import AnimationEngine
from .host import HeadlessHost
from .surface import PillowSurface

ResizeEvents = Mapping[int, tuple[int, int]]


def generate_backdrop_frames(
    config: BackdropConfig,
    width: int,
    height: int,
    fps: int,
    max_frames: int,
    seed: int | None = None,
    resize_events: ResizeEvents | None = None,
) -> Iterator[Image.Image]:
    """
    Render ``max_frames`` frames of the animated starfield.

    Args:
        config: Backdrop settings
        width: Initial viewport width, also the output frame width
        height: Initial viewport height, also the output frame height
        fps: Nominal refresh rate of the simulated host
        max_frames: Number of frames to render
        seed: Optional seed for reproducible output
        resize_events: Frame index -> new ``(width, height)``, applied before
            that frame is drawn

    Yields:
        RGB images, all ``width`` x ``height``; after a resize the surface is
        pasted top-left onto a background-filled canvas of the initial size
    """
    resize_events = resize_events or {}
    surface = PillowSurface(width, height, config.background_color)
    host = HeadlessHost(surface, width=width, height=height, fps=fps)
    engine = AnimationEngine(host, config, rng=random.Random(seed))
    engine.start()
    try:
        for frame_index in range(max_frames):
            if frame_index in resize_events:
                host.set_viewport(*resize_events[frame_index])
            host.advance_frame()
            yield _letterbox(surface.snapshot(), (width, height), config.background_color)
    finally:
        engine.stop()


def _letterbox(
    frame: Image.Image,
    size: tuple[int, int],
    background_color: tuple[int, int, int],
) -> Image.Image:
    if frame.size == size:
        return frame
    canvas = Image.new("RGB", size, background_color)
    if frame.width and frame.height:
        canvas.paste(frame, (0, 0))
    return canvas
