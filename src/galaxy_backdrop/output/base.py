"""Base class for animated image output providers."""

from abc import ABC, abstractmethod
from io import BytesIO
from typing import Iterable

from PIL import Image


class OutputProvider(ABC):
    """Encodes a stream of Pillow frames into one animated image file."""

    def __init__(self, path: str = ""):
        """
        Args:
            path: Path the encoded animation is written to
        """
        self.path = path

    @property
    @abstractmethod
    def output_format(self) -> str:
        """Pillow format identifier (for example, ``gif`` or ``webp``)."""
        raise NotImplementedError

    @property
    def save_options(self) -> dict[str, object]:
        """Extra Pillow ``save`` kwargs for this format."""
        return {}

    def encode(self, frames: Iterable[Image.Image], frame_duration: int) -> bytes:
        """
        Encode frames as a looping animation.

        Args:
            frames: Frames in display order
            frame_duration: Frame duration in milliseconds

        Returns:
            Encoded bytes, empty when there are no frames
        """
        frame_list = list(frames)
        if not frame_list:
            return b""

        buffer = BytesIO()
        frame_list[0].save(
            buffer,
            format=self.output_format,
            save_all=True,
            append_images=frame_list[1:],
            duration=max(1, frame_duration),
            loop=0,
            **self.save_options,
        )
        return buffer.getvalue()

    def write(self, data: bytes) -> None:
        if not self.path:
            raise ValueError("Output path not set")
        with open(self.path, "wb") as f:
            f.write(data)
