"""CLI interface for galaxy-backdrop."""

import dataclasses
import logging
import re
import sys
from pathlib import Path

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.logging import RichHandler

from .animation_pipeline import encode_backdrop
from .config import BackdropConfig, ConfigError, load_config_from_env
from .constants import DEFAULT_FPS, DEFAULT_HEIGHT, DEFAULT_WIDTH
from .output import resolve_output_provider, supported_output_formats

# Load GALAXY_* settings from a .env file
load_dotenv()

console = Console()
err_console = Console(stderr=True)
SUPPORTED_OUTPUT_FORMATS_TEXT = ", ".join(supported_output_formats()).upper()
_RESIZE_PATTERN = re.compile(r"^(\d+):(\d+)x(\d+)$")


class CLIError(Exception):
    """Base exception for CLI errors with user-friendly messages."""
    pass


def main(
    out: str = typer.Option(
        "galaxy-backdrop.gif",
        "--output",
        "-o",
        help=f"Output animation file ({SUPPORTED_OUTPUT_FORMATS_TEXT})",
    ),
    width: int = typer.Option(DEFAULT_WIDTH, "--width", help="Viewport width in pixels"),
    height: int = typer.Option(DEFAULT_HEIGHT, "--height", help="Viewport height in pixels"),
    fps: int = typer.Option(DEFAULT_FPS, "--fps", help="Frames per second of the animation"),
    frames: int = typer.Option(120, "--frames", help="Number of frames to render"),
    seed: int | None = typer.Option(None, "--seed", help="Seed for reproducible star placement"),
    dynamic_stars: int | None = typer.Option(
        None, "--dynamic-stars", help="Number of drifting stars (default from env or 100)"
    ),
    static_stars: int | None = typer.Option(
        None, "--static-stars", help="Number of twinkling stars (default from env or 180)"
    ),
    resize: list[str] | None = typer.Option(
        None,
        "--resize",
        help="Resize the viewport before a frame, as FRAME:WIDTHxHEIGHT (repeatable)",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log engine activity"),
) -> None:
    """
    Render the animated starfield backdrop to a GIF or WebP file.

    Examples:
      # Two seconds at 60 fps, reproducible
      galaxy-backdrop -o stars.webp --frames 120 --seed 7

      # Shrink the viewport halfway through
      galaxy-backdrop --resize 60:640x480
    """
    if verbose:
        _configure_logging()

    try:
        if width <= 0 or height <= 0:
            raise CLIError("Width and height must be positive")
        if fps <= 0:
            raise CLIError("FPS must be positive")
        if frames <= 0:
            raise CLIError("Frame count must be positive")

        config = _build_config(dynamic_stars, static_stars)
        resize_events = _parse_resize_events(resize or [])
        _validate_output_path(out)

        _generate_output(out, config, width, height, fps, frames, seed, resize_events)

    except CLIError as e:
        err_console.print(f"[bold red]Error:[/bold red] {e}")
        sys.exit(1)

    except Exception as e:
        err_console.print(f"[bold red]Unexpected error:[/bold red] {e}")
        sys.exit(1)


def _configure_logging() -> None:
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
    )


def _build_config(dynamic_stars: int | None, static_stars: int | None) -> BackdropConfig:
    """Load env settings and apply command-line overrides."""
    overrides: dict[str, int] = {}
    if dynamic_stars is not None:
        overrides["dynamic_count"] = dynamic_stars
    if static_stars is not None:
        overrides["static_count"] = static_stars
    try:
        config = load_config_from_env()
        return dataclasses.replace(config, **overrides)
    except ConfigError as e:
        raise CLIError(f"Invalid configuration: {e}")


def _parse_resize_events(values: list[str]) -> dict[int, tuple[int, int]]:
    """Parse ``FRAME:WIDTHxHEIGHT`` entries into a frame-indexed mapping."""
    events: dict[int, tuple[int, int]] = {}
    for value in values:
        match = _RESIZE_PATTERN.match(value.strip())
        if match is None:
            raise CLIError(f"Invalid --resize value '{value}'. Expected FRAME:WIDTHxHEIGHT")
        frame, new_width, new_height = (int(group) for group in match.groups())
        events[frame] = (new_width, new_height)
    return events


def _validate_output_path(output_path: str) -> None:
    try:
        resolve_output_provider(output_path)
    except ValueError as exc:
        raise CLIError(str(exc))


def _generate_output(
    output_path: str,
    config: BackdropConfig,
    width: int,
    height: int,
    fps: int,
    frames: int,
    seed: int | None,
    resize_events: dict[int, tuple[int, int]],
) -> None:
    """Render, encode and save the animation."""
    # Warn about GIF FPS limitation
    if output_path.lower().endswith(".gif") and fps > 50:
        console.print(
            f"[yellow]Warning:[/yellow] FPS > 50 may not display correctly in browsers "
            f"(GIF delay will be {1000 // fps}ms, but browsers clamp delays < 20ms to ~100ms)"
        )

    ext = Path(output_path).suffix[1:].upper()
    console.print(
        f"[bold blue]Rendering {frames} frames at {width}x{height} "
        f"({config.dynamic_count} dynamic, {config.static_count} static stars)...[/bold blue]"
    )

    try:
        encoded = encode_backdrop(
            output_path,
            config=config,
            width=width,
            height=height,
            fps=fps,
            max_frames=frames,
            seed=seed,
            resize_events=resize_events,
        )
    except Exception as e:
        raise CLIError(f"Failed to generate output: {e}")

    console.print(f"[bold blue]Saving to {output_path}...[/bold blue]")
    try:
        with open(output_path, "wb") as f:
            f.write(encoded)
    except OSError as e:
        raise CLIError(f"Failed to save file '{output_path}': {e}")
    console.print(f"[green]✓[/green] {ext} saved to {output_path}")


app = typer.Typer()
app.command()(main)

if __name__ == "__main__":
    app()
