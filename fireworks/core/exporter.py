"""
Show Exporter - Records shows and writes them out as GIF or PNG frames
"""

from PIL import Image
from pathlib import Path
from typing import List, Optional

from .simulation import FireworksShow
from .surface import RasterSurface


def record_show(
    show: FireworksShow,
    frames: int,
    surface: Optional[RasterSurface] = None,
    every: int = 1
) -> List[Image.Image]:
    """
    Run a show headless and capture rendered frames.

    Args:
        show: Show to advance (mutated in place)
        frames: Number of ticks to run
        surface: Canvas to draw on (default: one sized to the show)
        every: Keep one image every N ticks

    Returns:
        Captured frames as Pillow images
    """
    if frames < 0:
        raise ValueError(f"Frame count cannot be negative, got {frames}")
    if every < 1:
        raise ValueError(f"every must be at least 1, got {every}")

    if surface is None:
        surface = RasterSurface(show.width, show.height, show.config.background)

    images = []
    for i in range(frames):
        show.tick()
        show.render(surface)
        if i % every == 0:
            images.append(surface.to_image())

    return images


class ShowExporter:
    """Exports recorded frames to various formats"""

    @classmethod
    def to_png(cls, image: Image.Image, path: str | Path) -> Path:
        """Export a single frame to PNG"""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        image.save(path, 'PNG')
        return path

    @classmethod
    def to_gif(
        cls,
        frames: List[Image.Image],
        path: str | Path,
        fps: int = 60,
        loop: int = 0
    ) -> Path:
        """Export frames to an animated GIF"""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        if not frames:
            raise ValueError("No frames to export")
        if fps <= 0:
            raise ValueError(f"fps must be positive, got {fps}")

        # GIF delays are whole milliseconds
        duration = max(1, int(round(1000 / fps)))
        images = [f.convert('P', palette=Image.Palette.ADAPTIVE, colors=255) for f in frames]

        images[0].save(
            path,
            save_all=True,
            append_images=images[1:],
            duration=duration,
            loop=loop,
        )

        return path

    @classmethod
    def to_frames(
        cls,
        frames: List[Image.Image],
        directory: str | Path,
        prefix: str = "frame"
    ) -> List[Path]:
        """Export frames as individual PNGs"""
        directory = Path(directory)
        directory.mkdir(parents=True, exist_ok=True)

        paths = []
        for i, frame in enumerate(frames):
            frame_path = directory / f"{prefix}_{i:04d}.png"
            cls.to_png(frame, frame_path)
            paths.append(frame_path)

        return paths

    @classmethod
    def export(
        cls,
        frames: List[Image.Image],
        path: str | Path,
        format: str = 'gif',
        fps: int = 60
    ):
        if format == 'gif':
            return cls.to_gif(frames, path, fps=fps)
        elif format == 'frames':
            return cls.to_frames(frames, path)
        else:
            raise ValueError(f"Unknown format: {format}")
