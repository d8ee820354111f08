"""
Fireworks - Rockets, explosions and fading trails, simulated frame by frame
"""

from .core import (
    FireworksShow, ShowConfig, RandomSource,
    Rocket, RocketState, ExplosionParticle, Particle,
    Surface, RasterSurface, RecordingSurface,
    ShowExporter, record_show, get_preset,
)

__version__ = "0.1.0"
__all__ = [
    'FireworksShow',
    'ShowConfig',
    'RandomSource',
    'Rocket',
    'RocketState',
    'ExplosionParticle',
    'Particle',
    'Surface',
    'RasterSurface',
    'RecordingSurface',
    'ShowExporter',
    'record_show',
    'get_preset',
    'record',
]


def record(
    output_path: str,
    frames: int = 300,
    preset: str = None,
    format: str = 'gif',
    seed: int = None,
    every: int = 1,
    **overrides
):
    """
    Record a headless show to a file.

    Args:
        output_path: GIF file, or directory for format='frames'
        frames: Number of ticks to simulate
        preset: Preset name (default: classic)
        format: Output format ('gif', 'frames')
        seed: Random seed for a reproducible show
        every: Keep one frame every N ticks
        **overrides: ShowConfig fields to override

    Returns:
        Path to the output file(s)
    """
    config = get_preset(preset or 'classic')
    if config is None:
        raise ValueError(f"Unknown preset: {preset}")

    config = config.with_overrides(seed=seed, **overrides)
    show = FireworksShow(config)
    images = record_show(show, frames, every=every)

    return ShowExporter.export(images, output_path, format=format, fps=max(1, config.fps // every))
