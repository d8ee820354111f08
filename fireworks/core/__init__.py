"""
Fireworks - Core simulation
"""

from .physics import Vec2, GRAVITY, EPSILON, integrate, snap_zero
from .random_source import RandomSource
from .trail import TrailBuffer
from .color import Color, BLACK, hsl_to_rgb, wrap_hue, parse_color
from .surface import Surface, RasterSurface, RecordingSurface, CircleCommand
from .particles import (
    Body, Particle, ExplosionParticle,
    TICKS_PER_SECOND, EXPLOSION_FADE_RATE, EXPLOSION_TRAIL_LENGTH,
)
from .rocket import (
    Rocket, RocketState,
    EXPLOSION_PARTICLE_COUNT, ROCKET_TRAIL_LENGTH,
)
from .presets import (
    ShowConfig, load_config, save_config,
    PresetManager, BUILTIN_PRESETS,
    get_preset_manager, get_preset, list_presets,
)
from .simulation import FireworksShow, LaunchRequest
from .exporter import ShowExporter, record_show
from .preview import (
    PygameSurface, FireworksWindow,
    run_window, check_pygame_available,
)

__all__ = [
    # Physics
    'Vec2', 'GRAVITY', 'EPSILON', 'integrate', 'snap_zero',
    'RandomSource',
    'TrailBuffer',
    # Color
    'Color', 'BLACK', 'hsl_to_rgb', 'wrap_hue', 'parse_color',
    # Surfaces
    'Surface', 'RasterSurface', 'RecordingSurface', 'CircleCommand',
    # Particles
    'Body', 'Particle', 'ExplosionParticle',
    'TICKS_PER_SECOND', 'EXPLOSION_FADE_RATE', 'EXPLOSION_TRAIL_LENGTH',
    'Rocket', 'RocketState',
    'EXPLOSION_PARTICLE_COUNT', 'ROCKET_TRAIL_LENGTH',
    # Configuration
    'ShowConfig', 'load_config', 'save_config',
    'PresetManager', 'BUILTIN_PRESETS',
    'get_preset_manager', 'get_preset', 'list_presets',
    # Driver
    'FireworksShow', 'LaunchRequest',
    # Export
    'ShowExporter', 'record_show',
    # Live window
    'PygameSurface', 'FireworksWindow',
    'run_window', 'check_pygame_available',
]
