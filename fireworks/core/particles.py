"""
Fireworks Particles

Every moving thing in the show implements the same small interface:

- update(): advance one tick
- draw(surface): issue circle commands
- is_dead: finished and ready to be dropped

Variants:
- Particle: plain glowing dot, the default behaviour
- ExplosionParticle: fades out over two seconds and leaves a trail
- Rocket (rocket.py): launches, explodes, owns explosion particles

Kinematics are not inherited: each variant calls physics.integrate() on
itself, then runs its own per-tick logic.
"""

from abc import ABC, abstractmethod

from .color import hsl_to_rgb
from .physics import Vec2, integrate, snap_zero
from .surface import Surface
from .trail import TrailBuffer


# =============================================================================
# Constants
# =============================================================================

TICKS_PER_SECOND = 60

EXPLOSION_FADE_SECONDS = 2.0
EXPLOSION_FADE_RATE = 1.0 / (EXPLOSION_FADE_SECONDS * TICKS_PER_SECOND)
EXPLOSION_TRAIL_LENGTH = 15

# Trail segments fainter than this are not drawn
EXPLOSION_TRAIL_MIN_ALPHA = 0.01
EXPLOSION_TRAIL_MIN_RADIUS = 0.8


# =============================================================================
# Body Interface
# =============================================================================

class Body(ABC):
    """Common state and interface of every simulated particle"""

    def __init__(self, color_hue: float, position: Vec2, velocity: Vec2, stroke_width: float):
        self.color_hue = color_hue
        self.position = position
        self.velocity = velocity
        self.stroke_width = stroke_width
        self.lifespan = 1.0

    @property
    def is_dead(self) -> bool:
        return self.lifespan <= 0

    @abstractmethod
    def update(self) -> None:
        """Advance one tick"""
        pass

    @abstractmethod
    def draw(self, surface: Surface) -> None:
        """Draw onto a surface"""
        pass

    def apply_force(self) -> None:
        """Per-tick force hook, runs after integration"""
        pass

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(hue={self.color_hue:.1f}, "
            f"pos=({self.position.x:.1f}, {self.position.y:.1f}), "
            f"vel=({self.velocity.x:.2f}, {self.velocity.y:.2f}), "
            f"lifespan={self.lifespan:.3f})"
        )


class Particle(Body):
    """Plain glowing dot"""

    def update(self) -> None:
        integrate(self)
        self.apply_force()

    def draw(self, surface: Surface) -> None:
        surface.draw_circle(
            self.position,
            self.stroke_width,
            hsl_to_rgb(self.color_hue, 100, 50),
            max(0.0, self.lifespan),
        )


# =============================================================================
# Explosion Particle
# =============================================================================

class ExplosionParticle(Body):
    """
    Spark thrown out by an exploding rocket.

    Lifespan drops by a fixed amount per tick (tick-count based, not wall
    clock), so at the nominal 60 Hz it fades out in two seconds. The last
    positions are kept for a fading trail.
    """

    def __init__(
        self,
        color_hue: float,
        position: Vec2,
        velocity: Vec2,
        stroke_width: float,
        fade_rate: float = EXPLOSION_FADE_RATE,
        max_trail_length: int = EXPLOSION_TRAIL_LENGTH,
    ):
        super().__init__(color_hue, position, velocity, stroke_width)
        self.fade_rate = fade_rate
        self.trail = TrailBuffer(max_trail_length, start=position)

    @property
    def max_trail_length(self) -> int:
        return self.trail.max_length

    def update(self) -> None:
        integrate(self)
        self.apply_force()

        self.lifespan = max(0.0, snap_zero(self.lifespan - self.fade_rate))
        self.trail.push(self.position)

    def draw(self, surface: Surface) -> None:
        if self.lifespan <= 0:
            return

        self.draw_trail(surface)

        surface.draw_circle(
            self.position,
            self.stroke_width * 1.3,
            hsl_to_rgb(self.color_hue, 100, 80),
            self.lifespan,
        )

    def draw_trail(self, surface: Surface) -> None:
        """Draw trail points behind the particle, oldest first"""
        color = hsl_to_rgb(self.color_hue, 95, 60)

        for _, fraction, point in self.trail.segments():
            alpha = fraction * self.lifespan * 0.9
            if alpha <= EXPLOSION_TRAIL_MIN_ALPHA:
                continue

            radius = max(self.stroke_width * fraction * 1.2, EXPLOSION_TRAIL_MIN_RADIUS)
            surface.draw_circle(point, radius, color, alpha)
