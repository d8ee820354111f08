"""
Rocket - launch, explode, fade.

A rocket climbs from the bottom of the canvas with its own short trail. At
the apex (vertical velocity no longer negative) it explodes into a fixed
number of ExplosionParticles, then waits for all of them to fade out.

States only move forward:

    LAUNCHING -> EXPLODING -> DONE
"""

from enum import Enum
from typing import List, Optional

from .color import hsl_to_rgb
from .particles import Body, ExplosionParticle
from .physics import Vec2, integrate
from .random_source import RandomSource
from .surface import Surface
from .trail import TrailBuffer


EXPLOSION_PARTICLE_COUNT = 30
EXPLOSION_SPEED_MIN = 2.0
EXPLOSION_SPEED_MAX = 8.0
EXPLOSION_HUE_SPREAD = 30.0

ROCKET_TRAIL_LENGTH = 12
ROCKET_TRAIL_MIN_ALPHA = 0.05
ROCKET_TRAIL_MIN_RADIUS = 1.0


class RocketState(Enum):
    """Rocket lifecycle"""
    LAUNCHING = 'launching'
    EXPLODING = 'exploding'
    DONE = 'done'


class Rocket(Body):
    """
    Firework rocket.

    Example:
        rocket = Rocket(200.0, Vec2(400, 550), Vec2(0, -10), 3.0, rng=RandomSource(7))

        while not rocket.is_completely_done:
            rocket.update()
            rocket.draw(surface)
    """

    def __init__(
        self,
        color_hue: float,
        position: Vec2,
        velocity: Vec2,
        stroke_width: float,
        rng: Optional[RandomSource] = None,
        particle_count: int = EXPLOSION_PARTICLE_COUNT,
        max_trail_length: int = ROCKET_TRAIL_LENGTH,
    ):
        super().__init__(color_hue, position, velocity, stroke_width)
        self.rng = rng or RandomSource()
        self.particle_count = particle_count
        self.state = RocketState.LAUNCHING
        self.explosion_particles: List[ExplosionParticle] = []
        self.trail = TrailBuffer(max_trail_length, start=position)
        self.ticks = 0
        self.exploded_at: Optional[int] = None

    @property
    def is_dead(self) -> bool:
        return self.is_completely_done

    @property
    def is_completely_done(self) -> bool:
        return (
            self.state == RocketState.DONE
            and all(p.is_dead for p in self.explosion_particles)
        )

    @property
    def particle_total(self) -> int:
        """Live explosion particles"""
        return sum(1 for p in self.explosion_particles if not p.is_dead)

    # -------------------------------------------------------------------------
    # Simulation
    # -------------------------------------------------------------------------

    def update(self) -> None:
        self.ticks += 1

        if self.state == RocketState.LAUNCHING:
            integrate(self)
            self.apply_force()
            self.trail.push(self.position)

            # Apex: gravity has cancelled the upward velocity
            if self.velocity.y >= 0:
                self.explode()
                self.state = RocketState.EXPLODING
                self.exploded_at = self.ticks

        elif self.state == RocketState.EXPLODING:
            for particle in self.explosion_particles:
                particle.update()

            if all(p.is_dead for p in self.explosion_particles):
                self.state = RocketState.DONE

    def explode(self) -> None:
        """Spawn the explosion particles. Only valid once, while launching."""
        if self.state != RocketState.LAUNCHING or self.explosion_particles:
            raise RuntimeError("Rocket has already exploded")

        particles = []
        for _ in range(self.particle_count):
            direction = self.rng.next_unit_vector()
            speed = self.rng.next_float(EXPLOSION_SPEED_MIN, EXPLOSION_SPEED_MAX)
            # Hue left unwrapped, hsl_to_rgb wraps it
            hue = self.color_hue + self.rng.next_float(-EXPLOSION_HUE_SPREAD, EXPLOSION_HUE_SPREAD)

            particles.append(ExplosionParticle(
                hue,
                self.position,
                direction * speed,
                self.stroke_width,
            ))

        self.explosion_particles = particles

    # -------------------------------------------------------------------------
    # Rendering
    # -------------------------------------------------------------------------

    def draw(self, surface: Surface) -> None:
        if self.state == RocketState.LAUNCHING:
            self.draw_trail(surface)
            surface.draw_circle(
                self.position,
                self.stroke_width * 2,
                hsl_to_rgb(self.color_hue, 100, 90),
                1.0,
            )

        elif self.state == RocketState.EXPLODING:
            for particle in self.explosion_particles:
                particle.draw(surface)

    def draw_trail(self, surface: Surface) -> None:
        color = hsl_to_rgb(self.color_hue, 100, 85)

        for _, fraction, point in self.trail.segments():
            alpha = fraction * 0.9
            if alpha <= ROCKET_TRAIL_MIN_ALPHA:
                continue

            radius = max(self.stroke_width * fraction * 1.8, ROCKET_TRAIL_MIN_RADIUS)
            surface.draw_circle(point, radius, color, alpha)
