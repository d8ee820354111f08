"""
Kinematics for fireworks particles

Everything in the show moves the same way: a constant gravity pull added to
velocity every tick, then velocity added to position (semi-implicit Euler).
One tick is one simulated frame, so the integrator has no time step.

This module provides:
- Vec2 value type
- The shared integration step used by every particle variant
- Round-off snapping for comparisons against zero
"""

import numpy as np
from dataclasses import dataclass
from typing import Tuple


# =============================================================================
# Vector Utilities
# =============================================================================

@dataclass(frozen=True)
class Vec2:
    """2D vector value type. Operations return new vectors."""
    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: 'Vec2') -> 'Vec2':
        return Vec2(self.x + other.x, self.y + other.y)

    def __mul__(self, scalar: float) -> 'Vec2':
        return Vec2(self.x * scalar, self.y * scalar)

    def __rmul__(self, scalar: float) -> 'Vec2':
        return self.__mul__(scalar)

    @property
    def length(self) -> float:
        return float(np.hypot(self.x, self.y))

    def to_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)

    @staticmethod
    def from_angle(angle: float, length: float = 1.0) -> 'Vec2':
        return Vec2(float(np.cos(angle)) * length, float(np.sin(angle)) * length)


# =============================================================================
# Integration
# =============================================================================

# Screen coordinates: +y points down, so gravity is positive
GRAVITY = Vec2(0.0, 0.2)

# Values this close to zero count as zero. Repeated float addition of 0.2
# or 1/120 leaves residue around 1e-15.
EPSILON = 1e-9


def snap_zero(value: float) -> float:
    """Return 0.0 for values within EPSILON of zero"""
    return 0.0 if abs(value) < EPSILON else value


def integrate(body, gravity: Vec2 = GRAVITY) -> None:
    """
    Advance a body by one tick.

    Works on anything with ``position`` and ``velocity`` Vec2 attributes.
    Gravity is applied to velocity first, then velocity to position.
    """
    velocity = body.velocity + gravity
    body.velocity = Vec2(snap_zero(velocity.x), snap_zero(velocity.y))
    body.position = body.position + body.velocity
