# MIT License (see LICENSE)
"""
Ready-made projectile particles for ballistics simulations.

Each Shot describes a projectile by its mass, muzzle velocity, constant
acceleration and damping. The numbers are tuned to look plausible at
interactive frame rates rather than to be physically accurate: a pistol
round under real gravity would leave the play area before it visibly
dropped, so its "gravity" is only 1 m/s².

Muzzle velocities point along +z with +y up.
"""
from __future__ import annotations
import enum
from dataclasses import dataclass

from .particle import Particle
from .vector import Vector


@dataclass(frozen=True)
class ShotSpec:
    """Launch parameters for one kind of projectile."""
    mass: float
    velocity: tuple[float, float, float]
    acceleration: tuple[float, float, float]
    damping: float


class Shot(enum.Enum):
    PISTOL = ShotSpec(mass=2.0, velocity=(0.0, 0.0, 35.0), acceleration=(0.0, -1.0, 0.0), damping=0.99)
    ARTILLERY = ShotSpec(mass=200.0, velocity=(0.0, 30.0, 40.0), acceleration=(0.0, -20.0, 0.0), damping=0.99)
    # Floats upward.
    FIREBALL = ShotSpec(mass=1.0, velocity=(0.0, 0.0, 10.0), acceleration=(0.0, 0.6, 0.0), damping=0.9)
    # No gravity at all.
    LASER = ShotSpec(mass=0.1, velocity=(0.0, 0.0, 100.0), acceleration=(0.0, 0.0, 0.0), damping=0.99)
    GRENADE = ShotSpec(mass=0.9, velocity=(0.0, 15.0, 10.0), acceleration=(0.0, -10.0, 0.0), damping=0.99)

    @classmethod
    def from_name(cls, name: str) -> Shot:
        """Look up a shot by case-insensitive name ("pistol", "Laser", ...)."""
        try:
            return cls[name.strip().upper()]
        except KeyError:
            valid = ", ".join(s.name.lower() for s in cls)
            raise ValueError(f"Unknown shot type: '{name}' (expected one of: {valid})") from None


def shot_particle(shot: Shot, position: Vector | None = None) -> Particle:
    """
    Create a fresh projectile particle for the given shot type.

    Args:
        shot: Kind of projectile.
        position: Launch point. Defaults to the origin.

    Returns:
        A new Particle with an empty force accumulator.
    """
    launch = shot.value
    return Particle(
        position=position if position is not None else Vector.zero(),
        velocity=launch.velocity,
        acceleration=launch.acceleration,
        damping=launch.damping,
        inverse_mass=1.0 / launch.mass,
    )
