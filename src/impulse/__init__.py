# MIT License (see LICENSE)
"""
impulse - A minimal particle physics primitive.

Provides a fixed-length vector type and a point-mass particle integrated
with semi-implicit Euler and frame-rate independent damping.

Main entry points:
    - Vector / Vector3: Fixed-length real vectors.
    - Particle: Point mass with position, velocity, constant acceleration,
      damping, inverse mass and a force accumulator.
    - Shot, shot_particle: Ballistic projectile presets.

Submodules:
    - invariants: Kinetic energy and momentum of particle collections.
    - io: JSON serialization/deserialization.
    - logging_config: Opt-in console logging.

Example:
    from impulse import Particle, Vector3

    p = Particle(velocity=Vector3(0, 0, 35), acceleration=Vector3(0, -1, 0),
                 damping=0.99, inverse_mass=0.5)
    p.integrate(1 / 60)
"""
from .vector import Vector, Vector3
from .particle import Particle
from .presets import Shot, shot_particle

__all__ = [
    # Core
    "Vector",
    "Vector3",
    "Particle",
    # Presets
    "Shot",
    "shot_particle",
]
