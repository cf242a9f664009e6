# MIT License (see LICENSE)
"""
Point-mass particle and its time-step integrator.

A Particle carries linear kinematic state only (no orientation, no shape).
Advancing it one step uses semi-implicit Euler ordering with a
frame-rate independent damping term:

    x(t+dt) = x(t) + v(t)·dt
    v(t+dt) = (v(t) + a·dt) · d^dt

where a is the particle's constant acceleration (typically gravity) and d is
the fraction of velocity retained per second.

Mass is stored as its inverse. An inverse mass of zero describes an
immovable body (infinite mass), which is far more useful in a real-time
simulation than a zero-mass body and needs no non-finite sentinel.
"""
from __future__ import annotations
import logging
from dataclasses import dataclass, field, fields

import numpy as np

from .vector import Vector

logger = logging.getLogger(__name__)


def _as_vector3(value, name: str) -> Vector:
    vec = Vector.from_iterable(value)
    if len(vec) != 3:
        raise ValueError(f"Particle.{name} must have 3 components, got {len(vec)}")
    return vec


@dataclass
class Particle:
    """
    The simplest object that can be simulated.

    Attributes:
        position: Linear position in world space.
        velocity: Linear velocity in world space.
        acceleration: Constant acceleration applied every step, e.g. gravity.
            Integration never resets it.
        damping: Fraction of velocity kept per second of simulated time,
            in (0, 1]. Removes energy added by integrator error.
        inverse_mass: 1/m. Zero means infinite mass (immovable).
        force_accumulator: Force gathered for the next step only; cleared by
            every integration step that runs.

    Note:
        Vector fields are copied on construction, so passing the same
        Vector to two particles never makes them share state.
    """
    position: Vector = field(default_factory=Vector.zero)
    velocity: Vector = field(default_factory=Vector.zero)
    acceleration: Vector = field(default_factory=Vector.zero)
    damping: float = 0.0
    inverse_mass: float = 0.0
    force_accumulator: Vector = field(default_factory=Vector.zero)

    def __post_init__(self) -> None:
        """Coerce vector fields to independent 3-component Vectors."""
        self.position = _as_vector3(self.position, "position")
        self.velocity = _as_vector3(self.velocity, "velocity")
        self.acceleration = _as_vector3(self.acceleration, "acceleration")
        self.force_accumulator = _as_vector3(self.force_accumulator, "force_accumulator")
        self.damping = float(self.damping)
        self.inverse_mass = float(self.inverse_mass)
        if self.inverse_mass < 0:
            raise ValueError(f"inverse_mass must be >= 0, got {self.inverse_mass}")

    # -------------------------------------------------------------------------
    # Mass
    # -------------------------------------------------------------------------

    def mass(self) -> float:
        """Mass in kg. Infinite-mass particles return +inf."""
        with np.errstate(divide="ignore"):
            return float(np.reciprocal(np.float64(self.inverse_mass)))

    def has_infinite_mass(self) -> bool:
        # Exact comparison: zero is a sentinel, not a measurement.
        return self.inverse_mass == 0.0

    def set_mass(self, mass: float) -> None:
        """Store the given (finite, positive) mass as its inverse."""
        if not mass > 0:
            raise ValueError(f"mass must be positive, got {mass}")
        self.inverse_mass = 1.0 / float(mass)

    def set_infinite_mass(self) -> None:
        self.inverse_mass = 0.0

    # -------------------------------------------------------------------------
    # Forces
    # -------------------------------------------------------------------------

    def add_force(self, force: Vector) -> None:
        """Accumulate a force acting through the centre of mass."""
        self.force_accumulator += _as_vector3(force, "force")

    def clear_accumulator(self) -> None:
        self.force_accumulator = Vector.zero()

    # -------------------------------------------------------------------------
    # Integration
    # -------------------------------------------------------------------------

    def integrate(self, duration: float) -> None:
        """
        Advance the particle by `duration` seconds.

        Semi-implicit Euler: position moves with the velocity from before
        this step, then velocity picks up the constant acceleration and is
        damped by damping**duration. A linear approximation, so splitting
        a step in two gives a slightly different answer.

        Infinite-mass particles are left completely untouched for positive
        durations, accumulated force included. Otherwise the accumulator is
        cleared, even when duration is zero.

        Note:
            The accumulated force does not feed into the velocity update;
            only `acceleration` does.

        Args:
            duration: Step length in seconds. Zero is a no-op apart from
                clearing the accumulator; negative values step backwards.
        """
        if self.inverse_mass <= 0.0 and duration > 0.0:
            logger.debug("Skipping integration of infinite-mass particle")
            return

        self.position += self.velocity * duration

        self.velocity += self.acceleration * duration

        # Drag, expressed per second so it is independent of step size.
        self.velocity *= float(np.power(self.damping, duration))

        self.clear_accumulator()

    # -------------------------------------------------------------------------
    # Derived quantities
    # -------------------------------------------------------------------------

    def kinetic_energy(self) -> float:
        """T = ½ m |v|², or 0 for an immovable particle."""
        if self.has_infinite_mass():
            return 0.0
        return 0.5 * self.velocity.magnitude_squared() / self.inverse_mass

    def copy(self) -> Particle:
        # __post_init__ copies every vector field.
        return Particle(**{f.name: getattr(self, f.name) for f in fields(self)})
