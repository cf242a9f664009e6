# MIT License (see LICENSE)
"""
Conserved quantities over collections of particles.

Handy for checking integrator behaviour: with zero acceleration and
damping of 1, kinetic energy and momentum must stay constant; any damping
below 1 must make kinetic energy decrease monotonically.
"""
from __future__ import annotations
from typing import Iterable

from .particle import Particle
from .vector import Vector


def kinetic_energy(particles: Iterable[Particle]) -> float:
    """
    Total kinetic energy T = Σ ½ m v².

    Infinite-mass particles never move and contribute nothing.
    """
    return sum((p.kinetic_energy() for p in particles), 0.0)


def linear_momentum(particles: Iterable[Particle]) -> Vector:
    """
    Total linear momentum P = Σ m v over finite-mass particles.

    Returns:
        Momentum vector in kg·m/s.
    """
    p = Vector.zero()
    for particle in particles:
        if particle.has_infinite_mass():
            continue
        p += particle.velocity * particle.mass()
    return p
