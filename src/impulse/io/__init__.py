# MIT License (see LICENSE)
"""
Input/Output utilities for particle simulations.

This subpackage provides:
    - JSON serialization: Save and load particle state to/from JSON files.
    - Round-trip support: Saved particles load back field-for-field.

Typical usage:
    from impulse.io import load_particles, save_particles

    save_particles(particles, "checkpoint.json")
    particles = load_particles("checkpoint.json")
"""
from .json_io import (
    load_particles,
    save_particles,
    particles_to_json,
    particles_from_json,
    particle_to_json,
    particle_from_json,
)

__all__ = [
    # Files
    "load_particles",
    "save_particles",
    # Serialization
    "particles_to_json",
    "particles_from_json",
    "particle_to_json",
    "particle_from_json",
]
