# MIT License (see LICENSE)
"""
JSON serialization and deserialization for particle state.

Lets a simulation be checkpointed and restored, or particle set-ups be
authored by hand.

JSON Schema Overview:
---------------------
{
  "particles": [
    {
      "position": [x, y, z],           # Default: [0, 0, 0]
      "velocity": [vx, vy, vz],        # Default: [0, 0, 0]
      "acceleration": [ax, ay, az],    # Default: [0, 0, 0]
      "damping": float,                # Required
      "inverse_mass": float,           # Required, >= 0 (0 = immovable)
      "force_accumulator": [fx, fy, fz]  # Default: [0, 0, 0]
    }
  ]
}
"""
from __future__ import annotations
import json
import logging
from typing import Any, Iterable

from ..particle import Particle

logger = logging.getLogger(__name__)

_VECTOR_FIELDS = ("position", "velocity", "acceleration", "force_accumulator")
_REQUIRED_FIELDS = ("damping", "inverse_mass")


def particle_to_json(particle: Particle) -> dict[str, Any]:
    """
    Serialize a Particle to a dictionary (round-trip compatible).

    All fields are written, including the force accumulator, so a restored
    particle integrates exactly like the original.
    """
    return {
        "position": particle.position.to_list(),
        "velocity": particle.velocity.to_list(),
        "acceleration": particle.acceleration.to_list(),
        "damping": particle.damping,
        "inverse_mass": particle.inverse_mass,
        "force_accumulator": particle.force_accumulator.to_list(),
    }


def particle_from_json(d: dict[str, Any]) -> Particle:
    """
    Parse a single particle definition from a dictionary.

    Args:
        d: Dictionary containing particle fields.

    Returns:
        Initialized Particle instance.

    Raises:
        ValueError: If d is not an object, a required field is missing,
            a value is not numeric, a vector does not have exactly 3
            components, or inverse_mass is negative.
    """
    if not isinstance(d, dict):
        raise ValueError(f"Particle definition must be an object, got {type(d).__name__}")
    for name in _REQUIRED_FIELDS:
        if name not in d:
            raise ValueError(f"Particle definition missing required '{name}' field.")

    kwargs: dict[str, Any] = {
        "damping": _number(d["damping"], "damping"),
        "inverse_mass": _number(d["inverse_mass"], "inverse_mass"),
    }
    for name in _VECTOR_FIELDS:
        value = d.get(name, [0.0, 0.0, 0.0])
        if not isinstance(value, (list, tuple)) or len(value) != 3:
            raise ValueError(f"Particle field '{name}' must be a list of 3 numbers, got {value!r}")
        kwargs[name] = [_number(c, name) for c in value]

    return Particle(**kwargs)


def _number(value: Any, name: str) -> float:
    """Helper: Convert a JSON value to float, naming the field on failure."""
    try:
        return float(value)
    except (TypeError, ValueError):
        raise ValueError(f"Particle field '{name}' must be numeric, got {value!r}") from None


def particles_to_json(particles: Iterable[Particle]) -> dict[str, Any]:
    """Serialize particles to a top-level document."""
    return {"particles": [particle_to_json(p) for p in particles]}


def particles_from_json(data: dict[str, Any]) -> list[Particle]:
    """Build particles from a top-level document."""
    if not isinstance(data, dict) or "particles" not in data:
        raise ValueError("Document missing required 'particles' list.")
    entries = data["particles"]
    if not isinstance(entries, list):
        raise ValueError(f"'particles' must be a list, got {type(entries).__name__}")
    return [particle_from_json(d) for d in entries]


def save_particles(particles: Iterable[Particle], path: str, indent: int = 2) -> None:
    """Save particles to a JSON file on disk."""
    data = particles_to_json(particles)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=indent)
    logger.debug("Saved %d particles to %s", len(data["particles"]), path)


def load_particles(path: str) -> list[Particle]:
    """
    Load particles from a JSON file.

    Raises:
        FileNotFoundError: If the file cannot be found.
        json.JSONDecodeError: If the file is not valid JSON.
        ValueError: If the document or a particle definition is malformed.
    """
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    particles = particles_from_json(data)
    logger.debug("Loaded %d particles from %s", len(particles), path)
    return particles
