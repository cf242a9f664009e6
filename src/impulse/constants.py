# MIT License (see LICENSE)
"""
Physical and numeric constants shared by the particle integrator.

All quantities use SI units.
"""
from __future__ import annotations

# Standard acceleration due to gravity, g_n = 9.80665 m/s², rounded the way
# game-style simulations usually quote it.
STANDARD_GRAVITY: float = 9.81

# Velocity retained per second of simulated time. Slightly below 1 so that
# energy added by integration error bleeds away.
DEFAULT_DAMPING: float = 0.99

# Absolute tolerance used by Vector.isclose when none is given.
DEFAULT_TOLERANCE: float = 1e-9
