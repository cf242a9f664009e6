# MIT License (see LICENSE)
"""
Utility functions for array conversion and environment configuration.

Vector storage is always a float64 numpy array so that integration results
are reproducible regardless of whether callers pass ints, tuples or arrays.
"""
from __future__ import annotations
import os

import numpy as np


def f64(x) -> np.ndarray:
    """
    Convert any array-like to a one-dimensional float64 numpy array.

    Always copies, so the result never aliases caller-owned storage.
    """
    arr = np.array(x, dtype=np.float64)
    if arr.ndim != 1:
        raise ValueError(f"Expected a flat sequence of components, got shape {arr.shape}")
    return arr


def log_level() -> str:
    """Log level name requested via the IMPULSE_LOG_LEVEL environment variable."""
    return os.environ.get("IMPULSE_LOG_LEVEL", "WARNING").upper()
