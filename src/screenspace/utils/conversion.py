"""Type conversion utilities."""

from __future__ import annotations
import numpy as np

DTYPE = np.float64


def to_vector(x, size: int, name: str = "vector") -> np.ndarray:
    """
    Convert input to a 1D float64 array of fixed length.

    Args:
        x: Input (numpy array, list or tuple)
        size: Expected number of components
        name: Argument name used in error messages

    Returns:
        (size,) float64 array

    Raises:
        ValueError: If the input has the wrong shape or non-finite values
    """
    v = np.asarray(x, dtype=DTYPE)

    if v.shape != (size,):
        raise ValueError(f"{name} must have shape ({size},), got {v.shape}")

    if not np.isfinite(v).all():
        raise ValueError(f"{name} contains NaN or Inf")

    return v
