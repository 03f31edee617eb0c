"""Debug utilities."""

from __future__ import annotations
import os

import numpy as np

DEBUG_ENV_VAR = "SCREENSPACE_DEBUG"


def is_debug_enabled() -> bool:
    """Check if debug mode is enabled via environment variable."""
    return os.environ.get(DEBUG_ENV_VAR, "0").lower() not in ("0", "", "false")


def debug_print(*args, **kwargs):
    """Print debug message if debug mode is enabled."""
    if is_debug_enabled():
        print(*args, **kwargs)


def get_matrix_stats(m: np.ndarray):
    """
    Get determinant and condition number of a square matrix.

    Args:
        m: (N, N) matrix

    Returns:
        (determinant, condition_number) as floats
    """
    return float(np.linalg.det(m)), float(np.linalg.cond(m))


def debug_matrix_info(name: str, m: np.ndarray):
    """Print debug information about a matrix."""
    if is_debug_enabled():
        det, cond = get_matrix_stats(m)
        print(f"[{name}] shape={tuple(m.shape)} dtype={m.dtype} "
              f"det={det:.6g} cond={cond:.6g}")
