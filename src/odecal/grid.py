#########################################################################################
##
##                                TIME GRID GENERATOR
##                                     (grid.py)
##
#########################################################################################

# IMPORTS ===============================================================================

import numbers

import numpy as np

from .utils.errors import ConfigurationError


# CONSTANTS =============================================================================

DENSE_MAX_STEP = 0.01

# relative slack when counting dense steps, absorbs round-off in duration / step
_COUNT_SLACK = 1e-9


# VALIDATION ============================================================================

def check_step_size(step_size) -> float:
    """Return `step_size` as float or raise `ConfigurationError`."""
    if isinstance(step_size, bool) or not isinstance(step_size, numbers.Real):
        raise ConfigurationError(
            f"step_size must be a real number, got {type(step_size).__name__}"
        )
    h = float(step_size)
    if not np.isfinite(h) or h <= 0.0:
        raise ConfigurationError(f"step_size must be finite and > 0, got {step_size}")
    return h


def check_step_count(step_count) -> int:
    """Return `step_count` as int or raise `ConfigurationError`."""
    if isinstance(step_count, bool) or not isinstance(step_count, numbers.Integral):
        raise ConfigurationError(
            f"step_count must be an integer, got {type(step_count).__name__}"
        )
    n = int(step_count)
    if n < 1:
        raise ConfigurationError(f"step_count must be >= 1, got {step_count}")
    return n


# GRIDS =================================================================================

def make_grid(step_size: float, step_count: int) -> np.ndarray:
    """Uniform time grid ``[0, h, 2h, ..., n*h]``.

    Parameters
    ----------
    step_size : float
        Grid spacing `h`, must be > 0.
    step_count : int
        Number of steps `n`, must be >= 1.

    Returns
    -------
    np.ndarray
        Array of length ``step_count + 1`` holding ``i * step_size``.
    """
    h = check_step_size(step_size)
    n = check_step_count(step_count)
    return np.arange(n + 1, dtype=float) * h


def make_dense_grid(
    step_size: float,
    step_count: int,
    max_step: float = DENSE_MAX_STEP,
) -> np.ndarray:
    """Finer display grid spanning the same duration as `make_grid`.

    The spacing is ``min(max_step, step_size)``. When the duration is not a
    multiple of that spacing, the grid stops at the last full step before the
    end of the simulation grid.

    Parameters
    ----------
    step_size : float
        Simulation grid spacing.
    step_count : int
        Simulation grid step count.
    max_step : float
        Upper bound for the dense spacing.

    Returns
    -------
    np.ndarray
    """
    h = check_step_size(step_size)
    n = check_step_count(step_count)
    h_dense = min(check_step_size(max_step), h)

    duration = h * n
    count = int(np.floor(duration / h_dense * (1.0 + _COUNT_SLACK)))

    return np.arange(max(count, 1) + 1, dtype=float) * h_dense
