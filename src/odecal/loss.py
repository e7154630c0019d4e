#########################################################################################
##
##                                  LOSS FUNCTION
##                                    (loss.py)
##
#########################################################################################

# IMPORTS ===============================================================================

import numpy as np

from .utils.errors import ShapeMismatchError


# LOSS ==================================================================================

def sse(trajectory_a, trajectory_b) -> float:
    """Sum of squared differences between two equal-length trajectories.

    Parameters
    ----------
    trajectory_a, trajectory_b : array_like
        1D sequences aligned index-for-index on the same time grid.

    Returns
    -------
    float

    Raises
    ------
    ShapeMismatchError
        If the sequences differ in length. Nothing is truncated or broadcast.
    """
    a = np.asarray(trajectory_a, dtype=float).reshape(-1)
    b = np.asarray(trajectory_b, dtype=float).reshape(-1)

    if a.size != b.size:
        raise ShapeMismatchError(
            f"sse requires equal-length trajectories, got {a.size} and {b.size}"
        )

    return float(np.sum((a - b) ** 2))
