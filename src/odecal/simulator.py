#########################################################################################
##
##                               TRAJECTORY SIMULATOR
##                                  (simulator.py)
##
#########################################################################################

# IMPORTS ===============================================================================

import numpy as np

from .grid import check_step_size, check_step_count
from .solvers import get_step_rule


# SIMULATION ============================================================================

def simulate(step_fn, y_initial, step_size, step_count):
    """Drive a one-argument step function over the time grid.

    Position 0 of the trajectory holds `y_initial`, position ``i`` holds
    ``step_fn(trajectory[i-1])``. The trajectory is aligned index-for-index
    with ``make_grid(step_size, step_count)``.

    Parameters
    ----------
    step_fn : callable
        ``y_prev -> y_next``, e.g. from `StepRule.bind`
    y_initial : float
        initial value
    step_size : float
        grid spacing (only validated here, the step function carries its own)
    step_count : int
        number of steps

    Returns
    -------
    np.ndarray
        fresh array of length ``step_count + 1``

    Notes
    -----
    Non-finite values produced by the step function are stored and
    propagated as they are.
    """
    check_step_size(step_size)
    n = check_step_count(step_count)

    y_vals = np.empty(n + 1, dtype=float)
    y_vals[0] = y_initial

    #strictly sequential, step i only depends on step i-1
    for i in range(1, n + 1):
        y_vals[i] = step_fn(y_vals[i - 1])

    return y_vals


def simulate_scheme(rule, derivative, y_initial, k, step_size, step_count):
    """Simulate the ODE with a given step rule and parameter `k`.

    Parameters
    ----------
    rule : str | type | StepRule
        integration rule, resolved through `get_step_rule`
    derivative : callable
        right hand side `f(y, k)`
    y_initial : float
        initial value
    k : float
        ODE parameter
    step_size : float
        integration timestep
    step_count : int
        number of steps

    Returns
    -------
    np.ndarray
    """
    step_fn = get_step_rule(rule).bind(derivative, k, step_size)
    return simulate(step_fn, y_initial, step_size, step_count)
