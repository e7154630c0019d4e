########################################################################################
##
##                          BASE CLASS FOR FIXED-STEP RULES
##                               (solvers/_rule.py)
##
########################################################################################

# IMPORTS ==============================================================================

from typing import Callable


# TYPES ================================================================================

# right hand side of the scalar ODE: (y, k) -> dy/dt
Derivative = Callable[[float, float], float]

# one-argument step function consumed by the simulator: y_prev -> y_next
StepFunction = Callable[[float], float]


# BASE CLASS ===========================================================================

class StepRule:
    """Base class for explicit one-step integration rules of a scalar ODE

    .. math::

        \\dot{y} = f(y, k)

    A rule advances the state by exactly one fixed step given the previous
    value, the parameter `k` and the step size. Rules hold no state between
    calls, so a single instance can be shared across runs.

    Attributes
    ----------
    name : str
        registry key used by `get_step_rule`
    label : str
        human readable name for legends and summaries
    n : int
        order of accuracy of the rule
    s : int
        number of derivative evaluations per step
    """

    name = None
    label = None

    n = 1
    s = 1

    def step(self, derivative, previous_y, k, step_size):
        """Advance one step.

        Parameters
        ----------
        derivative : callable
            right hand side `f(y, k)`
        previous_y : float
            state at the current grid point
        k : float
            ODE parameter
        step_size : float
            integration timestep

        Returns
        -------
        next_y : float
            state at the next grid point
        """
        raise NotImplementedError(f"{type(self).__name__}.step is not implemented")


    def bind(self, derivative, k, step_size) -> StepFunction:
        """Freeze `derivative`, `k` and `step_size` into a one-argument step
        function ``y_prev -> y_next`` for `simulate`.
        """
        def _step(previous_y):
            return self.step(derivative, previous_y, k, step_size)
        return _step


    def __repr__(self):
        return f"{type(self).__name__}()"
