########################################################################################
##
##                             EXPLICIT EULER METHOD
##                              (solvers/euler.py)
##
########################################################################################

# IMPORTS ==============================================================================

from ._rule import StepRule


# SOLVERS ==============================================================================

class Euler(StepRule):
    """Explicit forward Euler rule. Advances the state with the slope at the
    current point

    .. math::

        y_{n+1} = y_n + f(y_n, k) \\, h

    Characteristics
    ---------------
    * Order: 1
    * Stages: 1
    * Fixed timestep
    * Local error :math:`O(h^2)`, global error :math:`O(h)`

    Note
    ----
    The cheapest rule available, one derivative evaluation per step. Useful
    as the baseline against which `RK2` is compared.
    """

    name = "euler"
    label = "Euler's method"

    n = 1
    s = 1

    def step(self, derivative, previous_y, k, step_size):
        slope = derivative(previous_y, k)
        return previous_y + slope * step_size
