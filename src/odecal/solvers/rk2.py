########################################################################################
##
##                     HEUN'S METHOD (EXPLICIT RUNGE-KUTTA, ORDER 2)
##                               (solvers/rk2.py)
##
########################################################################################

# IMPORTS ==============================================================================

from ._rule import StepRule


# SOLVERS ==============================================================================

class RK2(StepRule):
    """Two-stage, 2nd order explicit Runge-Kutta predictor-corrector (Heun's
    method, also known as the improved Euler method).

    An Euler predictor gives a provisional next value, the slope there is
    averaged with the slope at the current point

    .. math::

        s_1 = f(y_n, k)

        s_2 = f(y_n + s_1 h, k)

        y_{n+1} = y_n + \\frac{s_1 + s_2}{2} h

    Characteristics
    ---------------
    * Order: 2
    * Stages: 2
    * Fixed timestep

    Note
    ----
    If `f` does not depend on `y`, both slopes coincide and the rule reduces
    exactly to `Euler`.

    References
    ----------
    .. [1] Süli, E., & Mayers, D. (2003). "An Introduction to Numerical
           Analysis". Cambridge University Press.
    """

    name = "rk2"
    label = "Euler's method improved"

    n = 2
    s = 2

    def step(self, derivative, previous_y, k, step_size):
        slope_1 = derivative(previous_y, k)
        y_euler_step = previous_y + slope_1 * step_size

        slope_2 = derivative(y_euler_step, k)

        slope_final = (slope_1 + slope_2) / 2

        return previous_y + slope_final * step_size


# alias, same rule under its textbook name
Heun = RK2
