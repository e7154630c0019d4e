#########################################################################################
##
##               odecal example: calibrating exponential growth
##
##  Model:   dy/dt = k * y,  y(0) = 1
##  Data:    analytical solution y(t) = exp(0.5 t)
##  Fit:     k, separately for Euler's method and RK2 (Heun)
##
##  Euler's fitted k absorbs its first-order discretization error and lands
##  noticeably above 0.5; RK2 stays much closer.
##
#########################################################################################

# IMPORTS ===============================================================================

import logging

import numpy as np
import matplotlib.pyplot as plt

from odecal import Comparison, LoggerManager


# MODEL DEFINITION ======================================================================

true_k = 0.5

def dydt(y, k):
    return k * y

def y_actual(t):
    return np.exp(true_k * t)


# Run Example ===========================================================================

if __name__ == '__main__':

    LoggerManager().configure(level=logging.INFO)

    cmp = Comparison(
        dydt,
        y_actual,
        y_initial=1.0,
        k_initial=0.1,
        step_size=0.1,
        step_count=50,
        title="Exponential growth",
        log=True,
    )

    # calibrated k per scheme
    result = cmp.run(calibrate=True)
    result.display()
    result.plot()

    # same setup with k fixed at its true value
    fixed = Comparison(
        dydt,
        y_actual,
        y_initial=1.0,
        k_initial=true_k,
        step_size=0.1,
        step_count=50,
        title="Exponential growth, k fixed",
    ).run(calibrate=False)
    fixed.display()
    fixed.plot()

    plt.show()
