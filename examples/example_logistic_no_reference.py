#########################################################################################
##
##            odecal example: scheme comparison without a reference solution
##
##  Model:   dy/dt = k * y * (1 - y),  y(0) = 0.05   (logistic growth)
##  Fixed:   k = 1.2, no calibration (no reference function available)
##
##  With a coarse step the two schemes visibly separate around the inflection
##  point; the legend reports k only since there is nothing to compute an SSE
##  against.
##
#########################################################################################

# IMPORTS ===============================================================================

import matplotlib.pyplot as plt

from odecal import stochastic_approx


# Run Example ===========================================================================

if __name__ == '__main__':

    result = stochastic_approx(
        lambda y, k: k * y * (1.0 - y),
        None,
        y_initial=0.05,
        k_initial=1.2,
        step_size=0.5,
        step_count=20,
        optimize_k=False,
        chart_title="Logistic growth",
        y_label="population share",
    )

    result.display()
    result.plot(grid=True)
    plt.show()
