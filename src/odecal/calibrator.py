#########################################################################################
##
##                          DERIVATIVE-FREE PARAMETER CALIBRATOR
##                                  (calibrator.py)
##
#########################################################################################

# IMPORTS ===============================================================================

from __future__ import annotations

import warnings
from dataclasses import dataclass
from typing import Callable

import numpy as np
import scipy.optimize as sci_opt

from .utils.errors import ConfigurationError
from .utils.logger import LoggerManager


__all__ = [
    "Parameter",
    "CalibrationResult",
    "Calibrator",
    "calibrate",
]


# PARAMETER DECLARATION =================================================================

class Parameter:
    """Scalar parameter under calibration.

    Optional transforms allow the optimizer to work in an unconstrained space
    while applying a physically meaningful value to the model (e.g. ``np.exp``
    to enforce positivity).

    Parameters
    ----------
    name : str
        Parameter identifier.
    value : float
        Initial value in optimizer space.
    bounds : tuple[float, float]
        Lower / upper bounds in optimizer space.
    transform : callable, optional
        Applied when the parameter is read: ``model_value = transform(optimizer_value)``.

    Notes
    -----
    Calling a ``Parameter`` instance (``p()``) returns the model-space value
    after the optional transform.  ``p.value`` always returns the optimizer-space
    value.

    Example
    -------
    .. code-block:: python

        k = Parameter("k", value=np.log(0.1), transform=np.exp)
        k()       # model-space value: 0.1
        k.value   # optimizer-space value: -2.30...
    """

    def __init__(
        self,
        name: str,
        value: float = 1.0,
        bounds: tuple[float, float] = (-np.inf, np.inf),
        transform: Callable[[float], float] | None = None,
    ):
        self.name = name
        self.transform = transform

        lo, hi = bounds
        if np.isnan(lo) or np.isnan(hi) or lo > hi:
            raise ConfigurationError(
                f"Parameter '{name}': invalid bounds ({lo}, {hi})"
            )
        self.bounds = (float(lo), float(hi))

        if float(value) < lo:
            warnings.warn(
                f"Parameter '{name}': initial value {value} < lower bound {lo}",
                UserWarning,
                stacklevel=2,
            )
        if float(value) > hi:
            warnings.warn(
                f"Parameter '{name}': initial value {value} > upper bound {hi}",
                UserWarning,
                stacklevel=2,
            )

        self.set(value)


    @property
    def value(self) -> float:
        """Current optimizer-space value."""
        return self._value


    @value.setter
    def value(self, new_value: float) -> None:
        self.set(new_value)


    @property
    def is_bounded(self) -> bool:
        """True if at least one bound is finite."""
        lo, hi = self.bounds
        return bool(np.isfinite(lo) or np.isfinite(hi))


    def __call__(self) -> float:
        """Return the model-space value (after optional transform)."""
        return self.to_model(self._value)


    def to_model(self, x: float) -> float:
        """Map an optimizer-space value to model space."""
        return float(self.transform(x)) if self.transform is not None else float(x)


    def set(self, value: float) -> None:
        """Set the optimizer-space value."""
        self._value = float(value)


    def __repr__(self) -> str:
        return (
            f"Parameter(name={self.name!r}, value={self._value}, "
            f"bounds={self.bounds})"
        )


# CALIBRATION RESULT ====================================================================

@dataclass
class CalibrationResult:
    """Calibration result container.

    ``k`` is the fitted model-space value, ``sse`` the loss at ``k``.
    """

    k: float
    sse: float
    nfev: int
    nit: int
    success: bool
    message: str


    def __repr__(self) -> str:
        status = "SUCCESS" if self.success else "FAILED"
        return (
            f"CalibrationResult({status}, k={self.k:.6g}, sse={self.sse:.4g}, "
            f"nfev={self.nfev}, nit={self.nit})"
        )


# CALIBRATOR ============================================================================

class Calibrator:
    """Derivative-free scalar minimizer for a loss ``k -> float``.

    Runs a Nelder-Mead simplex search (``scipy.optimize.minimize``) that only
    queries loss values, so non-smooth or noisy loss landscapes are tolerated.
    The search state is owned by the instance; separate calibrators never
    share it.

    Parameters
    ----------
    loss_of_k : callable
        Loss as a function of the model-space parameter value.
    parameter : Parameter | float
        Parameter to calibrate, or the initial model-space value of an
        unbounded, untransformed parameter.
    name : str
        Name used when `parameter` is given as a float.
    logger : logging.Logger, optional
        Target for progress records, defaults to ``odecal.calibrator``.

    Notes
    -----
    The result is the best point found from the initial guess. It is a local
    minimum at best; global optimality is not guaranteed. When the iteration
    or evaluation cap is hit the best point so far is still returned, with
    ``success=False``.

    Example
    -------
    .. code-block:: python

        cal = Calibrator(lambda k: (k - 2.0) ** 2, 0.5)
        result = cal.fit()
        result.k     # ~2.0
    """

    def __init__(
        self,
        loss_of_k: Callable[[float], float],
        parameter: Parameter | float,
        *,
        name: str = "k",
        logger=None,
    ):
        if not callable(loss_of_k):
            raise ConfigurationError("loss_of_k must be callable")

        if not isinstance(parameter, Parameter):
            parameter = Parameter(name, value=float(parameter))

        self.loss_of_k = loss_of_k
        self.parameter = parameter
        self.logger = logger or LoggerManager().get_logger("calibrator")

        self.nfev = 0


    def objective(self, x) -> float:
        """Loss evaluated at the optimizer-space vector ``x`` (length 1)."""
        self.nfev += 1
        return float(self.loss_of_k(self.parameter.to_model(float(np.ravel(x)[0]))))


    def fit(
        self,
        *,
        xatol: float = 1e-6,
        fatol: float = 1e-8,
        maxiter: int = 1000,
        maxfev: int = 1000,
    ) -> CalibrationResult:
        """Minimize the loss starting from the current parameter value.

        Parameters
        ----------
        xatol : float
            Absolute simplex size (optimizer space) for convergence.
        fatol : float
            Absolute spread of loss values across the simplex for convergence.
        maxiter : int
            Iteration cap.
        maxfev : int
            Loss evaluation cap.

        Returns
        -------
        CalibrationResult

        Notes
        -----
        ``xatol=1e-4, fatol=1e-4, maxiter=200, maxfev=200`` reproduces the
        classic ``fminsearch`` stopping rule for a single parameter.
        """
        self.nfev = 0
        x0 = np.array([self.parameter.value], dtype=float)

        res = sci_opt.minimize(
            self.objective,
            x0=x0,
            method="Nelder-Mead",
            bounds=[self.parameter.bounds] if self.parameter.is_bounded else None,
            options={
                "xatol": float(xatol),
                "fatol": float(fatol),
                "maxiter": int(maxiter),
                "maxfev": int(maxfev),
            },
        )

        self.parameter.set(float(res.x[0]))

        result = CalibrationResult(
            k=self.parameter(),
            sse=float(res.fun),
            nfev=self.nfev,
            nit=int(res.nit),
            success=bool(res.success),
            message=str(res.message),
        )

        if result.success:
            self.logger.debug(
                "calibrated %s = %.6g (loss %.6g, %d evaluations)",
                self.parameter.name, result.k, result.sse, result.nfev,
            )
        else:
            self.logger.warning(
                "calibration of %s stopped early: %s (best %s = %.6g, loss %.6g)",
                self.parameter.name, result.message,
                self.parameter.name, result.k, result.sse,
            )

        return result


# HELPER FUNCTIONS ======================================================================

def calibrate(
    loss_of_k: Callable[[float], float],
    k_initial: float,
    **options,
) -> float:
    """Return the `k` minimizing `loss_of_k`, searched from `k_initial`.

    Keyword arguments are forwarded to :meth:`Calibrator.fit`.
    """
    return Calibrator(loss_of_k, k_initial).fit(**options).k
