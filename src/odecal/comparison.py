#########################################################################################
##
##                      EULER / RK2 COMPARISON AND CALIBRATION DRIVER
##                                  (comparison.py)
##
#########################################################################################

# IMPORTS ===============================================================================

from __future__ import annotations

import logging
import numbers
from dataclasses import dataclass, field
from typing import Callable, Sequence

import numpy as np

from .calibrator import Calibrator, CalibrationResult, Parameter
from .grid import check_step_count, check_step_size, make_dense_grid, make_grid
from .loss import sse
from .simulator import simulate_scheme
from .solvers import StepRule, get_step_rule
from .trajectory import Trajectory
from .utils.errors import ConfigurationError, ShapeMismatchError
from .utils.logger import LoggerManager


__all__ = [
    "ComparisonConfig",
    "SchemeResult",
    "ComparisonResult",
    "Comparison",
    "stochastic_approx",
]


# CONFIGURATION =========================================================================

@dataclass
class ComparisonConfig:
    """Scalar configuration and display metadata of one comparison run.

    Display strings are passed through to the presentation layer untouched,
    they only have to be non-empty.
    """

    y_initial: float
    k_initial: float
    step_size: float
    step_count: int
    title: str = "Model"
    x_label: str = "t"
    y_label: str = "y"


    def validate(self) -> "ComparisonConfig":
        """Raise `ConfigurationError` on invalid values, return self."""
        self.step_size = check_step_size(self.step_size)
        self.step_count = check_step_count(self.step_count)

        for attr in ("y_initial", "k_initial"):
            val = getattr(self, attr)
            if isinstance(val, bool) or not isinstance(val, numbers.Real):
                raise ConfigurationError(
                    f"{attr} must be a real number, got {type(val).__name__}"
                )
            val = float(val)
            if not np.isfinite(val):
                raise ConfigurationError(f"{attr} must be finite, got {val}")
            setattr(self, attr, val)

        for attr in ("title", "x_label", "y_label"):
            val = getattr(self, attr)
            if not isinstance(val, str) or not val.strip():
                raise ConfigurationError(f"{attr} must be a non-empty string")

        return self


    @property
    def duration(self) -> float:
        """Simulated time span ``step_size * step_count``."""
        return self.step_size * self.step_count


# RESULTS ===============================================================================

@dataclass
class SchemeResult:
    """Outcome for one integration scheme.

    ``trajectory`` is aligned to the standard time grid, ``k`` is the value
    used for the final simulation. ``sse`` is ``None`` without a reference
    function, ``calibration`` is ``None`` in fixed-k mode. ``order`` and
    ``stages`` are copied from the step rule.
    """

    scheme: str
    label: str
    trajectory: np.ndarray
    k: float
    sse: float | None = None
    calibration: CalibrationResult | None = None
    order: int | None = None
    stages: int | None = None


@dataclass
class ComparisonResult:
    """Raw numeric output handed to the presentation layer."""

    time: np.ndarray
    schemes: dict[str, SchemeResult]
    reference: Trajectory | None
    calibrated: bool
    config: ComparisonConfig
    reference_samples: np.ndarray | None = field(default=None, repr=False)


    def __getitem__(self, scheme: str) -> SchemeResult:
        return self.schemes[scheme]


    def __iter__(self):
        return iter(self.schemes.values())


    def trajectory(self, scheme: str) -> Trajectory:
        """Scheme output wrapped as a :class:`Trajectory` on the standard grid."""
        res = self.schemes[scheme]
        return Trajectory(self.time, res.trajectory, name=res.label)


    def display(self) -> None:
        """Print a summary table of the schemes, their `k` and SSE."""
        print("=" * 60)
        print(f"Scheme Comparison: {self.config.title}")
        print("=" * 60)
        print(
            f"  mode: {'calibrated k' if self.calibrated else 'fixed k'}"
            f"   h = {self.config.step_size:.4g}   n = {self.config.step_count}"
        )
        print("-" * 60)
        for res in self.schemes.values():
            sse_s = f"{res.sse:.10f}" if res.sse is not None else "-"
            order_s = str(res.order) if res.order is not None else "-"
            line = (
                f"  {res.label:28s}  order {order_s}  k = {res.k:.5f}  SSE = {sse_s}"
            )
            if res.calibration is not None and not res.calibration.success:
                line += "  (not converged)"
            print(line)
        print("=" * 60)


    def plot(self, **kwargs):
        """Draw the comparison, see :func:`odecal.plotting.plot_comparison`."""
        from .plotting import plot_comparison
        return plot_comparison(self, **kwargs)


# ORCHESTRATOR ==========================================================================

class Comparison:
    """Euler / RK2 comparison driver with optional calibration of `k`.

    Simulates ``dy/dt = derivative(y, k)`` with every configured scheme on the
    grid ``make_grid(step_size, step_count)``. In calibrate mode each scheme
    gets its own :class:`Calibrator` that minimizes the SSE against the
    reference function sampled on the same grid; in fixed-k mode `k_initial`
    is used directly.

    Parameters
    ----------
    derivative : callable
        Right hand side ``f(y, k)``.
    reference : callable, optional
        Reference solution ``y(t)``, called with a numpy array of instants.
        Required for calibration; enables SSE reporting otherwise.
    y_initial, k_initial : float
        Initial value and initial (or fixed) parameter value.
    step_size : float
        Integration timestep, > 0.
    step_count : int
        Number of steps, >= 1.
    schemes : sequence
        Step rules to compare, names or `StepRule` classes / instances.
    title, x_label, y_label : str
        Display metadata passed through to the presentation layer.
    log : bool
        Emit progress records on the ``odecal.comparison`` logger.
    logger : logging.Logger, optional
        Alternative logger receiving the records.

    Example
    -------
    .. code-block:: python

        cmp = Comparison(
            lambda y, k: k * y,
            lambda t: np.exp(0.5 * t),
            y_initial=1.0, k_initial=0.1, step_size=0.1, step_count=50,
        )
        result = cmp.run()
        result["rk2"].k     # ~0.5
        result.display()
    """

    def __init__(
        self,
        derivative: Callable[[float, float], float],
        reference: Callable[[np.ndarray], np.ndarray] | None = None,
        *,
        y_initial: float,
        k_initial: float,
        step_size: float,
        step_count: int,
        schemes: Sequence[str | type | StepRule] = ("euler", "rk2"),
        title: str = "Model",
        x_label: str = "t",
        y_label: str = "y",
        log: bool = False,
        logger: logging.Logger | None = None,
    ):
        if not callable(derivative):
            raise ConfigurationError("derivative must be callable")

        # a non-callable reference means "no reference"
        self.derivative = derivative
        self.reference = reference if callable(reference) else None

        self.config = ComparisonConfig(
            y_initial=y_initial,
            k_initial=k_initial,
            step_size=step_size,
            step_count=step_count,
            title=title,
            x_label=x_label,
            y_label=y_label,
        ).validate()

        self.rules = [get_step_rule(s) for s in schemes]
        if not self.rules:
            raise ConfigurationError("at least one scheme is required")

        names = [r.name for r in self.rules]
        if len(set(names)) != len(names):
            raise ConfigurationError(f"duplicate schemes in {names}")

        self.log = log
        self.logger = logger or LoggerManager().get_logger("comparison")


    # INTERNAL HELPERS ------------------------------------------------------------------

    def _log(self, level: int, msg: str, *args) -> None:
        if self.log:
            self.logger.log(level, msg, *args)


    def _sample_reference(self, t: np.ndarray) -> np.ndarray:
        """Evaluate the reference on ``t`` and enforce grid alignment."""
        y = np.asarray(self.reference(t), dtype=float).reshape(-1)
        if y.size != t.size:
            raise ShapeMismatchError(
                f"reference returned {y.size} values for {t.size} instants"
            )
        return y


    def _simulate(self, rule: StepRule, k: float) -> np.ndarray:
        cfg = self.config
        return simulate_scheme(
            rule, self.derivative, cfg.y_initial, k, cfg.step_size, cfg.step_count
        )


    def loss_function(self, rule, reference_samples: np.ndarray) -> Callable[[float], float]:
        """Loss closure ``k -> sse(simulate(rule, k), reference_samples)``."""
        rule = get_step_rule(rule)

        def _loss(k):
            return sse(self._simulate(rule, k), reference_samples)
        return _loss


    # RUN -------------------------------------------------------------------------------

    def run(
        self,
        calibrate: bool = True,
        *,
        bounds: tuple[float, float] = (-np.inf, np.inf),
        transform: Callable[[float], float] | None = None,
        **fit_options,
    ) -> ComparisonResult:
        """Run every scheme, calibrating `k` first if requested.

        Parameters
        ----------
        calibrate : bool
            Calibrate `k` per scheme (requires a reference function) or use
            `k_initial` directly.
        bounds : tuple[float, float]
            Optimizer-space bounds for `k` during calibration.
        transform : callable, optional
            Optimizer-to-model transform for `k`. The search then starts from
            the optimizer-space value equal to `k_initial`.
        **fit_options
            Forwarded to :meth:`Calibrator.fit` (``xatol``, ``fatol``,
            ``maxiter``, ``maxfev``).

        Returns
        -------
        ComparisonResult

        Raises
        ------
        ConfigurationError
            If calibration is requested without a reference function. Nothing
            is simulated in that case.
        """
        if calibrate and self.reference is None:
            raise ConfigurationError(
                "calibration requested, but no reference function was given; "
                "k cannot be calibrated without a reference"
            )

        cfg = self.config
        self._log(
            logging.INFO,
            "y_initial=%g k_initial=%g step_size=%g step_count=%d calibrate=%s reference=%s",
            cfg.y_initial, cfg.k_initial, cfg.step_size, cfg.step_count,
            calibrate, self.reference is not None,
        )

        t = make_grid(cfg.step_size, cfg.step_count)
        ref_samples = self._sample_reference(t) if self.reference is not None else None

        schemes: dict[str, SchemeResult] = {}

        for rule in self.rules:
            calibration = None

            self._log(
                logging.DEBUG,
                "%s: order %d, %d derivative evaluations per step",
                rule.label, rule.n, rule.s,
            )

            if calibrate:
                # fresh parameter and search state per scheme
                parameter = Parameter(
                    "k", value=cfg.k_initial, bounds=bounds, transform=transform
                )
                calibrator = Calibrator(
                    self.loss_function(rule, ref_samples),
                    parameter,
                    logger=self.logger if self.log else None,
                )
                calibration = calibrator.fit(**fit_options)
                k = calibration.k
            else:
                k = cfg.k_initial

            y = self._simulate(rule, k)
            err = sse(y, ref_samples) if ref_samples is not None else None

            schemes[rule.name] = SchemeResult(
                scheme=rule.name,
                label=rule.label,
                trajectory=y,
                k=k,
                sse=err,
                calibration=calibration,
                order=rule.n,
                stages=rule.s,
            )

            if err is not None:
                self._log(logging.INFO, "%s: k=%.5f SSE=%.10f", rule.label, k, err)
            else:
                self._log(logging.INFO, "%s: k=%.5f", rule.label, k)

        reference = None
        if self.reference is not None:
            t_dense = make_dense_grid(cfg.step_size, cfg.step_count)
            reference = Trajectory(
                t_dense, self._sample_reference(t_dense), name="Actual"
            )

        return ComparisonResult(
            time=t,
            schemes=schemes,
            reference=reference,
            calibrated=bool(calibrate),
            config=cfg,
            reference_samples=ref_samples,
        )


# HELPER FUNCTIONS ======================================================================

def stochastic_approx(
    dydt: Callable[[float, float], float],
    yt_actual,
    y_initial: float,
    k_initial: float,
    step_size: float,
    step_count: int,
    optimize_k: bool = True,
    chart_title: str = "Model",
    x_label: str = "t",
    y_label: str = "y",
    *,
    log: bool = False,
    **fit_options,
) -> ComparisonResult:
    """One-call Euler / RK2 comparison.

    `yt_actual` may be any non-callable value (e.g. ``None`` or ``0``) to
    compare the schemes without a reference; `optimize_k` must then be
    ``False``.

    Returns
    -------
    ComparisonResult
        Call ``.plot()`` on it to draw the chart.
    """
    cmp = Comparison(
        dydt,
        yt_actual,
        y_initial=y_initial,
        k_initial=k_initial,
        step_size=step_size,
        step_count=step_count,
        title=chart_title,
        x_label=x_label,
        y_label=y_label,
        log=log,
    )
    return cmp.run(calibrate=optimize_k, **fit_options)
