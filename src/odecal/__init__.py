from importlib import metadata

try:
    __version__ = metadata.version("odecal")
except Exception:
    __version__ = "unknown"

from .grid import make_grid, make_dense_grid
from .simulator import simulate, simulate_scheme
from .loss import sse
from .trajectory import Trajectory
from .calibrator import Parameter, Calibrator, CalibrationResult, calibrate
from .comparison import (
    Comparison,
    ComparisonConfig,
    ComparisonResult,
    SchemeResult,
    stochastic_approx,
)
from .solvers import StepRule, Euler, RK2, Heun, get_step_rule
from .utils.errors import OdecalError, ConfigurationError, ShapeMismatchError
from .utils.logger import LoggerManager
