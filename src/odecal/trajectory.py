#########################################################################################
##
##                               TRAJECTORY CONTAINER
##                                 (trajectory.py)
##
#########################################################################################

# IMPORTS ===============================================================================

import numpy as np

from .utils.errors import ConfigurationError, ShapeMismatchError


# CLASS =================================================================================

class Trajectory:

    """Scalar trajectory sampled on a time grid.

    Stores a time base and the state values aligned to it index-for-index.
    The time base is required to be strictly increasing.

    Parameters
    ----------
    time : array_like
        Time vector of shape (n,).
    values : array_like
        State values of shape (n,).
    name : str, optional
        Trajectory name for display and plotting.
    unit : str, optional
        Time unit label used for plotting.

    Notes
    -----
    The `time_info` dictionary stores simple plotting metadata:
    - `time_range`: dict with `start` and `end`
    - `units`: display string for the time axis
    """

    def __init__(self, time, values, name: str = "trajectory", unit: str = "s"):
        # own copies, callers keep their arrays
        t = np.array(time, dtype=float).reshape(-1)
        y = np.array(values, dtype=float).reshape(-1)

        if t.size != y.size:
            raise ShapeMismatchError(
                f"Trajectory requires time and values with same length, "
                f"got {t.size} and {y.size}"
            )
        if t.size < 1:
            raise ShapeMismatchError("Trajectory requires at least 1 sample")
        if not np.all(np.diff(t) > 0):
            raise ConfigurationError("Trajectory requires strictly increasing time")

        self.time = t
        self.values = y
        self.name = str(name)

        self.time_info = {
            'time_range':
                {
                    'start': t[0],
                    'end': t[-1]
                },
            'units' : unit,
            }


    def __len__(self):
        return self.time.size


    def __repr__(self):
        return (
            f"Trajectory(name={self.name!r}, length={self.length}, "
            f"duration={self.duration:.4g})"
        )


    def plot(
        self,
        fmt: str = "-",
        *,
        ax=None,
        label: str | None = None,
        **plot_kws,
    ):
        """Draw the trajectory.

        Parameters
        ----------
        fmt : str, optional
            Matplotlib format string, e.g. ``"--x"``.
        ax : matplotlib.axes.Axes, optional
            Axes to draw into; a new figure is created if omitted.
        label : str, optional
            Legend label, defaults to the trajectory name.
        **plot_kws
            Forwarded to `matplotlib.axes.Axes.plot`.

        Returns
        -------
        ax : matplotlib.axes.Axes
        """
        import matplotlib.pyplot as plt  # lazy import

        if ax is None:
            _, ax = plt.subplots(figsize=(8, 4))

        ax.plot(self.time, self.values, fmt, label=label or self.name, **plot_kws)
        ax.set_xlabel(f"Time ({self.time_info['units']})")
        return ax


    @property
    def length(self) -> int:
        """Number of samples."""
        return self.time.size


    @property
    def duration(self) -> float:
        """Trajectory duration in time units."""
        return float(self.time[-1] - self.time[0])
