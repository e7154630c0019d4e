#########################################################################################
##
##                          PRESENTATION OF COMPARISON RESULTS
##                                  (plotting.py)
##
#########################################################################################

# IMPORTS ===============================================================================

from __future__ import annotations


# CONSTANTS =============================================================================

SCHEME_STYLES = {
    "euler": "--x",
    "rk2": "--o",
}

DEFAULT_STYLE = "--"


# HELPERS ===============================================================================

def legend_label(result) -> str:
    """Legend text for a :class:`SchemeResult`, with `k` and (if any) SSE."""
    if result.sse is None:
        return f"{result.label} (k = {result.k:.5f})"
    return f"{result.label} (k = {result.k:.5f}, SSE = {result.sse:.10f})"


# PLOT ==================================================================================

def plot_comparison(
    result,
    *,
    title: str | None = None,
    xlabel: str | None = None,
    ylabel: str | None = None,
    ax=None,
    grid: bool = False,
):
    """Plot the scheme trajectories and the dense reference of a comparison.

    Parameters
    ----------
    result : ComparisonResult
        Output of :meth:`Comparison.run`.
    title, xlabel, ylabel : str, optional
        Override the display metadata stored in ``result.config``.
    ax : matplotlib.axes.Axes, optional
        Existing axes to draw into.
    grid : bool
        Draw grid lines.

    Returns
    -------
    fig : matplotlib.figure.Figure
    ax : matplotlib.axes.Axes
    """
    import matplotlib.pyplot as plt  # lazy import

    if ax is None:
        fig, ax = plt.subplots(figsize=(8, 5))
    else:
        fig = ax.figure

    for res in result:
        ax.plot(
            result.time,
            res.trajectory,
            SCHEME_STYLES.get(res.scheme, DEFAULT_STYLE),
            label=legend_label(res),
        )

    if result.reference is not None:
        ax.plot(result.reference.time, result.reference.values, "-", label="Actual")

    cfg = result.config
    ax.set_xlabel(xlabel or cfg.x_label)
    ax.set_ylabel(ylabel or cfg.y_label)
    ax.set_title(title or cfg.title)
    ax.legend()
    if grid:
        ax.grid(True, alpha=0.3)

    return fig, ax
