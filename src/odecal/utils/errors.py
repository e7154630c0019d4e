#########################################################################################
##
##                                ERROR TAXONOMY
##                               (utils/errors.py)
##
#########################################################################################

# EXCEPTIONS ============================================================================

class OdecalError(Exception):
    """Base class for all errors raised by odecal."""


class ConfigurationError(OdecalError, ValueError):
    """Invalid invocation, detected before any computation starts.

    Raised for non-positive step sizes, invalid step counts, unknown
    integration schemes, inconsistent parameter bounds, and calibration
    requested without a reference function.
    """


class ShapeMismatchError(OdecalError, ValueError):
    """Two sequences that must be aligned index-for-index are not.

    This is a contract violation (e.g. computing a loss between trajectories
    sampled on different grids), not a recoverable condition.
    """
