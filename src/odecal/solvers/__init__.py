from ._rule import StepRule
from .euler import Euler
from .rk2 import RK2, Heun

from ..utils.errors import ConfigurationError


# REGISTRY =============================================================================

STEP_RULES = {
    "euler": Euler,
    "rk2": RK2,
    "heun": Heun,
}


def get_step_rule(rule):
    """Resolve a rule name, `StepRule` subclass or instance to an instance.

    Parameters
    ----------
    rule : str | type | StepRule
        ``"euler"``, ``"rk2"`` or ``"heun"`` (case insensitive), a
        `StepRule` subclass, or an instance.

    Returns
    -------
    StepRule
    """
    if isinstance(rule, StepRule):
        return rule
    if isinstance(rule, type) and issubclass(rule, StepRule):
        return rule()
    if isinstance(rule, str):
        try:
            return STEP_RULES[rule.strip().lower()]()
        except KeyError:
            raise ConfigurationError(
                f"unknown step rule '{rule}', expected one of {sorted(STEP_RULES)}"
            ) from None
    raise ConfigurationError(
        f"step rule must be a name, StepRule class or instance, "
        f"got {type(rule).__name__}"
    )
