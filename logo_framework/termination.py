"""LOGO Framework - Termination

Error measures against the known optimum and the done-condition of a run.
"""

from __future__ import annotations

import math

from .options import LogoOptions
from .state import SearchState


def value_error(value: float, options: LogoOptions) -> float:
    """
    Error of a single objective value with respect to the known optimum.

    - Unknown optimum: ``inf`` (never satisfies a finite epsilon).
    - Optimum exactly 0: absolute gap ``optimum - value``.
    - Otherwise: relative gap ``(optimum - value) / |optimum|``.
    """
    if not options.optimum_known:
        return math.inf
    optimum = options.known_optimum
    if optimum == 0.0:
        return optimum - value
    return (optimum - value) / abs(optimum)


def relative_error(state: SearchState) -> float:
    """Error of the best value in the space (``inf`` if the space is empty)."""
    best = state.space.best()
    if best is None:
        return math.inf
    return value_error(best.value, state.options)


def target_reached(value: float, options: LogoOptions) -> bool:
    """True if value is within epsilon of the known optimum."""
    return value_error(value, options) <= options.epsilon


def is_done(state: SearchState) -> bool:
    """True once the budget is spent or the error target is met."""
    return state.budget_exhausted or relative_error(state) <= state.options.epsilon
