"""
LOGO Framework - Options

Immutable run configuration. Options are validated on construction, so an
invalid run is rejected before any objective evaluation happens.
"""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass, field
from typing import Callable

import numpy as np

from .schedule import BandwidthSchedule, FixedBandwidthSchedule

DIM = 2
"""Default dimensionality of the search domain."""

UNKNOWN_OPTIMUM = math.inf
"""Sentinel for ``known_optimum``: run until the sample budget is exhausted."""


def _is_int(value) -> bool:
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


def sqrt_depth_budget(n_samples: int) -> float:
    """Default depth budget: hmax(n) = sqrt(n)."""
    return math.sqrt(n_samples)


@dataclass(frozen=True)
class LogoOptions:
    """
    Configuration of one LOGO run.

    Parameters
    ----------
    objective : Callable[[np.ndarray], float]
        Function to maximise. Receives a point of [0, 1]^dim and must be a
        pure, total function. Rescaling to another domain is its own job.
    max_samples : int
        Sample budget (number of objective evaluations, root included).
    k : int
        Number of children per split. Must be odd and >= 3 so that the
        middle child shares its parent's centre.
    depth_budget : Callable[[int], float]
        hmax(n): how deep it is worth searching after n samples. Should be
        non-negative and slowly increasing.
    schedule : BandwidthSchedule
        Called once per step to choose the next bandwidth.
    init_bandwidth : int
        Bandwidth used by the first step.
    epsilon : float
        Target error (see termination.value_error).
    known_optimum : float
        Known maximum of the objective, or UNKNOWN_OPTIMUM.
    dim : int
        Dimensionality of the domain.

    Raises
    ------
    ValueError
        If any field violates its contract.
    """

    objective: Callable[[np.ndarray], float]
    max_samples: int = 1000
    k: int = 3
    depth_budget: Callable[[int], float] = sqrt_depth_budget
    schedule: BandwidthSchedule = field(default_factory=FixedBandwidthSchedule)
    init_bandwidth: int = 1
    epsilon: float = 1e-4
    known_optimum: float = UNKNOWN_OPTIMUM
    dim: int = DIM

    def __post_init__(self) -> None:
        if not callable(self.objective):
            raise ValueError("objective must be callable")
        if not callable(self.depth_budget):
            raise ValueError("depth_budget must be callable")
        if not callable(self.schedule):
            raise ValueError("schedule must be callable")
        if not _is_int(self.k) or self.k < 3 or self.k % 2 == 0:
            raise ValueError(f"k must be an odd integer >= 3, got {self.k!r}")
        if not _is_int(self.max_samples) or self.max_samples < 1:
            raise ValueError(f"max_samples must be an integer >= 1, got {self.max_samples!r}")
        if not _is_int(self.init_bandwidth) or self.init_bandwidth < 1:
            raise ValueError(f"init_bandwidth must be an integer >= 1, got {self.init_bandwidth!r}")
        if not _is_int(self.dim) or self.dim < 1:
            raise ValueError(f"dim must be an integer >= 1, got {self.dim!r}")
        if math.isnan(self.epsilon) or self.epsilon < 0:
            raise ValueError(f"epsilon must be >= 0, got {self.epsilon!r}")
        if math.isnan(self.known_optimum):
            raise ValueError("known_optimum must not be NaN; use UNKNOWN_OPTIMUM")

    @property
    def optimum_known(self) -> bool:
        return not math.isinf(self.known_optimum)
