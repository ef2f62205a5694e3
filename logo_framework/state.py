"""
LOGO Framework - Search State

The mutable state of one run: the partitioned space plus run-level counters.
The state is owned and mutated by a single driver; nothing else writes to it.
"""

from __future__ import annotations

import math
import warnings
from dataclasses import dataclass, field

from .node import Node
from .options import LogoOptions
from .space import Space


@dataclass(eq=False)
class SearchState:
    """
    Attributes
    ----------
    options : LogoOptions
        Run configuration (referenced, not owned).
    space : Space
        The partition of the domain.
    samples_taken : int
        Number of objective evaluations so far.
    bandwidth : int
        Bandwidth ``w`` used by the next selection pass.
    last_best_value : float
        Best value in the space at the end of the previous step.
    n_steps : int
        Number of completed steps.
    """

    options: LogoOptions
    space: Space = field(default_factory=Space)
    samples_taken: int = 0
    bandwidth: int = 1
    last_best_value: float = -math.inf
    n_steps: int = 0

    @classmethod
    def from_options(cls, options: LogoOptions) -> "SearchState":
        return cls(options=options, bandwidth=int(options.init_bandwidth))

    @property
    def budget_exhausted(self) -> bool:
        return self.samples_taken >= self.options.max_samples

    def sample(self, node: Node) -> float:
        """
        Evaluate the objective at the node centre and store the value.

        This is the only place the objective is called.
        """
        value = float(self.options.objective(node.center()))
        if not math.isfinite(value):
            warnings.warn(
                f"objective returned non-finite value {value!r} at {node.center().tolist()}",
                RuntimeWarning,
                stacklevel=2,
            )
        node.value = value
        self.samples_taken += 1
        return value

    def best_value(self) -> float:
        """Best value in the space, or -inf if the space is empty."""
        best = self.space.best()
        return -math.inf if best is None else best.value
