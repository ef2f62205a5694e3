"""
LOGO Framework - Optimizer Module

This module implements the LOGO driver, wrapping the search state in the
life cycle an external caller loops over:

    init -> while not is_done(): step -> finish -> delete

LOGO (Locally Oriented Global Optimization) maximises a black-box function
over [0, 1]^d by repeatedly splitting the most promising cells of an
adaptive partition, grouping tree depths into bands whose width is driven
by a pluggable bandwidth schedule.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

import numpy as np

from .expansion import create_root_node
from .options import LogoOptions
from .selection import select_nodes
from .state import SearchState
from .termination import is_done as _is_done
from .termination import relative_error

logger = logging.getLogger(__name__)

UNINITIALIZED = "uninitialized"
INITIALIZED = "initialized"
STEPPING = "stepping"
FINALIZED = "finalized"
DELETED = "deleted"


@dataclass(frozen=True)
class LogoResult:
    """
    Snapshot of a finished run.

    Attributes
    ----------
    x : np.ndarray
        Centre of the best node (read-only).
    value : float
        Objective value at x.
    samples : int
        Total number of objective evaluations.
    steps : int
        Number of optimizer steps performed.
    depth : int
        Depth of the best node.
    """

    x: np.ndarray
    value: float
    samples: int
    steps: int = 0
    depth: int = 0


class LOGO:
    """
    Locally Oriented Global Optimization driver.

    Parameters
    ----------
    options : LogoOptions
        Run configuration. Validated before anything is sampled.

    Examples
    --------
    >>> opts = LogoOptions(objective=lambda x: -float(np.sum((x - 0.3) ** 2)),
    ...                    max_samples=200, known_optimum=0.0)
    >>> opt = LOGO(opts)
    >>> opt.init()
    >>> while not opt.is_done():
    ...     opt.step()
    >>> result = opt.finish()
    >>> opt.delete()

    or simply ``LOGO(opts).optimize()``.
    """

    def __init__(self, options: LogoOptions) -> None:
        if not isinstance(options, LogoOptions):
            raise TypeError(f"LOGO requires LogoOptions, got {type(options).__name__}")
        self.options = options
        self._state: Optional[SearchState] = None
        self._phase = UNINITIALIZED
        self.history: List[float] = []

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def phase(self) -> str:
        """Current life-cycle phase."""
        return self._phase

    @property
    def state(self) -> SearchState:
        """The live search state."""
        return self._require_state("state")

    @property
    def n_samples(self) -> int:
        return 0 if self._state is None else self._state.samples_taken

    def _require_state(self, op: str) -> SearchState:
        if self._phase == UNINITIALIZED:
            raise RuntimeError(f"{op}() requires init() first")
        if self._phase == DELETED or self._state is None:
            raise RuntimeError(f"{op}() called after delete()")
        return self._state

    # -------------------------------------------------------------------------
    # Life cycle
    # -------------------------------------------------------------------------

    def init(self) -> None:
        """Build the search state and sample the root cell."""
        if self._phase != UNINITIALIZED:
            raise RuntimeError(f"init() called in phase {self._phase!r}")
        state = SearchState.from_options(self.options)
        root = create_root_node(state)
        state.space.insert(root)
        state.last_best_value = root.value
        self._state = state
        self._phase = INITIALIZED
        self.history = [root.value]
        logger.debug("LOGO initialised: root value=%.6g", root.value)

    def step(self) -> None:
        """
        Run one selection pass, then pick the next bandwidth.

        Raises
        ------
        RuntimeError
            If called before init(), after finish() or after delete().
        ValueError
            If the schedule returns something that is not an integer >= 1.
        """
        state = self._require_state("step")
        if self._phase not in (INITIALIZED, STEPPING):
            raise RuntimeError(f"step() called in phase {self._phase!r}")

        n_expanded = select_nodes(state)

        w = self.options.schedule(state)
        if isinstance(w, bool) or int(w) != w or w < 1:
            raise ValueError(f"schedule returned invalid bandwidth {w!r}")
        state.bandwidth = int(w)

        state.last_best_value = state.best_value()
        state.n_steps += 1
        self.history.append(state.last_best_value)
        self._phase = STEPPING

        logger.debug(
            "step %d: expanded=%d samples=%d best=%.6g next_w=%d",
            state.n_steps, n_expanded, state.samples_taken, state.last_best_value, state.bandwidth,
        )
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("space after step %d:\n%s", state.n_steps, state.space.describe())

    def is_done(self) -> bool:
        """True once the budget is spent or the error target is met."""
        return _is_done(self._require_state("is_done"))

    def finish(self) -> LogoResult:
        """
        Build the result snapshot.

        Raises
        ------
        RuntimeError
            If the run is not done yet.
        """
        state = self._require_state("finish")
        if not _is_done(state):
            raise RuntimeError("finish() called before the run is done")
        best = state.space.best()
        if best is None:
            raise RuntimeError("finish() called on an empty space")
        x = best.center()
        x.setflags(write=False)
        result = LogoResult(
            x=x,
            value=float(best.value),
            samples=state.samples_taken,
            steps=state.n_steps,
            depth=best.depth,
        )
        self._phase = FINALIZED
        logger.info(
            "LOGO finished: value=%.6g samples=%d steps=%d",
            result.value, result.samples, result.steps,
        )
        return result

    def delete(self) -> None:
        """Release every node. Must be called exactly once after init()."""
        state = self._require_state("delete")
        state.space.clear()
        self._state = None
        self._phase = DELETED

    def best_value(self) -> float:
        """Best value found so far (-inf if the space is empty)."""
        return self._require_state("best_value").best_value()

    # -------------------------------------------------------------------------
    # Convenience
    # -------------------------------------------------------------------------

    def optimize(self) -> LogoResult:
        """
        Run the whole life cycle and return the result.

        Raises
        ------
        RuntimeError
            If a step consumes no samples: the depth budget is too small to
            reach any live node and the run would never finish.
        """
        self.init()
        try:
            while not self.is_done():
                before = self.n_samples
                self.step()
                if self.n_samples == before and not self.is_done():
                    raise RuntimeError(
                        f"step {self._state.n_steps} made no progress; "
                        "depth budget too small for the current bandwidth"
                    )
            return self.finish()
        finally:
            self.delete()

    # -------------------------------------------------------------------------
    # Diagnostics
    # -------------------------------------------------------------------------

    def get_statistics(self) -> Dict[str, Any]:
        """Return a summary of the current run."""
        if self._state is None:
            return {"phase": self._phase, "n_samples": 0}
        state = self._state
        err = relative_error(state)
        return {
            "phase": self._phase,
            "n_samples": state.samples_taken,
            "n_steps": state.n_steps,
            "n_nodes": len(state.space),
            "max_depth": state.space.max_depth,
            "depth_counts": state.space.depth_counts(),
            "capacity": state.space.capacity,
            "bandwidth": state.bandwidth,
            "best_value": state.best_value(),
            "error": err if math.isfinite(err) else None,
        }

    def __repr__(self) -> str:
        return (
            f"LOGO(phase={self._phase!r}, k={self.options.k}, "
            f"n_samples={self.n_samples}/{self.options.max_samples})"
        )
