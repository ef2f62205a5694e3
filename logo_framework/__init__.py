"""
LOGO Framework
==============

Locally Oriented Global Optimization: derivative-free maximisation of a
black-box function over the unit hypercube.

LOGO combines:
- An adaptive partition of [0, 1]^d into hyperrectangles, each sampled once
  at its centre
- Odd k-way splits whose middle child reuses its parent's value
- Optimistic selection over bands of tree depths
- A pluggable bandwidth schedule (fixed or adaptive ladder)

Installation
------------
The framework requires only numpy.

Quick Start
-----------

    >>> import numpy as np
    >>> from logo_framework import LOGO, LogoOptions
    >>> def objective(x):
    ...     return -float(np.sum((x - 0.3) ** 2))
    >>> opts = LogoOptions(objective=objective, max_samples=300, known_optimum=0.0)
    >>> result = LOGO(opts).optimize()
    >>> result.x, result.value, result.samples

Step by step:

    >>> opt = LOGO(opts)
    >>> opt.init()
    >>> while not opt.is_done():
    ...     opt.step()
    >>> result = opt.finish()
    >>> opt.delete()

Modules
-------
- optimizer: LOGO driver and LogoResult
- options: LogoOptions and defaults
- state: SearchState
- space / node: the partitioned domain
- expansion: node creation, sampling and splitting
- selection: the per-step band selection pass
- schedule: bandwidth schedules
- termination: error measures and the done condition
- benchmarks: synthetic objectives on the unit cube
"""

__version__ = "1.0.0"

from .node import Node
from .space import NodeList, Space
from .options import DIM, UNKNOWN_OPTIMUM, LogoOptions, sqrt_depth_budget
from .state import SearchState
from .schedule import AdaptiveLadderSchedule, BandwidthSchedule, FixedBandwidthSchedule
from .expansion import create_child_node, create_root_node, expand_and_remove
from .selection import select_nodes
from .termination import is_done, relative_error, value_error
from .optimizer import LOGO, LogoResult
from . import benchmarks

__all__ = [
    "LOGO",
    "LogoResult",
    "LogoOptions",
    "DIM",
    "UNKNOWN_OPTIMUM",
    "sqrt_depth_budget",
    "SearchState",
    "Node",
    "NodeList",
    "Space",
    "create_root_node",
    "create_child_node",
    "expand_and_remove",
    "select_nodes",
    "BandwidthSchedule",
    "FixedBandwidthSchedule",
    "AdaptiveLadderSchedule",
    "relative_error",
    "value_error",
    "is_done",
    "benchmarks",
    "__version__",
]
