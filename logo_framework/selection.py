"""LOGO Framework - Node Selection

One selection pass per optimizer step. Depths are grouped into bands of
``w = state.bandwidth`` consecutive levels. Bands are scanned from shallow
to deep, and the best node of a band is expanded only if its value strictly
exceeds the best value of every shallower band visited in this pass.

With ``w = 1`` this is the classical optimistic rule that expands, at each
depth, the best node when it beats all shallower depths.
"""

from __future__ import annotations

import logging
import math
from typing import Optional

from .expansion import expand_and_remove
from .node import Node
from .state import SearchState
from .termination import target_reached

logger = logging.getLogger(__name__)


def max_band(state: SearchState) -> int:
    """kmax = floor(hmax(samples_taken) / bandwidth)."""
    hmax = float(state.options.depth_budget(state.samples_taken))
    return int(math.floor(hmax / state.bandwidth))


def band_best(state: SearchState, band: int) -> Optional[Node]:
    """Best node over the depths [band * w, (band + 1) * w - 1]."""
    w = state.bandwidth
    best: Optional[Node] = None
    for h in range(band * w, (band + 1) * w):
        node = state.space.best_at_depth(h)
        if node is not None and (best is None or node.value > best.value):
            best = node
    return best


def select_nodes(state: SearchState) -> int:
    """
    Run one selection pass, expanding the strictly improving band bests.

    Nodes created during the pass are visible to the deeper bands scanned
    later in the same pass. The pass returns early once the budget is spent
    or a child meets the error target.

    Returns
    -------
    int
        Number of nodes expanded.
    """
    if state.budget_exhausted:
        return 0

    options = state.options
    kmax = max_band(state)
    prev_best = -math.inf
    n_expanded = 0

    for band in range(kmax + 1):
        node = band_best(state, band)
        if node is None or not node.value > prev_best:
            continue
        prev_best = node.value
        logger.debug(
            "Expanding depth-%d node (band=%d, w=%d, value=%.6g)",
            node.depth, band, state.bandwidth, node.value,
        )
        child_best = expand_and_remove(node, state)
        n_expanded += 1
        if state.budget_exhausted or target_reached(child_best, options):
            break

    return n_expanded
