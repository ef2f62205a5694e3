"""
LOGO Framework - Node Creation and Expansion

Splitting a node replaces it with ``k`` children along one axis. The axis
cycles with depth (``depth % dim``): all nodes at a depth have the same
shape, so this always cuts a longest side.

Because ``k`` is odd, the middle child has the same centre as its parent and
inherits the parent's value without a new evaluation.
"""

from __future__ import annotations

import logging
import math

from .node import Node
from .state import SearchState
from .termination import target_reached

logger = logging.getLogger(__name__)


def create_root_node(state: SearchState) -> Node:
    """Create and sample the node covering the whole domain."""
    node = Node.unit(state.options.dim)
    state.sample(node)
    return node


def create_child_node(parent: Node, k: int, split_dim: int, idx: int) -> Node:
    """
    Create the idx-th of k children of parent along split_dim (unsampled).

    Parameters
    ----------
    parent : Node
        Node being split.
    k : int
        Number of children.
    split_dim : int
        Axis to cut.
    idx : int
        Position of the child along the axis, 0 <= idx < k.
    """
    width = parent.sizes[split_dim] / k
    edges = parent.edges.copy()
    sizes = parent.sizes.copy()
    edges[split_dim] = parent.edges[split_dim] + idx * width
    sizes[split_dim] = width
    return Node(edges=edges, sizes=sizes, depth=parent.depth + 1)


def expand_and_remove(node: Node, state: SearchState) -> float:
    """
    Split a node into its children and replace it in the space.

    Children are created in order along the split axis and inserted one by
    one. Creation stops early once the budget is spent or a child already
    meets the error target. The middle child is still added in that case
    since it needs no evaluation, but the partition may have a hole, which
    is only acceptable because the run is done at that point.

    Parameters
    ----------
    node : Node
        A node currently stored in ``state.space``.
    state : SearchState
        Run state; its space and sample counter are mutated.

    Returns
    -------
    float
        Best value among the children that were created.
    """
    options = state.options
    state.space.remove(node)

    k = options.k
    split_dim = node.depth % options.dim
    middle = k // 2
    best_child = -math.inf

    for i in range(k):
        child = create_child_node(node, k, split_dim, i)
        if i == middle:
            child.value = node.value
        else:
            state.sample(child)
        state.space.insert(child)

        if child.value > best_child:
            best_child = child.value
        # Same test as is_done(): value_error(best_child) <= epsilon.
        if state.budget_exhausted or target_reached(best_child, options):
            if i < middle:
                # The middle child costs nothing; keeping it keeps the
                # parent's value in the space.
                kept = create_child_node(node, k, split_dim, middle)
                kept.value = node.value
                state.space.insert(kept)
                best_child = max(best_child, kept.value)
            if i < k - 1:
                logger.debug(
                    "Split of depth-%d node stopped after %d/%d children (samples=%d)",
                    node.depth, i + 1, k, state.samples_taken,
                )
            break

    return best_child

