"""
LOGO Framework - Partitioned Space

This module implements the depth-indexed collection of live nodes:

- NodeList: the unordered set of nodes sharing one tree depth.
- Space: a growable sequence of NodeLists, one per depth.

Together the nodes of a Space tile the unit hypercube exactly. The only
exception is the terminal step of a run, where an interrupted split may
leave a hole (see expansion.expand_and_remove).
"""

from __future__ import annotations

import math
from typing import Iterator, List, Optional

from .node import Node


def _beats(node: Node, best: Optional[Node]) -> bool:
    # NaN never wins against a sampled number.
    if best is None:
        return True
    if math.isnan(best.value):
        return not math.isnan(node.value)
    return node.value > best.value


class NodeList:
    """
    Owning collection of the nodes at one depth.

    Nodes are iterated most-recently-inserted first. That order is also the
    tie-break order of ``best()``: among exactly equal values the first one
    encountered wins. The order is an artifact of insertion history, not a
    policy.
    """

    __slots__ = ("_nodes",)

    def __init__(self) -> None:
        # Stored oldest first; iteration walks it backwards.
        self._nodes: List[Node] = []

    def push(self, node: Node) -> None:
        """Add a node in front of the list."""
        self._nodes.append(node)

    def remove(self, node: Node) -> None:
        """
        Remove a node by identity without destroying it.

        Raises
        ------
        ValueError
            If the node is not in the list. This can only result from a
            programming error and must not be recovered from.
        """
        for i in range(len(self._nodes) - 1, -1, -1):
            if self._nodes[i] is node:
                del self._nodes[i]
                return
        raise ValueError(f"node not found in list: {node!r}")

    def best(self) -> Optional[Node]:
        """Return the node with the highest value, or None if empty."""
        best: Optional[Node] = None
        for node in self:
            if _beats(node, best):
                best = node
        return best

    def clear(self) -> None:
        self._nodes.clear()

    def __iter__(self) -> Iterator[Node]:
        return reversed(self._nodes)

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, node: object) -> bool:
        return any(n is node for n in self._nodes)

    def __repr__(self) -> str:
        return f"NodeList(n={len(self._nodes)})"


class Space:
    """
    Growable array of NodeLists indexed by depth.

    Capacity starts at 1 and doubles whenever a node deeper than the current
    capacity is inserted. Growing keeps the existing lists and appends empty
    ones.
    """

    def __init__(self) -> None:
        self._lists: List[NodeList] = [NodeList()]

    # -------------------------------------------------------------------------
    # Structure
    # -------------------------------------------------------------------------

    @property
    def capacity(self) -> int:
        """Number of depth slots currently allocated."""
        return len(self._lists)

    def grow(self) -> None:
        """Double the capacity."""
        self._lists.extend(NodeList() for _ in range(len(self._lists)))

    def depth_list(self, h: int) -> NodeList:
        """Return the NodeList for depth h (which must be within capacity)."""
        if h < 0 or h >= len(self._lists):
            raise IndexError(f"depth {h} outside capacity {len(self._lists)}")
        return self._lists[h]

    # -------------------------------------------------------------------------
    # Mutation
    # -------------------------------------------------------------------------

    def insert(self, node: Node) -> None:
        """Add a node to the list of its depth, growing as needed."""
        while self.capacity <= node.depth:
            self.grow()
        self._lists[node.depth].push(node)

    def remove(self, node: Node) -> None:
        """
        Remove a node from the list of its depth (without deleting it).

        Raises
        ------
        ValueError
            If the node is not stored in this space.
        """
        if node.depth < 0 or node.depth >= self.capacity:
            raise ValueError(f"node depth {node.depth} outside capacity {self.capacity}")
        self._lists[node.depth].remove(node)

    def clear(self) -> None:
        """Release every node and reset to the initial capacity."""
        for lst in self._lists:
            lst.clear()
        self._lists = [NodeList()]

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def best_at_depth(self, h: int) -> Optional[Node]:
        """Return the best node at depth h, or None if there is none."""
        if h < 0 or h >= self.capacity:
            return None
        return self._lists[h].best()

    def best(self) -> Optional[Node]:
        """Return the best node over all depths, or None if the space is empty."""
        best: Optional[Node] = None
        for h in range(self.capacity):
            node = self.best_at_depth(h)
            if node is not None and _beats(node, best):
                best = node
        return best

    @property
    def max_depth(self) -> int:
        """Deepest non-empty depth, or -1 if the space is empty."""
        for h in range(self.capacity - 1, -1, -1):
            if len(self._lists[h]) > 0:
                return h
        return -1

    def depth_counts(self) -> List[int]:
        """Number of nodes per depth up to max_depth."""
        return [len(self._lists[h]) for h in range(self.max_depth + 1)]

    def describe(self) -> str:
        """Human readable dump of the space, one block per non-empty depth."""
        lines = ["====="]
        for h, lst in enumerate(self._lists):
            if len(lst) == 0:
                continue
            lines.append(f"Depth {h}:")
            for node in lst:
                center = node.center()
                lines.append(
                    "\t"
                    + "/".join(f"{c:f}" for c in center)
                    + "\t"
                    + "/".join(f"{s:e}" for s in node.sizes)
                    + f"\t{node.value:e}"
                )
        return "\n".join(lines)

    def __iter__(self) -> Iterator[Node]:
        for lst in self._lists:
            yield from lst

    def __len__(self) -> int:
        return sum(len(lst) for lst in self._lists)

    def __repr__(self) -> str:
        return f"Space(capacity={self.capacity}, n_nodes={len(self)})"
