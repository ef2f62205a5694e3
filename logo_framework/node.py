"""
LOGO Framework - Node Module

A Node is one axis-aligned hyperrectangle of the unit hypercube together
with the objective value sampled at its centre. Nodes are the leaves of the
partition tree; expanding a node replaces it with ``k`` children one level
deeper.
"""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np


@dataclass(eq=False)
class Node:
    """
    A hyperrectangle cell of the search domain.

    Attributes
    ----------
    edges : np.ndarray
        Lower corner of the cell, one coordinate per dimension.
    sizes : np.ndarray
        Extent of the cell along each dimension.
    depth : int
        Number of splits separating this cell from the root (0 for root).
    value : float
        Objective value at the cell centre. NaN until sampled.
    """

    edges: np.ndarray
    sizes: np.ndarray
    depth: int = 0
    value: float = field(default=float("nan"))

    def __post_init__(self) -> None:
        self.edges = np.asarray(self.edges, dtype=float)
        self.sizes = np.asarray(self.sizes, dtype=float)

    @classmethod
    def unit(cls, dim: int) -> "Node":
        """Return an unsampled depth-0 node covering [0, 1]^dim."""
        return cls(edges=np.zeros(dim, dtype=float), sizes=np.ones(dim, dtype=float), depth=0)

    def center(self) -> np.ndarray:
        """Return the geometric centre of the cell."""
        return self.edges + self.sizes / 2.0

    def volume(self) -> float:
        """Return the volume of the cell."""
        return float(np.prod(self.sizes))

    def contains(self, x: np.ndarray) -> bool:
        """Check if x lies in the half-open cell [edges, edges + sizes)."""
        x = np.asarray(x, dtype=float)
        upper = self.edges + self.sizes
        # The top face of the domain belongs to the cells touching it.
        at_top = np.isclose(upper, 1.0) & np.isclose(x, 1.0)
        inside = (x >= self.edges - 1e-12) & ((x < upper - 1e-12) | at_top)
        return bool(np.all(inside))

    def __repr__(self) -> str:
        return (
            f"Node(depth={self.depth}, center={np.round(self.center(), 6).tolist()}, "
            f"sizes={self.sizes.tolist()}, value={self.value:.6g})"
        )
