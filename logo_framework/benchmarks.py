"""LOGO Framework - Benchmark Objectives

Synthetic test functions written for maximisation over the unit hypercube.
Each function rescales its input from [0, 1]^d to its natural domain, so the
optimizer never sees anything but the unit cube.

FUNS maps a name to ``(objective, known_optimum)``.
"""

from __future__ import annotations

from typing import Callable, Dict, Tuple

import numpy as np


def rescale(x: np.ndarray, lo: float, hi: float) -> np.ndarray:
    """Map x from [0, 1]^d to [lo, hi]^d."""
    return lo + np.asarray(x, dtype=float) * (hi - lo)


def rosenbrock_like(x: np.ndarray) -> float:
    """-(100 (y - x^2)^2 + (x^2 - 1)^2) on [-5, 10]^2.  Max = 0 at x^2 = 1, y = 1."""
    u = rescale(x, -5.0, 10.0)
    a, b = u[0], u[1]
    return -float(100.0 * (b - a * a) ** 2 + (a * a - 1.0) ** 2)


def negated_sphere(x: np.ndarray) -> float:
    """-sum((x - 0.3)^2) on the unit cube.  Max = 0 at x = 0.3."""
    x = np.asarray(x, dtype=float)
    return -float(np.sum((x - 0.3) ** 2))


def negated_rastrigin(x: np.ndarray) -> float:
    """Negated Rastrigin on [-5.12, 5.12]^d, shifted so the max (0) is off the centre."""
    u = rescale(x, -5.12, 5.12) - 0.5
    A = 10.0
    return -float(A * len(u) + np.sum(u ** 2 - A * np.cos(2 * np.pi * u)))


FUNS: Dict[str, Tuple[Callable[[np.ndarray], float], float]] = {
    "rosenbrock_like": (rosenbrock_like, 0.0),
    "sphere": (negated_sphere, 0.0),
    "rastrigin": (negated_rastrigin, 0.0),
}


class CallCounter:
    """Wrap an objective and count its calls, keeping every queried point."""

    def __init__(self, fn: Callable[[np.ndarray], float]) -> None:
        self.fn = fn
        self.calls = 0
        self.points = []

    def __call__(self, x: np.ndarray) -> float:
        self.calls += 1
        self.points.append(np.array(x, dtype=float))
        return self.fn(x)
