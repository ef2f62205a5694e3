"""LOGO Framework - Bandwidth Schedules

The bandwidth ``w`` is the number of consecutive depths grouped into one
comparison band by the selection engine. A schedule is called once per step,
after selection, and returns the bandwidth for the next step.

Two policies are provided:
- FixedBandwidthSchedule: constant ``w`` (``w = 1`` gives the classical
  one-depth-at-a-time optimistic selection).
- AdaptiveLadderSchedule: walks a fixed ascending ladder of bandwidths, one
  rung up after an improving step and one rung down otherwise.
"""

from __future__ import annotations

import bisect
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, Sequence, Tuple, runtime_checkable

if TYPE_CHECKING:
    from .state import SearchState


@runtime_checkable
class BandwidthSchedule(Protocol):
    """Strategy interface for bandwidth scheduling."""

    def __call__(self, state: "SearchState") -> int:
        """Return the bandwidth to use for the next step (an integer >= 1)."""
        ...


@dataclass(frozen=True)
class FixedBandwidthSchedule:
    """Always return the same bandwidth."""

    bandwidth: int = 1

    def __post_init__(self) -> None:
        if int(self.bandwidth) != self.bandwidth or self.bandwidth < 1:
            raise ValueError(f"bandwidth must be an integer >= 1, got {self.bandwidth!r}")

    def __call__(self, state: "SearchState") -> int:
        return int(self.bandwidth)


@dataclass(frozen=True)
class AdaptiveLadderSchedule:
    """
    Hysteresis controller over a ladder of candidate bandwidths.

    The current bandwidth is located on the ladder (the nearest rung is used
    when it is not on it). If the best value in the space exceeds the best
    value recorded at the end of the previous step, the index moves one rung
    up, otherwise one rung down. The index is clamped to the ladder ends.

    The default ladder is the one used by the reference LOGO experiments.
    """

    ladder: Tuple[int, ...] = (3, 4, 5, 6, 8, 30)

    def __post_init__(self) -> None:
        ladder = tuple(self.ladder)
        if not ladder:
            raise ValueError("ladder must not be empty")
        if any(int(w) != w or w < 1 for w in ladder):
            raise ValueError(f"ladder entries must be integers >= 1, got {ladder!r}")
        if any(b <= a for a, b in zip(ladder, ladder[1:])):
            raise ValueError(f"ladder must be strictly ascending, got {ladder!r}")
        object.__setattr__(self, "ladder", tuple(int(w) for w in ladder))

    def index_of(self, bandwidth: int) -> int:
        """Index of the rung equal to, or nearest to, the given bandwidth."""
        ladder = self.ladder
        i = bisect.bisect_left(ladder, bandwidth)
        if i >= len(ladder):
            return len(ladder) - 1
        if ladder[i] == bandwidth or i == 0:
            return i
        # Ties go to the lower rung.
        return i if ladder[i] - bandwidth < bandwidth - ladder[i - 1] else i - 1

    def __call__(self, state: "SearchState") -> int:
        i = self.index_of(state.bandwidth)
        if state.best_value() > state.last_best_value:
            i += 1
        else:
            i -= 1
        i = max(0, min(len(self.ladder) - 1, i))
        return self.ladder[i]


def fixed(bandwidth: int = 1) -> FixedBandwidthSchedule:
    """Shorthand for FixedBandwidthSchedule(bandwidth)."""
    return FixedBandwidthSchedule(bandwidth=bandwidth)


def adaptive(ladder: Sequence[int] = (3, 4, 5, 6, 8, 30)) -> AdaptiveLadderSchedule:
    """Shorthand for AdaptiveLadderSchedule(tuple(ladder))."""
    return AdaptiveLadderSchedule(ladder=tuple(ladder))
