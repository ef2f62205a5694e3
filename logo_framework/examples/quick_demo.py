#!/usr/bin/env python3
"""
LOGO Framework - Quick Demo
===========================

Runs LOGO with a fixed bandwidth (w = 1) and with the adaptive ladder on the
benchmark objectives and prints the best value found by each.

Usage:
    python -m logo_framework.examples.quick_demo [budget]
"""

from __future__ import annotations

import sys
import time
from typing import Dict, List

from logo_framework import LOGO, LogoOptions, benchmarks
from logo_framework.schedule import AdaptiveLadderSchedule, FixedBandwidthSchedule


def run_demo(budget: int = 600, epsilon: float = 1e-4) -> List[Dict[str, object]]:
    """Run every benchmark with both schedules and return one row per run."""
    schedules = {
        "fixed(w=1)": (FixedBandwidthSchedule(1), 1),
        "adaptive": (AdaptiveLadderSchedule(), 3),
    }
    rows: List[Dict[str, object]] = []
    for name, (fn, optimum) in benchmarks.FUNS.items():
        for label, (schedule, w0) in schedules.items():
            opts = LogoOptions(
                objective=fn,
                max_samples=budget,
                k=3,
                schedule=schedule,
                init_bandwidth=w0,
                epsilon=epsilon,
                known_optimum=optimum,
            )
            t0 = time.time()
            result = LOGO(opts).optimize()
            rows.append({
                "function": name,
                "schedule": label,
                "value": result.value,
                "samples": result.samples,
                "steps": result.steps,
                "x": result.x.tolist(),
                "seconds": time.time() - t0,
            })
    return rows


def main(argv: List[str]) -> int:
    budget = int(argv[1]) if len(argv) > 1 else 600
    print(f"LOGO quick demo (budget={budget})")
    print(f"{'function':<18}{'schedule':<14}{'best value':>14}{'samples':>10}{'steps':>8}")
    print("-" * 64)
    for row in run_demo(budget):
        print(
            f"{row['function']:<18}{row['schedule']:<14}{row['value']:>14.6g}"
            f"{row['samples']:>10}{row['steps']:>8}"
        )
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv))
