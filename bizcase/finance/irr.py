# bizcase/finance/irr.py
"""
Discounting and IRR for monthly project cash flows.

Two present-value functions live here and they are not interchangeable:
  npv(cashflows, discount_rate_pct)  operating flows only, first flow discounted one period
  project_npv(rate, cashflows)       full series including t0, used by the IRR solver
"""
from __future__ import annotations

import math
from typing import Iterable, List, Sequence, Tuple

from ..types import IrrResult, IrrStatus

MAX_ITERATIONS = 100
TOLERANCE = 1e-4


# ---------- NPV ----------
def npv(cashflows: Iterable[float], discount_rate_pct: float) -> float:
    """
    Discounted value of the operating stream (investment excluded):
        NPV = sum_{i=1..n} CF[i-1] / (1 + rate/100)^i
    """
    factor = 1.0 + float(discount_rate_pct) / 100.0
    total = 0.0
    for i, cf in enumerate(cashflows, start=1):
        total += float(cf) / (factor ** i)
    return total


def project_npv(rate: float, cashflows: Sequence[float]) -> float:
    """NPV(r) = sum_{t=0..N} CF[t] / (1+r)^t, rate as a decimal."""
    total = 0.0
    for t, cf in enumerate(cashflows):
        total += float(cf) / ((1.0 + rate) ** t)
    return total


def _npv_and_slope(rate: float, cashflows: Sequence[float]) -> Tuple[float, float]:
    value = 0.0
    slope = 0.0
    base = 1.0 + rate
    for t, cf in enumerate(cashflows):
        denom = base ** t
        value += cf / denom
        slope -= t * cf / (denom * base)
    return value, slope


# ---------- IRR (Newton-Raphson) ----------
def irr(
    cashflows: Iterable[float],
    initial_guess: float = 0.10,
    *,
    max_iterations: int = MAX_ITERATIONS,
    tolerance: float = TOLERANCE,
) -> IrrResult:
    """
    Periodic IRR by Newton iteration on project_npv.
    Convergence is judged on the step size of the rate, not on the NPV value.
    Returns the rate in percent per period (monthly for projected series).
    """
    cfs: List[float] = [float(x) for x in cashflows]
    rate = float(initial_guess)

    for i in range(1, max_iterations + 1):
        try:
            value, slope = _npv_and_slope(rate, cfs)
            new_rate = rate - value / slope
        except (ZeroDivisionError, OverflowError):
            return IrrResult(IrrStatus.UNSTABLE, None, i)
        if not math.isfinite(new_rate):
            return IrrResult(IrrStatus.UNSTABLE, None, i)
        if abs(new_rate - rate) < tolerance:
            return IrrResult(IrrStatus.CONVERGED, new_rate * 100.0, i)
        rate = new_rate

    return IrrResult(IrrStatus.DID_NOT_CONVERGE, rate * 100.0, max_iterations)


__all__ = ["npv", "project_npv", "irr", "MAX_ITERATIONS", "TOLERANCE"]
