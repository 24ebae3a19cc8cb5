"""
Finance metrics.

Design:
- IRR/NPV implementations live only in bizcase.finance.irr (singleton).
- This module must not *define* irr/npv; it re-exports them next to the
  closed-form metrics (ROI, payback) and assembles MetricsResult.
"""
from __future__ import annotations

from typing import Sequence

from bizcase.types import MetricsResult, PaybackResult, ProjectParameters

from .cashflow import project
from .irr import irr as irr, npv as npv


def roi(investment: float, total_return: float) -> float:
    """(return - investment) / investment in percent; 0 when nothing was invested."""
    if investment == 0:
        return 0.0
    return (total_return - investment) / investment * 100.0


def payback_period(initial_investment: float, monthly_cashflows: Sequence[float]) -> PaybackResult:
    """
    Months until the cumulative position turns non-negative, interpolated
    linearly inside the crossing month. A crossing month with a zero flow is
    not counted as recovery.
    """
    cumulative = -float(initial_investment)
    for i, cf in enumerate(monthly_cashflows):
        previous = cumulative
        cumulative += cf
        if cumulative >= 0 and cf != 0:
            return PaybackResult(months=i + (-previous / cf), recovered=True)
    return PaybackResult(months=float(len(monthly_cashflows)), recovered=False)


def run_metrics(p: ProjectParameters) -> MetricsResult:
    cash_flows = project(p)
    monthly = cash_flows[1:]
    total_revenue = sum(monthly)
    operating_npv = npv(monthly, p.discount_rate)

    return MetricsResult(
        roi=roi(p.initial_investment, total_revenue),
        npv=operating_npv,
        net_npv=operating_npv - p.initial_investment,
        payback=payback_period(p.initial_investment, monthly),
        irr=irr(cash_flows),
        cash_flows=cash_flows,
        total_revenue=total_revenue,
    )


__all__ = ["roi", "payback_period", "run_metrics", "npv", "irr"]
