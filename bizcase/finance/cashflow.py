from __future__ import annotations

import numpy as np

from bizcase.types import CashFlowSeries, ProjectParameters


def monthly_growth_rate(annual_growth_pct: float) -> float:
    """
    Geometric de-annualisation: (1 + g)^(1/12) - 1.
    Defined for annual_growth_pct >= -100; below that the root is complex.
    """
    if not annual_growth_pct:
        return 0.0
    return (1.0 + annual_growth_pct / 100.0) ** (1.0 / 12.0) - 1.0


def project(p: ProjectParameters) -> CashFlowSeries:
    """
    Monthly cash-flow series: index 0 is the (negative) investment,
    indices 1..N are revenue * growth^(m-1) - costs for each month m.
    """
    months = max(0, int(p.project_duration_months))
    monthly_revenue = p.annual_revenue_increase / 12.0
    monthly_costs = (p.annual_operating_costs + p.annual_maintenance_costs) / 12.0

    growth = (1.0 + monthly_growth_rate(p.annual_revenue_growth_pct)) ** np.arange(months, dtype=float)
    net = monthly_revenue * growth - monthly_costs

    return (-float(p.initial_investment),) + tuple(float(x) for x in net)


__all__ = ["monthly_growth_rate", "project"]
