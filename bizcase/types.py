# bizcase/types.py
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Iterator, Optional, Tuple

CashFlowSeries = Tuple[float, ...]

SCENARIO_NAMES = ("expected", "best", "worst")


@dataclass(frozen=True)
class ProjectParameters:
    """Inputs for one business case. Rates are in percent, money in one currency."""

    initial_investment: float
    discount_rate: float
    project_duration_months: int
    annual_revenue_increase: float
    annual_revenue_growth_pct: float = 0.0
    annual_operating_costs: float = 0.0
    annual_maintenance_costs: float = 0.0
    best_case_multiplier: float = 1.3
    worst_case_multiplier: float = 0.7
    project_name: str = ""


@dataclass(frozen=True)
class PaybackResult:
    months: float
    recovered: bool


class IrrStatus(str, Enum):
    CONVERGED = "converged"
    DID_NOT_CONVERGE = "did_not_converge"
    UNSTABLE = "unstable"


@dataclass(frozen=True)
class IrrResult:
    """
    Outcome of the Newton solver.
      converged        : rate_pct is the root (percent per period)
      did_not_converge : rate_pct is the last iterate, best effort only
      unstable         : flat derivative or non-finite value; rate_pct is None
    """

    status: IrrStatus
    rate_pct: Optional[float]
    iterations: int

    @property
    def converged(self) -> bool:
        return self.status is IrrStatus.CONVERGED


@dataclass(frozen=True)
class MetricsResult:
    roi: float
    npv: float
    net_npv: float
    payback: PaybackResult
    irr: IrrResult
    cash_flows: CashFlowSeries
    total_revenue: float

    def to_dict(self, include_cash_flows: bool = False) -> Dict[str, Any]:
        out: Dict[str, Any] = {
            "roi": self.roi,
            "npv": self.npv,
            "net_npv": self.net_npv,
            "payback_months": self.payback.months,
            "payback_recovered": self.payback.recovered,
            "irr_pct": self.irr.rate_pct,
            "irr_status": self.irr.status.value,
            "irr_iterations": self.irr.iterations,
            "total_revenue": self.total_revenue,
        }
        if include_cash_flows:
            out["cash_flows"] = list(self.cash_flows)
        return out


@dataclass(frozen=True)
class ScenarioSet:
    params: ProjectParameters
    expected: MetricsResult
    best: MetricsResult
    worst: MetricsResult

    def items(self) -> Iterator[Tuple[str, MetricsResult]]:
        for name in SCENARIO_NAMES:
            yield name, getattr(self, name)

    def as_dict(self, include_cash_flows: bool = False) -> Dict[str, Dict[str, Any]]:
        return {name: m.to_dict(include_cash_flows) for name, m in self.items()}


__all__ = [
    "CashFlowSeries",
    "SCENARIO_NAMES",
    "ProjectParameters",
    "PaybackResult",
    "IrrStatus",
    "IrrResult",
    "MetricsResult",
    "ScenarioSet",
]
