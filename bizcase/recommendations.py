# bizcase/recommendations.py
"""
Threshold rules that turn a ScenarioSet into human-readable advice.

Levels follow the usual traffic-light scale: success, info, warning, danger.
Rules look at the expected case unless they are about scenario spread.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Dict, List

from .types import MetricsResult, ProjectParameters, ScenarioSet

SUCCESS = "success"
INFO = "info"
WARNING = "warning"
DANGER = "danger"


@dataclass(frozen=True)
class Recommendation:
    level: str
    topic: str
    message: str

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)


def _money(x: float) -> str:
    return f"${x:,.0f}"


def _roi_rule(m: MetricsResult) -> Recommendation:
    if m.roi > 50:
        return Recommendation(SUCCESS, "roi", f"Excellent ROI of {m.roi:.2f}%! This project shows strong financial returns and is highly recommended for approval.")
    if m.roi > 20:
        return Recommendation(INFO, "roi", f"Good ROI of {m.roi:.2f}%. This project is financially viable and should be considered favorably.")
    if m.roi > 0:
        return Recommendation(WARNING, "roi", f"Moderate ROI of {m.roi:.2f}%. Consider ways to increase revenue or reduce costs to improve returns.")
    return Recommendation(DANGER, "roi", f"Negative ROI of {m.roi:.2f}%. This project is not financially viable in its current form and requires significant changes.")


def _npv_rule(m: MetricsResult) -> Recommendation:
    if m.npv > 0:
        return Recommendation(SUCCESS, "npv", f"Positive NPV of {_money(m.npv)} indicates the project will create value after accounting for the time value of money.")
    return Recommendation(DANGER, "npv", f"Negative NPV of {_money(m.npv)} suggests the project will destroy value. Review discount rate and revenue projections.")


def _payback_rule(m: MetricsResult, p: ProjectParameters) -> Recommendation:
    months = m.payback.months
    if not m.payback.recovered:
        return Recommendation(DANGER, "payback", "Payback period exceeds project duration. The project will not break even within the planned timeframe.")
    if months <= 12:
        return Recommendation(SUCCESS, "payback", f"Quick payback period of {months:.1f} months. You'll recover your investment within a year.")
    if months <= 24:
        return Recommendation(INFO, "payback", f"Reasonable payback period of {months:.1f} months ({months / 12:.1f} years).")
    if months < p.project_duration_months:
        return Recommendation(WARNING, "payback", f"Long payback period of {months:.1f} months. Consider if this timeline aligns with your strategic goals.")
    return Recommendation(DANGER, "payback", f"Payback period of {months:.1f} months reaches the end of the project. The investment is only recovered in the final month.")


def _irr_rule(m: MetricsResult, p: ProjectParameters) -> Recommendation:
    if not m.irr.converged:
        return Recommendation(WARNING, "irr", f"IRR could not be determined ({m.irr.status.value.replace('_', ' ')}). Judge the project on NPV and payback instead.")
    rate = m.irr.rate_pct
    if rate > p.discount_rate + 5:
        return Recommendation(SUCCESS, "irr", f"IRR of {rate:.2f}% significantly exceeds your discount rate of {p.discount_rate:g}%, indicating strong value creation.")
    if rate > p.discount_rate:
        return Recommendation(INFO, "irr", f"IRR of {rate:.2f}% exceeds your discount rate, which is positive but leaves limited margin for error.")
    return Recommendation(DANGER, "irr", f"IRR of {rate:.2f}% is below your discount rate of {p.discount_rate:g}%, suggesting value destruction.")


def recommend(scenarios: ScenarioSet) -> List[Recommendation]:
    expected, best, worst = scenarios.expected, scenarios.best, scenarios.worst
    out = [_roi_rule(expected), _npv_rule(expected), _payback_rule(expected, scenarios.params)]

    spread = best.roi - worst.roi
    if spread > 100:
        out.append(Recommendation(WARNING, "risk", f"High variability in scenarios ({spread:.0f}% range) indicates significant risk. Consider risk mitigation strategies."))
    elif spread < 30:
        out.append(Recommendation(SUCCESS, "risk", "Low variability in scenarios suggests consistent outcomes with manageable risk."))

    if worst.roi < 0:
        out.append(Recommendation(WARNING, "worst_case", f"Worst case scenario shows negative ROI ({worst.roi:.2f}%). Ensure you have contingency plans if revenues fall short."))

    out.append(_irr_rule(expected, scenarios.params))
    return out


__all__ = ["Recommendation", "recommend", "SUCCESS", "INFO", "WARNING", "DANGER"]
