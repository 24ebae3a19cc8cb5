"""Business case analyzer: project-finance metrics and revenue scenarios."""
from .types import (
    IrrResult,
    IrrStatus,
    MetricsResult,
    PaybackResult,
    ProjectParameters,
    ScenarioSet,
)
from .finance import irr, npv, payback_period, project, roi, run_metrics
from .scenario_runner import compute_scenarios
from .recommendations import Recommendation, recommend

__version__ = "1.0.0"

__all__ = [
    "ProjectParameters",
    "PaybackResult",
    "IrrStatus",
    "IrrResult",
    "MetricsResult",
    "ScenarioSet",
    "project",
    "roi",
    "npv",
    "payback_period",
    "irr",
    "run_metrics",
    "compute_scenarios",
    "Recommendation",
    "recommend",
]
