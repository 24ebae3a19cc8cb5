from __future__ import annotations
from typing import Dict, Any

# Parameter schema: units, type, min/max ranges, and description.
SCHEMA: Dict[str, Dict[str, Any]] = {
    "initial_investment":        {"unit": "currency",   "type": "float", "min": 0.0,    "max": 1e12,  "desc": "Up-front project investment"},
    "discount_rate":             {"unit": "percent",    "type": "float", "min": 0.0,    "max": 100.0, "desc": "Discount rate applied per monthly period"},
    "project_duration_months":   {"unit": "months",     "type": "int",   "min": 1,      "max": 600,   "desc": "Projection horizon"},
    "annual_revenue_increase":   {"unit": "currency/yr","type": "float", "min": 0.0,    "max": 1e12,  "desc": "Additional revenue per year"},
    "annual_revenue_growth_pct": {"unit": "percent",    "type": "float", "min": -100.0, "max": 1000.0,"desc": "Annual revenue growth (negative = decline)"},
    "annual_operating_costs":    {"unit": "currency/yr","type": "float", "min": 0.0,    "max": 1e12,  "desc": "Operating costs per year"},
    "annual_maintenance_costs":  {"unit": "currency/yr","type": "float", "min": 0.0,    "max": 1e12,  "desc": "Maintenance costs per year"},
    "best_case_multiplier":      {"unit": "factor",     "type": "float", "min": 0.0,    "max": 10.0,  "desc": "Revenue multiplier for the best case"},
    "worst_case_multiplier":     {"unit": "factor",     "type": "float", "min": 0.0,    "max": 10.0,  "desc": "Revenue multiplier for the worst case"},
    "project_name":              {"unit": "",           "type": "str",                                "desc": "Free-text label carried into reports"},
}

# Keys every case must provide; the rest fall back to ProjectParameters defaults.
REQUIRED_KEYS = (
    "initial_investment",
    "discount_rate",
    "project_duration_months",
    "annual_revenue_increase",
)

# Strict mode also wants the scenario spread stated explicitly.
STRICT_REQUIRED_KEYS = REQUIRED_KEYS + ("best_case_multiplier", "worst_case_multiplier")

# Composite constraints evaluated after scalar checks.
COMPOSITE_CONSTRAINTS = [
    {
        "name": "multiplier_ordering",
        "check": lambda p: float(p.get("worst_case_multiplier", 0.7)) <= float(p.get("best_case_multiplier", 1.3)),
        "message": "worst_case_multiplier must not exceed best_case_multiplier",
    },
]
