from __future__ import annotations

from dataclasses import fields
from typing import Any, Dict
import os
import io
import yaml

from .types import ProjectParameters

# Short names used inside groups -> canonical parameter names.
ALIASES: Dict[str, str] = {
    "name": "project_name",
    "investment": "initial_investment",
    "duration_months": "project_duration_months",
    "discount_rate_pct": "discount_rate",
    "yearly_revenue": "annual_revenue_increase",
    "revenue_growth_pct": "annual_revenue_growth_pct",
    "operating_costs": "annual_operating_costs",
    "maintenance_costs": "annual_maintenance_costs",
    "best_multiplier": "best_case_multiplier",
    "worst_multiplier": "worst_case_multiplier",
}

_INT_FIELDS = {"project_duration_months"}
_STR_FIELDS = {"project_name"}


def _flatten_grouped(cfg: Dict[str, Any]) -> Dict[str, Any]:
    """
    Flatten shallow groups like {'project': {...}, 'costs': {...}} into one level.
    Prefers top-level keys if collisions occur.
    """
    flat: Dict[str, Any] = {k: v for k, v in cfg.items() if not isinstance(v, dict)}
    for k, v in cfg.items():
        if isinstance(v, dict):
            for sk, sv in v.items():
                flat.setdefault(sk, sv)
    return flat


def canonicalize(data: Dict[str, Any]) -> Dict[str, Any]:
    """Flatten groups and resolve short aliases to ProjectParameters field names."""
    out: Dict[str, Any] = {}
    for k, v in _flatten_grouped(data).items():
        out.setdefault(ALIASES.get(k, k), v)
    return out


def params_from_dict(data: Dict[str, Any]) -> ProjectParameters:
    """
    Build ProjectParameters from a (possibly grouped) mapping.
    Unknown keys are ignored here; validation decides whether they are an error.
    """
    flat = canonicalize(data)
    kwargs: Dict[str, Any] = {}
    for f in fields(ProjectParameters):
        if f.name not in flat or flat[f.name] is None:
            continue
        raw = flat[f.name]
        if f.name in _INT_FIELDS:
            kwargs[f.name] = int(raw)
        elif f.name in _STR_FIELDS:
            kwargs[f.name] = str(raw)
        else:
            kwargs[f.name] = float(raw)
    return ProjectParameters(**kwargs)


def load_model_config(source: str | os.PathLike | io.StringIO) -> Dict[str, Any]:
    """
    Load YAML from a path or text stream and return the canonical flat mapping.
    """
    text: str
    if hasattr(source, "read"):
        text = str(source.read())
    else:
        p = os.fspath(source)
        with open(p, "r", encoding="utf-8") as f:
            text = f.read()

    cfg = yaml.safe_load(text) or {}
    if not isinstance(cfg, dict):
        raise ValueError("config must be a mapping at the top level")
    return canonicalize(cfg)
